"""Argon2 password hashing for user accounts."""

from pwdlib import PasswordHash

password_hash = PasswordHash.recommended()

# Checked when a login names an unknown user, so both paths cost one Argon2 verify
DUMMY_HASH = password_hash.hash("no-such-user")


def get_password_hash(password: str) -> str:
    return password_hash.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return password_hash.verify(plain_password, hashed_password)


def verify_and_rehash(plain_password: str, hashed_password: str) -> tuple[bool, str | None]:
    """
    Check a password and report whether its stored hash should be upgraded.

    Parameters:
        plain_password (str): Password supplied at login.
        hashed_password (str): Hash stored on the user.

    Returns:
        tuple[bool, str | None]: ``(valid, new_hash)``. ``new_hash`` is set only
        when the password is valid and the stored hash uses outdated Argon2
        parameters.
    """
    return password_hash.verify_and_update(plain_password, hashed_password)
