from functools import lru_cache

from pydantic import HttpUrl
from pydantic.types import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


def _parse_origin(origin: str) -> HttpUrl:
    try:
        return HttpUrl(origin)
    except ValueError as e:
        raise ValueError(f"Invalid CORS origin '{origin}': {e}") from e


def parse_comma_separated_origins(comma_list: str) -> list[HttpUrl]:
    """
    Turn `BACKEND_CORS_ORIGINS` into validated URLs.

    Blank entries (including a trailing comma) are skipped.

    Raises:
        ValueError: Naming the first entry that is not a valid http(s) URL.
    """
    entries = (item.strip() for item in (comma_list or "").split(","))
    return [_parse_origin(entry) for entry in entries if entry]


class Settings(BaseSettings):
    DATABASE_URL: str
    SECRET_KEY: SecretStr
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    BACKEND_CORS_ORIGINS: str = "http://localhost:3000"
    ENVIRONMENT: str = "development"

    # Optional bootstrap account created by app.initial_data
    FIRST_SUPERUSER_USERNAME: str | None = None
    FIRST_SUPERUSER_EMAIL: str | None = None
    FIRST_SUPERUSER_PASSWORD: SecretStr | None = None

    LOG_LEVEL: str = "INFO"
    OTEL_SERVICE_NAME: str = "cat-shelter-api"
    OTEL_EXPORTER_OTLP_ENDPOINT: str | None = None
    OTEL_EXPORTER_OTLP_INSECURE: bool = False

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    @property
    def cors_origins(self) -> list[str]:
        """Allowed origins in the form browsers send them (no trailing slash)."""
        return [
            str(origin).rstrip("/")
            for origin in parse_comma_separated_origins(self.BACKEND_CORS_ORIGINS)
        ]


@lru_cache
def get_settings() -> Settings:
    """
    Return the process-wide settings, read once from the environment and `.env`.

    Tests that change environment variables call `get_settings.cache_clear()`.
    """
    return Settings()  # type: ignore[call-arg]
