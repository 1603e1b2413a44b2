from enum import Enum


class Role(str, Enum):
    """User roles, declared from least to most privileged.

    The declaration order is the access hierarchy used by app.core.permissions.
    """

    PUBLIC = "public"
    CLINIC_STAFF = "clinic_staff"
    SUPER_ADMIN = "super_admin"


class CatStatus(str, Enum):
    AVAILABLE = "available"
    BOOKED = "booked"
    ADOPTED = "adopted"
    DECEASED = "deceased"


class AgeGroup(str, Enum):
    KITTEN = "kitten"
    ADULT = "adult"
    SENIOR = "senior"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class EntryType(str, Enum):
    RESCUE = "rescue"
    SURRENDER = "surrender"
    STRAY = "stray"


class AdoptionStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ProcedureType(str, Enum):
    NEUTERED = "neutered"
    SPAYED = "spayed"
    VACCINATED = "vaccinated"
    DEWORMED = "dewormed"
