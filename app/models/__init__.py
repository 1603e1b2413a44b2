from app.models.user import User
from app.models.cat import Cat
from app.models.adoption import Adoption
from app.models.medical_procedure import MedicalProcedure
from app.models.donation import Donation
from app.models.campaign import FundraisingCampaign

__all__ = [
    "User",
    "Cat",
    "Adoption",
    "MedicalProcedure",
    "Donation",
    "FundraisingCampaign",
]
