"""Data schemas and models for PawScore."""

from .pet_data import (
    Pet,
    PetPhysicalProfile,
    PetNutritionProfile,
    PetActivityProfile,
    PetBehaviorProfile,
    PetAdoptionProfile,
)
from .staff_profile import Veterinarian
from .account import Account, User, UserSession, Notification, NotificationTemplate
from .candidates import (
    AdopterCandidate,
    HomeEnvironment,
    Lifestyle,
    TaskRequirements,
    CaseRequirements,
    ActivityRequirements,
    RoleRequirements,
)
from .results import ScoreResult, EvaluationResult, AvailabilityResult, QualificationResult

__all__ = [
    "Pet",
    "PetPhysicalProfile",
    "PetNutritionProfile",
    "PetActivityProfile",
    "PetBehaviorProfile",
    "PetAdoptionProfile",
    "Veterinarian",
    "Account",
    "User",
    "UserSession",
    "Notification",
    "NotificationTemplate",
    "AdopterCandidate",
    "HomeEnvironment",
    "Lifestyle",
    "TaskRequirements",
    "CaseRequirements",
    "ActivityRequirements",
    "RoleRequirements",
    "ScoreResult",
    "EvaluationResult",
    "AvailabilityResult",
    "QualificationResult",
]
