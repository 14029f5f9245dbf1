"""
Result value objects and level bands produced by the scoring engine.

Results are always built fresh by the calculator or matcher and are frozen,
so callers cannot mutate a result in place.
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ExperienceBand(str, Enum):
    """Experience level from years of practice."""
    ENTRY = "Entry"
    JUNIOR = "Junior"
    MID_LEVEL = "Mid-Level"
    SENIOR = "Senior"
    EXPERT = "Expert"
    MASTER = "Master"


class PerformanceLevel(str, Enum):
    """Performance band from success and accuracy rates."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    EXCELLENT = "Excellent"


class AuthorizationLevel(str, Enum):
    """Level from the number of granted authorizations."""
    BASIC = "Basic"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


class SpecializationLevel(str, Enum):
    """Level from specialties and active certifications."""
    GENERAL = "General"
    SPECIALIST = "Specialist"
    MULTI_SPECIALIST = "Multi-Specialist"
    EXPERT = "Expert"


class SeniorityLevel(str, Enum):
    """Seniority from years since graduation, also used as overall staff level."""
    JUNIOR = "Junior"
    MID_LEVEL = "Mid-Level"
    SENIOR = "Senior"
    EXPERT = "Expert"


class ShelterExperienceLevel(str, Enum):
    """Level from years of shelter work."""
    NONE = "None"
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


class BehaviorAssessmentLevel(str, Enum):
    """Level from years of behavior assessment work."""
    NONE = "None"
    NOVICE = "Novice"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


class MaintenanceLevel(str, Enum):
    """Care effort from total recommended activity minutes."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    VERY_HIGH = "Very High"


class AvailabilityStatus(str, Enum):
    """Current staff availability."""
    AVAILABLE = "Available"
    UNAVAILABLE = "Unavailable"
    LIMITED = "Limited"
    INACTIVE = "Inactive"


class ScoreResult(BaseModel):
    """Outcome of matching a pet profile against an adopter or home."""

    model_config = ConfigDict(frozen=True)

    compatible: bool = Field(..., description="False when any hard constraint is violated")
    match_score: int = Field(..., ge=0, le=100, description="Clamped match score")
    concerns: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)


class EvaluationResult(BaseModel):
    """Outcome of a requirement-fitness evaluation for a staff member."""

    model_config = ConfigDict(frozen=True)

    qualified: bool = Field(..., description="True when there are no gaps")
    score: int = Field(..., ge=0, le=100)
    strengths: List[str] = Field(default_factory=list)
    gaps: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    matched_requirements: List[str] = Field(default_factory=list)
    missing_requirements: List[str] = Field(default_factory=list)


class AvailabilityResult(BaseModel):
    """Outcome of checking a work schedule against task requirements."""

    model_config = ConfigDict(frozen=True)

    available: bool
    score: int = Field(..., ge=0, le=100)
    matched_requirements: List[str] = Field(default_factory=list)
    missing_requirements: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)


class QualificationResult(BaseModel):
    """Outcome of checking specialties and certifications against a case."""

    model_config = ConfigDict(frozen=True)

    qualified: bool
    reasons: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)


class ValidationReport(BaseModel):
    """Professional license validation outcome."""

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    summary: str = ""


class PetReport(BaseModel):
    """Intrinsic scores computed for a single pet."""

    pet_id: str
    name: str
    adoptability_score: Optional[int] = Field(default=None, ge=0, le=100)
    behavior_adoptability_score: Optional[int] = Field(default=None, ge=0, le=100)
    listing_priority: Optional[int] = Field(default=None, ge=0, le=100)
    maintenance_level: Optional[MaintenanceLevel] = None
    needs_special_promotion: Optional[bool] = None
    needs_specialized_training: Optional[bool] = None
    alerts: List[str] = Field(default_factory=list)


class RankedPet(BaseModel):
    """A pet with its match outcome, as returned by adopter ranking."""

    pet_id: str
    name: str
    rank: int = Field(..., ge=1)
    match: ScoreResult
    adoptability_score: int = Field(..., ge=0, le=100)
