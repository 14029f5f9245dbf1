"""
Transient, caller-supplied criteria used by the compatibility matcher.

Every field is optional. An absent field places no constraint on the match.
"""

from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, Field

from .staff_profile import Authorization, VeterinarianSpecialty
from .results import SeniorityLevel, SpecializationLevel


class HousingType(str, Enum):
    """Adopter housing."""
    APARTMENT = "apartment"
    HOUSE = "house"
    FARM = "farm"


class AdopterCandidate(BaseModel):
    """A prospective adopter's household and means."""

    has_children: bool = Field(default=False)
    children_ages: List[int] = Field(default_factory=list)
    has_other_pets: bool = Field(default=False)
    housing_type: Optional[HousingType] = Field(default=None)
    has_yard: Optional[bool] = Field(default=None)
    experience_level: Optional[int] = Field(default=None, ge=0, le=10, description="Self-rated 1-10")
    time_available: Optional[float] = Field(default=None, ge=0, description="Hours per day")
    budget: Optional[float] = Field(default=None, ge=0)

    class Config:
        json_schema_extra = {
            "example": {
                "has_children": True,
                "children_ages": [6, 9],
                "has_other_pets": False,
                "housing_type": "house",
                "has_yard": True,
                "experience_level": 4,
                "time_available": 3,
                "budget": 150
            }
        }


class HomeEnvironment(BaseModel):
    """Home conditions checked against a behavior profile."""

    has_children: bool = Field(default=False)
    has_other_pets: bool = Field(default=False)
    owner_experience: Optional[int] = Field(default=None, ge=0, le=10)
    time_available: Optional[float] = Field(default=None, ge=0, description="Hours per day")
    apartment_living: bool = Field(default=False)


class Lifestyle(BaseModel):
    """Adopter lifestyle checked against an activity profile."""

    available_time_minutes: Optional[int] = Field(default=None, ge=0)
    has_yard: Optional[bool] = Field(default=None)
    active_family: Optional[bool] = Field(default=None)
    has_children: Optional[bool] = Field(default=None)


class TimeSlot(BaseModel):
    """A preferred slot on a given day."""

    day: str
    start_time: str
    end_time: str


class TaskRequirements(BaseModel):
    """Scheduling needs of a task."""

    minimum_hours_per_week: Optional[float] = Field(default=None, ge=0)
    required_days: List[str] = Field(default_factory=list)
    preferred_time_slots: List[TimeSlot] = Field(default_factory=list)
    requires_full_time: bool = Field(default=False)
    requires_weekends: bool = Field(default=False)


class CaseRequirements(BaseModel):
    """Specialty needs of a case."""

    requires_ethology_specialist: bool = Field(default=False)
    requires_shelter_medicine: bool = Field(default=False)
    required_specialties: List[VeterinarianSpecialty] = Field(default_factory=list)
    required_certifications: List[str] = Field(default_factory=list)
    minimum_specialization_level: Optional[SpecializationLevel] = None


class ActivityRequirements(BaseModel):
    """Conditions for performing a professional activity."""

    minimum_years_required: int = Field(default=0, ge=0)
    requires_valid_license: bool = Field(default=True)
    minimum_seniority_level: Optional[SeniorityLevel] = None


class RoleRequirements(BaseModel):
    """Everything a role may ask of a veterinarian."""

    # Experience
    minimum_years: Optional[float] = Field(default=None, ge=0)
    required_shelter_experience: Optional[float] = Field(default=None, ge=0)
    required_behavior_experience: Optional[float] = Field(default=None, ge=0)
    preferred_positions: List[str] = Field(default_factory=list)
    requires_current_employment: bool = Field(default=False)

    # Skills
    required_expertise: List[str] = Field(default_factory=list)
    required_languages: List[str] = Field(default_factory=list)
    required_authorizations: List[Authorization] = Field(default_factory=list)
    minimum_expertise_areas: Optional[int] = Field(default=None, ge=0)
    minimum_languages: Optional[int] = Field(default=None, ge=0)
    requires_multilingual: bool = Field(default=False)

    # Specialties
    requires_ethology_specialist: bool = Field(default=False)
    requires_shelter_medicine: bool = Field(default=False)
    required_specialties: List[VeterinarianSpecialty] = Field(default_factory=list)
    required_certifications: List[str] = Field(default_factory=list)
    minimum_specialization_level: Optional[SpecializationLevel] = None

    # Employment
    requires_full_time: bool = Field(default=False)
    minimum_hours_per_week: Optional[float] = Field(default=None, ge=0)
    required_days: List[str] = Field(default_factory=list)
    requires_weekends: bool = Field(default=False)
    preferred_time_slots: List[TimeSlot] = Field(default_factory=list)

    def task_requirements(self) -> TaskRequirements:
        return TaskRequirements(
            minimum_hours_per_week=self.minimum_hours_per_week,
            required_days=self.required_days,
            preferred_time_slots=self.preferred_time_slots,
            requires_full_time=self.requires_full_time,
            requires_weekends=self.requires_weekends,
        )

    def case_requirements(self) -> CaseRequirements:
        return CaseRequirements(
            requires_ethology_specialist=self.requires_ethology_specialist,
            requires_shelter_medicine=self.requires_shelter_medicine,
            required_specialties=self.required_specialties,
            required_certifications=self.required_certifications,
            minimum_specialization_level=self.minimum_specialization_level,
        )
