"""
Veterinarian staff profile models.

A ``Veterinarian`` embeds an ``Account`` and owns up to nine sub-profiles.
Records carry their own simple mutators; derived values and evaluations
live in ``pawscore.models``.
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional, List, Dict
from pydantic import BaseModel, Field

from ..arithmetic import elapsed_months, round_half_up
from .account import Account

SHELTER_KEYWORDS = ["shelter", "rescue", "refugio", "santuario", "spca", "humane society"]
BEHAVIOR_KEYWORDS = ["behavior", "behaviorist", "etholog", "comportamiento", "assessment"]


class VeterinarianSpecialty(str, Enum):
    """Veterinary specialties."""
    GENERAL_PRACTICE = "general_practice"
    ETHOLOGY = "ethology"
    ANIMAL_BEHAVIOR = "animal_behavior"
    INTERNAL_MEDICINE = "internal_medicine"
    SURGERY = "surgery"
    EMERGENCY = "emergency"
    DERMATOLOGY = "dermatology"
    CARDIOLOGY = "cardiology"
    ONCOLOGY = "oncology"
    ORTHOPEDICS = "orthopedics"
    NEUROLOGY = "neurology"
    OPHTHALMOLOGY = "ophthalmology"
    REPRODUCTION = "reproduction"
    EXOTIC_ANIMALS = "exotic_animals"
    SHELTER_MEDICINE = "shelter_medicine"


class EmploymentStatus(str, Enum):
    """Employment relationship with the organization."""
    FULL_TIME = "full_time"
    PART_TIME = "part_time"
    CONTRACT = "contract"
    VOLUNTEER = "volunteer"
    INTERN = "intern"
    RESIDENT = "resident"
    CONSULTANT = "consultant"
    INACTIVE = "inactive"


class CertificationStatus(str, Enum):
    """License or certification status."""
    ACTIVE = "active"
    EXPIRED = "expired"
    SUSPENDED = "suspended"
    PENDING_RENEWAL = "pending_renewal"
    REVOKED = "revoked"


class Authorization(str, Enum):
    """Authorizations a veterinarian may hold."""
    BEHAVIOR_ASSESSMENT = "behavior_assessment"
    ADOPTION_DECISION = "adoption_decision"
    BEHAVIOR_MEDICATION = "behavior_medication"
    SECOND_OPINION = "second_opinion"


AUTHORIZATION_NAMES = {
    Authorization.BEHAVIOR_ASSESSMENT: "Behavioral assessments",
    Authorization.ADOPTION_DECISION: "Adoption decisions",
    Authorization.BEHAVIOR_MEDICATION: "Behavioral medication",
    Authorization.SECOND_OPINION: "Second opinions",
}


class ProfessionalLicense(BaseModel):
    """License to practice and academic background."""

    license_number: str = Field(..., description="License number, e.g. CA123456")
    license_status: CertificationStatus = Field(default=CertificationStatus.ACTIVE)
    license_issue_date: date
    license_expiration_date: date
    licensing_authority: str = ""
    veterinary_school: str = ""
    graduation_date: date


class Certification(BaseModel):
    """A specialty certification."""

    name: str
    issued_by: str
    issue_date: date
    expiration_date: date


class SpecialtyProfile(BaseModel):
    """Primary and additional specialties plus certifications."""

    primary_specialty: VeterinarianSpecialty = Field(default=VeterinarianSpecialty.GENERAL_PRACTICE)
    additional_specialties: List[VeterinarianSpecialty] = Field(default_factory=list)
    certifications: List[Certification] = Field(default_factory=list)
    ethology_certified: bool = Field(default=False)
    ethology_certification_details: Optional[str] = None

    def add_certification(self, certification: Certification) -> None:
        """Add a certification, replacing one with the same name and issuer."""
        for index, existing in enumerate(self.certifications):
            if existing.name == certification.name and existing.issued_by == certification.issued_by:
                self.certifications[index] = certification
                return
        self.certifications.append(certification)

    def add_specialty(self, specialty: VeterinarianSpecialty) -> None:
        if specialty == self.primary_specialty:
            return
        if specialty not in self.additional_specialties:
            self.additional_specialties.append(specialty)

    def remove_specialty(self, specialty: VeterinarianSpecialty) -> None:
        self.additional_specialties = [s for s in self.additional_specialties if s != specialty]


class WorkHistoryEntry(BaseModel):
    """A past or current position."""

    position: str
    organization: str
    start_date: date
    end_date: Optional[date] = None
    description: Optional[str] = None
    responsibilities: List[str] = Field(default_factory=list)

    def is_shelter_related(self) -> bool:
        org = self.organization.lower()
        pos = self.position.lower()
        return any(keyword in org or keyword in pos for keyword in SHELTER_KEYWORDS)

    def is_behavior_related(self) -> bool:
        pos = self.position.lower()
        return any(keyword in pos for keyword in BEHAVIOR_KEYWORDS)


class ExperienceProfile(BaseModel):
    """Experience counters and work history."""

    years_of_experience: float = Field(default=0, ge=0)
    shelter_experience: float = Field(default=0, ge=0, description="Years working in shelters")
    behavior_assessment_experience: float = Field(default=0, ge=0, description="Years doing behavior assessments")
    work_history: List[WorkHistoryEntry] = Field(default_factory=list)

    def add_work_experience(self, entry: WorkHistoryEntry, as_of: Optional[date] = None) -> None:
        self.work_history.append(entry)
        self.recalculate_counters(as_of)

    def update_work_experience(self, index: int, as_of: Optional[date] = None, **updates) -> None:
        """Apply field updates to one history entry; out-of-range indexes are ignored."""
        if index < 0 or index >= len(self.work_history):
            return
        self.work_history[index] = self.work_history[index].model_copy(update=updates)
        self.recalculate_counters(as_of)

    def end_current_position(
        self, organization: str, end_date: Optional[date] = None, as_of: Optional[date] = None
    ) -> None:
        for job in self.work_history:
            if job.organization == organization and job.end_date is None:
                job.end_date = end_date or date.today()
                self.recalculate_counters(as_of)
                return

    def recalculate_counters(self, as_of: Optional[date] = None) -> None:
        """Recompute the year counters from the work history."""
        if not self.work_history:
            return
        today = as_of or date.today()
        total_months = 0.0
        shelter_months = 0.0
        behavior_months = 0.0

        for job in self.work_history:
            months = elapsed_months(job.start_date, job.end_date or today)
            total_months += months
            if job.is_shelter_related():
                shelter_months += months
            if job.is_behavior_related():
                behavior_months += months

        self.years_of_experience = round_half_up(total_months / 12)
        self.shelter_experience = round_half_up(shelter_months / 12)
        self.behavior_assessment_experience = round_half_up(behavior_months / 12)


class WorkingHoursEntry(BaseModel):
    """Working hours for one day of the week."""

    day: str = Field(..., description="Day name, e.g. monday")
    start_time: str = Field(default="", description="HH:MM")
    end_time: str = Field(default="", description="HH:MM")
    is_working_day: bool = Field(default=True)


class EmploymentProfile(BaseModel):
    """Employment relationship and weekly schedule."""

    employment_status: EmploymentStatus = Field(default=EmploymentStatus.FULL_TIME)
    start_date: date
    end_date: Optional[date] = None
    job_title: Optional[str] = None
    department: Optional[str] = None
    working_hours: Optional[List[WorkingHoursEntry]] = Field(
        default=None,
        description="Weekly schedule; when absent, defaults by employment status apply"
    )

    def terminate_employment(self, end_date: Optional[date] = None) -> None:
        self.end_date = end_date or date.today()
        self.employment_status = EmploymentStatus.INACTIVE

    def change_employment_status(self, new_status: EmploymentStatus) -> None:
        self.employment_status = new_status
        # Reactivation clears the end date
        if new_status != EmploymentStatus.INACTIVE and self.end_date:
            self.end_date = None

    def update_working_hours(self, schedule: List[WorkingHoursEntry]) -> None:
        self.working_hours = schedule

    def add_working_day(self, day: str, start_time: str, end_time: str) -> None:
        """Set the hours for a day, replacing any existing entry for it."""
        schedule = [s for s in (self.working_hours or []) if s.day.lower() != day.lower()]
        schedule.append(
            WorkingHoursEntry(day=day.lower(), start_time=start_time, end_time=end_time, is_working_day=True)
        )
        self.working_hours = schedule

    def remove_working_day(self, day: str) -> None:
        if self.working_hours is None:
            return
        self.working_hours = [s for s in self.working_hours if s.day.lower() != day.lower()]


class SkillsProfile(BaseModel):
    """Areas of expertise, languages and authorizations."""

    areas_of_expertise: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)
    behavior_assessment_authorized: bool = Field(default=False)
    adoption_decision_authorized: bool = Field(default=False)
    behavior_medication_authorized: bool = Field(default=False)
    second_opinion_provider: bool = Field(default=False)

    def has_expertise(self, area: str) -> bool:
        needle = area.lower()
        return any(needle in expertise.lower() for expertise in self.areas_of_expertise)

    def speaks_language(self, language: str) -> bool:
        needle = language.lower()
        return any(needle in spoken.lower() for spoken in self.languages)

    def has_authorization(self, authorization: Authorization) -> bool:
        return {
            Authorization.BEHAVIOR_ASSESSMENT: self.behavior_assessment_authorized,
            Authorization.ADOPTION_DECISION: self.adoption_decision_authorized,
            Authorization.BEHAVIOR_MEDICATION: self.behavior_medication_authorized,
            Authorization.SECOND_OPINION: self.second_opinion_provider,
        }[authorization]

    def add_expertise(self, area: str) -> None:
        if not self.has_expertise(area):
            self.areas_of_expertise.append(area.strip())

    def remove_expertise(self, area: str) -> None:
        needle = area.lower()
        self.areas_of_expertise = [e for e in self.areas_of_expertise if needle not in e.lower()]

    def add_language(self, language: str) -> None:
        if not self.speaks_language(language):
            self.languages.append(language.strip())

    def remove_language(self, language: str) -> None:
        needle = language.lower()
        self.languages = [lang for lang in self.languages if needle not in lang.lower()]

    def update_authorizations(self, updates: Dict[Authorization, bool]) -> None:
        """Set the given authorizations, leaving the rest untouched."""
        fields = {
            Authorization.BEHAVIOR_ASSESSMENT: "behavior_assessment_authorized",
            Authorization.ADOPTION_DECISION: "adoption_decision_authorized",
            Authorization.BEHAVIOR_MEDICATION: "behavior_medication_authorized",
            Authorization.SECOND_OPINION: "second_opinion_provider",
        }
        for authorization, granted in updates.items():
            setattr(self, fields[Authorization(authorization)], granted)


class ContactProfile(BaseModel):
    """Contact details."""

    address: Optional[str] = None
    emergency_contact: Optional[str] = None
    preferred_communication: Optional[str] = None
    emergency_available: bool = Field(default=True)

    def update_contact_info(self, **updates) -> None:
        for field, value in updates.items():
            if field in type(self).model_fields:
                setattr(self, field, value)


class AvailabilityProfile(BaseModel):
    """Active flag and planned unavailability window."""

    is_active: bool = Field(default=True)
    available_for_assessments: bool = Field(default=True)
    unavailable_from: Optional[date] = None
    unavailable_until: Optional[date] = None
    unavailability_reason: Optional[str] = None

    def set_unavailable(self, start: date, until: Optional[date] = None, reason: Optional[str] = None) -> None:
        self.unavailable_from = start
        self.unavailable_until = until
        self.unavailability_reason = reason

    def set_available(self) -> None:
        self.unavailable_from = None
        self.unavailable_until = None
        self.unavailability_reason = None
        self.is_active = True


class ProfessionalStatistics(BaseModel):
    """Assessment and adoption counters."""

    total_assessments: int = Field(default=0, ge=0)
    successful_adoptions: int = Field(default=0, ge=0)
    assessment_accuracy_rate: Optional[float] = Field(default=None, ge=0, le=100)
    last_assessment_date: Optional[date] = None

    def increment_assessments(self, when: Optional[date] = None) -> None:
        self.total_assessments += 1
        self.last_assessment_date = when or date.today()

    def increment_successful_adoptions(self) -> None:
        self.successful_adoptions += 1

    def update_accuracy_rate(self, rate: float) -> None:
        self.assessment_accuracy_rate = max(0.0, min(100.0, rate))

    def reset_statistics(self) -> None:
        self.total_assessments = 0
        self.successful_adoptions = 0
        self.assessment_accuracy_rate = None
        self.last_assessment_date = None


class PerformanceReview(BaseModel):
    """A dated performance review, rated 1-10."""

    review_date: date
    rating: float = Field(..., ge=1, le=10)
    notes: str = ""


class Observations(BaseModel):
    """Biography, interests, admin notes and performance reviews."""

    biography: Optional[str] = None
    special_interests: Optional[str] = None
    admin_notes: Optional[str] = None
    performance_reviews: List[PerformanceReview] = Field(default_factory=list)

    def add_performance_review(self, rating: float, notes: str, when: Optional[date] = None) -> None:
        self.performance_reviews.append(
            PerformanceReview(review_date=when or date.today(), rating=max(1, min(10, rating)), notes=notes.strip())
        )

    def update_admin_notes(self, notes: str, when: Optional[date] = None) -> None:
        stamp = (when or date.today()).isoformat()
        entry = f"[{stamp}] {notes.strip()}"
        self.admin_notes = f"{self.admin_notes}\n\n{entry}" if self.admin_notes else entry


class Veterinarian(BaseModel):
    """Veterinarian staff member with all professional sub-profiles."""

    account: Account
    phone: Optional[str] = None
    alternative_phone: Optional[str] = None
    role: Optional[VeterinarianSpecialty] = None
    date_of_birth: Optional[date] = None

    professional: Optional[ProfessionalLicense] = None
    specialty: Optional[SpecialtyProfile] = None
    experience: Optional[ExperienceProfile] = None
    employee: Optional[EmploymentProfile] = None
    skills: Optional[SkillsProfile] = None
    contact: Optional[ContactProfile] = None
    availability: Optional[AvailabilityProfile] = None
    statistics: Optional[ProfessionalStatistics] = None
    observations: Optional[Observations] = None

    created_at: datetime = Field(default_factory=datetime.utcnow)

    def is_active_veterinarian(self) -> bool:
        return self.account.is_active and self.professional is not None and bool(self.professional.license_number)

    class Config:
        json_schema_extra = {
            "example": {
                "account": {
                    "account_id": "vet_001",
                    "email": "ana.lopez@example.com",
                    "first_name": "Ana",
                    "last_name": "Lopez"
                },
                "professional": {
                    "license_number": "CA123456",
                    "license_issue_date": "2015-07-01",
                    "license_expiration_date": "2027-07-01",
                    "graduation_date": "2015-06-15"
                },
                "experience": {"years_of_experience": 9, "shelter_experience": 4}
            }
        }
