"""
Pet data models and schemas.

A pet record is composed of five optional facet profiles (physical, nutrition,
activity, behavior and adoption). Each facet is owned by its pet and carries
only data; scoring lives in ``pawscore.models``.
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, Field, validator

DEFAULT_PET_IMAGE = "www.test.com/default-image.png"


class PetType(str, Enum):
    """Types of pets."""
    DOG = "dog"
    CAT = "cat"
    RABBIT = "rabbit"
    BIRD = "bird"
    OTHER = "other"


class Gender(str, Enum):
    """Pet gender."""
    MALE = "male"
    FEMALE = "female"


# Physical profile

class HealthStatus(str, Enum):
    """Overall physical condition."""
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    CRITICAL = "critical"


class CoatLength(str, Enum):
    """Coat length categories."""
    HAIRLESS = "hairless"
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"
    VERY_LONG = "very_long"


class CoatTexture(str, Enum):
    """Coat texture categories."""
    SMOOTH = "smooth"
    ROUGH = "rough"
    CURLY = "curly"
    WAVY = "wavy"
    WIRY = "wiry"
    WOOLLY = "woolly"


# Nutrition profile

class DietType(str, Enum):
    """Main diet categories."""
    COMMERCIAL_DRY = "commercial_dry"
    COMMERCIAL_WET = "commercial_wet"
    COMMERCIAL_MIXED = "commercial_mixed"
    HOMEMADE = "homemade"
    RAW_BARF = "raw_barf"
    PRESCRIPTION = "prescription"
    MIXED = "mixed"
    SPECIAL_DIET = "special_diet"


class FeedingFrequency(str, Enum):
    """How often the pet is fed."""
    ONCE_DAILY = "once_daily"
    TWICE_DAILY = "twice_daily"
    THREE_TIMES_DAILY = "three_times_daily"
    FOUR_TIMES_DAILY = "four_times_daily"
    FREE_FEEDING = "free_feeding"
    MULTIPLE_SMALL_MEALS = "multiple_small_meals"


class AppetiteLevel(str, Enum):
    """Appetite categories."""
    POOR = "poor"
    FAIR = "fair"
    GOOD = "good"
    EXCELLENT = "excellent"
    EXCESSIVE = "excessive"


# Activity profile

class ActivityLevel(str, Enum):
    """Physical activity needs, lowest first."""
    VERY_LOW = "very_low"
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very_high"


class EnergyLevel(str, Enum):
    """Energy level, lowest first."""
    LETHARGIC = "lethargic"
    CALM = "calm"
    MODERATE = "moderate"
    ENERGETIC = "energetic"
    HYPERACTIVE = "hyperactive"


class PlayStyle(str, Enum):
    """Play intensity."""
    GENTLE = "gentle"
    MODERATE = "moderate"
    ROUGH = "rough"
    VERY_ROUGH = "very_rough"


class ExercisePreference(str, Enum):
    """Preferred exercise setting."""
    INDOOR_ONLY = "indoor_only"
    OUTDOOR_PREFERRED = "outdoor_preferred"
    MIXED = "mixed"
    WATER_ACTIVITIES = "water_activities"
    CLIMBING = "climbing"


# Behavior profile

class Temperament(str, Enum):
    """General temperament."""
    VERY_CALM = "very_calm"
    CALM = "calm"
    BALANCED = "balanced"
    ENERGETIC = "energetic"
    HYPERACTIVE = "hyperactive"
    ANXIOUS = "anxious"
    FEARFUL = "fearful"
    AGGRESSIVE = "aggressive"
    DOMINANT = "dominant"
    SUBMISSIVE = "submissive"


class SocializationLevel(str, Enum):
    """Socialization, best first."""
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    UNSOCIALIZED = "unsocialized"


class TrainingLevel(str, Enum):
    """Training level, lowest first."""
    UNTRAINED = "untrained"
    BASIC = "basic"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    PROFESSIONAL = "professional"


class AggressionLevel(str, Enum):
    """Aggression severity, lowest first."""
    NONE = "none"
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"
    DANGEROUS = "dangerous"


class AnxietyLevel(str, Enum):
    """Anxiety severity, lowest first."""
    NONE = "none"
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"
    CLINICAL = "clinical"


class StressSignal(str, Enum):
    """Observed stress signals."""
    PANTING = "panting"
    PACING = "pacing"
    DROOLING = "drooling"
    TREMBLING = "trembling"
    HIDING = "hiding"
    DESTRUCTIVE_BEHAVIOR = "destructive_behavior"
    EXCESSIVE_VOCALIZATION = "excessive_vocalization"
    LOSS_OF_APPETITE = "loss_of_appetite"
    AGGRESSION = "aggression"
    WITHDRAWAL = "withdrawal"


# Adoption profile

class AdoptionStatus(str, Enum):
    """Adoption availability status."""
    AVAILABLE = "available"
    PENDING = "pending"
    ADOPTED = "adopted"
    NOT_AVAILABLE = "not_available"
    QUARANTINE = "quarantine"
    MEDICAL_HOLD = "medical_hold"
    BEHAVIORAL_HOLD = "behavioral_hold"
    FOSTER_CARE = "foster_care"
    RETURN_PENDING = "return_pending"


class IntakeReason(str, Enum):
    """Why the pet entered the shelter."""
    STRAY = "stray"
    SURRENDER = "surrender"
    ABUSE_NEGLECT = "abuse_neglect"
    OWNER_DEATH = "owner_death"
    FINANCIAL_HARDSHIP = "financial_hardship"
    BEHAVIORAL_ISSUES = "behavioral_issues"
    ALLERGIES = "allergies"
    NEW_BABY = "new_baby"
    MOVING = "moving"
    TOO_MANY_PETS = "too_many_pets"
    BITE_INCIDENT = "bite_incident"
    OTHER = "other"


class IdealHomeType(str, Enum):
    """Home the pet would do best in."""
    ANY = "any"
    HOUSE_WITH_YARD = "house_with_yard"
    APARTMENT_OK = "apartment_ok"
    FARM_RURAL = "farm_rural"
    SENIORS_ONLY = "seniors_only"
    ACTIVE_FAMILY = "active_family"
    QUIET_HOME = "quiet_home"
    EXPERIENCED_OWNER = "experienced_owner"


class AdoptionFee(str, Enum):
    """Adoption fee category."""
    WAIVED = "waived"
    REDUCED = "reduced"
    STANDARD = "standard"
    PREMIUM = "premium"
    SPECIAL_NEEDS = "special_needs"


class PetPhysicalProfile(BaseModel):
    """Physical measurements, coat and preventive care."""

    weight: float = Field(..., ge=0, description="Weight in kilograms")
    height: Optional[float] = Field(default=None, ge=0, description="Height at the withers in cm")
    length: Optional[float] = Field(default=None, ge=0, description="Body length in cm")

    # Coat
    coat_color: str = Field(default="", description="Primary coat color")
    secondary_coat_color: Optional[str] = Field(default=None)
    coat_pattern: Optional[str] = Field(default=None)
    coat_length: Optional[CoatLength] = Field(default=None)
    coat_texture: Optional[CoatTexture] = Field(default=None)
    eye_color: Optional[str] = Field(default=None)
    has_heterochromia: bool = Field(default=False)

    # Health
    overall_condition: HealthStatus = Field(default=HealthStatus.GOOD)
    sterilized: bool = Field(default=False)
    sterilization_date: Optional[date] = Field(default=None)
    vaccination_up_to_date: bool = Field(default=False)
    last_vaccination_date: Optional[date] = Field(default=None)
    deworming_up_to_date: bool = Field(default=False)
    last_deworming_date: Optional[date] = Field(default=None)
    has_microchip: bool = Field(default=False)
    microchip_number: Optional[str] = Field(default=None)

    medical_conditions: Optional[str] = Field(default=None)
    current_medications: Optional[str] = Field(default=None)
    allergies: Optional[str] = Field(default=None)
    veterinary_notes: Optional[str] = Field(default=None)


class PetNutritionProfile(BaseModel):
    """Diet and feeding plan."""

    diet_type: DietType = Field(default=DietType.COMMERCIAL_DRY)
    primary_food_brand: Optional[str] = Field(default=None)
    secondary_food_brand: Optional[str] = Field(default=None)
    daily_amount_grams: float = Field(..., ge=0, description="Daily food amount in grams")
    feeding_frequency: FeedingFrequency = Field(default=FeedingFrequency.TWICE_DAILY)
    feeding_times: List[str] = Field(default_factory=list, description="Feeding times as HH:MM")
    appetite_level: AppetiteLevel = Field(default=AppetiteLevel.GOOD)
    eats_quickly: bool = Field(default=False)
    is_picky_eater: bool = Field(default=False)
    food_guarding: bool = Field(default=False)
    food_allergies: Optional[str] = Field(default=None)
    foods_to_avoid: List[str] = Field(default_factory=list)
    requires_special_diet: bool = Field(default=False)
    preferred_treats: List[str] = Field(default_factory=list)
    daily_treat_allowance: Optional[float] = Field(default=None, ge=0, description="Treats in grams per day")
    supplements: List[str] = Field(default_factory=list)
    daily_water_intake: Optional[float] = Field(default=None, ge=0, description="Water in ml per day")
    last_diet_change: Optional[date] = Field(default=None)
    nutrition_notes: Optional[str] = Field(default=None)


class PetActivityProfile(BaseModel):
    """Exercise, play and mental stimulation needs."""

    activity_level: ActivityLevel = Field(default=ActivityLevel.MODERATE)
    energy_level: EnergyLevel = Field(default=EnergyLevel.MODERATE)
    daily_exercise_minutes: int = Field(default=30, ge=0, description="Recommended daily exercise")
    current_exercise_minutes: int = Field(default=0, ge=0, description="Exercise currently received")
    exercise_preference: ExercisePreference = Field(default=ExercisePreference.MIXED)
    preferred_activities: List[str] = Field(default_factory=list)
    enjoys_walking: bool = Field(default=True)
    can_be_off_leash: bool = Field(default=False)
    good_on_leash: bool = Field(default=True)
    enjoys_water: bool = Field(default=False)

    # Play
    play_sessions_per_day: int = Field(default=2, ge=0)
    play_session_duration: int = Field(default=15, ge=0, description="Minutes per play session")
    play_style: PlayStyle = Field(default=PlayStyle.MODERATE)
    favorite_toys: List[str] = Field(default_factory=list)
    enjoys_interactive_play: bool = Field(default=True)
    enjoys_solo_play: bool = Field(default=True)
    destructive_when_bored: bool = Field(default=False)
    plays_well_with_others: bool = Field(default=True)
    enjoys_play_with_dogs: bool = Field(default=True)
    plays_with_cats: bool = Field(default=False)
    good_with_children_play: bool = Field(default=True)

    # Mental stimulation
    enjoys_puzzle_toys: bool = Field(default=False)
    enjoys_training_games: bool = Field(default=False)
    mental_stimulation_minutes: int = Field(default=0, ge=0)

    gets_overstimulated: bool = Field(default=False)
    resource_guards_toys: bool = Field(default=False)
    exercise_intolerance: bool = Field(default=False)
    preferred_exercise_times: List[str] = Field(default_factory=list)
    morning_active: bool = Field(default=False)
    evening_active: bool = Field(default=False)
    adapts_to_routine_changes: bool = Field(default=True)
    activity_notes: Optional[str] = Field(default=None)


class PetBehaviorProfile(BaseModel):
    """Temperament, socialization, training and behavioral issues."""

    temperament: Temperament = Field(default=Temperament.BALANCED)
    confidence_level: int = Field(default=5, ge=1, le=10)
    adaptability_level: int = Field(default=5, ge=1, le=10)

    # Socialization
    socialization_level: SocializationLevel = Field(default=SocializationLevel.GOOD)
    good_with_children: bool = Field(default=True)
    children_comfort_level: int = Field(default=5, ge=1, le=10)
    good_with_dogs: bool = Field(default=True)
    dogs_comfort_level: int = Field(default=5, ge=1, le=10)
    good_with_cats: bool = Field(default=False)
    cats_comfort_level: int = Field(default=5, ge=1, le=10)
    good_with_strangers: bool = Field(default=True)
    strangers_comfort_level: int = Field(default=5, ge=1, le=10)

    # Training
    training_level: TrainingLevel = Field(default=TrainingLevel.BASIC)
    knows_basic_commands: bool = Field(default=False)
    known_commands: List[str] = Field(default_factory=list)
    responds_to_positive_reinforcement: bool = Field(default=True)
    house_trained: bool = Field(default=False)
    crate_trained: bool = Field(default=False)
    attention_span: int = Field(default=5, ge=1, le=10)

    # Aggression
    aggression_level: AggressionLevel = Field(default=AggressionLevel.NONE)
    food_aggression: bool = Field(default=False)
    resource_guarding: bool = Field(default=False)
    territorial_aggression: bool = Field(default=False)
    fear_based_aggression: bool = Field(default=False)
    aggression_triggers: List[str] = Field(default_factory=list)

    # Anxiety and fear
    anxiety_level: AnxietyLevel = Field(default=AnxietyLevel.NONE)
    separation_anxiety: bool = Field(default=False)
    noise_phobia: bool = Field(default=False)
    specific_fears: List[str] = Field(default_factory=list)
    stress_signals: List[StressSignal] = Field(default_factory=list)

    # Problem behaviors
    destructive_behavior: bool = Field(default=False)
    excessive_vocalization: bool = Field(default=False)
    jumps_on_people: bool = Field(default=False)
    leash_pulling: bool = Field(default=False)
    escape_behavior: bool = Field(default=False)
    compulsive_behaviors: bool = Field(default=False)
    problematic_behaviors: List[str] = Field(default_factory=list)

    # Positive traits
    affectionate: bool = Field(default=False)
    loyal: bool = Field(default=False)
    playful: bool = Field(default=False)
    gentle: bool = Field(default=False)
    alert_watchdog: bool = Field(default=False)
    independent: bool = Field(default=False)
    positive_traits: List[str] = Field(default_factory=list)

    # Professional evaluation
    ethologist_notes: Optional[str] = Field(default=None)
    last_behavioral_evaluation: Optional[date] = Field(default=None)
    in_behavioral_training: bool = Field(default=False)
    current_training_program: Optional[str] = Field(default=None)
    required_owner_experience: int = Field(default=1, ge=1, le=10)


class PetAdoptionProfile(BaseModel):
    """Shelter stay, placement requirements and promotion state."""

    adoption_status: AdoptionStatus = Field(default=AdoptionStatus.QUARANTINE)
    available_date: Optional[date] = Field(default=None)
    adoption_date: Optional[date] = Field(default=None)
    featured_pet: bool = Field(default=False)
    days_in_shelter: int = Field(default=0, ge=0)

    # Intake
    intake_date: Optional[date] = Field(default=None)
    intake_reason: IntakeReason = Field(default=IntakeReason.OTHER)
    intake_story: Optional[str] = Field(default=None)
    has_lived_in_home: bool = Field(default=False)
    time_with_previous_owner: Optional[int] = Field(default=None, ge=0, description="Months")

    # Ideal home
    ideal_home_type: IdealHomeType = Field(default=IdealHomeType.ANY)
    apartment_friendly: bool = Field(default=True)
    needs_yard: bool = Field(default=False)
    needs_fenced_yard: bool = Field(default=False)
    good_with_kids: bool = Field(default=True)
    minimum_child_age: Optional[int] = Field(default=None, ge=0)
    can_live_with_other_pets: bool = Field(default=True)
    must_be_only_pet: bool = Field(default=False)

    # Adopter requirements
    required_experience_level: int = Field(default=1, ge=1, le=10)
    minimum_time_commitment: float = Field(default=1, ge=0, description="Hours of attention per day")
    requires_stay_at_home_owner: bool = Field(default=False)
    special_requirements: List[str] = Field(default_factory=list)

    # Fees
    adoption_fee_category: AdoptionFee = Field(default=AdoptionFee.STANDARD)
    adoption_fee_amount: float = Field(default=0, ge=0)
    sponsored_adoption: bool = Field(default=False)
    sponsor_info: Optional[str] = Field(default=None)

    # Applications
    application_count: int = Field(default=0, ge=0)
    meet_and_greet_count: int = Field(default=0, ge=0)
    application_pending: bool = Field(default=False)

    # Promotion
    marketing_description: Optional[str] = Field(default=None)
    search_keywords: List[str] = Field(default_factory=list)
    urgent_adoption: bool = Field(default=False)
    urgency_reason: Optional[str] = Field(default=None)
    promotion_channels: List[str] = Field(default_factory=list)

    # Returns and follow-up
    return_count: int = Field(default=0, ge=0)
    return_reasons: List[str] = Field(default_factory=list)
    requires_follow_up: bool = Field(default=False)
    follow_up_days: Optional[int] = Field(default=None, ge=0)
    staff_notes: Optional[str] = Field(default=None)


class Pet(BaseModel):
    """Complete pet record."""

    pet_id: str = Field(..., description="Unique pet identifier")
    name: str = Field(..., description="Pet name")
    type: PetType = Field(default=PetType.DOG, description="Species/type")
    age: int = Field(..., ge=0, description="Age in months")
    breed: Optional[str] = Field(default=None, description="Primary breed")
    gender: Optional[Gender] = Field(default=None)
    image: str = Field(default=DEFAULT_PET_IMAGE, description="Image URL")
    description: Optional[str] = Field(default=None)

    physical_profile: Optional[PetPhysicalProfile] = Field(default=None)
    nutrition_profile: Optional[PetNutritionProfile] = Field(default=None)
    activity_profile: Optional[PetActivityProfile] = Field(default=None)
    behavior_profile: Optional[PetBehaviorProfile] = Field(default=None)
    adoption_profile: Optional[PetAdoptionProfile] = Field(default=None)

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
    deleted_at: Optional[datetime] = Field(default=None)

    @validator("image", pre=True)
    def default_image(cls, v):
        """Fall back to the placeholder image when none is set."""
        return v or DEFAULT_PET_IMAGE

    class Config:
        json_schema_extra = {
            "example": {
                "pet_id": "pet_12345",
                "name": "Max",
                "type": "dog",
                "age": 26,
                "breed": "Labrador Retriever",
                "gender": "male",
                "adoption_profile": {
                    "adoption_status": "available",
                    "days_in_shelter": 45,
                    "good_with_kids": True,
                    "required_experience_level": 3
                }
            }
        }
