"""
Derived facts about a pet that are not scores.

Shelter stay and promotion flags, behavioral issues and training plan,
activity and nutrition checks, and physical health reminders. Functions
returning ``None`` mean the underlying data is missing.
"""

from typing import List, Optional
from loguru import logger

from ..config import settings
from ..schemas.pet_data import (
    ActivityLevel,
    AggressionLevel,
    AnxietyLevel,
    EnergyLevel,
    ExercisePreference,
    Pet,
    PetActivityProfile,
    PetAdoptionProfile,
    PetBehaviorProfile,
    PetNutritionProfile,
    PetPhysicalProfile,
    PlayStyle,
    Temperament,
    TrainingLevel,
)
from .normalizer import DateLike, above, at_least, at_most, days_between, is_before, months_ago
from .score_calculator import ScoreCalculator

_calculator = ScoreCalculator()


# Adoption

def update_days_in_shelter(profile: PetAdoptionProfile, as_of: Optional[DateLike] = None) -> int:
    """
    Recompute days in shelter from the intake date.

    Args:
        profile: Adoption profile, updated in place
        as_of: Reference moment, defaults to now

    Returns:
        Days in shelter; unchanged when there is no intake date
    """
    if profile.intake_date:
        profile.days_in_shelter = days_between(profile.intake_date, as_of)
    return profile.days_in_shelter


def is_long_stay(profile: PetAdoptionProfile) -> bool:
    return profile.days_in_shelter > settings.long_stay_days


def needs_special_promotion(profile: PetAdoptionProfile) -> bool:
    """Long stays, low interest, urgency and past returns all call for promotion."""
    return (
        is_long_stay(profile)
        or _calculator.application_rate(profile) < settings.promotion_application_rate
        or profile.urgent_adoption
        or profile.return_count > 0
    )


def needs_post_adoption_follow_up(profile: PetAdoptionProfile) -> bool:
    return (
        profile.requires_follow_up
        or profile.return_count > 0
        or profile.required_experience_level > 6
        or profile.must_be_only_pet
    )


# Behavior

def needs_specialized_training(profile: PetBehaviorProfile) -> bool:
    return (
        at_least(profile.aggression_level, AggressionLevel.MODERATE)
        or at_least(profile.anxiety_level, AnxietyLevel.SEVERE)
        or profile.separation_anxiety
        or profile.destructive_behavior
        or profile.fear_based_aggression
    )


def is_suitable_for_families_with_children(profile: PetBehaviorProfile) -> bool:
    return (
        profile.good_with_children
        and profile.children_comfort_level >= 6
        and at_most(profile.aggression_level, AggressionLevel.MILD)
        and not profile.fear_based_aggression
        and profile.temperament in (Temperament.CALM, Temperament.BALANCED, Temperament.ENERGETIC)
    )


def is_suitable_for_first_time_owners(profile: PetBehaviorProfile) -> bool:
    return (
        profile.required_owner_experience <= 4
        and profile.aggression_level == AggressionLevel.NONE
        and at_most(profile.anxiety_level, AnxietyLevel.MILD)
        and not needs_specialized_training(profile)
        and at_least(profile.training_level, TrainingLevel.BASIC)
    )


def active_behavioral_issues(profile: PetBehaviorProfile) -> List[str]:
    """
    List the behavioral issues currently present.

    Args:
        profile: Behavior profile

    Returns:
        Issue descriptions, followed by any free-form problem behaviors
    """
    issues = []

    if above(profile.aggression_level, AggressionLevel.NONE):
        issues.append(f"Aggression level {profile.aggression_level.value}")
    if above(profile.anxiety_level, AnxietyLevel.NONE):
        issues.append(f"Anxiety level {profile.anxiety_level.value}")
    if profile.separation_anxiety:
        issues.append("Separation anxiety")
    if profile.destructive_behavior:
        issues.append("Destructive behavior")
    if profile.excessive_vocalization:
        issues.append("Excessive vocalization")
    if profile.food_aggression:
        issues.append("Food aggression")
    if profile.resource_guarding:
        issues.append("Resource guarding")
    if profile.fear_based_aggression:
        issues.append("Fear-based aggression")

    issues.extend(profile.problematic_behaviors)
    return issues


def training_plan(profile: PetBehaviorProfile) -> List[str]:
    """Recommended training steps, most basic first."""
    plan = []

    if not profile.house_trained:
        plan.append("House training")
    if not profile.knows_basic_commands:
        plan.append("Basic commands (sit, stay, come, down)")
    if profile.leash_pulling:
        plan.append("Leash training")
    if profile.jumps_on_people:
        plan.append("Jump control")
    if profile.separation_anxiety:
        plan.append("Desensitization therapy for separation anxiety")
    if above(profile.aggression_level, AggressionLevel.NONE):
        plan.append("Specialized aggression management training")
    if at_least(profile.anxiety_level, AnxietyLevel.MODERATE):
        plan.append("Anxiety reduction and stress management techniques")
    if profile.fear_based_aggression:
        plan.append("Counter-conditioning and systematic desensitization")

    return plan


def needs_recent_behavioral_evaluation(profile: PetBehaviorProfile, as_of: Optional[DateLike] = None) -> bool:
    if not profile.last_behavioral_evaluation:
        return True
    cutoff = months_ago(settings.behavior_evaluation_max_months, as_of)
    return is_before(profile.last_behavioral_evaluation, cutoff)


# Activity

def is_exercise_adequate(profile: PetActivityProfile) -> bool:
    return _calculator.exercise_deficit(profile) <= 10


def is_apartment_suitable(profile: PetActivityProfile) -> bool:
    return (
        at_most(profile.activity_level, ActivityLevel.MODERATE)
        and at_most(profile.energy_level, EnergyLevel.MODERATE)
        and profile.exercise_preference != ExercisePreference.OUTDOOR_PREFERRED
        and profile.daily_exercise_minutes <= 60
    )


def is_suitable_for_family_play(profile: PetActivityProfile) -> bool:
    return (
        profile.good_with_children_play
        and profile.play_style != PlayStyle.VERY_ROUGH
        and not profile.gets_overstimulated
        and not profile.resource_guards_toys
    )


def activity_recommendations(profile: PetActivityProfile) -> List[str]:
    recommendations = []

    deficit = _calculator.exercise_deficit(profile)
    if deficit > 0:
        recommendations.append(f"Increase daily exercise by {deficit} minutes")
    if profile.destructive_when_bored:
        recommendations.append("Provide more mental stimulation and interactive toys")
    if profile.enjoys_water and any("swim" in activity.lower() for activity in profile.preferred_activities):
        recommendations.append("Include water activities in the routine")
    if profile.energy_level == EnergyLevel.HYPERACTIVE:
        recommendations.append("Consider high-intensity activities and impulse control training")
    if profile.mental_stimulation_minutes < 15:
        recommendations.append("Add 15-30 minutes of daily mental stimulation")

    return recommendations


# Nutrition

def has_excessive_treats(profile: PetNutritionProfile) -> bool:
    return _calculator.treat_percentage(profile) > settings.treat_calorie_limit


def is_recent_diet_change(profile: PetNutritionProfile, as_of: Optional[DateLike] = None) -> Optional[bool]:
    """True when the diet changed within the last month; None without a date."""
    if not profile.last_diet_change:
        return None
    return is_before(months_ago(1, as_of), profile.last_diet_change)


# Physical

def are_vaccinations_expired(profile: PetPhysicalProfile, as_of: Optional[DateLike] = None) -> Optional[bool]:
    if not profile.last_vaccination_date:
        return None
    return is_before(profile.last_vaccination_date, months_ago(12, as_of))


def is_deworming_expired(profile: PetPhysicalProfile, as_of: Optional[DateLike] = None) -> Optional[bool]:
    if not profile.last_deworming_date:
        return None
    return is_before(profile.last_deworming_date, months_ago(3, as_of))


def care_alerts(pet: Pet, as_of: Optional[DateLike] = None) -> List[str]:
    """
    Collect care reminders across every profile a pet has.

    Args:
        pet: Pet record
        as_of: Reference moment, defaults to now

    Returns:
        Human-readable alerts in profile order
    """
    alerts = []

    if pet.physical_profile:
        if are_vaccinations_expired(pet.physical_profile, as_of):
            alerts.append("Vaccinations are overdue")
        if is_deworming_expired(pet.physical_profile, as_of):
            alerts.append("Deworming is overdue")
        if _calculator.is_overweight(pet.physical_profile):
            alerts.append("Body mass index indicates overweight")

    if pet.nutrition_profile:
        if has_excessive_treats(pet.nutrition_profile):
            alerts.append("Treats exceed the recommended share of daily calories")
        weight = pet.physical_profile.weight if pet.physical_profile else None
        if _calculator.water_intake_adequate(pet.nutrition_profile, weight) is False:
            alerts.append("Water intake outside the recommended range")

    if pet.activity_profile and not is_exercise_adequate(pet.activity_profile):
        deficit = _calculator.exercise_deficit(pet.activity_profile)
        alerts.append(f"Exercise deficit of {deficit} minutes per day")

    if pet.behavior_profile and needs_recent_behavioral_evaluation(pet.behavior_profile, as_of):
        alerts.append("Behavioral evaluation is due")

    if pet.adoption_profile and is_long_stay(pet.adoption_profile):
        alerts.append(f"Long stay: {pet.adoption_profile.days_in_shelter} days in shelter")

    if alerts:
        logger.debug(f"{len(alerts)} care alerts for pet {pet.pet_id}")
    return alerts
