"""
Score calculator for pets and staff.

Applies weighted additions and deductions to a base value and maps counts and
years onto ordered bands. Every score is clamped to [0, 100].
"""

from typing import Dict, Any, List, Optional, Tuple
from loguru import logger

from ..schemas.pet_data import (
    AggressionLevel,
    AnxietyLevel,
    PetActivityProfile,
    PetAdoptionProfile,
    PetBehaviorProfile,
    PetNutritionProfile,
    PetPhysicalProfile,
    Temperament,
)
from ..schemas.staff_profile import (
    ExperienceProfile,
    Observations,
    SkillsProfile,
    SpecialtyProfile,
    VeterinarianSpecialty,
)
from ..schemas.results import (
    AuthorizationLevel,
    BehaviorAssessmentLevel,
    ExperienceBand,
    MaintenanceLevel,
    PerformanceLevel,
    SeniorityLevel,
    ShelterExperienceLevel,
    SpecializationLevel,
)
from .normalizer import (
    DateLike,
    at_least,
    clamp_score,
    days_until,
    meals_per_day,
    round_half_up,
    round_one_decimal,
    safe_ratio,
    to_fixed,
)

# Level scores used when combining bands into an overall level
LEVEL_SCORES = {
    ExperienceBand.ENTRY: 1,
    ExperienceBand.JUNIOR: 2,
    ExperienceBand.MID_LEVEL: 3,
    ExperienceBand.SENIOR: 4,
    ExperienceBand.EXPERT: 5,
    ExperienceBand.MASTER: 6,
    AuthorizationLevel.BASIC: 1,
    AuthorizationLevel.INTERMEDIATE: 2,
    AuthorizationLevel.ADVANCED: 3,
    AuthorizationLevel.EXPERT: 5,
}


class ScoreCalculator:
    """
    Rule-based scoring for adoptability, listing priority and staff levels.
    Weights are kept in dictionaries so each rule's contribution is explicit.
    """

    def __init__(self):
        """Initialize the rule weights."""
        self.adoption_weights = {
            "base": 100,
            "per_return": -15,
            "must_be_only_pet": -10,
            "requires_stay_at_home_owner": -15,
            "high_experience_required": -20,
            "apartment_friendly": 5,
            "good_with_kids": 5,
            "can_live_with_other_pets": 5,
            "featured": 10,
            "sponsored": 15,
        }
        # Cumulative: every threshold passed applies
        self.shelter_penalties: List[Tuple[int, int]] = [(30, -10), (90, -20), (180, -30)]

        self.behavior_weights = {
            "base": 50,
            "calm_temperament": 15,
            "good_with_children": 10,
            "good_with_dogs": 8,
            "house_trained": 10,
            "knows_basic_commands": 8,
            "no_aggression": 15,
            "low_anxiety": 10,
            "moderate_aggression": -30,
            "severe_anxiety": -20,
            "destructive_behavior": -10,
            "separation_anxiety": -15,
            "fear_based_aggression": -20,
        }

        self.listing_weights = {
            "base": 50,
            "urgent": 40,
            "featured": 30,
            "ease_bonus": 5,
            "must_be_only_pet": -10,
            "requires_stay_at_home_owner": -15,
            "high_experience_required": -10,
            "per_return": -5,
        }
        # Exclusive: only the highest tier passed applies
        self.listing_tiers: List[Tuple[int, int]] = [(180, 25), (90, 15), (30, 10)]

        self.high_experience_threshold = 7

    # Pet scores

    def adoption_adoptability_score(self, profile: PetAdoptionProfile) -> int:
        """
        Calculate adoptability from the adoption history of a pet.

        Args:
            profile: Adoption profile

        Returns:
            Score between 0 and 100
        """
        w = self.adoption_weights
        score = w["base"]

        for threshold, penalty in self.shelter_penalties:
            if profile.days_in_shelter > threshold:
                score += penalty

        score += w["per_return"] * profile.return_count

        if profile.must_be_only_pet:
            score += w["must_be_only_pet"]
        if profile.requires_stay_at_home_owner:
            score += w["requires_stay_at_home_owner"]
        if profile.required_experience_level > self.high_experience_threshold:
            score += w["high_experience_required"]

        if profile.apartment_friendly:
            score += w["apartment_friendly"]
        if profile.good_with_kids:
            score += w["good_with_kids"]
        if profile.can_live_with_other_pets:
            score += w["can_live_with_other_pets"]

        if profile.featured_pet:
            score += w["featured"]
        if profile.sponsored_adoption:
            score += w["sponsored"]

        result = clamp_score(score)
        logger.debug(f"Adoption adoptability: raw={score} clamped={result}")
        return result

    def behavior_adoptability_score(self, profile: PetBehaviorProfile) -> int:
        """
        Calculate adoptability from temperament, training and behavioral issues.

        Args:
            profile: Behavior profile

        Returns:
            Score between 0 and 100
        """
        w = self.behavior_weights
        score = w["base"]

        # Positive factors
        if profile.temperament in (Temperament.BALANCED, Temperament.CALM):
            score += w["calm_temperament"]
        if profile.good_with_children:
            score += w["good_with_children"]
        if profile.good_with_dogs:
            score += w["good_with_dogs"]
        if profile.house_trained:
            score += w["house_trained"]
        if profile.knows_basic_commands:
            score += w["knows_basic_commands"]
        if profile.aggression_level == AggressionLevel.NONE:
            score += w["no_aggression"]
        if profile.anxiety_level in (AnxietyLevel.NONE, AnxietyLevel.MILD):
            score += w["low_anxiety"]

        # Negative factors
        if at_least(profile.aggression_level, AggressionLevel.MODERATE):
            score += w["moderate_aggression"]
        if at_least(profile.anxiety_level, AnxietyLevel.SEVERE):
            score += w["severe_anxiety"]
        if profile.destructive_behavior:
            score += w["destructive_behavior"]
        if profile.separation_anxiety:
            score += w["separation_anxiety"]
        if profile.fear_based_aggression:
            score += w["fear_based_aggression"]

        result = clamp_score(score)
        logger.debug(f"Behavior adoptability: raw={score} clamped={result}")
        return result

    def listing_priority(self, profile: PetAdoptionProfile) -> int:
        """
        Calculate where a pet should appear in listings.

        Args:
            profile: Adoption profile

        Returns:
            Priority between 0 and 100
        """
        w = self.listing_weights
        priority = w["base"]

        if profile.urgent_adoption:
            priority += w["urgent"]
        if profile.featured_pet:
            priority += w["featured"]

        for threshold, bonus in self.listing_tiers:
            if profile.days_in_shelter > threshold:
                priority += bonus
                break

        if profile.apartment_friendly:
            priority += w["ease_bonus"]
        if profile.good_with_kids:
            priority += w["ease_bonus"]
        if profile.can_live_with_other_pets:
            priority += w["ease_bonus"]

        if profile.must_be_only_pet:
            priority += w["must_be_only_pet"]
        if profile.requires_stay_at_home_owner:
            priority += w["requires_stay_at_home_owner"]
        if profile.required_experience_level > self.high_experience_threshold:
            priority += w["high_experience_required"]

        priority += w["per_return"] * profile.return_count

        return clamp_score(priority)

    def application_rate(self, profile: PetAdoptionProfile) -> float:
        """Applications per day in the shelter, to two decimals."""
        if profile.days_in_shelter == 0:
            return 0.0
        return to_fixed(profile.application_count / profile.days_in_shelter, 2)

    def total_activity_minutes(self, profile: PetActivityProfile) -> int:
        return (
            profile.daily_exercise_minutes
            + profile.play_sessions_per_day * profile.play_session_duration
            + profile.mental_stimulation_minutes
        )

    def exercise_deficit(self, profile: PetActivityProfile) -> int:
        return max(0, profile.daily_exercise_minutes - profile.current_exercise_minutes)

    def exercise_compliance(self, profile: PetActivityProfile) -> float:
        """
        Percentage of the recommended exercise currently received.

        Args:
            profile: Activity profile

        Returns:
            Percentage capped at 100; 100 when no exercise is prescribed
        """
        if profile.daily_exercise_minutes == 0:
            return 100.0
        compliance = profile.current_exercise_minutes / profile.daily_exercise_minutes * 100
        return min(100.0, to_fixed(compliance, 1))

    def maintenance_level(self, profile: PetActivityProfile) -> MaintenanceLevel:
        total = self.total_activity_minutes(profile)
        if total <= 30:
            return MaintenanceLevel.LOW
        if total <= 60:
            return MaintenanceLevel.MEDIUM
        if total <= 120:
            return MaintenanceLevel.HIGH
        return MaintenanceLevel.VERY_HIGH

    def meals_per_day(self, profile: PetNutritionProfile) -> int:
        return meals_per_day(profile.feeding_frequency)

    def amount_per_meal(self, profile: PetNutritionProfile) -> float:
        """Grams per meal; free feeding returns the whole daily amount."""
        meals = self.meals_per_day(profile)
        if meals == 0:
            return profile.daily_amount_grams
        return to_fixed(profile.daily_amount_grams / meals, 2)

    def treat_percentage(self, profile: PetNutritionProfile) -> float:
        """
        Share of daily calories that comes from treats.

        Food and treats are both estimated at 4 kcal per gram.

        Args:
            profile: Nutrition profile

        Returns:
            Percentage to one decimal, 0 without treats
        """
        if not profile.daily_treat_allowance:
            return 0.0
        food_calories = profile.daily_amount_grams * 4
        treat_calories = profile.daily_treat_allowance * 4
        return to_fixed(treat_calories / (food_calories + treat_calories) * 100, 1)

    def water_intake_adequate(self, profile: PetNutritionProfile, weight_kg: Optional[float]) -> Optional[bool]:
        """Check water against 50-100 ml per kg; None when either value is missing."""
        if not profile.daily_water_intake or not weight_kg:
            return None
        return weight_kg * 50 <= profile.daily_water_intake <= weight_kg * 100

    def body_mass_index(self, profile: PetPhysicalProfile) -> Optional[float]:
        if not profile.height:
            return None
        height_m = profile.height / 100
        return to_fixed(profile.weight / (height_m * height_m), 2)

    def is_overweight(self, profile: PetPhysicalProfile) -> Optional[bool]:
        bmi = self.body_mass_index(profile)
        if not bmi:
            return None
        return bmi > 25

    # Staff bands

    def experience_band(self, years: float) -> ExperienceBand:
        """
        Map years of experience onto a band.

        Args:
            years: Years of experience

        Returns:
            Band; each upper bound is exclusive
        """
        if years < 1:
            return ExperienceBand.ENTRY
        if years < 3:
            return ExperienceBand.JUNIOR
        if years < 7:
            return ExperienceBand.MID_LEVEL
        if years < 12:
            return ExperienceBand.SENIOR
        if years < 20:
            return ExperienceBand.EXPERT
        return ExperienceBand.MASTER

    def shelter_experience_level(self, years: float) -> ShelterExperienceLevel:
        if years == 0:
            return ShelterExperienceLevel.NONE
        if years < 1:
            return ShelterExperienceLevel.BEGINNER
        if years < 3:
            return ShelterExperienceLevel.INTERMEDIATE
        if years < 7:
            return ShelterExperienceLevel.ADVANCED
        return ShelterExperienceLevel.EXPERT

    def behavior_assessment_level(self, years: float) -> BehaviorAssessmentLevel:
        if years == 0:
            return BehaviorAssessmentLevel.NONE
        if years < 1:
            return BehaviorAssessmentLevel.NOVICE
        if years < 3:
            return BehaviorAssessmentLevel.INTERMEDIATE
        if years < 6:
            return BehaviorAssessmentLevel.ADVANCED
        return BehaviorAssessmentLevel.EXPERT

    def seniority_level(self, years_since_graduation: int) -> SeniorityLevel:
        if years_since_graduation < 2:
            return SeniorityLevel.JUNIOR
        if years_since_graduation < 5:
            return SeniorityLevel.MID_LEVEL
        if years_since_graduation < 10:
            return SeniorityLevel.SENIOR
        return SeniorityLevel.EXPERT

    def success_rate(self, successes: int, total: int) -> int:
        """Success percentage, 0 when nothing has been attempted."""
        if total == 0:
            return 0
        return round_half_up(successes / total * 100)

    def performance_level(self, success_rate: float, accuracy_rate: float) -> PerformanceLevel:
        average = (success_rate + accuracy_rate) / 2
        if average >= 90:
            return PerformanceLevel.EXCELLENT
        if average >= 75:
            return PerformanceLevel.HIGH
        if average >= 60:
            return PerformanceLevel.MEDIUM
        return PerformanceLevel.LOW

    def authorization_level_for_count(self, count: int) -> AuthorizationLevel:
        if count == 0:
            return AuthorizationLevel.BASIC
        if count == 1:
            return AuthorizationLevel.INTERMEDIATE
        if count <= 2:
            return AuthorizationLevel.ADVANCED
        return AuthorizationLevel.EXPERT

    def authorization_count(self, skills: SkillsProfile) -> int:
        return sum([
            skills.behavior_assessment_authorized,
            skills.adoption_decision_authorized,
            skills.behavior_medication_authorized,
            skills.second_opinion_provider,
        ])

    def authorization_level(self, skills: SkillsProfile) -> AuthorizationLevel:
        return self.authorization_level_for_count(self.authorization_count(skills))

    def specialization_level_for_counts(self, specialty_count: int, certification_count: int) -> SpecializationLevel:
        """Level from raw counts, without regard to which specialty is primary."""
        if specialty_count == 1 and certification_count == 0:
            return SpecializationLevel.GENERAL
        if specialty_count == 1 or certification_count <= 2:
            return SpecializationLevel.SPECIALIST
        if specialty_count <= 3 or certification_count <= 5:
            return SpecializationLevel.MULTI_SPECIALIST
        return SpecializationLevel.EXPERT

    def specialization_level(
        self, specialty: SpecialtyProfile, as_of: Optional[DateLike] = None
    ) -> SpecializationLevel:
        """
        Level of a specialty profile, counting only active certifications.

        A general practitioner with no other specialty and no active
        certification is General; otherwise the count-based thresholds apply.

        Args:
            specialty: Specialty profile
            as_of: Reference moment, defaults to now

        Returns:
            Specialization level
        """
        specialty_count = len(self.all_specialties(specialty))
        active_certs = sum(1 for cert in specialty.certifications if days_until(cert.expiration_date, as_of) > 0)

        if (
            specialty.primary_specialty == VeterinarianSpecialty.GENERAL_PRACTICE
            and specialty_count == 1
            and active_certs == 0
        ):
            return SpecializationLevel.GENERAL
        if specialty_count == 1 or active_certs <= 2:
            return SpecializationLevel.SPECIALIST
        if specialty_count <= 3 or active_certs <= 5:
            return SpecializationLevel.MULTI_SPECIALIST
        return SpecializationLevel.EXPERT

    def all_specialties(self, specialty: SpecialtyProfile) -> List[VeterinarianSpecialty]:
        """Primary plus additional specialties, duplicates removed in order."""
        return list(dict.fromkeys([specialty.primary_specialty, *specialty.additional_specialties]))

    def overall_level(self, experience_years: float, authorization_count: int, specialty_count: int) -> SeniorityLevel:
        """
        Combine experience, authorizations and specialties into one level.

        Args:
            experience_years: Years of experience
            authorization_count: Number of granted authorizations
            specialty_count: Number of specialties

        Returns:
            Overall level
        """
        experience = self.experience_band(experience_years)
        authorization = self.authorization_level_for_count(authorization_count)
        average = (LEVEL_SCORES[experience] + LEVEL_SCORES[authorization] + specialty_count) / 3

        if average < 2:
            return SeniorityLevel.JUNIOR
        if average < 3.5:
            return SeniorityLevel.MID_LEVEL
        if average < 5:
            return SeniorityLevel.SENIOR
        return SeniorityLevel.EXPERT

    def specialization_percentages(self, experience: ExperienceProfile) -> Dict[str, int]:
        """Share of total experience spent in shelters and on behavior work."""
        total = experience.years_of_experience
        return {
            "shelter_percentage": round_half_up(safe_ratio(experience.shelter_experience, total) * 100),
            "behavior_percentage": round_half_up(safe_ratio(experience.behavior_assessment_experience, total) * 100),
        }

    def average_rating(self, observations: Observations) -> float:
        reviews = observations.performance_reviews
        if not reviews:
            return 0.0
        return round_one_decimal(sum(r.rating for r in reviews) / len(reviews))

    def profile_completeness(self, observations: Observations) -> int:
        """Completeness percentage: biography 40, interests 20, notes 20, reviews 20."""
        completeness = 0
        if observations.biography:
            completeness += 40
        if observations.special_interests:
            completeness += 20
        if observations.admin_notes:
            completeness += 20
        if observations.performance_reviews:
            completeness += 20
        return completeness

    def explain_adoption_score(self, profile: PetAdoptionProfile) -> Dict[str, Any]:
        """
        Break the adoption adoptability score into its contributions.

        Args:
            profile: Adoption profile

        Returns:
            Dictionary of rule name to points plus the final score
        """
        w = self.adoption_weights
        contributions: Dict[str, Any] = {"base": w["base"]}

        for threshold, penalty in self.shelter_penalties:
            if profile.days_in_shelter > threshold:
                contributions[f"shelter_over_{threshold}_days"] = penalty
        if profile.return_count:
            contributions["returns"] = w["per_return"] * profile.return_count
        for flag in ("must_be_only_pet", "requires_stay_at_home_owner", "apartment_friendly",
                     "good_with_kids", "can_live_with_other_pets"):
            if getattr(profile, flag):
                contributions[flag] = w[flag]
        if profile.required_experience_level > self.high_experience_threshold:
            contributions["high_experience_required"] = w["high_experience_required"]
        if profile.featured_pet:
            contributions["featured"] = w["featured"]
        if profile.sponsored_adoption:
            contributions["sponsored"] = w["sponsored"]

        contributions["score"] = self.adoption_adoptability_score(profile)
        return contributions
