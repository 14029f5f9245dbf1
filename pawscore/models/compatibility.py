"""
Compatibility matcher.

Pairs a subject profile (pet or staff) with a candidate (adopter, home,
lifestyle, role, task, case) and explains the verdict. Every rule is
evaluated on every call, in a fixed order, so concerns and recommendations
always come back in the same sequence.
"""

from typing import List, Optional
from loguru import logger

from ..schemas.candidates import (
    ActivityRequirements,
    AdopterCandidate,
    CaseRequirements,
    HomeEnvironment,
    HousingType,
    Lifestyle,
    RoleRequirements,
    TaskRequirements,
)
from ..schemas.pet_data import (
    ActivityLevel,
    ExercisePreference,
    IdealHomeType,
    PetActivityProfile,
    PetAdoptionProfile,
    PetBehaviorProfile,
)
from ..schemas.results import (
    AvailabilityResult,
    EvaluationResult,
    QualificationResult,
    ScoreResult,
    SeniorityLevel,
    SpecializationLevel,
)
from ..schemas.staff_profile import (
    AUTHORIZATION_NAMES,
    EmploymentProfile,
    ExperienceProfile,
    ProfessionalLicense,
    SkillsProfile,
    SpecialtyProfile,
    Veterinarian,
)
from . import pet_insights, staff_insights
from .normalizer import DateLike, at_least, clamp_score
from .score_calculator import ScoreCalculator

SPECIALIZATION_ORDER = [
    SpecializationLevel.GENERAL,
    SpecializationLevel.SPECIALIST,
    SpecializationLevel.MULTI_SPECIALIST,
    SpecializationLevel.EXPERT,
]

SENIORITY_ORDER = [
    SeniorityLevel.JUNIOR,
    SeniorityLevel.MID_LEVEL,
    SeniorityLevel.SENIOR,
    SeniorityLevel.EXPERT,
]


def _unique(items: List[str]) -> List[str]:
    """Drop duplicates, keeping the first occurrence."""
    return list(dict.fromkeys(items))


class CompatibilityMatcher:
    """
    Rule-based matcher between profiles and candidates.

    Pet matches start from a perfect score and deduct per violated rule.
    Staff requirement checks start from zero and add per met requirement.
    """

    def __init__(self, calculator: Optional[ScoreCalculator] = None):
        """
        Initialize the matcher.

        Args:
            calculator: Score calculator to use for bands and levels
        """
        self.calculator = calculator or ScoreCalculator()

        self.adopter_penalties = {
            "children": 50,
            "other_pets": 30,
            "apartment": 40,
            "yard": 30,
            "training_needed": 10,
            "time": 25,
            "budget": 20,
        }
        self.adopter_bonuses = {
            "ideal_home": 10,
            "experienced_adopter": 5,
        }
        self.home_penalties = {
            "children": 50,
            "training_time": 25,
        }
        self.fitness_points = {
            "minimum_years": 30,
            "shelter_experience": 25,
            "behavior_experience": 25,
            "preferred_positions": 15,
            "current_employment": 5,
        }
        self.competency_points = {
            "expertise": 30,
            "languages": 20,
            "authorizations": 25,
            "minimum_expertise": 10,
            "minimum_languages": 10,
            "multilingual": 5,
        }
        self.availability_points = {
            "weekly_hours": 30,
            "required_days": 25,
            "full_time": 20,
            "weekends": 15,
            "time_slots": 10,
        }
        self.specialty_points = 20

    # Pets

    def match_adopter(self, profile: PetAdoptionProfile, adopter: AdopterCandidate) -> ScoreResult:
        """
        Check an adopter against a pet's adoption requirements.

        Args:
            profile: Pet adoption profile
            adopter: Prospective adopter

        Returns:
            ScoreResult starting at 100, with deductions per violated rule
        """
        concerns = []
        recommendations = []
        score = 100
        compatible = True
        p = self.adopter_penalties

        if adopter.has_children and not profile.good_with_kids:
            compatible = False
            concerns.append("Not recommended for families with children")
            score -= p["children"]

        if profile.minimum_child_age and adopter.has_children and adopter.children_ages:
            if min(adopter.children_ages) < profile.minimum_child_age:
                compatible = False
                concerns.append(f"Requires children at least {profile.minimum_child_age} years old")

        if profile.must_be_only_pet and adopter.has_other_pets:
            compatible = False
            concerns.append("Must be the only pet in the home")
            score -= p["other_pets"]

        if not profile.apartment_friendly and adopter.housing_type == HousingType.APARTMENT:
            compatible = False
            concerns.append("Not suitable for apartment living")
            score -= p["apartment"]

        if profile.needs_yard and adopter.has_yard is False:
            compatible = False
            concerns.append("Requires a yard or garden")
            score -= p["yard"]

        if adopter.experience_level is not None and adopter.experience_level < profile.required_experience_level:
            gap = profile.required_experience_level - adopter.experience_level
            if gap > 3:
                compatible = False
                concerns.append("Requires a more experienced adopter")
            else:
                recommendations.append("We recommend training classes")
                score -= p["training_needed"]

        if adopter.time_available is not None and adopter.time_available < profile.minimum_time_commitment:
            compatible = False
            concerns.append(f"Requires at least {profile.minimum_time_commitment:g} hours of daily attention")
            score -= p["time"]

        if adopter.budget is not None and adopter.budget < profile.adoption_fee_amount:
            concerns.append("Adoption fee exceeds budget")
            if not profile.sponsored_adoption:
                compatible = False
                score -= p["budget"]
            else:
                recommendations.append("Sponsored adoption available")

        if adopter.housing_type == HousingType.HOUSE and profile.ideal_home_type == IdealHomeType.HOUSE_WITH_YARD:
            score += self.adopter_bonuses["ideal_home"]

        if adopter.experience_level is not None and adopter.experience_level > profile.required_experience_level + 2:
            score += self.adopter_bonuses["experienced_adopter"]

        result = ScoreResult(
            compatible=compatible,
            match_score=clamp_score(score),
            concerns=concerns,
            recommendations=recommendations,
        )
        logger.debug(f"Adopter match: compatible={result.compatible} score={result.match_score}")
        return result

    def match_home(self, profile: PetBehaviorProfile, home: HomeEnvironment) -> ScoreResult:
        """
        Check a home environment against a pet's behavior profile.

        Args:
            profile: Pet behavior profile
            home: Home environment

        Returns:
            ScoreResult starting at 100
        """
        concerns = []
        recommendations = []
        score = 100
        compatible = True

        if home.has_children and not pet_insights.is_suitable_for_families_with_children(profile):
            compatible = False
            concerns.append("Not recommended for families with children")
            score -= self.home_penalties["children"]

        if home.owner_experience is not None and home.owner_experience < profile.required_owner_experience:
            compatible = False
            concerns.append("Requires a more experienced owner")
            recommendations.append("Consider professional training classes")

        if (
            home.time_available is not None
            and pet_insights.needs_specialized_training(profile)
            and home.time_available < 2
        ):
            compatible = False
            concerns.append("Requires more time for specialized training")
            score -= self.home_penalties["training_time"]

        if home.has_other_pets and (not profile.good_with_dogs or not profile.good_with_cats):
            concerns.append("Gradual socialization with other pets required")
            recommendations.append("Supervised, gradual introduction")

        if home.apartment_living and (profile.excessive_vocalization or profile.destructive_behavior):
            concerns.append("May not be suitable for apartment living")
            recommendations.append("Training to reduce vocalization and destructiveness")

        return ScoreResult(
            compatible=compatible,
            match_score=clamp_score(score),
            concerns=concerns,
            recommendations=recommendations,
        )

    def is_compatible_with_lifestyle(self, profile: PetActivityProfile, lifestyle: Lifestyle) -> bool:
        """Check whether an adopter's lifestyle covers a pet's activity needs."""
        required_minutes = self.calculator.total_activity_minutes(profile)

        if lifestyle.available_time_minutes is not None and lifestyle.available_time_minutes < required_minutes:
            return False
        if profile.exercise_preference == ExercisePreference.OUTDOOR_PREFERRED and lifestyle.has_yard is False:
            return False
        if lifestyle.has_children and not pet_insights.is_suitable_for_family_play(profile):
            return False
        if at_least(profile.activity_level, ActivityLevel.HIGH) and lifestyle.active_family is False:
            return False
        return True

    # Staff

    def evaluate_role_fitness(
        self, experience: ExperienceProfile, requirements: RoleRequirements, as_of: Optional[DateLike] = None
    ) -> EvaluationResult:
        """
        Score work experience against a role.

        Args:
            experience: Experience profile
            requirements: Role requirements; only the experience fields apply
            as_of: Reference moment for open positions

        Returns:
            EvaluationResult starting at 0
        """
        strengths = []
        gaps = []
        recommendations = []
        score = 0
        pts = self.fitness_points

        if requirements.minimum_years:
            if experience.years_of_experience >= requirements.minimum_years:
                strengths.append(f"{experience.years_of_experience:g} years of general experience")
                score += pts["minimum_years"]
            else:
                gaps.append(
                    f"Requires {requirements.minimum_years:g} years, has {experience.years_of_experience:g}"
                )
                recommendations.append("Gain more general experience")

        if requirements.required_shelter_experience:
            if experience.shelter_experience >= requirements.required_shelter_experience:
                strengths.append(f"{experience.shelter_experience:g} years of shelter experience")
                score += pts["shelter_experience"]
            else:
                gaps.append(
                    f"Requires {requirements.required_shelter_experience:g} years in shelters, "
                    f"has {experience.shelter_experience:g}"
                )
                recommendations.append("Seek experience in shelters or rescues")

        if requirements.required_behavior_experience:
            if experience.behavior_assessment_experience >= requirements.required_behavior_experience:
                strengths.append(f"{experience.behavior_assessment_experience:g} years of behavioral assessments")
                score += pts["behavior_experience"]
            else:
                gaps.append(
                    f"Requires {requirements.required_behavior_experience:g} years in behavior, "
                    f"has {experience.behavior_assessment_experience:g}"
                )
                recommendations.append("Gain experience in behavioral assessments")

        if requirements.preferred_positions:
            matching = [
                position for position in requirements.preferred_positions
                if staff_insights.experience_in_position(experience, position, as_of) > 0
            ]
            if matching:
                strengths.append(f"Experience in relevant positions: {', '.join(matching)}")
                score += pts["preferred_positions"]
            else:
                recommendations.append(
                    f"Experience in {', '.join(requirements.preferred_positions)} would be beneficial"
                )

        if requirements.requires_current_employment:
            if staff_insights.current_positions(experience):
                strengths.append("Currently employed")
                score += pts["current_employment"]
            else:
                gaps.append("Not currently employed")

        return EvaluationResult(
            qualified=not gaps,
            score=clamp_score(score),
            strengths=strengths,
            gaps=gaps,
            recommendations=recommendations,
        )

    def evaluate_role_competency(self, skills: SkillsProfile, requirements: RoleRequirements) -> EvaluationResult:
        """
        Score expertise, languages and authorizations against a role.

        Args:
            skills: Skills profile
            requirements: Role requirements; only the skills fields apply

        Returns:
            EvaluationResult starting at 0
        """
        strengths = []
        gaps = []
        recommendations = []
        score = 0
        pts = self.competency_points

        if requirements.required_expertise:
            missing = [area for area in requirements.required_expertise if not skills.has_expertise(area)]
            if not missing:
                strengths.append(f"All required expertise: {', '.join(requirements.required_expertise)}")
                score += pts["expertise"]
            else:
                gaps.append(f"Missing expertise in: {', '.join(missing)}")
                recommendations.append(f"Develop skills in: {', '.join(missing)}")

        if requirements.required_languages:
            missing = [lang for lang in requirements.required_languages if not skills.speaks_language(lang)]
            if not missing:
                strengths.append(f"All required languages: {', '.join(requirements.required_languages)}")
                score += pts["languages"]
            else:
                gaps.append(f"Missing proficiency in: {', '.join(missing)}")
                recommendations.append(f"Learn: {', '.join(missing)}")

        if requirements.required_authorizations:
            missing = [auth for auth in requirements.required_authorizations if not skills.has_authorization(auth)]
            if not missing:
                strengths.append("All required authorizations")
                score += pts["authorizations"]
            else:
                names = ", ".join(AUTHORIZATION_NAMES[auth] for auth in missing)
                gaps.append(f"Missing authorization for: {names}")
                recommendations.append(f"Obtain authorization for: {names}")

        if requirements.minimum_expertise_areas:
            count = len(skills.areas_of_expertise)
            if count >= requirements.minimum_expertise_areas:
                strengths.append(f"{count} areas of expertise ({requirements.minimum_expertise_areas} required)")
                score += pts["minimum_expertise"]
            else:
                gaps.append(f"Only {count} areas of expertise, requires {requirements.minimum_expertise_areas}")
                recommendations.append("Develop more areas of specialization")

        if requirements.minimum_languages:
            count = len(skills.languages)
            if count >= requirements.minimum_languages:
                strengths.append(f"{count} languages ({requirements.minimum_languages} required)")
                score += pts["minimum_languages"]
            else:
                gaps.append(f"Only {count} languages, requires {requirements.minimum_languages}")
                recommendations.append("Learn additional languages")

        if requirements.requires_multilingual:
            if staff_insights.is_multilingual(skills):
                strengths.append("Multilingual")
                score += pts["multilingual"]
            else:
                gaps.append("Must be multilingual")
                recommendations.append("Learn at least one additional language")

        return EvaluationResult(
            qualified=not gaps,
            score=clamp_score(score),
            strengths=strengths,
            gaps=gaps,
            recommendations=recommendations,
        )

    def evaluate_availability_for_task(
        self, employee: EmploymentProfile, task: TaskRequirements
    ) -> AvailabilityResult:
        """
        Check a work schedule against a task's scheduling needs.

        Args:
            employee: Employment profile
            task: Task requirements

        Returns:
            AvailabilityResult starting at 0; available when nothing is missing
        """
        matched = []
        missing = []
        recommendations = []
        score = 0
        pts = self.availability_points

        if task.minimum_hours_per_week:
            weekly_hours = staff_insights.weekly_working_hours(employee)
            if weekly_hours >= task.minimum_hours_per_week:
                matched.append(f"{weekly_hours:g} weekly hours ({task.minimum_hours_per_week:g} required)")
                score += pts["weekly_hours"]
            else:
                missing.append(f"Requires {task.minimum_hours_per_week:g} hours, available {weekly_hours:g}")
                recommendations.append("Increase available working hours")

        if task.required_days:
            days = staff_insights.available_days(employee)
            missing_days = [day for day in task.required_days if day.lower() not in days]
            if not missing_days:
                matched.append(f"Available on all required days: {', '.join(task.required_days)}")
                score += pts["required_days"]
            else:
                missing.append(f"Not available: {', '.join(missing_days)}")
                recommendations.append(f"Add availability for: {', '.join(missing_days)}")

        if task.requires_full_time:
            if staff_insights.is_full_time(employee):
                matched.append("Full-time employee")
                score += pts["full_time"]
            else:
                missing.append("Requires full-time employment")
                recommendations.append("Switch to full-time employment")

        if task.requires_weekends:
            if staff_insights.works_on_day(employee, "saturday") or staff_insights.works_on_day(employee, "sunday"):
                matched.append("Available on weekends")
                score += pts["weekends"]
            else:
                missing.append("Requires weekend availability")
                recommendations.append("Add weekend availability")

        if task.preferred_time_slots:
            matching_slots = [
                slot for slot in task.preferred_time_slots
                if staff_insights.is_available_at(employee, slot.day, slot.start_time)
            ]
            if matching_slots:
                matched.append(f"Available in {len(matching_slots)} preferred time slots")
                score += pts["time_slots"]
            else:
                recommendations.append("Adjust schedule to match preferred time slots")

        return AvailabilityResult(
            available=not missing,
            score=clamp_score(score),
            matched_requirements=matched,
            missing_requirements=missing,
            recommendations=recommendations,
        )

    def qualify_for_case(
        self, specialty: SpecialtyProfile, case: CaseRequirements, as_of: Optional[DateLike] = None
    ) -> QualificationResult:
        """
        Check specialties and certifications against a case.

        Args:
            specialty: Specialty profile
            case: Case requirements
            as_of: Reference moment for certification expiry

        Returns:
            QualificationResult with one reason per unmet requirement
        """
        reasons = []
        recommendations = []

        if case.requires_ethology_specialist and not staff_insights.is_ethology_specialist(specialty):
            reasons.append("Requires an ethology specialist")
            recommendations.append("Obtain an animal behavior certification")

        if case.requires_shelter_medicine and not staff_insights.is_shelter_medicine_specialist(specialty):
            reasons.append("Requires a shelter medicine specialist")
            recommendations.append("Obtain a shelter medicine certification")

        if case.required_specialties:
            missing = [s.value for s in case.required_specialties if not staff_insights.has_specialty(specialty, s)]
            if missing:
                reasons.append(f"Missing specialties: {', '.join(missing)}")
                recommendations.append(f"Consider specializing in: {', '.join(missing)}")

        if case.required_certifications:
            missing = [
                cert for cert in case.required_certifications
                if not staff_insights.has_active_certification_by_type(specialty, cert, as_of)
            ]
            if missing:
                reasons.append(f"Missing certifications: {', '.join(missing)}")
                recommendations.append(f"Obtain certifications in: {', '.join(missing)}")

        if case.minimum_specialization_level:
            current = self.calculator.specialization_level(specialty, as_of)
            required = case.minimum_specialization_level
            if SPECIALIZATION_ORDER.index(current) < SPECIALIZATION_ORDER.index(required):
                reasons.append(
                    f"Insufficient specialization level ({current.value} < {required.value})"
                )
                recommendations.append("Broaden specialties and certifications")

        return QualificationResult(qualified=not reasons, reasons=reasons, recommendations=recommendations)

    def can_perform_activity(
        self, professional: ProfessionalLicense, activity: ActivityRequirements, as_of: Optional[DateLike] = None
    ) -> bool:
        """Check license validity, years since graduation and seniority for an activity."""
        if activity.requires_valid_license and not staff_insights.can_practice(professional, as_of):
            return False

        years = staff_insights.years_since_graduation(professional, as_of)
        if years < activity.minimum_years_required:
            return False

        if activity.minimum_seniority_level:
            current = self.calculator.seniority_level(years)
            if SENIORITY_ORDER.index(current) < SENIORITY_ORDER.index(activity.minimum_seniority_level):
                return False

        return True

    def evaluate_for_role(
        self, veterinarian: Veterinarian, requirements: RoleRequirements, as_of: Optional[DateLike] = None
    ) -> EvaluationResult:
        """
        Evaluate a whole veterinarian against a role.

        Experience, skills, specialty and employment are each evaluated when
        the veterinarian has that sub-profile. Points are summed and capped at
        100; text lists are merged with duplicates removed.

        Args:
            veterinarian: Veterinarian record
            requirements: Role requirements
            as_of: Reference moment, defaults to now

        Returns:
            EvaluationResult; qualified when no evaluation reported a gap
        """
        strengths: List[str] = []
        gaps: List[str] = []
        recommendations: List[str] = []
        matched: List[str] = []
        missing: List[str] = []
        score = 0

        if veterinarian.experience:
            fitness = self.evaluate_role_fitness(veterinarian.experience, requirements, as_of)
            score += fitness.score
            strengths.extend(fitness.strengths)
            gaps.extend(fitness.gaps)
            recommendations.extend(fitness.recommendations)

        if veterinarian.skills:
            competency = self.evaluate_role_competency(veterinarian.skills, requirements)
            score += competency.score
            strengths.extend(competency.strengths)
            gaps.extend(competency.gaps)
            recommendations.extend(competency.recommendations)

        if veterinarian.specialty:
            case = requirements.case_requirements()
            qualification = self.qualify_for_case(veterinarian.specialty, case, as_of)
            if qualification.qualified:
                if self._has_case_requirements(case):
                    strengths.append("Meets all specialty requirements")
                    score += self.specialty_points
            else:
                gaps.extend(qualification.reasons)
                missing.extend(qualification.reasons)
            recommendations.extend(qualification.recommendations)

        if veterinarian.employee:
            availability = self.evaluate_availability_for_task(veterinarian.employee, requirements.task_requirements())
            score += availability.score
            strengths.extend(availability.matched_requirements)
            gaps.extend(availability.missing_requirements)
            recommendations.extend(availability.recommendations)
            matched.extend(availability.matched_requirements)
            missing.extend(availability.missing_requirements)

        result = EvaluationResult(
            qualified=not gaps,
            score=clamp_score(score),
            strengths=_unique(strengths),
            gaps=_unique(gaps),
            recommendations=_unique(recommendations),
            matched_requirements=_unique(matched),
            missing_requirements=_unique(missing),
        )
        logger.info(
            f"Role evaluation for {veterinarian.account.account_id}: "
            f"qualified={result.qualified} score={result.score}"
        )
        return result

    @staticmethod
    def _has_case_requirements(case: CaseRequirements) -> bool:
        return bool(
            case.requires_ethology_specialist
            or case.requires_shelter_medicine
            or case.required_specialties
            or case.required_certifications
            or case.minimum_specialization_level
        )
