"""
Unit tests for Compatibility Matcher.
"""

import pytest
from datetime import date

from pawscore.models.compatibility import CompatibilityMatcher
from pawscore.schemas.account import Account
from pawscore.schemas.candidates import (
    ActivityRequirements,
    AdopterCandidate,
    CaseRequirements,
    HomeEnvironment,
    HousingType,
    Lifestyle,
    RoleRequirements,
    TaskRequirements,
    TimeSlot,
)
from pawscore.schemas.pet_data import (
    ActivityLevel,
    AggressionLevel,
    ExercisePreference,
    IdealHomeType,
    PetActivityProfile,
    PetAdoptionProfile,
    PetBehaviorProfile,
    PlayStyle,
)
from pawscore.schemas.results import SeniorityLevel, SpecializationLevel
from pawscore.schemas.staff_profile import (
    Authorization,
    Certification,
    CertificationStatus,
    EmploymentProfile,
    EmploymentStatus,
    ExperienceProfile,
    ProfessionalLicense,
    SkillsProfile,
    SpecialtyProfile,
    Veterinarian,
    VeterinarianSpecialty,
    WorkHistoryEntry,
    WorkingHoursEntry,
)


AS_OF = date(2024, 6, 1)


@pytest.fixture
def matcher():
    """Create a CompatibilityMatcher instance for testing."""
    return CompatibilityMatcher()


class TestAdopterMatching:
    """Unit tests for matching adopters against adoption profiles."""

    def test_children_not_allowed(self, matcher):
        """Test a family with children is incompatible with a pet not good with kids."""
        result = matcher.match_adopter(
            PetAdoptionProfile(good_with_kids=False),
            AdopterCandidate(has_children=True),
        )

        assert result.compatible is False
        assert any("not recommended for families with children" in c.lower() for c in result.concerns)
        assert result.match_score == 50

    def test_perfect_match(self, matcher):
        result = matcher.match_adopter(PetAdoptionProfile(), AdopterCandidate())

        assert result.compatible is True
        assert result.match_score == 100
        assert result.concerns == []
        assert result.recommendations == []

    def test_missing_adopter_fields_place_no_constraint(self, matcher):
        """Test absent yard, experience, time and budget skip their rules."""
        profile = PetAdoptionProfile(
            needs_yard=True,
            required_experience_level=9,
            minimum_time_commitment=6,
            adoption_fee_amount=500,
        )
        result = matcher.match_adopter(profile, AdopterCandidate())

        assert result.compatible is True
        assert result.match_score == 100
        assert result.concerns == []

    def test_minimum_child_age(self, matcher):
        profile = PetAdoptionProfile(minimum_child_age=8)

        young = matcher.match_adopter(profile, AdopterCandidate(has_children=True, children_ages=[5, 10]))
        assert young.compatible is False
        assert "Requires children at least 8 years old" in young.concerns
        assert young.match_score == 100

        older = matcher.match_adopter(profile, AdopterCandidate(has_children=True, children_ages=[9, 12]))
        assert older.compatible is True

        unknown = matcher.match_adopter(profile, AdopterCandidate(has_children=True))
        assert unknown.compatible is True

    def test_housing_rules(self, matcher):
        """Test only-pet, apartment and yard rules deduct and flag incompatibility."""
        profile = PetAdoptionProfile(must_be_only_pet=True, apartment_friendly=False, needs_yard=True)
        adopter = AdopterCandidate(has_other_pets=True, housing_type=HousingType.APARTMENT, has_yard=False)

        result = matcher.match_adopter(profile, adopter)

        assert result.compatible is False
        assert result.concerns == [
            "Must be the only pet in the home",
            "Not suitable for apartment living",
            "Requires a yard or garden",
        ]
        assert result.match_score == 0

    def test_small_experience_gap_is_a_recommendation(self, matcher):
        result = matcher.match_adopter(
            PetAdoptionProfile(required_experience_level=5),
            AdopterCandidate(experience_level=3),
        )

        assert result.compatible is True
        assert result.recommendations == ["We recommend training classes"]
        assert result.match_score == 90

    def test_large_experience_gap_is_incompatible(self, matcher):
        result = matcher.match_adopter(
            PetAdoptionProfile(required_experience_level=8),
            AdopterCandidate(experience_level=2),
        )

        assert result.compatible is False
        assert "Requires a more experienced adopter" in result.concerns

    def test_time_commitment(self, matcher):
        result = matcher.match_adopter(
            PetAdoptionProfile(minimum_time_commitment=3),
            AdopterCandidate(time_available=1.5),
        )

        assert result.compatible is False
        assert "Requires at least 3 hours of daily attention" in result.concerns
        assert result.match_score == 75

    def test_budget_with_and_without_sponsor(self, matcher):
        """Test a sponsored adoption keeps an over-budget adopter compatible."""
        adopter = AdopterCandidate(budget=50)

        unsponsored = matcher.match_adopter(PetAdoptionProfile(adoption_fee_amount=150), adopter)
        assert unsponsored.compatible is False
        assert unsponsored.match_score == 80

        sponsored = matcher.match_adopter(
            PetAdoptionProfile(adoption_fee_amount=150, sponsored_adoption=True), adopter
        )
        assert sponsored.compatible is True
        assert sponsored.concerns == ["Adoption fee exceeds budget"]
        assert sponsored.recommendations == ["Sponsored adoption available"]
        assert sponsored.match_score == 100

    def test_bonuses_are_clamped(self, matcher):
        profile = PetAdoptionProfile(ideal_home_type=IdealHomeType.HOUSE_WITH_YARD, required_experience_level=2)
        adopter = AdopterCandidate(housing_type=HousingType.HOUSE, has_yard=True, experience_level=8)

        assert matcher.match_adopter(profile, adopter).match_score == 100

    def test_matching_is_deterministic(self, matcher):
        profile = PetAdoptionProfile(good_with_kids=False, must_be_only_pet=True)
        adopter = AdopterCandidate(has_children=True, has_other_pets=True)
        snapshot = (profile.model_dump(), adopter.model_dump())

        assert matcher.match_adopter(profile, adopter) == matcher.match_adopter(profile, adopter)
        assert (profile.model_dump(), adopter.model_dump()) == snapshot


class TestHomeAndLifestyle:
    """Unit tests for home environment and lifestyle checks."""

    def test_home_with_children(self, matcher):
        profile = PetBehaviorProfile(aggression_level=AggressionLevel.MODERATE)
        result = matcher.match_home(profile, HomeEnvironment(has_children=True))

        assert result.compatible is False
        assert result.match_score == 50

    def test_inexperienced_owner(self, matcher):
        profile = PetBehaviorProfile(required_owner_experience=6, children_comfort_level=8)
        result = matcher.match_home(profile, HomeEnvironment(owner_experience=3))

        assert result.compatible is False
        assert result.concerns == ["Requires a more experienced owner"]
        assert result.recommendations == ["Consider professional training classes"]
        assert result.match_score == 100

    def test_training_time(self, matcher):
        profile = PetBehaviorProfile(separation_anxiety=True)
        result = matcher.match_home(profile, HomeEnvironment(time_available=1))

        assert result.compatible is False
        assert result.match_score == 75

    def test_soft_concerns_keep_compatibility(self, matcher):
        """Test other pets and apartment issues only add advice."""
        profile = PetBehaviorProfile(good_with_cats=False, excessive_vocalization=True)
        result = matcher.match_home(profile, HomeEnvironment(has_other_pets=True, apartment_living=True))

        assert result.compatible is True
        assert result.concerns == [
            "Gradual socialization with other pets required",
            "May not be suitable for apartment living",
        ]
        assert result.match_score == 100

    def test_lifestyle_time(self, matcher):
        profile = PetActivityProfile()
        assert matcher.is_compatible_with_lifestyle(profile, Lifestyle(available_time_minutes=60))
        assert not matcher.is_compatible_with_lifestyle(profile, Lifestyle(available_time_minutes=45))
        assert matcher.is_compatible_with_lifestyle(profile, Lifestyle())

    def test_lifestyle_yard_children_and_activity(self, matcher):
        outdoor = PetActivityProfile(exercise_preference=ExercisePreference.OUTDOOR_PREFERRED)
        assert not matcher.is_compatible_with_lifestyle(outdoor, Lifestyle(has_yard=False))
        assert matcher.is_compatible_with_lifestyle(outdoor, Lifestyle(has_yard=True))

        rough = PetActivityProfile(play_style=PlayStyle.VERY_ROUGH)
        assert not matcher.is_compatible_with_lifestyle(rough, Lifestyle(has_children=True))

        energetic = PetActivityProfile(activity_level=ActivityLevel.HIGH)
        assert not matcher.is_compatible_with_lifestyle(energetic, Lifestyle(active_family=False))
        assert matcher.is_compatible_with_lifestyle(energetic, Lifestyle(active_family=True))

    def test_empty_lifestyle_places_no_constraint(self, matcher):
        """Test unknown yard, family activity and children never reject a pet."""
        profile = PetActivityProfile(
            activity_level=ActivityLevel.HIGH,
            exercise_preference=ExercisePreference.OUTDOOR_PREFERRED,
            play_style=PlayStyle.VERY_ROUGH,
        )

        assert matcher.is_compatible_with_lifestyle(profile, Lifestyle())


class TestStaffEvaluation:
    """Unit tests for role, task, case and activity evaluations."""

    @pytest.fixture
    def experience(self):
        return ExperienceProfile(
            years_of_experience=8,
            shelter_experience=3,
            behavior_assessment_experience=1,
            work_history=[
                WorkHistoryEntry(position="Shelter Veterinarian", organization="City Shelter",
                                 start_date=date(2019, 1, 1)),
                WorkHistoryEntry(position="Associate Veterinarian", organization="Pet Clinic",
                                 start_date=date(2016, 1, 1), end_date=date(2018, 12, 31)),
            ],
        )

    @pytest.fixture
    def skills(self):
        return SkillsProfile(
            areas_of_expertise=["Behavior assessment", "Surgery"],
            languages=["English", "Spanish"],
            behavior_assessment_authorized=True,
        )

    @pytest.fixture
    def employee(self):
        return EmploymentProfile(
            employment_status=EmploymentStatus.FULL_TIME,
            start_date=date(2019, 1, 1),
            working_hours=[
                WorkingHoursEntry(day=day, start_time="09:00", end_time="17:00")
                for day in ["monday", "tuesday", "wednesday", "thursday", "saturday"]
            ],
        )

    def test_role_fitness(self, matcher, experience):
        requirements = RoleRequirements(
            minimum_years=5,
            required_shelter_experience=2,
            required_behavior_experience=3,
            preferred_positions=["Shelter"],
            requires_current_employment=True,
        )
        result = matcher.evaluate_role_fitness(experience, requirements, AS_OF)

        assert result.qualified is False
        assert result.score == 30 + 25 + 15 + 5
        assert result.gaps == ["Requires 3 years in behavior, has 1"]
        assert "Currently employed" in result.strengths

    def test_empty_requirements_score_zero(self, matcher, experience):
        """Test no requirements means no points and no gaps."""
        result = matcher.evaluate_role_fitness(experience, RoleRequirements(), AS_OF)

        assert result.qualified is True
        assert result.score == 0

    def test_role_competency(self, matcher, skills):
        requirements = RoleRequirements(
            required_expertise=["behavior"],
            required_languages=["spanish"],
            required_authorizations=[Authorization.BEHAVIOR_ASSESSMENT, Authorization.ADOPTION_DECISION],
            minimum_expertise_areas=2,
            requires_multilingual=True,
        )
        result = matcher.evaluate_role_competency(skills, requirements)

        assert result.qualified is False
        assert result.score == 30 + 20 + 10 + 5
        assert result.gaps == ["Missing authorization for: Adoption decisions"]

    def test_availability_for_task(self, matcher, employee):
        task = TaskRequirements(
            minimum_hours_per_week=40,
            required_days=["Monday", "Friday"],
            requires_full_time=True,
            requires_weekends=True,
            preferred_time_slots=[TimeSlot(day="tuesday", start_time="10:00", end_time="12:00")],
        )
        result = matcher.evaluate_availability_for_task(employee, task)

        assert result.available is False
        assert result.missing_requirements == ["Not available: Friday"]
        assert result.score == 30 + 20 + 15 + 10

    def test_weekend_entry_without_hours(self, matcher):
        """Test a weekend day with no start or end time is not weekend availability."""
        employee = EmploymentProfile(
            start_date=date(2019, 1, 1),
            working_hours=[
                WorkingHoursEntry(day="monday", start_time="09:00", end_time="17:00"),
                WorkingHoursEntry(day="saturday"),
            ],
        )
        result = matcher.evaluate_availability_for_task(employee, TaskRequirements(requires_weekends=True))

        assert result.available is False
        assert result.score == 0
        assert result.missing_requirements == ["Requires weekend availability"]

    def test_qualify_for_case(self, matcher):
        specialty = SpecialtyProfile(
            primary_specialty=VeterinarianSpecialty.SHELTER_MEDICINE,
            certifications=[
                Certification(name="Fear Free Certification", issued_by="Fear Free",
                              issue_date=date(2023, 1, 1), expiration_date=date(2025, 1, 1)),
            ],
        )
        case = CaseRequirements(
            requires_ethology_specialist=True,
            requires_shelter_medicine=True,
            required_certifications=["fear free"],
            minimum_specialization_level=SpecializationLevel.MULTI_SPECIALIST,
        )
        result = matcher.qualify_for_case(specialty, case, AS_OF)

        assert result.qualified is False
        assert result.reasons == [
            "Requires an ethology specialist",
            "Insufficient specialization level (Specialist < Multi-Specialist)",
        ]

    def test_can_perform_activity(self, matcher):
        professional = ProfessionalLicense(
            license_number="CA123456",
            license_issue_date=date(2018, 7, 1),
            license_expiration_date=date(2026, 7, 1),
            graduation_date=date(2018, 6, 1),
        )

        assert matcher.can_perform_activity(professional, ActivityRequirements(minimum_years_required=5), AS_OF)
        assert not matcher.can_perform_activity(
            professional, ActivityRequirements(minimum_seniority_level=SeniorityLevel.EXPERT), AS_OF
        )

        suspended = professional.model_copy(update={"license_status": CertificationStatus.SUSPENDED})
        assert not matcher.can_perform_activity(suspended, ActivityRequirements(), AS_OF)
        assert matcher.can_perform_activity(suspended, ActivityRequirements(requires_valid_license=False), AS_OF)

    def test_evaluate_for_role(self, matcher, experience, skills, employee):
        """Test the whole-veterinarian evaluation sums every sub-evaluation."""
        veterinarian = Veterinarian(
            account=Account(account_id="vet_001", email="ana@example.com", first_name="Ana", last_name="Lopez"),
            experience=experience,
            skills=skills,
            specialty=SpecialtyProfile(primary_specialty=VeterinarianSpecialty.SHELTER_MEDICINE),
            employee=employee,
        )
        requirements = RoleRequirements(
            minimum_years=5,
            required_languages=["english"],
            requires_shelter_medicine=True,
            requires_full_time=True,
        )
        result = matcher.evaluate_for_role(veterinarian, requirements, AS_OF)

        assert result.qualified is True
        assert result.score == 30 + 20 + 20 + 20
        assert "Meets all specialty requirements" in result.strengths
        assert result.matched_requirements == ["Full-time employee"]

    def test_evaluate_for_role_reports_specialty_gaps(self, matcher):
        veterinarian = Veterinarian(
            account=Account(account_id="vet_002", email="sam@example.com", first_name="Sam", last_name="Reed"),
            specialty=SpecialtyProfile(),
        )
        result = matcher.evaluate_for_role(veterinarian, RoleRequirements(requires_ethology_specialist=True), AS_OF)

        assert result.qualified is False
        assert result.gaps == ["Requires an ethology specialist"]
        assert result.missing_requirements == ["Requires an ethology specialist"]
        assert result.score == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
