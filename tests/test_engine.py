"""
End-to-end tests for the PawScore scoring engine.
Tests pet reports, adopter ranking, veterinarian evaluation and the CLI.
"""

import json
import pytest
from datetime import date

from pawscore import ScoringEngine
from pawscore.engine import main
from pawscore.schemas.account import Account
from pawscore.schemas.candidates import AdopterCandidate, HomeEnvironment, Lifestyle, RoleRequirements
from pawscore.schemas.pet_data import (
    Pet,
    PetActivityProfile,
    PetAdoptionProfile,
    PetBehaviorProfile,
    PetPhysicalProfile,
)
from pawscore.schemas.results import MaintenanceLevel
from pawscore.schemas.staff_profile import (
    ExperienceProfile,
    ProfessionalLicense,
    SkillsProfile,
    SpecialtyProfile,
    Veterinarian,
    VeterinarianSpecialty,
)


AS_OF = date(2024, 6, 1)


@pytest.fixture
def engine():
    """Create a scoring engine for testing."""
    return ScoringEngine()


@pytest.fixture
def adopter():
    """Create an adopter with a young child and some experience."""
    return AdopterCandidate(has_children=True, children_ages=[6], experience_level=3)


@pytest.fixture
def pets():
    """Create a mix of pets for ranking."""
    return [
        Pet(pet_id="pet_kids", name="Bella", age=20, adoption_profile=PetAdoptionProfile(good_with_kids=False)),
        Pet(pet_id="pet_easy", name="Buddy", age=30, adoption_profile=PetAdoptionProfile()),
        Pet(pet_id="pet_none", name="Ghost", age=12),
        Pet(pet_id="pet_exp", name="Rocky", age=48,
            adoption_profile=PetAdoptionProfile(required_experience_level=5)),
        Pet(pet_id="pet_long", name="Daisy", age=60, adoption_profile=PetAdoptionProfile(days_in_shelter=200)),
    ]


class TestPetScoring:
    """Tests for pet reports and single-pet matching."""

    def test_score_pet_full(self, engine):
        pet = Pet(
            pet_id="pet_001",
            name="Max",
            age=26,
            physical_profile=PetPhysicalProfile(weight=25, last_vaccination_date=date(2024, 1, 10)),
            activity_profile=PetActivityProfile(daily_exercise_minutes=60, current_exercise_minutes=60),
            behavior_profile=PetBehaviorProfile(last_behavioral_evaluation=date(2024, 4, 1)),
            adoption_profile=PetAdoptionProfile(days_in_shelter=45, application_count=10),
        )
        report = engine.score_pet(pet, AS_OF)

        assert report.adoptability_score == 100
        assert report.behavior_adoptability_score == 100
        assert report.listing_priority == 75
        assert report.maintenance_level == MaintenanceLevel.HIGH
        assert report.needs_special_promotion is False
        assert report.needs_specialized_training is False
        assert report.alerts == []

    def test_score_pet_without_profiles(self, engine):
        report = engine.score_pet(Pet(pet_id="pet_002", name="Milo", age=3), AS_OF)

        assert report.adoptability_score is None
        assert report.maintenance_level is None
        assert report.alerts == []

    def test_match_requires_adoption_profile(self, engine, adopter):
        with pytest.raises(ValueError):
            engine.match_adopter(Pet(pet_id="pet_003", name="Nala", age=8), adopter)

    def test_home_and_lifestyle(self, engine):
        pet = Pet(
            pet_id="pet_004",
            name="Thor",
            age=36,
            behavior_profile=PetBehaviorProfile(destructive_behavior=True),
            activity_profile=PetActivityProfile(),
        )

        home = engine.match_home(pet, HomeEnvironment(time_available=1, apartment_living=True))
        assert home.compatible is False
        assert home.match_score == 75

        assert engine.fits_lifestyle(pet, Lifestyle(available_time_minutes=90))
        with pytest.raises(ValueError):
            engine.fits_lifestyle(Pet(pet_id="pet_005", name="Kit", age=2), Lifestyle())


class TestRanking:
    """Tests for ranking pets for an adopter."""

    def test_rank_pets(self, engine, adopter, pets):
        """Test compatible pets are ranked by match score, then adoptability."""
        ranked = engine.rank_pets_for_adopter(adopter, pets)

        assert [r.pet_id for r in ranked] == ["pet_easy", "pet_long", "pet_exp"]
        assert [r.rank for r in ranked] == [1, 2, 3]
        assert ranked[1].adoptability_score == 55
        assert ranked[2].match.match_score == 90

    def test_rank_includes_incompatible_last(self, engine, adopter, pets):
        ranked = engine.rank_pets_for_adopter(adopter, pets, include_incompatible=True)

        assert ranked[-1].pet_id == "pet_kids"
        assert ranked[-1].match.compatible is False

    def test_rank_top_k(self, engine, adopter, pets):
        ranked = engine.rank_pets_for_adopter(adopter, pets, top_k=2)
        assert [r.pet_id for r in ranked] == ["pet_easy", "pet_long"]

    def test_rank_top_k_zero(self, engine, adopter, pets):
        assert engine.rank_pets_for_adopter(adopter, pets, top_k=0) == []
        assert len(engine.rank_pets_for_adopter(adopter, pets, top_k=None)) == 3

    def test_rank_empty(self, engine, adopter):
        assert engine.rank_pets_for_adopter(adopter, []) == []


class TestVeterinarianEvaluation:
    """Tests for whole-veterinarian evaluation and reporting."""

    @pytest.fixture
    def veterinarian(self):
        return Veterinarian(
            account=Account(account_id="vet_001", email="ana@example.com", first_name="Ana", last_name="Lopez"),
            professional=ProfessionalLicense(
                license_number="CA123456",
                license_issue_date=date(2014, 7, 1),
                license_expiration_date=date(2026, 7, 1),
                graduation_date=date(2014, 6, 1),
            ),
            specialty=SpecialtyProfile(
                primary_specialty=VeterinarianSpecialty.ETHOLOGY,
                additional_specialties=[VeterinarianSpecialty.SHELTER_MEDICINE],
            ),
            experience=ExperienceProfile(years_of_experience=10, shelter_experience=6),
            skills=SkillsProfile(
                languages=["English", "Spanish"],
                behavior_assessment_authorized=True,
                adoption_decision_authorized=True,
            ),
        )

    def test_evaluate_for_role(self, engine, veterinarian):
        requirements = RoleRequirements(
            minimum_years=5,
            required_shelter_experience=5,
            requires_ethology_specialist=True,
            requires_multilingual=True,
        )
        result = engine.evaluate_veterinarian_for_role(veterinarian, requirements, AS_OF)

        assert result.qualified is True
        assert result.score == 30 + 25 + 5 + 20

    def test_veterinarian_report(self, engine, veterinarian):
        report = engine.veterinarian_report(veterinarian, AS_OF)

        assert report["name"] == "Ana Lopez"
        assert report["is_active"] is True
        assert report["license"]["is_valid"] is True
        assert report["validation"]["is_valid"] is True
        assert report["specialty"]["capabilities"] == [
            "Behavioral assessments",
            "Ethology specialist",
            "Shelter medicine",
        ]
        assert report["overall_level"] == "Mid-Level"
        assert "employment" not in report


class TestCommandLine:
    """Tests for the command-line entry point."""

    def test_main_scores_pet_and_adopter(self, tmp_path, capsys):
        pet_path = tmp_path / "pet.json"
        pet_path.write_text(json.dumps({
            "pet_id": "pet_cli",
            "name": "Max",
            "age": 26,
            "breed": "Labrador Retriever",
            "adoption_profile": {"days_in_shelter": 45, "needs_yard": True},
        }))
        adopter_path = tmp_path / "adopter.json"
        adopter_path.write_text(json.dumps({"housing_type": "apartment", "has_yard": False}))

        exit_code = main(["--pet", str(pet_path), "--adopter", str(adopter_path), "--as-of", "2024-06-01"])
        output = json.loads(capsys.readouterr().out)

        assert exit_code == 0
        assert output["pet"]["age"] == "2 years and 2 months"
        assert output["report"]["adoptability_score"] == 100
        assert output["match"]["compatible"] is False
        assert output["match"]["concerns"] == ["Requires a yard or garden"]

    def test_main_rejects_invalid_pet(self, tmp_path, capsys):
        pet_path = tmp_path / "pet.json"
        pet_path.write_text(json.dumps({"pet_id": "pet_bad", "name": "Rex"}))

        assert main(["--pet", str(pet_path)]) == 1
        assert "Invalid pet document" in capsys.readouterr().err

    def test_main_missing_file(self, tmp_path):
        assert main(["--pet", str(tmp_path / "missing.json")]) == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
