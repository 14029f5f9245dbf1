"""
PawScore engine.

Composes the score calculator and compatibility matcher into the operations
callers use: full pet reports, adopter matching and ranking, and whole
veterinarian evaluations.
"""

import sys
from typing import Any, Dict, List, Optional
from loguru import logger

from .config import settings
from .schemas.candidates import AdopterCandidate, HomeEnvironment, Lifestyle, RoleRequirements
from .schemas.pet_data import Pet
from .schemas.results import EvaluationResult, PetReport, RankedPet, ScoreResult
from .schemas.staff_profile import Veterinarian
from .models.score_calculator import ScoreCalculator
from .models.compatibility import CompatibilityMatcher
from .models import pet_insights, staff_insights
from .models.normalizer import DateLike


class ScoringEngine:
    """
    Entry point for scoring pets and veterinarians.
    Holds one calculator and one matcher; every operation is a pure function
    of its inputs.
    """

    def __init__(self):
        """Initialize the engine."""
        self.calculator = ScoreCalculator()
        self.matcher = CompatibilityMatcher(self.calculator)
        self.top_k = settings.recommendation_top_k
        logger.info("ScoringEngine initialized")

    def score_pet(self, pet: Pet, as_of: Optional[DateLike] = None) -> PetReport:
        """
        Compute every intrinsic score available for a pet.

        Scores for missing profiles are left empty.

        Args:
            pet: Pet record
            as_of: Reference moment, defaults to now

        Returns:
            PetReport
        """
        report = PetReport(pet_id=pet.pet_id, name=pet.name)

        if pet.adoption_profile:
            report.adoptability_score = self.calculator.adoption_adoptability_score(pet.adoption_profile)
            report.listing_priority = self.calculator.listing_priority(pet.adoption_profile)
            report.needs_special_promotion = pet_insights.needs_special_promotion(pet.adoption_profile)

        if pet.behavior_profile:
            report.behavior_adoptability_score = self.calculator.behavior_adoptability_score(pet.behavior_profile)
            report.needs_specialized_training = pet_insights.needs_specialized_training(pet.behavior_profile)

        if pet.activity_profile:
            report.maintenance_level = self.calculator.maintenance_level(pet.activity_profile)

        report.alerts = pet_insights.care_alerts(pet, as_of)
        logger.debug(f"Scored pet {pet.pet_id}: adoptability={report.adoptability_score}")
        return report

    def match_adopter(self, pet: Pet, adopter: AdopterCandidate) -> ScoreResult:
        """
        Match an adopter against a pet's adoption requirements.

        Args:
            pet: Pet record with an adoption profile
            adopter: Prospective adopter

        Returns:
            ScoreResult

        Raises:
            ValueError: If the pet has no adoption profile
        """
        if not pet.adoption_profile:
            raise ValueError(f"Pet {pet.pet_id} has no adoption profile")
        return self.matcher.match_adopter(pet.adoption_profile, adopter)

    def match_home(self, pet: Pet, home: HomeEnvironment) -> ScoreResult:
        if not pet.behavior_profile:
            raise ValueError(f"Pet {pet.pet_id} has no behavior profile")
        return self.matcher.match_home(pet.behavior_profile, home)

    def fits_lifestyle(self, pet: Pet, lifestyle: Lifestyle) -> bool:
        if not pet.activity_profile:
            raise ValueError(f"Pet {pet.pet_id} has no activity profile")
        return self.matcher.is_compatible_with_lifestyle(pet.activity_profile, lifestyle)

    def rank_pets_for_adopter(
        self,
        adopter: AdopterCandidate,
        pets: List[Pet],
        top_k: Optional[int] = None,
        include_incompatible: bool = False,
    ) -> List[RankedPet]:
        """
        Rank pets for one adopter.

        Compatible pets come first, then higher match scores, then higher
        adoptability. Pets that cannot be scored are logged and skipped.

        Args:
            adopter: Prospective adopter
            pets: Candidate pets
            top_k: Number of pets to return (default from settings)
            include_incompatible: Keep pets that violate a hard constraint

        Returns:
            Ranked pets, best first
        """
        if top_k is None:
            top_k = self.top_k
        logger.info(f"Ranking {len(pets)} pets for adopter")

        scored = []
        for pet in pets:
            try:
                match = self.match_adopter(pet, adopter)
                adoptability = self.calculator.adoption_adoptability_score(pet.adoption_profile)
            except Exception as e:
                logger.error(f"Error scoring pet {pet.pet_id}: {e}")
                continue

            if not match.compatible and not include_incompatible:
                continue
            scored.append((pet, match, adoptability))

        scored.sort(key=lambda item: (item[1].compatible, item[1].match_score, item[2]), reverse=True)

        ranked = [
            RankedPet(pet_id=pet.pet_id, name=pet.name, rank=index, match=match, adoptability_score=adoptability)
            for index, (pet, match, adoptability) in enumerate(scored[:top_k], start=1)
        ]
        logger.info(f"Ranked {len(ranked)} pets")
        return ranked

    def evaluate_veterinarian_for_role(
        self, veterinarian: Veterinarian, requirements: RoleRequirements, as_of: Optional[DateLike] = None
    ) -> EvaluationResult:
        return self.matcher.evaluate_for_role(veterinarian, requirements, as_of)

    def veterinarian_report(self, veterinarian: Veterinarian, as_of: Optional[DateLike] = None) -> Dict[str, Any]:
        """
        Summarize every sub-profile a veterinarian has.

        Args:
            veterinarian: Veterinarian record
            as_of: Reference moment, defaults to now

        Returns:
            Dictionary keyed by sub-profile
        """
        report: Dict[str, Any] = {
            "account_id": veterinarian.account.account_id,
            "name": veterinarian.account.full_name,
            "is_active": veterinarian.is_active_veterinarian(),
        }

        if veterinarian.professional:
            report["license"] = staff_insights.license_status_summary(veterinarian.professional, as_of)
            report["validation"] = staff_insights.license_validation_report(
                veterinarian.professional, as_of
            ).model_dump()
        if veterinarian.specialty:
            report["specialty"] = staff_insights.specialty_report(veterinarian.specialty, as_of)
        if veterinarian.experience:
            report["experience"] = staff_insights.experience_summary(veterinarian.experience)
        if veterinarian.employee:
            report["employment"] = staff_insights.employment_summary(veterinarian.employee, as_of)
        if veterinarian.skills:
            report["skills"] = staff_insights.competency_report(veterinarian.skills)
        if veterinarian.availability:
            report["availability"] = staff_insights.availability_status(veterinarian.availability, as_of).value
        if veterinarian.statistics:
            report["statistics"] = staff_insights.statistics_summary(veterinarian.statistics, as_of)
        if veterinarian.observations:
            report["observations"] = staff_insights.observations_summary(veterinarian.observations, as_of)
        if veterinarian.contact:
            report["contact"] = staff_insights.contact_summary(veterinarian.contact)

        if veterinarian.experience and veterinarian.skills and veterinarian.specialty:
            report["overall_level"] = self.calculator.overall_level(
                veterinarian.experience.years_of_experience,
                self.calculator.authorization_count(veterinarian.skills),
                len(self.calculator.all_specialties(veterinarian.specialty)),
            ).value

        return report


def _load_json(path: str) -> Dict[str, Any]:
    import json

    with open(path, "r", encoding="utf-8") as handle:
        return json.load(handle)


def main(argv: Optional[List[str]] = None) -> int:
    """Score a pet document and optionally match it against an adopter."""
    import argparse
    import json
    from datetime import date

    from .utils.validators import validate_adopter_data, validate_pet_data
    from .utils.helpers import format_pet_summary

    parser = argparse.ArgumentParser(description="PawScore - pet adoptability and compatibility scoring")
    parser.add_argument("--pet", required=True, help="Path to a pet JSON document")
    parser.add_argument("--adopter", help="Path to an adopter JSON document")
    parser.add_argument("--as-of", help="Reference date (YYYY-MM-DD), defaults to today")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")

    args = parser.parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())

    try:
        as_of = date.fromisoformat(args.as_of) if args.as_of else None

        is_valid, error, pet = validate_pet_data(_load_json(args.pet))
        if not is_valid:
            print(f"Invalid pet document: {error}", file=sys.stderr)
            return 1

        engine = ScoringEngine()
        output: Dict[str, Any] = {
            "pet": format_pet_summary(pet),
            "report": engine.score_pet(pet, as_of).model_dump(mode="json"),
        }

        if args.adopter:
            is_valid, error, adopter = validate_adopter_data(_load_json(args.adopter))
            if not is_valid:
                print(f"Invalid adopter document: {error}", file=sys.stderr)
                return 1
            output["match"] = engine.match_adopter(pet, adopter).model_dump(mode="json")

        print(json.dumps(output, indent=2, default=str))
        return 0

    except Exception as e:
        logger.error(f"Error in main: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
