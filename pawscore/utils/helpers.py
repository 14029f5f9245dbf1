"""
Helper utilities for PawScore.
"""

from typing import Any, Dict, List, Optional

from ..schemas.pet_data import (
    Pet,
    PetAdoptionProfile,
    PetBehaviorProfile,
    PetNutritionProfile,
    PetPhysicalProfile,
)
from ..models.normalizer import meals_per_day


# List utilities

def add_unique(items: List[str], item: str) -> List[str]:
    """
    Append an item unless an equal one is already present.

    Args:
        items: Current list
        item: Item to add

    Returns:
        A new list
    """
    if item in items:
        return list(items)
    return [*items, item]


def remove_item(items: List[str], item: str) -> List[str]:
    return [existing for existing in items if existing != item]


def contains_text(items: List[str], text: str) -> bool:
    """Case-insensitive substring search over a list of strings."""
    needle = text.lower()
    return any(needle in item.lower() for item in items)


def find_matching(items: List[str], search_terms: List[str]) -> List[str]:
    terms = [term.lower() for term in search_terms]
    return [item for item in items if any(term in item.lower() for term in terms)]


def compare_lists(first: List[str], second: List[str]) -> Dict[str, List[str]]:
    """
    Compare two lists of strings.

    Args:
        first: First list
        second: Second list

    Returns:
        Items unique to each list and items shared by both, in list order
    """
    return {
        "unique_to_first": [item for item in first if item not in second],
        "unique_to_second": [item for item in second if item not in first],
        "shared": [item for item in first if item in second],
    }


# Pet formatting

def age_in_years(pet: Pet) -> int:
    return pet.age // 12


def remaining_months(pet: Pet) -> int:
    return pet.age % 12


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def formatted_age(pet: Pet) -> str:
    """Human-readable age, e.g. "1 year and 2 months"."""
    years = age_in_years(pet)
    months = remaining_months(pet)

    if years == 0:
        return _plural(months, "month")
    if months == 0:
        return _plural(years, "year")
    return f"{_plural(years, 'year')} and {_plural(months, 'month')}"


def life_stage(pet: Pet) -> str:
    if pet.age < 12:
        return "puppy"
    if pet.age < 96:
        return "adult"
    return "senior"


def marketing_description(
    pet: Pet,
    adoption: PetAdoptionProfile,
    behavior: Optional[PetBehaviorProfile] = None,
) -> str:
    """
    Build a listing blurb from a pet's adoption and behavior traits.

    Args:
        pet: Pet record
        adoption: Adoption profile
        behavior: Optional behavior profile for personality traits

    Returns:
        Marketing description
    """
    traits = []
    if adoption.good_with_kids:
        traits.append("great with kids")
    if adoption.can_live_with_other_pets:
        traits.append("friendly with other pets")
    if adoption.apartment_friendly:
        traits.append("perfect for apartments")
    if behavior:
        if behavior.affectionate:
            traits.append("very affectionate")
        if behavior.playful:
            traits.append("playful")
        if behavior.gentle:
            traits.append("gentle")

    breed = pet.breed or "mixed breed"
    stage = life_stage(pet)
    article = "an" if stage[0] in "aeiou" else "a"
    description = f"{pet.name} is {article} {stage} {pet.type.value.lower()} of {breed}"

    if traits:
        description += f", {', '.join(traits)}"
    if adoption.featured_pet:
        description += ". Featured pet of the week!"
    if adoption.urgent_adoption:
        description += f" URGENT ADOPTION! {adoption.urgency_reason or ''}".rstrip()
    if adoption.sponsored_adoption:
        description += " Sponsored adoption - no fee!"

    return description


def feeding_summary(profile: PetNutritionProfile) -> str:
    parts = [f"{profile.daily_amount_grams:g}g daily of {profile.diet_type.value}"]
    if profile.primary_food_brand:
        parts.append(f"({profile.primary_food_brand})")
    parts.append(f"divided into {meals_per_day(profile.feeding_frequency)} meals")
    if profile.feeding_times:
        parts.append(f"at {', '.join(profile.feeding_times)}")
    return " ".join(parts)


def coat_description(profile: PetPhysicalProfile) -> str:
    parts = []
    if profile.coat_length:
        parts.append(profile.coat_length.value)
    if profile.coat_texture:
        parts.append(profile.coat_texture.value)
    if profile.coat_color:
        parts.append(profile.coat_color)
    if profile.secondary_coat_color:
        parts.append(f"with {profile.secondary_coat_color}")
    if profile.coat_pattern:
        parts.append(profile.coat_pattern)
    return " ".join(parts) or "No description available"


def format_pet_summary(pet: Pet) -> Dict[str, Any]:
    """
    Flatten a pet into display fields.

    Args:
        pet: Pet record

    Returns:
        Dictionary of display-ready values
    """
    summary: Dict[str, Any] = {
        "pet_id": pet.pet_id,
        "name": pet.name,
        "type": pet.type.value,
        "breed": pet.breed,
        "age": formatted_age(pet),
        "image": pet.image,
    }
    if pet.physical_profile:
        summary["coat"] = coat_description(pet.physical_profile)
    if pet.nutrition_profile:
        summary["feeding"] = feeding_summary(pet.nutrition_profile)
    if pet.adoption_profile:
        summary["description"] = marketing_description(pet, pet.adoption_profile, pet.behavior_profile)
    return summary
