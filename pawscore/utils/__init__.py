"""Utility modules for PawScore."""

from .validators import (
    validate_pet_data,
    validate_veterinarian_data,
    validate_adopter_data,
    validate_license_number,
    validate_emergency_contact,
)
from .helpers import formatted_age, format_pet_summary, compare_lists

__all__ = [
    "validate_pet_data",
    "validate_veterinarian_data",
    "validate_adopter_data",
    "validate_license_number",
    "validate_emergency_contact",
    "formatted_age",
    "format_pet_summary",
    "compare_lists",
]
