"""
Input validation and sanitization utilities.
"""

import re
from datetime import date
from typing import Any, Dict, Optional, Union
from pydantic import ValidationError
from loguru import logger

from ..schemas.candidates import AdopterCandidate
from ..schemas.pet_data import Pet
from ..schemas.staff_profile import ProfessionalLicense, Veterinarian
from ..models import staff_insights


def sanitize_string(value: str, max_length: int = 1000) -> str:
    """
    Sanitize string input.

    Args:
        value: Input string
        max_length: Maximum allowed length

    Returns:
        Sanitized string
    """
    if not isinstance(value, str):
        return str(value)

    # Remove null bytes
    value = value.replace("\x00", "")

    value = value[:max_length]
    return value.strip()


def validate_license_number(license_number: str) -> bool:
    """
    Validate license number format.

    Args:
        license_number: License number, e.g. CA123456

    Returns:
        True for two to four letters followed by four to eight digits
    """
    return staff_insights.is_license_number_valid(license_number)


def validate_graduation_date(graduation_date: Union[date, str]) -> bool:
    """
    Validate a graduation date lies between 1950-01-01 and today.

    Args:
        graduation_date: Date or ISO date string

    Returns:
        True if the date is plausible
    """
    if isinstance(graduation_date, str):
        try:
            graduation_date = date.fromisoformat(graduation_date)
        except ValueError:
            return False
    return staff_insights.is_graduation_date_valid(graduation_date)


def validate_license_dates(professional: ProfessionalLicense) -> bool:
    """Issue date on or after graduation, expiration after issue."""
    return staff_insights.are_license_dates_consistent(professional)


def validate_emergency_contact(phone: str) -> bool:
    """
    Validate an emergency contact number.

    Args:
        phone: Phone number

    Returns:
        True when at least ten non-whitespace characters remain
    """
    if not phone:
        return False
    return len(re.sub(r"\s", "", phone)) >= 10


def validate_score(score: float, min_val: float = 0, max_val: float = 100) -> bool:
    return isinstance(score, (int, float)) and min_val <= score <= max_val


def validate_pet_data(data: Dict[str, Any]) -> tuple[bool, Optional[str], Optional[Pet]]:
    """
    Validate pet data.

    Args:
        data: Pet data dictionary

    Returns:
        Tuple of (is_valid, error_message, pet)
    """
    try:
        if "name" in data:
            data["name"] = sanitize_string(data["name"], 100)
        if "description" in data and data["description"]:
            data["description"] = sanitize_string(data["description"], 5000)
        if "breed" in data and data["breed"]:
            data["breed"] = sanitize_string(data["breed"], 100)

        adoption = data.get("adoption_profile")
        if isinstance(adoption, dict) and adoption.get("intake_story"):
            adoption["intake_story"] = sanitize_string(adoption["intake_story"], 5000)

        pet = Pet(**data)
        return True, None, pet

    except ValidationError as e:
        logger.warning(f"Pet data validation failed: {e}")
        return False, str(e), None
    except Exception as e:
        logger.error(f"Unexpected error validating pet data: {e}")
        return False, f"Validation error: {str(e)}", None


def validate_veterinarian_data(data: Dict[str, Any]) -> tuple[bool, Optional[str], Optional[Veterinarian]]:
    """
    Validate veterinarian data, including license format checks.

    Args:
        data: Veterinarian data dictionary

    Returns:
        Tuple of (is_valid, error_message, veterinarian)
    """
    try:
        account = data.get("account")
        if isinstance(account, dict):
            for field in ("first_name", "last_name"):
                if field in account:
                    account[field] = sanitize_string(account[field], 50)

        contact = data.get("contact")
        if isinstance(contact, dict):
            if contact.get("address"):
                contact["address"] = sanitize_string(contact["address"], 200)
            if contact.get("emergency_contact") and not validate_emergency_contact(contact["emergency_contact"]):
                return False, "Invalid emergency contact number", None

        veterinarian = Veterinarian(**data)

        if veterinarian.professional:
            if not validate_license_number(veterinarian.professional.license_number):
                return False, "Invalid license number format", None
            if not validate_graduation_date(veterinarian.professional.graduation_date):
                return False, "Invalid graduation date", None
            if not validate_license_dates(veterinarian.professional):
                return False, "Inconsistent license dates", None

        return True, None, veterinarian

    except ValidationError as e:
        logger.warning(f"Veterinarian data validation failed: {e}")
        return False, str(e), None
    except Exception as e:
        logger.error(f"Unexpected error validating veterinarian data: {e}")
        return False, f"Validation error: {str(e)}", None


def validate_adopter_data(data: Dict[str, Any]) -> tuple[bool, Optional[str], Optional[AdopterCandidate]]:
    """
    Validate adopter data.

    Args:
        data: Adopter data dictionary

    Returns:
        Tuple of (is_valid, error_message, adopter)
    """
    try:
        ages = data.get("children_ages") or []
        if any(age < 0 for age in ages):
            return False, "Children ages must be non-negative", None

        adopter = AdopterCandidate(**data)
        return True, None, adopter

    except ValidationError as e:
        logger.warning(f"Adopter data validation failed: {e}")
        return False, str(e), None
    except Exception as e:
        logger.error(f"Unexpected error validating adopter data: {e}")
        return False, f"Validation error: {str(e)}", None
