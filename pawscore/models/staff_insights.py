"""
Derived facts and summaries for veterinarian sub-profiles.

License status and validation, employment schedule, availability windows,
certifications, work history, skills, statistics and observations. Every
date-dependent helper takes an optional ``as_of`` reference moment.
"""

import re
from datetime import date
from typing import Any, Dict, List, Optional

from ..config import settings
from ..schemas.results import AvailabilityStatus, SpecializationLevel, ValidationReport
from ..schemas.staff_profile import (
    AUTHORIZATION_NAMES,
    Authorization,
    AvailabilityProfile,
    Certification,
    CertificationStatus,
    ContactProfile,
    EmploymentProfile,
    EmploymentStatus,
    ExperienceProfile,
    Observations,
    PerformanceReview,
    ProfessionalLicense,
    ProfessionalStatistics,
    SkillsProfile,
    SpecialtyProfile,
    VeterinarianSpecialty,
    WorkHistoryEntry,
    WorkingHoursEntry,
)
from .normalizer import (
    AVERAGE_DAYS_PER_MONTH,
    DAYS_PER_YEAR,
    DateLike,
    clamp_score,
    days_between,
    days_elapsed,
    days_until,
    fractional_months,
    hours_between_times,
    is_expiring_soon,
    is_time_in_range,
    resolve_now,
    round_half_up,
    round_one_decimal,
    to_datetime,
    to_fixed,
)
from .score_calculator import ScoreCalculator

LICENSE_NUMBER_PATTERN = re.compile(r"^[A-Z]{2,4}\d{4,8}$", re.IGNORECASE)
EARLIEST_GRADUATION = date(1950, 1, 1)
DAYS_OF_WEEK = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
WEEKS_PER_YEAR = 52

_calculator = ScoreCalculator()


# License

def is_license_valid(professional: ProfessionalLicense, as_of: Optional[DateLike] = None) -> bool:
    return (
        professional.license_status == CertificationStatus.ACTIVE
        and days_until(professional.license_expiration_date, as_of) > 0
    )


def days_until_license_expiration(professional: ProfessionalLicense, as_of: Optional[DateLike] = None) -> int:
    return days_until(professional.license_expiration_date, as_of)


def is_license_expiring_soon(
    professional: ProfessionalLicense, days_threshold: Optional[int] = None, as_of: Optional[DateLike] = None
) -> bool:
    threshold = settings.license_warning_days if days_threshold is None else days_threshold
    return is_expiring_soon(professional.license_expiration_date, threshold, as_of)


def is_license_expired(professional: ProfessionalLicense, as_of: Optional[DateLike] = None) -> bool:
    return days_until_license_expiration(professional, as_of) < 0


def needs_urgent_renewal(professional: ProfessionalLicense, as_of: Optional[DateLike] = None) -> bool:
    return is_license_expiring_soon(professional, settings.license_urgent_days, as_of)


def years_since_graduation(professional: ProfessionalLicense, as_of: Optional[DateLike] = None) -> int:
    elapsed = (resolve_now(as_of) - to_datetime(professional.graduation_date)).total_seconds() / 86400
    return int(elapsed // DAYS_PER_YEAR)


def months_since_graduation(professional: ProfessionalLicense, as_of: Optional[DateLike] = None) -> int:
    elapsed = (resolve_now(as_of) - to_datetime(professional.graduation_date)).total_seconds() / 86400
    return int(elapsed // AVERAGE_DAYS_PER_MONTH)


def can_practice(professional: ProfessionalLicense, as_of: Optional[DateLike] = None) -> bool:
    return is_license_valid(professional, as_of) and professional.license_status == CertificationStatus.ACTIVE


def is_license_number_valid(license_number: str) -> bool:
    """Two to four letters followed by four to eight digits, case-insensitive."""
    return bool(LICENSE_NUMBER_PATTERN.match(license_number or ""))


def is_graduation_date_valid(graduation_date: date, as_of: Optional[DateLike] = None) -> bool:
    today = resolve_now(as_of)
    return to_datetime(EARLIEST_GRADUATION) <= to_datetime(graduation_date) <= today


def are_license_dates_consistent(professional: ProfessionalLicense) -> bool:
    return (
        professional.license_issue_date >= professional.graduation_date
        and professional.license_expiration_date > professional.license_issue_date
    )


def license_duration_years(professional: ProfessionalLicense) -> float:
    days = (professional.license_expiration_date - professional.license_issue_date).days
    return to_fixed(days / DAYS_PER_YEAR, 1)


def verification_code(professional: ProfessionalLicense) -> str:
    """Status initial, two-digit graduation year and last four license characters."""
    status_code = professional.license_status.value[0].upper()
    graduation_year = str(professional.graduation_date.year)[-2:]
    return f"{status_code}{graduation_year}{professional.license_number[-4:]}"


def license_progress_percentage(professional: ProfessionalLicense, as_of: Optional[DateLike] = None) -> float:
    issued = to_datetime(professional.license_issue_date)
    total = (to_datetime(professional.license_expiration_date) - issued).total_seconds()
    if total <= 0:
        return 100.0
    elapsed = (resolve_now(as_of) - issued).total_seconds()
    return max(0.0, min(100.0, to_fixed(elapsed / total * 100, 1)))


def license_status_summary(professional: ProfessionalLicense, as_of: Optional[DateLike] = None) -> Dict[str, Any]:
    """
    Summarize license status with a human-readable message.

    Args:
        professional: Professional license
        as_of: Reference moment, defaults to now

    Returns:
        Dictionary with status, validity, remaining days, renewal flag and message
    """
    remaining = days_until_license_expiration(professional, as_of)
    is_valid = is_license_valid(professional, as_of)
    needs_renewal = is_license_expiring_soon(professional, as_of=as_of)
    status = professional.license_status

    if is_license_expired(professional, as_of):
        message = "License expired - cannot practice"
        status = CertificationStatus.EXPIRED
    elif needs_renewal:
        message = f"License expires in {remaining} days - renew soon"
    elif is_valid:
        message = f"License valid for {remaining} days"
    else:
        message = "Invalid license status"

    return {
        "status": status.value,
        "is_valid": is_valid,
        "days_until_expiration": remaining,
        "needs_renewal": needs_renewal,
        "message": message,
    }


def license_validation_report(professional: ProfessionalLicense, as_of: Optional[DateLike] = None) -> ValidationReport:
    errors = []
    warnings = []

    if not is_license_number_valid(professional.license_number):
        errors.append("Invalid license number format")
    if not is_license_valid(professional, as_of):
        errors.append("License invalid or expired")
    if not is_graduation_date_valid(professional.graduation_date, as_of):
        errors.append("Invalid graduation date")
    if not are_license_dates_consistent(professional):
        errors.append("Inconsistent license dates")

    if is_license_expiring_soon(professional, as_of=as_of):
        warnings.append("License expiring soon")
    years = years_since_graduation(professional, as_of)
    if years < 1:
        warnings.append("Recently graduated - supervision recommended")

    is_valid = not errors
    if is_valid:
        seniority = _calculator.seniority_level(years).value
        summary = f"Valid veterinarian - {seniority} with {years} years of experience"
    else:
        summary = f"Validation failed - {len(errors)} errors found"

    return ValidationReport(is_valid=is_valid, errors=errors, warnings=warnings, summary=summary)


def education_summary(professional: ProfessionalLicense) -> str:
    return f"{professional.veterinary_school} ({professional.graduation_date.year})"


# Employment

def is_currently_employed(employee: EmploymentProfile) -> bool:
    return employee.end_date is None and employee.employment_status != EmploymentStatus.INACTIVE


def days_employed(employee: EmploymentProfile, as_of: Optional[DateLike] = None) -> int:
    end = employee.end_date if employee.end_date else resolve_now(as_of)
    return days_elapsed(employee.start_date, end)


def months_employed(employee: EmploymentProfile, as_of: Optional[DateLike] = None) -> int:
    return round_half_up(days_employed(employee, as_of) / AVERAGE_DAYS_PER_MONTH)


def years_employed(employee: EmploymentProfile, as_of: Optional[DateLike] = None) -> float:
    return round_one_decimal(months_employed(employee, as_of) / 12)


def is_full_time(employee: EmploymentProfile) -> bool:
    return employee.employment_status == EmploymentStatus.FULL_TIME


def is_part_time(employee: EmploymentProfile) -> bool:
    return employee.employment_status == EmploymentStatus.PART_TIME


def is_volunteer(employee: EmploymentProfile) -> bool:
    return employee.employment_status == EmploymentStatus.VOLUNTEER


def is_temporary(employee: EmploymentProfile) -> bool:
    return employee.employment_status in (
        EmploymentStatus.CONTRACT,
        EmploymentStatus.INTERN,
        EmploymentStatus.RESIDENT,
    )


def weekly_working_hours(employee: EmploymentProfile) -> float:
    """Hours per week from the schedule, or the status default without one."""
    if employee.working_hours is None:
        return {
            EmploymentStatus.FULL_TIME: settings.full_time_weekly_hours,
            EmploymentStatus.PART_TIME: settings.part_time_weekly_hours,
            EmploymentStatus.VOLUNTEER: settings.volunteer_weekly_hours,
        }.get(employee.employment_status, settings.other_weekly_hours)

    total = sum(
        hours_between_times(entry.start_time, entry.end_time)
        for entry in employee.working_hours
        if entry.is_working_day and entry.start_time and entry.end_time
    )
    return round_one_decimal(total)


def working_days_per_week(employee: EmploymentProfile) -> int:
    if employee.working_hours is None:
        return {
            EmploymentStatus.FULL_TIME: settings.full_time_working_days,
            EmploymentStatus.PART_TIME: settings.part_time_working_days,
            EmploymentStatus.VOLUNTEER: settings.volunteer_working_days,
        }.get(employee.employment_status, settings.other_working_days)

    return sum(
        1 for entry in employee.working_hours
        if entry.is_working_day and entry.start_time and entry.end_time
    )


def daily_working_hours(employee: EmploymentProfile) -> float:
    days = working_days_per_week(employee)
    if days == 0:
        return 0.0
    return round_one_decimal(weekly_working_hours(employee) / days)


def schedule_for_day(employee: EmploymentProfile, day: str) -> Optional[WorkingHoursEntry]:
    if not employee.working_hours:
        return None
    for entry in employee.working_hours:
        if entry.day.lower() == day.lower():
            return entry
    return None


def works_on_day(employee: EmploymentProfile, day: str) -> bool:
    entry = schedule_for_day(employee, day)
    return entry is not None and entry.is_working_day and bool(entry.start_time) and bool(entry.end_time)


def is_available_at(employee: EmploymentProfile, day: str, time_of_day: str) -> bool:
    entry = schedule_for_day(employee, day)
    if not entry or not entry.start_time or not entry.end_time:
        return False
    return is_time_in_range(time_of_day, entry.start_time, entry.end_time)


def available_days(employee: EmploymentProfile) -> List[str]:
    if not employee.working_hours:
        return []
    return [entry.day.lower() for entry in employee.working_hours if entry.is_working_day]


def weekly_schedule(employee: EmploymentProfile) -> Dict[str, Optional[Dict[str, Any]]]:
    """Map every weekday to its shift, or None when there is none."""
    schedule = {}
    for day in DAYS_OF_WEEK:
        entry = schedule_for_day(employee, day)
        if entry and entry.start_time and entry.end_time:
            schedule[day] = {
                "start_time": entry.start_time,
                "end_time": entry.end_time,
                "hours": hours_between_times(entry.start_time, entry.end_time),
            }
        else:
            schedule[day] = None
    return schedule


def is_eligible_for_benefits(employee: EmploymentProfile, as_of: Optional[DateLike] = None) -> bool:
    return is_full_time(employee) and days_employed(employee, as_of) >= settings.benefits_min_days


def is_in_probation(employee: EmploymentProfile, as_of: Optional[DateLike] = None) -> bool:
    return is_currently_employed(employee) and days_employed(employee, as_of) <= settings.probation_days


def estimated_annual_salary(employee: EmploymentProfile, hourly_rate: float) -> float:
    return weekly_working_hours(employee) * hourly_rate * WEEKS_PER_YEAR


def employment_summary(employee: EmploymentProfile, as_of: Optional[DateLike] = None) -> Dict[str, Any]:
    return {
        "status": employee.employment_status.value,
        "is_active": is_currently_employed(employee),
        "duration": {
            "days": days_employed(employee, as_of),
            "months": months_employed(employee, as_of),
            "years": years_employed(employee, as_of),
        },
        "schedule": {
            "weekly_hours": weekly_working_hours(employee),
            "daily_hours": daily_working_hours(employee),
            "working_days": working_days_per_week(employee),
        },
        "employment": {
            "is_full_time": is_full_time(employee),
            "is_part_time": is_part_time(employee),
            "is_volunteer": is_volunteer(employee),
            "is_temporary": is_temporary(employee),
        },
    }


# Availability

def is_available_today(availability: AvailabilityProfile, as_of: Optional[DateLike] = None) -> bool:
    """
    Check whether today falls outside the unavailability window.

    Args:
        availability: Availability profile
        as_of: Reference moment, defaults to now

    Returns:
        False when inactive or inside the window
    """
    if not availability.is_active:
        return False

    today = resolve_now(as_of).date()
    start = availability.unavailable_from
    until = availability.unavailable_until

    if start and until:
        return today < start or today > until
    if start:
        return today < start
    return True


def can_perform_assessments(availability: AvailabilityProfile, as_of: Optional[DateLike] = None) -> bool:
    return is_available_today(availability, as_of) and availability.available_for_assessments


def days_until_return(availability: AvailabilityProfile, as_of: Optional[DateLike] = None) -> Optional[int]:
    if is_available_today(availability, as_of) or not availability.unavailable_until:
        return None
    return days_until(availability.unavailable_until, as_of)


def availability_status(availability: AvailabilityProfile, as_of: Optional[DateLike] = None) -> AvailabilityStatus:
    if not availability.is_active:
        return AvailabilityStatus.INACTIVE
    if not is_available_today(availability, as_of):
        return AvailabilityStatus.UNAVAILABLE
    if not availability.available_for_assessments:
        return AvailabilityStatus.LIMITED
    return AvailabilityStatus.AVAILABLE


# Specialty and certifications

def has_specialty(specialty: SpecialtyProfile, target: VeterinarianSpecialty) -> bool:
    return target in _calculator.all_specialties(specialty)


def is_ethology_specialist(specialty: SpecialtyProfile) -> bool:
    return (
        specialty.ethology_certified
        or has_specialty(specialty, VeterinarianSpecialty.ETHOLOGY)
        or has_specialty(specialty, VeterinarianSpecialty.ANIMAL_BEHAVIOR)
    )


def is_shelter_medicine_specialist(specialty: SpecialtyProfile) -> bool:
    return has_specialty(specialty, VeterinarianSpecialty.SHELTER_MEDICINE)


def is_specialist(specialty: SpecialtyProfile) -> bool:
    return (
        specialty.primary_specialty != VeterinarianSpecialty.GENERAL_PRACTICE
        or len(specialty.additional_specialties) > 0
    )


def active_certifications(specialty: SpecialtyProfile, as_of: Optional[DateLike] = None) -> List[Certification]:
    return [cert for cert in specialty.certifications if days_until(cert.expiration_date, as_of) > 0]


def expired_certifications(specialty: SpecialtyProfile, as_of: Optional[DateLike] = None) -> List[Certification]:
    return [cert for cert in specialty.certifications if days_until(cert.expiration_date, as_of) <= 0]


def certifications_expiring_soon(
    specialty: SpecialtyProfile, days_threshold: Optional[int] = None, as_of: Optional[DateLike] = None
) -> List[Dict[str, Any]]:
    """Certifications expiring within the warning window, with days remaining."""
    threshold = settings.certification_warning_days if days_threshold is None else days_threshold
    return [
        {"certification": cert, "days_until_expiry": days_until(cert.expiration_date, as_of)}
        for cert in specialty.certifications
        if is_expiring_soon(cert.expiration_date, threshold, as_of)
    ]


def needs_certification_renewal(specialty: SpecialtyProfile, as_of: Optional[DateLike] = None) -> bool:
    return bool(certifications_expiring_soon(specialty, as_of=as_of)) or bool(expired_certifications(specialty, as_of))


def certifications_by_type(specialty: SpecialtyProfile, cert_type: str) -> List[Certification]:
    needle = cert_type.lower()
    return [cert for cert in specialty.certifications if needle in cert.name.lower()]


def has_active_certification_by_type(
    specialty: SpecialtyProfile, cert_type: str, as_of: Optional[DateLike] = None
) -> bool:
    needle = cert_type.lower()
    return any(needle in cert.name.lower() for cert in active_certifications(specialty, as_of))


def can_perform_behavior_assessments(specialty: SpecialtyProfile, as_of: Optional[DateLike] = None) -> bool:
    return (
        is_ethology_specialist(specialty)
        or is_shelter_medicine_specialist(specialty)
        or has_active_certification_by_type(specialty, "behavior", as_of)
        or has_active_certification_by_type(specialty, "ethology", as_of)
    )


def specialty_summary(specialty: SpecialtyProfile) -> str:
    primary = f"Primary specialty: {specialty.primary_specialty.value}"
    if len(_calculator.all_specialties(specialty)) == 1 or not specialty.additional_specialties:
        return primary
    additional = ", ".join(s.value for s in specialty.additional_specialties)
    return f"{primary}. Additional specialties: {additional}"


def certification_summary(specialty: SpecialtyProfile, as_of: Optional[DateLike] = None) -> Dict[str, Any]:
    expired = len(expired_certifications(specialty, as_of))
    expiring = len(certifications_expiring_soon(specialty, as_of=as_of))
    return {
        "total": len(specialty.certifications),
        "active": len(active_certifications(specialty, as_of)),
        "expired": expired,
        "expiring_soon": expiring,
        "needs_action": expired > 0 or expiring > 0,
    }


def specialty_report(specialty: SpecialtyProfile, as_of: Optional[DateLike] = None) -> Dict[str, Any]:
    """
    Full report of capabilities, certification alerts and recommendations.

    Args:
        specialty: Specialty profile
        as_of: Reference moment, defaults to now

    Returns:
        Dictionary with level, specialties, certification summary,
        capabilities, alerts and recommendations
    """
    capabilities = []
    alerts = []
    recommendations = []

    if can_perform_behavior_assessments(specialty, as_of):
        capabilities.append("Behavioral assessments")
    if is_ethology_specialist(specialty):
        capabilities.append("Ethology specialist")
    if is_shelter_medicine_specialist(specialty):
        capabilities.append("Shelter medicine")

    expired = expired_certifications(specialty, as_of)
    if expired:
        alerts.append(f"{len(expired)} certification(s) expired")
    expiring = certifications_expiring_soon(specialty, as_of=as_of)
    if expiring:
        alerts.append(f"{len(expiring)} certification(s) expiring soon")

    if specialty.primary_specialty == VeterinarianSpecialty.GENERAL_PRACTICE and not specialty.additional_specialties:
        recommendations.append("Consider an additional specialization")
    if not is_ethology_specialist(specialty) and is_shelter_medicine_specialist(specialty):
        recommendations.append("An animal behavior certification would be beneficial")

    level: SpecializationLevel = _calculator.specialization_level(specialty, as_of)
    return {
        "level": level.value,
        "specialties": [s.value for s in _calculator.all_specialties(specialty)],
        "certification_summary": certification_summary(specialty, as_of),
        "capabilities": capabilities,
        "alerts": alerts,
        "recommendations": recommendations,
    }


# Experience

def meets_minimum_experience(experience: ExperienceProfile, minimum_years: float) -> bool:
    return experience.years_of_experience >= minimum_years


def current_positions(experience: ExperienceProfile) -> List[WorkHistoryEntry]:
    return [job for job in experience.work_history if job.end_date is None]


def previous_positions(experience: ExperienceProfile) -> List[WorkHistoryEntry]:
    return [job for job in experience.work_history if job.end_date is not None]


def total_employment_months(experience: ExperienceProfile, as_of: Optional[DateLike] = None) -> int:
    now = resolve_now(as_of)
    total = sum(fractional_months(job.start_date, job.end_date or now) for job in experience.work_history)
    return round_half_up(total)


def experience_by_organization(experience: ExperienceProfile, organization: str) -> List[WorkHistoryEntry]:
    needle = organization.lower()
    return [job for job in experience.work_history if needle in job.organization.lower()]


def has_worked_in_shelters(experience: ExperienceProfile) -> bool:
    return experience.shelter_experience > 0 or any(
        experience_by_organization(experience, org) for org in ("shelter", "rescue", "refugio")
    )


def most_recent_position(experience: ExperienceProfile) -> Optional[WorkHistoryEntry]:
    """Latest-started current job, or else the job that ended last."""
    current = current_positions(experience)
    if current:
        return max(current, key=lambda job: job.start_date)
    finished = previous_positions(experience)
    if not finished:
        return None
    return max(finished, key=lambda job: job.end_date)


def experience_in_position(
    experience: ExperienceProfile, position: str, as_of: Optional[DateLike] = None
) -> float:
    """Years spent in positions whose title contains the given text."""
    needle = position.lower()
    now = resolve_now(as_of)
    months = sum(
        fractional_months(job.start_date, job.end_date or now)
        for job in experience.work_history
        if needle in job.position.lower()
    )
    return round_one_decimal(months / 12)


def employment_gaps(experience: ExperienceProfile) -> Dict[str, Any]:
    """
    Find gaps longer than 30 days between finished positions.

    Args:
        experience: Experience profile

    Returns:
        Dictionary with ``has_gaps`` and a list of gaps (start, end, months)
    """
    if len(experience.work_history) < 2:
        return {"has_gaps": False, "gaps": []}

    finished = sorted(previous_positions(experience), key=lambda job: job.start_date)
    gaps = []
    for current, following in zip(finished, finished[1:]):
        gap_days = (following.start_date - current.end_date).days
        if gap_days > 30:
            gaps.append({
                "start": current.end_date,
                "end": following.start_date,
                "duration_months": round_half_up(gap_days / AVERAGE_DAYS_PER_MONTH),
            })

    return {"has_gaps": bool(gaps), "gaps": gaps}


def experience_summary(experience: ExperienceProfile) -> Dict[str, Any]:
    percentages = _calculator.specialization_percentages(experience)
    return {
        "total_years": experience.years_of_experience,
        "experience_level": _calculator.experience_band(experience.years_of_experience).value,
        "shelter_experience": {
            "years": experience.shelter_experience,
            "level": _calculator.shelter_experience_level(experience.shelter_experience).value,
            "percentage": percentages["shelter_percentage"],
        },
        "behavior_experience": {
            "years": experience.behavior_assessment_experience,
            "level": _calculator.behavior_assessment_level(experience.behavior_assessment_experience).value,
            "percentage": percentages["behavior_percentage"],
        },
        "current_positions": len(current_positions(experience)),
        "total_positions": len(experience.work_history),
        "has_gaps": employment_gaps(experience)["has_gaps"],
    }


# Skills

def is_multilingual(skills: SkillsProfile) -> bool:
    return len(skills.languages) > 1


def can_handle_complex_behavioral_cases(skills: SkillsProfile) -> bool:
    return skills.behavior_assessment_authorized and skills.behavior_medication_authorized


def can_make_full_adoption_decisions(skills: SkillsProfile) -> bool:
    return skills.behavior_assessment_authorized and skills.adoption_decision_authorized


def is_senior_consultant(skills: SkillsProfile) -> bool:
    return skills.second_opinion_provider


def active_authorizations(skills: SkillsProfile) -> List[str]:
    return [name for authorization, name in AUTHORIZATION_NAMES.items() if skills.has_authorization(authorization)]


def find_matching_expertise(skills: SkillsProfile, search_terms: List[str]) -> List[str]:
    terms = [term.lower() for term in search_terms]
    return [area for area in skills.areas_of_expertise if any(term in area.lower() for term in terms)]


def can_handle_international_communication(skills: SkillsProfile) -> bool:
    return is_multilingual(skills) or skills.speaks_language("english")


def behavioral_competencies(skills: SkillsProfile) -> Dict[str, Any]:
    return {
        "has_assessment_skills": skills.behavior_assessment_authorized,
        "can_prescribe_medication": skills.behavior_medication_authorized,
        "can_make_decisions": skills.adoption_decision_authorized,
        "can_provide_second_opinion": skills.second_opinion_provider,
        "competency_level": _calculator.authorization_level(skills).value,
    }


def competency_report(skills: SkillsProfile) -> Dict[str, Any]:
    """
    Summarize expertise, languages, authorizations and suitable roles.

    Args:
        skills: Skills profile

    Returns:
        Nested dictionary grouped by expertise, languages, authorizations
        and overall profile
    """
    behavior_keywords = ["behavior", "behavioural", "ethology", "training", "assessment"]
    level = _calculator.authorization_level(skills)

    recommended_roles = []
    if can_handle_complex_behavioral_cases(skills):
        recommended_roles.append("Animal Behavior Specialist")
    if can_make_full_adoption_decisions(skills):
        recommended_roles.append("Adoption Coordinator")
    if is_senior_consultant(skills):
        recommended_roles.append("Senior Consultant")
    if is_multilingual(skills):
        recommended_roles.append("International Communication Specialist")

    return {
        "expertise": {
            "areas": list(skills.areas_of_expertise),
            "count": len(skills.areas_of_expertise),
            "behavior_related": find_matching_expertise(skills, behavior_keywords),
        },
        "languages": {
            "spoken": list(skills.languages),
            "count": len(skills.languages),
            "is_multilingual": is_multilingual(skills),
            "can_handle_international": can_handle_international_communication(skills),
        },
        "authorizations": {
            "active": active_authorizations(skills),
            "level": level.value,
            "behavior_competencies": behavioral_competencies(skills),
        },
        "overall_profile": {
            "is_specialist": len(skills.areas_of_expertise) > 2,
            "is_senior_level": level.value == "Expert" or skills.second_opinion_provider,
            "recommended_roles": recommended_roles,
        },
    }


def compare_skills(skills: SkillsProfile, other: SkillsProfile) -> Dict[str, Dict[str, List[str]]]:
    """Unique, shared and missing expertise and languages relative to another profile."""
    from ..utils.helpers import compare_lists

    expertise = compare_lists(skills.areas_of_expertise, other.areas_of_expertise)
    languages = compare_lists(skills.languages, other.languages)
    return {
        "expertise_comparison": {
            "unique": expertise["unique_to_first"],
            "shared": expertise["shared"],
            "missing": expertise["unique_to_second"],
        },
        "language_comparison": {
            "unique": languages["unique_to_first"],
            "shared": languages["shared"],
            "missing": languages["unique_to_second"],
        },
    }


# Statistics

def days_since_last_assessment(
    statistics: ProfessionalStatistics, as_of: Optional[DateLike] = None
) -> Optional[int]:
    if not statistics.last_assessment_date:
        return None
    return days_between(statistics.last_assessment_date, as_of)


def statistics_summary(statistics: ProfessionalStatistics, as_of: Optional[DateLike] = None) -> Dict[str, Any]:
    success_rate = _calculator.success_rate(statistics.successful_adoptions, statistics.total_assessments)
    accuracy_rate = statistics.assessment_accuracy_rate or 0
    return {
        "total_assessments": statistics.total_assessments,
        "successful_adoptions": statistics.successful_adoptions,
        "adoption_success_rate": success_rate,
        "assessment_accuracy_rate": accuracy_rate,
        "days_since_last_assessment": days_since_last_assessment(statistics, as_of),
        "performance_level": _calculator.performance_level(success_rate, accuracy_rate).value,
    }


# Observations

def has_complete_biography(observations: Observations) -> bool:
    return bool(observations.biography) and len(observations.biography.strip()) > 50


def latest_review(observations: Observations) -> Optional[PerformanceReview]:
    if not observations.performance_reviews:
        return None
    return max(observations.performance_reviews, key=lambda review: review.review_date)


def needs_recent_review(observations: Observations, as_of: Optional[DateLike] = None) -> bool:
    latest = latest_review(observations)
    if latest is None:
        return True
    return days_between(latest.review_date, as_of) > settings.performance_review_max_days


def observations_summary(observations: Observations, as_of: Optional[DateLike] = None) -> Dict[str, Any]:
    return {
        "has_biography": bool(observations.biography),
        "has_special_interests": bool(observations.special_interests),
        "has_admin_notes": bool(observations.admin_notes),
        "review_count": len(observations.performance_reviews),
        "average_rating": _calculator.average_rating(observations),
        "needs_review": needs_recent_review(observations, as_of),
        "profile_completeness": clamp_score(_calculator.profile_completeness(observations)),
    }


# Contact

def has_complete_contact_info(contact: ContactProfile) -> bool:
    return bool(contact.address) and bool(contact.emergency_contact)


def has_valid_emergency_contact(contact: ContactProfile) -> bool:
    """An emergency number needs at least ten non-whitespace characters."""
    if not contact.emergency_contact:
        return False
    return len(re.sub(r"\s", "", contact.emergency_contact)) >= 10


def contact_summary(contact: ContactProfile) -> Dict[str, Any]:
    return {
        "has_address": bool(contact.address),
        "has_emergency_contact": bool(contact.emergency_contact),
        "is_available_for_emergencies": contact.emergency_available,
        "preferred_method": contact.preferred_communication or "Email",
    }


def authorization_name(authorization: Authorization) -> str:
    return AUTHORIZATION_NAMES[Authorization(authorization)]
