"""
Attribute normalizer.

Maps raw profile fields (ordinal enums, dates, "HH:MM" strings, feeding
frequencies) onto comparable numbers. Ordinal enums are compared through
explicit rank tables, never through declaration order or string ordering.

Half-up rounding helpers live in ``pawscore.arithmetic`` and are re-exported
here for the models.
"""

import math
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Optional, Union
from dateutil.relativedelta import relativedelta

from ..arithmetic import AVERAGE_DAYS_PER_MONTH, DAYS_PER_YEAR, round_half_up, round_one_decimal, to_fixed
from ..schemas.pet_data import (
    ActivityLevel,
    AggressionLevel,
    AnxietyLevel,
    EnergyLevel,
    FeedingFrequency,
    HealthStatus,
    SocializationLevel,
    TrainingLevel,
)

DateLike = Union[date, datetime]

MINUTES_PER_DAY = 24 * 60
SECONDS_PER_DAY = 24 * 60 * 60

# Ordinal rank tables, lowest intensity first
RANK_TABLES = {
    AggressionLevel: {
        AggressionLevel.NONE: 0,
        AggressionLevel.MILD: 1,
        AggressionLevel.MODERATE: 2,
        AggressionLevel.SEVERE: 3,
        AggressionLevel.DANGEROUS: 4,
    },
    AnxietyLevel: {
        AnxietyLevel.NONE: 0,
        AnxietyLevel.MILD: 1,
        AnxietyLevel.MODERATE: 2,
        AnxietyLevel.SEVERE: 3,
        AnxietyLevel.CLINICAL: 4,
    },
    ActivityLevel: {
        ActivityLevel.VERY_LOW: 0,
        ActivityLevel.LOW: 1,
        ActivityLevel.MODERATE: 2,
        ActivityLevel.HIGH: 3,
        ActivityLevel.VERY_HIGH: 4,
    },
    EnergyLevel: {
        EnergyLevel.LETHARGIC: 0,
        EnergyLevel.CALM: 1,
        EnergyLevel.MODERATE: 2,
        EnergyLevel.ENERGETIC: 3,
        EnergyLevel.HYPERACTIVE: 4,
    },
    TrainingLevel: {
        TrainingLevel.UNTRAINED: 0,
        TrainingLevel.BASIC: 1,
        TrainingLevel.INTERMEDIATE: 2,
        TrainingLevel.ADVANCED: 3,
        TrainingLevel.PROFESSIONAL: 4,
    },
    # Higher is better for the two quality scales
    SocializationLevel: {
        SocializationLevel.UNSOCIALIZED: 0,
        SocializationLevel.POOR: 1,
        SocializationLevel.FAIR: 2,
        SocializationLevel.GOOD: 3,
        SocializationLevel.EXCELLENT: 4,
    },
    HealthStatus: {
        HealthStatus.CRITICAL: 0,
        HealthStatus.POOR: 1,
        HealthStatus.FAIR: 2,
        HealthStatus.GOOD: 3,
        HealthStatus.EXCELLENT: 4,
    },
}

MEALS_PER_DAY = {
    FeedingFrequency.ONCE_DAILY: 1,
    FeedingFrequency.TWICE_DAILY: 2,
    FeedingFrequency.THREE_TIMES_DAILY: 3,
    FeedingFrequency.FOUR_TIMES_DAILY: 4,
    FeedingFrequency.FREE_FEEDING: 0,
    FeedingFrequency.MULTIPLE_SMALL_MEALS: 6,
}


def rank(level: Enum) -> int:
    """
    Get the ordinal rank of an enum member.

    Args:
        level: Member of one of the ranked enums

    Returns:
        Rank, 0 for the lowest member
    """
    return RANK_TABLES[type(level)][level]


def at_least(level: Enum, threshold: Enum) -> bool:
    return rank(level) >= rank(threshold)


def at_most(level: Enum, threshold: Enum) -> bool:
    return rank(level) <= rank(threshold)


def above(level: Enum, threshold: Enum) -> bool:
    return rank(level) > rank(threshold)


def meals_per_day(frequency: FeedingFrequency) -> int:
    """Meals per day for a feeding frequency; free feeding has no fixed meals."""
    return MEALS_PER_DAY.get(frequency, 2)


# Numeric helpers

def clamp_score(value: float, low: int = 0, high: int = 100) -> int:
    return int(max(low, min(high, value)))


def safe_ratio(numerator: float, denominator: float) -> float:
    """Divide, yielding 0 for a zero denominator."""
    if not denominator:
        return 0.0
    return numerator / denominator


# Date helpers

def to_datetime(value: DateLike) -> datetime:
    """Promote a date to midnight of that day; datetimes pass through."""
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def resolve_now(as_of: Optional[DateLike] = None) -> datetime:
    return to_datetime(as_of) if as_of is not None else datetime.now()


def _elapsed(start: DateLike, end: DateLike) -> timedelta:
    return to_datetime(end) - to_datetime(start)


def days_between(start: DateLike, end: Optional[DateLike] = None) -> int:
    """Absolute number of calendar days between two moments, rounded up."""
    delta = _elapsed(start, resolve_now(end))
    return math.ceil(abs(delta.total_seconds()) / SECONDS_PER_DAY)


def days_elapsed(start: DateLike, end: Optional[DateLike] = None) -> int:
    """Signed days from start to end, rounded up."""
    delta = _elapsed(start, resolve_now(end))
    return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)


def days_until(target: DateLike, as_of: Optional[DateLike] = None) -> int:
    """Signed days from now until the target, rounded up; negative once passed."""
    return days_elapsed(resolve_now(as_of), target)


def months_between(start: DateLike, end: Optional[DateLike] = None) -> int:
    return round_half_up(days_between(start, end) / AVERAGE_DAYS_PER_MONTH)


def years_between(start: DateLike, end: Optional[DateLike] = None) -> float:
    return round_one_decimal(months_between(start, end) / 12)


def fractional_months(start: DateLike, end: DateLike) -> float:
    """Unrounded signed months between two moments."""
    return _elapsed(start, end).total_seconds() / SECONDS_PER_DAY / AVERAGE_DAYS_PER_MONTH


def months_ago(months: int, as_of: Optional[DateLike] = None) -> datetime:
    """The moment a number of calendar months before now."""
    return resolve_now(as_of) - relativedelta(months=months)


def is_before(moment: DateLike, reference: DateLike) -> bool:
    return to_datetime(moment) < to_datetime(reference)


def is_expiring_soon(expiration: DateLike, days_threshold: int = 30, as_of: Optional[DateLike] = None) -> bool:
    """True when the expiration falls within the next ``days_threshold`` days."""
    remaining = days_until(expiration, as_of)
    return 0 < remaining <= days_threshold


# Time-of-day helpers

def time_to_minutes(value: str) -> int:
    """Convert "HH:MM" to minutes after midnight."""
    hours, minutes = value.split(":")[:2]
    return int(hours) * 60 + int(minutes)


def hours_between_times(start_time: str, end_time: str) -> float:
    """Shift length in hours; an end before the start crosses midnight."""
    duration = time_to_minutes(end_time) - time_to_minutes(start_time)
    if duration < 0:
        duration += MINUTES_PER_DAY
    return duration / 60


def is_time_in_range(value: str, start_time: str, end_time: str) -> bool:
    """Check a time against an inclusive range, supporting overnight ranges."""
    minutes = time_to_minutes(value)
    start = time_to_minutes(start_time)
    end = time_to_minutes(end_time)

    if start <= end:
        return start <= minutes <= end
    return minutes >= start or minutes <= end
