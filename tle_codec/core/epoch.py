"""Conversions between the TLE epoch (2-digit year + day of year) and datetimes."""

from __future__ import annotations

import calendar
import datetime as dt
from typing import Tuple

from ..errors import ValueOutOfRange

PIVOT_YEAR = 70
FIRST_YEAR = 1900 + PIVOT_YEAR
LAST_YEAR = 2000 + PIVOT_YEAR - 1
MAX_DAY = 366.0

SECONDS_PER_DAY = 86_400
MICROS_PER_DAY = SECONDS_PER_DAY * 1_000_000


def expand_year(two_digit_year: int) -> int:
    """Resolve a 2-digit year: 70-99 are the 1900s and 00-69 the 2000s."""

    if not 0 <= two_digit_year <= 99:
        raise ValueOutOfRange("epoch year", two_digit_year, "expected 0-99")
    if two_digit_year >= PIVOT_YEAR:
        return 1900 + two_digit_year
    return 2000 + two_digit_year


def contract_year(year: int) -> int:
    """Inverse of :func:`expand_year`."""

    if not FIRST_YEAR <= year <= LAST_YEAR:
        raise ValueOutOfRange("epoch year", year, f"expected {FIRST_YEAR}-{LAST_YEAR}")
    return year % 100


def days_in_year(year: int) -> int:
    return 366 if calendar.isleap(year) else 365


def to_absolute_time(two_digit_year: int, day_of_year: float) -> dt.datetime:
    """Return the UTC instant of a TLE epoch.

    Day ``1.0`` is January 1st 00:00:00; the fraction is resolved to the
    microsecond. The instant must fall inside the epoch year, so the day is
    limited to ``1.0 <= day < days_in_year + 1``.
    """

    year = expand_year(two_digit_year)
    limit = days_in_year(year) + 1
    if not 1.0 <= day_of_year < limit:
        raise ValueOutOfRange("epoch day", day_of_year, f"expected 1 <= day < {limit}")
    whole = int(day_of_year)
    micros = round((day_of_year - whole) * MICROS_PER_DAY)
    base = dt.datetime(year, 1, 1, tzinfo=dt.timezone.utc)
    instant = base + dt.timedelta(days=whole - 1, microseconds=micros)
    if instant.year != year:
        raise ValueOutOfRange("epoch day", day_of_year, "rounds into the next year")
    return instant


def from_absolute_time(instant: dt.datetime) -> Tuple[int, float]:
    """Return ``(two_digit_year, day_of_year)`` for a timezone-aware datetime."""

    if instant.tzinfo is None:
        raise ValueError("datetime must be timezone-aware")
    instant = instant.astimezone(dt.timezone.utc)
    two_digit_year = contract_year(instant.year)
    midnight = instant.replace(hour=0, minute=0, second=0, microsecond=0)
    elapsed = instant - midnight
    micros = (elapsed.seconds * 1_000_000) + elapsed.microseconds
    day_of_year = instant.timetuple().tm_yday + micros / MICROS_PER_DAY
    return two_digit_year, day_of_year


__all__ = [
    "PIVOT_YEAR",
    "MAX_DAY",
    "days_in_year",
    "expand_year",
    "contract_year",
    "to_absolute_time",
    "from_absolute_time",
]
