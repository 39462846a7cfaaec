"""
Formatting helpers shared by the entity mappers.

    format_date      agreement date as DD-MM-YYYY
    calculate_age    whole years from an Aadhaar DD-MM-YYYY date of birth
    format_aadhaar   12-digit Aadhaar as "XXXX XXXX XXXX"
    current_time     the document clock (configurable time zone)
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from agreement_mapper.core.config import settings
from agreement_mapper.core.logging import get_logger

logger = get_logger(__name__)

_NON_DIGITS = re.compile(r"\D")


def current_time(tz_name: str | None = None) -> datetime:
    """
    Now, as used for the agreement date and age calculation.

    Uses DOCUMENT_TIMEZONE when configured (or tz_name when given);
    otherwise the server's local time.  An unknown zone falls back to
    local time with a warning.
    """
    zone = settings.DOCUMENT_TIMEZONE if tz_name is None else tz_name
    if not zone:
        return datetime.now()
    try:
        return datetime.now(ZoneInfo(zone))
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown document time zone, using local time", timezone=zone)
        return datetime.now()


def format_date(value: date) -> str:
    """Render a date/datetime as DD-MM-YYYY."""
    return f"{value.day:02d}-{value.month:02d}-{value.year}"


def calculate_age(dob: Any, today: date | None = None) -> str:
    """
    Age in whole years for a DD-MM-YYYY date of birth, as a string.

    Returns "" when the DOB is missing, malformed, not a real calendar
    date, or lies in the future.
    """
    if not dob:
        return ""

    parts = str(dob).split("-")
    if len(parts) != 3:
        logger.warning("Age calculation skipped: DOB is not DD-MM-YYYY", parts=len(parts))
        return ""

    if not all(part.isascii() and part.isdigit() for part in parts):
        logger.warning("Age calculation skipped: non-numeric DOB")
        return ""

    day, month, year = (int(part) for part in parts)
    if not day or not month or not year:
        logger.warning("Age calculation skipped: zero day, month or year")
        return ""
    # two-digit years are 19xx
    if year < 100:
        year += 1900

    try:
        birth_date = date(year, month, day)
    except ValueError:
        logger.warning("Age calculation skipped: invalid calendar date", birth_year=year)
        return ""

    if today is None:
        today = current_time().date()
    elif isinstance(today, datetime):
        today = today.date()

    age = today.year - birth_date.year
    # birthday not yet reached this year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1

    if age < 0:
        logger.warning("Age calculation skipped: DOB is in the future", birth_year=year)
        return ""
    return str(age)


def format_aadhaar(value: Any) -> Any:
    """
    Space a 12-digit Aadhaar number into groups of four.

    Anything that doesn't reduce to exactly 12 digits (masked numbers
    such as "XXXX XXXX 9012", partial values) is returned unchanged.
    """
    clean = _NON_DIGITS.sub("", str(value))
    if len(clean) != 12:
        return value
    return f"{clean[0:4]} {clean[4:8]} {clean[8:12]}"
