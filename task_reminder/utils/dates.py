from datetime import date
from typing import Optional

from dateutil import parser as date_parser

from ..core.exceptions import ValidationError


def parse_deadline(value: str) -> date:
    """
    Return the calendar date of a deadline string.

    Accepts ISO-8601 as well as looser forms such as ``2099-1-1``,
    ``01/02/2099`` (month first) or ``Jan 1, 2099``. Aware values are
    converted to local server time before the date is taken.
    """
    try:
        parsed = date_parser.parse(value.strip())
    except (ValueError, OverflowError):
        raise ValidationError("Deadline must be a valid date")

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.date()


def is_past(day: date, today: Optional[date] = None) -> bool:
    """True when ``day`` is strictly before today (local time)."""
    return day < (today or date.today())
