"""
Calendar date utilities for fuel log entries.

Fill-ups are recorded per calendar day: the time of day carries no meaning
for the statistics, so every input is reduced to a ``datetime.date``. This
module also owns the month bucketing key and the labels shown for it.

Parsing goes through ``dateutil`` so that both plain ``YYYY-MM-DD`` strings
and full ISO 8601 timestamps coming from clients are accepted.
"""

import logging
from datetime import date, datetime

from dateutil import parser

logger = logging.getLogger(__name__)

MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def parse_calendar_date(value: str | datetime | date | None) -> date | None:
    """
    Reduce a date-like input to a calendar date.

    Args:
        value: A ``date``, a ``datetime`` or an ISO 8601 string.

    Returns:
        The calendar date, or None if the value is empty or unparseable.
    """
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        try:
            return parser.isoparse(value.strip()).date()
        except (ValueError, TypeError) as e:
            logger.warning("Failed to parse date '%s': %s", value, e)
            return None

    logger.warning("Unsupported date input type '%s'", type(value))
    return None


def month_key(value: date) -> str:
    """Return the ``YYYY-MM`` bucket key of a date."""
    return f"{value.year:04d}-{value.month:02d}"


def month_label(year: int, month: int) -> str:
    """Return a short display label such as ``Jan 2025``."""
    return f"{MONTH_ABBREVIATIONS[month - 1]} {year:04d}"


def format_display_date(value: date) -> str:
    """Format a date as ``DD/MM/YYYY`` for history listings."""
    return value.strftime("%d/%m/%Y")
