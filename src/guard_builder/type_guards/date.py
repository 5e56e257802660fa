"""Guards for dates and date strings."""

import datetime as dt
from email.utils import parsedate_to_datetime
from typing import Any

from ..guards import Guard

# Human-readable layouts accepted in addition to ISO 8601 and RFC 2822.
# Anything else is rejected, including partial dates that JavaScript's lenient
# Date parser accepts, such as a bare year ("2024") or a year and month ("2024-05").
HUMAN_DATE_FORMATS = (
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%B %d %Y",
    "%m/%d/%Y",
    "%Y/%m/%d",
    "%m/%d/%Y %H:%M:%S",
)


def parses_as_date(text: str) -> bool:
    """Check whether a string describes a valid calendar date or timestamp."""
    candidate = text.strip()
    if not candidate:
        return False

    try:
        dt.datetime.fromisoformat(candidate)
        return True
    except ValueError:
        pass

    for date_format in HUMAN_DATE_FORMATS:
        try:
            dt.datetime.strptime(candidate, date_format)
            return True
        except ValueError:
            continue

    try:
        parsedate_to_datetime(candidate)
        return True
    except (TypeError, ValueError, IndexError):
        return False


def _is_date(value: Any) -> bool:
    return isinstance(value, dt.date)


def _is_date_string(value: Any) -> bool:
    return isinstance(value, str) and parses_as_date(value)


class DateTypeGuards:
    """Guards for date objects and strings holding a parseable date."""

    @staticmethod
    def date() -> Guard[dt.date]:
        """``datetime.date`` and ``datetime.datetime`` instances."""
        return Guard(_is_date, name="date")

    @staticmethod
    def date_string() -> Guard[str]:
        """Strings that parse to a valid date. Date objects are rejected."""
        return Guard(_is_date_string, name="date_string")
