"""Constructor input normalization.

Turns whatever a caller hands to :class:`~jpdatetime.domain.value.JstDateTime`
into a concrete instant. Strings have every ``-`` rewritten to ``/`` before
parsing, so ``2024-03-01`` and ``2024/03/01`` are read identically (both as
Tokyo wall-clock midnight).

A string counts as a date only when it names a year, month and day; the time
of day defaults to midnight. ``10:15`` or ``March`` on their own are not
dates. A day past the end of its month (up to 31) rolls over into the next
month, so ``2024/02/30`` is March 1st.

INVARIANT: :func:`normalize_instant` never raises and always returns an
aware datetime. Unusable input falls back to the current instant.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta
from typing import Any

from dateutil import parser as date_parser

from jpdatetime.domain import context

logger = logging.getLogger(__name__)

# Two defaults that differ in every date field; a string that leaves any of
# year, month or day unset parses differently under each.
_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))

_YMD_LEAD = re.compile(r"^\s*(\d{4})/(\d{1,2})/(\d{1,2})(?!\d)")


def to_slash_separators(value: str) -> str:
    """Rewrite ``yyyy-mm-dd`` style separators to ``yyyy/mm/dd``."""
    return str(value).replace("-", "/")


def _parse_complete(value: str) -> datetime:
    """Parse *value*, raising ValueError unless it names a full date."""
    first, second = (date_parser.parse(value, default=d) for d in _DEFAULTS)
    if first.replace(tzinfo=None) != second.replace(tzinfo=None):
        raise ValueError(f"incomplete date: {value!r}")
    return first


def _parse_rolled_over(value: str) -> datetime:
    """Parse a ``YYYY/M/D`` string whose day may overflow its month."""
    match = _YMD_LEAD.match(value)
    if match is None:
        return _parse_complete(value)
    year, month, day = match.group(1), int(match.group(2)), int(match.group(3))
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        raise ValueError(f"month or day out of range: {value!r}")
    first_of_month = _parse_complete(f"{year}/{month}/1{value[match.end():]}")
    return first_of_month + timedelta(days=day - 1)


def _parse_string(value: str) -> datetime | None:
    try:
        return context.anchor(_parse_rolled_over(value))
    except (ValueError, OverflowError):
        return None


def is_date(value: str) -> bool:
    """Return True if a timestamp can be derived from *value*."""
    return _parse_string(value) is not None


def parse_or_none(value: Any) -> datetime | None:
    """Interpret *value* as an instant without the fail-open default.

    Returns None when *value* is absent or cannot be read as a date, including
    a datetime that cannot be expressed in the Tokyo zone.
    """
    if isinstance(value, datetime):
        try:
            return context.anchor(value)
        except (ValueError, OverflowError):
            return None
    if isinstance(value, str):
        return _parse_string(to_slash_separators(value))
    return None


def normalize_instant(value: Any = None) -> datetime:
    """Return the instant for *value*, or the current instant if unusable."""
    parsed = parse_or_none(value)
    if parsed is None:
        if value is not None:
            logger.debug("Unparseable date input %r; using current time", value)
        return context.now()
    return parsed
