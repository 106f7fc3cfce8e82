"""Comparisons between a wrapped instant and another date-like input.

``is_before`` and ``days_diff`` read their argument with :func:`parse_raw`,
which does NOT apply the constructor's separator rewrite or its fail-open
default. ``is_same_date`` does go through the normalizer. Callers rely on
this difference, so the two paths are kept apart.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta
from typing import Any

from dateutil.relativedelta import relativedelta

from jpdatetime.domain import context
from jpdatetime.domain.normalize import normalize_instant

# YYYY[-/]MM[-/]DD[T ]HH:mm:ss.SSS, every part after the year optional.
_RAW_PATTERN = re.compile(
    r"^(\d{4})[-/]?(\d{1,2})?[-/]?(\d{0,2})[Tt\s]*(\d{1,2})?:?(\d{1,2})?:?(\d{1,2})?[.:]?(\d+)?$"
)
_ONE_DAY = timedelta(days=1)


def _from_fields(match: re.Match[str]) -> datetime:
    year, month, day, hour, minute, second, fraction = match.groups()
    # Out-of-range fields roll over into the next unit (month 13 -> January).
    base = datetime(int(year), 1, 1, tzinfo=context.TOKYO)
    return base + relativedelta(
        months=int(month) - 1 if month else 0,
        days=int(day) - 1 if day else 0,
        hours=int(hour or 0),
        minutes=int(minute or 0),
        seconds=int(second or 0),
        microseconds=int((fraction or "0")[:3]) * 1000,
    )


def parse_raw(value: Any) -> datetime | None:
    """Read *value* with the default, non-normalizing interpretation.

    Returns None when *value* is not date-like.
    """
    if not isinstance(value, (datetime, str)):
        return None
    try:
        if isinstance(value, datetime):
            return context.anchor(value)
        match = None if value.upper().endswith("Z") else _RAW_PATTERN.match(value)
        if match:
            return _from_fields(match)
        return context.anchor(datetime.fromisoformat(value))
    except (ValueError, OverflowError):
        return None


def is_before(instant: datetime, other: Any) -> bool:
    """True iff *instant* is strictly earlier than *other*."""
    parsed = parse_raw(other)
    if parsed is None:
        return False
    return instant < parsed


def days_diff(instant: datetime, other: Any) -> int | None:
    """Whole days from *instant* to *other*, truncated toward zero.

    Positive when *other* is later. None when *other* is not date-like.
    """
    parsed = parse_raw(other)
    if parsed is None:
        return None
    delta = parsed - instant
    days = abs(delta) // _ONE_DAY
    return days if delta >= timedelta(0) else -days


def is_same_date(instant: datetime, other: Any) -> bool:
    """True iff the normalized instant of *other* equals *instant* exactly."""
    return normalize_instant(other) == instant
