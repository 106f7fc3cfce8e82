"""Calendar arithmetic on Tokyo wall-clock time.

Shifts are applied in whole days after projecting into the Tokyo zone.
Results outside ``datetime``'s range raise :class:`OverflowError`.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from dateutil.relativedelta import relativedelta

from jpdatetime.domain import context
from jpdatetime.domain.formatting import to_date_string


def shift_days(instant: datetime, days: int) -> datetime:
    """Return *instant* moved by *days* whole days (negative moves back)."""
    return context.anchor(instant) + timedelta(days=days)


def after_day(instant: datetime, days: int) -> str:
    """``YYYY-MM-DD`` of *instant* shifted by *days*."""
    return to_date_string(shift_days(instant, days))


def years_later_new_years_date(years: int) -> str:
    """``YYYY-MM-DD`` of January 1st, *years* years after the current time.

    Anchored to the clock at call time, not to any wrapped instant.
    """
    later = context.now() + relativedelta(years=years)
    return to_date_string(later.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0))
