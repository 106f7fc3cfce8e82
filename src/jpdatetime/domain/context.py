"""Process-wide formatting context: fixed Japanese locale and Asia/Tokyo zone.

Built once at import time and never overridden. Every read of the current
instant goes through :func:`now` so tests can pin the clock in one place.
"""

from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from pydantic import BaseModel


class FormattingContext(BaseModel):
    """Locale and zone applied at formatting and arithmetic time."""

    model_config = {"frozen": True}

    locale: str = "ja"
    timezone: str = "Asia/Tokyo"

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


FORMAT_CONTEXT = FormattingContext()
TOKYO: ZoneInfo = FORMAT_CONTEXT.zone


def now() -> datetime:
    """Return the current instant, aware, in the Tokyo zone."""
    return datetime.now(TOKYO)


def anchor(moment: datetime) -> datetime:
    """Project *moment* into the Tokyo zone.

    Naive datetimes are read as Tokyo wall-clock time.
    """
    if moment.tzinfo is None or moment.tzinfo.utcoffset(moment) is None:
        return moment.replace(tzinfo=TOKYO)
    return moment.astimezone(TOKYO)
