"""JstDateTime — an immutable Tokyo-zone date/time value.

Construction is total: a ``datetime`` is wrapped as-is, a string is
normalized and parsed, and anything unusable (including None) becomes the
current instant. Every other operation derives a string, a primitive, or a
new ``JstDateTime`` from the wrapped instant.

INVARIANT: the wrapped instant never changes after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from jpdatetime.domain import arithmetic, compare, formatting, slots
from jpdatetime.domain.normalize import is_date, normalize_instant, to_slash_separators


@dataclass(frozen=True, init=False)
class JstDateTime:
    """A point in time rendered and compared in Japanese / Asia/Tokyo terms."""

    instant: datetime

    def __init__(self, value: datetime | str | None = None) -> None:
        object.__setattr__(self, "instant", normalize_instant(value))

    def __repr__(self) -> str:
        return f"JstDateTime({self.to_date_time_string()!r})"

    @property
    def date(self) -> datetime:
        """The wrapped instant, in the Tokyo zone."""
        return self.instant

    # Normalization helpers, kept on the type for callers that pre-check input.
    format_safari_support = staticmethod(to_slash_separators)
    is_date = staticmethod(is_date)

    # --- Formatting ---

    def to_jp_string(self) -> str:
        return formatting.to_jp_string(self.instant)

    def to_jp_string_with_week(self) -> str:
        return formatting.to_jp_string_with_week(self.instant)

    def to_locale_string(self) -> str:
        return formatting.to_locale_string(self.instant)

    def to_only_time(self) -> str:
        return formatting.to_only_time(self.instant)

    def to_date_string(self) -> str:
        return formatting.to_date_string(self.instant)

    def to_date_jp_string(self) -> str:
        return formatting.to_date_jp_string(self.instant)

    def to_date_string_with_time(self) -> str:
        return formatting.to_date_string_with_time(self.instant)

    def to_date_time_string(self) -> str:
        return formatting.to_date_time_string(self.instant)

    def to_date_name(self) -> str:
        return formatting.to_date_name(self.instant)

    def formats(self) -> dict[str, str]:
        """Every supported rendering, keyed by format name."""
        return formatting.format_catalogue(self.instant)

    # --- Calendar arithmetic ---

    def after_day(self, days: int) -> str:
        """``YYYY-MM-DD`` of this value shifted by *days*."""
        return arithmetic.after_day(self.instant, days)

    def add_date(self, days: int) -> JstDateTime:
        return JstDateTime(arithmetic.shift_days(self.instant, days))

    def subtract_date(self, days: int) -> JstDateTime:
        return JstDateTime(arithmetic.shift_days(self.instant, -days))

    def years_later_new_years_date(self, years: int) -> str:
        """January 1st, *years* years from now (not from this value)."""
        return arithmetic.years_later_new_years_date(years)

    # --- Comparison ---

    def is_before(self, other: Any) -> bool:
        return compare.is_before(self.instant, other)

    def days_diff(self, other: Any) -> int | None:
        return compare.days_diff(self.instant, other)

    def is_same_date(self, other: Any) -> bool:
        return compare.is_same_date(self.instant, other)

    # --- Slots ---

    def generate_slots(self, value: Any) -> list[str]:
        """Entry slots for the date of *value*; this value is not consulted."""
        return slots.generate_slots(value)
