"""DateTimeService — JstDateTime operations wrapped in ServiceResult.

The domain value never reports that an input fell back to the current time.
This layer re-checks the raw input so the CLI can warn about it; the value
it computes is exactly what ``JstDateTime`` would produce.
"""

from __future__ import annotations

import logging
from typing import Any

from jpdatetime.domain.compare import parse_raw
from jpdatetime.domain.normalize import parse_or_none
from jpdatetime.domain.slots import generate_slots
from jpdatetime.domain.value import JstDateTime
from jpdatetime.services.result import ServiceResult

logger = logging.getLogger(__name__)


def _fallback_warnings(**inputs: Any) -> list[str]:
    """Warn for each supplied input that the normalizer cannot read."""
    warnings: list[str] = []
    for name, value in inputs.items():
        if value is not None and parse_or_none(value) is None:
            logger.info("Input %s=%r fell back to the current time", name, value)
            warnings.append(f"Could not parse {name} {value!r}; defaulted to the current time")
    return warnings


def _out_of_range(op: str, exc: Exception, **detail: Any) -> ServiceResult:
    logger.warning("%s failed: %s", op, exc)
    return ServiceResult.failure(
        op,
        "OUT_OF_RANGE",
        f"Result is outside the supported date range: {exc}",
        **detail,
    )


class DateTimeService:
    """Stateless facade over :class:`JstDateTime` for outer interfaces."""

    def show(self, value: str | None = None) -> ServiceResult:
        """Render *value* (default: now) in every supported format."""
        dt = JstDateTime(value)
        data: dict[str, Any] = {"instant": dt.instant.isoformat()}
        data.update(dt.formats())
        return ServiceResult.success("show", data, _fallback_warnings(value=value))

    def shift(self, value: str | None, days: int, *, back: bool = False) -> ServiceResult:
        """Move *value* forward (or back) by *days* whole days."""
        dt = JstDateTime(value)
        try:
            shifted = dt.subtract_date(days) if back else dt.add_date(days)
        except OverflowError as exc:
            return _out_of_range("shift", exc, value=value, days=days, back=back)
        return ServiceResult.success(
            "shift",
            {
                "from": dt.to_date_time_string(),
                "days": -days if back else days,
                "result": shifted.to_date_time_string(),
                "date": shifted.to_date_string(),
                "jp": shifted.to_jp_string_with_week(),
            },
            _fallback_warnings(value=value),
        )

    def compare(self, value: str | None, other: str) -> ServiceResult:
        """Compare *value* against *other* with all three comparators."""
        dt = JstDateTime(value)
        warnings = _fallback_warnings(value=value)
        if parse_raw(other) is None:
            warnings.append(
                f"{other!r} is not a plain date string; is_before and days_diff are undefined"
            )
        return ServiceResult.success(
            "compare",
            {
                "value": dt.to_date_time_string(),
                "other": other,
                "is_before": dt.is_before(other),
                "days_diff": dt.days_diff(other),
                "is_same_date": dt.is_same_date(other),
            },
            warnings,
        )

    def slots(self, value: str | None = None) -> ServiceResult:
        """List the appointment slots for the date of *value* (default: today)."""
        items = generate_slots(value)
        return ServiceResult.success(
            "slots",
            {"date": items[0][:10], "count": len(items), "items": items},
            _fallback_warnings(date=value),
        )

    def new_year(self, years: int) -> ServiceResult:
        """January 1st, *years* years from today."""
        try:
            result = JstDateTime().years_later_new_years_date(years)
        except (OverflowError, ValueError) as exc:
            return _out_of_range("new_year", exc, years=years)
        return ServiceResult.success("new_year", {"years": years, "date": result})
