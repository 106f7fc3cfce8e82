"""Tests for appointment slot generation."""

from __future__ import annotations

from datetime import datetime

from jpdatetime.domain.slots import (
    SLOT_END_HOUR,
    SLOT_FIRST_HOUR,
    SLOT_STEP_MINUTES,
    generate_slots,
)
from tests.conftest import jst


class TestGenerateSlots:
    def test_count_and_bounds(self) -> None:
        slots = generate_slots("2024-03-01 10:15:00")
        assert len(slots) == 24
        assert slots[0] == "2024-03-01 08:00:00"
        assert slots[1] == "2024-03-01 08:30:00"
        assert slots[-1] == "2024-03-01 19:30:00"

    def test_ascending_half_hours(self) -> None:
        slots = generate_slots("2024-03-01")
        expected = [
            f"2024-03-01 {hour:02d}:{minute:02d}:00"
            for hour in range(SLOT_FIRST_HOUR, SLOT_END_HOUR)
            for minute in (0, SLOT_STEP_MINUTES)
        ]
        assert slots == expected
        assert slots == sorted(slots)

    def test_time_of_day_is_discarded(self) -> None:
        assert generate_slots("2024-03-01 23:59:59") == generate_slots("2024-03-01")

    def test_separator_invariance(self) -> None:
        assert generate_slots("2024/03/01") == generate_slots("2024-03-01")

    def test_datetime_input(self) -> None:
        assert generate_slots(jst(2024, 3, 1, 17, 45))[0] == "2024-03-01 08:00:00"

    def test_unreadable_input_uses_today(self, frozen_now: datetime) -> None:
        slots = generate_slots("not a date")
        assert slots[0] == "2026-10-18 08:00:00"
        assert slots[-1] == "2026-10-18 19:30:00"

    def test_none_uses_today(self, frozen_now: datetime) -> None:
        assert generate_slots(None)[0] == "2026-10-18 08:00:00"

    def test_unrepresentable_input_uses_today(self, frozen_now: datetime) -> None:
        assert generate_slots("9999-12-31T20:00:00Z")[0] == "2026-10-18 08:00:00"
