"""Appointment slot generation.

A day offers half-hour entry slots from 08:00 to 19:30 inclusive (24 slots).
Only the calendar date of the input is used; its time of day is discarded.
"""

from __future__ import annotations

from typing import Any

from jpdatetime.domain.formatting import to_date_time_string
from jpdatetime.domain.normalize import normalize_instant

SLOT_FIRST_HOUR = 8
SLOT_END_HOUR = 20  # exclusive
SLOT_STEP_MINUTES = 30


def generate_slots(value: Any) -> list[str]:
    """Return the ordered ``YYYY-MM-DD HH:mm:ss`` slots for the date of *value*.

    *value* goes through the normalizer, so an unreadable input yields
    today's slots.
    """
    day = normalize_instant(value)
    slots: list[str] = []
    for hour in range(SLOT_FIRST_HOUR, SLOT_END_HOUR):
        for minute in range(0, 60, SLOT_STEP_MINUTES):
            slot = day.replace(hour=hour, minute=minute, second=0, microsecond=0)
            slots.append(to_date_time_string(slot))
    return slots
