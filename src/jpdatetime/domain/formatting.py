"""Fixed-format string renderings of an instant.

Every function projects the instant into the Tokyo zone before formatting;
the projection is never stored.
"""

from __future__ import annotations

import re
from datetime import datetime

from jpdatetime.domain.context import anchor

# Sunday-first, as in the Japanese calendar convention.
WEEKDAYS: tuple[str, ...] = ("日", "月", "火", "水", "木", "金", "土")
WEEKDAY_PLACEHOLDER = "ー"

_LOCALE_TIME = re.compile(r"^[0-9]{1,2}:[0-9]{2}:[0-9]{2}$")


def weekday_index(instant: datetime) -> int:
    """Return the Sunday-first weekday index (0 = Sunday)."""
    return (anchor(instant).weekday() + 1) % 7


def to_jp_string(instant: datetime) -> str:
    """``YYYY年M月D日`` without zero-padding."""
    local = anchor(instant)
    return f"{local.year:04d}年{local.month}月{local.day}日"


def to_jp_string_with_week(instant: datetime) -> str:
    """``YYYY年M月D日（曜）``, or ``ー`` when the weekday cannot be resolved."""
    index = weekday_index(instant)
    if not 0 <= index < len(WEEKDAYS):
        return WEEKDAY_PLACEHOLDER
    return f"{to_jp_string(instant)}（{WEEKDAYS[index]}）"


def to_locale_string(instant: datetime) -> str:
    """The ja-JP locale rendering: ``YYYY/M/D H:MM:SS``."""
    local = anchor(instant)
    return f"{local.year}/{local.month}/{local.day} {local.hour}:{local:%M:%S}"


def to_only_time(instant: datetime) -> str:
    """``HH:MM`` taken from the locale rendering.

    When the locale time part is ``H:MM:SS`` the seconds are dropped and the
    hour is zero-padded; any other shape passes through unchanged.
    """
    parts = to_locale_string(instant).split(" ")
    time_part = parts[1] if len(parts) > 1 else parts[0]
    if _LOCALE_TIME.match(time_part):
        hh, mm, _ss = time_part.split(":")
        return f"{hh.zfill(2)}:{mm}"
    return time_part


def to_date_string(instant: datetime) -> str:
    """``YYYY-MM-DD``."""
    local = anchor(instant)
    return f"{local.year:04d}-{local:%m-%d}"


def to_date_jp_string(instant: datetime) -> str:
    """``YYYY年MM月DD日`` with zero-padding."""
    local = anchor(instant)
    return f"{local.year:04d}年{local:%m}月{local:%d}日"


def to_date_string_with_time(instant: datetime) -> str:
    """``YYYY-MM-DD HH:mm``."""
    local = anchor(instant)
    return f"{local.year:04d}-{local:%m-%d %H:%M}"


def to_date_time_string(instant: datetime) -> str:
    """``YYYY-MM-DD HH:mm:ss``."""
    local = anchor(instant)
    return f"{local.year:04d}-{local:%m-%d %H:%M:%S}"


def to_date_name(instant: datetime) -> str:
    """``YYYYMMDD_HHmmss``, safe for use in file names."""
    local = anchor(instant)
    return f"{local.year:04d}{local:%m%d_%H%M%S}"


FORMATTERS = {
    "jp_string": to_jp_string,
    "jp_string_with_week": to_jp_string_with_week,
    "only_time": to_only_time,
    "locale_string": to_locale_string,
    "date_string": to_date_string,
    "date_jp_string": to_date_jp_string,
    "date_string_with_time": to_date_string_with_time,
    "date_time_string": to_date_time_string,
    "date_name": to_date_name,
}


def format_catalogue(instant: datetime) -> dict[str, str]:
    """Render *instant* in every supported format, keyed by format name."""
    return {name: fn(instant) for name, fn in FORMATTERS.items()}
