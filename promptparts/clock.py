"""Formatting of the current time, optionally at a fixed UTC offset."""

from __future__ import annotations

import math
import re
import struct
from datetime import datetime, timedelta, timezone

_DIRECTIVE = re.compile(r"%(.)", re.DOTALL)


class InvalidOffsetError(ValueError):
    """Raised when a UTC offset is not a number of hours within (-24, 24)."""

    def __init__(self, offset: str) -> None:
        super().__init__("Invalid timezone offset.")
        self.offset = offset


def _to_f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _parse_offset_hours(text: str) -> float | None:
    # Accept only plain numeric literals: no surrounding blanks, no digit separators.
    if text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _expand_directive(match: re.Match[str], time: datetime) -> str:
    code = match.group(1)
    meridiem = "AM" if time.hour < 12 else "PM"
    if code == "T":
        return f"{time.hour:02d}:{time.minute:02d}:{time.second:02d}"
    if code == "R":
        return f"{time.hour:02d}:{time.minute:02d}"
    if code == "r":
        hour12 = time.hour % 12 or 12
        return f"{hour12:02d}:{time.minute:02d}:{time.second:02d} {meridiem}"
    if code == "p":
        return meridiem
    return match.group(0)


def format_time(time_format: str, time: datetime) -> str:
    """Format ``time`` with a strftime-style format string.

    ``%T``, ``%R``, ``%r`` and ``%p`` are rendered independently of the
    platform and locale.
    """
    expanded = _DIRECTIVE.sub(lambda m: _expand_directive(m, time), time_format)
    return time.strftime(expanded)


def create_offset_time_string(
    utc_time: datetime, utc_time_offset: str, time_format: str
) -> str:
    """Format ``utc_time`` shifted by an offset given in hours, e.g. ``"+9.5"``.

    A naive ``utc_time`` is taken to be in UTC. Raises
    ``InvalidOffsetError`` when the offset does not parse or is not
    strictly between -24 and 24 hours.
    """
    hours = _parse_offset_hours(utc_time_offset)
    if hours is None or math.isnan(hours) or not -24.0 < hours < 24.0:
        raise InvalidOffsetError(utc_time_offset)

    seconds = int(_to_f32(_to_f32(hours) * 3600.0))
    target_zone = timezone(timedelta(seconds=seconds))

    if utc_time.tzinfo is None:
        utc_time = utc_time.replace(tzinfo=timezone.utc)
    return format_time(time_format, utc_time.astimezone(target_zone))