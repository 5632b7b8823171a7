"""Human-readable rendering of the last command's duration."""

from __future__ import annotations

_SUFFIXES = ("d", "h", "m", "s")


def render_time(raw_seconds: int) -> str:
    """Render seconds as days/hours/minutes/seconds, omitting zero parts."""
    raw_minutes, seconds = divmod(raw_seconds, 60)
    raw_hours, minutes = divmod(raw_minutes, 60)
    days, hours = divmod(raw_hours, 24)

    return "".join(
        f"{value}{suffix}"
        for value, suffix in zip((days, hours, minutes, seconds), _SUFFIXES)
        if value
    )