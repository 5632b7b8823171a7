"""Formatting of memory and swap usage figures."""

from __future__ import annotations

import math

_BINARY_UNITS = ("KiB", "MiB", "GiB", "TiB", "PiB", "EiB")


def format_kib(n_kib: int) -> str:
    """Render a size in KiB with the largest fitting binary unit, e.g. ``8GiB``."""
    total_bytes = max(int(n_kib) * 1024, 0)
    unit = "B"
    divisor = 1
    for power, name in enumerate(_BINARY_UNITS, start=1):
        size = 1024**power
        if total_bytes > size:
            unit, divisor = name, size
    value = total_bytes / divisor
    return f"{value:.0f}{unit}"


def percent_sign_for_shell(shell: str) -> str:
    """Return the percent sign escaped for the given shell's prompt."""
    if shell == "zsh":
        return "%%"
    if shell == "powershell":
        return "`%"
    return "%"


def _format_percent(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return f"{value:.0f}"


def format_usage(
    used_kib: int, total_kib: int, show_percentage: bool, percent_sign: str
) -> str:
    """Render usage either as a percentage or as ``used/total`` sizes."""
    if show_percentage:
        if total_kib == 0:
            percent = math.nan if used_kib == 0 else math.inf
        else:
            percent = used_kib / total_kib * 100.0
        return f"{_format_percent(percent)}{percent_sign}"
    return f"{format_kib(used_kib)}/{format_kib(total_kib)}"