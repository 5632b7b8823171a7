"""Detection and formatting of the installed Ruby version."""

from __future__ import annotations

import subprocess

_VERSION_BYTES = 5


def format_ruby_version(ruby_version: str) -> str | None:
    """Take the first five bytes of the second word of ``ruby -v`` output."""
    words = ruby_version.split()
    if len(words) < 2:
        return None
    raw = words[1].encode("utf-8")
    if len(raw) < _VERSION_BYTES:
        return None
    try:
        version = raw[:_VERSION_BYTES].decode("utf-8")
    except UnicodeDecodeError:
        return None
    return f"v{version}"


def get_ruby_version() -> str | None:
    """Run ``ruby -v`` and return its standard output, or None."""
    try:
        result = subprocess.run(["ruby", "-v"], capture_output=True, check=False)
    except OSError:
        return None
    try:
        return result.stdout.decode("utf-8")
    except UnicodeDecodeError:
        return None