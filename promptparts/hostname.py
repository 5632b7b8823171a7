"""Reading and trimming the system host name."""

from __future__ import annotations

import socket


def trim_hostname(host: str, trim_at: str) -> str:
    """Cut ``host`` at the first occurrence of ``trim_at``.

    An empty ``trim_at`` or one that does not occur leaves ``host`` whole.
    """
    if not trim_at:
        return host
    index = host.find(trim_at)
    if index < 0:
        return host
    return host[:index]


def get_hostname() -> str | None:
    """Return the host name, or None if it cannot be read as UTF-8 text."""
    try:
        host = socket.gethostname()
    except OSError:
        return None
    try:
        host.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return host