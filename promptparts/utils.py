"""Small file helpers shared by the prompt modules."""

from __future__ import annotations

import os


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the whole text of the file at ``path``.

    The contents are decoded as UTF-8 and line endings are left untouched.
    Raises ``OSError`` if the file cannot be opened and ``UnicodeDecodeError``
    if it is not valid UTF-8.
    """
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()