"""Path contraction and truncation for the current-directory segment."""

from __future__ import annotations

import os
from pathlib import PurePath


def _replace_c_dir(path: str) -> str:
    """Turn a ``C:/`` drive prefix into ``/c`` on Windows; no-op elsewhere."""
    if os.name == "nt":
        return path.replace("C:/", "/c")
    return path


def contract_path(
    full_path: str | os.PathLike[str],
    top_level_path: str | os.PathLike[str],
    top_level_replacement: str,
) -> str:
    """Replace ``top_level_path`` at the start of ``full_path`` with a label.

    The result always uses forward slashes.
    """
    full = PurePath(full_path)
    top = PurePath(top_level_path)

    if not full.is_relative_to(top):
        return _replace_c_dir(full.as_posix())

    if full == top:
        return _replace_c_dir(top_level_replacement)

    relative = full.relative_to(top).as_posix()
    return f"{top_level_replacement}/{_replace_c_dir(relative)}"


def truncate(dir_string: str, length: int) -> str:
    """Keep only the last ``length`` components of a slash-separated path.

    A length of 0 leaves the path untouched.
    """
    if length == 0:
        return dir_string

    components = dir_string.split("/")
    # A leading "/" yields an empty first component that is not a real one.
    if components[0] == "":
        components = components[1:]

    if len(components) <= length:
        return dir_string

    return "/".join(components[-length:])


def _abbreviate(word: str, length: int) -> str:
    if not word or len(word) <= length:
        return word
    if word.startswith("."):
        return word[: length + 1]
    return word[:length]


def to_fish_style(pwd_dir_length: int, dir_string: str, truncated_dir_string: str) -> str:
    """Shorten every directory in front of the truncated path.

    Each component before ``truncated_dir_string`` is cut to its first
    ``pwd_dir_length`` characters (one more for hidden directories).
    """
    replaced = dir_string
    if truncated_dir_string:
        while replaced.endswith(truncated_dir_string):
            replaced = replaced[: -len(truncated_dir_string)]

    return "/".join(_abbreviate(word, pwd_dir_length) for word in replaced.split("/"))