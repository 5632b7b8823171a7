"""Grapheme-aware truncation of git branch names."""

from __future__ import annotations

import regex

_GRAPHEME = regex.compile(r"\X")


def get_graphemes(text: str, length: int) -> str:
    """Return the first ``length`` extended grapheme clusters of ``text``."""
    if length <= 0:
        return ""
    clusters = []
    for match in _GRAPHEME.finditer(text):
        if len(clusters) >= length:
            break
        clusters.append(match.group())
    return "".join(clusters)


def graphemes_len(text: str) -> int:
    """Count the extended grapheme clusters in ``text``."""
    return sum(1 for _ in _GRAPHEME.finditer(text))


def truncate_branch_name(branch_name: str, length: int, truncation_symbol: str) -> str:
    """Cut a branch name to ``length`` graphemes, marking the cut.

    Only the first grapheme of ``truncation_symbol`` is used, and only when
    the name was actually shortened. A length of zero or less disables
    truncation.
    """
    if length <= 0:
        return branch_name
    symbol = get_graphemes(truncation_symbol, 1)
    truncated = get_graphemes(branch_name, length)
    if length < graphemes_len(branch_name):
        return truncated + symbol
    return truncated