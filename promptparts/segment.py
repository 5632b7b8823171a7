"""A single styled piece of text within a prompt module."""

from __future__ import annotations

from dataclasses import dataclass

_RESET = "\x1b[0m"


@dataclass
class Segment:
    """A configurable element of a module, usually holding one data point.

    ``style`` is a string of ANSI SGR parameters such as ``"1;32"``. When it
    is ``None`` the segment inherits the style of the module containing it,
    and an empty string means a plain style with no escapes.
    """

    name: str
    style: str | None = None
    value: str = ""

    def ansi_string(self) -> str:
        """Return the value painted with the segment's style, if any."""
        if not self.style:
            return self.value
        return f"\x1b[{self.style}m{self.value}{_RESET}"

    def is_empty(self) -> bool:
        """Return True when the value holds nothing but whitespace."""
        return not self.value.strip()

    def __str__(self) -> str:
        return self.ansi_string()