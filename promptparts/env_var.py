"""Looking up an environment variable with an optional fallback."""

from __future__ import annotations

import os
from collections.abc import Mapping


def get_env_value(
    name: str, default: str | None, environ: Mapping[str, str] | None = None
) -> str | None:
    """Return the variable's value, or ``default`` when it is unset.

    A set value that is not valid UTF-8 yields None rather than the default.
    ``environ`` defaults to the process environment.
    """
    env = os.environ if environ is None else environ
    if name not in env:
        return default
    value = env[name]
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return value