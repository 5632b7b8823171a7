"""Detection of the Python interpreter version and virtual environment."""

from __future__ import annotations

import logging
import subprocess
from pathlib import PurePath

log = logging.getLogger(__name__)

_PREFIX = "Python "


def format_python_version(python_stdout: str) -> str:
    """Turn ``Python 3.7.2`` into ``v3.7.2``."""
    text = python_stdout
    while text.startswith(_PREFIX):
        text = text[len(_PREFIX):]
    return f"v{text.strip()}"


def get_python_version() -> str | None:
    """Run ``python --version`` and return what it printed.

    Older interpreters print to stderr, newer ones to stdout.
    """
    try:
        result = subprocess.run(["python", "--version"], capture_output=True, check=False)
    except OSError:
        return None
    if result.returncode != 0:
        log.warning(
            "Non-Zero exit code '%s' when executing `python --version`", result.returncode
        )
        return None
    output = result.stdout if result.stdout else result.stderr
    try:
        return output.decode("utf-8")
    except UnicodeDecodeError:
        return None


def get_pyenv_version() -> str | None:
    """Run ``pyenv version-name`` and return its standard output, or None."""
    try:
        result = subprocess.run(["pyenv", "version-name"], capture_output=True, check=False)
    except OSError:
        return None
    try:
        return result.stdout.decode("utf-8")
    except UnicodeDecodeError:
        return None


def get_python_virtual_env(virtual_env: str | None) -> str | None:
    """Return the last path component of a ``$VIRTUAL_ENV`` value."""
    if virtual_env is None:
        return None
    name = PurePath(virtual_env).name
    if not name or name == "..":
        return None
    return name