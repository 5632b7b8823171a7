"""Detection and formatting of the installed Java runtime version."""

from __future__ import annotations

import os
import re
import subprocess

_PREFIXES = ("JRE (", "VM (")
_VERSION = re.compile(r"[0-9.]+")


def parse_jre_version(text: str) -> str | None:
    """Parse the version from ``java -Xinternalversion`` output.

    Understands forms such as ``JRE (1.8.0_222-b10)``,
    ``JRE (Zulu 8.40.0.25-CA-linux64) (1.8.0_222-b10)`` and
    ``VM (1.8.0_222-b10)``. Returns None for anything else.
    """
    for prefix in _PREFIXES:
        index = text.find(prefix)
        if index >= 0:
            rest = text[index + len(prefix):]
            break
    else:
        return None

    match = _VERSION.match(rest)
    if match:
        return match.group()

    paren = rest.find("(")
    if paren < 0:
        return None
    match = _VERSION.match(rest, paren + 1)
    return match.group() if match else None


def format_java_version(java_out: str) -> str | None:
    """Return ``v<version>`` extracted from the JVM output, or None."""
    version = parse_jre_version(java_out)
    return f"v{version}" if version is not None else None


def combine_outputs(stdout: bytes, stderr: bytes) -> str:
    """Join standard output and error, since some vendors print to stderr."""
    return stdout.decode("utf-8") + stderr.decode("utf-8")


def get_java_version() -> str | None:
    """Run the JVM with ``-Xinternalversion`` and return its combined output."""
    java_home = os.environ.get("JAVA_HOME")
    java_command = f"{java_home}/bin/java" if java_home is not None else "java"
    try:
        result = subprocess.run(
            [java_command, "-Xinternalversion"], capture_output=True, check=False
        )
    except OSError:
        return None
    return combine_outputs(result.stdout, result.stderr)