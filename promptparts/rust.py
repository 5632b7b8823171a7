"""Detection of the rustc toolchain version in use for a directory."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass
from pathlib import Path, PurePath

_NOT_INSTALLED_PREFIX = "error: toolchain '"
_NOT_INSTALLED_SUFFIX = "' is not installed\n"
_TOOLCHAIN_FILE = "rust-toolchain"


@dataclass(frozen=True)
class RustcVersion:
    """``rustup run`` succeeded and printed the compiler version."""

    stdout: str


@dataclass(frozen=True)
class ToolchainName:
    """The requested toolchain is not installed; only its name is known."""

    name: str


@dataclass(frozen=True)
class RustupNotWorking:
    """``rustup`` could not be executed at all."""


@dataclass(frozen=True)
class RustupError:
    """``rustup`` ran but its output could not be understood."""


RustupOutcome = RustcVersion | ToolchainName | RustupNotWorking | RustupError


def _run(args: list[str]) -> subprocess.CompletedProcess[bytes] | None:
    try:
        return subprocess.run(args, capture_output=True, check=False)
    except OSError:
        return None


def _decode(data: bytes) -> str | None:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return None


def env_rustup_toolchain() -> str | None:
    """Return the trimmed value of ``$RUSTUP_TOOLCHAIN``, if set."""
    value = os.environ.get("RUSTUP_TOOLCHAIN")
    return value.strip() if value is not None else None


def execute_rustup_override_list(cwd: str | os.PathLike[str]) -> str | None:
    """Ask ``rustup override list`` for the toolchain overriding ``cwd``."""
    result = _run(["rustup", "override", "list"])
    if result is None:
        return None
    stdout = _decode(result.stdout)
    if stdout is None:
        return None
    return extract_toolchain_from_rustup_override_list(stdout, cwd)


def extract_toolchain_from_rustup_override_list(
    stdout: str, cwd: str | os.PathLike[str]
) -> str | None:
    """Find the first override whose directory contains ``cwd``."""
    if stdout == "no overrides\n":
        return None
    current = PurePath(cwd)
    for line in stdout.splitlines():
        words = line.split()
        if len(words) < 2:
            continue
        directory, toolchain = words[0], words[1]
        if current.is_relative_to(PurePath(directory)):
            return toolchain
    return None


def _read_first_line(path: Path) -> str | None:
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None
    if not content:
        return None
    return content.split("\n", 1)[0].strip()


def find_rust_toolchain_file(current_dir: str | os.PathLike[str]) -> str | None:
    """Read the first line of the nearest ``rust-toolchain`` file upwards."""
    start = Path(current_dir)
    for directory in (start, *start.parents):
        toolchain = _read_first_line(directory / _TOOLCHAIN_FILE)
        if toolchain is not None:
            return toolchain
    return None


def execute_rustup_run_rustc_version(toolchain: str) -> RustupOutcome:
    """Run ``rustup run <toolchain> rustc --version`` and classify the result."""
    result = _run(["rustup", "run", toolchain, "rustc", "--version"])
    if result is None:
        return RustupNotWorking()
    return extract_toolchain_from_rustup_run_rustc_version(
        result.returncode, result.stdout, result.stderr
    )


def extract_toolchain_from_rustup_run_rustc_version(
    returncode: int, stdout: bytes, stderr: bytes
) -> RustupOutcome:
    """Classify the output of ``rustup run ... rustc --version``."""
    if returncode == 0:
        text = _decode(stdout)
        if text is not None:
            return RustcVersion(text)
        return RustupError()

    message = _decode(stderr)
    if (
        message is not None
        and message.startswith(_NOT_INSTALLED_PREFIX)
        and message.endswith(_NOT_INSTALLED_SUFFIX)
        and len(message) >= len(_NOT_INSTALLED_PREFIX) + len(_NOT_INSTALLED_SUFFIX)
    ):
        return ToolchainName(
            message[len(_NOT_INSTALLED_PREFIX):len(message) - len(_NOT_INSTALLED_SUFFIX)]
        )
    return RustupError()


def execute_rustc_version() -> str | None:
    """Run ``rustc --version`` and return its standard output."""
    result = _run(["rustc", "--version"])
    if result is None:
        return None
    return _decode(result.stdout)


def format_rustc_version(rustc_stdout: str) -> str:
    """Turn ``rustc 1.34.0 (hash date)`` into ``v1.34.0``."""
    version, _, _ = rustc_stdout.partition("(")
    return f"v{version.replace('rustc', '').strip()}"


def get_rust_version(current_dir: str | os.PathLike[str]) -> str | None:
    """Work out the compiler version for ``current_dir`` without installing toolchains.

    Overrides are checked as rustup does: ``$RUSTUP_TOOLCHAIN``, then
    ``rustup override list``, then a ``rust-toolchain`` file.
    """
    toolchain = env_rustup_toolchain()
    if toolchain is None:
        toolchain = execute_rustup_override_list(current_dir)
    if toolchain is None:
        toolchain = find_rust_toolchain_file(current_dir)

    if toolchain is None:
        stdout = execute_rustc_version()
        return format_rustc_version(stdout) if stdout is not None else None

    match execute_rustup_run_rustc_version(toolchain):
        case RustcVersion(stdout=stdout):
            return format_rustc_version(stdout)
        case ToolchainName(name=name):
            return name
        case RustupNotWorking():
            stdout = execute_rustc_version()
            return format_rustc_version(stdout) if stdout is not None else None
        case _:
            return None