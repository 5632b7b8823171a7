"""Detection of the .NET SDK version in use for the current directory."""

from __future__ import annotations

import enum
import json
import logging
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)

GLOBAL_JSON_FILE = "global.json"
PROJECT_JSON_FILE = "project.json"

_PROJECT_EXTENSIONS = frozenset({"csproj", "fsproj", "xproj"})


class FileType(enum.Enum):
    """Kinds of files that mark a directory as a .NET project."""

    PROJECT_JSON = "project_json"
    PROJECT_FILE = "project_file"
    GLOBAL_JSON = "global_json"
    SOLUTION_FILE = "solution_file"


@dataclass(frozen=True)
class DotNetFile:
    """A file in the current directory that is relevant to .NET."""

    path: Path
    file_type: FileType


def _ascii_lower(text: str) -> str:
    return "".join(c.lower() if c.isascii() else c for c in text)


def get_pinned_sdk_version(json_text: str) -> str | None:
    """Return ``v<version>`` pinned under ``sdk.version`` in global.json text."""
    try:
        root = json.loads(json_text)
    except ValueError:
        return None
    if not isinstance(root, dict):
        return None
    sdk = root.get("sdk")
    if not isinstance(sdk, dict):
        return None
    version = sdk.get("version")
    if not isinstance(version, str):
        return None
    return f"v{version}"


def get_pinned_sdk_version_from_file(path: str | os.PathLike[str]) -> str | None:
    """Read a global.json file and return its pinned SDK version, if any."""
    try:
        json_text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None
    log.debug("Checking if .NET SDK version is pinned in: %s", path)
    return get_pinned_sdk_version(json_text)


def get_dotnet_file_type(path: str | os.PathLike[str]) -> FileType | None:
    """Classify a path by its name or extension, or return None."""
    p = Path(path)
    name = _ascii_lower(p.name)
    if name == GLOBAL_JSON_FILE:
        return FileType.GLOBAL_JSON
    if name == PROJECT_JSON_FILE:
        return FileType.PROJECT_JSON

    extension = _ascii_lower(p.suffix[1:]) if p.suffix else ""
    if extension == "sln":
        return FileType.SOLUTION_FILE
    if extension in _PROJECT_EXTENSIONS:
        return FileType.PROJECT_FILE
    return None


def get_local_dotnet_files(directory: str | os.PathLike[str]) -> list[DotNetFile]:
    """List the .NET-relevant entries of ``directory``.

    Raises ``OSError`` if the directory cannot be read.
    """
    base = Path(directory)
    found = []
    with os.scandir(base) as entries:
        for entry in entries:
            path = base / entry.name
            file_type = get_dotnet_file_type(path)
            if file_type is not None:
                found.append(DotNetFile(path, file_type))
    return found


def check_directory_for_global_json(path: str | os.PathLike[str]) -> str | None:
    """Return the SDK version pinned by a global.json in ``path``, if any."""
    global_json_path = Path(path) / GLOBAL_JSON_FILE
    log.debug("Checking if global.json exists at: %s", global_json_path)
    if global_json_path.exists():
        return get_pinned_sdk_version_from_file(global_json_path)
    return None


def try_find_nearby_global_json(
    current_dir: str | os.PathLike[str],
    repo_root: str | os.PathLike[str] | None,
) -> str | None:
    """Look for a pinning global.json in the parent directory or repo root.

    The parent is skipped when the current directory is the repository root.
    """
    current = Path(current_dir)
    root = Path(repo_root) if repo_root is not None else None

    parent: Path | None = None
    if root != current and current.parent != current:
        parent = current.parent

    check_dirs: list[Path] = []
    for candidate in (parent, root):
        if candidate is None:
            continue
        if check_dirs and check_dirs[-1] == candidate:
            continue
        check_dirs.append(candidate)

    for directory in check_dirs:
        if directory == current:
            continue
        version = check_directory_for_global_json(directory)
        if version is not None:
            return version
    return None


def estimate_dotnet_version(
    files: list[DotNetFile],
    current_dir: str | os.PathLike[str],
    repo_root: str | os.PathLike[str] | None,
) -> str | None:
    """Guess the SDK version from the project files, falling back to the CLI."""
    def first_of(file_type: FileType) -> DotNetFile | None:
        return next((f for f in files if f.file_type is file_type), None)

    relevant = (
        first_of(FileType.GLOBAL_JSON)
        or first_of(FileType.SOLUTION_FILE)
        or next(iter(files), None)
    )
    if relevant is None:
        return None

    if relevant.file_type is FileType.GLOBAL_JSON:
        return get_pinned_sdk_version_from_file(relevant.path) or get_latest_sdk_from_cli()
    if relevant.file_type is FileType.SOLUTION_FILE:
        # Assume no global.json lives above a solution file.
        return get_latest_sdk_from_cli()
    return try_find_nearby_global_json(current_dir, repo_root) or get_latest_sdk_from_cli()


def get_version_from_cli() -> str | None:
    """Run ``dotnet --version`` and return ``v<version>``, or None."""
    try:
        result = subprocess.run(["dotnet", "--version"], capture_output=True, check=False)
    except OSError as exc:
        log.warning("Failed to execute `dotnet --version`. %s", exc)
        return None
    try:
        version = result.stdout.decode("utf-8").strip()
    except UnicodeDecodeError:
        return None
    return f"v{version}"


def _latest_from_listing(text: str) -> str | None:
    """Take the version from the last non-blank line of an SDK listing."""
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        return None
    latest_sdk = lines[-1]
    bracket = latest_sdk.find("[")
    if bracket < 0:
        return None
    take_until = bracket - 1
    if take_until > 1:
        return f"v{latest_sdk[:take_until]}"
    return None


def get_latest_sdk_from_cli() -> str | None:
    """Return the newest SDK listed by ``dotnet --list-sdks``.

    Falls back to ``dotnet --version`` when the listing command fails.
    """
    try:
        result = subprocess.run(
            ["dotnet", "--list-sdks"],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            stdin=subprocess.DEVNULL,
            check=False,
        )
    except OSError as exc:
        log.warning("Failed to execute `dotnet --list-sdks`. %s", exc)
        return None

    if result.returncode != 0:
        log.warning(
            "Received a non-success exit code from `dotnet --list-sdks`. "
            "Falling back to `dotnet --version`."
        )
        return get_version_from_cli()

    try:
        text = result.stdout.decode("utf-8")
    except UnicodeDecodeError:
        return None

    version = _latest_from_listing(text)
    if version is None:
        log.warning("Unable to parse the output from `dotnet --list-sdks`.")
    return version