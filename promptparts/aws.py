"""Finding the active AWS profile and region."""

from __future__ import annotations

import os
from collections.abc import Iterator, Mapping
from pathlib import Path

PathLike = str | os.PathLike[str]


def _config_location(environ: Mapping[str, str]) -> Path | None:
    configured = environ.get("AWS_CONFIG_FILE")
    if configured is not None:
        return Path(configured)
    try:
        return Path.home() / ".aws" / "config"
    except RuntimeError:
        return None


def _lines(path: PathLike) -> Iterator[str]:
    with open(path, "rb") as handle:
        data = handle.read()
    for raw in data.split(b"\n"):
        if raw.endswith(b"\r"):
            raw = raw[:-1]
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError:
            continue


def get_aws_region_from_config(
    aws_profile: str | None, config_path: PathLike | None
) -> str | None:
    """Read the region of a profile (or ``[default]``) from an AWS config file.

    When ``config_path`` is None, ``$AWS_CONFIG_FILE`` or ``~/.aws/config``
    is used.
    """
    location = config_path if config_path is not None else _config_location(os.environ)
    if location is None:
        return None

    header = f"[profile {aws_profile}]" if aws_profile is not None else "[default]"
    try:
        lines = list(_lines(location))
    except OSError:
        return None

    try:
        start = lines.index(header) + 1
    except ValueError:
        return None

    for line in lines[start:]:
        if line.startswith("["):
            return None
        if line.startswith("region"):
            parts = line.split("=")
            if len(parts) < 2:
                return None
            return parts[1].strip()
    return None


def _resolve_config(environ: Mapping[str, str], config_path: PathLike | None) -> PathLike | None:
    return config_path if config_path is not None else _config_location(environ)


def get_aws_profile_and_region(
    environ: Mapping[str, str], config_path: PathLike | None
) -> tuple[str | None, str | None]:
    """Return the profile and region from the environment or config file.

    ``$AWS_DEFAULT_REGION`` beats ``$AWS_REGION``; with neither set the
    region comes from the config section of the profile.
    """
    profile = environ.get("AWS_PROFILE")
    region = environ.get("AWS_DEFAULT_REGION")
    if region is None:
        region = environ.get("AWS_REGION")
    if region is None:
        location = _resolve_config(environ, config_path)
        if location is not None:
            region = get_aws_region_from_config(profile, location)
    return profile, region


def get_aws_region(
    environ: Mapping[str, str], config_path: PathLike | None
) -> str | None:
    """Return the region from the environment, else from ``[default]``."""
    region = environ.get("AWS_DEFAULT_REGION")
    if region is None:
        region = environ.get("AWS_REGION")
    if region is not None:
        return region
    location = _resolve_config(environ, config_path)
    if location is None:
        return None
    return get_aws_region_from_config(None, location)


def format_aws_segment(profile: str | None, region: str | None) -> str | None:
    """Render ``profile(region)``, or whichever of the two is known."""
    if profile is not None and region is not None:
        return f"{profile}({region})"
    if profile is not None:
        return profile
    return region