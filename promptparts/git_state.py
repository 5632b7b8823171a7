"""Describing an in-progress git operation such as a rebase or merge."""

from __future__ import annotations

import enum
import os
import re
from dataclasses import dataclass
from pathlib import Path

from promptparts.utils import read_file

_UNSIGNED = re.compile(r"\+?[0-9]+")


class RepositoryState(enum.Enum):
    """The operation a repository is in the middle of, if any."""

    CLEAN = "clean"
    MERGE = "merge"
    REVERT = "revert"
    REVERT_SEQUENCE = "revert_sequence"
    CHERRY_PICK = "cherry_pick"
    CHERRY_PICK_SEQUENCE = "cherry_pick_sequence"
    BISECT = "bisect"
    APPLY_MAILBOX = "apply_mailbox"
    APPLY_MAILBOX_OR_REBASE = "apply_mailbox_or_rebase"
    REBASE = "rebase"
    REBASE_INTERACTIVE = "rebase_interactive"
    REBASE_MERGE = "rebase_merge"


@dataclass(frozen=True)
class StateProgress:
    """How far an operation has got, e.g. step 3 of 10."""

    current: int
    total: int


@dataclass(frozen=True)
class StateDescription:
    """A label naming the operation, with progress when it is known."""

    label: str
    progress: StateProgress | None = None


_LABELS = {
    RepositoryState.MERGE: "merge",
    RepositoryState.REVERT: "revert",
    RepositoryState.REVERT_SEQUENCE: "revert",
    RepositoryState.CHERRY_PICK: "cherry_pick",
    RepositoryState.CHERRY_PICK_SEQUENCE: "cherry_pick",
    RepositoryState.BISECT: "bisect",
    RepositoryState.APPLY_MAILBOX: "am",
    RepositoryState.APPLY_MAILBOX_OR_REBASE: "am_or_rebase",
}

_REBASE_STATES = frozenset(
    {
        RepositoryState.REBASE,
        RepositoryState.REBASE_INTERACTIVE,
        RepositoryState.REBASE_MERGE,
    }
)


def _file_to_int(path: Path) -> int | None:
    try:
        contents = read_file(path)
    except (OSError, UnicodeDecodeError):
        return None
    text = contents.strip()
    if not _UNSIGNED.fullmatch(text):
        return None
    return int(text)


def _progress(dot_git: Path, current_path: str, total_path: str) -> StateProgress | None:
    current = _file_to_int(dot_git / current_path)
    if current is None:
        return None
    total = _file_to_int(dot_git / total_path)
    if total is None:
        return None
    return StateProgress(current, total)


def describe_rebase(root: str | os.PathLike[str]) -> StateDescription:
    """Describe a rebase, reading its progress from files under ``.git``."""
    dot_git = Path(root) / ".git"

    if (dot_git / "rebase-merge").exists():
        progress = _progress(dot_git, "rebase-merge/msgnum", "rebase-merge/end")
    elif (dot_git / "rebase-apply").exists():
        progress = _progress(dot_git, "rebase-apply/next", "rebase-apply/last")
    else:
        progress = None

    return StateDescription("rebase", progress)


def get_state_description(
    state: RepositoryState, root: str | os.PathLike[str]
) -> StateDescription | None:
    """Describe the repository state; None when the repository is clean."""
    if state is RepositoryState.CLEAN:
        return None
    if state in _REBASE_STATES:
        return describe_rebase(root)
    return StateDescription(_LABELS[state])