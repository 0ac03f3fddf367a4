"""Classification and reconciliation of an existing target directory.

``classify`` probes the immediate listing of a path; ``reconcile`` decides
what to do about a conflicting directory, either on the caller's say-so
(``--overwrite``) or by asking through a ``chooser`` callback.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from enum import Enum
from pathlib import Path

from create_ts_project.prompts import Cancelled, is_cancel

DEFAULT_VCS_DIR = ".git"


class DirectoryState(str, Enum):
    """What a target path holds before scaffolding."""

    ABSENT = "absent"
    EMPTY = "empty"
    IGNORABLE = "ignorable"
    CONFLICTING = "conflicting"

    @property
    def has_conflict(self) -> bool:
        return self is DirectoryState.CONFLICTING


class Choice(str, Enum):
    """Answers to the "directory is not empty" question."""

    CANCEL = "cancel"
    CLEAR = "clear"
    IGNORE = "ignore"


class Outcome(str, Enum):
    PROCEED = "proceed"
    ABORTED = "aborted"


Chooser = Callable[[], Choice | Cancelled]


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def classify(path: str | Path, vcs_dir: str = DEFAULT_VCS_DIR) -> DirectoryState:
    """Classify *path* by its immediate entries.

    Only the top-level listing is inspected.  A directory holding nothing
    but *vcs_dir* counts as ``IGNORABLE``.

    Raises:
        NotADirectoryError: If *path* exists but is not a directory.
    """
    target = Path(path)
    if not target.exists():
        return DirectoryState.ABSENT

    entries = [entry.name for entry in target.iterdir()]
    if not entries:
        return DirectoryState.EMPTY
    if entries == [vcs_dir]:
        return DirectoryState.IGNORABLE
    return DirectoryState.CONFLICTING


# ---------------------------------------------------------------------------
# Reconciliation
# ---------------------------------------------------------------------------


def clear_directory(path: str | Path, keep: str = DEFAULT_VCS_DIR) -> None:
    """Delete every entry of *path* except *keep*.

    Directories are removed recursively; files and symlinks are unlinked.
    A missing *path* is left alone.  The first failing entry raises and the
    entries removed before it stay removed.
    """
    target = Path(path)
    if not target.exists():
        return

    for entry in target.iterdir():
        if entry.name == keep:
            continue
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink(missing_ok=True)


def reconcile(
    path: str | Path,
    state: DirectoryState,
    force_overwrite: bool,
    chooser: Chooser,
    vcs_dir: str = DEFAULT_VCS_DIR,
) -> Outcome:
    """Decide how to proceed with the directory at *path*.

    Args:
        path: The target directory.
        state: Result of :func:`classify` for *path*.
        force_overwrite: Clear a conflicting directory without asking.
        chooser: Called only for a conflict without *force_overwrite*; returns
            a :class:`Choice` or ``CANCELLED``.
        vcs_dir: Entry preserved when the directory is cleared.

    Returns:
        ``Outcome.ABORTED`` if the user cancelled, ``Outcome.PROCEED``
        otherwise.
    """
    if not state.has_conflict:
        return Outcome.PROCEED

    if force_overwrite:
        clear_directory(path, keep=vcs_dir)
        return Outcome.PROCEED

    choice = chooser()
    if is_cancel(choice) or choice is Choice.CANCEL:
        return Outcome.ABORTED
    if choice is Choice.CLEAR:
        clear_directory(path, keep=vcs_dir)
    return Outcome.PROCEED
