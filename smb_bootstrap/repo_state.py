"""Presence state of the cloned workspace repository.

A clone is either wholly absent or a complete working tree; there is no
"partial" state. The only decision in the clone stage is what to do when the
repository is already present, and that decision is a pure function here so
the stage itself only observes, asks and acts.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class RepoState(str, Enum):
    ABSENT = "absent"
    PRESENT = "present"


class CloneChoice(str, Enum):
    RECLONE = "reclone"
    KEEP = "keep"


class CloneAction(str, Enum):
    CLONE = "clone"
    REMOVE_AND_CLONE = "remove_and_clone"
    KEEP_EXISTING = "keep_existing"


def observe_repo_state(path: Path) -> RepoState:
    return RepoState.PRESENT if path.is_dir() else RepoState.ABSENT


def decide_clone_action(state: RepoState, choice: CloneChoice | None = None) -> CloneAction:
    """(state, operator choice) -> action.

    The choice only matters for PRESENT; an absent repository is always cloned.
    """
    if state is RepoState.ABSENT:
        return CloneAction.CLONE
    if choice is CloneChoice.RECLONE:
        return CloneAction.REMOVE_AND_CLONE
    return CloneAction.KEEP_EXISTING
