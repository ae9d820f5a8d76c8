"""Tests for repo_state.py — presence observation and the clone decision."""

import pytest

from smb_bootstrap.repo_state import (
    CloneAction,
    CloneChoice,
    RepoState,
    decide_clone_action,
    observe_repo_state,
)


class TestDecideCloneAction:
    @pytest.mark.parametrize("choice", [None, CloneChoice.KEEP, CloneChoice.RECLONE])
    def test_absent_always_clones(self, choice):
        assert decide_clone_action(RepoState.ABSENT, choice) is CloneAction.CLONE

    def test_present_reclone(self):
        assert decide_clone_action(RepoState.PRESENT, CloneChoice.RECLONE) is CloneAction.REMOVE_AND_CLONE

    def test_present_keep(self):
        assert decide_clone_action(RepoState.PRESENT, CloneChoice.KEEP) is CloneAction.KEEP_EXISTING

    def test_present_without_answer_keeps(self):
        assert decide_clone_action(RepoState.PRESENT) is CloneAction.KEEP_EXISTING


class TestObserveRepoState:
    def test_missing_dir(self, tmp_path):
        assert observe_repo_state(tmp_path / "nope") is RepoState.ABSENT

    def test_existing_dir(self, tmp_path):
        assert observe_repo_state(tmp_path) is RepoState.PRESENT

    def test_plain_file_is_not_a_clone(self, tmp_path):
        f = tmp_path / "smb_ros2_workspace"
        f.write_text("x")
        assert observe_repo_state(f) is RepoState.ABSENT
