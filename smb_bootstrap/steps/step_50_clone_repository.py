from __future__ import annotations

import logging
import shutil

from ..lib.git import git_clone, git_short_log
from ..pipeline import BootstrapCtx, Severity, StepFailed
from ..repo_state import CloneAction, CloneChoice, RepoState, decide_clone_action, observe_repo_state

logger = logging.getLogger(__name__)


class CloneRepositoryStep:
    step_id = "50_clone_repository"
    title = "Cloning SMB ROS2 Workspace Repository"
    severity = Severity.FATAL

    def _ask(self, ctx: BootstrapCtx) -> CloneChoice:
        if ctx.confirm("Do you want to remove it and clone fresh?"):
            return CloneChoice.RECLONE
        return CloneChoice.KEEP

    def run(self, ctx: BootstrapCtx) -> None:
        repo = ctx.repo_dir
        state = observe_repo_state(repo)

        choice = None
        if state is RepoState.PRESENT:
            logger.warning("SMB workspace already exists: %s", str(repo))
            choice = self._ask(ctx)

        action = decide_clone_action(state, choice)
        ctx.decisions["clone"] = {"state": state.value, "action": action.value}

        if action is CloneAction.KEEP_EXISTING:
            logger.info("Keeping existing workspace, skipping clone...")
            return

        if action is CloneAction.REMOVE_AND_CLONE:
            logger.info("Removing existing workspace...")
            if ctx.dry_run:
                logger.info("Would remove %s", str(repo))
            else:
                shutil.rmtree(repo)

        logger.info("Cloning %s ...", ctx.config.repo_url)
        git_clone(ctx.runner, ctx.config.repo_url, ctx.config.repo_dir_name, cwd=ctx.workspace_dir)

        if ctx.dry_run:
            return
        if observe_repo_state(repo) is not RepoState.PRESENT:
            raise StepFailed(f"Failed to clone repository into {repo}")

        logger.info("Repository cloned successfully")
        log = git_short_log(ctx.runner, repo)
        if log:
            logger.info("Repository info:\n%s", log)
