from __future__ import annotations

import logging
import os

from ..pipeline import BootstrapCtx, Severity

logger = logging.getLogger(__name__)


class PrepareWorkspaceStep:
    step_id = "40_prepare_workspace"
    title = "Setting Up Workspace Directories"
    severity = Severity.FATAL

    def run(self, ctx: BootstrapCtx) -> None:
        ws = ctx.workspace_dir
        if ctx.dry_run:
            logger.info("Would create %s", str(ws))
            return

        ws.mkdir(parents=True, exist_ok=True)
        # Later steps pass cwd explicitly as well.
        os.chdir(ws)
        logger.info("Workspace directory created: %s", str(ws))
