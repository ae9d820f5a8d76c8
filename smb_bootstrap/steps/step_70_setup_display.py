from __future__ import annotations

import logging
import os

from ..lib.files import append_line_once
from ..lib.pkg import apt_install
from ..pipeline import BootstrapCtx, Severity, StepFailed

logger = logging.getLogger(__name__)

# Exit status of coreutils `timeout` when it had to kill the program.
TIMEOUT_EXPIRED = 124


class SetupDisplayStep:
    step_id = "70_setup_display"
    title = "Setting Up X11 Forwarding for GUI Support"
    severity = Severity.ADVISORY

    def run(self, ctx: BootstrapCtx) -> None:
        cfg = ctx.config

        logger.info("Installing X11 applications for testing...")
        apt_install(ctx.runner, cfg.display_packages)

        logger.info("Setting up display environment...")
        append_line_once(cfg.shell_profile, f"export DISPLAY={cfg.display}", dry_run=ctx.dry_run)
        if not ctx.dry_run:
            os.environ["DISPLAY"] = cfg.display

        logger.info("Testing X11 forwarding...")
        # The smoke test either dies at once (no X server) or keeps running until killed.
        r = ctx.runner.run(
            ["timeout", str(cfg.smoke_test_timeout_s), cfg.smoke_test_program],
            check=False,
        )
        ctx.decisions["display"] = {"smoke_test_exit": r.returncode}
        if r.returncode not in (0, TIMEOUT_EXPIRED):
            raise StepFailed(
                "X11 forwarding test failed - GUI applications may not work; "
                "you may need to install an X11 server on Windows (like VcXsrv)"
            )
        logger.info("X11 forwarding is working")
