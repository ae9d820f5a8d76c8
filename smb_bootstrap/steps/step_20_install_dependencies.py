from __future__ import annotations

import logging

from ..lib.pkg import apt_install, apt_update
from ..pipeline import BootstrapCtx, Severity

logger = logging.getLogger(__name__)


class InstallDependenciesStep:
    step_id = "20_install_dependencies"
    title = "Installing System Dependencies"
    severity = Severity.FATAL

    def run(self, ctx: BootstrapCtx) -> None:
        logger.info("Updating package lists...")
        apt_update(ctx.runner)

        logger.info("Installing essential packages...")
        apt_install(ctx.runner, ctx.config.system_packages)

        logger.info("System dependencies installed")
