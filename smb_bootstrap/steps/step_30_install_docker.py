from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from ..lib.docker import docker_available, docker_version
from ..lib.pkg import apt_install, apt_remove
from ..pipeline import BootstrapCtx, Severity

logger = logging.getLogger(__name__)


class InstallDockerStep:
    step_id = "30_install_docker"
    title = "Installing Docker"
    severity = Severity.FATAL

    def _run_vendor_script(self, ctx: BootstrapCtx, script: Path) -> None:
        ctx.runner.run(["curl", "-fsSL", ctx.config.docker_install_url, "-o", str(script)])
        ctx.runner.run(["sudo", "sh", str(script)])

    def run(self, ctx: BootstrapCtx) -> None:
        cfg = ctx.config
        runner = ctx.runner

        if docker_available(runner):
            logger.info("Docker is already installed")
            version = docker_version(runner)
            if version:
                logger.info("%s", version)
            ctx.decisions["docker"] = {"already_installed": True}
            return

        logger.info("Installing Docker...")
        apt_remove(runner, cfg.legacy_docker_packages, check=False)

        if ctx.dry_run:
            self._run_vendor_script(ctx, Path(tempfile.gettempdir()) / "get-docker.sh")
        else:
            with tempfile.TemporaryDirectory(prefix="smb-bootstrap-") as tmp:
                self._run_vendor_script(ctx, Path(tmp) / "get-docker.sh")

        runner.run(["sudo", "usermod", "-aG", cfg.docker_group, ctx.user])

        apt_install(runner, [cfg.compose_package])

        runner.run(["sudo", "systemctl", "start", "docker"])
        runner.run(["sudo", "systemctl", "enable", "docker"])

        ctx.decisions["docker"] = {"already_installed": False, "group_added": ctx.user}
        logger.info("Docker installed successfully")
        logger.warning(
            "User %s was added to the %s group; log out and back in for it to take effect",
            ctx.user,
            cfg.docker_group,
        )
