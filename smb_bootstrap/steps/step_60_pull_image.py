from __future__ import annotations

import logging

from ..lib.docker import docker_images, docker_pull
from ..pipeline import BootstrapCtx, Severity, StepFailed

logger = logging.getLogger(__name__)


class PullImageStep:
    step_id = "60_pull_image"
    title = "Pulling SMB ROS2 Workspace Docker Image"
    severity = Severity.FATAL

    def run(self, ctx: BootstrapCtx) -> None:
        image = ctx.config.image
        logger.info("Pulling Docker image (this may take several minutes)...")
        logger.warning("This is a large download (~5-8GB). Please be patient...")

        r = docker_pull(ctx.runner, image)
        if not r.ok:
            raise StepFailed(
                f"Failed to pull Docker image {image} (exit {r.returncode}); "
                "check your internet connection and try again"
            )

        logger.info("Docker image pulled successfully")
        info = docker_images(ctx.runner, image)
        if info:
            logger.info("Docker image information:\n%s", info)
