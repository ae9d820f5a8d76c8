from __future__ import annotations

import logging

from ..lib.docker import bash_script_command, docker_run_argv, docker_run_options
from ..pipeline import BootstrapCtx, Severity, StepFailed
from .step_80_generate_scripts import BUILD_SCRIPT, build_lines

logger = logging.getLogger(__name__)


class BuildWorkspaceStep:
    step_id = "90_build_workspace"
    title = "Building SMB ROS2 Workspace"
    severity = Severity.ADVISORY

    def run(self, ctx: BootstrapCtx) -> None:
        cfg = ctx.config
        repo = ctx.repo_dir

        logger.info("Building workspace inside Docker container...")
        logger.warning("This will take 15-30 minutes depending on your system")

        opts = docker_run_options(mount_src=str(repo), container_workdir=cfg.container_workdir)
        argv = docker_run_argv(cfg.image, opts, bash_script_command(build_lines(cfg)))

        ctx.decisions["build"] = {"ok": False}
        r = ctx.runner.run(argv, check=False, cwd=str(repo), capture=False)
        if not r.ok:
            raise StepFailed(
                f"Workspace build failed (exit {r.returncode}); "
                f"you can retry manually with ./{BUILD_SCRIPT}"
            )

        ctx.decisions["build"] = {"ok": True}
        logger.info("Workspace built successfully!")
