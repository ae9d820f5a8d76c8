from __future__ import annotations

import argparse
import logging
import time
from functools import partial
from typing import Callable, Optional

from .config import BootstrapConfig, load_config
from .lib.command import CommandRunner, SubprocessRunner
from .lib.hostinfo import HostInfo, detect_host
from .lib.prompt import ask_yes_no
from .logging_utils import DEFAULT_LOG_PATH, configure_logging
from .pipeline import BootstrapCtx, PipelineResult, run_pipeline
from .steps import (
    BuildWorkspaceStep,
    CloneRepositoryStep,
    GenerateScriptsStep,
    InstallDependenciesStep,
    InstallDockerStep,
    PrepareWorkspaceStep,
    PreflightStep,
    PullImageStep,
    SetupDisplayStep,
    WriteDocsStep,
)
from .steps.step_80_generate_scripts import (
    BUILD_SCRIPT,
    CONTROL_SCRIPT,
    NAVIGATION_SCRIPT,
    SIMULATION_SCRIPT,
    START_SCRIPT,
)

logger = logging.getLogger(__name__)


def build_steps():
    return [
        PreflightStep(),
        InstallDependenciesStep(),
        InstallDockerStep(),
        PrepareWorkspaceStep(),
        CloneRepositoryStep(),
        PullImageStep(),
        SetupDisplayStep(),
        GenerateScriptsStep(),
        BuildWorkspaceStep(),
        WriteDocsStep(),
    ]


def _log_intro() -> None:
    logger.info("SMB ROS2 Workspace - Automated Installation")
    logger.info("ETHZ RSS 2025 - Super Mega Bot Development Environment")
    logger.info("This will install the complete SMB ROS2 workspace including Docker, workspace setup, and helper scripts.")


def _log_final_instructions(ctx: BootstrapCtx, result: PipelineResult, log_path: Optional[str]) -> None:
    cfg = ctx.config
    logger.info("=== Installation Complete! ===")
    logger.info("SMB ROS2 Workspace has been installed at %s", str(cfg.workspace_dir))
    logger.info("Quick Start:")
    logger.info("  1. cd %s", str(cfg.workspace_dir))
    logger.info("  2. ./%s     # Start Gazebo simulation", SIMULATION_SCRIPT)
    logger.info("  3. ./%s      # Start navigation + RViz", NAVIGATION_SCRIPT)
    logger.info("  4. ./%s          # Control the robot", CONTROL_SCRIPT)
    logger.info("Documentation:")
    logger.info("  %s              # Quick reference guide", cfg.quick_start_name)
    logger.info("  %s/README.md    # Detailed documentation", cfg.repo_dir_name)
    logger.info("Use ./%s for interactive development", START_SCRIPT)

    for w in result.warnings:
        logger.warning("Completed with warning from %s: %s", w.step_id, w.message)
    if not (ctx.decisions.get("build") or {}).get("ok", True):
        logger.warning("The workspace is not built yet; run ./%s to build it manually", BUILD_SCRIPT)
    if log_path:
        logger.info("Full log of this run: %s", log_path)


def bootstrap(
    config: BootstrapConfig,
    *,
    runner: Optional[CommandRunner] = None,
    host_probe: Optional[Callable[[], HostInfo]] = None,
    confirm: Optional[Callable[[str], bool]] = None,
    user: Optional[str] = None,
    log_path: Optional[str] = None,
) -> int:
    """Confirm, run every stage and report. Returns the process exit code.

    confirm defaults to an interactive yes/no prompt; log_path, when given, is
    pointed to in the closing summary and on failure.
    """

    confirm = confirm or ask_yes_no
    runner = runner or SubprocessRunner(dry_run=config.dry_run)
    if host_probe is None:
        host_probe = partial(detect_host, runner, config.disk_check_path)

    ctx = BootstrapCtx(config=config, runner=runner, host_probe=host_probe, confirm=confirm)
    if user is not None:
        ctx.user = user

    _log_intro()
    if not confirm("Do you want to proceed with the installation?"):
        logger.info("Installation cancelled.")
        return 0

    started = time.monotonic()
    try:
        result = run_pipeline(ctx=ctx, steps=build_steps())
    except Exception as e:
        logger.error("Stage %s failed: %s", ctx.decisions.get("current_step"), e)
        logger.debug("Bootstrap failed", exc_info=True)
        if log_path:
            logger.error("See %s for the commands that ran and their output", log_path)
        return 1

    elapsed = int(time.monotonic() - started)
    _log_final_instructions(ctx, result, log_path)
    logger.info("Total installation time: %d minutes %d seconds", elapsed // 60, elapsed % 60)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="smb-bootstrap")
    p.add_argument("--config", default=None, help="YAML file overriding bootstrap defaults")
    p.add_argument("--log", default=DEFAULT_LOG_PATH, help="Path to bootstrap log")
    p.add_argument("--dry-run", action="store_true", help="Log commands without executing them")

    args = p.parse_args(argv)

    actual_log_path = configure_logging(log_path=args.log)
    overrides = {"dry_run": True} if args.dry_run else {}
    config = load_config(args.config, **overrides)

    return bootstrap(config, log_path=actual_log_path)
