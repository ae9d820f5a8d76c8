from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from ..config import BootstrapConfig
from ..lib.docker import docker_run_options, render_docker_run
from ..lib.files import describe_mode, make_executable, write_file
from ..pipeline import BootstrapCtx, Severity

logger = logging.getLogger(__name__)

START_SCRIPT = "start_smb_container.sh"
BUILD_SCRIPT = "build_smb_workspace.sh"
SIMULATION_SCRIPT = "launch_smb_simulation.sh"
NAVIGATION_SCRIPT = "launch_smb_navigation.sh"
CONTROL_SCRIPT = "control_smb_robot.sh"

SCRIPT_NAMES = (START_SCRIPT, BUILD_SCRIPT, SIMULATION_SCRIPT, NAVIGATION_SCRIPT, CONTROL_SCRIPT)

# Name of the long-lived interactive container; the control script execs into it.
WORKSPACE_CONTAINER = "smb_workspace"


def build_lines(cfg: BootstrapConfig) -> List[str]:
    """In-container build chain shared by the build script and the build step."""
    return [
        "source ~/.bashrc",
        "gitman install",
        f"smb_build_packages_up_to {cfg.build_target} --parallel-workers {cfg.parallel_workers}",
    ]


def _header(cfg: BootstrapConfig, title: str, messages: Sequence[str]) -> str:
    echo = "".join(f'echo "{m}"\n' for m in messages)
    return f'#!/bin/bash\n# {title}\n\ncd "$(dirname "$0")/{cfg.repo_dir_name}"\n\n{echo}\n'


def _gui_run(cfg: BootstrapConfig, name: str, lines: Sequence[str] = ()) -> str:
    opts = docker_run_options(
        mount_src="$(pwd)",
        container_workdir=cfg.container_workdir,
        name=name,
        interactive=True,
        gui=True,
        display=f"${{DISPLAY:-{cfg.display}}}",
    )
    return render_docker_run(cfg.image, opts, lines)


def _control_body() -> str:
    topic = "/LF_WHEEL_JOINT_velocity_cmd std_msgs/msg/Float64"
    return (
        f'docker exec -it {WORKSPACE_CONTAINER} bash -c "\n'
        "  source install/setup.bash\n"
        "  echo 'Robot control commands:'\n"
        f"  echo 'Move forward:  ros2 topic pub {topic} \\\"data: 2.0\\\" &'\n"
        f"  echo 'Stop robot:    ros2 topic pub {topic} \\\"data: 0.0\\\" --once'\n"
        "  echo 'List topics:   ros2 topic list'\n"
        "  bash\n"
        '"\n'
    )


def render_scripts(cfg: BootstrapConfig) -> Dict[str, str]:
    """Render every wrapper script. Pure: same config, same bytes."""

    build_opts = docker_run_options(mount_src="$(pwd)", container_workdir=cfg.container_workdir)

    return {
        START_SCRIPT: _header(
            cfg,
            "SMB Container Start Script",
            ["Starting SMB ROS2 Workspace container...", "Workspace: $(pwd)"],
        )
        + _gui_run(cfg, WORKSPACE_CONTAINER),
        BUILD_SCRIPT: _header(cfg, "SMB Workspace Build Script", ["Building SMB ROS2 Workspace..."])
        + render_docker_run(cfg.image, build_opts, build_lines(cfg))
        + '\necho "Build complete!"\n',
        SIMULATION_SCRIPT: _header(
            cfg,
            "SMB Simulation Launch Script",
            ["Launching SMB Gazebo Simulation...", "This will open Gazebo with the SMB robot"],
        )
        + _gui_run(
            cfg,
            "smb_simulation",
            ["source install/setup.bash", "ros2 launch smb_gazebo gazebo.launch.py"],
        ),
        NAVIGATION_SCRIPT: _header(
            cfg,
            "SMB Navigation Simulation Launch Script",
            [
                "Launching SMB Navigation Simulation with RViz and SLAM...",
                "This will open Gazebo + RViz with full navigation stack",
            ],
        )
        + _gui_run(
            cfg,
            "smb_navigation",
            ["source install/setup.bash", "ros2 launch smb_bringup smb_sim_navigation.launch.py"],
        ),
        CONTROL_SCRIPT: _header(
            cfg,
            "SMB Robot Control Script",
            ["Starting robot control terminal...", "You can use this to control the SMB robot"],
        )
        + _control_body(),
    }


class GenerateScriptsStep:
    step_id = "80_generate_scripts"
    title = "Creating Helper Scripts"
    severity = Severity.FATAL

    def run(self, ctx: BootstrapCtx) -> None:
        scripts = render_scripts(ctx.config)
        for name, body in scripts.items():
            path = ctx.workspace_dir / name
            write_file(path, body, dry_run=ctx.dry_run)
            make_executable(path, dry_run=ctx.dry_run)

        ctx.decisions["scripts"] = list(scripts)
        logger.info("Helper scripts created:")
        if ctx.dry_run:
            return
        for name in scripts:
            logger.info("  %s %s", describe_mode(ctx.workspace_dir / name), name)
