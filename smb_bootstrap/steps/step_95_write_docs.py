from __future__ import annotations

import logging

from ..lib.files import write_file
from ..pipeline import BootstrapCtx, Severity

logger = logging.getLogger(__name__)

_WHEELS = ("LF", "LH", "RF", "RH")


def _wheel_cmds(value: str, suffix: str) -> str:
    return "".join(
        f'ros2 topic pub /{w}_WHEEL_JOINT_velocity_cmd std_msgs/msg/Float64 "data: {value}"{suffix}\n'
        for w in _WHEELS
    )


QUICK_START = (
    "# SMB ROS2 Workspace - Quick Start Guide\n"
    "## ETHZ RSS 2025 - Super Mega Bot\n"
    "\n"
    "### Quick Commands\n"
    "\n"
    "#### Start Interactive Container\n"
    "```bash\n./start_smb_container.sh\n```\n"
    "\n"
    "#### Launch Basic Simulation\n"
    "```bash\n./launch_smb_simulation.sh\n```\n"
    "\n"
    "#### Launch Full Navigation Stack\n"
    "```bash\n./launch_smb_navigation.sh\n```\n"
    "\n"
    "#### Control Robot (in separate terminal)\n"
    "```bash\n./control_smb_robot.sh\n```\n"
    "\n"
    "### Robot Control Commands\n"
    "\n"
    "#### Individual Wheel Control\n"
    "```bash\n"
    "# Move forward\n"
    + _wheel_cmds("2.0", " &")
    + "\n# Stop\n"
    + _wheel_cmds("0.0", " --once")
    + "```\n"
    "\n"
    "### SLAM and Navigation\n"
    "\n"
    "#### Start SLAM\n"
    "```bash\nros2 launch smb_bringup smb_sim_se.launch.py\n```\n"
    "\n"
    "#### Start Exploration\n"
    "```bash\nros2 launch smb_bringup smb_sim_exploration.launch.py\n```\n"
    "\n"
    "### Monitoring\n"
    "\n"
    "#### Check Topics\n"
    "```bash\nros2 topic list\nros2 topic echo /odom\nros2 topic echo /joint_states\n```\n"
    "\n"
    "#### Check Nodes\n"
    "```bash\nros2 node list\n```\n"
    "\n"
    "### Troubleshooting\n"
    "\n"
    "#### If GUI doesn't work:\n"
    "```bash\nexport DISPLAY=:0\n```\n"
    "\n"
    "#### If build fails:\n"
    "```bash\n./build_smb_workspace.sh\n```\n"
    "\n"
    "#### Check Docker:\n"
    "```bash\ndocker ps\ndocker images\n```\n"
    "\n"
    "---\n"
    "\n"
    "**For detailed documentation, see the README.md files in each directory.**\n"
)


class WriteDocsStep:
    step_id = "95_write_docs"
    title = "Creating Documentation"
    severity = Severity.FATAL

    def run(self, ctx: BootstrapCtx) -> None:
        path = ctx.config.quick_start_path
        write_file(path, QUICK_START, dry_run=ctx.dry_run)
        ctx.decisions["docs"] = str(path)
        logger.info("Quick start guide created: %s", path.name)
