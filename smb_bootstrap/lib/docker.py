from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from .command import CmdResult, CommandRunner

logger = logging.getLogger(__name__)

X11_SOCKET = "/tmp/.X11-unix"

# (flag, value); value None for bare switches such as --rm.
Option = Tuple[str, Optional[str]]


def docker_available(runner: CommandRunner) -> bool:
    return runner.which("docker") is not None


def docker_version(runner: CommandRunner) -> str:
    r = runner.run(["docker", "--version"], check=False)
    return r.stdout.strip()


def docker_pull(runner: CommandRunner, image: str) -> CmdResult:
    return runner.run(["docker", "pull", image], check=False, capture=False)


def docker_images(runner: CommandRunner, image: str) -> str:
    r = runner.run(["docker", "images", image], check=False)
    return r.stdout.strip()


def docker_run_options(
    *,
    mount_src: str,
    container_workdir: str,
    name: Optional[str] = None,
    interactive: bool = False,
    gui: bool = False,
    display: str = "",
) -> List[Option]:
    """Options shared by every container invocation.

    The workspace is always mounted at container_workdir, which is also the
    working directory. gui=True adds host networking, device access and the
    X11 socket so RViz/Gazebo can open windows on the host display.
    """

    opts: List[Option] = []
    if interactive:
        opts.append(("-it", None))
    opts.append(("--rm", None))
    if name:
        opts.append(("--name", name))
    if gui:
        opts.append(("--network", "host"))
        opts.append(("--privileged", None))
    opts.append(("--volume", f"{mount_src}:{container_workdir}"))
    opts.append(("--workdir", container_workdir))
    if gui:
        opts.append(("--env", f"DISPLAY={display}"))
        opts.append(("--volume", f"{X11_SOCKET}:{X11_SOCKET}:rw"))
        opts.append(("--volume", "/dev:/dev"))
    return opts


def docker_run_argv(image: str, options: Sequence[Option], command: Sequence[str]) -> List[str]:
    argv = ["docker", "run"]
    for flag, value in options:
        argv.append(flag if value is None else f"{flag}={value}")
    return [*argv, image, *command]


def bash_script_command(lines: Sequence[str]) -> List[str]:
    return ["bash", "-c", "\n".join(lines)]


def render_docker_run(image: str, options: Sequence[Option], lines: Sequence[str] = ()) -> str:
    """Render a `docker run` as a multi-line shell command.

    Option values are double-quoted, not escaped, so shell expansions such as
    $(pwd) or ${DISPLAY:-:0} in them are evaluated by the generated script.
    """

    parts = ["docker run"]
    for flag, value in options:
        parts.append(flag if value is None else f'{flag}="{value}"')
    parts.append(image)

    body = " \\\n  ".join(parts)
    if not lines:
        return body + " \\\n  bash\n"
    inner = "".join(f"    {ln}\n" for ln in lines)
    return body + ' \\\n  bash -c "\n' + inner + '  "\n'
