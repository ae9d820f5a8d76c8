from __future__ import annotations

import logging
from typing import Sequence

from .command import CmdResult, CommandRunner

logger = logging.getLogger(__name__)


def apt_update(runner: CommandRunner) -> None:
    runner.run(["sudo", "apt-get", "update"])


def apt_install(runner: CommandRunner, packages: Sequence[str]) -> None:
    if not packages:
        return
    runner.run(["sudo", "apt-get", "install", "-y", *packages])


def apt_remove(runner: CommandRunner, packages: Sequence[str], *, check: bool = True) -> CmdResult | None:
    """Remove packages from the host.

    With check=False a failure (e.g. none of the packages installed) is returned
    rather than raised.
    """
    if not packages:
        return None
    r = runner.run(["sudo", "apt-get", "remove", "-y", *packages], check=check)
    if not r.ok:
        logger.info("apt-get remove exited %s (ignored)", r.returncode)
    return r
