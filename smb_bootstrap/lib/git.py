from __future__ import annotations

import logging
from pathlib import Path

from .command import CommandRunner

logger = logging.getLogger(__name__)


def git_clone(runner: CommandRunner, url: str, dest_name: str, *, cwd: Path) -> None:
    runner.run(["git", "clone", url, dest_name], cwd=str(cwd))


def git_short_log(runner: CommandRunner, repo: Path, count: int = 3) -> str:
    r = runner.run(["git", "log", "--oneline", "-n", str(count)], check=False, cwd=str(repo))
    return r.stdout.strip()
