"""Shared fixtures: a scripted command runner and a config rooted in tmp_path.

Nothing in the suite touches apt, docker or git on the real host.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import pytest

from smb_bootstrap.config import BootstrapConfig
from smb_bootstrap.lib.command import CmdResult, CommandError
from smb_bootstrap.lib.hostinfo import HostInfo
from smb_bootstrap.pipeline import BootstrapCtx


class FakeRunner:
    """Records every argv; returns scripted results keyed by argv prefix.

    ``on(prefix, returncode=..., stdout=..., effect=...)`` registers a response
    for any argv starting with ``prefix``; the longest matching prefix wins.
    ``effect`` is called with the argv and cwd before the result is returned,
    which lets a fake ``git clone`` create a directory.
    """

    def __init__(self, which: Optional[Dict[str, str]] = None) -> None:
        self.calls: List[List[str]] = []
        self.cwds: List[Optional[str]] = []
        self._which = dict(which or {})
        self._responses: Dict[Tuple[str, ...], Tuple[int, str, Optional[Callable]]] = {}

    def on(
        self,
        prefix: Sequence[str],
        *,
        returncode: int = 0,
        stdout: str = "",
        effect: Optional[Callable[[List[str], Optional[str]], None]] = None,
    ) -> "FakeRunner":
        self._responses[tuple(prefix)] = (returncode, stdout, effect)
        return self

    def _lookup(self, argv: List[str]):
        best = None
        for prefix, resp in self._responses.items():
            if tuple(argv[: len(prefix)]) == prefix:
                if best is None or len(prefix) > len(best[0]):
                    best = (prefix, resp)
        return best[1] if best else (0, "", None)

    def run(self, argv, *, check=True, cwd=None, env=None, capture=True) -> CmdResult:
        argv = list(argv)
        self.calls.append(argv)
        self.cwds.append(cwd)
        returncode, stdout, effect = self._lookup(argv)
        if effect is not None:
            effect(argv, cwd)
        if check and returncode != 0:
            raise CommandError(argv, returncode, "scripted failure")
        return CmdResult(argv=argv, returncode=returncode, stdout=stdout, stderr="")

    def which(self, name: str) -> Optional[str]:
        return self._which.get(name)

    def called(self, *prefix: str) -> bool:
        return any(tuple(c[: len(prefix)]) == prefix for c in self.calls)


def fake_clone(argv: List[str], cwd: Optional[str]) -> None:
    """Effect for `git clone URL DEST`: materialise DEST with one file."""
    dest = Path(cwd or ".") / argv[-1]
    dest.mkdir(parents=True)
    (dest / "README.md").write_text("fresh clone\n", encoding="utf-8")


@pytest.fixture
def config(tmp_path: Path) -> BootstrapConfig:
    return BootstrapConfig(
        workspace_dir=tmp_path / "ws",
        shell_profile=tmp_path / "home" / ".bashrc",
        disk_check_path=tmp_path,
    )


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner(which={"docker": "/usr/bin/docker"}).on(["git", "clone"], effect=fake_clone)


@pytest.fixture
def healthy_host() -> HostInfo:
    return HostInfo(is_wsl=True, memory_gb=16, disk_free_gb=120, distro_version="22.04")


@pytest.fixture
def make_ctx(config, runner, healthy_host):
    def _make(*, cfg=None, run=None, host=None, answers=None) -> BootstrapCtx:
        replies = list(answers or [])
        asked: List[str] = []

        def confirm(question: str) -> bool:
            asked.append(question)
            return replies.pop(0) if replies else False

        ctx = BootstrapCtx(
            config=cfg or config,
            runner=run or runner,
            host_probe=lambda: host or healthy_host,
            confirm=confirm,
            user="student",
        )
        ctx.asked = asked  # type: ignore[attr-defined]
        return ctx

    return _make


@pytest.fixture
def fresh_root_logger():
    """Let configure_logging() run as if in a new process; undo it afterwards."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    saved_attrs = {
        name: root.__dict__.pop(name)
        for name in ("_smb_bootstrap_configured", "_smb_bootstrap_log_path")
        if name in root.__dict__
    }
    yield root
    for h in list(root.handlers):
        ours = isinstance(h, RotatingFileHandler) or type(h) is logging.StreamHandler
        if ours and h not in saved_handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(saved_level)
    for name in ("_smb_bootstrap_configured", "_smb_bootstrap_log_path"):
        root.__dict__.pop(name, None)
    root.__dict__.update(saved_attrs)
