from __future__ import annotations

import logging
import math
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .command import CommandRunner

logger = logging.getLogger(__name__)

_GIB = 1024 ** 3


@dataclass(frozen=True)
class HostInfo:
    is_wsl: bool
    memory_gb: int
    disk_free_gb: int
    distro_version: str = "unknown"


def _read_text(path: Path) -> Optional[str]:
    try:
        txt = path.read_text(encoding="utf-8", errors="ignore").strip()
        return txt or None
    except OSError:
        return None


def detect_wsl(proc_version: Path = Path("/proc/version")) -> bool:
    txt = _read_text(proc_version) or ""
    return "microsoft" in txt.lower()


def total_memory_gb(meminfo: Path = Path("/proc/meminfo")) -> int:
    """Total RAM in whole GiB (0 when /proc/meminfo is unreadable)."""
    txt = _read_text(meminfo) or ""
    for line in txt.splitlines():
        if line.startswith("MemTotal:"):
            return int(line.split()[1]) // (1024 * 1024)
    return 0


def disk_free_gb(path: Path) -> int:
    """Free space in GiB, rounded up the way `df -BG` reports it."""
    return math.ceil(shutil.disk_usage(str(path)).free / _GIB)


def distro_version(runner: CommandRunner) -> str:
    try:
        r = runner.run(["lsb_release", "-rs"], check=False)
    except OSError:
        return "unknown"
    return (r.stdout.strip() if r.ok else "") or "unknown"


def detect_host(runner: CommandRunner, path: Path = Path(".")) -> HostInfo:
    host = HostInfo(
        is_wsl=detect_wsl(),
        memory_gb=total_memory_gb(),
        disk_free_gb=disk_free_gb(path),
        distro_version=distro_version(runner),
    )
    logger.info(
        "Host: wsl=%s memory=%sGB disk_free=%sGB ubuntu=%s",
        host.is_wsl,
        host.memory_gb,
        host.disk_free_gb,
        host.distro_version,
    )
    return host
