from __future__ import annotations

import logging
import stat
from pathlib import Path

logger = logging.getLogger(__name__)

_EXEC_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def write_file(path: Path, contents: str, *, dry_run: bool = False) -> None:
    """Write (fully overwrite) a text file."""
    if dry_run:
        logger.info("Would write %s", str(path))
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(contents, encoding="utf-8")


def append_line_once(path: Path, line: str, *, dry_run: bool = False) -> bool:
    """Append line to path unless an identical line is already there.

    Returns True if the file was (or would be) changed.
    """
    text = path.read_text(encoding="utf-8") if path.exists() else ""
    if line in text.splitlines():
        logger.info("%s already contains %r", str(path), line)
        return False
    if dry_run:
        logger.info("Would append %r to %s", line, str(path))
        return True
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as fh:
        if text and not text.endswith("\n"):
            fh.write("\n")
        fh.write(line + "\n")
    return True


def make_executable(path: Path, *, dry_run: bool = False) -> None:
    """chmod +x"""
    if dry_run:
        logger.info("Would chmod +x %s", str(path))
        return
    mode = path.stat().st_mode
    path.chmod(mode | _EXEC_BITS)


def describe_mode(path: Path) -> str:
    return stat.filemode(path.stat().st_mode)
