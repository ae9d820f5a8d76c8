from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

DEFAULT_LOG_PATH = str(Path("~/.cache/smb-bootstrap/bootstrap.log").expanduser())
FALLBACK_LOG_NAME = "smb-bootstrap.log"

# Previous runs kept as bootstrap.log.1 (newest) .. bootstrap.log.N.
DEFAULT_KEEP_RUNS = 5

_CONFIGURED_ATTR = "_smb_bootstrap_configured"
_PATH_ATTR = "_smb_bootstrap_log_path"


def _open_run_log(path: Path, keep_runs: int) -> RotatingFileHandler:
    """Open path for a new run, shifting a non-empty previous log to path.1."""
    path.parent.mkdir(parents=True, exist_ok=True)
    # maxBytes=0: never rotate mid-run, only once at start.
    handler = RotatingFileHandler(path, backupCount=keep_runs, encoding="utf-8")
    if keep_runs > 0 and path.stat().st_size > 0:
        handler.doRollover()
    return handler


def configure_logging(
    log_path: str = DEFAULT_LOG_PATH,
    level: int = logging.INFO,
    also_console: bool = True,
    keep_runs: int = DEFAULT_KEEP_RUNS,
) -> str:
    """Send records to a per-run log file and, optionally, the console.

    An install takes the better part of an hour and is usually re-run after
    fixing whatever stopped it, so each run starts a fresh file and the last
    ``keep_runs`` runs stay next to it for comparison. The file gets
    timestamps, logger names and every command's captured output (DEBUG);
    the console only ``[LEVEL] message`` at ``level``.

    If the requested location cannot be written, ``smb-bootstrap.log`` in the
    current directory is used instead. Calling this again is a no-op.

    Returns the path of the file actually written.
    """

    root = logging.getLogger()
    if getattr(root, _CONFIGURED_ATTR, False):
        return getattr(root, _PATH_ATTR)

    requested = Path(log_path).expanduser()
    fallback_reason: Optional[OSError] = None
    try:
        file_handler = _open_run_log(requested, keep_runs)
        chosen = requested
    except OSError as e:
        chosen = Path.cwd() / FALLBACK_LOG_NAME
        file_handler = _open_run_log(chosen, keep_runs)
        fallback_reason = e

    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    )
    root.addHandler(file_handler)

    if also_console:
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(logging.Formatter(fmt="[%(levelname)s] %(message)s"))
        root.addHandler(console)

    root.setLevel(logging.DEBUG)
    setattr(root, _CONFIGURED_ATTR, True)
    setattr(root, _PATH_ATTR, str(chosen))

    log = logging.getLogger(__name__)
    if fallback_reason is not None:
        log.warning("Cannot write log to %s (%s); using %s", str(requested), fallback_reason, str(chosen))
    log.debug("Log file: %s (keeping %d previous runs)", str(chosen), keep_runs)
    return str(chosen)
