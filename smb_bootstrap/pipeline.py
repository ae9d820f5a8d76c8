from __future__ import annotations

import getpass
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence

from .config import BootstrapConfig
from .lib.command import CommandRunner
from .lib.hostinfo import HostInfo

logger = logging.getLogger(__name__)


class Severity(str, Enum):
    FATAL = "fatal"
    ADVISORY = "advisory"


class StepFailed(RuntimeError):
    """A step could not reach its post-condition."""


@dataclass
class BootstrapCtx:
    config: BootstrapConfig
    runner: CommandRunner
    host_probe: Callable[[], HostInfo]
    confirm: Callable[[str], bool]
    user: str = field(default_factory=getpass.getuser)
    decisions: Dict[str, Any] = field(default_factory=dict)

    @property
    def workspace_dir(self) -> Path:
        return self.config.workspace_dir

    @property
    def repo_dir(self) -> Path:
        return self.config.repo_dir

    @property
    def dry_run(self) -> bool:
        return self.config.dry_run


class Step(Protocol):
    """A single idempotent stage."""

    step_id: str
    title: str
    severity: Severity

    def run(self, ctx: BootstrapCtx) -> None:
        ...


@dataclass(frozen=True)
class StepWarning:
    step_id: str
    message: str


@dataclass(frozen=True)
class PipelineResult:
    ran_steps: List[str]
    warnings: List[StepWarning]


def run_pipeline(
    *,
    ctx: BootstrapCtx,
    steps: Sequence[Step],
    stop_after: Optional[str] = None,
) -> PipelineResult:
    """Run steps strictly in order.

    Exceptions from FATAL steps propagate and end the run. Exceptions from
    ADVISORY steps are downgraded to a warning and the run continues.
    """

    ran: List[str] = []
    warnings: List[StepWarning] = []

    for step in steps:
        ctx.decisions["current_step"] = step.step_id
        logger.info("=== %s ===", step.title)

        try:
            step.run(ctx)
        except Exception as e:
            if step.severity is not Severity.ADVISORY:
                raise
            logger.warning("%s failed (continuing): %s", step.step_id, e)
            warnings.append(StepWarning(step_id=step.step_id, message=str(e)))
        ran.append(step.step_id)

        if stop_after is not None and step.step_id == stop_after:
            logger.info("Stopping after %s", stop_after)
            break

    ctx.decisions["current_step"] = None
    return PipelineResult(ran_steps=ran, warnings=warnings)
