from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from ..config import BootstrapConfig
from ..lib.hostinfo import HostInfo
from ..pipeline import BootstrapCtx, Severity, StepFailed

logger = logging.getLogger(__name__)


@dataclass
class PreflightReport:
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def check_requirements(host: HostInfo, config: BootstrapConfig) -> PreflightReport:
    """Classify host signals against the configured thresholds.

    Low memory and a non-WSL host only warn; too little free disk is an error.
    """
    report = PreflightReport()

    if not host.is_wsl:
        report.warnings.append("Not running in WSL. This setup is optimized for WSL environments.")

    if host.memory_gb < config.required_memory_gb:
        report.warnings.append(
            f"Available memory: {host.memory_gb}GB. Recommended: {config.required_memory_gb}GB+ "
            "(you may need to increase the WSL memory allocation)"
        )

    if host.disk_free_gb < config.required_disk_gb:
        report.errors.append(
            f"Insufficient disk space: {host.disk_free_gb}GB. Required: {config.required_disk_gb}GB+"
        )

    return report


class PreflightStep:
    step_id = "10_preflight"
    title = "Checking System Requirements"
    severity = Severity.FATAL

    def run(self, ctx: BootstrapCtx) -> None:
        host = ctx.host_probe()
        report = check_requirements(host, ctx.config)

        if host.is_wsl:
            logger.info("WSL environment detected")
        if host.memory_gb >= ctx.config.required_memory_gb:
            logger.info("Memory check passed: %sGB available", host.memory_gb)
        for w in report.warnings:
            logger.warning(w)
        for e in report.errors:
            logger.error(e)

        logger.info("Ubuntu version: %s", host.distro_version)
        ctx.decisions["host"] = host
        ctx.decisions["preflight_warnings"] = list(report.warnings)

        if not report.ok:
            raise StepFailed("; ".join(report.errors))
        logger.info("Disk space check passed: %sGB available", host.disk_free_gb)
