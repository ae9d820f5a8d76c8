from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, get_origin, get_type_hints

DEFAULT_WORKSPACE_DIR = "~/z_crafts/eth"

SYSTEM_PACKAGES: Tuple[str, ...] = (
    "curl",
    "wget",
    "git",
    "software-properties-common",
    "apt-transport-https",
    "ca-certificates",
    "gnupg",
    "lsb-release",
    "unzip",
    "build-essential",
    "python3",
    "python3-pip",
    "python3-venv",
    "net-tools",
    "htop",
    "nano",
    "vim",
)

# Distro packages that conflict with the upstream docker-ce install.
LEGACY_DOCKER_PACKAGES: Tuple[str, ...] = (
    "docker",
    "docker-engine",
    "docker.io",
    "containerd",
    "runc",
)


@dataclass(frozen=True)
class BootstrapConfig:
    workspace_dir: Path = field(default_factory=lambda: Path(DEFAULT_WORKSPACE_DIR).expanduser())
    required_memory_gb: int = 12
    required_disk_gb: int = 50
    disk_check_path: Path = Path(".")

    repo_url: str = "https://github.com/ETHZ-RobotX/smb_ros2_workspace.git"
    repo_dir_name: str = "smb_ros2_workspace"
    image: str = "ghcr.io/ethz-robotx/smb_ros2_workspace:main"
    container_workdir: str = "/workspaces/smb_ros2_workspace"

    system_packages: Tuple[str, ...] = SYSTEM_PACKAGES
    legacy_docker_packages: Tuple[str, ...] = LEGACY_DOCKER_PACKAGES
    docker_install_url: str = "https://get.docker.com"
    compose_package: str = "docker-compose"
    docker_group: str = "docker"

    display_packages: Tuple[str, ...] = ("x11-apps",)
    display: str = ":0"
    shell_profile: Path = field(default_factory=lambda: Path("~/.bashrc").expanduser())
    smoke_test_program: str = "xeyes"
    smoke_test_timeout_s: int = 5

    build_target: str = "meta_smb_sim"
    parallel_workers: int = 6

    quick_start_name: str = "SMB_QUICK_START.md"
    dry_run: bool = False

    @property
    def repo_dir(self) -> Path:
        return self.workspace_dir / self.repo_dir_name

    @property
    def quick_start_path(self) -> Path:
        return self.workspace_dir / self.quick_start_name


def _coerce(name: str, hint: Any, value: Any) -> Any:
    """Check a raw value against the field annotation; numeric strings become ints."""
    if hint is Path:
        if not isinstance(value, (str, Path)):
            raise ValueError(f"{name} must be a path, got {type(value).__name__}")
        return Path(str(value)).expanduser()
    if hint is bool:
        if not isinstance(value, bool):
            raise ValueError(f"{name} must be true/false, got {value!r}")
        return value
    if hint is int:
        if isinstance(value, bool):
            raise ValueError(f"{name} must be an integer, got {value!r}")
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ValueError(f"{name} must be an integer, got {value!r}") from None
    if get_origin(hint) is tuple:
        if not isinstance(value, (list, tuple)) or any(isinstance(v, (list, dict)) for v in value):
            raise ValueError(f"{name} must be a list of strings, got {value!r}")
        return tuple(str(v) for v in value)
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string, got {type(value).__name__}")
    return value


def config_from_mapping(raw: Dict[str, Any], **overrides: Any) -> BootstrapConfig:
    known = {f.name for f in dataclasses.fields(BootstrapConfig)}
    merged = {**raw, **overrides}
    unknown = sorted(set(merged) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
    hints = get_type_hints(BootstrapConfig)
    return BootstrapConfig(**{k: _coerce(k, hints[k], v) for k, v in merged.items()})


def load_config(path: Optional[str] = None, **overrides: Any) -> BootstrapConfig:
    """Build the run configuration.

    Defaults reproduce the stock SMB setup. A YAML file may override any
    field by name; keyword overrides (e.g. dry_run from the CLI) win over both.
    """
    if path is None:
        return config_from_mapping({}, **overrides)

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError("bootstrap config must be YAML")

    try:
        import yaml  # type: ignore
    except Exception as e:
        raise RuntimeError("PyYAML is required to read the bootstrap config") from e

    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError("bootstrap config must contain a mapping/object")

    return config_from_mapping(raw, **overrides)
