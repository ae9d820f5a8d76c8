from .step_10_preflight import PreflightStep
from .step_20_install_dependencies import InstallDependenciesStep
from .step_30_install_docker import InstallDockerStep
from .step_40_prepare_workspace import PrepareWorkspaceStep
from .step_50_clone_repository import CloneRepositoryStep
from .step_60_pull_image import PullImageStep
from .step_70_setup_display import SetupDisplayStep
from .step_80_generate_scripts import GenerateScriptsStep
from .step_90_build_workspace import BuildWorkspaceStep
from .step_95_write_docs import WriteDocsStep

__all__ = [
    "PreflightStep",
    "InstallDependenciesStep",
    "InstallDockerStep",
    "PrepareWorkspaceStep",
    "CloneRepositoryStep",
    "PullImageStep",
    "SetupDisplayStep",
    "GenerateScriptsStep",
    "BuildWorkspaceStep",
    "WriteDocsStep",
]
