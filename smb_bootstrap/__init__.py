"""SMB ROS2 workspace bootstrap (WSL/Ubuntu).

Core design goals:
- Linear, ordered stages with declared severity (fatal | advisory)
- Idempotent re-runs (installs skip, generated files are overwritten)
- Destructive actions only after an explicit operator yes
- Every host mutation goes through one command runner
- Centralized logging
"""

__all__ = []
