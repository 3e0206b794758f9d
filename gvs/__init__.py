"""
gvs - a simple Go version manager.

Installs Go releases side by side under ``~/sdk`` and switches between them
through a single ``~/.gvs/bin/go`` symlink.
"""

from gvs.core.config import GvsConfig, load_config
from gvs.core.exceptions import GvsError
from gvs.versions import VersionManager, VersionName, normalize_version

__all__ = [
    "GvsConfig",
    "load_config",
    "GvsError",
    "VersionManager",
    "VersionName",
    "normalize_version",
]
