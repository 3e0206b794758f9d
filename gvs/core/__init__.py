"""
Core functionality for gvs.

This package contains the foundational modules the version lifecycle code
depends on: configuration, errors, filesystem helpers and locking.
"""

from .config import (
    GvsConfig,
    default_home,
    load_config,
)

from .locking import LockManager

from .exceptions import (
    GvsError,
    ConfigError,
    VersionNotFoundError,
    ExternalToolError,
    InstallTimeoutError,
    CatalogError,
    CatalogTimeoutError,
    GvsFilesystemError,
    VersionsLockTimeout,
)

__all__ = [
    "GvsConfig",
    "default_home",
    "load_config",
    "LockManager",
    "GvsError",
    "ConfigError",
    "VersionNotFoundError",
    "ExternalToolError",
    "InstallTimeoutError",
    "CatalogError",
    "CatalogTimeoutError",
    "GvsFilesystemError",
    "VersionsLockTimeout",
]
