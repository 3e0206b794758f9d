"""
Version lifecycle management for gvs.

This package provides functionality for:
- Normalizing version names
- Listing installed and remotely available releases
- Installing, activating and removing releases
"""

from gvs.versions.name import VERSION_PREFIX, VersionName, normalize_version
from gvs.versions.registry import COMPLETION_MARKER, LocalVersionRegistry
from gvs.versions.catalog import (
    CatalogSource,
    HttpListingSource,
    RemoteVersionCatalog,
    extract_versions,
)
from gvs.versions.switch import ActivationResult, ActiveVersionSwitch
from gvs.versions.installer import (
    Deadline,
    GoDownloaderInstaller,
    Installer,
    InstallResult,
    InstallWorkflow,
)
from gvs.versions.removal import RemovalResult, RemovalWorkflow
from gvs.versions.manager import VersionManager

__all__ = [
    "VERSION_PREFIX",
    "VersionName",
    "normalize_version",
    "COMPLETION_MARKER",
    "LocalVersionRegistry",
    "CatalogSource",
    "HttpListingSource",
    "RemoteVersionCatalog",
    "extract_versions",
    "ActivationResult",
    "ActiveVersionSwitch",
    "Deadline",
    "GoDownloaderInstaller",
    "Installer",
    "InstallResult",
    "InstallWorkflow",
    "RemovalResult",
    "RemovalWorkflow",
    "VersionManager",
]
