"""
Centralized exception hierarchy for gvs.

This module defines all custom exceptions used across the codebase so that
the CLI dispatcher can report every core failure in one place.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class GvsError(Exception):
    """Base exception for all gvs errors."""

    pass


class ConfigError(GvsError):
    """Raised when the configuration file cannot be used."""

    pass


# ============================================================================
# Version Exceptions
# ============================================================================


class VersionNotFoundError(GvsError):
    """Raised when a version is not installed under the versions root."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(f"version not found: {version}")


# ============================================================================
# Install Exceptions
# ============================================================================


class ExternalToolError(GvsError):
    """Raised when the external installer fails to launch or exits non-zero."""

    def __init__(self, message: str, returncode=None):
        self.returncode = returncode
        super().__init__(message)


class InstallTimeoutError(ExternalToolError):
    """Raised when the install steps exceed their shared time budget."""

    pass


# ============================================================================
# Remote Catalog Exceptions
# ============================================================================


class CatalogError(GvsError):
    """Raised when the remote release listing cannot be fetched."""

    pass


class CatalogTimeoutError(CatalogError):
    """Raised when the remote release listing does not answer in time."""

    pass


# ============================================================================
# Filesystem Exceptions
# ============================================================================


class GvsFilesystemError(GvsError):
    """Raised for unexpected I/O errors (anything other than "not found")."""

    pass


class VersionsLockTimeout(GvsError):
    """Raised when the versions lock cannot be acquired within timeout."""

    pass
