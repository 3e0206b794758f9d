"""
Local version registry.

The versions root is the only source of truth: a release is installed when
``<versions_root>/<canonical-name>`` is a directory. Nothing is cached
between calls.
"""

import logging
import os
import stat
from pathlib import Path
from typing import List, Union

from ..core.exceptions import GvsFilesystemError
from .name import VersionName

logger = logging.getLogger(__name__)

# Written by the Go downloader once a release archive is fully unpacked
COMPLETION_MARKER = ".unpacked-success"


def _as_version(version: Union[str, VersionName]) -> VersionName:
    if isinstance(version, VersionName):
        return version
    return VersionName.parse(version)


def _is_plain_name(name: str) -> bool:
    return "/" not in name and os.sep not in name and name not in (".", "..")


class LocalVersionRegistry:
    """Enumerates releases installed under a versions root."""

    def __init__(self, versions_root: Path):
        """
        Initialize registry.

        Args:
            versions_root: Directory holding one subdirectory per release
        """
        self.versions_root = Path(versions_root)

    def version_dir(self, version: Union[str, VersionName]) -> Path:
        """Directory a release lives in (whether or not it exists)."""
        return self.versions_root / _as_version(version).canonical

    def entry_point(self, version: Union[str, VersionName]) -> Path:
        """Executable entry point inside a release directory."""
        return self.version_dir(version) / "bin" / "go"

    def list_installed(self) -> List[VersionName]:
        """
        List installed releases.

        Returns:
            Releases in the filesystem's enumeration order (not sorted).
            Empty when the versions root does not exist.

        Raises:
            GvsFilesystemError: If the versions root cannot be read
        """
        try:
            with os.scandir(self.versions_root) as it:
                entries = list(it)
        except FileNotFoundError:
            logger.debug(f"Versions root does not exist: {self.versions_root}")
            return []
        except OSError as e:
            raise GvsFilesystemError(
                f"failed to read versions directory {self.versions_root}: {e}"
            ) from e

        versions = []
        for entry in entries:
            try:
                if entry.is_dir():
                    versions.append(VersionName(entry.name))
            except OSError as e:
                logger.debug(f"Skipping unreadable entry {entry.path}: {e}")
        return versions

    def is_installed(self, version: Union[str, VersionName]) -> bool:
        """
        Check whether a release directory exists.

        Args:
            version: Version in any accepted spelling

        Returns:
            True if ``<versions_root>/<canonical-name>`` is a directory

        Raises:
            GvsFilesystemError: For any error other than "not found"
        """
        name = _as_version(version)
        if not _is_plain_name(name.canonical):
            # Never an immediate subdirectory of the root
            return False

        version_dir = self.version_dir(name)
        try:
            st = os.stat(version_dir)
        except (FileNotFoundError, NotADirectoryError):
            return False
        except OSError as e:
            raise GvsFilesystemError(
                f"failed to check if version is installed: {e}"
            ) from e

        return stat.S_ISDIR(st.st_mode)

    def is_complete(self, version: Union[str, VersionName]) -> bool:
        """
        Check whether a release finished unpacking.

        A directory left behind by an interrupted install is still reported by
        ``is_installed``; this tells the two apart.
        """
        return (self.version_dir(version) / COMPLETION_MARKER).is_file()
