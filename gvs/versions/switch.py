"""
Active version switching.

The active release is whichever one ``<link_dir>/go`` points at. The link is
swapped in with a rename, so a concurrent ``go`` invocation always finds
either the old or the new target.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..core.exceptions import GvsFilesystemError, VersionNotFoundError
from ..core.filesystem import read_link_target, replace_symlink
from ..core.locking import LockManager
from .name import VersionName
from .registry import LocalVersionRegistry

logger = logging.getLogger(__name__)


@dataclass
class ActivationResult:
    """Outcome of a successful switch."""

    version: VersionName
    link_path: Path
    target: Path
    link_dir: Path
    """Directory that must be on the user's PATH"""

    @property
    def path_hint(self) -> str:
        return f"export PATH={self.link_dir}:$PATH"


class ActiveVersionSwitch:
    """Owns the active-version symlink."""

    def __init__(
        self,
        registry: LocalVersionRegistry,
        link_path: Path,
        lock_manager: Optional[LockManager] = None,
    ):
        """
        Initialize switch.

        Args:
            registry: Registry used to check that a version is installed
            link_path: Location of the active-version symlink
            lock_manager: Held around activation when given
        """
        self.registry = registry
        self.link_path = Path(link_path)
        self.lock_manager = lock_manager

    @property
    def link_dir(self) -> Path:
        return self.link_path.parent

    def activate(self, version: Union[str, VersionName]) -> ActivationResult:
        """
        Make ``version`` the active release.

        The entry point inside the release is not checked; activating a
        partial release leaves a dangling link rather than failing.

        Args:
            version: Version in any accepted spelling

        Returns:
            ActivationResult with the PATH guidance for the user

        Raises:
            VersionNotFoundError: If the version is not installed (link untouched)
            GvsFilesystemError: If the link directory or link cannot be written
        """
        if not self.registry.is_installed(version):
            raise VersionNotFoundError(version)

        if self.lock_manager is None:
            return self._activate(version)

        with self.lock_manager.versions_lock():
            return self._activate(version)

    def _activate(self, version: Union[str, VersionName]) -> ActivationResult:
        name = VersionName.parse(str(version))
        if not self.registry.is_installed(name):
            raise VersionNotFoundError(str(version))

        try:
            self.link_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise GvsFilesystemError(f"failed to create bin directory: {e}") from e

        target = Path(os.path.abspath(self.registry.entry_point(name)))
        replace_symlink(self.link_path, target)
        logger.debug(f"Linked {self.link_path} -> {target}")

        return ActivationResult(
            version=name, link_path=self.link_path, target=target, link_dir=self.link_dir
        )

    def active_target(self) -> Optional[Path]:
        """Target of the active link, or None when no version is active."""
        return read_link_target(self.link_path)

    def is_active(self, version: Union[str, VersionName]) -> bool:
        """Check whether the link points at the entry point of ``version``."""
        target = self.active_target()
        if target is None:
            return False
        expected = self.registry.entry_point(VersionName.parse(str(version)))
        return target == Path(os.path.abspath(expected))

    def deactivate(self) -> bool:
        """
        Remove the active link.

        Returns:
            True if a link was removed, False if none existed
        """
        if not self.link_path.is_symlink():
            return False

        try:
            self.link_path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise GvsFilesystemError(f"failed to remove symlink: {e}") from e

        logger.debug(f"Removed active link {self.link_path}")
        return True

    def retract_if_active(self, version: Union[str, VersionName]) -> bool:
        """Remove the link only if it points at ``version``."""
        if self.is_active(version):
            return self.deactivate()
        return False
