"""
Release removal.

Deletes a release directory and, if the active link pointed into it,
retracts the link so no dangling ``go`` is left on the PATH.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..core.exceptions import VersionNotFoundError
from ..core.filesystem import safe_rmtree
from ..core.locking import LockManager
from .name import VersionName
from .registry import LocalVersionRegistry
from .switch import ActiveVersionSwitch

logger = logging.getLogger(__name__)


@dataclass
class RemovalResult:
    """Result of a removal."""

    version: VersionName
    version_dir: Path
    was_active: bool


class RemovalWorkflow:
    """Removes installed releases."""

    def __init__(
        self,
        registry: LocalVersionRegistry,
        switch: ActiveVersionSwitch,
        lock_manager: Optional[LockManager] = None,
    ):
        self.registry = registry
        self.switch = switch
        self.lock_manager = lock_manager

    def remove(self, version: str) -> RemovalResult:
        """
        Remove ``version``.

        If deleting the tree fails partway the active link is left alone,
        since the release may still be partly present; re-run to finish.

        Args:
            version: Version in any accepted spelling

        Returns:
            RemovalResult

        Raises:
            VersionNotFoundError: If the version is not installed (nothing touched)
            GvsFilesystemError: If the tree or the link cannot be removed
        """
        if not self.registry.is_installed(version):
            raise VersionNotFoundError(version)

        if self.lock_manager is None:
            return self._remove(version)

        with self.lock_manager.versions_lock():
            return self._remove(version)

    def _remove(self, version: str) -> RemovalResult:
        name = VersionName.parse(version)
        if not self.registry.is_installed(name):
            raise VersionNotFoundError(version)

        version_dir = self.registry.version_dir(name)
        safe_rmtree(version_dir, require_prefix=self.registry.versions_root)
        logger.debug(f"Removed {version_dir}")

        was_active = self.switch.retract_if_active(name)
        if was_active:
            logger.debug(f"{name} was active; removed {self.switch.link_path}")

        return RemovalResult(version=name, version_dir=version_dir, was_active=was_active)
