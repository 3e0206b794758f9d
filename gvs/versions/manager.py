"""
Version manager facade.

Wires the registry, catalog, switch and workflows from one ``GvsConfig`` so
callers (the CLI commands) deal with a single object.
"""

import logging
from typing import List, Optional

from ..core.config import GvsConfig
from ..core.exceptions import VersionNotFoundError
from ..core.locking import LockManager
from .catalog import CatalogSource, HttpListingSource, RemoteVersionCatalog
from .installer import GoDownloaderInstaller, Installer, InstallResult, InstallWorkflow
from .name import VersionName
from .registry import LocalVersionRegistry
from .removal import RemovalResult, RemovalWorkflow
from .switch import ActivationResult, ActiveVersionSwitch

logger = logging.getLogger(__name__)


class VersionManager:
    """
    Entry point for all version lifecycle operations.

    Example:
        >>> manager = VersionManager(GvsConfig.for_home(Path.home()))
        >>> manager.install("1.22.1")
        >>> manager.use("1.22.1").path_hint
        'export PATH=/home/user/.gvs/bin:$PATH'
    """

    def __init__(
        self,
        config: GvsConfig,
        installer: Optional[Installer] = None,
        catalog_source: Optional[CatalogSource] = None,
        lock_manager: Optional[LockManager] = None,
    ):
        """
        Initialize manager.

        Args:
            config: Paths and tunables
            installer: Installer to use (default: golang.org/dl downloaders)
            catalog_source: Listing source (default: HTTP GET of listing_url)
            lock_manager: Lock manager (created lazily under config.lock_dir)
        """
        self.config = config
        self.registry = LocalVersionRegistry(config.versions_root)
        self.catalog = RemoteVersionCatalog(
            catalog_source
            or HttpListingSource(config.listing_url, timeout=config.fetch_timeout)
        )
        self._installer = installer or GoDownloaderInstaller(config)
        self._lock_manager = lock_manager

    @property
    def lock_manager(self) -> LockManager:
        # Created on first mutating call so read-only commands never touch ~/.gvs
        if self._lock_manager is None:
            self._lock_manager = LockManager(self.config.lock_dir)
        return self._lock_manager

    @property
    def switch(self) -> ActiveVersionSwitch:
        return ActiveVersionSwitch(self.registry, self.config.link_path)

    def list_remote(self, limit: int = 10) -> List[str]:
        return self.catalog.fetch_top(limit)

    def list_installed(self) -> List[VersionName]:
        return self.registry.list_installed()

    def active_version(self) -> Optional[VersionName]:
        """Installed release the active link points at, if any."""
        switch = self.switch
        for version in self.registry.list_installed():
            if switch.is_active(version):
                return version
        return None

    def install(self, version: str) -> InstallResult:
        workflow = InstallWorkflow(
            self._installer, self.config, lock_manager=self.lock_manager
        )
        return workflow.install(version)

    def use(self, version: str) -> ActivationResult:
        # Checked before the lock manager exists so a miss leaves ~/.gvs alone
        if not self.registry.is_installed(version):
            raise VersionNotFoundError(version)

        switch = ActiveVersionSwitch(
            self.registry, self.config.link_path, lock_manager=self.lock_manager
        )
        return switch.activate(version)

    def remove(self, version: str) -> RemovalResult:
        if not self.registry.is_installed(version):
            raise VersionNotFoundError(version)

        workflow = RemovalWorkflow(
            self.registry, self.switch, lock_manager=self.lock_manager
        )
        return workflow.remove(version)
