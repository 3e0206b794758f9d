"""
Release installation.

Installing a release is delegated to the official per-version downloader
programs (``golang.org/dl/go<version>``):

1. ``go install golang.org/dl/go<version>@latest`` builds the downloader
2. ``go<version> download`` unpacks the release into ``<home>/sdk/go<version>``

Both steps share one time budget and write straight to the user's terminal.
A failed install is not rolled back; the partial directory lacks the
downloader's completion marker, which ``LocalVersionRegistry.is_complete``
reports.
"""

import logging
import os
import subprocess
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from ..core.config import GvsConfig
from ..core.exceptions import ExternalToolError, InstallTimeoutError
from ..core.locking import LockManager
from .name import VersionName

logger = logging.getLogger(__name__)


class Deadline:
    """Shared time budget for a sequence of steps."""

    def __init__(self, seconds: float):
        self.seconds = seconds
        self._expires = time.monotonic() + seconds

    def remaining(self) -> float:
        """Seconds left; raises once the budget is spent."""
        left = self._expires - time.monotonic()
        if left <= 0:
            raise InstallTimeoutError(f"install timed out after {self.seconds}s")
        return left


class Installer(ABC):
    """Materializes a release under the versions root in two steps."""

    @abstractmethod
    def fetch_downloader(self, version: VersionName, deadline: Deadline) -> None:
        """Obtain the per-version downloader program."""
        pass

    @abstractmethod
    def run_download(self, version: VersionName, deadline: Deadline) -> None:
        """Run the downloader so the release appears under the versions root."""
        pass


class GoDownloaderInstaller(Installer):
    """Installer driving ``go install`` and the golang.org/dl downloaders."""

    def __init__(self, config: GvsConfig):
        self.config = config

    def downloader_path(self, version: VersionName) -> Path:
        return self.config.downloader_dir / version.canonical

    def _environment(self) -> Dict[str, str]:
        env = os.environ.copy()
        # The downloaders unpack into $HOME/sdk
        env["HOME"] = str(self.config.home)
        return env

    def _run(self, cmd: List[str], step: str, deadline: Deadline) -> None:
        logger.debug(f"Running: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd, env=self._environment(), timeout=deadline.remaining()
            )
        except subprocess.TimeoutExpired as e:
            raise InstallTimeoutError(
                f"failed to {step}: timed out after {deadline.seconds}s"
            ) from e
        except OSError as e:
            raise ExternalToolError(f"failed to {step}: {e}") from e

        if result.returncode != 0:
            raise ExternalToolError(
                f"failed to {step}: {cmd[0]} exited with status {result.returncode}",
                returncode=result.returncode,
            )

    def fetch_downloader(self, version: VersionName, deadline: Deadline) -> None:
        module = f"{self.config.downloader_module}/{version.canonical}@latest"
        self._run(
            [self.config.go_command, "install", module],
            "install Go version downloader",
            deadline,
        )

    def run_download(self, version: VersionName, deadline: Deadline) -> None:
        self._run(
            [str(self.downloader_path(version)), "download"],
            "download Go version",
            deadline,
        )


@dataclass
class InstallResult:
    """Result of an install."""

    version: VersionName
    version_dir: Path
    elapsed_seconds: float


class InstallWorkflow:
    """
    Installs a release via an ``Installer``.

    Example:
        >>> workflow = InstallWorkflow(GoDownloaderInstaller(config), config)
        >>> workflow.install("1.22.1").version_dir
        PosixPath('/home/user/sdk/go1.22.1')
    """

    def __init__(
        self,
        installer: Installer,
        config: GvsConfig,
        lock_manager: Optional[LockManager] = None,
    ):
        self.installer = installer
        self.config = config
        self.lock_manager = lock_manager

    def install(self, version: str) -> InstallResult:
        """
        Install ``version``.

        Args:
            version: Version in any accepted spelling

        Returns:
            InstallResult

        Raises:
            ExternalToolError: If either step fails (no cleanup is attempted)
            InstallTimeoutError: If the steps exceed ``install_timeout``
            VersionsLockTimeout: If another gvs process holds the versions lock
        """
        name = VersionName.parse(version)

        if self.lock_manager is None:
            return self._install(name)

        with self.lock_manager.versions_lock():
            return self._install(name)

    def _install(self, name: VersionName) -> InstallResult:
        start = time.monotonic()
        deadline = Deadline(self.config.install_timeout)

        logger.info(f"Installing Go {name.bare}...")

        logger.debug(f"Step 1/2: fetching downloader for {name}")
        self.installer.fetch_downloader(name, deadline)

        logger.debug(f"Step 2/2: downloading {name}")
        self.installer.run_download(name, deadline)

        elapsed = time.monotonic() - start
        logger.debug(f"Installed {name} in {elapsed:.1f}s")

        return InstallResult(
            version=name,
            version_dir=self.config.versions_root / name.canonical,
            elapsed_seconds=elapsed,
        )
