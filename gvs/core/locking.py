"""
Concurrent access control for gvs.

Install, activate and remove all mutate the versions root or the active
link. This module provides the advisory file lock those operations hold so
two ``gvs`` processes never interleave on the same paths.

Usage:
    from gvs.core.locking import LockManager

    lock_manager = LockManager(config.lock_dir)
    with lock_manager.versions_lock(timeout=30):
        # Safely modify sdk/ and .gvs/bin/go
        pass
"""

import logging
from contextlib import contextmanager
from pathlib import Path

from filelock import FileLock, Timeout as LockTimeout

from .exceptions import VersionsLockTimeout

logger = logging.getLogger(__name__)


class LockManager:
    """
    Manages file-based locks for gvs resources.

    Uses the ``filelock`` library, so a lock held by a process that dies is
    released by the operating system.

    Attributes:
        lock_dir: Directory where lock files are stored
    """

    def __init__(self, lock_dir: Path):
        """
        Initialize lock manager.

        Args:
            lock_dir: Directory for lock files (created if missing)
        """
        self.lock_dir = Path(lock_dir)
        self.lock_dir.mkdir(parents=True, exist_ok=True)

    @contextmanager
    def versions_lock(self, timeout: float = 30):
        """
        Acquire the lock guarding the versions root and the active link.

        Args:
            timeout: Maximum wait time in seconds (default: 30)

        Yields:
            None

        Raises:
            VersionsLockTimeout: If lock can't be acquired within timeout
        """
        lock_path = self.lock_dir / "versions.lock"
        lock = FileLock(lock_path, timeout=timeout)

        try:
            with lock:
                logger.debug(f"Acquired versions lock: {lock_path}")
                yield
                logger.debug(f"Released versions lock: {lock_path}")
        except LockTimeout as e:
            logger.debug(f"Timed out waiting for {lock_path}")
            raise VersionsLockTimeout(
                f"Could not acquire versions lock after {timeout}s. "
                "Another gvs process may be running."
            ) from e
