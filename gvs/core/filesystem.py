"""
Filesystem utilities for gvs.

This module provides the few careful filesystem operations the version
manager relies on:
- Safe deletion of a release directory tree
- Atomic replacement of the active-version symlink
- Reading symlink targets, including dangling ones
"""

import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional, Union

from .exceptions import GvsFilesystemError


def is_relative_to(path: Path, parent: Path) -> bool:
    """
    Check whether ``path`` lies under ``parent``.

    Args:
        path: Path to check
        parent: Potential parent directory

    Returns:
        True if path is parent or inside it
    """
    try:
        path.relative_to(parent)
        return True
    except ValueError:
        return False


def safe_rmtree(
    path: Union[str, Path], require_prefix: Optional[Union[str, Path]] = None
) -> None:
    """
    Safely remove a directory tree with safeguards.

    Args:
        path: Directory to remove
        require_prefix: If specified, path must be strictly under this directory

    Raises:
        GvsFilesystemError: If path is not under require_prefix, or deletion fails

    Example:
        >>> safe_rmtree(Path.home() / "sdk" / "go1.22.1", require_prefix=Path.home() / "sdk")
    """
    path = Path(os.path.abspath(path))

    if require_prefix is not None:
        require_prefix = Path(os.path.abspath(require_prefix))
        if path == require_prefix or not is_relative_to(path, require_prefix):
            raise GvsFilesystemError(
                f"Refusing to delete '{path}': not under required prefix '{require_prefix}'"
            )

    if path.is_symlink():
        # Only the link goes; its target lies outside the prefix
        try:
            path.unlink()
        except OSError as e:
            raise GvsFilesystemError(f"Failed to remove link '{path}': {e}") from e
        return

    if not path.exists():
        return  # Already gone, nothing to do

    if not path.is_dir():
        raise GvsFilesystemError(f"Path is not a directory: {path}")

    try:
        shutil.rmtree(path)
    except OSError as e:
        raise GvsFilesystemError(f"Failed to remove directory '{path}': {e}") from e


def replace_symlink(link_path: Path, target: Path) -> None:
    """
    Point ``link_path`` at ``target`` without a window where it is missing.

    The new link is created under a temporary name in the same directory and
    renamed over the old one. The target is not required to exist.

    Args:
        link_path: Symlink to create or replace
        target: Path the link should point to

    Raises:
        GvsFilesystemError: If the link cannot be created or renamed
    """
    link_dir = link_path.parent

    # mkstemp reserves a unique name; the placeholder file is swapped for the link
    try:
        fd, temp_name = tempfile.mkstemp(
            dir=link_dir, prefix=f".{link_path.name}.", suffix=".tmp"
        )
    except OSError as e:
        raise GvsFilesystemError(f"Failed to create link in {link_dir}: {e}") from e
    os.close(fd)
    temp_path = Path(temp_name)

    try:
        temp_path.unlink()
        os.symlink(target, temp_path)
        os.replace(temp_path, link_path)
    except OSError as e:
        try:
            if temp_path.is_symlink() or temp_path.exists():
                temp_path.unlink()
        except OSError:
            pass
        raise GvsFilesystemError(
            f"Failed to point {link_path} at {target}: {e}"
        ) from e


def read_link_target(link_path: Path) -> Optional[Path]:
    """
    Resolve a symlink to its absolute, normalized target.

    Dangling links are read like any other; the target is not required to
    exist.

    Args:
        link_path: Path to the symlink

    Returns:
        Absolute target path, or None if ``link_path`` is not a symlink

    Raises:
        GvsFilesystemError: If the link exists but cannot be read
    """
    if not link_path.is_symlink():
        return None

    try:
        target = Path(os.readlink(link_path))
    except OSError as e:
        raise GvsFilesystemError(f"Failed to read symlink {link_path}: {e}") from e

    if not target.is_absolute():
        target = link_path.parent / target
    return Path(os.path.normpath(target))
