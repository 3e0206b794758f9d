"""
Shared utilities for CLI commands.
"""

import logging
import sys
from typing import Optional

from gvs.core.config import load_config
from gvs.versions.manager import VersionManager

logger = logging.getLogger(__name__)


def get_version_manager(args) -> VersionManager:
    """
    Build the version manager for a parsed command line.

    Args:
        args: Parsed arguments (uses ``args.config`` if present)

    Returns:
        VersionManager configured for the current user

    Raises:
        ConfigError: If the configuration file is invalid
    """
    config = load_config(getattr(args, "config", None))
    logger.debug(f"Versions root: {config.versions_root}")
    return VersionManager(config)


def print_error(message: str, details: Optional[str] = None):
    """
    Print error message to stderr in consistent format.

    Args:
        message: Main error message
        details: Optional additional details
    """
    print(f"ERROR: {message}", file=sys.stderr)
    if details:
        print(f"  {details}", file=sys.stderr)
