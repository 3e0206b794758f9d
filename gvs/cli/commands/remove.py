"""
Remove command implementation.
"""

import logging

from gvs.cli.utils import get_version_manager

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the remove command.

    Args:
        args: Parsed command-line arguments with:
            - target_version: Version to uninstall

    Returns:
        Exit code (0 for success)
    """
    manager = get_version_manager(args)

    result = manager.remove(args.target_version)

    if result.was_active:
        logger.info(f"{result.version} was the active version; no Go is active now")

    print(f"Go version {args.target_version} removed successfully.")
    return 0
