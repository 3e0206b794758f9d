"""
Install command implementation.
"""

import logging

from gvs.cli.utils import get_version_manager

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the install command.

    Args:
        args: Parsed command-line arguments with:
            - target_version: Version to install

    Returns:
        Exit code (0 for success)
    """
    manager = get_version_manager(args)

    result = manager.install(args.target_version)

    print(f"Go {result.version.bare} installed successfully.")
    print(f"Run 'gvs use {result.version.bare}' to switch to it.")
    return 0
