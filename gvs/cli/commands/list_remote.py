"""
List-remote command implementation.

Prints versions published on the Go download page, newest first as listed.
"""

import logging

from gvs.cli.utils import get_version_manager

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the list-remote command.

    Args:
        args: Parsed command-line arguments with:
            - limit: Maximum number of versions (<= 0 for all)

    Returns:
        Exit code (0 for success)
    """
    manager = get_version_manager(args)

    for version in manager.list_remote(args.limit):
        print(version)

    return 0
