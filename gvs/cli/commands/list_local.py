"""
List command implementation.

Prints installed versions, marking the active one.
"""

import logging

from gvs.cli.utils import get_version_manager

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the list command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    manager = get_version_manager(args)

    versions = manager.list_installed()
    if not versions:
        print("No Go versions installed.")
        return 0

    active = manager.active_version()

    for version in versions:
        marker = "* " if version == active else "  "
        suffix = "" if manager.registry.is_complete(version) else " (incomplete)"
        print(f"{marker}{version}{suffix}")

    return 0
