"""
Use command implementation.

Switches the active Go version.
"""

import logging

from gvs.cli.utils import get_version_manager

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the use command.

    Args:
        args: Parsed command-line arguments with:
            - target_version: Version to activate

    Returns:
        Exit code (0 for success)
    """
    manager = get_version_manager(args)

    result = manager.use(args.target_version)

    if not manager.registry.is_complete(result.version):
        logger.warning(
            f"{result.version} looks incomplete; re-run 'gvs install {result.version.bare}'"
        )

    print(f"Now using Go {args.target_version}")
    print("Please add the following to your shell's config file:")
    print(result.path_hint)
    return 0
