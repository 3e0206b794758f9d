"""
gvs CLI argument parser.

This module implements the command-line interface for gvs using argparse.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("gvs")
except Exception:
    __version__ = "0.1.0"

from gvs.core.exceptions import GvsError

logger = logging.getLogger(__name__)

SUBCOMMANDS = ["list", "list-remote", "install", "use", "remove", "completion"]


class CLI:
    """gvs command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="gvs",
            description="gvs - a simple Go version manager",
            epilog='Use "gvs COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument("--version", action="version", version=f"gvs {__version__}")
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ~/.gvs/config.yaml)",
        )

        # Subcommands
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_list_remote_command(subparsers)
        self._add_list_command(subparsers)
        self._add_version_command(subparsers, "install", "Install a new Go version")
        self._add_version_command(subparsers, "use", "Switch to a Go version")
        self._add_version_command(subparsers, "remove", "Uninstall a Go version")
        self._add_completion_command(subparsers)

        return parser

    def _add_list_remote_command(self, subparsers):
        """Add 'list-remote' subcommand."""
        parser = subparsers.add_parser(
            "list-remote",
            help="List available Go versions (defaults to 10)",
            description="List Go versions published on the download page",
        )
        parser.add_argument(
            "-limit",
            "--limit",
            type=int,
            default=10,
            metavar="N",
            help="Limit the number of versions returned (<= 0 for all) [default: 10]",
        )

    def _add_list_command(self, subparsers):
        """Add 'list' subcommand."""
        subparsers.add_parser(
            "list",
            help="List all installed Go versions",
            description="List Go versions installed under ~/sdk",
        )

    def _add_version_command(self, subparsers, name: str, help_text: str):
        parser = subparsers.add_parser(name, help=help_text, description=help_text)
        parser.add_argument(
            "target_version",
            metavar="VERSION",
            help="Go version, with or without the 'go' prefix (e.g., 1.22.1)",
        )

    def _add_completion_command(self, subparsers):
        """Add 'completion' subcommand."""
        parser = subparsers.add_parser(
            "completion",
            help="Generate shell completion script",
            description="Generate shell completion script",
        )
        parser.add_argument(
            "shell",
            nargs="?",
            metavar="SHELL",
            help="Shell to generate completion for (bash)",
        )
        parser.add_argument("words", nargs=argparse.REMAINDER, help=argparse.SUPPRESS)

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        # Configure logging
        self._configure_logging(parsed_args)

        # Check if command specified
        if not parsed_args.command:
            self.parser.print_help()
            return 1

        # Dispatch to command handler
        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except GvsError as e:
            logger.error(f"Error: {e}")
            return 1
        except Exception as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        # Command module mapping
        command_map = {
            "list-remote": "gvs.cli.commands.list_remote",
            "list": "gvs.cli.commands.list_local",
            "install": "gvs.cli.commands.install",
            "use": "gvs.cli.commands.use",
            "remove": "gvs.cli.commands.remove",
            "completion": "gvs.cli.commands.completion",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        import importlib

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
