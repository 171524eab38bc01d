"""CLI argument parser for mira-site.

This module handles the parsing of command-line arguments and provides
a clean interface for defining CLI commands and their options.
"""

import argparse
from argparse import Namespace
from collections.abc import Sequence

from ..config import GlobalConfig


class CLIParser:
    """Command-line argument parser for mira-site."""

    def __init__(self, global_config: GlobalConfig) -> None:
        """Initialize the CLI parser with global configuration.

        Args:
            global_config: Global configuration dictionary

        """
        self.global_config = global_config

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse; defaults to ``sys.argv[1:]``

        Returns:
            Parsed arguments namespace

        """
        parser = self._create_main_parser()
        self._add_subcommands(parser)
        return parser.parse_args(argv)

    def _create_main_parser(self) -> argparse.ArgumentParser:
        """Create the main argument parser.

        Returns:
            The configured main ArgumentParser instance

        """
        parser = argparse.ArgumentParser(
            prog="mira-site",
            description="Mira release downloads and roadmap",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Latest stable release, host platform first
  %(prog)s downloads

  # Include pre-releases, machine readable
  %(prog)s downloads --prereleases --json

  # What the next release will contain
  %(prog)s roadmap
  %(prog)s roadmap --all

  # Settings
  %(prog)s config --show
  %(prog)s config --init
            """,
        )
        parser.add_argument(
            "--version", action="store_true", help="Show version and exit"
        )
        return parser

    def _add_subcommands(self, parser: argparse.ArgumentParser) -> None:
        """Add all subcommands to the parser.

        Args:
            parser: The main ArgumentParser instance to add subcommands to

        """
        subparsers = parser.add_subparsers(dest="command", help="Available commands")

        self._add_downloads_command(subparsers)
        self._add_roadmap_command(subparsers)
        self._add_config_command(subparsers)

    def _add_downloads_command(self, subparsers) -> None:
        """Add downloads command parser.

        Args:
            subparsers: The subparsers object to add the downloads command to

        """
        downloads_parser = subparsers.add_parser(
            "downloads",
            help="Show the current release and its downloads",
            epilog="""
Examples:
  %(prog)s                    # Latest stable release
  %(prog)s --prereleases      # Newest release, pre-releases included
  %(prog)s --prereleases 0    # Override a config that enables them
            """,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        downloads_parser.add_argument(
            "--prereleases",
            nargs="?",
            const="true",
            default=None,
            metavar="VALUE",
            help=(
                "Include pre-releases (\"1\" or \"true\" enable, anything else "
                "disables; default from config: "
                f"{str(self.global_config['include_prereleases']).lower()})"
            ),
        )
        downloads_parser.add_argument(
            "--json", action="store_true", help="Print the result as JSON"
        )

    def _add_roadmap_command(self, subparsers) -> None:
        """Add roadmap command parser.

        Args:
            subparsers: The subparsers object to add the roadmap command to

        """
        roadmap_parser = subparsers.add_parser(
            "roadmap", help="Show what the next release will contain"
        )
        roadmap_parser.add_argument(
            "--all",
            action="store_true",
            help="Show every milestone instead of only the next one",
        )
        roadmap_parser.add_argument(
            "--json", action="store_true", help="Print the result as JSON"
        )

    def _add_config_command(self, subparsers) -> None:
        """Add config command parser.

        Args:
            subparsers: The subparsers object to add the config command to

        """
        config_parser = subparsers.add_parser("config", help="Manage configuration")
        config_group = config_parser.add_mutually_exclusive_group(required=True)
        config_group.add_argument(
            "--show", action="store_true", help="Show current configuration"
        )
        config_group.add_argument(
            "--init",
            action="store_true",
            help="Write the default settings file",
        )
