"""CLI runner for mira-site.

This module orchestrates the execution of CLI commands by routing
parsed arguments to the appropriate command handlers.
"""

import sys
from argparse import Namespace
from collections.abc import Sequence

from .. import __version__
from ..commands.config import ConfigHandler
from ..commands.downloads import DownloadsHandler
from ..commands.roadmap import RoadmapHandler
from ..config import ConfigManager
from ..constants import LOG_FILE_NAME
from ..exceptions import ConfigurationError
from ..logger import get_logger
from .parser import CLIParser

logger = get_logger(__name__)


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(self, config_manager: ConfigManager | None = None) -> None:
        """Initialize CLI runner with shared dependencies.

        Args:
            config_manager: Optional config manager, defaults to ~/.config

        """
        self.config_manager = config_manager or ConfigManager()
        self.global_config = self.config_manager.load_global_config()

        self._setup_file_logging()
        self._init_command_handlers()

    def _setup_file_logging(self) -> None:
        """Setup file logging based on global configuration."""
        app_logger = get_logger()
        log_file = self.global_config["directory"]["logs"] / LOG_FILE_NAME
        try:
            app_logger.setup_file_logging(log_file, self.global_config["log_level"])
        except ConfigurationError as e:
            # Commands still work without a log file
            app_logger.warning("File logging disabled: %s", e)
        app_logger.set_console_level(self.global_config["console_log_level"])

    def _init_command_handlers(self) -> None:
        """Initialize all command handlers with shared dependencies."""
        self.command_handlers = {
            "downloads": DownloadsHandler(self.config_manager),
            "roadmap": RoadmapHandler(self.config_manager),
            "config": ConfigHandler(self.config_manager),
        }

    async def run(self, argv: Sequence[str] | None = None) -> None:
        """Run the CLI application.

        Args:
            argv: Arguments to parse; defaults to ``sys.argv[1:]``

        """
        try:
            parser = CLIParser(self.global_config)
            args = parser.parse_args(argv)

            if getattr(args, "version", False):
                print(__version__)
                return

            if not args.command:
                print("❌ No command specified. Use --help for usage information.")
                sys.exit(1)

            await self._execute_command(args)

        except KeyboardInterrupt:
            print("\n⏹️  Operation cancelled by user")
            sys.exit(1)
        except Exception as e:
            logger.error("Unexpected error: %s", e)
            print(f"❌ Unexpected error: {e}")
            sys.exit(1)

    async def _execute_command(self, args: Namespace) -> None:
        """Execute the specified command with appropriate handler."""
        command = args.command

        if command not in self.command_handlers:
            print(f"❌ Unknown command: {command}")
            sys.exit(1)

        logger.debug("Running command %s", command)
        await self.command_handlers[command].execute(args)
