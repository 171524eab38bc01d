"""Config command handler for mira-site CLI.

This module handles configuration management operations, including
displaying the effective configuration and writing the default file.
"""

from argparse import Namespace

from ..logger import get_logger
from .base import BaseCommandHandler

logger = get_logger(__name__)


class ConfigHandler(BaseCommandHandler):
    """Handler for config command operations."""

    async def execute(self, args: Namespace) -> None:
        """Execute the config command."""
        if args.show:
            await self._show_config()
        elif args.init:
            await self._init_config()

    async def _show_config(self) -> None:
        """Display current configuration."""
        github = self.global_config["github"]
        network = self.global_config["network"]
        token = self.config_manager.get_github_token()

        print("📋 Current Configuration:")
        print(f"  Settings File: {self.config_manager.settings_file}")
        print(f"  Config Version: {self.global_config['config_version']}")
        print(f"  Log Level: {self.global_config['log_level']}")
        print(f"  Console Log Level: {self.global_config['console_log_level']}")
        print(
            "  Include Pre-releases: "
            f"{str(self.global_config['include_prereleases']).lower()}"
        )
        print(f"  Repository: {github['owner']}/{github['repo']}")
        print(f"  Roadmap: {github['roadmap_path']} @ {github['roadmap_ref']}")
        print(f"  Retry Attempts: {network['retry_attempts']}")
        print(f"  Timeout: {network['timeout_seconds']}s")
        print(f"  Log Dir: {self.global_config['directory']['logs']}")
        print(f"  GitHub Token: {'set' if token else 'not set'}")

    async def _init_config(self) -> None:
        """Write the effective configuration to the settings file."""
        settings_file = self.config_manager.settings_file
        if settings_file.exists():
            print(f"ℹ️  Settings file already exists: {settings_file}")
            return

        self.config_manager.save_global_config(self.global_config)
        logger.info("Wrote default settings to %s", settings_file)
        print(f"✅ Settings written to {settings_file}")
