"""Base command handler for mira-site CLI commands.

This module provides the abstract base class that all command handlers inherit from,
ensuring consistent interface and shared functionality across commands.
"""

import sys
from abc import ABC, abstractmethod
from argparse import Namespace
from typing import Any

import aiohttp
import orjson

from ..config import ConfigManager
from ..github_client import ReleaseAPIClient
from ..logger import get_logger

logger = get_logger(__name__)


class BaseCommandHandler(ABC):
    """Abstract base class for all command handlers.

    This class provides common functionality and enforces a consistent
    interface for all command implementations.
    """

    def __init__(self, config_manager: ConfigManager) -> None:
        """Initialize the command handler with shared dependencies.

        Args:
            config_manager: Configuration management instance

        """
        self.config_manager = config_manager
        self.global_config = config_manager.load_global_config()

    @abstractmethod
    async def execute(self, args: Namespace) -> None:
        """Execute the command with the given arguments.

        Args:
            args: Parsed command-line arguments

        This method must be implemented by all concrete command handlers.

        """

    def _create_client(self, session: aiohttp.ClientSession) -> ReleaseAPIClient:
        """Create a GitHub client for the configured repository."""
        github = self.global_config["github"]
        return ReleaseAPIClient(
            owner=github["owner"],
            repo=github["repo"],
            session=session,
            network=self.global_config["network"],
            token=self.config_manager.get_github_token(),
        )

    @staticmethod
    def _print_json(data: Any) -> None:
        """Write ``data`` to stdout as indented JSON."""
        sys.stdout.write(orjson.dumps(data, option=orjson.OPT_INDENT_2).decode())
        sys.stdout.write("\n")
