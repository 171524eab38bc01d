"""Command handlers for mira-site CLI.

This module contains all command handler implementations that provide
the core functionality for each CLI command.
"""

from .base import BaseCommandHandler
from .config import ConfigHandler
from .downloads import DownloadsHandler
from .roadmap import RoadmapHandler

__all__ = [
    "BaseCommandHandler",
    "ConfigHandler",
    "DownloadsHandler",
    "RoadmapHandler",
]
