"""Services that fetch GitHub data and hand it to the core engines."""

from .downloads import DownloadsService, DownloadsView
from .roadmap import RoadmapService

__all__ = [
    "DownloadsService",
    "DownloadsView",
    "RoadmapService",
]
