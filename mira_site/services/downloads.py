"""Downloads service.

This module loads the release list from GitHub, picks the release to show,
and assigns its assets to download slots.
"""

from dataclasses import dataclass
from typing import Any

import aiohttp

from ..api.assets import DownloadSlot, Release
from ..api.slots import assign_slots, select_release
from ..exceptions import GitHubAPIError
from ..github_client import ReleaseAPIClient
from ..logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class DownloadsView:
    """Everything the downloads view needs.

    Attributes:
        release: Release being shown, or None when there is none
        slots: Slot assignment for that release, or None without a release
        include_prereleases: Effective pre-release flag
        has_stable_release: Whether a stable release exists at all

    """

    release: Release | None
    slots: dict[str, DownloadSlot] | None
    include_prereleases: bool
    has_stable_release: bool

    def to_dict(self) -> dict[str, Any]:
        """Convert view to a JSON-serializable dictionary."""
        return {
            "release": self.release.to_dict() if self.release else None,
            "slots": (
                {key: slot.to_dict() for key, slot in self.slots.items()}
                if self.slots is not None
                else None
            ),
            "include_prereleases": self.include_prereleases,
            "has_stable_release": self.has_stable_release,
        }


class DownloadsService:
    """Service for building the downloads view."""

    def __init__(self, client: ReleaseAPIClient) -> None:
        """Initialize downloads service.

        Args:
            client: GitHub client for the product repository

        """
        self.client = client

    async def fetch_releases(self) -> list[Release]:
        """Fetch releases, treating an unreachable API as "no releases"."""
        try:
            return await self.client.fetch_releases()
        except (GitHubAPIError, aiohttp.ClientError, TimeoutError) as e:
            logger.warning("Could not load releases: %s", e)
            return []

    async def load(self, include_prereleases: bool = False) -> DownloadsView:
        """Build the downloads view.

        Args:
            include_prereleases: Whether the user asked for pre-releases

        Returns:
            The downloads view

        """
        releases = await self.fetch_releases()
        selection = select_release(releases, include_prereleases)

        if selection.release is None:
            logger.info("No GitHub release is currently available")
            slots = None
        else:
            logger.info(
                "Showing release %s (%s)",
                selection.release.display_name,
                selection.release.tag_name,
            )
            slots = assign_slots(selection.release.assets)

        return DownloadsView(
            release=selection.release,
            slots=slots,
            include_prereleases=selection.include_prereleases,
            has_stable_release=selection.has_stable_release,
        )
