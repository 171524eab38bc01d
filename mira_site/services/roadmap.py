"""Roadmap service.

This module loads ROADMAP.md and the current stable version from GitHub and
resolves what the next release will contain.
"""

import aiohttp

from ..exceptions import GitHubAPIError
from ..github_client import ReleaseAPIClient
from ..logger import get_logger
from ..roadmap.models import RoadmapPlan, UpcomingReleasePlan
from ..roadmap.parser import build_roadmap_plan
from ..roadmap.resolver import resolve_upcoming_plan

logger = get_logger(__name__)


class RoadmapService:
    """Service for building the roadmap views."""

    def __init__(
        self, client: ReleaseAPIClient, roadmap_path: str, roadmap_ref: str
    ) -> None:
        """Initialize roadmap service.

        Args:
            client: GitHub client for the product repository
            roadmap_path: Path of the roadmap file in the repository
            roadmap_ref: Branch or tag the roadmap is read from

        """
        self.client = client
        self.roadmap_path = roadmap_path
        self.roadmap_ref = roadmap_ref

    async def load_plan(self) -> RoadmapPlan | None:
        """Fetch and parse the roadmap document.

        Returns:
            Version-ordered plan, or None if the document could not be loaded

        """
        try:
            source = await self.client.fetch_roadmap_markdown(
                self.roadmap_path, self.roadmap_ref
            )
        except (GitHubAPIError, aiohttp.ClientError, TimeoutError) as e:
            logger.warning("Could not load roadmap: %s", e)
            return None

        if source is None:
            logger.info("No roadmap document found at %s", self.roadmap_path)
            return None

        return build_roadmap_plan(source.markdown, source_locator=source.source_url)

    async def load(self) -> UpcomingReleasePlan | None:
        """Resolve the plan for the next release.

        Returns:
            Upcoming release plan, or None when no roadmap is available

        """
        plan = await self.load_plan()
        if plan is None:
            return None

        try:
            current_version = await self.client.fetch_current_stable_version()
        except (GitHubAPIError, aiohttp.ClientError, TimeoutError) as e:
            logger.warning("Could not determine current version: %s", e)
            current_version = None

        return resolve_upcoming_plan(plan, current_version)
