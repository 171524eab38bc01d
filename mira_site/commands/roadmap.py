"""Roadmap command handler for mira-site CLI."""

from argparse import Namespace

import aiohttp

from ..logger import get_logger
from ..services.roadmap import RoadmapService
from ..utils.displays import display_roadmap, display_upcoming_plan
from .base import BaseCommandHandler

logger = get_logger(__name__)


class RoadmapHandler(BaseCommandHandler):
    """Handler for the roadmap command."""

    async def execute(self, args: Namespace) -> None:
        """Execute the roadmap command."""
        github = self.global_config["github"]

        async with aiohttp.ClientSession() as session:
            service = RoadmapService(
                self._create_client(session),
                roadmap_path=github["roadmap_path"],
                roadmap_ref=github["roadmap_ref"],
            )
            if args.all:
                plan = await service.load_plan()
                upcoming = None
            else:
                plan = None
                upcoming = await service.load()

        if args.all:
            if args.json:
                self._print_json(plan.to_dict() if plan else None)
            else:
                display_roadmap(plan)
            return

        if args.json:
            self._print_json(upcoming.to_dict() if upcoming else None)
        else:
            display_upcoming_plan(upcoming)
