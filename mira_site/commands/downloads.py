"""Downloads command handler for mira-site CLI."""

from argparse import Namespace

import aiohttp

from ..api.slots import parse_include_prereleases
from ..logger import get_logger
from ..services.downloads import DownloadsService
from ..utils.arch_utils import detect_host_platform
from ..utils.displays import display_downloads
from .base import BaseCommandHandler

logger = get_logger(__name__)


class DownloadsHandler(BaseCommandHandler):
    """Handler for the downloads command."""

    def _wants_prereleases(self, args: Namespace) -> bool:
        """Combine the command-line flag with the configured default."""
        value = getattr(args, "prereleases", None)
        if value is None:
            return self.global_config["include_prereleases"]
        return parse_include_prereleases(value)

    async def execute(self, args: Namespace) -> None:
        """Execute the downloads command."""
        include_prereleases = self._wants_prereleases(args)

        async with aiohttp.ClientSession() as session:
            service = DownloadsService(self._create_client(session))
            view = await service.load(include_prereleases)

        if args.json:
            self._print_json(view.to_dict())
            return

        display_downloads(view, detect_host_platform())
