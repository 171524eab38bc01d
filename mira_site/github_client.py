"""GitHub API client for fetching releases and the roadmap document.

This module handles communication with GitHub: the releases API, the
repository contents API, raw file hosting, and the HTML "latest release"
redirect. It returns already-parsed release models and raw markdown; all
decisions about them are made by the pure engines in ``mira_site.api`` and
``mira_site.roadmap``.
"""

import asyncio
import base64
import binascii
import re
from dataclasses import dataclass
from typing import Any

import aiohttp
import orjson

from mira_site.api.assets import Release
from mira_site.config import NetworkConfig
from mira_site.constants import (
    DEFAULT_RETRY_ATTEMPTS,
    DEFAULT_TIMEOUT_SECONDS,
    GITHUB_API_BASE,
    GITHUB_JSON_ACCEPT,
    GITHUB_RAW_BASE,
    GITHUB_WEB_BASE,
    HTTP_CLIENT_ERROR_MIN,
    HTTP_NOT_FOUND,
    HTTP_SERVER_ERROR_MIN,
    STABLE_FALLBACK_PAGE_SIZE,
    USER_AGENT,
)
from mira_site.exceptions import GitHubAPIError
from mira_site.logger import get_logger
from mira_site.utils.version_utils import ParsedVersion, parse_version

logger = get_logger(__name__)

_TAG_URL_RE = re.compile(r"/tag/([^/?#]+)", re.IGNORECASE)


@dataclass(slots=True, frozen=True)
class RoadmapSource:
    """Roadmap markdown and the URL it should be attributed to."""

    markdown: str
    source_url: str


@dataclass(slots=True, frozen=True)
class FetchedResponse:
    """Body and final URL of a successful request."""

    body: bytes
    url: str


class ReleaseAPIClient:
    """Handles direct communication with GitHub for release and roadmap data."""

    def __init__(
        self,
        owner: str,
        repo: str,
        session: aiohttp.ClientSession,
        network: NetworkConfig | None = None,
        token: str | None = None,
    ) -> None:
        """Initialize the API client.

        Args:
            owner: Repository owner
            repo: Repository name
            session: aiohttp session for making requests
            network: Retry and timeout settings
            token: Optional GitHub API token

        """
        self.owner = owner
        self.repo = repo
        self.session = session
        self.network = network or NetworkConfig(
            retry_attempts=DEFAULT_RETRY_ATTEMPTS,
            timeout_seconds=DEFAULT_TIMEOUT_SECONDS,
        )
        self.token = token

    @property
    def api_repo_url(self) -> str:
        return f"{GITHUB_API_BASE}/repos/{self.owner}/{self.repo}"

    @property
    def web_repo_url(self) -> str:
        return f"{GITHUB_WEB_BASE}/{self.owner}/{self.repo}"

    def _headers(self, accept: str, with_auth: bool) -> dict[str, str]:
        headers = {"Accept": accept, "User-Agent": USER_AGENT}
        if with_auth and self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def _fetch(
        self,
        url: str,
        accept: str = GITHUB_JSON_ACCEPT,
        with_auth: bool = True,
    ) -> FetchedResponse | None:
        """Fetch a URL with retries.

        Transport errors and server errors are retried with exponential
        backoff; 404 means "not there" and returns None; any other client
        error fails immediately.

        Args:
            url: URL to fetch
            accept: Accept header value
            with_auth: Whether to send the API token (only to api.github.com)

        Returns:
            Response body and final URL, or None on 404

        Raises:
            GitHubAPIError: If the request fails for good

        """
        retry_attempts = max(1, self.network["retry_attempts"])
        timeout_seconds = self.network["timeout_seconds"]
        timeout = aiohttp.ClientTimeout(
            total=timeout_seconds * 3,
            sock_read=timeout_seconds * 2,
            sock_connect=timeout_seconds,
        )
        headers = self._headers(accept, with_auth)
        error: Exception | None = None

        for attempt in range(1, retry_attempts + 1):
            try:
                async with self.session.get(
                    url, headers=headers, timeout=timeout
                ) as response:
                    if response.status == HTTP_NOT_FOUND:
                        logger.debug("Not found: %s", url)
                        return None

                    if (
                        HTTP_CLIENT_ERROR_MIN
                        <= response.status
                        < HTTP_SERVER_ERROR_MIN
                    ):
                        raise GitHubAPIError(
                            "request rejected", url=url, status=response.status
                        )

                    if response.status >= HTTP_SERVER_ERROR_MIN:
                        error = GitHubAPIError(
                            "server error", url=url, status=response.status
                        )
                    else:
                        body = await response.read()
                        return FetchedResponse(body=body, url=str(response.url))

            except (aiohttp.ClientError, TimeoutError) as e:
                error = e

            logger.warning(
                "Attempt %d/%d for %s failed: %s",
                attempt,
                retry_attempts,
                url,
                error,
            )
            if attempt < retry_attempts:
                await asyncio.sleep(2**attempt)

        logger.error("Request failed after %d attempts: %s", retry_attempts, url)
        raise GitHubAPIError(
            f"failed after {retry_attempts} attempts: {error}", url=url
        )

    async def _fetch_json(self, url: str) -> Any | None:
        fetched = await self._fetch(url)
        if fetched is None:
            return None
        try:
            return orjson.loads(fetched.body)
        except orjson.JSONDecodeError as e:
            raise GitHubAPIError(f"invalid JSON response: {e}", url=url) from e

    async def fetch_releases(self, per_page: int | None = None) -> list[Release]:
        """Fetch published releases, newest first.

        Args:
            per_page: Optional page size passed to the API

        Returns:
            Releases without drafts; empty if the repository has none

        """
        url = f"{self.api_repo_url}/releases"
        if per_page is not None:
            url = f"{url}?per_page={per_page}"

        data = await self._fetch_json(url)
        if not isinstance(data, list):
            if data is not None:
                logger.warning(
                    "Unexpected API response type for releases: %s", type(data)
                )
            return []

        releases = [
            Release.from_api_response(item) for item in data if isinstance(item, dict)
        ]
        return [release for release in releases if not release.draft]

    async def fetch_latest_release(self) -> Release | None:
        """Fetch the release GitHub marks as latest.

        Returns:
            Release instance or None if the repository has no stable release

        """
        data = await self._fetch_json(f"{self.api_repo_url}/releases/latest")
        if not isinstance(data, dict):
            return None
        return Release.from_api_response(data)

    async def _latest_api_version(self) -> ParsedVersion | None:
        latest = await self.fetch_latest_release()
        if latest is None:
            return None
        version = parse_version(latest.tag_name)
        if version is None:
            logger.debug("Latest release tag %r is not a version", latest.tag_name)
        return version

    async def _release_list_version(self) -> ParsedVersion | None:
        releases = await self.fetch_releases(per_page=STABLE_FALLBACK_PAGE_SIZE)
        stable = next((release for release in releases if not release.prerelease), None)
        return parse_version(stable.tag_name) if stable else None

    async def _latest_page_version(self) -> ParsedVersion | None:
        page = await self._fetch(
            f"{self.web_repo_url}/releases/latest",
            accept="text/html",
            with_auth=False,
        )
        if page is None:
            return None
        tag_match = _TAG_URL_RE.search(page.url)
        return parse_version(tag_match.group(1)) if tag_match else None

    async def fetch_current_stable_version(self) -> ParsedVersion | None:
        """Determine the version of the newest stable release.

        Sources are tried in order until one yields a parseable tag: the
        "latest release" API, the first stable entry of the release list,
        and finally the tag in the redirect target of the public
        ``/releases/latest`` page. A source GitHub refuses to serve (e.g.
        when rate limited) moves on to the next one.

        Returns:
            Parsed version, or None if no source produced one

        Raises:
            GitHubAPIError: If the last source fails

        """
        for source in (self._latest_api_version, self._release_list_version):
            try:
                version = await source()
            except GitHubAPIError as e:
                logger.warning("Stable version lookup failed, trying next source: %s", e)
                continue
            if version is not None:
                return version

        version = await self._latest_page_version()
        if version is None:
            logger.info("Could not determine the current stable version")
        return version

    async def fetch_roadmap_markdown(
        self, path: str, ref: str
    ) -> RoadmapSource | None:
        """Fetch the roadmap document.

        The contents API is tried first, then raw file hosting. Blank
        documents are treated as missing.

        Args:
            path: File path inside the repository
            ref: Branch, tag or commit to read from

        Returns:
            Markdown and source URL, or None if no document was found

        """
        contents_url = f"{self.api_repo_url}/contents/{path}?ref={ref}"
        try:
            data = await self._fetch_json(contents_url)
        except GitHubAPIError as e:
            logger.warning("Contents API unavailable, trying raw file: %s", e)
            data = None

        if isinstance(data, dict):
            markdown = self._decode_contents(data)
            if markdown and markdown.strip():
                return RoadmapSource(
                    markdown=markdown,
                    source_url=f"{self.web_repo_url}/blob/{ref}/{path}",
                )

        raw_url = f"{GITHUB_RAW_BASE}/{self.owner}/{self.repo}/{ref}/{path}"
        fetched = await self._fetch(raw_url, accept="text/plain", with_auth=False)
        if fetched is None:
            return None

        markdown = fetched.body.decode("utf-8", errors="replace")
        if not markdown.strip():
            return None
        return RoadmapSource(markdown=markdown, source_url=raw_url)

    @staticmethod
    def _decode_contents(data: dict[str, Any]) -> str | None:
        """Decode a contents API payload.

        Returns:
            Decoded text, or None if the payload is not base64 text

        """
        content = data.get("content")
        if data.get("encoding") != "base64" or not isinstance(content, str):
            return None
        try:
            return base64.b64decode(content.replace("\n", "")).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            logger.warning("Could not decode roadmap contents: %s", e)
            return None
