"""Tests for ReleaseAPIClient."""

import base64
from unittest.mock import AsyncMock, MagicMock, patch

import aiohttp
import orjson
import pytest
import pytest_asyncio

from mira_site.config import NetworkConfig
from mira_site.exceptions import GitHubAPIError
from mira_site.github_client import ReleaseAPIClient
from mira_site.utils.version_utils import ParsedVersion

API = "https://api.github.com/repos/FatalMistake02/mira"


def make_response(status=200, body=b"", url="https://example.com"):
    """Mock aiohttp response usable as an async context manager."""
    response = AsyncMock()
    response.__aenter__.return_value = response
    response.status = status
    response.read = AsyncMock(return_value=body)
    response.url = url
    return response


def json_response(data, status=200):
    return make_response(status=status, body=orjson.dumps(data))


def route(mock_session, responses):
    """Serve responses by URL from a mock session."""

    def get(url, **kwargs):
        response = responses[url]
        if isinstance(response, Exception):
            raise response
        return response

    mock_session.get.side_effect = get


@pytest_asyncio.fixture
def mock_session():
    """Provide a mock aiohttp.ClientSession."""
    return MagicMock()


@pytest.fixture
def client(mock_session):
    """Client without retries so failures surface immediately."""
    return ReleaseAPIClient(
        owner="FatalMistake02",
        repo="mira",
        session=mock_session,
        network=NetworkConfig(retry_attempts=1, timeout_seconds=5),
    )


def release_data(tag, prerelease=False, draft=False):
    return {
        "tag_name": tag,
        "name": f"Mira {tag}",
        "html_url": f"https://github.com/FatalMistake02/mira/releases/tag/{tag}",
        "published_at": "2025-03-04T12:00:00Z",
        "prerelease": prerelease,
        "draft": draft,
        "assets": [],
    }


@pytest.mark.asyncio
async def test_fetch_releases_parses_and_drops_drafts(
    client, mock_session, release_api_data
):
    """Releases are parsed into models and drafts are skipped."""
    route(
        mock_session,
        {
            f"{API}/releases": json_response(
                [release_api_data, release_data("v2.0.0", draft=True)]
            )
        },
    )

    releases = await client.fetch_releases()

    assert [release.tag_name for release in releases] == ["v1.2.3"]
    assert [asset.name for asset in releases[0].assets] == [
        "Mira-Setup-1.2.3-x64.exe",
        "Mira-1.2.3-arm64.dmg",
        "Mira-1.2.3.AppImage",
        "latest.yml",
    ]
    assert releases[0].assets[0].size_bytes == 90000000


@pytest.mark.asyncio
async def test_fetch_releases_not_found(client, mock_session):
    """A missing repository has no releases."""
    route(mock_session, {f"{API}/releases": make_response(status=404)})
    assert await client.fetch_releases() == []


@pytest.mark.asyncio
async def test_fetch_releases_client_error_raises(client, mock_session):
    """Other 4xx responses fail without retrying."""
    route(mock_session, {f"{API}/releases": make_response(status=403)})

    with pytest.raises(GitHubAPIError) as exc_info:
        await client.fetch_releases()

    assert exc_info.value.status == 403
    assert mock_session.get.call_count == 1


@pytest.mark.asyncio
async def test_fetch_releases_invalid_json(client, mock_session):
    """A body that is not JSON is reported as an API error."""
    route(mock_session, {f"{API}/releases": make_response(body=b"<html>")})

    with pytest.raises(GitHubAPIError):
        await client.fetch_releases()


@pytest.mark.asyncio
async def test_fetch_retries_server_errors(mock_session):
    """Server errors are retried with backoff."""
    client = ReleaseAPIClient(
        "FatalMistake02",
        "mira",
        mock_session,
        network=NetworkConfig(retry_attempts=3, timeout_seconds=5),
    )
    mock_session.get.side_effect = [
        make_response(status=502),
        aiohttp.ClientConnectionError("reset"),
        json_response([release_data("v1.0.0")]),
    ]

    with patch(
        "mira_site.github_client.asyncio.sleep", new_callable=AsyncMock
    ) as mock_sleep:
        releases = await client.fetch_releases()

    assert [release.tag_name for release in releases] == ["v1.0.0"]
    assert mock_session.get.call_count == 3
    assert [call.args[0] for call in mock_sleep.await_args_list] == [2, 4]


@pytest.mark.asyncio
async def test_fetch_gives_up_after_retries(client, mock_session):
    """Persistent failures raise GitHubAPIError."""
    mock_session.get.side_effect = aiohttp.ClientConnectionError("offline")

    with pytest.raises(GitHubAPIError, match="failed after 1 attempts"):
        await client.fetch_releases()


@pytest.mark.asyncio
async def test_token_sent_only_to_api(mock_session):
    """The API token goes to api.github.com only."""
    client = ReleaseAPIClient(
        "FatalMistake02",
        "mira",
        mock_session,
        network=NetworkConfig(retry_attempts=1, timeout_seconds=5),
        token="secret",
    )
    route(
        mock_session,
        {
            f"{API}/contents/ROADMAP.md?ref=main": make_response(status=404),
            "https://raw.githubusercontent.com/FatalMistake02/mira/main/ROADMAP.md": (
                make_response(body=b"## v1.0.0\n")
            ),
        },
    )

    await client.fetch_roadmap_markdown("ROADMAP.md", "main")

    api_call, raw_call = mock_session.get.call_args_list
    assert api_call.kwargs["headers"]["Authorization"] == "Bearer secret"
    assert "Authorization" not in raw_call.kwargs["headers"]


@pytest.mark.asyncio
async def test_fetch_current_stable_version_from_latest(client, mock_session):
    """The latest release API is the first source."""
    route(
        mock_session,
        {f"{API}/releases/latest": json_response(release_data("v1.4.2"))},
    )

    assert await client.fetch_current_stable_version() == ParsedVersion(1, 4, 2)


@pytest.mark.asyncio
async def test_fetch_current_stable_version_from_release_list(client, mock_session):
    """Without a latest release, the first stable entry of the list is used."""
    route(
        mock_session,
        {
            f"{API}/releases/latest": make_response(status=404),
            f"{API}/releases?per_page=10": json_response(
                [release_data("v2.0.0-rc.1", prerelease=True), release_data("v1.9.0")]
            ),
        },
    )

    assert await client.fetch_current_stable_version() == ParsedVersion(1, 9, 0)


@pytest.mark.asyncio
async def test_fetch_current_stable_version_from_redirect(client, mock_session):
    """When the API refuses, the tag is read from the latest release page."""
    route(
        mock_session,
        {
            f"{API}/releases/latest": make_response(status=403),
            f"{API}/releases?per_page=10": make_response(status=403),
            "https://github.com/FatalMistake02/mira/releases/latest": make_response(
                url="https://github.com/FatalMistake02/mira/releases/tag/v1.3.0"
            ),
        },
    )

    assert await client.fetch_current_stable_version() == ParsedVersion(1, 3, 0)


@pytest.mark.asyncio
async def test_fetch_current_stable_version_unknown(client, mock_session):
    """No source with a version means the version is unknown."""
    route(
        mock_session,
        {
            f"{API}/releases/latest": make_response(status=404),
            f"{API}/releases?per_page=10": json_response([]),
            "https://github.com/FatalMistake02/mira/releases/latest": make_response(
                url="https://github.com/FatalMistake02/mira/releases"
            ),
        },
    )

    assert await client.fetch_current_stable_version() is None


@pytest.mark.asyncio
async def test_fetch_roadmap_from_contents_api(client, mock_session):
    """Base64 contents are decoded and attributed to the blob URL."""
    encoded = base64.encodebytes(b"## v1.0.0\n- [ ] Launch\n").decode()
    route(
        mock_session,
        {
            f"{API}/contents/ROADMAP.md?ref=main": json_response(
                {"encoding": "base64", "content": encoded}
            )
        },
    )

    source = await client.fetch_roadmap_markdown("ROADMAP.md", "main")

    assert source.markdown == "## v1.0.0\n- [ ] Launch\n"
    assert (
        source.source_url
        == "https://github.com/FatalMistake02/mira/blob/main/ROADMAP.md"
    )


@pytest.mark.asyncio
async def test_fetch_roadmap_falls_back_to_raw(client, mock_session):
    """A refused contents request falls through to raw hosting."""
    raw_url = "https://raw.githubusercontent.com/FatalMistake02/mira/main/ROADMAP.md"
    route(
        mock_session,
        {
            f"{API}/contents/ROADMAP.md?ref=main": make_response(status=403),
            raw_url: make_response(body=b"## v2.0.0\n"),
        },
    )

    source = await client.fetch_roadmap_markdown("ROADMAP.md", "main")

    assert source.markdown == "## v2.0.0\n"
    assert source.source_url == raw_url


@pytest.mark.asyncio
async def test_fetch_roadmap_blank_document(client, mock_session):
    """A blank roadmap counts as missing."""
    route(
        mock_session,
        {
            f"{API}/contents/ROADMAP.md?ref=main": make_response(status=404),
            "https://raw.githubusercontent.com/FatalMistake02/mira/main/ROADMAP.md": (
                make_response(body=b"  \n")
            ),
        },
    )

    assert await client.fetch_roadmap_markdown("ROADMAP.md", "main") is None
