"""Small builders for release test data."""

from mira_site.api.assets import Release, ReleaseAsset


def make_asset(name: str, size_bytes: int = 1000) -> ReleaseAsset:
    """Build a ReleaseAsset with a download URL derived from its name."""
    return ReleaseAsset(
        name=name,
        download_url=f"https://example.com/download/{name}",
        size_bytes=size_bytes,
    )


def make_release(
    tag_name: str,
    prerelease: bool = False,
    draft: bool = False,
    assets: tuple[ReleaseAsset, ...] = (),
) -> Release:
    """Build a Release with sensible defaults."""
    return Release(
        tag_name=tag_name,
        name=f"Mira {tag_name}",
        html_url=f"https://github.com/FatalMistake02/mira/releases/tag/{tag_name}",
        published_at="2025-03-04T12:00:00Z",
        prerelease=prerelease,
        draft=draft,
        assets=assets,
    )
