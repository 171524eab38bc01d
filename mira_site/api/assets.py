"""Release data models.

This module defines data structures for GitHub releases, their uploaded
assets, and the download slots built from them.
"""

from dataclasses import dataclass
from typing import Any

from mira_site.constants import PlatformTag


@dataclass(slots=True, frozen=True)
class ReleaseAsset:
    """One uploaded build artifact attached to a release.

    Attributes:
        name: Asset filename
        download_url: Direct download URL for the asset
        size_bytes: Asset size in bytes

    """

    name: str
    download_url: str = ""
    size_bytes: int = 0

    @classmethod
    def from_api_response(cls, asset_data: dict[str, Any]) -> "ReleaseAsset | None":
        """Create ReleaseAsset from GitHub API response data.

        Only ``name`` is required; a missing URL or size is tolerated.

        Args:
            asset_data: Raw asset data from GitHub API

        Returns:
            ReleaseAsset instance or None if the name is missing

        """
        name = asset_data.get("name")
        if not isinstance(name, str) or not name:
            return None

        try:
            size = int(asset_data.get("size") or 0)
        except (TypeError, ValueError):
            size = 0

        return cls(
            name=name,
            download_url=str(asset_data.get("browser_download_url") or ""),
            size_bytes=size,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert asset to a JSON-serializable dictionary."""
        return {
            "name": self.name,
            "download_url": self.download_url,
            "size_bytes": self.size_bytes,
        }


@dataclass(slots=True, frozen=True)
class Release:
    """Represents a GitHub release with its metadata and assets."""

    tag_name: str
    name: str
    html_url: str
    published_at: str
    prerelease: bool
    draft: bool
    assets: tuple[ReleaseAsset, ...]

    @classmethod
    def from_api_response(cls, api_data: dict[str, Any]) -> "Release":
        """Create Release from GitHub API response data.

        Args:
            api_data: Raw release data from GitHub API

        Returns:
            Release instance

        """
        assets = []
        for asset_data in api_data.get("assets") or []:
            if not isinstance(asset_data, dict):
                continue
            asset = ReleaseAsset.from_api_response(asset_data)
            if asset:
                assets.append(asset)

        return cls(
            tag_name=str(api_data.get("tag_name") or ""),
            name=str(api_data.get("name") or ""),
            html_url=str(api_data.get("html_url") or ""),
            published_at=str(api_data.get("published_at") or ""),
            prerelease=bool(api_data.get("prerelease", False)),
            draft=bool(api_data.get("draft", False)),
            assets=tuple(assets),
        )

    @property
    def display_name(self) -> str:
        """Human readable release name, falling back to the tag."""
        return self.name or self.tag_name or "Latest"

    def to_dict(self) -> dict[str, Any]:
        """Convert release to a JSON-serializable dictionary."""
        return {
            "tag_name": self.tag_name,
            "name": self.name,
            "html_url": self.html_url,
            "published_at": self.published_at,
            "prerelease": self.prerelease,
            "draft": self.draft,
            "assets": [asset.to_dict() for asset in self.assets],
        }


@dataclass(slots=True, frozen=True)
class DownloadSlot:
    """A named download offering, e.g. "Windows Installer".

    ``asset`` is None when the release has no artifact for the slot.
    """

    label: str
    platform_tag: PlatformTag
    asset: ReleaseAsset | None = None

    @property
    def available(self) -> bool:
        """Whether an artifact was assigned to this slot."""
        return self.asset is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert slot to a JSON-serializable dictionary."""
        return {
            "label": self.label,
            "platform_tag": self.platform_tag,
            "asset": self.asset.to_dict() if self.asset else None,
        }
