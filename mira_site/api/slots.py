"""Download slot assignment.

This module turns a release's full asset list into the fixed set of named
download slots shown to users, and holds the related presentation rules:
which release to show, and how to order slots for the visitor's platform.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from mira_site.api.assets import DownloadSlot, Release, ReleaseAsset
from mira_site.api.classifier import classify, is_downloadable_asset
from mira_site.api.selector import choose_best
from mira_site.constants import (
    TAG_ARCH_ARM64,
    TAG_ARCH_UNKNOWN,
    TAG_ARCH_X64,
    TAG_INSTALLER,
    TAG_LINUX,
    TAG_MAC,
    TAG_PORTABLE,
    TAG_WINDOWS,
    PlatformTag,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class SlotDefinition:
    """How one download slot finds its candidates.

    Attributes:
        key: Stable identifier of the slot in the assignment result
        label: Human readable slot name
        platform_tag: Platform the slot targets
        required_tags: Classification tags a candidate must carry
        terms: Priority-ordered ranking terms
        fallback_tags: Tags of the pool used when the primary pool is empty
        extension: Exact filename extension a candidate must end with

    """

    key: str
    label: str
    platform_tag: PlatformTag
    required_tags: frozenset[str]
    terms: tuple[str, ...]
    fallback_tags: frozenset[str] | None = None
    extension: str | None = None


_INSTALLER_TERMS = ("setup", ".msi", ".exe")
_WINDOWS_PORTABLE_TERMS = ("portable", ".exe", ".zip")
_MAC_INSTALLER_TERMS = ("dmg", "pkg")
_MAC_PORTABLE_TERMS = ("portable", ".zip", ".tar.gz")

_MAC_UNKNOWN_INSTALLER = frozenset({TAG_MAC, TAG_ARCH_UNKNOWN, TAG_INSTALLER})
_MAC_UNKNOWN_PORTABLE = frozenset({TAG_MAC, TAG_ARCH_UNKNOWN, TAG_PORTABLE})

SLOT_DEFINITIONS: tuple[SlotDefinition, ...] = (
    SlotDefinition(
        key="windows_installer",
        label="Windows Installer",
        platform_tag="windows",
        required_tags=frozenset({TAG_WINDOWS, TAG_INSTALLER}),
        terms=_INSTALLER_TERMS,
    ),
    SlotDefinition(
        key="windows_portable",
        label="Windows Portable",
        platform_tag="windows",
        required_tags=frozenset({TAG_WINDOWS, TAG_PORTABLE}),
        terms=_WINDOWS_PORTABLE_TERMS,
    ),
    SlotDefinition(
        key="mac_arm64_installer",
        label="macOS (Apple Silicon) Installer",
        platform_tag="mac-arm64",
        required_tags=frozenset({TAG_MAC, TAG_ARCH_ARM64, TAG_INSTALLER}),
        terms=_MAC_INSTALLER_TERMS,
        fallback_tags=_MAC_UNKNOWN_INSTALLER,
    ),
    SlotDefinition(
        key="mac_arm64_portable",
        label="macOS (Apple Silicon) Portable",
        platform_tag="mac-arm64",
        required_tags=frozenset({TAG_MAC, TAG_ARCH_ARM64, TAG_PORTABLE}),
        terms=_MAC_PORTABLE_TERMS,
        fallback_tags=_MAC_UNKNOWN_PORTABLE,
    ),
    SlotDefinition(
        key="mac_x64_installer",
        label="macOS (Intel) Installer",
        platform_tag="mac-x64",
        required_tags=frozenset({TAG_MAC, TAG_ARCH_X64, TAG_INSTALLER}),
        terms=_MAC_INSTALLER_TERMS,
        fallback_tags=_MAC_UNKNOWN_INSTALLER,
    ),
    SlotDefinition(
        key="mac_x64_portable",
        label="macOS (Intel) Portable",
        platform_tag="mac-x64",
        required_tags=frozenset({TAG_MAC, TAG_ARCH_X64, TAG_PORTABLE}),
        terms=_MAC_PORTABLE_TERMS,
        fallback_tags=_MAC_UNKNOWN_PORTABLE,
    ),
    SlotDefinition(
        key="linux_appimage",
        label="Linux AppImage",
        platform_tag="linux",
        required_tags=frozenset({TAG_LINUX}),
        terms=(".appimage",),
        extension=".appimage",
    ),
    SlotDefinition(
        key="linux_deb",
        label="Linux .deb",
        platform_tag="linux",
        required_tags=frozenset({TAG_LINUX}),
        terms=(".deb",),
        extension=".deb",
    ),
    SlotDefinition(
        key="linux_rpm",
        label="Linux .rpm",
        platform_tag="linux",
        required_tags=frozenset({TAG_LINUX}),
        terms=(".rpm",),
        extension=".rpm",
    ),
)

SLOT_KEYS: tuple[str, ...] = tuple(slot.key for slot in SLOT_DEFINITIONS)


def _pool(
    classified: Sequence[tuple[ReleaseAsset, frozenset[str]]],
    required_tags: frozenset[str],
    extension: str | None = None,
) -> list[ReleaseAsset]:
    return [
        asset
        for asset, tags in classified
        if required_tags <= tags
        and (extension is None or asset.name.lower().endswith(extension))
    ]


def assign_slots(assets: Iterable[ReleaseAsset]) -> dict[str, DownloadSlot]:
    """Assign the best artifact of a release to every download slot.

    Mac slots fall back to assets without an architecture marker when no
    asset names their architecture; they never borrow the other
    architecture's builds. Every slot key is present in the result; slots
    without a candidate hold ``asset=None``.

    Args:
        assets: All assets attached to a release

    Returns:
        Mapping of slot key to DownloadSlot, in presentation order

    """
    classified = [
        (asset, classify(asset.name))
        for asset in assets
        if is_downloadable_asset(asset.name)
    ]

    slots: dict[str, DownloadSlot] = {}
    for definition in SLOT_DEFINITIONS:
        candidates = _pool(classified, definition.required_tags, definition.extension)
        if not candidates and definition.fallback_tags is not None:
            candidates = _pool(classified, definition.fallback_tags)
            if candidates:
                logger.debug(
                    "%s: no architecture-specific build, using %d generic candidate(s)",
                    definition.key,
                    len(candidates),
                )

        best = choose_best(candidates, definition.terms)
        slots[definition.key] = DownloadSlot(
            label=definition.label,
            platform_tag=definition.platform_tag,
            asset=best,
        )

    logger.debug(
        "Assigned %d of %d slots from %d downloadable assets",
        sum(1 for slot in slots.values() if slot.available),
        len(slots),
        len(classified),
    )
    return slots


def parse_include_prereleases(value: str | Sequence[str] | None) -> bool:
    """Interpret an "include pre-releases" flag from a query-style value.

    Accepts "1" or "true", either directly or as one of several values.
    """
    if value is None:
        return False
    if isinstance(value, str):
        return value in ("1", "true")
    return "1" in value or "true" in value


@dataclass(slots=True, frozen=True)
class ReleaseSelection:
    """Which release to present, and why.

    Attributes:
        release: Selected release, or None if there is nothing to show
        include_prereleases: Effective pre-release flag
        has_stable_release: Whether any non-prerelease release exists

    """

    release: Release | None
    include_prereleases: bool
    has_stable_release: bool


def select_release(
    releases: Sequence[Release], include_prereleases: bool
) -> ReleaseSelection:
    """Pick the release whose downloads are shown.

    ``releases`` is expected newest first, as returned by GitHub. Drafts are
    ignored. Pre-releases are included when asked for, or automatically
    when no stable release exists.
    """
    published = [release for release in releases if not release.draft]
    stable = [release for release in published if not release.prerelease]

    has_stable = bool(stable)
    effective = include_prereleases or not has_stable
    pool = published if effective else stable

    return ReleaseSelection(
        release=pool[0] if pool else None,
        include_prereleases=effective,
        has_stable_release=has_stable,
    )


def _platform_family(tag: str) -> str:
    return tag.split("-", 1)[0]


def is_slot_applicable(slot: DownloadSlot, host_tag: str | None) -> bool:
    """Check whether a slot targets the host platform.

    Every slot is applicable when the host is unknown.
    """
    if host_tag is None or host_tag == "other":
        return True
    return _platform_family(slot.platform_tag) == _platform_family(host_tag)


def order_slots_for_host(
    slots: Iterable[DownloadSlot], host_tag: str | None
) -> list[DownloadSlot]:
    """Order slots so the host platform's downloads come first.

    Exact platform matches (e.g. mac-arm64 on an Apple Silicon host) come
    first, then the rest of the same platform family, then everything else.
    The sort is stable.
    """
    ordered = list(slots)
    if host_tag is None or host_tag == "other":
        return ordered

    def relevance(slot: DownloadSlot) -> int:
        if slot.platform_tag == host_tag:
            return 0
        if is_slot_applicable(slot, host_tag):
            return 1
        return 2

    return sorted(ordered, key=relevance)
