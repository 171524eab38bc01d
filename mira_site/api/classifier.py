"""Release asset name classification.

Pure predicates that categorize an artifact filename by platform,
packaging type and (for macOS) CPU architecture, from its name alone.
All matching is case-insensitive. Tags are independent: a name may carry
several platform or packaging tags at once.
"""

import re

from mira_site.constants import (
    APPLE_SILICON_MARKERS,
    DOWNLOADABLE_EXTENSIONS,
    INSTALLER_EXTENSIONS,
    LINUX_EXTENSIONS,
    LINUX_MARKERS,
    MAC_EXTENSIONS,
    MAC_MARKERS,
    PORTABLE_EXTENSIONS,
    TAG_ARCH_ARM64,
    TAG_ARCH_UNKNOWN,
    TAG_ARCH_X64,
    TAG_INSTALLER,
    TAG_LINUX,
    TAG_MAC,
    TAG_PORTABLE,
    TAG_WINDOWS,
    WINDOWS_EXTENSIONS,
    WINDOWS_MARKERS,
    MacArchitecture,
)

# Whole-word matching keeps e.g. "x64" from matching inside a longer token
_ARM64_RE = re.compile(r"\b(arm64|aarch64)\b", re.ASCII)
_X64_RE = re.compile(r"\b(x64|x86_64|amd64)\b", re.ASCII)
_INTEL_RE = re.compile(r"\bintel\b", re.ASCII)

_ARCH_TAGS: dict[MacArchitecture, str] = {
    "arm64": TAG_ARCH_ARM64,
    "x64": TAG_ARCH_X64,
    "unknown": TAG_ARCH_UNKNOWN,
}


def _contains_any(name: str, markers: tuple[str, ...]) -> bool:
    return any(marker in name for marker in markers)


def is_downloadable_asset(name: str) -> bool:
    """Check whether an asset is a user-facing download at all.

    Checksums, signatures, update manifests and the like are excluded.
    """
    return name.lower().endswith(DOWNLOADABLE_EXTENSIONS)


def is_windows_asset(name: str) -> bool:
    """Check if the asset targets Windows."""
    lower = name.lower()
    return _contains_any(lower, WINDOWS_MARKERS) or lower.endswith(
        WINDOWS_EXTENSIONS
    )


def is_mac_asset(name: str) -> bool:
    """Check if the asset targets macOS."""
    lower = name.lower()
    return _contains_any(lower, MAC_MARKERS) or lower.endswith(MAC_EXTENSIONS)


def is_linux_asset(name: str) -> bool:
    """Check if the asset targets Linux."""
    lower = name.lower()
    return _contains_any(lower, LINUX_MARKERS) or lower.endswith(
        LINUX_EXTENSIONS
    )


def is_installer_asset(name: str) -> bool:
    """Check if the asset is an installer (setup program or disk image)."""
    lower = name.lower()
    return "setup" in lower or lower.endswith(INSTALLER_EXTENSIONS)


def is_portable_asset(name: str) -> bool:
    """Check if the asset runs without installation.

    A bare ``.exe`` is portable unless its name says "setup".
    """
    lower = name.lower()
    return (
        "portable" in lower
        or lower.endswith(PORTABLE_EXTENSIONS)
        or (lower.endswith(".exe") and "setup" not in lower)
    )


def get_mac_architecture(name: str) -> MacArchitecture:
    """Determine the CPU architecture a macOS asset was built for.

    Args:
        name: Asset filename

    Returns:
        "arm64", "x64", or "unknown" when the name carries no marker

    Examples:
        >>> get_mac_architecture("Mira-1.0.0-arm64.dmg")
        'arm64'
        >>> get_mac_architecture("Mira-intel.zip")
        'x64'
        >>> get_mac_architecture("Mira.dmg")
        'unknown'

    """
    lower = name.lower()

    if _ARM64_RE.search(lower) or _contains_any(lower, APPLE_SILICON_MARKERS):
        return "arm64"

    if _X64_RE.search(lower) or _INTEL_RE.search(lower):
        return "x64"

    return "unknown"


def classify(name: str) -> frozenset[str]:
    """Compute every classification tag that applies to an asset name.

    Architecture tags are only assigned to macOS assets.

    Args:
        name: Asset filename

    Returns:
        Set of tags drawn from windows, mac, linux, installer, portable,
        arch-arm64, arch-x64 and arch-unknown

    """
    tags: set[str] = set()

    if is_windows_asset(name):
        tags.add(TAG_WINDOWS)
    if is_mac_asset(name):
        tags.add(TAG_MAC)
        tags.add(_ARCH_TAGS[get_mac_architecture(name)])
    if is_linux_asset(name):
        tags.add(TAG_LINUX)

    if is_installer_asset(name):
        tags.add(TAG_INSTALLER)
    if is_portable_asset(name):
        tags.add(TAG_PORTABLE)

    return frozenset(tags)
