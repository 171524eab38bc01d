"""Release asset classification and download slot selection.

Example usage:
    from mira_site.api import assign_slots, select_release

    selection = select_release(releases, include_prereleases=False)
    slots = assign_slots(selection.release.assets)
"""

from mira_site.api.assets import DownloadSlot, Release, ReleaseAsset
from mira_site.api.classifier import (
    classify,
    get_mac_architecture,
    is_downloadable_asset,
)
from mira_site.api.selector import build_term_weights, choose_best
from mira_site.api.slots import (
    SLOT_DEFINITIONS,
    SLOT_KEYS,
    ReleaseSelection,
    assign_slots,
    order_slots_for_host,
    parse_include_prereleases,
    select_release,
)

__all__ = [
    # Data models
    "DownloadSlot",
    "Release",
    "ReleaseAsset",
    "ReleaseSelection",
    # Classification and ranking
    "build_term_weights",
    "choose_best",
    "classify",
    "get_mac_architecture",
    "is_downloadable_asset",
    # Slot assignment
    "SLOT_DEFINITIONS",
    "SLOT_KEYS",
    "assign_slots",
    "order_slots_for_host",
    "parse_include_prereleases",
    "select_release",
]
