"""Asset ranking module.

This module picks the single best asset out of a candidate set using a
term-weight table: every preferred term contained in an asset name adds its
weight to that asset's score.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence

from mira_site.api.assets import ReleaseAsset

logger = logging.getLogger(__name__)

# Weight step between neighbouring terms of a priority list
TERM_WEIGHT_STEP = 10

TermWeights = Mapping[str, int]


def build_term_weights(preferred_terms: Sequence[str]) -> dict[str, int]:
    """Turn a priority-ordered term list into a weight table.

    The first of ``n`` terms weighs ``n * 10``, the last ``10``. A term
    listed twice accumulates both weights.

    Args:
        preferred_terms: Terms ordered from most to least preferred

    Returns:
        Mapping of lowercase term to weight

    Example:
        >>> build_term_weights(["setup", ".msi", ".exe"])
        {'setup': 30, '.msi': 20, '.exe': 10}

    """
    total = len(preferred_terms)
    weights: dict[str, int] = {}
    for index, term in enumerate(preferred_terms):
        key = term.lower()
        weights[key] = weights.get(key, 0) + (total - index) * TERM_WEIGHT_STEP
    return weights


def _as_weights(preferred_terms: Sequence[str] | TermWeights) -> TermWeights:
    if isinstance(preferred_terms, Mapping):
        return {term.lower(): weight for term, weight in preferred_terms.items()}
    return build_term_weights(preferred_terms)


def score_asset(name: str, weights: TermWeights) -> int:
    """Sum the weights of all terms contained in the lowercased name."""
    lower = name.lower()
    return sum(weight for term, weight in weights.items() if term in lower)


def choose_best(
    assets: Iterable[ReleaseAsset],
    preferred_terms: Sequence[str] | TermWeights,
) -> ReleaseAsset | None:
    """Select the best asset for a download slot.

    Assets are ordered by score, then by size (larger builds are assumed to
    be the more complete ones, e.g. bundled vs. thin installers). Assets
    tied on both keep their input order, so the result is deterministic.

    Args:
        assets: Candidate assets
        preferred_terms: Priority-ordered term list or explicit weight table

    Returns:
        The winning asset, or None if there are no candidates

    """
    candidates = list(assets)
    if not candidates:
        return None

    weights = _as_weights(preferred_terms)
    ranked = sorted(
        candidates,
        key=lambda asset: (-score_asset(asset.name, weights), -asset.size_bytes),
    )

    best = ranked[0]
    logger.debug(
        "Chose %s out of %d candidates (score %d)",
        best.name,
        len(candidates),
        score_asset(best.name, weights),
    )
    return best
