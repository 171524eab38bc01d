"""Version utilities.

This module parses loosely formatted version strings (release tags, roadmap
headings) into ``major.minor.patch`` triples and defines their ordering.
A string without a recognizable triple is "version unknown" and parses to
``None``; it is never treated as 0.0.0.
"""

import logging
import re
from dataclasses import dataclass
from typing import Literal


logger = logging.getLogger(__name__)

_NUMERIC_PREFIX_RE = re.compile(r"^[\d.]+", re.ASCII)
_SEMVER_RE = re.compile(r"^(\d+)\.(\d+)\.(\d+)\b", re.ASCII)
_HEADING_VERSION_RE = re.compile(
    r"v?(\d+\.\d+\.\d+)\b", re.IGNORECASE | re.ASCII
)


@dataclass(slots=True, frozen=True, order=True)
class ParsedVersion:
    """A ``major.minor.patch`` version.

    Field order defines the comparison order, so the rich comparison
    operators agree with :func:`compare_versions`.
    """

    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def parse_version(raw: str | None) -> ParsedVersion | None:
    """Parse a version string such as ``v1.2.3`` or ``1.2.3-beta.1``.

    A single leading ``v``/``V`` is stripped, then the leading run of
    digits and dots must start with ``X.Y.Z``. Anything after the third
    number (pre-release or build suffixes, a fourth component) is ignored.

    Args:
        raw: Version string to parse, or None.

    Returns:
        The parsed version, or None if no ``X.Y.Z`` pattern was found.

    Examples:
        >>> parse_version("v1.2.3-rc1")
        ParsedVersion(major=1, minor=2, patch=3)
        >>> parse_version("1.2") is None
        True

    """
    if not raw:
        return None

    cleaned = raw.strip()
    if cleaned[:1] in ("v", "V"):
        cleaned = cleaned[1:]

    prefix_match = _NUMERIC_PREFIX_RE.match(cleaned)
    numeric_prefix = prefix_match.group(0) if prefix_match else cleaned

    match = _SEMVER_RE.match(numeric_prefix)
    if not match:
        logger.debug("No major.minor.patch version in %r", raw)
        return None

    return ParsedVersion(
        major=int(match.group(1)),
        minor=int(match.group(2)),
        patch=int(match.group(3)),
    )


def compare_versions(a: ParsedVersion, b: ParsedVersion) -> Literal[-1, 0, 1]:
    """Compare two versions on ``(major, minor, patch)``.

    Returns:
        -1 if ``a < b``, 0 if equal, 1 if ``a > b``.

    """
    key_a = (a.major, a.minor, a.patch)
    key_b = (b.major, b.minor, b.patch)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def extract_heading_version(text: str) -> ParsedVersion | None:
    """Find the first ``X.Y.Z`` token (optionally ``v``-prefixed) in text.

    Used for roadmap headings, where the version may appear anywhere, e.g.
    ``Mira v0.4.0 (Spring)``.
    """
    match = _HEADING_VERSION_RE.search(text)
    if not match:
        return None
    return parse_version(match.group(1))
