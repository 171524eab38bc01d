"""Roadmap markdown parser.

Recognized grammar, one construct per line:

    ## <heading containing an optional vX.Y.Z>
    - [ ] open task
    * [x] finished task

A versioned level-2 heading starts a milestone. A heading without a version
closes the current milestone, so the checklist lines that follow it are
dropped. Everything else is inert.
"""

import logging
import re

from mira_site.roadmap.models import RoadmapItem, RoadmapMilestone, RoadmapPlan
from mira_site.roadmap.resolver import sorted_by_version
from mira_site.utils.version_utils import ParsedVersion, extract_heading_version

logger = logging.getLogger(__name__)

_LINE_SPLIT_RE = re.compile(r"\r?\n")
_HEADING_RE = re.compile(r"^##\s+(.+)$")
_TASK_RE = re.compile(r"^[-*]\s+\[([ xX])\]\s+(.+)$")


def parse_roadmap(markdown: str) -> list[RoadmapMilestone]:
    """Extract versioned milestones and their checklist items.

    Single forward pass. Milestones are collected in an append-only list
    and ``current`` indexes the one receiving items, or is None.

    Args:
        markdown: Roadmap document text

    Returns:
        Milestones in document order; empty for empty or unrecognized input

    """
    if not markdown:
        return []

    headings: list[tuple[str, ParsedVersion]] = []
    items: list[list[RoadmapItem]] = []
    current: int | None = None

    for line in _LINE_SPLIT_RE.split(markdown):
        heading_match = _HEADING_RE.match(line)
        if heading_match:
            heading = heading_match.group(1).strip()
            version = extract_heading_version(heading)
            if version is None:
                logger.debug("Skipping unversioned heading %r", heading)
                current = None
                continue

            headings.append((heading, version))
            items.append([])
            current = len(headings) - 1
            continue

        task_match = _TASK_RE.match(line)
        if task_match and current is not None:
            items[current].append(
                RoadmapItem(
                    done=task_match.group(1).lower() == "x",
                    text=task_match.group(2).strip(),
                )
            )

    return [
        RoadmapMilestone(heading=heading, version=version, items=tuple(milestone_items))
        for (heading, version), milestone_items in zip(headings, items, strict=True)
    ]


def build_roadmap_plan(
    markdown: str, source_locator: str | None = None
) -> RoadmapPlan:
    """Parse a roadmap document into a version-ordered plan."""
    milestones = sorted_by_version(parse_roadmap(markdown))
    logger.debug(
        "Parsed %d milestone(s) from %s", len(milestones), source_locator or "roadmap"
    )
    return RoadmapPlan(milestones=tuple(milestones), source_locator=source_locator)
