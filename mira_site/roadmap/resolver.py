"""Milestone ordering and "what's next" queries."""

import logging
from collections.abc import Iterable
from functools import cmp_to_key

from mira_site.constants import (
    NO_NEWER_MILESTONE_HEADING,
    NO_NEWER_MILESTONE_MESSAGE,
    NO_TASKS_MESSAGE,
)
from mira_site.roadmap.models import RoadmapMilestone, RoadmapPlan, UpcomingReleasePlan
from mira_site.utils.version_utils import ParsedVersion, compare_versions

logger = logging.getLogger(__name__)

_VERSION_KEY = cmp_to_key(
    lambda a, b: compare_versions(a.version, b.version)
)


def sorted_by_version(
    milestones: Iterable[RoadmapMilestone],
) -> list[RoadmapMilestone]:
    """Return milestones in ascending version order.

    Milestones sharing a version keep their document order.
    """
    return sorted(milestones, key=_VERSION_KEY)


def _first_with_unfinished(
    milestones: list[RoadmapMilestone],
) -> RoadmapMilestone | None:
    return next(
        (milestone for milestone in milestones if milestone.has_unfinished_items),
        None,
    )


def next_after(
    milestones: Iterable[RoadmapMilestone],
    current_version: ParsedVersion | None,
) -> RoadmapMilestone | None:
    """Find the milestone that comes next.

    With a known current version this is the lowest milestone strictly
    newer than it. With an unknown version it is the first milestone that
    still has open items, or the first milestone when all are done.

    Args:
        milestones: Milestones in any order
        current_version: Latest released version, or None if unknown

    Returns:
        The next milestone, or None if there is none

    """
    ordered = sorted_by_version(milestones)

    if current_version is not None:
        return next(
            (
                milestone
                for milestone in ordered
                if compare_versions(milestone.version, current_version) > 0
            ),
            None,
        )

    return _first_with_unfinished(ordered) or (ordered[0] if ordered else None)


def _task_texts(milestone: RoadmapMilestone) -> tuple[str, ...]:
    unfinished = milestone.unfinished_items
    texts = tuple(item.text for item in unfinished or milestone.items)
    return texts or (NO_TASKS_MESSAGE,)


def resolve_upcoming_plan(
    plan: RoadmapPlan, current_version: ParsedVersion | None
) -> UpcomingReleasePlan | None:
    """Build the "coming next" summary shown on the roadmap page.

    Lists the open tasks of the next milestone, or all of its tasks when
    every one is done. When the latest release is already at or past every
    milestone, the first milestone with open work is shown instead; if
    there is none, the plan says so with ``has_next_version=False``.

    Returns:
        The summary, or None when the roadmap has no milestones

    """
    milestones = list(plan.milestones)
    if not milestones:
        return None

    upcoming = next_after(milestones, current_version)

    if upcoming is None:
        fallback = _first_with_unfinished(sorted_by_version(milestones))
        if fallback is None:
            logger.info(
                "No roadmap milestone newer than %s", current_version
            )
            return UpcomingReleasePlan(
                heading=NO_NEWER_MILESTONE_HEADING,
                items=(NO_NEWER_MILESTONE_MESSAGE,),
                source_url=plan.source_locator,
                has_next_version=False,
            )
        upcoming = fallback

    return UpcomingReleasePlan(
        heading=upcoming.heading,
        items=_task_texts(upcoming),
        source_url=plan.source_locator,
        has_next_version=True,
    )
