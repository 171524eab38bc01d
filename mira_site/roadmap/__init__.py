"""Roadmap parsing and milestone resolution.

Example usage:
    from mira_site.roadmap import build_roadmap_plan, resolve_upcoming_plan

    plan = build_roadmap_plan(markdown, source_locator=url)
    upcoming = resolve_upcoming_plan(plan, current_version)
"""

from mira_site.roadmap.models import (
    RoadmapItem,
    RoadmapMilestone,
    RoadmapPlan,
    UpcomingReleasePlan,
)
from mira_site.roadmap.parser import build_roadmap_plan, parse_roadmap
from mira_site.roadmap.resolver import (
    next_after,
    resolve_upcoming_plan,
    sorted_by_version,
)

__all__ = [
    "RoadmapItem",
    "RoadmapMilestone",
    "RoadmapPlan",
    "UpcomingReleasePlan",
    "build_roadmap_plan",
    "next_after",
    "parse_roadmap",
    "resolve_upcoming_plan",
    "sorted_by_version",
]
