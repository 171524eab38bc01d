"""Roadmap data models."""

from dataclasses import dataclass, field
from typing import Any

from mira_site.utils.version_utils import ParsedVersion


@dataclass(slots=True, frozen=True)
class RoadmapItem:
    """One checklist line under a milestone heading."""

    done: bool
    text: str


@dataclass(slots=True, frozen=True)
class RoadmapMilestone:
    """A versioned roadmap heading and its checklist items.

    Attributes:
        heading: Heading text without the leading ``##``
        version: Version parsed from the heading
        items: Checklist items in document order

    """

    heading: str
    version: ParsedVersion
    items: tuple[RoadmapItem, ...] = ()

    @property
    def unfinished_items(self) -> tuple[RoadmapItem, ...]:
        """Items that are not checked off yet."""
        return tuple(item for item in self.items if not item.done)

    @property
    def has_unfinished_items(self) -> bool:
        return any(not item.done for item in self.items)

    def to_dict(self) -> dict[str, Any]:
        return {
            "heading": self.heading,
            "version": str(self.version),
            "items": [{"done": item.done, "text": item.text} for item in self.items],
        }


@dataclass(slots=True, frozen=True)
class RoadmapPlan:
    """All milestones of a roadmap document, sorted ascending by version.

    Attributes:
        milestones: Milestones in version order
        source_locator: Where the document came from (URL or path), if known

    """

    milestones: tuple[RoadmapMilestone, ...] = ()
    source_locator: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "milestones": [milestone.to_dict() for milestone in self.milestones],
            "source_locator": self.source_locator,
        }


@dataclass(slots=True, frozen=True)
class UpcomingReleasePlan:
    """Presentation-ready answer to "what comes next".

    Attributes:
        heading: Heading of the milestone shown, or an explanatory title
        items: Task texts to list
        source_url: Where the roadmap was loaded from
        has_next_version: False when no milestone is newer than the
            current stable release

    """

    heading: str
    items: tuple[str, ...] = field(default_factory=tuple)
    source_url: str | None = None
    has_next_version: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "heading": self.heading,
            "items": list(self.items),
            "source_url": self.source_url,
            "has_next_version": self.has_next_version,
        }
