"""Tests for milestone ordering and "what's next" resolution."""

from mira_site.roadmap.models import RoadmapItem, RoadmapMilestone, RoadmapPlan
from mira_site.roadmap.resolver import (
    next_after,
    resolve_upcoming_plan,
    sorted_by_version,
)
from mira_site.utils.version_utils import ParsedVersion


def _milestone(version: str, *items: tuple[bool, str]) -> RoadmapMilestone:
    major, minor, patch = (int(part) for part in version.split("."))
    return RoadmapMilestone(
        heading=f"v{version}",
        version=ParsedVersion(major, minor, patch),
        items=tuple(RoadmapItem(done=done, text=text) for done, text in items),
    )


DONE_010 = _milestone("0.1.0", (True, "Shell"))
OPEN_020 = _milestone("0.2.0", (True, "Tabs"), (False, "Tab groups"))
OPEN_030 = _milestone("0.3.0", (False, "Sync"))


def test_sorted_by_version_ascending():
    """Milestones are ordered by version."""
    ordered = sorted_by_version([OPEN_030, DONE_010, OPEN_020])
    assert ordered == [DONE_010, OPEN_020, OPEN_030]


def test_sorted_by_version_is_stable():
    """Equal versions keep document order."""
    first = _milestone("1.0.0", (False, "a"))
    second = _milestone("1.0.0", (False, "b"))
    assert sorted_by_version([first, second]) == [first, second]


def test_next_after_known_version():
    """The lowest milestone strictly newer than the current version wins."""
    milestones = [OPEN_030, DONE_010, OPEN_020]
    assert next_after(milestones, ParsedVersion(0, 1, 0)) == OPEN_020
    assert next_after(milestones, ParsedVersion(0, 2, 5)) == OPEN_030
    assert next_after(milestones, ParsedVersion(0, 3, 0)) is None


def test_next_after_unknown_version_uses_first_unfinished():
    """Without a version the first milestone with open work is next."""
    assert next_after([OPEN_030, DONE_010, OPEN_020], None) == OPEN_020


def test_next_after_unknown_version_all_done():
    """When everything is done the first milestone is returned."""
    later = _milestone("0.5.0", (True, "x"))
    assert next_after([later, DONE_010], None) == DONE_010


def test_next_after_empty():
    """No milestones, nothing next."""
    assert next_after([], None) is None


def _plan(*milestones: RoadmapMilestone) -> RoadmapPlan:
    return RoadmapPlan(
        milestones=tuple(sorted_by_version(milestones)),
        source_locator="https://example.com/ROADMAP.md",
    )


def test_resolve_upcoming_plan_lists_unfinished_items():
    """Only open tasks of the next milestone are listed."""
    upcoming = resolve_upcoming_plan(
        _plan(DONE_010, OPEN_020, OPEN_030), ParsedVersion(0, 1, 0)
    )

    assert upcoming.heading == "v0.2.0"
    assert upcoming.items == ("Tab groups",)
    assert upcoming.has_next_version is True
    assert upcoming.source_url == "https://example.com/ROADMAP.md"


def test_resolve_upcoming_plan_all_done_lists_everything():
    """A finished next milestone lists all of its tasks."""
    done = _milestone("0.2.0", (True, "a"), (True, "b"))
    upcoming = resolve_upcoming_plan(_plan(DONE_010, done), ParsedVersion(0, 1, 0))
    assert upcoming.items == ("a", "b")


def test_resolve_upcoming_plan_without_items():
    """A milestone without tasks says so."""
    empty = _milestone("0.2.0")
    upcoming = resolve_upcoming_plan(_plan(empty), ParsedVersion(0, 1, 0))
    assert upcoming.items == ("No tasks listed for this milestone.",)


def test_resolve_upcoming_plan_falls_back_to_unfinished():
    """Past every milestone, the first one with open work is shown."""
    upcoming = resolve_upcoming_plan(
        _plan(DONE_010, OPEN_020), ParsedVersion(1, 0, 0)
    )
    assert upcoming.heading == "v0.2.0"
    assert upcoming.has_next_version is True


def test_resolve_upcoming_plan_nothing_newer():
    """Past every finished milestone there is no next version."""
    upcoming = resolve_upcoming_plan(_plan(DONE_010), ParsedVersion(1, 0, 0))

    assert upcoming.has_next_version is False
    assert upcoming.heading == "No newer roadmap milestone listed yet"
    assert len(upcoming.items) == 1


def test_resolve_upcoming_plan_unknown_version():
    """An unknown version resolves to the first open milestone."""
    upcoming = resolve_upcoming_plan(_plan(DONE_010, OPEN_020, OPEN_030), None)
    assert upcoming.heading == "v0.2.0"


def test_resolve_upcoming_plan_empty_roadmap():
    """An empty roadmap has no plan."""
    assert resolve_upcoming_plan(RoadmapPlan(), ParsedVersion(1, 0, 0)) is None


def test_sorted_by_version_agrees_with_compare_versions():
    """Ordering follows compare_versions component by component."""
    ordered = sorted_by_version(
        [
            _milestone("1.10.0"),
            _milestone("1.2.0"),
            _milestone("0.9.9"),
            _milestone("1.2.10"),
        ]
    )
    assert [str(m.version) for m in ordered] == ["0.9.9", "1.2.0", "1.2.10", "1.10.0"]
