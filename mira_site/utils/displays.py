"""Terminal rendering for the downloads and roadmap views."""

from datetime import datetime

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mira_site.api.assets import DownloadSlot
from mira_site.api.slots import is_slot_applicable, order_slots_for_host
from mira_site.roadmap.models import RoadmapPlan, UpcomingReleasePlan
from mira_site.services.downloads import DownloadsView


def format_date(iso: str) -> str:
    """Format an ISO-8601 timestamp as e.g. "March 4, 2025".

    Unparseable input is returned unchanged.
    """
    try:
        parsed = datetime.fromisoformat(iso.replace("Z", "+00:00"))
    except ValueError:
        return iso
    return f"{parsed:%B} {parsed.day}, {parsed.year}"


def format_size(size_bytes: int) -> str:
    """Format a byte count for display."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    size = size_bytes / 1024
    for unit in ("KB", "MB"):
        if size < 1024:
            return f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} GB"


def build_slots_table(
    slots: list[DownloadSlot], host_tag: str | None
) -> Table:
    """Build the download table, host platform first."""
    table = Table(title="Downloads", show_lines=False)
    table.add_column("Download", style="bold")
    table.add_column("File")
    table.add_column("Size", justify="right")
    table.add_column("URL", overflow="fold")

    for slot in order_slots_for_host(slots, host_tag):
        style = None if is_slot_applicable(slot, host_tag) else "dim"
        if slot.asset is None:
            table.add_row(
                escape(slot.label),
                "Not available in this release.",
                "",
                "",
                style=style,
            )
            continue
        table.add_row(
            escape(slot.label),
            escape(slot.asset.name),
            format_size(slot.asset.size_bytes),
            escape(slot.asset.download_url),
            style=style,
        )
    return table


def display_downloads(
    view: DownloadsView, host_tag: str | None, console: Console | None = None
) -> None:
    """Print the downloads view."""
    console = console or Console()

    console.print(
        f"Include pre-releases: {'yes' if view.include_prereleases else 'no'}"
    )
    if not view.has_stable_release:
        console.print(
            "[dim]No stable latest release was found, so pre-releases are "
            "enabled automatically.[/dim]"
        )

    if view.release is None or view.slots is None:
        console.print("[yellow]No GitHub release is currently available.[/yellow]")
        return

    release = view.release
    published = (
        f" published on {format_date(release.published_at)}"
        if release.published_at
        else ""
    )
    console.print(
        f"Showing [bold]{escape(release.display_name)}[/bold] "
        f"({escape(release.tag_name)}){published}."
    )
    if release.html_url:
        console.print(f"Release notes: {escape(release.html_url)}")

    console.print(build_slots_table(list(view.slots.values()), host_tag))


def display_upcoming_plan(
    plan: UpcomingReleasePlan | None, console: Console | None = None
) -> None:
    """Print the "coming next" summary."""
    console = console or Console()

    if plan is None:
        console.print("[bold]What comes next[/bold]")
        console.print(
            "[dim]Couldn't load next release plans right now. Check back soon.[/dim]"
        )
        return

    title = f"Coming in {plan.heading}" if plan.has_next_version else plan.heading
    console.print(f"[bold]{escape(title)}[/bold]")
    for item in plan.items:
        console.print(f"  • {escape(item)}")
    if plan.source_url:
        console.print(f"[dim]Source: {escape(plan.source_url)}[/dim]")


def display_roadmap(plan: RoadmapPlan | None, console: Console | None = None) -> None:
    """Print every milestone of the roadmap with its checklist."""
    console = console or Console()

    if plan is None or not plan.milestones:
        console.print("[dim]No roadmap milestones available.[/dim]")
        return

    for milestone in plan.milestones:
        done = sum(1 for item in milestone.items if item.done)
        console.print(
            f"[bold]{escape(milestone.heading)}[/bold] "
            f"[dim]({done}/{len(milestone.items)} done)[/dim]"
        )
        for item in milestone.items:
            mark = "[green]✔[/green]" if item.done else "○"
            console.print(f"  {mark} {escape(item.text)}")
    if plan.source_locator:
        console.print(f"[dim]Source: {escape(plan.source_locator)}[/dim]")
