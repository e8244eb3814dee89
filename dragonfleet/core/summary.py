# -----------------------------------------------------------------------------
# FLEET SUMMARY
# -----------------------------------------------------------------------------
# Read-only formatting of the registry contents.
#
# Mission order: rocket count descending, ties by name descending.
# Rockets under a mission: by name ascending.
#
# format_summary produces the exact text report; build_summary_tree renders
# the same ordering as a rich Tree for the console.
# -----------------------------------------------------------------------------

from collections.abc import Iterable

from rich.markup import escape
from rich.tree import Tree

from dragonfleet.domain.models import Mission, Rocket, status_label

MISSION_LINE = "• {name} - {status} - Dragons: {count}\n"
ROCKET_LINE = "o {name} - {status}\n"


def sort_missions(missions: Iterable[Mission]) -> list[Mission]:
    """Order missions for the summary report."""
    return sorted(missions, key=lambda m: (m.rocket_count, m.name), reverse=True)


def _sorted_rockets(mission: Mission) -> list[Rocket]:
    return sorted(mission.assigned_rockets, key=lambda r: r.name)


def format_summary(missions: Iterable[Mission]) -> str:
    """
    Render the text summary.

    Each mission contributes one line followed by one line per assigned
    rocket. Every line ends with a newline; no missions gives "".
    """
    lines = []
    for mission in sort_missions(missions):
        lines.append(
            MISSION_LINE.format(
                name=mission.name,
                status=status_label(mission.status),
                count=mission.rocket_count,
            )
        )
        for rocket in _sorted_rockets(mission):
            lines.append(ROCKET_LINE.format(name=rocket.name, status=status_label(rocket.status)))
    return "".join(lines)


def build_summary_tree(missions: Iterable[Mission], title: str = "Fleet") -> Tree:
    """Build a rich Tree with the same ordering as format_summary."""
    tree = Tree(f"[bold]{escape(title)}[/bold]")
    for mission in sort_missions(missions):
        branch = tree.add(
            f"[cyan]{escape(mission.name)}[/cyan] - {status_label(mission.status)} "
            f"- Dragons: {mission.rocket_count}"
        )
        for rocket in _sorted_rockets(mission):
            branch.add(f"{escape(rocket.name)} - {status_label(rocket.status)}")
    return tree
