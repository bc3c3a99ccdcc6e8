"""
reporting/summary.py - Text summary of missions and their rockets.

Missions are listed by descending rocket count, ties broken by descending
name; each mission's rockets follow, ascending by name, one tab deeper:

    - Mission B - IN_PROGRESS - Dragons: 2
    \t- Rocket 2 - IN_SPACE
    \t- Rocket 3 - IN_SPACE
"""

from __future__ import annotations
from typing import Iterable, List, TYPE_CHECKING

if TYPE_CHECKING:
    from dragonfleet.core.mission import Mission
    from dragonfleet.core.rocket import Rocket


def sort_missions(missions: Iterable["Mission"]) -> List["Mission"]:
    """Order missions for the summary."""
    return sorted(
        missions,
        key=lambda m: (m.number_of_assigned_rockets, m.name),
        reverse=True,
    )


def sort_rockets(rockets: Iterable["Rocket"]) -> List["Rocket"]:
    return sorted(rockets, key=lambda r: r.name)


def render_summary(missions: Iterable["Mission"]) -> str:
    """Render the summary; no missions gives an empty string."""
    lines: List[str] = []
    for mission in sort_missions(missions):
        lines.append(f"- {mission}\n")
        for rocket in sort_rockets(mission.assigned_rockets):
            lines.append(f"\t- {rocket}\n")
    return "".join(lines)
