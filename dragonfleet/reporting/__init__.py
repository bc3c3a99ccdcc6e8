"""
reporting/__init__.py - Reporting module exports.

Text summary and pydantic snapshots of a fleet.
"""

from .summary import render_summary, sort_missions, sort_rockets
from .schema import RocketSnapshot, MissionSnapshot, FleetSnapshot

__all__ = [
    "render_summary",
    "sort_missions",
    "sort_rockets",
    "RocketSnapshot",
    "MissionSnapshot",
    "FleetSnapshot",
]
