"""
reporting/schema.py - Pydantic snapshot models

Structured, validated view of a fleet used for JSON output.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, TYPE_CHECKING

from pydantic import BaseModel, Field

from dragonfleet.core.enums import MissionStatus, RocketStatus
from dragonfleet.reporting.summary import sort_missions, sort_rockets

if TYPE_CHECKING:
    from dragonfleet.core.fleet import Fleet
    from dragonfleet.core.mission import Mission
    from dragonfleet.core.rocket import Rocket


class RocketSnapshot(BaseModel):
    """A rocket at snapshot time."""

    name: str = Field(..., description="Rocket name")
    status: RocketStatus = Field(..., description="Rocket status")
    mission: Optional[str] = Field(None, description="Assigned mission name")

    @classmethod
    def from_rocket(cls, rocket: "Rocket") -> "RocketSnapshot":
        return cls(name=rocket.name, status=rocket.status, mission=rocket.mission_name)


class MissionSnapshot(BaseModel):
    """A mission and its rockets at snapshot time."""

    name: str = Field(..., description="Mission name")
    status: MissionStatus = Field(..., description="Mission status")
    dragons: int = Field(default=0, ge=0, description="Number of assigned rockets")
    rockets: List[RocketSnapshot] = Field(
        default_factory=list,
        description="Assigned rockets, ascending by name",
    )

    @classmethod
    def from_mission(cls, mission: "Mission") -> "MissionSnapshot":
        return cls(
            name=mission.name,
            status=mission.status,
            dragons=mission.number_of_assigned_rockets,
            rockets=[RocketSnapshot.from_rocket(r) for r in sort_rockets(mission.assigned_rockets)],
        )


class FleetSnapshot(BaseModel):
    """Whole-fleet snapshot; missions ordered as in the text summary."""

    generated_at: datetime = Field(default_factory=datetime.utcnow)
    missions: List[MissionSnapshot] = Field(default_factory=list)
    unassigned_rockets: List[RocketSnapshot] = Field(default_factory=list)

    @classmethod
    def from_fleet(cls, fleet: "Fleet") -> "FleetSnapshot":
        return cls(
            missions=[MissionSnapshot.from_mission(m) for m in sort_missions(fleet.missions)],
            unassigned_rockets=[
                RocketSnapshot.from_rocket(r) for r in sort_rockets(fleet.unassigned_rockets)
            ],
        )

    @property
    def rocket_count(self) -> int:
        return sum(m.dragons for m in self.missions) + len(self.unassigned_rockets)
