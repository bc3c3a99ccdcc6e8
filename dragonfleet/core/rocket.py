"""
Rocket entity.

A rocket owns its status and a name reference to at most one mission.
The mission itself is resolved through the fleet that registered both.
"""

from __future__ import annotations
from typing import Optional, TYPE_CHECKING
import logging

from dragonfleet.core.enums import (
    EntityKind,
    MissionStatus,
    RocketStatus,
    TransitionTrigger,
)
from dragonfleet.errors import (
    AlreadyAssignedError,
    ForeignFleetError,
    InvalidRocketStatusError,
    require,
)

if TYPE_CHECKING:
    from dragonfleet.core.fleet import Fleet
    from dragonfleet.core.mission import Mission

logger = logging.getLogger(__name__)


class Rocket:
    """
    A rocket of the fleet.

    Two rockets are the same entity when their names match. A new rocket
    registers itself with its fleet, which rejects duplicate names.
    """

    def __init__(self, name: str, fleet: "Fleet"):
        self._name = require(name, "Rocket name")
        self._fleet = require(fleet, "Fleet")
        self._status = RocketStatus.ON_GROUND
        self._mission_name: Optional[str] = None
        fleet.register_rocket(self)

    @property
    def name(self) -> str:
        return self._name

    @property
    def status(self) -> RocketStatus:
        return self._status

    @property
    def fleet(self) -> "Fleet":
        return self._fleet

    @property
    def mission_name(self) -> Optional[str]:
        """Name of the assigned mission, or None."""
        return self._mission_name

    @property
    def assigned_mission(self) -> Optional["Mission"]:
        if self._mission_name is None:
            return None
        return self._fleet.get_mission(self._mission_name)

    @property
    def is_assigned(self) -> bool:
        return self._mission_name is not None

    # ------------------------------------------------------------------
    # Repair lifecycle
    # ------------------------------------------------------------------

    def put_in_repair(self) -> None:
        """
        Put the rocket into repair.

        An assigned mission is forced to PENDING directly; its status is
        not reevaluated from the other rockets. Calling this again repeats
        the side effect.
        """
        self._set_status(RocketStatus.IN_REPAIR, TransitionTrigger.REPAIR_START)

        mission = self.assigned_mission
        if mission is not None:
            mission.force_status(
                MissionStatus.PENDING,
                reason=f"rocket '{self._name}' put in repair",
            )

        logger.debug(f"Rocket '{self._name}' put in repair (mission: {self._mission_name})")

    def complete_repair(self) -> None:
        """
        Finish the repair.

        An assigned rocket goes back to space and its mission reevaluates;
        an unassigned one returns to the ground.

        Raises:
            InvalidRocketStatusError: if the rocket is not IN_REPAIR
        """
        if self._status != RocketStatus.IN_REPAIR:
            raise InvalidRocketStatusError(self._name, self._status, RocketStatus.IN_REPAIR)

        mission = self.assigned_mission
        if mission is not None:
            self._set_status(RocketStatus.IN_SPACE, TransitionTrigger.REPAIR_COMPLETE)
            mission.reevaluate_status()
        else:
            self._set_status(RocketStatus.ON_GROUND, TransitionTrigger.REPAIR_COMPLETE)

        logger.debug(f"Rocket '{self._name}' repaired, now {self._status.value}")

    # ------------------------------------------------------------------
    # Assignment
    # ------------------------------------------------------------------

    def can_be_assigned_to_mission(self, mission: "Mission") -> None:
        """
        Check the rocket can join the given mission.

        Passes silently when the rocket is unassigned or already on this
        mission.

        Raises:
            RequiredValueError: if mission is None
            ForeignFleetError: if the mission belongs to another fleet
            AlreadyAssignedError: if assigned to a different mission
        """
        require(mission, "Mission")
        if mission.fleet is not self._fleet:
            raise ForeignFleetError(self._name, mission.name)
        if self._mission_name is not None and self._mission_name != mission.name:
            raise AlreadyAssignedError(self._name, self._mission_name)

    def assign_to_mission(self, mission: "Mission") -> None:
        """
        Set the mission reference; a rocket not in repair goes to space.

        Only updates the rocket side. Use Mission.assign_rocket to keep
        both sides in step.
        """
        self.can_be_assigned_to_mission(mission)
        if self._mission_name == mission.name:
            return

        self._mission_name = mission.name
        if self._status != RocketStatus.IN_REPAIR:
            self._set_status(RocketStatus.IN_SPACE, TransitionTrigger.ASSIGNMENT)

    def remove_from_mission(self) -> None:
        """
        Clear the mission reference.

        A rocket in space lands; a rocket in repair stays in repair. There
        is no membership check, so on an unassigned rocket this only
        lands a rocket that is IN_SPACE.
        """
        self._mission_name = None
        if self._status == RocketStatus.IN_SPACE:
            self._set_status(RocketStatus.ON_GROUND, TransitionTrigger.REMOVAL)

    # ------------------------------------------------------------------

    def _set_status(self, status: RocketStatus, trigger: TransitionTrigger, reason: str = "") -> None:
        previous = self._status
        self._status = status
        self._fleet.log.record(EntityKind.ROCKET, self._name, previous, status, trigger, reason)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Rocket):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __str__(self) -> str:
        return f"{self._name} - {self._status.value}"

    def __repr__(self) -> str:
        return f"Rocket(name={self._name!r}, status={self._status.value}, mission={self._mission_name!r})"
