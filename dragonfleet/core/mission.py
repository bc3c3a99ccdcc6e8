"""
Mission entity.

A mission holds the names of its rockets and derives its status from
them, except once ENDED. Rockets put into repair push PENDING onto their
mission through force_status; every membership change goes through
reevaluate_status. A forced status does not look at the other rockets.
"""

from __future__ import annotations
from typing import FrozenSet, Set, TYPE_CHECKING
import logging

from dragonfleet.core.enums import (
    EntityKind,
    MissionStatus,
    RocketStatus,
    TransitionTrigger,
)
from dragonfleet.errors import (
    ForcedEndError,
    InvalidMissionStatusError,
    MissionEndedError,
    NotPartOfMissionError,
    require,
)

if TYPE_CHECKING:
    from dragonfleet.core.fleet import Fleet
    from dragonfleet.core.rocket import Rocket

logger = logging.getLogger(__name__)


class Mission:
    """
    A mission with a set of assigned rockets.

    Status flow:
        SCHEDULED <-> PENDING <-> IN_PROGRESS   (reevaluation)
        IN_PROGRESS -> ENDED                    (complete() only)

    ENDED is terminal: reevaluation is a no-op and no rocket can join.
    """

    def __init__(self, name: str, fleet: "Fleet"):
        self._name = require(name, "Mission name")
        self._fleet = require(fleet, "Fleet")
        self._status = MissionStatus.SCHEDULED
        self._rocket_names: Set[str] = set()
        fleet.register_mission(self)

    @property
    def name(self) -> str:
        return self._name

    @property
    def status(self) -> MissionStatus:
        return self._status

    @property
    def fleet(self) -> "Fleet":
        return self._fleet

    @property
    def rocket_names(self) -> FrozenSet[str]:
        return frozenset(self._rocket_names)

    @property
    def assigned_rockets(self) -> FrozenSet["Rocket"]:
        return frozenset(self._fleet.get_rocket(name) for name in self._rocket_names)

    @property
    def number_of_assigned_rockets(self) -> int:
        return len(self._rocket_names)

    def has_rocket(self, rocket: "Rocket") -> bool:
        return rocket is not None and rocket.name in self._rocket_names

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    def reevaluate_status(self) -> None:
        """
        Recompute the status from the assigned rockets.

        First match wins:
            1. ENDED             -> unchanged
            2. no rockets        -> SCHEDULED
            3. any rocket repair -> PENDING
            4. otherwise         -> IN_PROGRESS
        """
        if self._status.is_terminal:
            return

        if not self._rocket_names:
            status = MissionStatus.SCHEDULED
        elif any(r.status == RocketStatus.IN_REPAIR for r in self.assigned_rockets):
            status = MissionStatus.PENDING
        else:
            status = MissionStatus.IN_PROGRESS

        self._set_status(status, TransitionTrigger.REEVALUATION)

    def force_status(self, status: MissionStatus, reason: str = "") -> None:
        """
        Set the status without reevaluating it.

        Raises:
            RequiredValueError: if status is None
            MissionEndedError: if the mission has ended
            ForcedEndError: if status is ENDED (use complete())
        """
        require(status, "Mission status")
        if self._status.is_terminal:
            raise MissionEndedError(self._name)
        if status.is_terminal:
            raise ForcedEndError(self._name)

        self._set_status(status, TransitionTrigger.FORCED, reason)

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------

    def can_assign_rocket(self, rocket: "Rocket") -> None:
        """
        Check the rocket can join this mission.

        Raises:
            RequiredValueError: if rocket is None
            MissionEndedError: if the mission has ended
            AlreadyAssignedError: if the rocket is on another mission
        """
        require(rocket, "Rocket")
        if self._status.is_terminal:
            raise MissionEndedError(self._name)
        rocket.can_be_assigned_to_mission(self)

    def assign_rocket(self, rocket: "Rocket") -> None:
        """Assign a rocket; assigning it again is a no-op."""
        self.can_assign_rocket(rocket)

        rocket.assign_to_mission(self)
        self._rocket_names.add(rocket.name)
        self.reevaluate_status()

        logger.debug(f"Rocket '{rocket.name}' assigned to mission '{self._name}' ({self._status.value})")

    def remove_rocket(self, rocket: "Rocket") -> None:
        """
        Remove a member rocket and reevaluate.

        Raises:
            RequiredValueError: if rocket is None
            NotPartOfMissionError: if the rocket is not a member
        """
        require(rocket, "Rocket")
        if rocket.name not in self._rocket_names:
            raise NotPartOfMissionError(rocket.name, self._name)

        self._rocket_names.discard(rocket.name)
        rocket.remove_from_mission()
        self.reevaluate_status()

        logger.debug(f"Rocket '{rocket.name}' removed from mission '{self._name}' ({self._status.value})")

    def complete(self) -> None:
        """
        End the mission and detach every rocket.

        Raises:
            InvalidMissionStatusError: unless the mission is IN_PROGRESS
        """
        if self._status != MissionStatus.IN_PROGRESS:
            raise InvalidMissionStatusError(self._name, self._status, MissionStatus.IN_PROGRESS)

        self._set_status(MissionStatus.ENDED, TransitionTrigger.COMPLETION)
        for rocket in self.assigned_rockets:
            rocket.remove_from_mission()
        self._rocket_names.clear()

        logger.info(f"Mission '{self._name}' ended")

    # ------------------------------------------------------------------

    def _set_status(self, status: MissionStatus, trigger: TransitionTrigger, reason: str = "") -> None:
        previous = self._status
        self._status = status
        self._fleet.log.record(EntityKind.MISSION, self._name, previous, status, trigger, reason)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Mission):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __str__(self) -> str:
        return f"{self._name} - {self._status.value} - Dragons: {len(self._rocket_names)}"

    def __repr__(self) -> str:
        return (
            f"Mission(name={self._name!r}, status={self._status.value}, "
            f"rockets={sorted(self._rocket_names)!r})"
        )
