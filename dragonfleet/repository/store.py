"""
repository/store.py - Name-keyed access to a fleet.

DragonRepository is the outer surface over a Fleet: callers pass names,
the repository resolves them (raising *NotFoundError for unknown names)
and delegates to the rocket/mission state machine.
"""

from __future__ import annotations
from typing import List, Optional, Sequence
import logging

from dragonfleet.bootstrap.config import FleetConfig
from dragonfleet.core.fleet import Fleet
from dragonfleet.core.mission import Mission
from dragonfleet.core.rocket import Rocket
from dragonfleet.core.state_transitions import TransitionEvent
from dragonfleet.errors import (
    MissionAlreadyExistsError,
    MissionEndedError,
    RocketAlreadyExistsError,
    require,
)
from dragonfleet.reporting.schema import FleetSnapshot
from dragonfleet.reporting.summary import render_summary

logger = logging.getLogger(__name__)


class DragonRepository:
    """
    Repository of rockets and missions.

    Usage:
        repo = DragonRepository()
        repo.add_mission("Starlink-1")
        repo.add_rocket("Falcon 9")
        repo.assign_rocket_to_mission("Falcon 9", "Starlink-1")
        print(repo.get_summary())
    """

    def __init__(self, config: Optional[FleetConfig] = None, fleet: Optional[Fleet] = None):
        self.config = config or FleetConfig()
        self.fleet = fleet or Fleet(history_limit=self.config.history_limit)
        logger.info(
            f"Repository created (verify_consistency={self.config.verify_consistency}, "
            f"history_limit={self.config.history_limit})"
        )

    # ==================== Lookup ====================

    def get_rocket(self, name: str) -> Rocket:
        """Raises RocketNotFoundError for unknown names."""
        return self.fleet.get_rocket(name)

    def get_mission(self, name: str) -> Mission:
        """Raises MissionNotFoundError for unknown names."""
        return self.fleet.get_mission(name)

    # ==================== Creation ====================

    def add_rocket(self, name: str) -> str:
        """
        Add a rocket ON_GROUND.

        Returns:
            Name of the new rocket

        Raises:
            RocketAlreadyExistsError: if the name is taken
        """
        self.fleet.add_rocket(name)
        logger.debug(f"Rocket '{name}' added")
        return name

    def add_mission(self, name: str) -> str:
        """
        Add a SCHEDULED mission.

        Returns:
            Name of the new mission

        Raises:
            MissionAlreadyExistsError: if the name is taken
        """
        self.fleet.add_mission(name)
        logger.debug(f"Mission '{name}' added")
        return name

    def add_rockets(self, names: Sequence[str]) -> List[str]:
        """
        Add several rockets, all or nothing.

        Raises:
            RocketAlreadyExistsError: for the first name that is registered
                already or repeated in names; nothing is added
        """
        self._check_new_names(names, self.fleet.find_rocket, RocketAlreadyExistsError, "Rocket name")
        return [self.add_rocket(name) for name in names]

    def add_missions(self, names: Sequence[str]) -> List[str]:
        """
        Add several missions, all or nothing.

        Raises:
            MissionAlreadyExistsError: for the first name that is registered
                already or repeated in names; nothing is added
        """
        self._check_new_names(names, self.fleet.find_mission, MissionAlreadyExistsError, "Mission name")
        return [self.add_mission(name) for name in names]

    @staticmethod
    def _check_new_names(names, find, error_type, what) -> None:
        seen = set()
        for name in names:
            require(name, what)
            if name in seen or find(name) is not None:
                raise error_type(name)
            seen.add(name)

    # ==================== Assignment ====================

    def assign_rocket_to_mission(self, rocket_name: str, mission_name: str) -> None:
        rocket = self.get_rocket(rocket_name)
        mission = self.get_mission(mission_name)

        mission.assign_rocket(rocket)
        self._after_mutation()

    def assign_rockets_to_mission(self, rocket_names: Sequence[str], mission_name: str) -> None:
        """
        Assign several rockets at once, all or nothing.

        Every rocket is looked up and checked before any is assigned, so a
        failure leaves the fleet untouched. An empty list does nothing.

        Raises:
            MissionNotFoundError, RocketNotFoundError, MissionEndedError,
            AlreadyAssignedError
        """
        mission = self.get_mission(mission_name)
        if mission.status.is_terminal:
            raise MissionEndedError(mission.name)

        rockets: List[Rocket] = []
        for rocket_name in rocket_names:
            rocket = self.get_rocket(rocket_name)
            mission.can_assign_rocket(rocket)
            rockets.append(rocket)

        for rocket in rockets:
            mission.assign_rocket(rocket)

        if rockets:
            logger.debug(f"Assigned {len(rockets)} rocket(s) to mission '{mission.name}'")
        self._after_mutation()

    def remove_rocket_from_mission(self, rocket_name: str, mission_name: str) -> None:
        rocket = self.get_rocket(rocket_name)
        mission = self.get_mission(mission_name)

        mission.remove_rocket(rocket)
        self._after_mutation()

    # ==================== Repair ====================

    def put_rocket_into_repair(self, rocket_name: str) -> None:
        """Put a rocket into repair; its mission, if any, becomes PENDING."""
        self.get_rocket(rocket_name).put_in_repair()
        self._after_mutation()

    def complete_repair_of_rocket(self, rocket_name: str) -> None:
        """Raises InvalidRocketStatusError if the rocket is not IN_REPAIR."""
        self.get_rocket(rocket_name).complete_repair()
        self._after_mutation()

    # ==================== Missions ====================

    def end_mission(self, mission_name: str) -> None:
        """Raises InvalidMissionStatusError unless the mission is IN_PROGRESS."""
        self.get_mission(mission_name).complete()
        self._after_mutation()

    # ==================== Views ====================

    def get_summary(self) -> str:
        return render_summary(self.fleet.missions)

    def snapshot(self) -> FleetSnapshot:
        return FleetSnapshot.from_fleet(self.fleet)

    def history(self, name: Optional[str] = None) -> List[TransitionEvent]:
        """Recorded status transitions, optionally for one entity name."""
        return self.fleet.log.events(entity_name=name)

    def _after_mutation(self) -> None:
        if self.config.verify_consistency:
            self.fleet.verify()
