"""
Fleet - the single store owning every rocket and mission.

Rockets and missions refer to each other by name and resolve through the
fleet, so the mirrored references can be checked in one place:

    rocket.mission_name == mission.name  <=>  rocket.name in mission.rocket_names
"""

from __future__ import annotations
from typing import Dict, List, Optional
import logging

from dragonfleet.core.mission import Mission
from dragonfleet.core.rocket import Rocket
from dragonfleet.core.state_transitions import TransitionLog
from dragonfleet.errors import (
    ConsistencyError,
    MissionAlreadyExistsError,
    MissionNotFoundError,
    RocketAlreadyExistsError,
    RocketNotFoundError,
    require,
)

logger = logging.getLogger(__name__)


class Fleet:
    """
    Name-indexed arena of rockets and missions plus their transition log.
    """

    def __init__(self, history_limit: int = 1000):
        self._rockets: Dict[str, Rocket] = {}
        self._missions: Dict[str, Mission] = {}
        self.log = TransitionLog(max_history=history_limit)

    # ==================== Creation ====================

    def add_rocket(self, name: str) -> Rocket:
        """Create a rocket ON_GROUND, rejecting duplicate names."""
        return Rocket(name, self)

    def add_mission(self, name: str) -> Mission:
        """Create a SCHEDULED mission, rejecting duplicate names."""
        return Mission(name, self)

    def register_rocket(self, rocket: Rocket) -> None:
        """Called by Rocket.__init__."""
        require(rocket, "Rocket")
        if rocket.name in self._rockets:
            raise RocketAlreadyExistsError(rocket.name)
        self._rockets[rocket.name] = rocket
        logger.debug(f"Registered rocket '{rocket.name}'")

    def register_mission(self, mission: Mission) -> None:
        """Called by Mission.__init__."""
        require(mission, "Mission")
        if mission.name in self._missions:
            raise MissionAlreadyExistsError(mission.name)
        self._missions[mission.name] = mission
        logger.debug(f"Registered mission '{mission.name}'")

    # ==================== Lookup ====================

    def get_rocket(self, name: str) -> Rocket:
        rocket = self._rockets.get(name)
        if rocket is None:
            raise RocketNotFoundError(name)
        return rocket

    def get_mission(self, name: str) -> Mission:
        mission = self._missions.get(name)
        if mission is None:
            raise MissionNotFoundError(name)
        return mission

    def find_rocket(self, name: str) -> Optional[Rocket]:
        return self._rockets.get(name)

    def find_mission(self, name: str) -> Optional[Mission]:
        return self._missions.get(name)

    @property
    def rockets(self) -> List[Rocket]:
        return list(self._rockets.values())

    @property
    def missions(self) -> List[Mission]:
        return list(self._missions.values())

    @property
    def unassigned_rockets(self) -> List[Rocket]:
        return [r for r in self._rockets.values() if not r.is_assigned]

    # ==================== Consistency ====================

    def check_consistency(self) -> List[str]:
        """
        Compare both sides of every rocket/mission reference.

        Returns:
            List of violation descriptions, empty when consistent
        """
        violations: List[str] = []

        for rocket in self._rockets.values():
            if rocket.mission_name is None:
                continue
            mission = self._missions.get(rocket.mission_name)
            if mission is None:
                violations.append(
                    f"rocket '{rocket.name}' references unknown mission '{rocket.mission_name}'"
                )
            elif rocket.name not in mission.rocket_names:
                violations.append(
                    f"rocket '{rocket.name}' references mission '{mission.name}' which does not list it"
                )

        for mission in self._missions.values():
            for rocket_name in sorted(mission.rocket_names):
                rocket = self._rockets.get(rocket_name)
                if rocket is None:
                    violations.append(
                        f"mission '{mission.name}' lists unknown rocket '{rocket_name}'"
                    )
                elif rocket.mission_name != mission.name:
                    violations.append(
                        f"mission '{mission.name}' lists rocket '{rocket_name}' "
                        f"assigned to {rocket.mission_name!r}"
                    )

        return violations

    def verify(self) -> None:
        """Raise ConsistencyError if check_consistency finds violations."""
        violations = self.check_consistency()
        if violations:
            logger.error(f"Fleet consistency check failed: {len(violations)} violation(s)")
            raise ConsistencyError(violations)

    def __len__(self) -> int:
        return len(self._rockets) + len(self._missions)

    def __repr__(self) -> str:
        return f"Fleet(rockets={len(self._rockets)}, missions={len(self._missions)})"
