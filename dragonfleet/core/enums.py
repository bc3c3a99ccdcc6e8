"""
Fleet Core Enumerations

Status and classification enums shared by rockets, missions and the
transition log.
"""

from enum import Enum


class RocketStatus(str, Enum):
    """
    Operational status of a rocket.
    """
    ON_GROUND = "ON_GROUND"  # Not engaged in a mission
    IN_SPACE = "IN_SPACE"    # Assigned to a mission and flying
    IN_REPAIR = "IN_REPAIR"  # Undergoing repairs, assigned or not

    def __str__(self) -> str:
        return self.value


class MissionStatus(str, Enum):
    """
    Status of a mission, derived from its rockets until it ends.
    """
    SCHEDULED = "SCHEDULED"      # No rockets assigned
    PENDING = "PENDING"          # At least one rocket in repair
    IN_PROGRESS = "IN_PROGRESS"  # Rockets assigned, none in repair
    ENDED = "ENDED"              # Terminal

    @property
    def is_terminal(self) -> bool:
        return self is MissionStatus.ENDED

    def __str__(self) -> str:
        return self.value


class EntityKind(str, Enum):
    """Kind of entity a transition was recorded for."""
    ROCKET = "rocket"
    MISSION = "mission"


class TransitionTrigger(str, Enum):
    """What caused a status transition."""
    ASSIGNMENT = "assignment"
    REMOVAL = "removal"
    REPAIR_START = "repair_start"
    REPAIR_COMPLETE = "repair_complete"
    REEVALUATION = "reevaluation"
    FORCED = "forced"
    COMPLETION = "completion"
