"""
Fleet Core Module

Contains the rocket/mission state machine:
- Status enums and the transition log
- Rocket and Mission entities
- Fleet, the store that owns both and checks their references
"""

from dragonfleet.core.enums import (
    RocketStatus,
    MissionStatus,
    EntityKind,
    TransitionTrigger,
)
from dragonfleet.core.state_transitions import (
    TransitionEvent,
    TransitionLog,
    TransitionValidator,
)
from dragonfleet.core.rocket import Rocket
from dragonfleet.core.mission import Mission
from dragonfleet.core.fleet import Fleet

__all__ = [
    "RocketStatus",
    "MissionStatus",
    "EntityKind",
    "TransitionTrigger",
    "TransitionEvent",
    "TransitionLog",
    "TransitionValidator",
    "Rocket",
    "Mission",
    "Fleet",
]
