"""
Fleet State Transitions

Defines the reachable rocket and mission status edges and records every
status change as a TransitionEvent.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, List, Optional, Union
import logging
import uuid

from dragonfleet.core.enums import (
    EntityKind,
    MissionStatus,
    RocketStatus,
    TransitionTrigger,
)

logger = logging.getLogger(__name__)

Status = Union[RocketStatus, MissionStatus]


# ==================== Legal State Transitions ====================
# Maps each status to the statuses it can change to

ROCKET_TRANSITIONS: Dict[RocketStatus, List[RocketStatus]] = {
    RocketStatus.ON_GROUND: [
        RocketStatus.IN_SPACE,
        RocketStatus.IN_REPAIR,
    ],

    RocketStatus.IN_SPACE: [
        RocketStatus.ON_GROUND,
        RocketStatus.IN_REPAIR,
    ],

    RocketStatus.IN_REPAIR: [
        RocketStatus.ON_GROUND,
        RocketStatus.IN_SPACE,
    ],
}

MISSION_TRANSITIONS: Dict[MissionStatus, List[MissionStatus]] = {
    MissionStatus.SCHEDULED: [
        MissionStatus.PENDING,
        MissionStatus.IN_PROGRESS,
    ],

    MissionStatus.PENDING: [
        MissionStatus.SCHEDULED,
        MissionStatus.IN_PROGRESS,
    ],

    MissionStatus.IN_PROGRESS: [
        MissionStatus.SCHEDULED,
        MissionStatus.PENDING,
        MissionStatus.ENDED,
    ],

    # Terminal
    MissionStatus.ENDED: [],
}


# ==================== Transition Event ====================

@dataclass
class TransitionEvent:
    """
    Record of a rocket or mission status change.
    """
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: str = field(default_factory=lambda: datetime.utcnow().isoformat())
    entity_kind: str = ""
    entity_name: str = ""
    from_status: str = ""
    to_status: str = ""
    trigger: str = TransitionTrigger.REEVALUATION.value
    reason: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TransitionEvent":
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})

    def __str__(self) -> str:
        text = f"{self.entity_kind} '{self.entity_name}': {self.from_status} -> {self.to_status} ({self.trigger})"
        if self.reason:
            text += f" - {self.reason}"
        return text


# ==================== Transition Validator ====================

class TransitionValidator:
    """
    Answers whether a status edge is one the state machine normally takes.
    """

    @staticmethod
    def get_valid_transitions(from_status: Status) -> List[Status]:
        """
        Get all valid target statuses from a given status.

        Args:
            from_status: Current rocket or mission status

        Returns:
            List of valid target statuses
        """
        if isinstance(from_status, RocketStatus):
            return ROCKET_TRANSITIONS.get(from_status, [])
        return MISSION_TRANSITIONS.get(from_status, [])

    @staticmethod
    def is_valid_transition(from_status: Status, to_status: Status) -> bool:
        """
        Check if a transition from one status to another is legal.

        Statuses of different entity kinds never form a legal edge.
        """
        if type(from_status) is not type(to_status):
            return False
        return to_status in TransitionValidator.get_valid_transitions(from_status)


# ==================== Transition Log ====================

class TransitionLog:
    """
    Bounded history of status transitions for a fleet.

    A change to the same status is not recorded. Edges outside the legal
    tables are still recorded but logged as warnings.
    """

    def __init__(self, max_history: int = 1000):
        self._events: List[TransitionEvent] = []
        self._max_history = max_history

    def record(
        self,
        entity_kind: EntityKind,
        entity_name: str,
        from_status: Status,
        to_status: Status,
        trigger: TransitionTrigger,
        reason: str = "",
    ) -> Optional[TransitionEvent]:
        if from_status == to_status:
            return None

        if not TransitionValidator.is_valid_transition(from_status, to_status):
            logger.warning(
                f"Unexpected {entity_kind.value} transition for '{entity_name}': "
                f"{from_status.value} -> {to_status.value} ({trigger.value})"
            )

        event = TransitionEvent(
            entity_kind=entity_kind.value,
            entity_name=entity_name,
            from_status=from_status.value,
            to_status=to_status.value,
            trigger=trigger.value,
            reason=reason,
        )
        self._events.append(event)

        if self._max_history and len(self._events) > self._max_history:
            self._events = self._events[-self._max_history:]

        return event

    def events(
        self,
        entity_name: Optional[str] = None,
        entity_kind: Optional[EntityKind] = None,
    ) -> List[TransitionEvent]:
        """Recorded events, oldest first, optionally filtered."""
        result = self._events
        if entity_kind is not None:
            result = [e for e in result if e.entity_kind == entity_kind.value]
        if entity_name is not None:
            result = [e for e in result if e.entity_name == entity_name]
        return list(result)

    @property
    def max_history(self) -> int:
        return self._max_history

    def __len__(self) -> int:
        return len(self._events)
