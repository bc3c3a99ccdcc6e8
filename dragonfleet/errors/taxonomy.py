"""
errors/taxonomy.py - Fleet error taxonomy

Every failed precondition of the rocket/mission state machine and of the
name-indexed repository is a named DragonError subclass with a stable code.
A missing or impossible argument is a programming error and raises a
FleetValueError subclass (a ValueError) instead.
"""

from __future__ import annotations
from typing import Any, Dict, Optional
from enum import Enum


class ErrorCategory(Enum):
    """Error categories."""
    ASSIGNMENT = "assignment"    # Rocket/mission membership rules
    STATUS = "status"            # Operation needs a specific prior status
    REGISTRY = "registry"        # Name-keyed creation and lookup
    CONSISTENCY = "consistency"  # Mirrored references disagree


class ErrorSeverity(Enum):
    """Error severity levels."""
    ERROR = "error"
    CRITICAL = "critical"


# =============================================================================
# BASE ERROR CLASSES
# =============================================================================

class DragonError(Exception):
    """
    Base class for fleet domain errors.

    Provides structured error information with:
    - Error code for programmatic handling
    - Human-readable message
    - Detailed context (entity names, statuses) for debugging
    """

    code: str = "DRG_000"
    category: ErrorCategory = ErrorCategory.ASSIGNMENT
    severity: ErrorSeverity = ErrorSeverity.ERROR

    def __init__(
        self,
        message: str = "",
        *,
        details: Optional[Dict[str, Any]] = None,
        **kwargs,
    ):
        self.message = message or self.__class__.__doc__ or "Fleet error"
        self.details = details or {}
        self.details.update(kwargs)

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for CLI/JSON output."""
        return {
            "code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
            "message": self.message,
            "details": self.details,
        }


class FleetValueError(ValueError):
    """An argument the state machine can never accept; a caller bug."""


class RequiredValueError(FleetValueError):
    """A required argument (rocket, mission, status, name) was None."""


class ForeignFleetError(FleetValueError):
    """Rocket and mission are registered in different fleets."""

    def __init__(self, rocket_name: str, mission_name: str):
        super().__init__(
            f"Mission '{mission_name}' belongs to a different fleet than rocket '{rocket_name}'"
        )
        self.rocket_name = rocket_name
        self.mission_name = mission_name


class ForcedEndError(FleetValueError):
    """ENDED was requested through force_status instead of complete()."""

    def __init__(self, mission_name: str):
        super().__init__(f"Mission '{mission_name}' can only reach ENDED through complete()")
        self.mission_name = mission_name


def require(value: Any, what: str) -> Any:
    """Return value, raising RequiredValueError when it is None."""
    if value is None:
        raise RequiredValueError(f"{what} cannot be None")
    return value


def _status_name(status: Any) -> str:
    return getattr(status, "value", str(status))


# =============================================================================
# ASSIGNMENT ERRORS
# =============================================================================

class AlreadyAssignedError(DragonError):
    """Rocket is already assigned to a different mission."""

    code = "DRG_101"
    category = ErrorCategory.ASSIGNMENT

    def __init__(self, rocket_name: str, mission_name: str):
        super().__init__(
            f"Rocket '{rocket_name}' is already assigned to mission '{mission_name}'.",
            rocket=rocket_name,
            mission=mission_name,
        )
        self.rocket_name = rocket_name
        self.mission_name = mission_name


class NotPartOfMissionError(DragonError):
    """Rocket is not a member of the mission it should be removed from."""

    code = "DRG_102"
    category = ErrorCategory.ASSIGNMENT

    def __init__(self, rocket_name: str, mission_name: str):
        super().__init__(
            f"Rocket '{rocket_name}' is not part of mission '{mission_name}'.",
            rocket=rocket_name,
            mission=mission_name,
        )
        self.rocket_name = rocket_name
        self.mission_name = mission_name


class MissionEndedError(DragonError):
    """Mutation attempted on a mission in the terminal ENDED status."""

    code = "DRG_103"
    category = ErrorCategory.STATUS

    def __init__(self, mission_name: str):
        super().__init__(
            f"Cannot modify mission '{mission_name}'. It has 'ENDED' status.",
            mission=mission_name,
        )
        self.mission_name = mission_name


# =============================================================================
# STATUS ERRORS
# =============================================================================

class InvalidStatusError(DragonError):
    """Operation required a status the entity does not have."""

    code = "DRG_104"
    category = ErrorCategory.STATUS
    entity_kind: str = "Entity"

    def __init__(self, entity_name: str, current_status: Any, required_status: Any):
        current = _status_name(current_status)
        required = _status_name(required_status)
        super().__init__(
            f"{self.entity_kind} '{entity_name}' has status '{current}', "
            f"but '{required}' was expected.",
            entity=entity_name,
            current_status=current,
            required_status=required,
        )
        self.entity_name = entity_name
        self.current_status = current_status
        self.required_status = required_status


class InvalidRocketStatusError(InvalidStatusError):
    """Rocket is not in the status the operation requires."""

    entity_kind = "Rocket"


class InvalidMissionStatusError(InvalidStatusError):
    """Mission is not in the status the operation requires."""

    entity_kind = "Mission"


# =============================================================================
# REGISTRY ERRORS
# =============================================================================

class AlreadyExistsError(DragonError):
    """An entity with this name is already registered."""

    code = "DRG_200"
    category = ErrorCategory.REGISTRY


class RocketAlreadyExistsError(AlreadyExistsError):
    """A rocket with this name is already registered."""

    code = "DRG_201"

    def __init__(self, rocket_name: str):
        super().__init__(f"Rocket '{rocket_name}' already exists.", rocket=rocket_name)
        self.rocket_name = rocket_name


class MissionAlreadyExistsError(AlreadyExistsError):
    """A mission with this name is already registered."""

    code = "DRG_202"

    def __init__(self, mission_name: str):
        super().__init__(f"Mission '{mission_name}' already exists.", mission=mission_name)
        self.mission_name = mission_name


class NotFoundError(DragonError):
    """No entity is registered under this name."""

    code = "DRG_300"
    category = ErrorCategory.REGISTRY


class RocketNotFoundError(NotFoundError):
    """No rocket is registered under this name."""

    code = "DRG_301"

    def __init__(self, rocket_name: str):
        super().__init__(f"Rocket '{rocket_name}' not found.", rocket=rocket_name)
        self.rocket_name = rocket_name


class MissionNotFoundError(NotFoundError):
    """No mission is registered under this name."""

    code = "DRG_302"

    def __init__(self, mission_name: str):
        super().__init__(f"Mission '{mission_name}' not found.", mission=mission_name)
        self.mission_name = mission_name


# =============================================================================
# CONSISTENCY ERRORS
# =============================================================================

class ConsistencyError(DragonError):
    """Rocket and mission references disagree."""

    code = "DRG_401"
    category = ErrorCategory.CONSISTENCY
    severity = ErrorSeverity.CRITICAL

    def __init__(self, violations):
        violations = list(violations)
        super().__init__(
            "Fleet references are inconsistent: " + "; ".join(violations),
            violations=violations,
        )
        self.violations = violations
