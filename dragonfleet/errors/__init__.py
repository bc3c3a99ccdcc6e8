"""
errors/ - Fleet error taxonomy

Named failure conditions raised by the rocket/mission state machine and
the name-indexed repository.
"""

from .taxonomy import (
    ErrorCategory,
    ErrorSeverity,
    DragonError,
    FleetValueError,
    RequiredValueError,
    ForeignFleetError,
    ForcedEndError,
    require,
    AlreadyAssignedError,
    NotPartOfMissionError,
    MissionEndedError,
    InvalidStatusError,
    InvalidRocketStatusError,
    InvalidMissionStatusError,
    AlreadyExistsError,
    RocketAlreadyExistsError,
    MissionAlreadyExistsError,
    NotFoundError,
    RocketNotFoundError,
    MissionNotFoundError,
    ConsistencyError,
)

__all__ = [
    "ErrorCategory",
    "ErrorSeverity",
    "DragonError",
    "FleetValueError",
    "RequiredValueError",
    "ForeignFleetError",
    "ForcedEndError",
    "require",
    # Assignment / status
    "AlreadyAssignedError",
    "NotPartOfMissionError",
    "MissionEndedError",
    "InvalidStatusError",
    "InvalidRocketStatusError",
    "InvalidMissionStatusError",
    # Registry
    "AlreadyExistsError",
    "RocketAlreadyExistsError",
    "MissionAlreadyExistsError",
    "NotFoundError",
    "RocketNotFoundError",
    "MissionNotFoundError",
    # Consistency
    "ConsistencyError",
]
