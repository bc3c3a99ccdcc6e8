"""
bootstrap/ - Configuration and logging setup.
"""

from .config import (
    FleetConfig,
    LoggingConfig,
    DragonConfig,
    configure_logging,
    load_config,
    get_config,
    reset_config,
)

__all__ = [
    "FleetConfig",
    "LoggingConfig",
    "DragonConfig",
    "configure_logging",
    "load_config",
    "get_config",
    "reset_config",
]
