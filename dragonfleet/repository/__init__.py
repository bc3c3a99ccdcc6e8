"""
repository/ - Name-keyed repository over a fleet.
"""

from .store import DragonRepository

__all__ = [
    "DragonRepository",
]
