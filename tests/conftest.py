"""
Fleet Test Configuration and Fixtures
"""

import pytest

from dragonfleet.bootstrap.config import FleetConfig, reset_config
from dragonfleet.core.fleet import Fleet
from dragonfleet.repository import DragonRepository


def assert_mirrored(fleet: Fleet) -> None:
    """Every rocket/mission reference is matched on the other side."""
    assert fleet.check_consistency() == []
    for mission in fleet.missions:
        for rocket in mission.assigned_rockets:
            assert rocket.assigned_mission == mission
    for rocket in fleet.rockets:
        if rocket.is_assigned:
            assert rocket.assigned_mission.has_rocket(rocket)


@pytest.fixture
def fleet():
    """Empty fleet."""
    return Fleet()


@pytest.fixture
def starlink(fleet):
    """Mission 'Starlink-1' with unassigned rocket 'Falcon 9'."""
    mission = fleet.add_mission("Starlink-1")
    rocket = fleet.add_rocket("Falcon 9")
    return mission, rocket


@pytest.fixture
def repository():
    """Repository checking consistency after every mutation."""
    return DragonRepository(FleetConfig(verify_consistency=True))


@pytest.fixture(autouse=True)
def _clean_config():
    reset_config()
    yield
    reset_config()
