"""
Unit tests for the text summary and pydantic snapshots.
"""

import pytest

from dragonfleet.core.enums import MissionStatus, RocketStatus
from dragonfleet.reporting import (
    FleetSnapshot,
    MissionSnapshot,
    RocketSnapshot,
    render_summary,
    sort_missions,
)


@pytest.fixture
def populated(fleet):
    """Missions with 0, 1, 1 and 2 rockets plus one unassigned rocket."""
    names = ["Alpha", "Bravo", "Charlie", "Delta"]
    missions = {name: fleet.add_mission(name) for name in names}
    rockets = {name: fleet.add_rocket(name) for name in ["r3", "r1", "r2", "r4", "spare"]}

    missions["Alpha"].assign_rocket(rockets["r1"])
    missions["Charlie"].assign_rocket(rockets["r2"])
    missions["Delta"].assign_rocket(rockets["r4"])
    missions["Delta"].assign_rocket(rockets["r3"])
    return fleet


class TestSorting:
    """Mission ordering."""

    def test_count_then_name_descending(self, populated):
        ordered = [m.name for m in sort_missions(populated.missions)]
        assert ordered == ["Delta", "Charlie", "Alpha", "Bravo"]


class TestRenderSummary:
    """Text summary rendering."""

    def test_render(self, populated):
        populated.get_rocket("r3").put_in_repair()

        assert render_summary(populated.missions) == (
            "- Delta - PENDING - Dragons: 2\n"
            "\t- r3 - IN_REPAIR\n"
            "\t- r4 - IN_SPACE\n"
            "- Charlie - IN_PROGRESS - Dragons: 1\n"
            "\t- r2 - IN_SPACE\n"
            "- Alpha - IN_PROGRESS - Dragons: 1\n"
            "\t- r1 - IN_SPACE\n"
            "- Bravo - SCHEDULED - Dragons: 0\n"
        )

    def test_render_empty(self):
        assert render_summary([]) == ""

    def test_ended_mission_listed_without_rockets(self, fleet):
        mission = fleet.add_mission("Starlink-1")
        mission.assign_rocket(fleet.add_rocket("Falcon 9"))
        mission.complete()
        assert render_summary(fleet.missions) == "- Starlink-1 - ENDED - Dragons: 0\n"


class TestSnapshots:
    """Pydantic snapshot models."""

    def test_fleet_snapshot(self, populated):
        snapshot = FleetSnapshot.from_fleet(populated)

        assert [m.name for m in snapshot.missions] == ["Delta", "Charlie", "Alpha", "Bravo"]
        delta = snapshot.missions[0]
        assert delta.dragons == 2
        assert [r.name for r in delta.rockets] == ["r3", "r4"]
        assert all(r.mission == "Delta" for r in delta.rockets)
        assert [r.name for r in snapshot.unassigned_rockets] == ["spare"]
        assert snapshot.rocket_count == 5

    def test_json_dump_uses_status_names(self, populated):
        data = FleetSnapshot.from_fleet(populated).model_dump(mode="json")
        assert data["missions"][0]["status"] == "IN_PROGRESS"
        assert data["missions"][0]["rockets"][0]["status"] == "IN_SPACE"
        assert data["unassigned_rockets"][0]["mission"] is None

    def test_mission_snapshot_validation(self):
        with pytest.raises(ValueError):
            MissionSnapshot(name="M", status=MissionStatus.SCHEDULED, dragons=-1)

    def test_rocket_snapshot_from_status_string(self):
        snapshot = RocketSnapshot(name="Falcon 9", status="IN_REPAIR")
        assert snapshot.status == RocketStatus.IN_REPAIR
