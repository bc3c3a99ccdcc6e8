"""
Unit tests for Mission.

Tests reevaluation, forced status, membership and completion.
"""

import pytest

from dragonfleet.core.enums import MissionStatus, RocketStatus
from dragonfleet.core.mission import Mission
from dragonfleet.errors import (
    AlreadyAssignedError,
    ForcedEndError,
    InvalidMissionStatusError,
    MissionAlreadyExistsError,
    MissionEndedError,
    NotPartOfMissionError,
    RequiredValueError,
)
from tests.conftest import assert_mirrored


@pytest.fixture
def two_rockets(fleet):
    """Mission with two healthy rockets assigned."""
    mission = fleet.add_mission("Starlink-1")
    first = fleet.add_rocket("Falcon 9")
    second = fleet.add_rocket("Falcon Heavy")
    mission.assign_rocket(first)
    mission.assign_rocket(second)
    return mission, first, second


class TestMissionCreation:
    """Test Mission creation."""

    def test_initial_state(self, fleet):
        """New mission is SCHEDULED with no rockets."""
        mission = fleet.add_mission("Starlink-1")
        assert mission.status == MissionStatus.SCHEDULED
        assert mission.assigned_rockets == frozenset()
        assert mission.number_of_assigned_rockets == 0

    def test_none_name_rejected(self, fleet):
        with pytest.raises(RequiredValueError):
            Mission(None, fleet)

    def test_duplicate_name_rejected(self, fleet):
        fleet.add_mission("Starlink-1")
        with pytest.raises(MissionAlreadyExistsError):
            fleet.add_mission("Starlink-1")

    def test_str(self, two_rockets):
        """String form is '<name> - <status> - Dragons: <count>'."""
        mission, _, _ = two_rockets
        assert str(mission) == "Starlink-1 - IN_PROGRESS - Dragons: 2"

    def test_equal_by_name(self, fleet):
        from dragonfleet.core.fleet import Fleet
        assert fleet.add_mission("M") == Fleet().add_mission("M")


class TestReevaluation:
    """Test reevaluate_status priority order."""

    def test_empty_is_scheduled(self, fleet):
        mission = fleet.add_mission("Starlink-1")
        mission.force_status(MissionStatus.IN_PROGRESS)
        mission.reevaluate_status()
        assert mission.status == MissionStatus.SCHEDULED

    def test_any_repair_is_pending(self, two_rockets):
        """One rocket in repair is enough for PENDING."""
        mission, first, _ = two_rockets
        first.put_in_repair()
        mission.reevaluate_status()
        assert mission.status == MissionStatus.PENDING

    def test_healthy_is_in_progress(self, two_rockets):
        mission, _, _ = two_rockets
        mission.reevaluate_status()
        assert mission.status == MissionStatus.IN_PROGRESS

    def test_idempotent(self, two_rockets):
        """Reevaluating twice gives the same status."""
        mission, first, _ = two_rockets
        first.put_in_repair()
        mission.reevaluate_status()
        once = mission.status
        mission.reevaluate_status()
        assert mission.status == once

    def test_ended_is_sticky(self, two_rockets):
        """Reevaluation never leaves ENDED."""
        mission, _, _ = two_rockets
        mission.complete()
        mission.reevaluate_status()
        assert mission.status == MissionStatus.ENDED

    def test_reevaluation_corrects_forced_status(self, two_rockets):
        """A forced status is replaced by the computed one on reevaluation."""
        mission, _, _ = two_rockets
        mission.force_status(MissionStatus.PENDING)
        assert mission.status == MissionStatus.PENDING

        mission.reevaluate_status()

        assert mission.status == MissionStatus.IN_PROGRESS


class TestForceStatus:
    """Test force_status independently of reevaluation."""

    def test_force_ignores_rockets(self, two_rockets):
        """Forcing PENDING does not look at rocket health."""
        mission, first, second = two_rockets
        mission.force_status(MissionStatus.PENDING)
        assert mission.status == MissionStatus.PENDING
        assert first.status == RocketStatus.IN_SPACE
        assert second.status == RocketStatus.IN_SPACE

    def test_repair_forces_even_if_others_healthy(self, two_rockets):
        """Repair pushes PENDING regardless of the other rocket."""
        mission, first, second = two_rockets
        first.put_in_repair()
        assert mission.status == MissionStatus.PENDING
        assert second.status == RocketStatus.IN_SPACE

    def test_force_none_rejected(self, fleet):
        with pytest.raises(RequiredValueError):
            fleet.add_mission("M").force_status(None)

    def test_force_on_ended_rejected(self, two_rockets):
        mission, _, _ = two_rockets
        mission.complete()
        with pytest.raises(MissionEndedError):
            mission.force_status(MissionStatus.PENDING)

    def test_force_ended_rejected(self, two_rockets):
        """ENDED is only reachable through complete()."""
        mission, _, _ = two_rockets
        with pytest.raises(ForcedEndError):
            mission.force_status(MissionStatus.ENDED)
        assert mission.status == MissionStatus.IN_PROGRESS

    def test_forced_transition_recorded(self, two_rockets):
        mission, first, _ = two_rockets
        first.put_in_repair()
        event = mission.fleet.log.events(entity_name="Starlink-1")[-1]
        assert event.trigger == "forced"
        assert event.to_status == "PENDING"
        assert "Falcon 9" in event.reason


class TestAssignment:
    """Test Mission.assign_rocket."""

    def test_assign_starts_mission(self, starlink):
        """Assigning a rocket makes the mission IN_PROGRESS and the rocket IN_SPACE."""
        mission, rocket = starlink
        mission.assign_rocket(rocket)
        assert mission.status == MissionStatus.IN_PROGRESS
        assert rocket.status == RocketStatus.IN_SPACE
        assert_mirrored(mission.fleet)

    def test_assign_rocket_in_repair_is_pending(self, starlink):
        """A rocket already in repair makes the mission PENDING."""
        mission, rocket = starlink
        rocket.put_in_repair()
        mission.assign_rocket(rocket)
        assert mission.status == MissionStatus.PENDING
        assert rocket.status == RocketStatus.IN_REPAIR

    def test_assign_twice(self, starlink):
        """Assigning the same rocket again keeps one membership."""
        mission, rocket = starlink
        mission.assign_rocket(rocket)
        mission.assign_rocket(rocket)
        assert mission.number_of_assigned_rockets == 1
        assert mission.status == MissionStatus.IN_PROGRESS
        assert_mirrored(mission.fleet)

    def test_assign_to_ended_mission(self, fleet, starlink):
        mission, rocket = starlink
        mission.assign_rocket(rocket)
        mission.complete()

        with pytest.raises(MissionEndedError) as exc_info:
            mission.assign_rocket(fleet.add_rocket("Falcon Heavy"))

        assert str(exc_info.value) == "Cannot modify mission 'Starlink-1'. It has 'ENDED' status."

    def test_assign_rocket_of_other_mission(self, fleet, starlink):
        """Rocket on another mission cannot join; nothing changes."""
        mission, rocket = starlink
        other = fleet.add_mission("Transit")
        other.assign_rocket(rocket)

        with pytest.raises(AlreadyAssignedError):
            mission.assign_rocket(rocket)

        assert mission.status == MissionStatus.SCHEDULED
        assert rocket.assigned_mission == other
        assert_mirrored(fleet)

    def test_can_assign_none(self, starlink):
        mission, _ = starlink
        with pytest.raises(RequiredValueError):
            mission.can_assign_rocket(None)

    def test_has_rocket(self, starlink):
        mission, rocket = starlink
        assert not mission.has_rocket(rocket)
        mission.assign_rocket(rocket)
        assert mission.has_rocket(rocket)


class TestRemoval:
    """Test Mission.remove_rocket."""

    def test_remove_one_of_two(self, two_rockets):
        """One healthy rocket left keeps the mission IN_PROGRESS."""
        mission, first, second = two_rockets
        mission.remove_rocket(first)
        assert mission.status == MissionStatus.IN_PROGRESS
        assert first.status == RocketStatus.ON_GROUND
        assert not first.is_assigned
        assert_mirrored(mission.fleet)

    def test_remove_both(self, two_rockets):
        """Removing every rocket brings the mission back to SCHEDULED."""
        mission, first, second = two_rockets
        mission.remove_rocket(first)
        mission.remove_rocket(second)
        assert mission.status == MissionStatus.SCHEDULED
        assert_mirrored(mission.fleet)

    def test_remove_repaired_rocket_unblocks(self, two_rockets):
        """Removing the rocket in repair brings the mission back IN_PROGRESS."""
        mission, first, second = two_rockets
        first.put_in_repair()
        mission.remove_rocket(first)
        assert mission.status == MissionStatus.IN_PROGRESS
        assert first.status == RocketStatus.IN_REPAIR

    def test_remove_non_member(self, fleet, starlink):
        mission, rocket = starlink
        with pytest.raises(NotPartOfMissionError) as exc_info:
            mission.remove_rocket(rocket)
        assert str(exc_info.value) == "Rocket 'Falcon 9' is not part of mission 'Starlink-1'."

    def test_remove_none(self, starlink):
        mission, _ = starlink
        with pytest.raises(RequiredValueError):
            mission.remove_rocket(None)


class TestCompletion:
    """Test Mission.complete."""

    def test_complete_detaches_rockets(self, two_rockets):
        """Ending a mission detaches every rocket."""
        mission, first, second = two_rockets
        mission.complete()

        assert mission.status == MissionStatus.ENDED
        assert mission.number_of_assigned_rockets == 0
        for rocket in (first, second):
            assert rocket.assigned_mission is None
            assert rocket.status == RocketStatus.ON_GROUND
        assert_mirrored(mission.fleet)

    def test_complete_keeps_repair_status(self, two_rockets):
        """A detached rocket in repair stays IN_REPAIR."""
        mission, first, second = two_rockets
        second.put_in_repair()
        mission.force_status(MissionStatus.IN_PROGRESS)

        mission.complete()

        assert second.status == RocketStatus.IN_REPAIR
        assert second.assigned_mission is None
        assert first.status == RocketStatus.ON_GROUND
        assert_mirrored(mission.fleet)

    def test_complete_scheduled(self, fleet):
        mission = fleet.add_mission("Starlink-1")
        with pytest.raises(InvalidMissionStatusError) as exc_info:
            mission.complete()
        assert exc_info.value.current_status == MissionStatus.SCHEDULED
        assert exc_info.value.required_status == MissionStatus.IN_PROGRESS
        assert str(exc_info.value) == (
            "Mission 'Starlink-1' has status 'SCHEDULED', but 'IN_PROGRESS' was expected."
        )

    def test_complete_pending(self, two_rockets):
        mission, first, _ = two_rockets
        first.put_in_repair()
        with pytest.raises(InvalidMissionStatusError):
            mission.complete()

    def test_complete_twice(self, two_rockets):
        mission, _, _ = two_rockets
        mission.complete()
        with pytest.raises(InvalidMissionStatusError) as exc_info:
            mission.complete()
        assert str(exc_info.value) == (
            "Mission 'Starlink-1' has status 'ENDED', but 'IN_PROGRESS' was expected."
        )

    def test_rockets_reusable_after_end(self, fleet, two_rockets):
        """Detached rockets can join another mission."""
        mission, first, _ = two_rockets
        mission.complete()
        other = fleet.add_mission("Transit")
        other.assign_rocket(first)
        assert other.status == MissionStatus.IN_PROGRESS
        assert_mirrored(fleet)


class TestRepairScenario:
    """Repair round trip on an assigned rocket."""

    def test_repair_round_trip(self, starlink):
        mission, rocket = starlink
        mission.assign_rocket(rocket)

        rocket.put_in_repair()
        assert mission.status == MissionStatus.PENDING
        assert rocket.status == RocketStatus.IN_REPAIR

        rocket.complete_repair()
        assert rocket.status == RocketStatus.IN_SPACE
        assert mission.status == MissionStatus.IN_PROGRESS
        assert_mirrored(mission.fleet)
