"""
Tests for snake draft index math.
"""

import pytest

from draftboard.datamodels import PickDirection
from draftboard.utils.snake_draft import SnakeDraftCalculator, locate


class TestLocate:
    """Test suite for mapping overall picks to board positions."""

    @pytest.fixture
    def calculator(self):
        return SnakeDraftCalculator()

    def test_three_team_two_round_sequence(self, calculator):
        """The 3x2 draft visits slots 0,1,2,2,1,0."""
        assert calculator.pick_order(3, 2) == [0, 1, 2, 2, 1, 0]

    @pytest.mark.parametrize("participant_count", [1, 2, 3, 4, 7, 12])
    def test_round_start_alternates_ends(self, participant_count):
        """First pick of even rounds is slot 0, of odd rounds the last slot."""
        for round_index in range(6):
            position = locate(round_index * participant_count, participant_count)
            if round_index % 2 == 0:
                assert position.participant_slot == 0
            else:
                assert position.participant_slot == participant_count - 1

    @pytest.mark.parametrize("participant_count", [1, 2, 5, 10])
    def test_every_round_visits_each_slot_once(self, participant_count):
        """One full round covers every slot exactly once, in either direction."""
        for round_index in range(4):
            start = round_index * participant_count
            slots = [
                locate(pick, participant_count).participant_slot
                for pick in range(start, start + participant_count)
            ]
            assert sorted(slots) == list(range(participant_count))

    @pytest.mark.parametrize("participant_count", [2, 3, 8])
    def test_round_boundary_turns_back(self, participant_count):
        """Whoever picks last in a round also picks first in the next."""
        for k in range(1, 6):
            last = locate(k * participant_count - 1, participant_count)
            first = locate(k * participant_count, participant_count)
            assert last.participant_slot == first.participant_slot

    def test_position_fields(self, calculator):
        """Round, column and direction are derived from the pick number."""
        position = calculator.locate(5, 4)
        assert position.round == 1
        assert position.column == 1
        assert position.direction == PickDirection.REVERSE
        assert position.participant_slot == 2
        assert position.round_number == 2
        assert position.pick_in_round == 2

    def test_single_participant_always_slot_zero(self, calculator):
        assert {calculator.locate(p, 1).participant_slot for p in range(10)} == {0}

    def test_no_upper_bound(self, calculator):
        """Callers clamp; locate itself accepts picks past the last round."""
        assert calculator.locate(1000, 3).round == 333

    def test_locate_is_deterministic(self, calculator):
        assert calculator.locate(17, 5) == calculator.locate(17, 5)

    @pytest.mark.parametrize("pick,count", [(-1, 3), (0, 0), (4, -2)])
    def test_invalid_arguments(self, calculator, pick, count):
        with pytest.raises(ValueError):
            calculator.locate(pick, count)


class TestSlotHelpers:
    """Test suite for the per-slot helpers built on locate."""

    @pytest.fixture
    def calculator(self):
        return SnakeDraftCalculator()

    def test_overall_pick_for_inverts_locate(self, calculator):
        for pick in range(4 * 5):
            position = calculator.locate(pick, 4)
            assert calculator.overall_pick_for(position.round, position.participant_slot, 4) == pick

    def test_overall_pick_for_rejects_bad_slot(self, calculator):
        with pytest.raises(ValueError):
            calculator.overall_pick_for(0, 4, 4)

    def test_picks_for_slot(self, calculator):
        """Slot 0 of a 4-team draft picks 1st, 8th and 9th overall."""
        assert calculator.picks_for_slot(0, 4, 3) == [0, 7, 8]
        assert calculator.picks_for_slot(3, 4, 3) == [3, 4, 11]

    def test_picks_until_slot_turn(self, calculator):
        assert calculator.picks_until_slot_turn(0, 0, 4, 3) == 0
        assert calculator.picks_until_slot_turn(1, 0, 4, 3) == 6
        assert calculator.picks_until_slot_turn(3, 3, 4, 3) == 0
        assert calculator.picks_until_slot_turn(5, 3, 4, 3) == 6

    def test_picks_until_slot_turn_none_when_done(self, calculator):
        assert calculator.picks_until_slot_turn(9, 0, 4, 3) is None
