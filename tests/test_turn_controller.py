"""
Tests for turn progression.
"""

import pytest

from draftboard.datamodels import TurnPhase, TurnState
from draftboard.engine.turn_controller import TurnController
from draftboard.errors import DraftRuleViolation

from .conftest import make_config


class TestTurnController:

    @pytest.fixture
    def controller(self):
        return TurnController()

    def test_start(self, controller, config):
        state = controller.start(config)
        assert state == TurnState(current_pick=0, total_picks=6)
        assert state.phase == TurnPhase.IN_PROGRESS

    def test_full_draft_scenario(self, controller, config):
        """3 teams x 2 rounds: six advances complete the draft, a seventh is ignored."""
        state = controller.start(config)
        seen = []
        for _ in range(6):
            seen.append(controller.current_participant(state, config).display_name)
            state, advanced = controller.advance(state, state.current_pick)
            assert advanced

        assert seen == ["Team 0", "Team 1", "Team 2", "Team 2", "Team 1", "Team 0"]
        assert state.current_pick == 6
        assert state.phase == TurnPhase.COMPLETE

        after, advanced = controller.advance(state, 6)
        assert not advanced
        assert after == state

    def test_advance_is_monotonic_and_bounded(self, controller):
        config = make_config(team_count=4, round_count=3)
        state = controller.start(config)
        previous = state.current_pick
        for _ in range(config.total_picks):
            state, _ = controller.advance(state, state.current_pick)
            assert state.current_pick == previous + 1
            previous = state.current_pick
        assert state.current_pick == state.total_picks == 12

    def test_stale_completion_is_ignored(self, controller, config):
        state = controller.start(config)
        state, _ = controller.advance(state, 0)

        again, advanced = controller.advance(state, 0)
        assert not advanced
        assert again.current_pick == 1

    def test_out_of_order_completion_is_ignored(self, controller, config):
        state = controller.start(config)
        after, advanced = controller.advance(state, 3)
        assert not advanced
        assert after.current_pick == 0

    def test_is_active(self, controller, config):
        state = controller.start(config)
        assert controller.is_active(state, 0)
        assert not controller.is_active(state, 1)
        assert not controller.is_active(state, -1)

        done = TurnState(current_pick=6, total_picks=6)
        assert not controller.is_active(done, 6)

    def test_no_current_participant_when_complete(self, controller, config):
        done = TurnState(current_pick=6, total_picks=6)
        with pytest.raises(DraftRuleViolation):
            controller.current_participant(done, config)

    def test_current_position(self, controller, config):
        state = TurnState(current_pick=4, total_picks=6)
        position = controller.current_position(state, config)
        assert position.round == 1
        assert position.participant_slot == 1

    def test_complete_percentage(self):
        assert TurnState(current_pick=3, total_picks=6).complete_percentage == 50.0
        assert TurnState(current_pick=6, total_picks=6).picks_remaining == 0
