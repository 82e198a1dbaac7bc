"""
Turn progression for a running draft.

The controller is stateless itself; it operates on immutable TurnState
values, so a session holds exactly one TurnState and swaps it on advance.
"""

import logging
from typing import Optional, Tuple

from ..datamodels.draft_config import DraftConfig
from ..datamodels.draft_state import PickPosition, TurnState
from ..datamodels.participant import Participant
from ..errors import DraftRuleViolation
from ..utils.snake_draft import SnakeDraftCalculator

logger = logging.getLogger(__name__)


class TurnController:
    """
    Drives the pick counter through a snake draft.

    States: Idle (no TurnState yet) -> InProgress -> Complete.
    """

    def __init__(self, calculator: Optional[SnakeDraftCalculator] = None):
        self.calculator = calculator or SnakeDraftCalculator()

    def start(self, config: DraftConfig) -> TurnState:
        if config.total_picks == 0:
            raise DraftRuleViolation("A draft needs at least one pick")
        return TurnState(current_pick=0, total_picks=config.total_picks)

    def current_position(self, state: TurnState, config: DraftConfig) -> PickPosition:
        if state.is_complete:
            raise DraftRuleViolation("Draft is complete; nobody is on the clock")
        return self.calculator.locate(state.current_pick, config.participant_count)

    def current_participant(self, state: TurnState, config: DraftConfig) -> Participant:
        position = self.current_position(state, config)
        return config.participants[position.participant_slot]

    def advance(self, state: TurnState, completed_pick: int) -> Tuple[TurnState, bool]:
        """
        Move past completed_pick if it is the pick on the clock.

        Completions for any other pick (stale, duplicate or out of order)
        leave the state unchanged and return False.
        """
        if state.is_complete or completed_pick != state.current_pick:
            logger.debug(
                f"Ignoring completion for pick {completed_pick} (current {state.current_pick})"
            )
            return state, False

        next_pick = min(state.current_pick + 1, state.total_picks)
        return TurnState(current_pick=next_pick, total_picks=state.total_picks), True

    def is_active(self, state: TurnState, overall_pick: int) -> bool:
        return overall_pick >= 0 and overall_pick == state.current_pick and not state.is_complete
