"""
Draft session state.

One DraftSession owns everything a draft needs: the configuration, the
order assignment built during the reveal, the turn state, the round timer
and the board. Operations either succeed completely or raise a
DraftRuleViolation with the session untouched.
"""

import logging
import random
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from ..datamodels.draft_config import DraftConfig
from ..datamodels.draft_state import (
    CellContent, OrderAssignment, PickPosition, SessionPhase, TurnState
)
from ..errors import OrderAssignmentError, PhaseError
from ..utils.order_assigner import RandomOrderAssigner
from ..utils.snake_draft import SnakeDraftCalculator
from .board import Board
from .round_timer import RoundTimer
from .turn_controller import TurnController

logger = logging.getLogger(__name__)


class DraftSession:

    def __init__(self,
                 session_id: str,
                 config: DraftConfig,
                 rng: Optional[random.Random] = None):
        self.session_id = session_id
        self.entry_config = config
        self.config = config
        self.phase = SessionPhase.ORDER_PICKING

        self.calculator = SnakeDraftCalculator()
        self.controller = TurnController(self.calculator)
        self.assigner = RandomOrderAssigner(config.participant_count, rng)
        self.assignment: OrderAssignment = self.assigner.empty_assignment()
        self.candidate: Optional[int] = None

        self.turn_state: Optional[TurnState] = None
        self.timer: Optional[RoundTimer] = None
        self.board: Optional[Board] = None

        self.created_at = datetime.now(timezone.utc)
        self.started_at: Optional[datetime] = None
        self.updated_at = self.created_at
        self._timer_reset_hooks: List[Callable[[], None]] = []

    def _require(self, phase: SessionPhase) -> None:
        if self.phase != phase:
            raise PhaseError(f"Action needs phase {phase.value}, session is {self.phase.value}")

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)

    def on_timer_reset(self, hook: Callable[[], None]) -> None:
        self._timer_reset_hooks.append(hook)

    def remove_timer_reset_hook(self, hook: Callable[[], None]) -> None:
        if hook in self._timer_reset_hooks:
            self._timer_reset_hooks.remove(hook)

    # Order reveal

    def reveal_candidate(self) -> int:
        """Return the participant waiting to be placed, drawing one if needed."""
        self._require(SessionPhase.ORDER_PICKING)
        if self.candidate is None:
            self.candidate = self.assigner.next_candidate(self.assignment.chosen)
            self._touch()
        return self.candidate

    def place_candidate(self, slot: int) -> OrderAssignment:
        """Put the revealed participant at slot and reveal the next one."""
        self._require(SessionPhase.ORDER_PICKING)
        if self.candidate is None:
            raise OrderAssignmentError("No participant has been revealed")

        self.assignment = self.assigner.assign(slot, self.candidate, self.assignment)
        logger.info(
            f"Session {self.session_id}: "
            f"{self.entry_config.participants[self.candidate].display_name} takes pick #{slot + 1}"
        )

        if self.assigner.is_complete(self.assignment):
            self.candidate = None
        else:
            self.candidate = self.assigner.next_candidate(self.assignment.chosen)
        self._touch()
        return self.assignment

    # Drafting

    def start_drafting(self) -> TurnState:
        self._require(SessionPhase.ORDER_PICKING)
        if not self.assigner.is_complete(self.assignment):
            raise OrderAssignmentError("Every draft position must be filled before starting")

        self.config = self.entry_config.with_participants(
            self.assignment.ordered(self.entry_config.participants)
        )
        self.turn_state = self.controller.start(self.config)
        self.timer = RoundTimer(self.config.turn_duration_seconds)
        self.board = Board(self.config, self.controller, self.calculator)
        self.phase = SessionPhase.DRAFTING
        self.started_at = datetime.now(timezone.utc)
        self._touch()

        logger.info(
            f"Session {self.session_id}: draft '{self.config.draft_title}' started, "
            f"{self.config.total_picks} picks"
        )
        return self.turn_state

    def current_position(self) -> Optional[PickPosition]:
        if self.turn_state is None or self.turn_state.is_complete:
            return None
        return self.controller.current_position(self.turn_state, self.config)

    def submit_pick(self, overall_pick: int, content: CellContent) -> bool:
        """
        Fill the cell for overall_pick and advance the turn.

        Raises PickRejected if the cell is not on the clock; returns whether
        the turn advanced.
        """
        self._require(SessionPhase.DRAFTING)
        self.board.fill(overall_pick, content, self.turn_state)

        self.turn_state, advanced = self.controller.advance(self.turn_state, overall_pick)
        if advanced:
            self.timer.reset()
            for hook in list(self._timer_reset_hooks):
                hook()
            if self.turn_state.is_complete:
                self.phase = SessionPhase.COMPLETE
                logger.info(f"Session {self.session_id}: draft complete")
        self._touch()
        return advanced

    def clear_cell(self, overall_pick: int) -> None:
        if self.phase not in (SessionPhase.DRAFTING, SessionPhase.COMPLETE):
            raise PhaseError("The board does not exist until the draft starts")
        self.board.clear(overall_pick)
        self._touch()

    def tick(self) -> int:
        """Advance the timer by one second while a pick is on the clock."""
        if self.phase != SessionPhase.DRAFTING:
            return self.timer.remaining if self.timer else 0
        return self.timer.tick()

    # Views

    def participants_view(self) -> list:
        teams = []
        for slot, participant in enumerate(self.config.participants):
            entry: Dict[str, Any] = {
                "slot": slot,
                "display_name": participant.display_name,
                "owner_name": participant.owner_name,
            }
            if self.board is not None:
                entry["picks_made"] = self.board.picks_made(slot)
                entry["picks_until_turn"] = self.calculator.picks_until_slot_turn(
                    self.turn_state.current_pick, slot,
                    self.config.participant_count, self.config.round_count
                )
            teams.append(entry)
        return teams

    def order_view(self) -> Dict[str, Any]:
        participants = self.entry_config.participants
        return {
            "candidate": self.candidate,
            "candidate_name": (participants[self.candidate].display_name
                               if self.candidate is not None else None),
            "slots": [
                {
                    "slot": slot,
                    "participant_index": self.assignment.slots.get(slot),
                    "display_name": (participants[self.assignment.slots[slot]].display_name
                                     if self.assignment.is_filled(slot) else None),
                }
                for slot in range(self.assignment.size)
            ],
            "filled": self.assignment.filled_slots,
            "complete": self.assignment.is_complete,
        }

    def snapshot(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "session_id": self.session_id,
            "phase": self.phase.value,
            "draft_title": self.config.draft_title,
            "round_count": self.config.round_count,
            "turn_duration_seconds": self.config.turn_duration_seconds,
            "participants": self.participants_view(),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

        if self.phase == SessionPhase.ORDER_PICKING:
            data["order"] = self.order_view()
            return data

        position = self.current_position()
        data.update({
            "current_pick": self.turn_state.current_pick,
            "total_picks": self.turn_state.total_picks,
            "complete_percentage": self.turn_state.complete_percentage,
            "current_slot": position.participant_slot if position else None,
            "current_round": position.round if position else None,
            "timer": self.timer.to_dict(),
            "started_at": self.started_at.isoformat(),
        })
        return data
