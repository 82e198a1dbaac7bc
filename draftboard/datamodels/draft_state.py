"""
Draft state models.

Value objects describing where a draft is: derived pick positions, the
draft-order assignment built during the reveal, the turn counter and the
content of board cells. State objects here are immutable; operations in
``draftboard.engine`` return new instances instead of mutating.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .participant import Participant


class PickDirection(str, Enum):
    FORWARD = "forward"
    REVERSE = "reverse"


class TurnPhase(str, Enum):
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


class SessionPhase(str, Enum):
    ORDER_PICKING = "order_picking"
    DRAFTING = "drafting"
    COMPLETE = "complete"


@dataclass(frozen=True)
class PickPosition:
    """
    Where an overall pick lands on the board.

    ``round`` and ``column`` are zero-based; ``column`` is the position
    within the round in pick order, ``participant_slot`` the draft position
    that owns the pick.
    """
    overall_pick: int
    round: int
    column: int
    direction: PickDirection
    participant_slot: int

    @property
    def round_number(self) -> int:
        return self.round + 1

    @property
    def pick_in_round(self) -> int:
        return self.column + 1


@dataclass(frozen=True)
class OrderAssignment:
    """Partial mapping from draft-position slot to participant index."""
    size: int
    slots: Dict[int, int] = field(default_factory=dict)
    chosen: FrozenSet[int] = frozenset()

    def is_filled(self, slot: int) -> bool:
        return slot in self.slots

    @property
    def filled_slots(self) -> List[int]:
        return sorted(self.slots)

    @property
    def is_complete(self) -> bool:
        return all(slot in self.slots for slot in range(self.size))

    def with_slot(self, slot: int, participant_index: int) -> 'OrderAssignment':
        slots = dict(self.slots)
        slots[slot] = participant_index
        return replace(self, slots=slots, chosen=self.chosen | {participant_index})

    def ordered(self, participants: Sequence[Participant]) -> List[Participant]:
        """Participants in slot order; only valid once complete."""
        return [participants[self.slots[slot]] for slot in range(self.size)]


@dataclass(frozen=True)
class TurnState:
    current_pick: int
    total_picks: int

    @property
    def phase(self) -> TurnPhase:
        if self.current_pick >= self.total_picks:
            return TurnPhase.COMPLETE
        return TurnPhase.IN_PROGRESS

    @property
    def is_complete(self) -> bool:
        return self.phase == TurnPhase.COMPLETE

    @property
    def picks_remaining(self) -> int:
        return self.total_picks - self.current_pick

    @property
    def complete_percentage(self) -> float:
        if self.total_picks == 0:
            return 100.0
        return min(100.0, (self.current_pick / self.total_picks) * 100)


class CellContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    image_url: str = Field(..., description="Image reference pasted into the cell")
    caption: str = Field("", description="Optional title under the image")

    @field_validator('image_url')
    def strip_url(cls, v: str):
        return v.strip()


@dataclass
class Cell:
    round: int
    slot: int
    overall_pick: int
    content: Optional[CellContent] = None

    @property
    def is_filled(self) -> bool:
        return self.content is not None
