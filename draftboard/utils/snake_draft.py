"""
Snake draft order calculation utilities.

Handles the index math of determining who picks when in a snake draft,
which everything else on the board (turn gating, timers, team cards)
is derived from.
"""

from typing import List, Optional

from ..datamodels.draft_state import PickDirection, PickPosition


class SnakeDraftCalculator:
    """
    Utility class for snake draft order calculations.

    Snake drafts reverse direction each round (slots are 0-based):
    Round 1: 0, 1, 2, 3
    Round 2: 3, 2, 1, 0
    Round 3: 0, 1, 2, 3

    The slot picking last in one round picks first in the next.
    All pick numbers here are zero-based overall picks.
    """

    def locate(self, overall_pick: int, participant_count: int) -> PickPosition:
        """
        Map an overall pick number to its place on the board.

        Args:
            overall_pick: Overall pick number (0-based, no upper bound)
            participant_count: Number of draft positions

        Returns:
            PickPosition with round, column, direction and owning slot
        """
        if participant_count < 1:
            raise ValueError("Participant count must be >= 1")
        if overall_pick < 0:
            raise ValueError("Pick number must be >= 0")

        round_index, column = divmod(overall_pick, participant_count)

        if round_index % 2 == 0:
            direction = PickDirection.FORWARD
            slot = column
        else:
            direction = PickDirection.REVERSE
            slot = participant_count - 1 - column

        return PickPosition(
            overall_pick=overall_pick,
            round=round_index,
            column=column,
            direction=direction,
            participant_slot=slot,
        )

    def overall_pick_for(self, round_index: int, slot: int, participant_count: int) -> int:
        """Inverse of locate: the overall pick a slot makes in a given round."""
        if not 0 <= slot < participant_count:
            raise ValueError(f"Slot {slot} outside 0..{participant_count - 1}")
        if round_index < 0:
            raise ValueError("Round must be >= 0")

        column = slot if round_index % 2 == 0 else participant_count - 1 - slot
        return round_index * participant_count + column

    def pick_order(self, participant_count: int, round_count: int) -> List[int]:
        """Owning slot for every overall pick of the draft."""
        return [
            self.locate(pick, participant_count).participant_slot
            for pick in range(participant_count * round_count)
        ]

    def picks_for_slot(self, slot: int, participant_count: int, round_count: int) -> List[int]:
        """Every overall pick owned by a slot, one per round."""
        return [
            self.overall_pick_for(round_index, slot, participant_count)
            for round_index in range(round_count)
        ]

    def picks_until_slot_turn(self,
                              current_pick: int,
                              slot: int,
                              participant_count: int,
                              round_count: int) -> Optional[int]:
        """
        Calculate how many picks until a slot is on the clock.

        Returns 0 when the slot is picking now and None when it has no
        picks left in the draft.
        """
        for pick in self.picks_for_slot(slot, participant_count, round_count):
            if pick >= current_pick:
                return pick - current_pick
        return None


_calculator = SnakeDraftCalculator()


def locate(overall_pick: int, participant_count: int) -> PickPosition:
    """Module-level shortcut for SnakeDraftCalculator.locate."""
    return _calculator.locate(overall_pick, participant_count)
