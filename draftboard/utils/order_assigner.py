"""
Randomized draft-order assignment.

Participants are revealed one at a time and placed in a draft position,
so the order is built incrementally rather than shuffled in one go.
"""

import random
from typing import AbstractSet, Optional

from ..datamodels.draft_state import OrderAssignment
from ..errors import OrderAssignmentError


class RandomOrderAssigner:
    """
    Builds a random bijection from draft positions to participants.

    Candidates are drawn uniformly from the participants not yet placed,
    by rejection sampling against the already-chosen set, so no participant
    can ever be placed twice.
    """

    def __init__(self, participant_count: int, rng: Optional[random.Random] = None):
        if participant_count < 1:
            raise ValueError("Participant count must be >= 1")
        self.participant_count = participant_count
        self.rng = rng or random.Random()

    def empty_assignment(self) -> OrderAssignment:
        return OrderAssignment(size=self.participant_count)

    def next_candidate(self, already_chosen: AbstractSet[int]) -> int:
        """
        Pick a participant index not in already_chosen.

        Raises:
            OrderAssignmentError: every participant has been chosen
        """
        if all(index in already_chosen for index in range(self.participant_count)):
            raise OrderAssignmentError("All participants have already been placed")

        candidate = self.rng.randint(0, self.participant_count - 1)
        while candidate in already_chosen:
            candidate = self.rng.randint(0, self.participant_count - 1)
        return candidate

    def assign(self, slot: int, participant_index: int,
               assignment: OrderAssignment) -> OrderAssignment:
        """
        Record participant_index at slot and return the updated assignment.

        Raises:
            OrderAssignmentError: slot out of range or taken, or participant
                already placed
        """
        if not 0 <= slot < self.participant_count:
            raise OrderAssignmentError(f"Pick #{slot + 1} does not exist")
        if not 0 <= participant_index < self.participant_count:
            raise OrderAssignmentError(f"Unknown participant {participant_index}")
        if assignment.is_filled(slot):
            raise OrderAssignmentError(f"Pick #{slot + 1} is already taken")
        if participant_index in assignment.chosen:
            raise OrderAssignmentError(f"Participant {participant_index} is already placed")

        return assignment.with_slot(slot, participant_index)

    @staticmethod
    def is_complete(assignment: OrderAssignment) -> bool:
        return assignment.is_complete
