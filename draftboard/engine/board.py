"""
Draft board cell grid.

The board has one cell per (round, slot). Cells are created the first
time they are touched; the grid only exists for the life of a session.
"""

from typing import Dict, List, Optional, Tuple

from ..datamodels.draft_config import DraftConfig
from ..datamodels.draft_state import Cell, CellContent, TurnState
from ..errors import PickRejected
from ..utils.snake_draft import SnakeDraftCalculator
from .turn_controller import TurnController


class Board:
    """
    Gates which cell accepts content.

    Only the cell whose overall pick is on the clock can be filled. A
    successful fill is the single completion event for that pick; the
    caller feeds it to TurnController.advance.
    """

    def __init__(self,
                 config: DraftConfig,
                 controller: Optional[TurnController] = None,
                 calculator: Optional[SnakeDraftCalculator] = None):
        self.config = config
        self.controller = controller or TurnController()
        self.calculator = calculator or self.controller.calculator
        self._cells: Dict[Tuple[int, int], Cell] = {}

    @property
    def participant_count(self) -> int:
        return self.config.participant_count

    def cell(self, round_index: int, slot: int) -> Cell:
        if not 0 <= round_index < self.config.round_count:
            raise PickRejected(f"Round {round_index + 1} is not on the board")
        key = (round_index, slot)
        if key not in self._cells:
            overall_pick = self.calculator.overall_pick_for(round_index, slot, self.participant_count)
            self._cells[key] = Cell(round=round_index, slot=slot, overall_pick=overall_pick)
        return self._cells[key]

    def cell_for_pick(self, overall_pick: int) -> Cell:
        if not 0 <= overall_pick < self.config.total_picks:
            raise PickRejected(f"Pick {overall_pick + 1} is not on the board")
        position = self.calculator.locate(overall_pick, self.participant_count)
        return self.cell(position.round, position.participant_slot)

    def fill(self, overall_pick: int, content: CellContent, state: TurnState) -> Cell:
        """
        Put content in the cell for overall_pick.

        Raises:
            PickRejected: the cell is not the active cell
        """
        if not self.controller.is_active(state, overall_pick):
            raise PickRejected(f"Pick {overall_pick + 1} is not on the clock")

        cell = self.cell_for_pick(overall_pick)
        if cell.is_filled:
            raise PickRejected(f"Pick {overall_pick + 1} is already filled")

        cell.content = content
        return cell

    def clear(self, overall_pick: int) -> Cell:
        """Remove content from a cell. The turn counter is not rewound."""
        cell = self.cell_for_pick(overall_pick)
        if not cell.is_filled:
            raise PickRejected(f"Pick {overall_pick + 1} is empty")
        cell.content = None
        return cell

    def picks_made(self, slot: int) -> int:
        return sum(
            1 for round_index in range(self.config.round_count)
            if self.cell(round_index, slot).is_filled
        )

    def rows(self, state: TurnState) -> List[List[dict]]:
        """Board rows in slot order, each cell with its active flag."""
        rows = []
        for round_index in range(self.config.round_count):
            row = []
            for slot in range(self.participant_count):
                cell = self.cell(round_index, slot)
                row.append({
                    "round": round_index,
                    "slot": slot,
                    "overall_pick": cell.overall_pick,
                    "owner_name": self.config.participants[slot].owner_name,
                    "active": self.controller.is_active(state, cell.overall_pick),
                    "content": cell.content.model_dump() if cell.content else None,
                })
            rows.append(row)
        return rows
