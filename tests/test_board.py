"""
Tests for board cell gating.
"""

import pytest

from draftboard.datamodels import CellContent, TurnState
from draftboard.engine.board import Board
from draftboard.errors import PickRejected


def content(name: str = "pick") -> CellContent:
    return CellContent(image_url=f"https://images.example/{name}.png", caption=name)


class TestBoard:

    @pytest.fixture
    def board(self, config):
        return Board(config)

    def test_cells_carry_snake_pick_numbers(self, board):
        assert [board.cell(0, slot).overall_pick for slot in range(3)] == [0, 1, 2]
        assert [board.cell(1, slot).overall_pick for slot in range(3)] == [5, 4, 3]

    def test_cell_for_pick_matches_cell(self, board):
        assert board.cell_for_pick(3) is board.cell(1, 2)

    def test_only_active_cell_accepts_content(self, board):
        state = TurnState(current_pick=1, total_picks=6)

        with pytest.raises(PickRejected):
            board.fill(0, content(), state)
        with pytest.raises(PickRejected):
            board.fill(2, content(), state)

        cell = board.fill(1, content("b"), state)
        assert cell.slot == 1
        assert cell.content.caption == "b"

    def test_rejected_fill_leaves_cell_empty(self, board):
        state = TurnState(current_pick=0, total_picks=6)
        with pytest.raises(PickRejected):
            board.fill(4, content(), state)
        assert not board.cell_for_pick(4).is_filled

    def test_filled_cell_refuses_second_fill(self, board):
        state = TurnState(current_pick=0, total_picks=6)
        board.fill(0, content("first"), state)
        with pytest.raises(PickRejected):
            board.fill(0, content("second"), state)
        assert board.cell_for_pick(0).content.caption == "first"

    def test_complete_board_is_closed(self, board):
        state = TurnState(current_pick=6, total_picks=6)
        with pytest.raises(PickRejected):
            board.fill(5, content(), state)

    def test_pick_off_the_board(self, board):
        with pytest.raises(PickRejected):
            board.cell_for_pick(6)
        with pytest.raises(PickRejected):
            board.cell(2, 0)

    def test_clear(self, board):
        state = TurnState(current_pick=0, total_picks=6)
        board.fill(0, content(), state)
        board.clear(0)
        assert not board.cell_for_pick(0).is_filled

        with pytest.raises(PickRejected):
            board.clear(0)

    def test_picks_made(self, board):
        board.fill(0, content(), TurnState(current_pick=0, total_picks=6))
        board.fill(5, content(), TurnState(current_pick=5, total_picks=6))
        assert board.picks_made(0) == 2
        assert board.picks_made(1) == 0

    def test_rows_flag_active_cell(self, board):
        rows = board.rows(TurnState(current_pick=4, total_picks=6))

        assert len(rows) == 2
        active = [cell for row in rows for cell in row if cell["active"]]
        assert len(active) == 1
        assert active[0]["round"] == 1
        assert active[0]["slot"] == 1
        assert active[0]["owner_name"] == "Owner 1"
