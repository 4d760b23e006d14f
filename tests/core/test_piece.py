"""Tests for Piece movement and capture rules."""

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.piece import Piece


class TestPieceState:
    def test_black_man_diffs(self, board: Board) -> None:
        piece = board.place((2, 1), Color.BLACK)
        assert piece.move_diffs() == [(1, 1), (1, -1)]
        assert not piece.is_king

    def test_red_man_diffs(self, board: Board) -> None:
        piece = board.place((5, 0), Color.RED)
        assert piece.move_diffs() == [(-1, 1), (-1, -1)]

    def test_king_diffs(self, board: Board) -> None:
        piece = board.place((4, 3), Color.RED, king=True)
        assert sorted(piece.move_diffs()) == [(-1, -1), (-1, 1), (1, -1), (1, 1)]

    def test_promote_is_idempotent(self, board: Board) -> None:
        piece = board.place((4, 3), Color.BLACK)
        assert piece.promote()
        assert not piece.promote()
        assert piece.directions == [1, -1]

    def test_direction_follows_color(self, board: Board) -> None:
        assert Piece(Color.BLACK, (2, 1), board).directions == [1]
        assert Piece(Color.RED, (5, 0), board).directions == [-1]

    def test_copy_to_rebinds_board(self, board: Board) -> None:
        piece = board.place((4, 3), Color.BLACK, king=True)
        other = Board()
        twin = piece.copy_to(other)
        assert twin.board is other
        assert twin.position == piece.position
        assert twin.is_king
        assert twin.directions is not piece.directions

    def test_str_and_symbol(self, board: Board) -> None:
        man = board.place((2, 1), Color.BLACK)
        king = board.place((5, 0), Color.RED, king=True)
        assert str(man) == "b"
        assert str(king) == "R"
        assert man.symbol == "◉"
        assert king.symbol == "✪"


class TestSlide:
    def test_forward_slide(self, board: Board) -> None:
        piece = board.place((2, 1), Color.BLACK)
        assert piece.perform_slide((3, 0))
        assert board[(2, 1)] is None
        assert board[(3, 0)] is piece
        assert piece.position == (3, 0)

    def test_backward_slide_rejected_for_man(self, board: Board) -> None:
        piece = board.place((3, 2), Color.BLACK)
        assert not piece.perform_slide((2, 1))
        assert piece.position == (3, 2)

    def test_backward_slide_allowed_for_king(self, board: Board) -> None:
        piece = board.place((3, 2), Color.BLACK, king=True)
        assert piece.perform_slide((2, 1))

    def test_two_cells_rejected(self, board: Board) -> None:
        piece = board.place((2, 1), Color.BLACK)
        assert not piece.perform_slide((4, 3))

    def test_sideways_rejected(self, board: Board) -> None:
        piece = board.place((2, 1), Color.BLACK, king=True)
        assert not piece.perform_slide((2, 2))
        assert not piece.perform_slide((3, 1))

    def test_occupied_rejected(self, board: Board) -> None:
        piece = board.place((2, 1), Color.BLACK)
        board.place((3, 0), Color.RED)
        assert not piece.perform_slide((3, 0))
        assert board[(2, 1)] is piece

    def test_off_board_rejected(self, board: Board) -> None:
        piece = board.place((3, 0), Color.BLACK)
        assert not piece.perform_slide((4, -1))
        assert board[(3, 0)] is piece

    def test_promotes_on_far_row(self, board: Board) -> None:
        black = board.place((6, 1), Color.BLACK)
        red = board.place((1, 2), Color.RED)
        assert black.perform_slide((7, 0))
        assert red.perform_slide((0, 1))
        assert black.is_king
        assert red.is_king

    def test_king_reentering_back_row_stays_king(self, board: Board) -> None:
        piece = board.place((6, 1), Color.BLACK, king=True)
        assert piece.perform_slide((7, 2))
        assert len(piece.directions) == 2


class TestJump:
    def test_single_jump(self, board: Board) -> None:
        piece = board.place((2, 1), Color.BLACK)
        board.place((3, 2), Color.RED)
        assert piece.perform_jump((4, 3))
        assert board[(3, 2)] is None
        assert board[(2, 1)] is None
        assert board[(4, 3)] is piece

    def test_same_color_midpoint_rejected(self, board: Board) -> None:
        piece = board.place((2, 1), Color.BLACK)
        board.place((3, 2), Color.BLACK)
        assert not piece.can_jump((4, 3))

    def test_empty_midpoint_rejected(self, board: Board) -> None:
        piece = board.place((2, 1), Color.BLACK)
        assert not piece.can_jump((4, 3))

    def test_occupied_landing_rejected(self, board: Board) -> None:
        piece = board.place((2, 1), Color.BLACK)
        board.place((3, 2), Color.RED)
        board.place((4, 3), Color.RED)
        assert not piece.can_jump((4, 3))

    def test_backward_jump_rejected_for_man(self, board: Board) -> None:
        piece = board.place((5, 2), Color.RED)
        board.place((6, 3), Color.BLACK)
        assert not piece.can_jump((7, 4))

    def test_off_board_landing_rejected(self, board: Board) -> None:
        piece = board.place((5, 6), Color.BLACK)
        board.place((6, 7), Color.RED)
        assert not piece.can_jump((7, 8))

    def test_failed_jump_does_not_mutate(self, board: Board) -> None:
        piece = board.place((2, 1), Color.BLACK)
        victim = board.place((3, 2), Color.BLACK)
        before = board.snapshot()
        assert not piece.perform_jump((4, 3))
        assert board.snapshot() == before
        assert board[(3, 2)] is victim

    def test_jump_promotes(self, board: Board) -> None:
        piece = board.place((5, 2), Color.BLACK)
        board.place((6, 3), Color.RED)
        assert piece.perform_jump((7, 4))
        assert piece.is_king


class TestFlyingJump:
    def test_man_cannot_long_jump(self, board: Board) -> None:
        piece = board.place((1, 0), Color.BLACK)
        board.place((3, 2), Color.RED)
        assert not piece.can_jump((5, 4))

    def test_king_long_jump(self, board: Board) -> None:
        piece = board.place((1, 0), Color.BLACK, king=True)
        board.place((3, 2), Color.RED)
        assert piece.can_jump((5, 4))

    def test_king_four_cell_capture(self, board: Board) -> None:
        king = board.place((5, 5), Color.RED, king=True)
        board.place((3, 3), Color.BLACK)
        bystander = board.place((0, 7), Color.BLACK)
        assert king.perform_jump((1, 1))
        assert board[(3, 3)] is None
        assert board[(1, 1)] is king
        assert board[(0, 7)] is bystander
        assert board.count(Color.BLACK) == 1

    def test_blocked_before_victim(self, board: Board) -> None:
        king = board.place((5, 5), Color.RED, king=True)
        board.place((3, 3), Color.BLACK)
        board.place((4, 4), Color.RED)
        assert not king.can_jump((1, 1))

    def test_blocked_after_victim(self, board: Board) -> None:
        king = board.place((5, 5), Color.RED, king=True)
        board.place((3, 3), Color.BLACK)
        board.place((2, 2), Color.BLACK)
        assert not king.can_jump((1, 1))

    def test_victim_off_midpoint_rejected(self, board: Board) -> None:
        king = board.place((5, 5), Color.RED, king=True)
        board.place((4, 4), Color.BLACK)
        assert not king.can_jump((1, 1))

    def test_non_diagonal_destination_rejected(self, board: Board) -> None:
        king = board.place((5, 5), Color.RED, king=True)
        board.place((3, 4), Color.BLACK)
        assert not king.can_jump((1, 3))
