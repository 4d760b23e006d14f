"""Core domain layer — pure draughts rules with zero external dependencies.

Quick start::

    from checkie.core import Board

    board = Board.initial()
    piece = board[(2, 1)]
    result = piece.perform_moves([(3, 0)])
    assert result.legal
"""

from checkie.core.board import Board
from checkie.core.enums import Color, GameResult
from checkie.core.move import MoveResult
from checkie.core.piece import Piece
from checkie.core.types import (
    BOARD_SIZE,
    Coord,
    add_coords,
    cells_between,
    in_bounds,
    midpoint,
    step_between,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    # Types / helpers
    "BOARD_SIZE",
    "Coord",
    "add_coords",
    "cells_between",
    "in_bounds",
    "midpoint",
    "step_between",
    # Domain objects
    "Board",
    "MoveResult",
    "Piece",
]
