"""Concrete player implementations."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Callable

from checkie.core.enums import Color
from checkie.core.types import Coord
from checkie.game.interfaces import IPlayer

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.piece import Piece

Turn = tuple[Coord, Sequence[Coord]]


class ScriptExhaustedError(RuntimeError):
    """A scripted player was asked for more input than it was given."""


class CallbackPlayer(IPlayer):
    """A participant whose input comes from two callables.

    Args:
        color: Side this player controls.
        name: Display name.
        select: ``(Board) -> Coord`` — picks the piece to move.
        moves: ``(Board, Piece) -> Sequence[Coord]`` — picks its path.
    """

    __slots__ = ("_color", "_name", "_select", "_moves")

    def __init__(
        self,
        color: Color,
        select: Callable[[Board], Coord],
        moves: Callable[[Board, Piece], Sequence[Coord]],
        name: str = "",
    ) -> None:
        self._color = color
        self._name = name or f"Player ({color})"
        self._select = select
        self._moves = moves

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    def get_selection(self, board: Board) -> Coord:
        return self._select(board)

    def get_moves(self, board: Board, piece: Piece) -> Sequence[Coord]:
        return self._moves(board, piece)


class ScriptedPlayer(IPlayer):
    """Replays a fixed list of ``(selection, moves)`` turns.

    Every attempt consumes one entry, including attempts the game rejects,
    so a script can rehearse mistakes followed by their correction.
    """

    __slots__ = ("_color", "_name", "_turns", "_cursor", "_pending")

    def __init__(self, color: Color, turns: Iterable[Turn], name: str = "") -> None:
        self._color = color
        self._name = name or f"Script ({color})"
        self._turns: list[Turn] = list(turns)
        self._cursor = 0
        self._pending: Sequence[Coord] | None = None

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def remaining(self) -> int:
        """Scripted turns not yet handed out."""
        return len(self._turns) - self._cursor

    def get_selection(self, board: Board) -> Coord:
        if self._cursor >= len(self._turns):
            raise ScriptExhaustedError(f"{self._name} has no scripted turns left")
        selection, self._pending = self._turns[self._cursor]
        self._cursor += 1
        return selection

    def get_moves(self, board: Board, piece: Piece) -> Sequence[Coord]:
        if self._pending is None:
            raise ScriptExhaustedError(f"{self._name} has no pending moves")
        moves, self._pending = self._pending, None
        return moves
