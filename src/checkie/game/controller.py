"""Game — the turn controller of a draughts match.

Coordinates: Players, GameState, Piece move execution.
Emits events via simple callbacks so front-ends and tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from checkie.core.board import Board
from checkie.core.enums import Color, GameResult
from checkie.core.move import (
    GAME_ALREADY_OVER,
    NO_PIECE_SELECTED,
    WRONG_COLOR_SELECTED,
    MoveResult,
)
from checkie.core.piece import Piece
from checkie.core.types import Coord, as_coord
from checkie.game.interfaces import IPlayer
from checkie.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Color, MoveResult], None]
InvalidMoveCallback = Callable[[Color, MoveResult], None]
TurnCallback = Callable[[Color], None]  # color now to move
GameOverCallback = Callable[[GameResult], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_invalid_move: list[InvalidMoveCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class Game:
    """Alternates turns between two players until one color is wiped out.

    A rejected attempt (bad selection or illegal sequence) does not end the
    turn: the same color is asked again. The controller never renders or
    prompts; players and event handlers do.
    """

    __slots__ = ("_state", "_players", "events")

    def __init__(
        self,
        red: IPlayer,
        black: IPlayer,
        board: Board | None = None,
        first_to_move: Color = Color.RED,
    ) -> None:
        for player, color in ((red, Color.RED), (black, Color.BLACK)):
            if player.color != color:
                raise ValueError(f"{player.name} plays {player.color}, expected {color}")
        self._players: dict[Color, IPlayer] = {Color.RED: red, Color.BLACK: black}
        self._state = GameState(
            board=board if board is not None else Board.initial(),
            side_to_move=first_to_move,
        )
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def current_player(self) -> IPlayer:
        return self._players[self._state.side_to_move]

    @property
    def winner(self) -> Color | None:
        return self._state.winner

    def player(self, color: Color) -> IPlayer:
        return self._players[color]

    # ── Turn handling ────────────────────────────────────────────────────

    def select(self, selection: Coord) -> Piece | MoveResult:
        """Resolve *selection* to a piece the side to move may move.

        An empty cell, an off-board or malformed coordinate, or an
        opponent's piece comes back as a rejected :class:`MoveResult`.
        """
        if self._state.is_game_over:
            return MoveResult.invalid(GAME_ALREADY_OVER)

        coord = as_coord(selection)
        piece = None if coord is None else self.board[coord]
        if piece is None:
            return self._reject(MoveResult.invalid(NO_PIECE_SELECTED, coord))
        if piece.color != self._state.side_to_move:
            return self._reject(MoveResult.invalid(WRONG_COLOR_SELECTED, coord))
        return piece

    def submit(self, selection: Coord, moves: Sequence[Coord]) -> MoveResult:
        """Move the side-to-move's piece at *selection* along *moves*."""
        selected = self.select(selection)
        if isinstance(selected, MoveResult):
            return selected
        return self._commit(selected, moves)

    def play_turn(self) -> MoveResult:
        """Ask the current player for one attempt and apply it if legal."""
        if self._state.is_game_over:
            return MoveResult.invalid(GAME_ALREADY_OVER)

        player = self.current_player
        selected = self.select(player.get_selection(self.board))
        if isinstance(selected, MoveResult):
            return selected
        return self._commit(selected, player.get_moves(self.board, selected))

    def play(self) -> GameResult:
        """Run turns until the board is decided.

        Exceptions raised by players propagate unchanged.
        """
        while not self._state.is_game_over:
            self.play_turn()
        return self._state.result

    # ── Internal helpers ─────────────────────────────────────────────────

    def _commit(self, piece: Piece, moves: Sequence[Coord]) -> MoveResult:
        result = piece.perform_moves(moves)
        if not result:
            return self._reject(result)

        color = self._state.side_to_move
        self._state.record_turn(result)
        self._emit_move(color, result)

        if self._state.is_game_over:
            _LOGGER.info(
                "Game over after %d turns: %s",
                self._state.turn_count,
                self._state.result.name,
            )
            self._emit_game_over(self._state.result)
        else:
            self._emit_turn_changed(self._state.side_to_move)
        return result

    def _reject(self, result: MoveResult) -> MoveResult:
        color = self._state.side_to_move
        self._state.record_rejection()
        _LOGGER.debug("%s attempt rejected: %s", color, result.error)
        for cb in self.events.on_invalid_move:
            cb(color, result)
        return result

    def _emit_move(self, color: Color, result: MoveResult) -> None:
        for cb in self.events.on_move:
            cb(color, result)

    def _emit_turn_changed(self, color: Color) -> None:
        for cb in self.events.on_turn_changed:
            cb(color)

    def _emit_game_over(self, result: GameResult) -> None:
        for cb in self.events.on_game_over:
            cb(result)
