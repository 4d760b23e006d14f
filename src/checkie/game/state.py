"""Game state machine — tracks side to move, phase and turn history."""

from __future__ import annotations

from dataclasses import dataclass, field

from checkie.core.board import Board
from checkie.core.enums import Color, GameResult
from checkie.core.move import MoveResult
from checkie.game.interfaces import GamePhase


@dataclass(frozen=True, slots=True)
class TurnRecord:
    """A single completed turn."""

    color: Color
    move: MoveResult

    @property
    def captures(self) -> int:
        return len(self.move.captured)


@dataclass
class GameState:
    """Board plus turn bookkeeping.

    Pure data/logic — no player I/O. Rejected attempts are counted but
    never recorded as turns and never pass the move to the other side.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.RED
    phase: GamePhase = field(default=GamePhase.IN_PROGRESS, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    history: list[TurnRecord] = field(default_factory=list, init=False)
    invalid_attempts: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self._check_game_over()

    # ── Turn application ─────────────────────────────────────────────────

    def record_turn(self, move: MoveResult) -> TurnRecord:
        """Log a move already applied to the board and hand over the turn.

        Caller is responsible for the legality check.
        """
        record = TurnRecord(self.side_to_move, move)
        self.history.append(record)
        self._check_game_over()
        if not self.is_game_over:
            self.side_to_move = self.side_to_move.opposite
        return record

    def record_rejection(self) -> None:
        self.invalid_attempts += 1

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def turn_count(self) -> int:
        """Number of completed turns."""
        return len(self.history)

    @property
    def winner(self) -> Color | None:
        if not self.is_game_over:
            return None
        return self.board.winner()

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        if self.board.is_over():
            self.result = self.board.result()
            self.phase = GamePhase.GAME_OVER
