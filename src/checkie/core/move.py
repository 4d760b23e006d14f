"""MoveResult value object — outcome of a slide or jump chain."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.types import Coord

NO_PIECE_SELECTED = "No piece selected"
WRONG_COLOR_SELECTED = "Cannot select opponent's piece"
EMPTY_SEQUENCE = "Empty move sequence"
INVALID_SEQUENCE = "Invalid move sequence"
GAME_ALREADY_OVER = "Game is already over"


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Immutable record of an attempted move sequence.

    A failed result (``legal`` is false) always means the board was left
    untouched. ``error`` carries the message of the single invalid-move
    condition the caller reports before retrying.
    """

    legal: bool
    origin: Coord | None = None
    path: tuple[Coord, ...] = ()
    captured: tuple[Coord, ...] = ()
    promoted: bool = False
    error: str | None = None

    @classmethod
    def invalid(
        cls,
        error: str = INVALID_SEQUENCE,
        origin: Coord | None = None,
        path: tuple[Coord, ...] = (),
    ) -> MoveResult:
        return cls(False, origin=origin, path=path, error=error)

    @property
    def is_jump(self) -> bool:
        return bool(self.captured)

    @property
    def destination(self) -> Coord | None:
        return self.path[-1] if self.path else None

    def __bool__(self) -> bool:
        return self.legal
