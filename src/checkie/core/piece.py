"""Piece — a man or king, and the movement and capture rules it obeys."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from checkie.core.enums import Color
from checkie.core.move import EMPTY_SEQUENCE, INVALID_SEQUENCE, MoveResult
from checkie.core.types import (
    HOME_ROWS,
    Coord,
    as_coord,
    cells_between,
    in_bounds,
    is_diagonal,
    midpoint,
    step_between,
)

if TYPE_CHECKING:
    from checkie.core.board import Board

_LOGGER = logging.getLogger(__name__)

_CHARS: dict[tuple[Color, bool], str] = {
    (Color.BLACK, False): "b",
    (Color.BLACK, True): "B",
    (Color.RED, False): "r",
    (Color.RED, True): "R",
}


def _as_path(moves: Iterable[object]) -> tuple[Coord, ...] | None:
    """Normalise a move sequence; None if any entry is not a coordinate pair."""
    try:
        path = tuple(as_coord(m) for m in moves)
    except TypeError:
        return None
    if any(step is None for step in path):
        return None
    return path  # type: ignore[return-value]


class Piece:
    """A single draughtsman bound to the board it stands on.

    Men and kings are the same type: a man has one allowed row direction,
    a king has both. ``board`` is a lookup handle only; the board owns the
    piece and rebinds the handle when it clones itself.
    """

    __slots__ = ("color", "position", "directions", "board")

    def __init__(self, color: Color, position: Coord, board: Board) -> None:
        self.color = color
        self.position = position
        self.directions: list[int] = [color.forward]
        self.board = board

    # ── State ────────────────────────────────────────────────────────────

    @property
    def is_king(self) -> bool:
        return len(self.directions) == 2

    def promote(self) -> bool:
        """Crown a man. Returns True only on the man → king transition."""
        if self.is_king:
            return False
        self.directions.append(-self.directions[0])
        return True

    def copy_to(self, board: Board) -> Piece:
        """Detached copy whose board handle points at *board*."""
        twin = Piece(self.color, self.position, board)
        twin.directions = list(self.directions)
        return twin

    def move_diffs(self) -> list[Coord]:
        """Allowed unit deltas: two for a man, four for a king."""
        diffs: list[Coord] = []
        for d in self.directions:
            diffs.append((d, 1))
            diffs.append((d, -1))
        return diffs

    # ── Single steps ─────────────────────────────────────────────────────

    def perform_slide(self, dest: Coord) -> bool:
        if not in_bounds(dest) or self.board[dest] is not None:
            return False
        dr = dest[0] - self.position[0]
        dc = dest[1] - self.position[1]
        if abs(dr) != 1 or abs(dc) != 1:
            return False
        if (dr, dc) not in self.move_diffs():
            return False
        return self.move_to(dest)

    def can_jump(self, dest: Coord) -> bool:
        """Whether a capture landing on *dest* is legal right now.

        The captured piece must sit on the midpoint. Only kings may jump
        further than two cells, and every other cell they pass must be empty.
        """
        if not in_bounds(dest) or self.board[dest] is not None:
            return False
        if not is_diagonal(self.position, dest):
            return False
        span = abs(dest[0] - self.position[0])
        if span < 2:
            return False

        mid = midpoint(self.position, dest)
        victim = self.board[mid]
        if victim is None or victim.color == self.color:
            return False
        if span > 2 and not self.is_king:
            return False
        if step_between(self.position, dest) not in self.move_diffs():
            return False

        return all(
            cell == mid or self.board[cell] is None
            for cell in cells_between(self.position, dest)
        )

    def perform_jump(self, dest: Coord) -> bool:
        if not self.can_jump(dest):
            return False
        self.board.remove(midpoint(self.position, dest))
        return self.move_to(dest)

    def move_to(self, dest: Coord) -> bool:
        """Relocate unconditionally, crowning on either home row."""
        self.board[dest] = self
        self.board[self.position] = None
        self.position = dest
        if dest[0] in HOME_ROWS:
            self.promote()
        return True

    # ── Sequences ────────────────────────────────────────────────────────

    def perform_moves_unchecked(self, moves: Iterable[Coord] | None) -> MoveResult:
        """Execute a slide or jump chain without a safety copy.

        Stops at the first illegal step, so a failure may leave earlier
        steps applied. Use :meth:`perform_moves` on a live board.
        """
        path = _as_path(moves)
        origin = self.position
        if path is None:
            return MoveResult.invalid(INVALID_SEQUENCE, origin)
        if not path:
            return MoveResult.invalid(EMPTY_SEQUENCE, origin)

        was_king = self.is_king
        captured: list[Coord] = []
        if len(path) > 1 or not self.perform_slide(path[0]):
            for dest in path:
                mid = midpoint(self.position, dest)
                if not self.perform_jump(dest):
                    return MoveResult.invalid(INVALID_SEQUENCE, origin, path)
                captured.append(mid)

        return MoveResult(
            True,
            origin=origin,
            path=path,
            captured=tuple(captured),
            promoted=self.is_king and not was_king,
        )

    def _replay_on_copy(self, path: tuple[Coord, ...] | None) -> MoveResult:
        scratch = self.board.clone()
        twin = scratch[self.position]
        assert twin is not None, f"{self!r} is not seated on its board"
        return twin.perform_moves_unchecked(path)

    def valid_moves(self, moves: Iterable[Coord]) -> bool:
        """Check a sequence on a throwaway copy of the board."""
        return self._replay_on_copy(_as_path(moves)).legal

    def perform_moves(self, moves: Iterable[Coord]) -> MoveResult:
        """Validate on a board copy, then apply for real.

        The live board is touched only once the whole sequence has replayed
        cleanly on the copy.
        """
        path = _as_path(moves)
        trial = self._replay_on_copy(path)
        if not trial:
            _LOGGER.debug(
                "Rejected %s from %s via %s: %s",
                self.color,
                self.position,
                path,
                trial.error,
            )
            return trial

        result = self.perform_moves_unchecked(path)
        _LOGGER.debug(
            "%s %s -> %s captured=%s promoted=%s",
            self.color,
            result.origin,
            result.destination,
            result.captured,
            result.promoted,
        )
        return result

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Board character: lowercase = man, uppercase = king."""
        return _CHARS[(self.color, self.is_king)]

    @property
    def symbol(self) -> str:
        return "✪" if self.is_king else "◉"

    def __repr__(self) -> str:
        return f"Piece({self.color}, {self.position}, king={self.is_king})"
