"""Board - piece placement on an 8x8 draughts board."""

from __future__ import annotations

from checkie.core.enums import Color, GameResult
from checkie.core.piece import Piece
from checkie.core.types import BOARD_SIZE, Coord, in_bounds

_HOME_ROWS: dict[Color, range] = {
    Color.BLACK: range(0, 3),
    Color.RED: range(BOARD_SIZE - 3, BOARD_SIZE),
}

Snapshot = tuple[tuple[tuple[Color, bool] | None, ...], ...]


class Board:
    """Mutable 8x8 grid owning every piece placed on it.

    Reads outside the grid return ``None``; writes outside it are ignored.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def get(self, coord: Coord) -> Piece | None:
        if not in_bounds(coord):
            return None
        return self._grid[coord[0]][coord[1]]

    def set(self, coord: Coord, piece: Piece | None) -> None:
        if in_bounds(coord):
            self._grid[coord[0]][coord[1]] = piece

    def remove(self, coord: Coord) -> Piece | None:
        """Clear *coord* and return whatever stood there."""
        piece = self.get(coord)
        if piece is not None:
            self.set(coord, None)
        return piece

    def __getitem__(self, coord: Coord) -> Piece | None:
        return self.get(coord)

    def __setitem__(self, coord: Coord, piece: Piece | None) -> None:
        self.set(coord, piece)

    def is_empty(self, coord: Coord) -> bool:
        return self.get(coord) is None

    def place(self, coord: Coord, color: Color, king: bool = False) -> Piece:
        """Seat a new piece of *color* on an empty cell."""
        if not in_bounds(coord):
            raise ValueError(f"Off-board coordinate: {coord!r}")
        if self.get(coord) is not None:
            raise ValueError(f"Cell already occupied: {coord!r}")
        piece = Piece(color, coord, self)
        if king:
            piece.promote()
        self.set(coord, piece)
        return piece

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> list[Piece]:
        """Pieces in row-major order, optionally limited to *color*."""
        return [
            piece
            for row in self._grid
            for piece in row
            if piece is not None and (color is None or piece.color == color)
        ]

    def count(self, color: Color) -> int:
        return len(self.pieces(color))

    def colors(self) -> set[Color]:
        """Colors that still have at least one piece."""
        return {piece.color for piece in self.pieces()}

    def is_over(self) -> bool:
        """True when at most one color remains (an empty board counts)."""
        return len(self.colors()) <= 1

    def winner(self) -> Color | None:
        remaining = self.colors()
        if len(remaining) == 1:
            return next(iter(remaining))
        return None

    def result(self) -> GameResult:
        if not self.is_over():
            return GameResult.IN_PROGRESS
        color = self.winner()
        if color is None:
            return GameResult.NO_PIECES
        return GameResult.win_for(color)

    # -- Mutation / copying -------------------------------------------------

    def clone(self) -> Board:
        """Independent deep copy; each copied piece points at the new board."""
        b = Board()
        for piece in self.pieces():
            b.set(piece.position, piece.copy_to(b))
        return b

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard opening: twelve men per side on the dark cells."""
        b = cls()
        for color, rows in _HOME_ROWS.items():
            for row in rows:
                for col in range(BOARD_SIZE):
                    if (row + col) % 2 == 1:
                        b.place((row, col), color)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def snapshot(self) -> Snapshot:
        """Structural view: ``(color, is_king)`` or ``None`` per cell."""
        return tuple(
            tuple(None if p is None else (p.color, p.is_king) for p in row)
            for row in self._grid
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    def __repr__(self) -> str:
        rows: list[str] = ["  a b c d e f g h"]
        for r, row in enumerate(self._grid):
            cells = [str(p) if p else "." for p in row]
            rows.append(f"{r + 1} {' '.join(cells)}")
        return "\n".join(rows)
