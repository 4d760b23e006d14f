"""Coordinate type alias and grid helpers.

Board layout: ``(row, column)`` pairs, both in ``0..7``.
Row 0 is black's home rank, row 7 is red's.
"""

from __future__ import annotations

from typing import TypeAlias

Coord: TypeAlias = tuple[int, int]

BOARD_SIZE = 8
HOME_ROWS = (0, BOARD_SIZE - 1)


def in_bounds(coord: Coord) -> bool:
    """Check that *coord* is an integer pair lying on the 8x8 grid."""
    try:
        row, col = coord
    except (TypeError, ValueError):
        return False
    return all(isinstance(n, int) and 0 <= n < BOARD_SIZE for n in (row, col))


def as_coord(value: object) -> Coord | None:
    """Normalise a row/column pair, e.g. ``[3, 0]`` → ``(3, 0)``.

    Returns None when *value* is not a pair of integers.
    """
    try:
        row, col = value  # type: ignore[misc]
        return int(row), int(col)
    except (TypeError, ValueError):
        return None


def add_coords(a: Coord, b: Coord) -> Coord:
    return a[0] + b[0], a[1] + b[1]


def midpoint(a: Coord, b: Coord) -> Coord:
    """Per-axis floor of the average, e.g. (2, 1), (4, 3) → (3, 2)."""
    return (a[0] + b[0]) // 2, (a[1] + b[1]) // 2


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def step_between(start: Coord, dest: Coord) -> Coord:
    """Unit delta pointing from *start* towards *dest* on each axis."""
    return _sign(dest[0] - start[0]), _sign(dest[1] - start[1])


def is_diagonal(start: Coord, dest: Coord) -> bool:
    dr = abs(dest[0] - start[0])
    return dr > 0 and dr == abs(dest[1] - start[1])


def cells_between(start: Coord, dest: Coord) -> list[Coord]:
    """Cells strictly between two endpoints of a diagonal."""
    if not is_diagonal(start, dest):
        raise ValueError(f"Not a diagonal: {start!r} -> {dest!r}")
    step = step_between(start, dest)
    cells: list[Coord] = []
    cur = add_coords(start, step)
    while cur != dest:
        cells.append(cur)
        cur = add_coords(cur, step)
    return cells
