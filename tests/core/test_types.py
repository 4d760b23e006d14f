"""Tests for coordinate helpers."""

import pytest

from checkie.core.types import (
    add_coords,
    as_coord,
    cells_between,
    in_bounds,
    is_diagonal,
    midpoint,
    step_between,
)


def test_in_bounds() -> None:
    assert in_bounds((0, 0))
    assert in_bounds((7, 7))
    assert not in_bounds((8, 0))
    assert not in_bounds((0, -1))


def test_in_bounds_rejects_malformed() -> None:
    assert not in_bounds((5,))
    assert not in_bounds((1, 2, 3))
    assert not in_bounds((1.0, 2))
    assert not in_bounds(None)
    assert not in_bounds("ab")


def test_as_coord() -> None:
    assert as_coord([3, 0]) == (3, 0)
    assert as_coord((5,)) is None
    assert as_coord(None) is None
    assert as_coord(("x", 1)) is None


def test_add_coords() -> None:
    assert add_coords((2, 1), (1, -1)) == (3, 0)


def test_midpoint_floors() -> None:
    assert midpoint((2, 1), (4, 3)) == (3, 2)
    assert midpoint((5, 5), (2, 2)) == (3, 3)


def test_step_between() -> None:
    assert step_between((5, 5), (1, 1)) == (-1, -1)
    assert step_between((2, 1), (2, 1)) == (0, 0)


def test_is_diagonal() -> None:
    assert is_diagonal((5, 5), (1, 1))
    assert not is_diagonal((5, 5), (1, 3))
    assert not is_diagonal((5, 5), (5, 5))


def test_cells_between() -> None:
    assert cells_between((5, 5), (1, 1)) == [(4, 4), (3, 3), (2, 2)]
    assert cells_between((2, 1), (3, 2)) == []


def test_cells_between_rejects_non_diagonal() -> None:
    with pytest.raises(ValueError, match="Not a diagonal"):
        cells_between((0, 0), (0, 4))
