"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from checkie.core.board import Board


@pytest.fixture
def board() -> Board:
    """An empty board for hand-built positions."""
    return Board()


@pytest.fixture
def opening() -> Board:
    """The standard opening position."""
    return Board.initial()
