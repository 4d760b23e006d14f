"""Abstract interfaces for the game layer.

The ``Game`` controller depends on these ABCs, not on how a concrete
player produces its input (keyboard, script, network, ...).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from checkie.core.enums import Color
from checkie.core.types import Coord

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.piece import Piece


class GamePhase(IntEnum):
    """Two-state machine: a game is running until one side is wiped out."""

    IN_PROGRESS = auto()
    GAME_OVER = auto()


class IPlayer(ABC):
    """Interface for a game participant.

    Neither method is trusted: the controller re-validates every
    selection and every move sequence it receives.
    """

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def get_selection(self, board: Board) -> Coord:
        """Coordinate of the piece this player wants to move."""

    @abstractmethod
    def get_moves(self, board: Board, piece: Piece) -> Sequence[Coord]:
        """Destinations for *piece*: one slide, or one or more jumps."""
