"""Core enumerations for the draughts domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    BLACK = 0
    RED = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a man's move: black starts on rows 0-2, red on 5-7."""
        return 1 if self is Color.BLACK else -1

    def __str__(self) -> str:
        return self.name.lower()


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    BLACK_WINS = 1
    RED_WINS = 2
    NO_PIECES = 3  # empty board: over, but nobody survived

    @classmethod
    def win_for(cls, color: Color) -> GameResult:
        return cls.BLACK_WINS if color is Color.BLACK else cls.RED_WINS
