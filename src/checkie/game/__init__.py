"""Game management layer — turn controller, players, state machine.

Quick start::

    from checkie.core import Color
    from checkie.game import Game, ScriptedPlayer

    game = Game(
        red=ScriptedPlayer(Color.RED, [((5, 0), [(4, 1)])]),
        black=ScriptedPlayer(Color.BLACK, [((2, 1), [(3, 2)])]),
    )
    game.play_turn()
"""

from checkie.game.controller import Game, GameEvents
from checkie.game.interfaces import GamePhase, IPlayer
from checkie.game.player import CallbackPlayer, ScriptedPlayer, ScriptExhaustedError
from checkie.game.state import GameState, TurnRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IPlayer",
    # Concrete
    "CallbackPlayer",
    "Game",
    "GameEvents",
    "GameState",
    "ScriptExhaustedError",
    "ScriptedPlayer",
    "TurnRecord",
]
