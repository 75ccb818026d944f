"""Round engine, player turn and events."""

from core.game.actions import PlayerAction, parse_action
from core.game.events import GameEvent, EventType, EventEmitter
from core.game.state import GameState, TurnState, EndState
from core.game.engine import BlackjackGame, PlayerTurn, evaluate_scores

__all__ = [
    "PlayerAction",
    "parse_action",
    "GameEvent",
    "EventType",
    "EventEmitter",
    "GameState",
    "TurnState",
    "EndState",
    "BlackjackGame",
    "PlayerTurn",
    "evaluate_scores",
]
