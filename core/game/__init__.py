"""Round engine and state management."""

from core.game.events import GameEvent, EventType, EventEmitter
from core.game.state import RoundState
from core.game.outcome import RoundOutcome, evaluate_hands
from core.game.engine import RoundEngine

__all__ = [
    "GameEvent",
    "EventType",
    "EventEmitter",
    "RoundState",
    "RoundOutcome",
    "evaluate_hands",
    "RoundEngine",
]
