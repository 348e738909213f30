"""Round narration: what happened at the table, for whoever is listening."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable


class EventType(Enum):
    """Things a round reports as it is played."""

    ROUND_STARTED = auto()
    ROUND_SETTLED = auto()
    CARD_DEALT = auto()
    SHOE_SHUFFLED = auto()

    PLAYER_HIT = auto()
    PLAYER_STAND = auto()
    PLAYER_DOUBLE = auto()
    PLAYER_BLACKJACK = auto()
    PLAYER_BUSTS = auto()

    DEALER_REVEALS = auto()
    DEALER_HITS = auto()
    DEALER_STANDS = auto()
    DEALER_BUSTS = auto()
    DEALER_BLACKJACK = auto()


@dataclass(frozen=True)
class GameEvent:
    """One narrated step; ``data`` carries the template fields (card, hand_value, ...)."""

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)


EventHandler = Callable[[GameEvent], None]


class EventEmitter:
    """
    Fan-out of round events to listeners.

    A listener registered without an event type hears everything. One
    emitter may be shared by every round at a table so a single listener
    narrates the whole session, shuffles included.
    """

    def __init__(self) -> None:
        self._listeners: list[tuple[EventType | None, EventHandler]] = []

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """
        Register a listener.

        Args:
            handler: Called with each matching event, in emission order
            event_type: Only events of this type, or None for all
        """
        self._listeners.append((event_type, handler))

    def emit(self, event_type: EventType, **data: Any) -> GameEvent:
        """Build an event and deliver it to every matching listener."""
        event = GameEvent(event_type, data)
        for wanted, handler in self._listeners:
            if wanted is None or wanted == event_type:
                handler(event)
        return event
