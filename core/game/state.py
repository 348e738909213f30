"""Round state enumeration."""

from enum import Enum, auto


class RoundState(Enum):
    """
    Round state machine states.

    Flow: DEALING → PLAYER_TURN → DEALER_TURN → SETTLED
    """

    # Initial cards being dealt
    DEALING = auto()

    # Player hits or stands
    PLAYER_TURN = auto()

    # Dealer plays the fixed house policy
    DEALER_TURN = auto()

    # Outcome decided, hands are final
    SETTLED = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()

