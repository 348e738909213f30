"""Round outcomes and hand comparison."""

from enum import Enum, auto

from core.hand import Hand


class RoundOutcome(Enum):
    """How a round ended, from the player's point of view."""

    PLAYER_BUST = auto()
    DEALER_BUST = auto()
    PLAYER_BLACKJACK = auto()
    PLAYER_WINS = auto()
    DEALER_WINS = auto()
    PUSH = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()

    @property
    def player_won(self) -> bool:
        """Check if the player collects on this outcome."""
        return self in (
            RoundOutcome.DEALER_BUST,
            RoundOutcome.PLAYER_BLACKJACK,
            RoundOutcome.PLAYER_WINS,
        )

    @property
    def player_lost(self) -> bool:
        """Check if the player loses the bet on this outcome."""
        return self in (RoundOutcome.PLAYER_BUST, RoundOutcome.DEALER_WINS)


def evaluate_hands(player_hand: Hand, dealer_hand: Hand) -> RoundOutcome:
    """
    Compare finished player and dealer hands.

    A player bust loses even if the dealer also busts.
    """
    # Player busts always loses
    if player_hand.is_busted:
        return RoundOutcome.PLAYER_BUST

    # Blackjack comparisons
    player_bj = player_hand.is_blackjack
    dealer_bj = dealer_hand.is_blackjack

    if player_bj and dealer_bj:
        return RoundOutcome.PUSH
    if player_bj:
        return RoundOutcome.PLAYER_BLACKJACK
    if dealer_bj:
        return RoundOutcome.DEALER_WINS

    # Dealer busts, player wins
    if dealer_hand.is_busted:
        return RoundOutcome.DEALER_BUST

    # Compare values
    if player_hand.value > dealer_hand.value:
        return RoundOutcome.PLAYER_WINS
    if dealer_hand.value > player_hand.value:
        return RoundOutcome.DEALER_WINS
    return RoundOutcome.PUSH
