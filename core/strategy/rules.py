"""Blackjack rule variations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RuleSet:
    """
    Blackjack table rules configuration.

    All rules that affect dealing, dealer play, strategy decisions and payouts.
    """

    # Deck configuration
    num_decks: int = 6
    penetration: float = 0.75

    # Dealer rules
    dealer_hits_soft_17: bool = False  # H17 vs S17
    dealer_peeks: bool = True  # Dealer checks the hole card for blackjack

    # Net payout multiples of the bet
    blackjack_payout: int = 2
    win_payout: int = 1

    # Double on any two cards
    double_down: bool = True

    def __post_init__(self) -> None:
        """Validate rule combinations."""
        if self.num_decks < 1 or self.num_decks > 8:
            raise ValueError("num_decks must be between 1 and 8")
        if not 0.0 < self.penetration <= 1.0:
            raise ValueError("penetration must be between 0 and 1")
        if self.blackjack_payout < self.win_payout:
            raise ValueError("blackjack_payout must be at least win_payout")
        if self.win_payout < 1:
            raise ValueError("win_payout must be at least 1")

    @classmethod
    def hit_only(cls) -> "RuleSet":
        """Hit/stand only: no doubling."""
        return cls(double_down=False)
