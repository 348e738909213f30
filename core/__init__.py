"""Core blackjack engine - 100% UI-agnostic."""

from core.cards import Card, Shoe, Rank, Suit, new_shoe
from core.hand import Hand, best_total, is_blackjack, is_bust

__version__ = "0.1.0"

__all__ = [
    "Card",
    "Shoe",
    "Rank",
    "Suit",
    "new_shoe",
    "Hand",
    "best_total",
    "is_blackjack",
    "is_bust",
]
