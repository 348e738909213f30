"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from core.cards import Card

BLACKJACK = 21


def best_total(cards: Iterable[Card]) -> tuple[int, bool]:
    """
    Calculate the best total of a run of cards.

    Every Ace starts at 11 and is demoted to 1, one at a time, while the
    total is over 21.

    Returns:
        (total, soft) where soft means an Ace still counts as 11
    """
    total = 0
    aces = 0

    for card in cards:
        if card.is_ace:
            aces += 1
        total += card.value

    while total > BLACKJACK and aces > 0:
        total -= 10
        aces -= 1

    return total, aces > 0


def is_bust(cards: Iterable[Card]) -> bool:
    """Check whether the cards total more than 21."""
    return best_total(cards)[0] > BLACKJACK


def is_blackjack(cards: Iterable[Card]) -> bool:
    """Check for a natural: exactly two cards totalling 21."""
    cards = list(cards)
    return len(cards) == 2 and best_total(cards)[0] == BLACKJACK


@dataclass
class Hand:
    """A blackjack hand with value calculation."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    @property
    def value(self) -> int:
        """
        Calculate the best hand value.

        Returns the highest value that doesn't bust, or the lowest bust value.
        """
        return best_total(self.cards)[0]

    @property
    def is_soft(self) -> bool:
        """Check if the hand is soft (has an ace counted as 11)."""
        return best_total(self.cards)[1]

    @property
    def is_hard(self) -> bool:
        """Check if the hand is hard (not soft)."""
        return not self.is_soft

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand is a natural blackjack (21 with 2 cards)."""
        return is_blackjack(self.cards)

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return is_bust(self.cards)

    @property
    def can_double(self) -> bool:
        """Check if the hand can be doubled down."""
        return len(self.cards) == 2

    @property
    def num_cards(self) -> int:
        """Return the number of cards in the hand."""
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        value_str = f"({self.value})"
        if self.is_soft:
            value_str = f"(soft {self.value})"
        if self.is_blackjack:
            value_str = "(BLACKJACK)"
        if self.is_busted:
            value_str = "(BUST)"
        return f"{cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"
