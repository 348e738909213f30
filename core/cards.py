"""Card and Shoe classes - immutable card representations."""

from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Iterator

CARDS_PER_DECK = 52


class Suit(Enum):
    """Card suits."""

    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]

    @property
    def title(self) -> str:
        """Return the suit name, e.g. "Hearts"."""
        return self.name.title()


class Rank(Enum):
    """Card ranks with blackjack values."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]

    @property
    def title(self) -> str:
        """Return the spoken rank, e.g. "8" or "King"."""
        if self.value <= 10:
            return str(self.value)
        return self.name.title()

    @property
    def blackjack_value(self) -> int:
        """Return the blackjack point value (Ace = 11, face cards = 10)."""
        if self.value <= 10:
            return self.value
        if self == Rank.ACE:
            return 11
        return 10  # Face cards

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE

    @property
    def is_ten_value(self) -> bool:
        """Check if this rank has a value of 10."""
        return self.blackjack_value == 10


_RANK_CODES = {
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "10": Rank.TEN,
    "T": Rank.TEN,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
    "A": Rank.ACE,
}

_SUIT_CODES = {
    "C": Suit.CLUBS,
    "♣": Suit.CLUBS,
    "D": Suit.DIAMONDS,
    "♦": Suit.DIAMONDS,
    "H": Suit.HEARTS,
    "♥": Suit.HEARTS,
    "S": Suit.SPADES,
    "♠": Suit.SPADES,
}


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def name(self) -> str:
        """Return the long form, e.g. "King of Hearts"."""
        return f"{self.rank.title} of {self.suit.title}"

    @property
    def value(self) -> int:
        """Return the blackjack point value."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @property
    def is_ten_value(self) -> bool:
        """Check if this card has a value of 10."""
        return self.rank.is_ten_value

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        if rank_str not in _RANK_CODES:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in _SUIT_CODES:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(_RANK_CODES[rank_str], _SUIT_CODES[suit_str])


class Shoe:
    """A multi-deck shoe that reshuffles itself when it runs dry."""

    def __init__(
        self,
        num_decks: int = 6,
        penetration: float = 0.75,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a shoe with multiple decks, in order.

        Args:
            num_decks: Number of decks in the shoe (typically 6 or 8)
            penetration: Fraction of shoe dealt before the cut card (0.0-1.0)
            rng: Random number generator for shuffling
        """
        if num_decks < 1:
            raise ValueError("Shoe must have at least 1 deck")
        if not 0.0 < penetration <= 1.0:
            raise ValueError("Penetration must be between 0 and 1")

        self._num_decks = num_decks
        self._penetration = penetration
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self._cut_card_position: int = 0
        self._reshuffle_count = 0
        self.reset()

    def reset(self) -> None:
        """Reset shoe to all cards from all decks."""
        self._cards = [
            Card(rank, suit)
            for _ in range(self._num_decks)
            for suit in Suit
            for rank in Rank
        ]
        self._cut_card_position = int(len(self._cards) * self._penetration)

    def shuffle(self) -> None:
        """Gather every card back into the shoe and shuffle."""
        self.reset()
        self._rng.shuffle(self._cards)
        self._reshuffle_count += 1

    def draw(self) -> Card:
        """Draw the top card, reshuffling first if the shoe is empty."""
        if not self._cards:
            self.shuffle()
        return self._cards.pop()

    @property
    def needs_shuffle(self) -> bool:
        """Check if the cut card has been reached."""
        return len(self._cards) <= (self.total_cards - self._cut_card_position)

    @property
    def reshuffle_count(self) -> int:
        """Return how many times the shoe has been shuffled."""
        return self._reshuffle_count

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    @property
    def cards_dealt(self) -> int:
        """Return the number of cards dealt."""
        return self.total_cards - len(self._cards)

    @property
    def total_cards(self) -> int:
        """Return the total number of cards in a full shoe."""
        return self._num_decks * CARDS_PER_DECK

    @property
    def num_decks(self) -> int:
        """Return the number of decks in the shoe."""
        return self._num_decks

    @property
    def penetration(self) -> float:
        """Return the configured penetration."""
        return self._penetration

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)


def new_shoe(
    deck_count: int = 6,
    penetration: float = 0.75,
    rng: Random | None = None,
) -> Shoe:
    """Build a shuffled shoe of ``deck_count`` decks."""
    shoe = Shoe(num_decks=deck_count, penetration=penetration, rng=rng)
    shoe.shuffle()
    return shoe
