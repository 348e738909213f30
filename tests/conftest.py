"""Pytest fixtures for blackjack engine tests."""

import pytest
from random import Random

from hypothesis import strategies as st

from core.cards import Card, Shoe, Rank, Suit, new_shoe
from core.hand import Hand
from core.strategy import BasicStrategy, RuleSet, StrategyDecider
from core.table import Table


class StackedShoe(Shoe):
    """A shoe that deals the given cards first, in order, then behaves normally."""

    def __init__(self, cards, **kwargs):
        super().__init__(num_decks=1, **kwargs)
        self._stack = [Card.from_string(c) if isinstance(c, str) else c for c in cards]

    def draw(self) -> Card:
        if self._stack:
            return self._stack.pop(0)
        return super().draw()


def make_hand(*cards: str) -> Hand:
    """Build a hand from short card strings like "AS", "10H"."""
    return Hand([Card.from_string(c) for c in cards])


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def shoe(rng):
    """A shuffled 6-deck shoe."""
    return new_shoe(6, penetration=0.75, rng=rng)


@pytest.fixture
def empty_hand():
    """An empty player hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return make_hand("AS", "KH")


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return make_hand("AS", "6H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return make_hand("10S", "6H")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return make_hand("10S", "6H", "KC")


@pytest.fixture
def rules():
    """Default ruleset."""
    return RuleSet()


@pytest.fixture
def basic_strategy(rules):
    """Basic strategy for default rules."""
    return BasicStrategy(rules)


@pytest.fixture
def strategy_decider(basic_strategy):
    """Decision provider that follows basic strategy."""
    return StrategyDecider(basic_strategy)


@pytest.fixture
def table(rng):
    """A table with $100 and a seeded shoe."""
    return Table(starting_balance=100, rng=rng)


# Hypothesis strategies for property-based testing
@st.composite
def card_strategy(draw):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(Rank)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit)


@st.composite
def hand_strategy(draw, min_cards=2, max_cards=5):
    """Generate a random hand."""
    cards = draw(st.lists(card_strategy(), min_size=min_cards, max_size=max_cards))
    return Hand(cards)
