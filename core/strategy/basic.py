"""Basic strategy tables for blackjack."""

from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping

from core.cards import Card
from core.hand import Hand
from core.strategy.rules import RuleSet


class Action(Enum):
    """Possible player actions."""

    HIT = auto()
    STAND = auto()
    DOUBLE = auto()

    # Conditional actions (fallback if primary not allowed)
    DOUBLE_OR_HIT = auto()  # Double if allowed, else hit
    DOUBLE_OR_STAND = auto()  # Double if allowed, else stand

    def __str__(self) -> str:
        return self.name.replace("_", "/")


# Type aliases for clarity
DealerUpcard = int  # 2-11 (11 = Ace)
PlayerTotal = int  # Hard total or soft total value
StrategyTable = Mapping[tuple[PlayerTotal, DealerUpcard], Action]

DEALER_UPCARDS = range(2, 12)


class BasicStrategy:
    """
    Basic strategy lookup tables.

    Pre-computed, read-only dictionaries for O(1) lookup. One instance can be
    shared between threads without locking.

    Chart assumptions: multi-deck shoe, double on any two cards, no splits
    (pairs play as their total) and no surrender. Stand-on-soft-17 by default;
    ``dealer_hits_soft_17`` switches the three cells that differ under H17.
    """

    def __init__(self, rules: RuleSet | None = None) -> None:
        """
        Initialize basic strategy for given rules.

        Args:
            rules: Rule set to generate strategy for. Uses default if None.
        """
        self.rules = rules or RuleSet()
        self._hard_table: StrategyTable = MappingProxyType(self._build_hard_table())
        self._soft_table: StrategyTable = MappingProxyType(self._build_soft_table())

    def recommend(
        self,
        hand: Hand,
        dealer_upcard: Card,
        can_double: bool | None = None,
    ) -> Action:
        """
        Recommend an action for a hand against the dealer's up-card.

        Args:
            hand: The player's hand
            dealer_upcard: The dealer's face-up card
            can_double: Whether doubling is possible; defaults to the hand's
                two-card check

        Returns:
            HIT, STAND or DOUBLE
        """
        if can_double is None:
            can_double = hand.can_double
        return self.get_action(
            player_total=hand.value,
            dealer_upcard=dealer_upcard.value,
            is_soft=hand.is_soft,
            can_double=can_double,
        )

    def get_action(
        self,
        player_total: int,
        dealer_upcard: int,
        is_soft: bool = False,
        can_double: bool = True,
    ) -> Action:
        """
        Get the basic strategy action.

        Args:
            player_total: Player's hand total
            dealer_upcard: Dealer's upcard value (2-11, Ace=11)
            is_soft: Whether the hand is soft
            can_double: Whether doubling is allowed

        Returns:
            The recommended action
        """
        can_double = can_double and self.rules.double_down

        action = None
        if is_soft:
            action = self._soft_table.get((player_total, dealer_upcard))
        if action is None:
            action = self._hard_table.get((player_total, dealer_upcard))
        if action is not None:
            return self._resolve_action(action, can_double)

        # Totals outside the tables (busted hands, empty hands)
        if player_total >= 17:
            return Action.STAND
        return Action.HIT

    def _resolve_action(self, action: Action, can_double: bool) -> Action:
        """Resolve conditional actions based on what's allowed."""
        if action == Action.DOUBLE_OR_HIT:
            return Action.DOUBLE if can_double else Action.HIT
        if action == Action.DOUBLE_OR_STAND:
            return Action.DOUBLE if can_double else Action.STAND
        return action

    def _build_hard_table(self) -> dict[tuple[int, int], Action]:
        """Build hard totals strategy table."""
        H = Action.HIT
        S = Action.STAND
        D = Action.DOUBLE_OR_HIT

        table: dict[tuple[int, int], Action] = {}

        # Hard 4-8: Always hit
        for total in range(4, 9):
            for dealer in DEALER_UPCARDS:
                table[(total, dealer)] = H

        # Hard 9
        for dealer in [2, 7, 8, 9, 10, 11]:
            table[(9, dealer)] = H
        for dealer in [3, 4, 5, 6]:
            table[(9, dealer)] = D

        # Hard 10
        for dealer in range(2, 10):
            table[(10, dealer)] = D
        for dealer in [10, 11]:
            table[(10, dealer)] = H

        # Hard 11: hit against an Ace unless the dealer hits soft 17
        for dealer in range(2, 11):
            table[(11, dealer)] = D
        table[(11, 11)] = D if self.rules.dealer_hits_soft_17 else H

        # Hard 12
        for dealer in [2, 3]:
            table[(12, dealer)] = H
        for dealer in [4, 5, 6]:
            table[(12, dealer)] = S
        for dealer in range(7, 12):
            table[(12, dealer)] = H

        # Hard 13-16
        for total in range(13, 17):
            for dealer in range(2, 7):
                table[(total, dealer)] = S
            for dealer in range(7, 12):
                table[(total, dealer)] = H

        # Hard 17+: Always stand
        for total in range(17, 22):
            for dealer in DEALER_UPCARDS:
                table[(total, dealer)] = S

        return table

    def _build_soft_table(self) -> dict[tuple[int, int], Action]:
        """Build soft totals strategy table."""
        H = Action.HIT
        S = Action.STAND
        D = Action.DOUBLE_OR_HIT
        Ds = Action.DOUBLE_OR_STAND

        table: dict[tuple[int, int], Action] = {}

        # Soft 12 (A,A): no splitting, so always hit
        for dealer in DEALER_UPCARDS:
            table[(12, dealer)] = H

        # Soft 13-14 (A,2 A,3)
        for total in [13, 14]:
            for dealer in [2, 3, 4, 7, 8, 9, 10, 11]:
                table[(total, dealer)] = H
            for dealer in [5, 6]:
                table[(total, dealer)] = D

        # Soft 15-16 (A,4 A,5)
        for total in [15, 16]:
            for dealer in [2, 3, 7, 8, 9, 10, 11]:
                table[(total, dealer)] = H
            for dealer in [4, 5, 6]:
                table[(total, dealer)] = D

        # Soft 17 (A,6)
        for dealer in [2, 7, 8, 9, 10, 11]:
            table[(17, dealer)] = H
        for dealer in [3, 4, 5, 6]:
            table[(17, dealer)] = D

        # Soft 18 (A,7)
        table[(18, 2)] = Ds if self.rules.dealer_hits_soft_17 else S
        for dealer in [3, 4, 5, 6]:
            table[(18, dealer)] = Ds
        for dealer in [7, 8]:
            table[(18, dealer)] = S
        for dealer in [9, 10, 11]:
            table[(18, dealer)] = H

        # Soft 19 (A,8)
        for dealer in DEALER_UPCARDS:
            table[(19, dealer)] = S
        if self.rules.dealer_hits_soft_17:
            table[(19, 6)] = Ds

        # Soft 20-21: Always stand
        for total in [20, 21]:
            for dealer in DEALER_UPCARDS:
                table[(total, dealer)] = S

        return table

    @property
    def hard_table(self) -> StrategyTable:
        """Return the hard totals strategy table."""
        return self._hard_table

    @property
    def soft_table(self) -> StrategyTable:
        """Return the soft totals strategy table."""
        return self._soft_table
