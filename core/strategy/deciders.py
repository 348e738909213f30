"""Decision providers: where a player's actions come from."""

from abc import ABC, abstractmethod
from typing import Sequence

from core.cards import Card
from core.hand import Hand
from core.strategy.basic import Action, BasicStrategy


class DecisionProvider(ABC):
    """Chooses the player's next action from the current hand and up-card."""

    @abstractmethod
    def decide(
        self,
        hand: Hand,
        dealer_upcard: Card,
        legal_actions: Sequence[Action],
    ) -> Action:
        """Return one of ``legal_actions``."""
        ...


class StrategyDecider(DecisionProvider):
    """Plays by the basic strategy table."""

    def __init__(self, strategy: BasicStrategy) -> None:
        self.strategy = strategy

    def decide(
        self,
        hand: Hand,
        dealer_upcard: Card,
        legal_actions: Sequence[Action],
    ) -> Action:
        return self.strategy.recommend(
            hand,
            dealer_upcard,
            can_double=Action.DOUBLE in legal_actions,
        )
