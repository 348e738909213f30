"""Strategy tables and decision providers."""

from core.strategy.rules import RuleSet
from core.strategy.basic import BasicStrategy, Action
from core.strategy.deciders import DecisionProvider, StrategyDecider

__all__ = [
    "RuleSet",
    "BasicStrategy",
    "Action",
    "DecisionProvider",
    "StrategyDecider",
]
