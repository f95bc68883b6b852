"""Player decision strategies."""

from blackjack_sim.strategy.base import Action, Strategy
from blackjack_sim.strategy.basic import BasicStrategy
from blackjack_sim.strategy.dealer_mimic import DealerMimicStrategy

__all__ = [
    "Action",
    "Strategy",
    "BasicStrategy",
    "DealerMimicStrategy",
]
