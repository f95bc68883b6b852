"""A baseline strategy that plays the player hand like the dealer."""

from blackjack_sim.cards import Card
from blackjack_sim.hand import Hand
from blackjack_sim.strategy.base import Action


class DealerMimicStrategy:
    """Never double, split or surrender; hit below a fixed total."""

    def __init__(self, stand_on: int = 17) -> None:
        self.stand_on = stand_on

    def first_action(self, hand: Hand, dealer_upcard: Card) -> Action:
        return Action.STAND

    def subsequent_action(self, hand: Hand, dealer_upcard: Card) -> Action:
        if hand.total < self.stand_on:
            return Action.HIT
        return Action.STAND
