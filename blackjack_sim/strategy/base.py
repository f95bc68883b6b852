"""Player actions and the strategy interface the engine plays through."""

from enum import Enum, auto
from typing import Protocol, runtime_checkable

from blackjack_sim.cards import Card
from blackjack_sim.hand import Hand


class Action(Enum):
    """Possible player actions."""

    HIT = auto()
    STAND = auto()
    DOUBLE_DOWN = auto()
    SPLIT = auto()
    SURRENDER = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


@runtime_checkable
class Strategy(Protocol):
    """
    Anything that can choose a player action.

    Implementations must be pure: the same hand and upcard always give the
    same action.
    """

    def first_action(self, hand: Hand, dealer_upcard: Card) -> Action:
        """Decide the opening play, called once before any hit."""
        ...

    def subsequent_action(self, hand: Hand, dealer_upcard: Card) -> Action:
        """Decide each following play while the hand is still active."""
        ...
