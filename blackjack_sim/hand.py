"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from blackjack_sim.cards import Card


def soft_total(cards: Iterable[Card]) -> tuple[int, int]:
    """
    Compute the best total and the number of Aces still counted as 11.

    Aces start at 11; while the total is over 21 and an Ace is still high,
    that Ace drops to 1.
    """
    total = 0
    aces = 0

    for card in cards:
        total += card.value
        if card.is_ace:
            aces += 1

    while total > 21 and aces > 0:
        total -= 10
        aces -= 1

    return total, aces


@dataclass
class Hand:
    """A blackjack hand with value calculation and per-round play flags."""

    cards: list[Card] = field(default_factory=list)
    doubled: bool = False
    split: bool = False  # Reserved, splitting is not played
    first_action_pending: bool = True
    active: bool = True

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    @property
    def total(self) -> int:
        """
        Calculate the best hand total.

        Returns the highest total that doesn't bust, or the lowest bust total.
        """
        return soft_total(self.cards)[0]

    @property
    def is_soft(self) -> bool:
        """Check if the hand has an Ace counted as 11 without busting."""
        total, aces = soft_total(self.cards)
        return aces > 0 and total <= 21

    @property
    def is_hard(self) -> bool:
        """Check if the hand is hard (not soft)."""
        return not self.is_soft

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand is a natural blackjack (21 with 2 cards)."""
        return len(self.cards) == 2 and self.total == 21

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (total > 21)."""
        return self.total > 21

    @property
    def is_pair(self) -> bool:
        """Check if the hand is a pair (two cards of same rank)."""
        return len(self.cards) == 2 and self.cards[0].rank == self.cards[1].rank

    @property
    def upcard(self) -> Card:
        """The first card dealt, shown face up for the dealer."""
        return self.cards[0]

    def display(self) -> str:
        """Card names joined for the round trace, e.g. 'A♠, K♥'."""
        return ", ".join(card.name for card in self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        value_str = f"({self.total})"
        if self.is_soft:
            value_str = f"(soft {self.total})"
        if self.is_blackjack:
            value_str = "(BLACKJACK)"
        if self.is_busted:
            value_str = "(BUST)"
        return f"{self.display()} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, total={self.total})"
