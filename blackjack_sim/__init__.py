"""Blackjack basic-strategy simulator - 100% UI-agnostic."""

from blackjack_sim.cards import Card, Deck, EmptyDeckError, Rank, Suit
from blackjack_sim.hand import Hand
from blackjack_sim.rules import TableRules

__all__ = [
    "Card",
    "Deck",
    "EmptyDeckError",
    "Rank",
    "Suit",
    "Hand",
    "TableRules",
]
