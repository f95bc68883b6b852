"""Card and Deck classes - immutable card representations."""

from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Iterable, Iterator


class EmptyDeckError(IndexError):
    """Raised when a card is drawn from a deck with no cards left."""


class Suit(Enum):
    """Card suits, in deck build order."""

    HEARTS = 1
    DIAMONDS = 2
    CLUBS = 3
    SPADES = 4

    def __str__(self) -> str:
        symbols = {
            Suit.HEARTS: "♥",
            Suit.DIAMONDS: "♦",
            Suit.CLUBS: "♣",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks, Ace low (1) through King (13)."""

    ACE = 1
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

    def __str__(self) -> str:
        if 2 <= self.value <= 10:
            return str(self.value)
        return {
            Rank.ACE: "A",
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
        }[self]

    @property
    def blackjack_value(self) -> int:
        """Return the blackjack point value (Ace = 11, face cards = 10)."""
        if self == Rank.ACE:
            return 11
        if self.value >= 10:
            return 10
        return self.value

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


# Accepted spellings for Card.from_string, e.g. "10", "T", "K" and "S", "♠"
_RANK_CODES = {str(rank): rank for rank in Rank} | {"T": Rank.TEN}
_SUIT_CODES = {suit.name[0]: suit for suit in Suit} | {str(suit): suit for suit in Suit}


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def name(self) -> str:
        """Display name such as 'A♠' or '10♦'."""
        return f"{self.rank}{self.suit}"

    @property
    def value(self) -> int:
        """Return the blackjack point value."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like 'AS', '10♦', 'Kh'."""
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


class Deck:
    """A shoe of one or more standard 52-card packs, dealt from the end."""

    def __init__(self, num_packs: int = 6, rng: Random | None = None) -> None:
        """
        Build a deck in pack order (suit-major, ranks ascending).

        Args:
            num_packs: Number of 52-card packs in the deck
            rng: Random number generator for shuffling
        """
        if num_packs < 1:
            raise ValueError("Deck must have at least 1 pack")

        self._num_packs = num_packs
        self._rng = rng or Random()
        self._cards: list[Card] = [
            Card(rank, suit)
            for _ in range(num_packs)
            for suit in Suit
            for rank in Rank
        ]

    @classmethod
    def from_cards(cls, cards: Iterable[Card], rng: Random | None = None) -> "Deck":
        """
        Build a deck holding exactly the given cards.

        The last card of ``cards`` is the first one dealt.
        """
        deck = cls(num_packs=1, rng=rng)
        deck._cards = list(cards)
        deck._num_packs = max(1, len(deck._cards) // 52)
        return deck

    def shuffle(self) -> None:
        """Shuffle the deck in place (Fisher-Yates, every order equally likely)."""
        self._rng.shuffle(self._cards)

    def deal_one(self) -> Card:
        """Remove and return the card at the end of the deck."""
        if not self._cards:
            raise EmptyDeckError("Cannot deal from an empty deck")
        return self._cards.pop()

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    @property
    def num_packs(self) -> int:
        """Return the number of packs the deck was built from."""
        return self._num_packs

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)
