"""Pytest fixtures for blackjack simulator tests."""

import os

# Keep the round log file off unless a test asks for one
os.environ["BLACKJACK_LOG_PATH"] = ""

import pytest
from random import Random

from blackjack_sim.cards import Card, Deck, Rank, Suit
from blackjack_sim.hand import Hand
from blackjack_sim.rules import TableRules
from blackjack_sim.strategy import BasicStrategy
from blackjack_sim.game import RoundEngine, SessionStats


def make_hand(*codes: str) -> Hand:
    """Build a hand from card strings like 'AS', '10H'."""
    hand = Hand()
    for code in codes:
        hand.add_card(Card.from_string(code))
    return hand


def stacked_deck(*codes: str) -> Deck:
    """
    A deck that deals the given cards first, in order.

    Twenty filler cards sit underneath so the reshuffle threshold is never hit.
    """
    filler = [Card(Rank.TWO, Suit.CLUBS)] * 20
    rigged = [Card.from_string(code) for code in codes]
    return Deck.from_cards(filler + list(reversed(rigged)))


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled 6-pack deck."""
    d = Deck(num_packs=6, rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def rules():
    """Default table rules."""
    return TableRules()


@pytest.fixture
def basic_strategy():
    """Basic strategy."""
    return BasicStrategy()


@pytest.fixture
def stats(rules):
    """Fresh session stats."""
    return SessionStats(bet_amount=rules.bet_amount, initial_bankroll=rules.initial_bankroll)


@pytest.fixture
def engine_with(basic_strategy, stats, rules, rng):
    """Factory for an engine dealing a stacked sequence of cards."""

    def _build(*codes: str, strategy=None, round_log=None) -> RoundEngine:
        return RoundEngine(
            strategy=strategy or basic_strategy,
            stats=stats,
            rules=rules,
            rng=rng,
            deck=stacked_deck(*codes),
            round_log=round_log,
        )

    return _build


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
def pair_8s_hand():
    """A pair of 8s hand."""
    return make_hand("8S", "8H")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return make_hand("10S", "6H", "KC")


@pytest.fixture
def hand_of():
    """Factory building a hand from card strings."""
    return make_hand
