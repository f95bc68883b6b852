"""Tests for Card and Deck classes."""

import pytest
from collections import Counter
from random import Random

from blackjack_sim.cards import Card, Deck, EmptyDeckError, Rank, Suit


class TestCard:
    """Tests for the Card class."""

    def test_card_creation(self):
        """Test creating a card."""
        card = Card(Rank.ACE, Suit.SPADES)
        assert card.rank == Rank.ACE
        assert card.suit == Suit.SPADES

    def test_card_immutability(self):
        """Test that cards are immutable."""
        card = Card(Rank.ACE, Suit.SPADES)
        with pytest.raises(AttributeError):
            card.rank = Rank.KING

    def test_rank_numbers(self):
        """Test ranks run from Ace (1) to King (13)."""
        assert Rank.ACE.value == 1
        assert Rank.JACK.value == 11
        assert Rank.QUEEN.value == 12
        assert Rank.KING.value == 13
        assert len(Rank) == 13

    def test_card_value(self):
        """Test card blackjack values."""
        assert Card(Rank.TWO, Suit.HEARTS).value == 2
        assert Card(Rank.NINE, Suit.HEARTS).value == 9
        assert Card(Rank.TEN, Suit.HEARTS).value == 10
        assert Card(Rank.JACK, Suit.HEARTS).value == 10
        assert Card(Rank.QUEEN, Suit.HEARTS).value == 10
        assert Card(Rank.KING, Suit.HEARTS).value == 10
        assert Card(Rank.ACE, Suit.HEARTS).value == 11

    def test_card_is_ace(self):
        """Test ace detection."""
        assert Card(Rank.ACE, Suit.SPADES).is_ace
        assert not Card(Rank.KING, Suit.SPADES).is_ace

    def test_card_name(self):
        """Test display names."""
        assert Card(Rank.ACE, Suit.SPADES).name == "A♠"
        assert Card(Rank.TEN, Suit.DIAMONDS).name == "10♦"
        assert Card(Rank.KING, Suit.HEARTS).name == "K♥"
        assert str(Card(Rank.SEVEN, Suit.CLUBS)) == "7♣"

    def test_card_from_string(self):
        """Test creating cards from strings."""
        assert Card.from_string("AS") == Card(Rank.ACE, Suit.SPADES)
        assert Card.from_string("2H") == Card(Rank.TWO, Suit.HEARTS)
        assert Card.from_string("10D") == Card(Rank.TEN, Suit.DIAMONDS)
        assert Card.from_string("TD") == Card(Rank.TEN, Suit.DIAMONDS)
        assert Card.from_string("kc") == Card(Rank.KING, Suit.CLUBS)

    def test_card_from_string_with_symbols(self):
        """Test creating cards from strings with suit symbols."""
        assert Card.from_string("A♠") == Card(Rank.ACE, Suit.SPADES)
        assert Card.from_string("K♥") == Card(Rank.KING, Suit.HEARTS)

    @pytest.mark.parametrize("text", ["", "A", "1S", "AX", "11H"])
    def test_card_from_string_invalid(self, text):
        """Test that malformed strings are rejected."""
        with pytest.raises(ValueError):
            Card.from_string(text)

    def test_card_equality_and_hash(self):
        """Test card equality and use in sets."""
        card1 = Card(Rank.ACE, Suit.SPADES)
        card2 = Card(Rank.ACE, Suit.SPADES)
        card3 = Card(Rank.KING, Suit.SPADES)
        assert card1 == card2
        assert card1 != card3
        assert len({card1, card2, card3}) == 2


class TestDeck:
    """Tests for the Deck class."""

    def test_six_pack_composition(self):
        """Test a 6-pack deck holds 312 cards, 24 per rank and 78 per suit."""
        deck = Deck(num_packs=6)
        assert len(deck) == 312
        assert deck.cards_remaining == 312

        ranks = Counter(card.rank for card in deck)
        suits = Counter(card.suit for card in deck)
        assert all(ranks[rank] == 24 for rank in Rank)
        assert all(suits[suit] == 78 for suit in Suit)

    def test_build_order(self):
        """Test packs are built suit-major with ranks ascending."""
        cards = list(Deck(num_packs=1))
        assert cards[0] == Card(Rank.ACE, Suit.HEARTS)
        assert cards[12] == Card(Rank.KING, Suit.HEARTS)
        assert cards[13] == Card(Rank.ACE, Suit.DIAMONDS)
        assert cards[26] == Card(Rank.ACE, Suit.CLUBS)
        assert cards[51] == Card(Rank.KING, Suit.SPADES)

    def test_deal_from_end(self):
        """Test dealing removes and returns the last card."""
        deck = Deck(num_packs=1)
        assert deck.deal_one() == Card(Rank.KING, Suit.SPADES)
        assert deck.deal_one() == Card(Rank.QUEEN, Suit.SPADES)
        assert deck.cards_remaining == 50

    def test_deal_all_then_empty(self):
        """Test dealing from an exhausted deck raises."""
        deck = Deck(num_packs=1)
        for _ in range(52):
            deck.deal_one()
        with pytest.raises(EmptyDeckError):
            deck.deal_one()

    def test_empty_deck_error_is_index_error(self):
        """Test EmptyDeckError can be caught as IndexError."""
        deck = Deck.from_cards([])
        with pytest.raises(IndexError):
            deck.deal_one()

    def test_shuffle_keeps_composition(self, deck):
        """Test that shuffling is a permutation of the same multiset."""
        before = Counter(Deck(num_packs=6))
        assert Counter(deck) == before
        assert len(deck) == 312

    def test_shuffle_changes_order(self):
        """Test that a shuffle actually reorders the deck."""
        deck = Deck(num_packs=1, rng=Random(1))
        ordered = list(deck)
        deck.shuffle()
        assert list(deck) != ordered

    def test_seeded_shuffle_is_reproducible(self):
        """Test that the same seed gives the same order."""
        deck1 = Deck(num_packs=6, rng=Random(123))
        deck2 = Deck(num_packs=6, rng=Random(123))
        deck1.shuffle()
        deck2.shuffle()
        assert list(deck1) == list(deck2)

    def test_from_cards_deals_last_first(self):
        """Test a deck built from cards deals the last one first."""
        cards = [Card.from_string("2C"), Card.from_string("AS")]
        deck = Deck.from_cards(cards)
        assert deck.deal_one() == Card(Rank.ACE, Suit.SPADES)
        assert deck.deal_one() == Card(Rank.TWO, Suit.CLUBS)

    def test_invalid_pack_count(self):
        """Test that a deck needs at least one pack."""
        with pytest.raises(ValueError):
            Deck(num_packs=0)
