"""Tests for round events and narration."""

from decimal import Decimal

from blackjack_sim.game import EventType, GameEvent
from blackjack_sim.game.events import EventEmitter, narrate


class TestEventEmitter:
    """Tests for the EventEmitter class."""

    def test_typed_subscription(self):
        """Test handlers only see their event type."""
        emitter = EventEmitter()
        seen = []
        emitter.subscribe(seen.append, EventType.PLAYER_HIT)

        emitter.emit_new(EventType.PLAYER_STAND, total=18)
        emitter.emit_new(EventType.PLAYER_HIT, card="5♣", total=17)

        assert [event.event_type for event in seen] == [EventType.PLAYER_HIT]

    def test_catch_all_subscription(self):
        """Test a handler without a type sees every event."""
        emitter = EventEmitter()
        seen = []
        emitter.subscribe(seen.append)

        emitter.emit_new(EventType.ROUND_STARTED, game_number=1)
        emitter.emit_new(EventType.DEALER_BUSTS)

        assert len(seen) == 2

    def test_history(self):
        """Test emitted events are kept until cleared."""
        emitter = EventEmitter()
        event = emitter.emit_new(EventType.PLAYER_BUSTS)

        assert emitter.history == [event]
        emitter.clear_history()
        assert emitter.history == []


class TestNarration:
    """Tests for the trace lines built from events."""

    def test_card_dealt_is_silent(self):
        """Test single card deals are not narrated."""
        event = GameEvent(EventType.CARD_DEALT, {"card": "A♠", "hand": "player", "hand_total": 11})
        assert narrate(event) is None

    def test_player_hit(self):
        """Test the hit line."""
        event = GameEvent(EventType.PLAYER_HIT, {"card": "5♣", "total": 17})
        assert narrate(event) == "Player hits: 5♣ (Total: 17)"

    def test_round_ended(self):
        """Test the result line shows the bankroll to the cent."""
        event = GameEvent(
            EventType.ROUND_ENDED,
            {"game_number": 3, "result": "Push!", "payout": Decimal("0"), "bankroll": Decimal("1005")},
        )
        assert narrate(event) == "Push!\nBankroll: $1005.00"

    def test_every_type_but_card_dealt_is_narrated(self):
        """Test only CARD_DEALT lacks a narration template."""
        from blackjack_sim.game.events import NARRATION

        assert set(EventType) - set(NARRATION) == {EventType.CARD_DEALT}
