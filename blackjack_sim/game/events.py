"""Round events and their human-readable narration."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable


class EventType(Enum):
    """Types of round events."""

    # Round flow events
    ROUND_STARTED = auto()
    ROUND_ENDED = auto()

    # Card events
    SHOE_SHUFFLED = auto()
    CARD_DEALT = auto()
    HANDS_DEALT = auto()

    # Natural blackjack checks
    BOTH_BLACKJACK = auto()
    DEALER_BLACKJACK = auto()
    PLAYER_BLACKJACK = auto()

    # Player action events
    PLAYER_HIT = auto()
    PLAYER_STAND = auto()
    PLAYER_DOUBLE = auto()
    PLAYER_SPLIT = auto()
    PLAYER_SURRENDER = auto()
    PLAYER_BUSTS = auto()

    # Dealer events
    DEALER_REVEALS = auto()
    DEALER_HITS = auto()
    DEALER_STANDS = auto()
    DEALER_BUSTS = auto()


@dataclass(frozen=True)
class GameEvent:
    """
    Immutable round event.

    Events are how the engine reports what happened; the round trace and
    any outside observer are built from them.
    """

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.event_type.name}: {self.data}"


# Type alias for event handlers
EventHandler = Callable[[GameEvent], None]


class EventEmitter:
    """
    Simple event emitter for round events.

    Allows subscribing to specific event types or all events.
    """

    def __init__(self) -> None:
        """Initialize the event emitter."""
        self._handlers: dict[EventType | None, list[EventHandler]] = {}
        self._event_history: list[GameEvent] = []

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """
        Subscribe to events.

        Args:
            handler: Function to call when event occurs
            event_type: Specific event type to subscribe to, or None for all events
        """
        self._handlers.setdefault(event_type, []).append(handler)

    def emit(self, event: GameEvent) -> None:
        """
        Emit an event to all subscribers.

        Args:
            event: The event to emit
        """
        self._event_history.append(event)

        for handler in self._handlers.get(event.event_type, []):
            handler(event)

        # Catch-all handlers
        for handler in self._handlers.get(None, []):
            handler(event)

    def emit_new(
        self,
        event_type: EventType,
        **data: Any,
    ) -> GameEvent:
        """
        Create and emit a new event.

        Args:
            event_type: Type of event
            **data: Event data

        Returns:
            The created event
        """
        event = GameEvent(event_type=event_type, data=data)
        self.emit(event)
        return event

    @property
    def history(self) -> list[GameEvent]:
        """Return the event history."""
        return self._event_history.copy()

    def clear_history(self) -> None:
        """Clear the event history."""
        self._event_history.clear()


# Narration templates, formatted with the event data.
# Events missing here (CARD_DEALT) are not narrated.
NARRATION: dict[EventType, str] = {
    EventType.ROUND_STARTED: "*** Game {game_number} ***",
    EventType.SHOE_SHUFFLED: "Shoe rebuilt and shuffled ({cards} cards).",
    EventType.HANDS_DEALT: (
        "Player's hand: {player_cards} (Total: {player_total})\n"
        "Dealer shows: {dealer_upcard}"
    ),
    EventType.BOTH_BLACKJACK: "Both have Blackjack! Push!",
    EventType.DEALER_BLACKJACK: "Blackjack! Dealer wins!",
    EventType.PLAYER_BLACKJACK: "Blackjack! Player wins!",
    EventType.PLAYER_HIT: "Player hits: {card} (Total: {total})",
    EventType.PLAYER_STAND: "Player stands.",
    EventType.PLAYER_DOUBLE: "Player doubles down: {card} (Total: {total})",
    EventType.PLAYER_SPLIT: "Player would split; splitting is not supported, player stands.",
    EventType.PLAYER_SURRENDER: "Player surrenders.",
    EventType.PLAYER_BUSTS: "Player busts!",
    EventType.DEALER_REVEALS: "Dealer's hand: {dealer_cards} (Total: {dealer_total})",
    EventType.DEALER_HITS: "Dealer hits: {card} (Total: {total})",
    EventType.DEALER_STANDS: "Dealer stands.",
    EventType.DEALER_BUSTS: "Dealer busts!",
    EventType.ROUND_ENDED: "{result}\nBankroll: ${bankroll:.2f}",
}


def narrate(event: GameEvent) -> str | None:
    """Return the trace line(s) for an event, or None if it is silent."""
    template = NARRATION.get(event.event_type)
    if template is None:
        return None
    return template.format(**event.data)
