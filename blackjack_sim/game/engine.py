"""Blackjack round engine with state machine."""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from random import Random

from transitions import Machine

from blackjack_sim.cards import Card, Deck
from blackjack_sim.hand import Hand
from blackjack_sim.rules import TableRules
from blackjack_sim.strategy.base import Action, Strategy
from blackjack_sim.game.events import EventEmitter, EventType, GameEvent, narrate
from blackjack_sim.game.result import GameResult
from blackjack_sim.game.round_log import RoundLog
from blackjack_sim.game.session import SessionStats
from blackjack_sim.game.state import RoundState

logger = logging.getLogger(__name__)

DEALER_STANDS_ON = 17


@dataclass
class RoundRecord:
    """Everything a finished round produced."""

    game_number: int
    result: GameResult
    payout: Decimal
    bankroll: Decimal
    player_hand: Hand
    dealer_hand: Hand
    dealer_played: bool = False
    trace: list[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        """The round trace as one newline-separated block."""
        return "\n".join(self.trace)


class RoundEngine:
    """
    Plays single rounds end to end using a state machine.

    The engine owns the shoe; the strategy makes every player decision and
    the dealer always hits below 17. Finished rounds are recorded in the
    session stats and, when a round log is given, appended to it.
    """

    # State machine states
    STATES = [s.name.lower() for s in RoundState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "start_dealing", "source": "done", "dest": "dealing"},
        {"trigger": "check_naturals", "source": "dealing", "dest": "natural_check"},
        {"trigger": "no_naturals", "source": "natural_check", "dest": "player_first_action"},
        {"trigger": "keep_playing", "source": "player_first_action", "dest": "player_turn"},
        {
            "trigger": "player_done",
            "source": ["player_first_action", "player_turn"],
            "dest": "dealer_turn",
        },
        {"trigger": "dealer_done", "source": "dealer_turn", "dest": "resolve"},
        {
            "trigger": "finish_round",
            "source": [
                "natural_check",
                "player_first_action",
                "player_turn",
                "dealer_turn",
                "resolve",
            ],
            "dest": "done",
        },
        {"trigger": "abort_round", "source": "*", "dest": "done"},
    ]

    def __init__(
        self,
        strategy: Strategy,
        stats: SessionStats | None = None,
        rules: TableRules | None = None,
        rng: Random | None = None,
        deck: Deck | None = None,
        round_log: RoundLog | None = None,
    ) -> None:
        """
        Initialize a new round engine.

        Args:
            strategy: Decides every player action
            stats: Session counters to record into (fresh if not provided)
            rules: Table constants (uses defaults if not provided)
            rng: Random number generator for reproducible shuffles
            deck: Starting deck; a shuffled shoe is built if not provided
            round_log: Where to append each round's trace, or None
        """
        self.rules = rules or TableRules()
        self.strategy = strategy
        self.stats = stats or SessionStats(
            bet_amount=self.rules.bet_amount,
            initial_bankroll=self.rules.initial_bankroll,
        )
        self.round_log = round_log
        self._rng = rng or Random()
        self.deck = deck if deck is not None else self._new_shoe()

        self.events = EventEmitter()
        self.events.subscribe(self._narrate)
        self._trace: list[str] = []
        self.state_history: list[RoundState] = []

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="done",
            auto_transitions=False,
            model_attribute="_machine_state",
            after_state_change="_track_state",
        )

    @property
    def state(self) -> RoundState:
        """Get current round state as enum."""
        return RoundState[self._machine_state.upper()]  # type: ignore

    def _track_state(self) -> None:
        self.state_history.append(self.state)

    def _narrate(self, event: GameEvent) -> None:
        line = narrate(event)
        if line is not None:
            self._trace.append(line)

    def play_round(self) -> RoundRecord:
        """
        Play one complete round.

        Returns:
            The record of the finished round

        Raises:
            LogWriteError: If the round log could not be written. The round
                is already counted and paid out when this is raised.

        Any other error raised mid-round (a strategy failing, an empty deck)
        propagates uncounted, with the engine back at rest in DONE.
        """
        self._trace = []
        self.state_history = []
        self.events.clear_history()
        game_number = self.stats.games_played + 1

        self.start_dealing()
        try:
            return self._play(game_number)
        except Exception:
            # A failed round is not recorded; the machine goes back to rest
            if self.state != RoundState.DONE:
                logger.warning("Game %d aborted in state %s", game_number, self.state)
                self.abort_round()
            raise

    def _play(self, game_number: int) -> RoundRecord:
        """Deal, play and record one round from the dealing state."""
        self.events.emit_new(EventType.ROUND_STARTED, game_number=game_number)
        self._ensure_shoe()

        player = Hand()
        dealer = Hand()

        # Deal: player, dealer, player, dealer
        self._deal_to(player, "player")
        self._deal_to(dealer, "dealer")
        self._deal_to(player, "player")
        self._deal_to(dealer, "dealer")

        self.check_naturals()
        self.events.emit_new(
            EventType.HANDS_DEALT,
            player_cards=player.display(),
            player_total=player.total,
            dealer_upcard=dealer.upcard.name,
        )

        dealer_played = False
        result = self._check_naturals(player, dealer)

        if result is None:
            self.no_naturals()
            result = self._play_first_action(player, dealer.upcard)

        if result is None and player.active:
            self.keep_playing()
            result = self._play_player_turn(player, dealer.upcard)

        if result is None:
            self.player_done()
            dealer_played = True
            result = self._play_dealer(player, dealer)

        if result is None:
            self.dealer_done()
            result = self._resolve(player, dealer)

        return self._finish(game_number, result, player, dealer, dealer_played)

    def _new_shoe(self) -> Deck:
        """Build and shuffle a full shoe."""
        deck = Deck(num_packs=self.rules.num_packs, rng=self._rng)
        deck.shuffle()
        return deck

    def _ensure_shoe(self) -> None:
        """Replace the shoe before dealing if it is running low."""
        if self.deck.cards_remaining >= self.rules.reshuffle_threshold:
            return

        remaining = self.deck.cards_remaining
        self.deck = self._new_shoe()
        logger.info(
            "Shoe down to %d cards, rebuilt %d-pack shoe",
            remaining,
            self.rules.num_packs,
        )
        self.events.emit_new(EventType.SHOE_SHUFFLED, cards=self.deck.cards_remaining)

    def _deal_to(self, hand: Hand, owner: str) -> Card:
        """Deal a card to a hand."""
        card = self.deck.deal_one()
        hand.add_card(card)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=card.name,
            hand=owner,
            hand_total=hand.total,
        )
        return card

    def _reveal_dealer(self, dealer: Hand) -> None:
        self.events.emit_new(
            EventType.DEALER_REVEALS,
            dealer_cards=dealer.display(),
            dealer_total=dealer.total,
        )

    def _check_naturals(self, player: Hand, dealer: Hand) -> GameResult | None:
        """Settle the round at once if either side holds a blackjack."""
        player_bj = player.is_blackjack
        dealer_bj = dealer.is_blackjack

        if player_bj and dealer_bj:
            self._reveal_dealer(dealer)
            self.events.emit_new(EventType.BOTH_BLACKJACK)
            return GameResult.PUSH
        if dealer_bj:
            self._reveal_dealer(dealer)
            self.events.emit_new(EventType.DEALER_BLACKJACK)
            return GameResult.DEALER_WIN
        if player_bj:
            self.events.emit_new(EventType.PLAYER_BLACKJACK)
            return GameResult.PLAYER_BLACKJACK
        return None

    def _play_first_action(self, player: Hand, upcard: Card) -> GameResult | None:
        """Apply the strategy's opening decision."""
        action = self.strategy.first_action(player, upcard)
        player.first_action_pending = False

        if action == Action.DOUBLE_DOWN:
            card = self._deal_to(player, "player")
            player.doubled = True
            player.active = False
            self.events.emit_new(EventType.PLAYER_DOUBLE, card=card.name, total=player.total)
            if player.is_busted:
                self.events.emit_new(EventType.PLAYER_BUSTS)
                return GameResult.DOUBLED_LOSE
            return None

        if action == Action.SURRENDER:
            player.active = False
            self.events.emit_new(EventType.PLAYER_SURRENDER)
            return GameResult.SURRENDER

        if action == Action.SPLIT:
            # Splitting is not played; the pair stands as one hand
            player.active = False
            self.events.emit_new(EventType.PLAYER_SPLIT, total=player.total)
            return None

        return None

    def _play_player_turn(self, player: Hand, upcard: Card) -> GameResult | None:
        """Hit until the strategy stands or the hand busts."""
        while player.active:
            action = self.strategy.subsequent_action(player, upcard)

            if action != Action.HIT:
                if action != Action.STAND:
                    logger.debug("Treating %s after the first action as a stand", action)
                player.active = False
                self.events.emit_new(EventType.PLAYER_STAND, total=player.total)
                break

            card = self._deal_to(player, "player")
            self.events.emit_new(EventType.PLAYER_HIT, card=card.name, total=player.total)
            if player.is_busted:
                player.active = False
                self.events.emit_new(EventType.PLAYER_BUSTS)
                return GameResult.DEALER_WIN

        return None

    def _play_dealer(self, player: Hand, dealer: Hand) -> GameResult | None:
        """Dealer hits below 17, soft or hard alike."""
        while dealer.total < DEALER_STANDS_ON:
            card = self._deal_to(dealer, "dealer")
            self.events.emit_new(EventType.DEALER_HITS, card=card.name, total=dealer.total)
            if dealer.is_busted:
                self.events.emit_new(EventType.DEALER_BUSTS)
                return GameResult.DOUBLED_WIN if player.doubled else GameResult.PLAYER_WIN

        self.events.emit_new(EventType.DEALER_STANDS, total=dealer.total)
        self._reveal_dealer(dealer)
        return None

    def _resolve(self, player: Hand, dealer: Hand) -> GameResult:
        """Compare totals once neither side has busted."""
        if player.total > dealer.total:
            return GameResult.DOUBLED_WIN if player.doubled else GameResult.PLAYER_WIN
        if player.total < dealer.total:
            return GameResult.DOUBLED_LOSE if player.doubled else GameResult.DEALER_WIN
        return GameResult.PUSH

    def _finish(
        self,
        game_number: int,
        result: GameResult,
        player: Hand,
        dealer: Hand,
        dealer_played: bool,
    ) -> RoundRecord:
        """Record, pay out and log the round."""
        self.finish_round()

        delta = self.stats.record(result)
        self.events.emit_new(
            EventType.ROUND_ENDED,
            game_number=game_number,
            result=str(result),
            payout=delta,
            bankroll=self.stats.bankroll,
        )
        logger.debug(
            "Game %d: %s (%+.2f), bankroll %.2f",
            game_number,
            result.name,
            delta,
            self.stats.bankroll,
        )

        record = RoundRecord(
            game_number=game_number,
            result=result,
            payout=delta,
            bankroll=self.stats.bankroll,
            player_hand=player,
            dealer_hand=dealer,
            dealer_played=dealer_played,
            trace=list(self._trace),
        )

        if self.round_log is not None:
            self.round_log.append(record.text)

        return record
