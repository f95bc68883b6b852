"""Session facade: play rounds, batches, and reset."""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from random import Random

from blackjack_sim.rules import TableRules
from blackjack_sim.strategy.base import Strategy
from blackjack_sim.strategy.basic import BasicStrategy
from blackjack_sim.game.engine import RoundEngine, RoundRecord
from blackjack_sim.game.result import GameResult
from blackjack_sim.game.round_log import RoundLog
from blackjack_sim.game.session import SessionStats

logger = logging.getLogger(__name__)


class InsufficientFundsError(ValueError):
    """Raised when a round is requested but the bankroll cannot cover the bet."""


@dataclass
class BatchSummary:
    """Result of a play-N-rounds request."""

    rounds_requested: int
    rounds: list[RoundRecord] = field(default_factory=list)
    insufficient_funds: bool = False

    @property
    def rounds_played(self) -> int:
        """Return how many rounds actually ran."""
        return len(self.rounds)


class BlackjackSimulator:
    """
    One simulation session.

    This is the whole public surface a front-end needs: play a round, play
    a batch, reset, and read the counters back.
    """

    def __init__(
        self,
        rules: TableRules | None = None,
        strategy: Strategy | None = None,
        rng: Random | None = None,
        round_log: RoundLog | None = None,
    ) -> None:
        """
        Initialize a session with a freshly shuffled shoe.

        Args:
            rules: Table constants (uses defaults if not provided)
            strategy: Player strategy (basic strategy if not provided)
            rng: Random number generator for reproducible sessions
            round_log: Where to append each round's trace, or None
        """
        self.rules = rules or TableRules()
        self.stats = SessionStats(
            bet_amount=self.rules.bet_amount,
            initial_bankroll=self.rules.initial_bankroll,
        )
        self.engine = RoundEngine(
            strategy=strategy or BasicStrategy(),
            stats=self.stats,
            rules=self.rules,
            rng=rng,
            round_log=round_log,
        )

    def play_round(self) -> RoundRecord:
        """
        Play a single round.

        Raises:
            InsufficientFundsError: If the bankroll is below the bet
        """
        if not self.can_play:
            raise InsufficientFundsError(
                f"Bankroll {self.stats.bankroll:.2f} cannot cover a "
                f"{self.stats.bet_amount:.2f} bet"
            )
        return self.engine.play_round()

    def play_n_rounds(self, n: int) -> BatchSummary:
        """
        Play up to ``n`` rounds back to back.

        Stops early, without raising, once the bankroll cannot cover the bet.
        """
        if n < 0:
            raise ValueError("Number of rounds cannot be negative")

        summary = BatchSummary(rounds_requested=n)
        for _ in range(n):
            if not self.can_play:
                summary.insufficient_funds = True
                logger.warning(
                    "Insufficient bankroll to continue playing: %.2f after %d of %d rounds",
                    self.stats.bankroll,
                    summary.rounds_played,
                    n,
                )
                break
            summary.rounds.append(self.engine.play_round())

        return summary

    def reset_session(self) -> None:
        """Reset counters and bankroll; the shoe is left as it is."""
        self.stats.reset()
        logger.info("Session reset, bankroll restored to %.2f", self.stats.bankroll)

    @property
    def can_play(self) -> bool:
        """Check if the bankroll covers the next bet."""
        return self.stats.can_afford_bet

    @property
    def last_result(self) -> GameResult | None:
        return self.stats.last_result

    @property
    def bankroll(self) -> Decimal:
        return self.stats.bankroll

    @property
    def bet_amount(self) -> Decimal:
        return self.stats.bet_amount

    @property
    def games_played(self) -> int:
        return self.stats.games_played

    @property
    def wins(self) -> int:
        return self.stats.wins

    @property
    def losses(self) -> int:
        return self.stats.losses

    @property
    def pushes(self) -> int:
        return self.stats.pushes

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards left in the shoe."""
        return self.engine.deck.cards_remaining
