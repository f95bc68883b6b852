"""Session-wide counters and bankroll."""

from dataclasses import dataclass
from decimal import Decimal

from blackjack_sim.game.result import GameResult, payout


@dataclass
class SessionStats:
    """
    Outcome counters and bankroll for one simulation session.

    Every completed round is recorded exactly once through ``record``.
    """

    bet_amount: Decimal = Decimal("10")
    initial_bankroll: Decimal = Decimal("1000")
    bankroll: Decimal | None = None
    games_played: int = 0
    wins: int = 0
    losses: int = 0
    pushes: int = 0
    last_result: GameResult | None = None

    def __post_init__(self) -> None:
        if self.bankroll is None:
            self.bankroll = self.initial_bankroll

    def record(self, result: GameResult) -> Decimal:
        """
        Count a finished round and pay it out.

        Args:
            result: Outcome of the round

        Returns:
            The bankroll change applied
        """
        self.games_played += 1
        if result.is_win:
            self.wins += 1
        elif result.is_loss:
            self.losses += 1
        else:
            self.pushes += 1
        self.last_result = result

        delta = payout(result, self.bet_amount)
        self.bankroll += delta
        return delta

    def reset(self) -> None:
        """Zero the counters and restore the starting bankroll."""
        self.bankroll = self.initial_bankroll
        self.games_played = 0
        self.wins = 0
        self.losses = 0
        self.pushes = 0
        self.last_result = None

    @property
    def can_afford_bet(self) -> bool:
        """Check if the bankroll covers the next bet."""
        return self.bankroll >= self.bet_amount

    @property
    def net_result(self) -> Decimal:
        """Return profit (positive) or loss (negative) since the last reset."""
        return self.bankroll - self.initial_bankroll
