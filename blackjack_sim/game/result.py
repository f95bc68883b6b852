"""Round outcomes and their payouts."""

from decimal import Decimal
from enum import Enum, auto


class GameResult(Enum):
    """The single outcome of a completed round."""

    PLAYER_WIN = auto()
    DEALER_WIN = auto()
    PUSH = auto()
    PLAYER_BLACKJACK = auto()
    SURRENDER = auto()
    DOUBLED_WIN = auto()
    DOUBLED_LOSE = auto()

    def __str__(self) -> str:
        return _MESSAGES[self]

    @property
    def is_win(self) -> bool:
        """Check if the round counts as a win."""
        return self in (
            GameResult.PLAYER_WIN,
            GameResult.PLAYER_BLACKJACK,
            GameResult.DOUBLED_WIN,
        )

    @property
    def is_loss(self) -> bool:
        """Check if the round counts as a loss."""
        return self in (
            GameResult.DEALER_WIN,
            GameResult.SURRENDER,
            GameResult.DOUBLED_LOSE,
        )

    @property
    def is_push(self) -> bool:
        """Check if the round is a tie."""
        return self == GameResult.PUSH


_MESSAGES: dict[GameResult, str] = {
    GameResult.PLAYER_WIN: "Player Wins!",
    GameResult.DEALER_WIN: "Dealer Wins!",
    GameResult.PUSH: "Push!",
    GameResult.PLAYER_BLACKJACK: "Player Wins with Blackjack!",
    GameResult.SURRENDER: "Player Surrenders!",
    GameResult.DOUBLED_WIN: "Player Wins a Doubled Bet!",
    GameResult.DOUBLED_LOSE: "Player Loses a Doubled Bet!",
}

# Bankroll change per unit bet
PAYOUT_MULTIPLIERS: dict[GameResult, Decimal] = {
    GameResult.PLAYER_WIN: Decimal("1"),
    GameResult.DEALER_WIN: Decimal("-1"),
    GameResult.PUSH: Decimal("0"),
    GameResult.PLAYER_BLACKJACK: Decimal("1.5"),
    GameResult.SURRENDER: Decimal("-0.5"),
    GameResult.DOUBLED_WIN: Decimal("2"),
    GameResult.DOUBLED_LOSE: Decimal("-2"),
}


def payout(result: GameResult, bet: Decimal | float | int) -> Decimal:
    """
    Return the bankroll change for a finished round.

    Args:
        result: Outcome of the round
        bet: The fixed stake for the round

    Returns:
        Amount won (positive) or lost (negative)
    """
    return Decimal(str(bet)) * PAYOUT_MULTIPLIERS[result]
