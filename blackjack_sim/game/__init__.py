"""Round engine, outcomes and session management."""

from blackjack_sim.game.events import GameEvent, EventType
from blackjack_sim.game.state import RoundState
from blackjack_sim.game.result import GameResult, payout
from blackjack_sim.game.session import SessionStats
from blackjack_sim.game.round_log import RoundLog, LogWriteError
from blackjack_sim.game.engine import RoundEngine, RoundRecord
from blackjack_sim.game.simulator import (
    BatchSummary,
    BlackjackSimulator,
    InsufficientFundsError,
)

__all__ = [
    "GameEvent",
    "EventType",
    "RoundState",
    "GameResult",
    "payout",
    "SessionStats",
    "RoundLog",
    "LogWriteError",
    "RoundEngine",
    "RoundRecord",
    "BatchSummary",
    "BlackjackSimulator",
    "InsufficientFundsError",
]
