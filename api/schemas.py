"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, ConfigDict, Field


class PlayManyRequest(BaseModel):
    """Request to play a batch of rounds."""

    rounds: int = Field(default=1000, ge=1, le=10000, description="Rounds to play")


class CardResponse(BaseModel):
    """Card representation."""

    model_config = ConfigDict(from_attributes=True)

    rank: str
    suit: str
    value: int


class HandResponse(BaseModel):
    """Hand representation."""

    cards: list[CardResponse]
    total: int
    is_soft: bool
    is_blackjack: bool
    is_busted: bool
    doubled: bool


class StatsResponse(BaseModel):
    """Session counters and bankroll."""

    bankroll: float
    bet_amount: float
    games_played: int
    wins: int
    losses: int
    pushes: int
    last_result: str | None
    last_result_message: str | None
    can_play: bool
    cards_remaining: int


class RoundResponse(BaseModel):
    """One finished round."""

    game_number: int
    result: str
    message: str
    payout: float
    bankroll: float
    player_hand: HandResponse
    dealer_hand: HandResponse
    trace: list[str]
    stats: StatsResponse


class BatchResponse(BaseModel):
    """Outcome of a batch of rounds."""

    rounds_requested: int
    rounds_played: int
    insufficient_funds: bool
    net_result: float
    stats: StatsResponse
