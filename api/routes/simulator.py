"""Simulator API endpoints."""

from typing import Annotated

import asyncio

from fastapi import APIRouter, HTTPException, Header
from starlette.concurrency import run_in_threadpool

from api.schemas import (
    BatchResponse,
    CardResponse,
    HandResponse,
    PlayManyRequest,
    RoundResponse,
    StatsResponse,
)
from api.session import create_session, get_locked_simulator
from blackjack_sim.game import BlackjackSimulator, InsufficientFundsError
from blackjack_sim.hand import Hand
from config import config

router = APIRouter()

SessionHeader = Annotated[str | None, Header(alias="X-Session-ID")]


async def _require_simulator(
    session_id: str | None,
) -> tuple[BlackjackSimulator, asyncio.Lock]:
    """Resolve the session header to its simulator and lock, or fail with 404."""
    if session_id is None:
        raise HTTPException(status_code=404, detail="Missing session")
    found = await get_locked_simulator(session_id)
    if found is None:
        raise HTTPException(status_code=404, detail="Unknown or expired session")
    return found


def _hand_to_response(hand: Hand) -> HandResponse:
    """Convert a Hand to HandResponse."""
    return HandResponse(
        cards=[
            CardResponse(
                rank=str(c.rank),
                suit=str(c.suit),
                value=c.value,
            )
            for c in hand.cards
        ],
        total=hand.total,
        is_soft=hand.is_soft,
        is_blackjack=hand.is_blackjack,
        is_busted=hand.is_busted,
        doubled=hand.doubled,
    )


def _stats_response(simulator: BlackjackSimulator) -> StatsResponse:
    """Convert session stats to response."""
    last = simulator.last_result
    return StatsResponse(
        bankroll=float(simulator.bankroll),
        bet_amount=float(simulator.bet_amount),
        games_played=simulator.games_played,
        wins=simulator.wins,
        losses=simulator.losses,
        pushes=simulator.pushes,
        last_result=last.name if last else None,
        last_result_message=str(last) if last else None,
        can_play=simulator.can_play,
        cards_remaining=simulator.cards_remaining,
    )


@router.post("/new")
async def new_session() -> dict[str, str]:
    """Create a new simulation session with a fresh shoe and bankroll."""
    return {"session_id": await create_session()}


@router.get("/stats")
async def get_stats(session_id: SessionHeader = None) -> StatsResponse:
    """Get the session's counters and bankroll."""
    simulator, lock = await _require_simulator(session_id)
    async with lock:
        return _stats_response(simulator)


@router.post("/play")
async def play_round(session_id: SessionHeader = None) -> RoundResponse:
    """Play a single round."""
    simulator, lock = await _require_simulator(session_id)

    # Rounds append to the log file, so they run off the event loop
    async with lock:
        try:
            record = await run_in_threadpool(simulator.play_round)
        except InsufficientFundsError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        return RoundResponse(
            game_number=record.game_number,
            result=record.result.name,
            message=str(record.result),
            payout=float(record.payout),
            bankroll=float(record.bankroll),
            player_hand=_hand_to_response(record.player_hand),
            dealer_hand=_hand_to_response(record.dealer_hand),
            trace=record.trace,
            stats=_stats_response(simulator),
        )


@router.post("/play-many")
async def play_many(
    request: PlayManyRequest | None = None,
    session_id: SessionHeader = None,
) -> BatchResponse:
    """Play a batch of rounds, stopping early when the bankroll runs out."""
    simulator, lock = await _require_simulator(session_id)
    rounds = request.rounds if request else config.simulator.batch_rounds

    async with lock:
        summary = await run_in_threadpool(simulator.play_n_rounds, rounds)

        return BatchResponse(
            rounds_requested=summary.rounds_requested,
            rounds_played=summary.rounds_played,
            insufficient_funds=summary.insufficient_funds,
            net_result=float(sum(r.payout for r in summary.rounds)),
            stats=_stats_response(simulator),
        )


@router.post("/reset")
async def reset_session(session_id: SessionHeader = None) -> StatsResponse:
    """Reset counters and bankroll; the shoe is kept."""
    simulator, lock = await _require_simulator(session_id)
    async with lock:
        simulator.reset_session()
        return _stats_response(simulator)
