"""Play a batch of basic-strategy rounds and print the session summary."""

import argparse
import logging
from random import Random

from blackjack_sim.game import BlackjackSimulator, RoundLog
from blackjack_sim.strategy import BasicStrategy, DealerMimicStrategy
from config import config

logger = logging.getLogger(__name__)

STRATEGIES = {
    "basic": BasicStrategy,
    "dealer": DealerMimicStrategy,
}


def run_simulation(
    rounds: int,
    seed: int | None = None,
    log_path: str | None = None,
    strategy: str = "basic",
) -> BlackjackSimulator:
    """
    Run a simulation session.

    Args:
        rounds: Number of rounds to play
        seed: Seed for a reproducible shoe, or None
        log_path: Round log file, or None for no file log
        strategy: Key into STRATEGIES

    Returns:
        The simulator after the batch
    """
    simulator = BlackjackSimulator(
        rules=config.simulator.table_rules(),
        strategy=STRATEGIES[strategy](),
        rng=Random(seed) if seed is not None else None,
        round_log=RoundLog(log_path) if log_path else None,
    )
    logger.info("Starting simulation of %d rounds with %s strategy", rounds, strategy)
    summary = simulator.play_n_rounds(rounds)
    if summary.insufficient_funds:
        print("Insufficient bankroll to continue playing.")
    return simulator


def print_summary(simulator: BlackjackSimulator) -> None:
    """Print the session counters."""
    last = simulator.last_result
    print(f"Last Game Result: {last}" if last else "No games played yet.")
    print(f"Bankroll: ${simulator.bankroll:.2f}")
    print(f"Games Played: {simulator.games_played}")
    print(f"Wins: {simulator.wins}")
    print(f"Losses: {simulator.losses}")
    print(f"Pushes: {simulator.pushes}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--rounds", type=int, default=config.simulator.batch_rounds)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-path", default=config.simulator.log_path)
    parser.add_argument("--strategy", choices=sorted(STRATEGIES), default="basic")
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.log_level)
    simulator = run_simulation(args.rounds, args.seed, args.log_path, args.strategy)
    print_summary(simulator)


if __name__ == "__main__":
    main()
