"""Round state enumeration."""

from enum import Enum, auto


class RoundState(Enum):
    """
    Round state machine states.

    Flow: DEALING → NATURAL_CHECK → PLAYER_FIRST_ACTION → PLAYER_TURN → DEALER_TURN → RESOLVE → DONE

    DONE is also the resting state between rounds.
    """

    # Shoe check and initial four cards
    DEALING = auto()

    # Blackjack check for both hands
    NATURAL_CHECK = auto()

    # Player actions
    PLAYER_FIRST_ACTION = auto()
    PLAYER_TURN = auto()

    # Dealer plays
    DEALER_TURN = auto()

    # Comparing totals
    RESOLVE = auto()

    # Round recorded, ready for next
    DONE = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Valid state transitions
VALID_TRANSITIONS: dict[RoundState, list[RoundState]] = {
    RoundState.DEALING: [RoundState.NATURAL_CHECK, RoundState.DONE],
    RoundState.NATURAL_CHECK: [RoundState.PLAYER_FIRST_ACTION, RoundState.DONE],
    RoundState.PLAYER_FIRST_ACTION: [
        RoundState.PLAYER_TURN,
        RoundState.DEALER_TURN,
        RoundState.DONE,
    ],
    RoundState.PLAYER_TURN: [RoundState.DEALER_TURN, RoundState.DONE],
    RoundState.DEALER_TURN: [RoundState.RESOLVE, RoundState.DONE],
    RoundState.RESOLVE: [RoundState.DONE],
    RoundState.DONE: [RoundState.DEALING],
}


def is_valid_transition(from_state: RoundState, to_state: RoundState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])
