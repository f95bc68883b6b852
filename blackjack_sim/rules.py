"""Fixed table constants for a simulation session."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class TableRules:
    """
    Table configuration fixed at session start.

    The dealer always stands on any 17, there is one player seat and the
    bet is the same every round.
    """

    # Shoe configuration
    num_packs: int = 6
    reshuffle_threshold: int = 15  # Rebuild the shoe below this many cards

    # Money
    bet_amount: Decimal = Decimal("10")
    initial_bankroll: Decimal = Decimal("1000")

    def __post_init__(self) -> None:
        """Validate rule combinations."""
        if self.num_packs < 1:
            raise ValueError("num_packs must be at least 1")
        # A round can take up to 4 initial cards plus draws; never start dry
        if self.reshuffle_threshold < 4:
            raise ValueError("reshuffle_threshold must be at least 4")
        if self.reshuffle_threshold >= self.num_packs * 52:
            raise ValueError("reshuffle_threshold must be smaller than the shoe")
        if self.bet_amount <= 0:
            raise ValueError("bet_amount must be positive")
        if self.initial_bankroll < 0:
            raise ValueError("initial_bankroll cannot be negative")

    @property
    def shoe_size(self) -> int:
        """Return the number of cards in a freshly built shoe."""
        return self.num_packs * 52
