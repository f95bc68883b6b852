"""Basic strategy decision rules for blackjack."""

from blackjack_sim.cards import Card
from blackjack_sim.hand import Hand
from blackjack_sim.strategy.base import Action


# Soft totals that double down on the first action, keyed by soft total
# with the inclusive dealer-value range.
SOFT_DOUBLES: dict[int, tuple[int, int]] = {
    19: (6, 6),
    18: (2, 6),
    17: (3, 6),
    16: (4, 6),
    15: (4, 6),
    14: (5, 6),
    13: (5, 6),
}


class BasicStrategy:
    """
    Rule-based basic strategy.

    Dealer comparisons use the upcard's blackjack value (2-11, Ace = 11).
    The first decision can double, split or surrender; every later decision
    is only hit or stand.
    """

    def first_action(self, hand: Hand, dealer_upcard: Card) -> Action:
        """
        Get the opening action for a freshly dealt hand.

        Soft rules are checked first, then pairs, then hard totals.
        STAND means no special play; the hand then continues with
        subsequent_action.
        """
        total = hand.total
        dealer = dealer_upcard.value

        # Soft hands
        if hand.is_soft:
            if hand.is_pair and hand.cards[0].is_ace:
                return Action.SPLIT
            dealer_range = SOFT_DOUBLES.get(total)
            if dealer_range and dealer_range[0] <= dealer <= dealer_range[1]:
                return Action.DOUBLE_DOWN

        # Pairs
        if hand.is_pair:
            if total == 18 and (dealer < 7 or dealer >= 10):
                return Action.SPLIT
            if total == 16:
                return Action.SPLIT
            if total == 14 and dealer <= 7:
                return Action.SPLIT
            if total == 12 and 3 <= dealer <= 7:
                return Action.SPLIT
            if total in (4, 6) and 4 <= dealer <= 7:
                return Action.SPLIT

        # Hard totals
        if total == 16 and 9 <= dealer <= 11:
            return Action.SURRENDER
        if total == 15 and dealer == 10:
            return Action.SURRENDER
        if total == 11:
            return Action.DOUBLE_DOWN
        if total == 10 and dealer < 10:
            return Action.DOUBLE_DOWN
        if total == 9 and 3 <= dealer <= 6:
            return Action.DOUBLE_DOWN

        return Action.STAND

    def subsequent_action(self, hand: Hand, dealer_upcard: Card) -> Action:
        """Get the hit/stand decision for a hand already in play."""
        total = hand.total
        dealer = dealer_upcard.value

        if hand.is_soft:
            if total <= 17:
                return Action.HIT
            if total == 18 and dealer >= 9:
                return Action.HIT

        if total <= 11:
            return Action.HIT
        if total == 12 and (dealer < 4 or dealer > 6):
            return Action.HIT
        if 13 <= total <= 16 and dealer >= 7:
            return Action.HIT

        return Action.STAND
