from typing import List

from holdem_showdown.core.card import Rank
from holdem_showdown.evaluation.types import EvaluatedHand, HandCategory


class HandDescriber:
    """Generates human-readable descriptions for evaluated hands."""

    def describe_hand(self, hand: EvaluatedHand) -> str:
        """Get a basic description of the hand, i.e. its category name."""
        return hand.category.display_name

    def describe_hand_detailed(self, hand: EvaluatedHand) -> str:
        """Get a detailed description such as 'Full House, Aces over Kings'."""
        ranks = list(hand.ranks)
        category = hand.category

        if category == HandCategory.STRAIGHT_FLUSH:
            if ranks[0] == Rank.ACE:
                return "Royal Flush"
            return f"{ranks[0].full_name}-high Straight Flush"
        if category == HandCategory.FOUR_OF_A_KIND:
            return f"Four {ranks[0].plural_name}"
        if category == HandCategory.FULL_HOUSE:
            return f"Full House, {ranks[0].plural_name} over {ranks[3].plural_name}"
        if category == HandCategory.FLUSH:
            return f"{ranks[0].full_name}-high Flush"
        if category == HandCategory.STRAIGHT:
            return f"{ranks[0].full_name}-high Straight"
        if category == HandCategory.THREE_OF_A_KIND:
            return f"Three {ranks[0].plural_name}"
        if category == HandCategory.TWO_PAIR:
            return f"Two Pair, {ranks[0].plural_name} and {ranks[2].plural_name}"
        if category == HandCategory.PAIR:
            return f"Pair of {ranks[0].plural_name}"
        return f"{ranks[0].full_name} High"

    def describe_kickers(self, hand: EvaluatedHand) -> List[Rank]:
        """Ranks of the cards that only fill out the hand."""
        used = {
            HandCategory.FOUR_OF_A_KIND: 4,
            HandCategory.THREE_OF_A_KIND: 3,
            HandCategory.TWO_PAIR: 4,
            HandCategory.PAIR: 2,
        }.get(hand.category)
        if used is None:
            return []
        return list(hand.ranks[used:])
