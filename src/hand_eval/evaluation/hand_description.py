"""Human-readable descriptions of evaluated hands."""
from typing import Callable, Dict

from hand_eval.evaluation.types import Category, HandResult


class HandDescriber:
    """Generates human-readable descriptions for poker hands."""

    def __init__(self):
        self._detailed: Dict[Category, Callable[[HandResult], str]] = {
            Category.ROYAL_FLUSH: lambda result: "Royal Flush",
            Category.STRAIGHT_FLUSH: self._describe_straight_flush,
            Category.FOUR_OF_A_KIND: self._describe_four_of_kind,
            Category.FULL_HOUSE: self._describe_full_house,
            Category.FLUSH: self._describe_flush,
            Category.STRAIGHT: self._describe_straight,
            Category.THREE_OF_A_KIND: self._describe_three_of_kind,
            Category.TWO_PAIR: self._describe_two_pair,
            Category.ONE_PAIR: self._describe_pair,
            Category.HIGH_CARD: self._describe_high_card,
        }

    def describe_hand(self, result: HandResult) -> str:
        """Get a basic description of the hand."""
        return result.category.display_name

    def describe_hand_detailed(self, result: HandResult) -> str:
        """Get a detailed description of the hand."""
        return self._detailed[result.category](result)

    def _describe_straight_flush(self, result: HandResult) -> str:
        return f"{result.kickers[0].full_name}-high Straight Flush"

    def _describe_four_of_kind(self, result: HandResult) -> str:
        return f"Four {result.kickers[0].plural_name}"

    def _describe_full_house(self, result: HandResult) -> str:
        trips_rank, pair_rank = result.kickers[:2]
        return f"Full House, {trips_rank.plural_name} over {pair_rank.plural_name}"

    def _describe_flush(self, result: HandResult) -> str:
        return f"{result.kickers[0].full_name}-high Flush"

    def _describe_straight(self, result: HandResult) -> str:
        return f"{result.kickers[0].full_name}-high Straight"

    def _describe_three_of_kind(self, result: HandResult) -> str:
        return f"Three {result.kickers[0].plural_name}"

    def _describe_two_pair(self, result: HandResult) -> str:
        high_pair, low_pair = result.kickers[:2]
        return f"Two Pair, {high_pair.plural_name} and {low_pair.plural_name}"

    def _describe_pair(self, result: HandResult) -> str:
        return f"Pair of {result.kickers[0].plural_name}"

    def _describe_high_card(self, result: HandResult) -> str:
        return f"{result.kickers[0].full_name} High"


describer = HandDescriber()


def describe_hand(result: HandResult) -> str:
    return describer.describe_hand(result)


def describe_hand_detailed(result: HandResult) -> str:
    return describer.describe_hand_detailed(result)
