"""Main poker hand evaluation interface."""
import logging
from typing import Iterable, Union

from hand_eval.core.card import Card
from hand_eval.core.hand import Hand
from hand_eval.evaluation.comparator import compare_results
from hand_eval.evaluation.detector import FIVE_CARDS, evaluate_five
from hand_eval.evaluation.selector import best_of_seven
from hand_eval.evaluation.types import HandResult

logger = logging.getLogger(__name__)

HandLike = Union[Hand, Iterable[Card]]


class HandEvaluator:
    """
    Evaluates and compares poker hands.

    Five cards are classified directly; seven cards are reduced to their
    best five-card subset.
    """

    def evaluate_hand(self, cards: HandLike) -> HandResult:
        """
        Evaluate a poker hand.

        Args:
            cards: A Hand, or 5 or 7 cards

        Returns:
            HandResult with category and kickers

        Raises:
            InvalidHandSizeError: If given a card list that is not 5 or 7 long
            DuplicateCardError: If given a card list holding the same card twice
        """
        hand = cards if isinstance(cards, Hand) else Hand(cards)

        if hand.size == FIVE_CARDS:
            result = evaluate_five(hand.cards)
        else:
            result = best_of_seven(hand.cards)

        logger.debug(f"Evaluated {hand} as {result}")
        return result

    def compare_hands(self, hand1: HandLike, hand2: HandLike) -> int:
        """
        Compare two poker hands.

        Args:
            hand1: First hand to compare
            hand2: Second hand to compare

        Returns:
            1 if hand1 wins, -1 if hand2 wins, 0 if tie
        """
        return compare_results(self.evaluate_hand(hand1), self.evaluate_hand(hand2))


# Global evaluator instance
evaluator = HandEvaluator()


def parse_card(token: str) -> Card:
    """Parse a two-character token such as 'SQ' into a Card."""
    return Card.from_string(token)


def evaluate(hand: HandLike) -> HandResult:
    """Evaluate a 5 or 7 card hand."""
    return evaluator.evaluate_hand(hand)


def compare(first: Union[HandResult, HandLike], second: Union[HandResult, HandLike]) -> int:
    """
    Compare two hands or two evaluation results.

    Returns:
        1 if first wins, -1 if second wins, 0 if tie
    """
    if not isinstance(first, HandResult):
        first = evaluator.evaluate_hand(first)
    if not isinstance(second, HandResult):
        second = evaluator.evaluate_hand(second)
    return compare_results(first, second)
