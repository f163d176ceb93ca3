"""Best five-card hand out of seven cards."""
import itertools
import logging
from typing import Optional, Sequence

from hand_eval.core.card import Card
from hand_eval.core.hand import InvalidHandSizeError
from hand_eval.evaluation.comparator import compare_results
from hand_eval.evaluation.detector import FIVE_CARDS, evaluate_five
from hand_eval.evaluation.types import HandResult

logger = logging.getLogger(__name__)

SEVEN_CARDS = 7


def best_of_seven(cards: Sequence[Card]) -> HandResult:
    """
    Find the best 5-card hand among all 21 subsets of seven cards.

    A subset replaces the running best only when it compares strictly
    better, so among equal results the first one enumerated is kept.

    Args:
        cards: Exactly seven distinct cards

    Returns:
        HandResult of the best subset, with that subset as cards_used

    Raises:
        InvalidHandSizeError: If not given exactly seven cards
    """
    if len(cards) != SEVEN_CARDS:
        raise InvalidHandSizeError(f"Seven card evaluation requires exactly 7 cards, got: {len(cards)}")

    best: Optional[HandResult] = None
    for subset in itertools.combinations(cards, FIVE_CARDS):
        result = evaluate_five(subset)
        if best is None or compare_results(result, best) > 0:
            logger.debug(f"New best subset {' '.join(str(c) for c in subset)}: {result}")
            best = result

    return best
