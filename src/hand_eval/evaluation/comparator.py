"""Ordering of evaluated hands."""
from typing import Sequence

from hand_eval.core.card import Rank
from hand_eval.evaluation.types import HandResult


def compare_kickers(kickers1: Sequence[Rank], kickers2: Sequence[Rank]) -> int:
    """
    Compare two kicker sequences front to back.

    The first differing rank decides. If one sequence is a prefix of the
    other, the longer one wins.

    Returns:
        1 if kickers1 is better, -1 if kickers2 is better, 0 if equal
    """
    for rank1, rank2 in zip(kickers1, kickers2):
        if rank1 > rank2:
            return 1
        if rank1 < rank2:
            return -1

    if len(kickers1) > len(kickers2):
        return 1
    if len(kickers1) < len(kickers2):
        return -1
    return 0


def compare_results(result1: HandResult, result2: HandResult) -> int:
    """
    Compare two evaluated hands.

    Args:
        result1: First evaluation
        result2: Second evaluation

    Returns:
        1 if result1 wins, -1 if result2 wins, 0 if tie
    """
    if result1.category != result2.category:
        return 1 if result1.category > result2.category else -1
    return compare_kickers(result1.kickers, result2.kickers)
