"""Category detection for exactly five cards."""
from typing import List, Optional, Sequence, Tuple

from hand_eval.core.card import Card, Rank, RANKS_DESCENDING
from hand_eval.core.hand import InvalidHandSizeError
from hand_eval.evaluation.types import Category, HandResult

FIVE_CARDS = 5

# Ace, Two, Three, Four, Five by ordinal; the only straight where Ace plays low.
_WHEEL_ORDERS = [Rank.TWO.order, Rank.THREE.order, Rank.FOUR.order, Rank.FIVE.order, Rank.ACE.order]


def evaluate_five(cards: Sequence[Card]) -> HandResult:
    """
    Classify a 5-card hand.

    Flush and straight are checked before rank multiplicities, so a
    straight flush is never reported as a plain flush or straight.

    Args:
        cards: Exactly five distinct cards

    Returns:
        HandResult with category, kickers and the cards evaluated

    Raises:
        InvalidHandSizeError: If not given exactly five cards
    """
    if len(cards) != FIVE_CARDS:
        raise InvalidHandSizeError(f"Five card evaluation requires exactly 5 cards, got: {len(cards)}")

    cards = tuple(cards)
    ranks = sorted((card.rank for card in cards), reverse=True)

    is_flush = _is_flush(cards)
    straight_high = _straight_high(ranks)

    if is_flush and straight_high is not None:
        if straight_high is Rank.ACE:
            return HandResult(Category.ROYAL_FLUSH, (Rank.ACE,), cards)
        return HandResult(Category.STRAIGHT_FLUSH, (straight_high,), cards)

    counts = _rank_counts(cards)
    shape = sorted((count for count in counts if count), reverse=True)

    if shape == [4, 1]:
        return HandResult(Category.FOUR_OF_A_KIND, _kickers(counts, 4), cards)

    if shape == [3, 2]:
        return HandResult(Category.FULL_HOUSE, _kickers(counts, 3, 2), cards)

    if is_flush:
        return HandResult(Category.FLUSH, tuple(ranks), cards)

    if straight_high is not None:
        return HandResult(Category.STRAIGHT, (straight_high,), cards)

    if shape == [3, 1, 1]:
        return HandResult(Category.THREE_OF_A_KIND, _kickers(counts, 3), cards)

    if shape == [2, 2, 1]:
        return HandResult(Category.TWO_PAIR, _kickers(counts, 2), cards)

    if shape == [2, 1, 1, 1]:
        return HandResult(Category.ONE_PAIR, _kickers(counts, 2), cards)

    return HandResult(Category.HIGH_CARD, tuple(ranks), cards)


def _is_flush(cards: Sequence[Card]) -> bool:
    suit = cards[0].suit
    return all(card.suit == suit for card in cards[1:])


def _straight_high(ranks: Sequence[Rank]) -> Optional[Rank]:
    """
    Get the high rank of a straight, if the ranks form one.

    Args:
        ranks: Five ranks in any order

    Returns:
        Highest rank of the straight (Five for the wheel), or None
    """
    orders = sorted(rank.order for rank in ranks)

    if all(orders[i + 1] == orders[i] + 1 for i in range(len(orders) - 1)):
        return max(ranks)

    if orders == _WHEEL_ORDERS:
        return Rank.FIVE

    return None


def _rank_counts(cards: Sequence[Card]) -> List[int]:
    """Occurrences of each rank, indexed by Rank.order."""
    counts = [0] * len(Rank)
    for card in cards:
        counts[card.rank.order] += 1
    return counts


def _kickers(counts: Sequence[int], *group_sizes: int) -> Tuple[Rank, ...]:
    """
    Build the tie-break sequence for a multiplicity based category.

    Each rank forming a group of one of ``group_sizes`` is added once, in
    the order the sizes are given and highest rank first within a size
    (K K K 5 5 -> K, 5; K K 8 8 2 -> K, 8, 2). Every other rank then
    follows highest first, once per card holding it.

    Args:
        counts: Per-rank card counts indexed by Rank.order
        group_sizes: Group sizes that define the category, largest first

    Returns:
        Kicker ranks, most significant first
    """
    kickers: List[Rank] = []

    for size in group_sizes:
        for rank in RANKS_DESCENDING:
            if counts[rank.order] == size and rank not in kickers:
                kickers.append(rank)

    for rank in RANKS_DESCENDING:
        count = counts[rank.order]
        if count and rank not in kickers:
            kickers.extend([rank] * count)

    return tuple(kickers)
