# src/hand_eval/evaluation/types.py
"""Common types for poker evaluation."""
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Optional, Tuple

from hand_eval.core.card import Card, Rank


class Category(IntEnum):
    """Hand categories, weakest first."""
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def display_name(self) -> str:
        return _CATEGORY_NAMES[self]


_CATEGORY_NAMES: Dict[Category, str] = {
    Category.HIGH_CARD: 'High Card',
    Category.ONE_PAIR: 'One Pair',
    Category.TWO_PAIR: 'Two Pair',
    Category.THREE_OF_A_KIND: 'Three of a Kind',
    Category.STRAIGHT: 'Straight',
    Category.FLUSH: 'Flush',
    Category.FULL_HOUSE: 'Full House',
    Category.FOUR_OF_A_KIND: 'Four of a Kind',
    Category.STRAIGHT_FLUSH: 'Straight Flush',
    Category.ROYAL_FLUSH: 'Royal Flush',
}

# Number of kicker ranks every 5-card evaluation of a category produces.
KICKER_LENGTHS: Dict[Category, int] = {
    Category.HIGH_CARD: 5,
    Category.ONE_PAIR: 4,
    Category.TWO_PAIR: 3,
    Category.THREE_OF_A_KIND: 3,
    Category.STRAIGHT: 1,
    Category.FLUSH: 5,
    Category.FULL_HOUSE: 2,
    Category.FOUR_OF_A_KIND: 2,
    Category.STRAIGHT_FLUSH: 1,
    Category.ROYAL_FLUSH: 1,
}


@dataclass(frozen=True)
class HandResult:
    """
    Result of hand evaluation.

    Attributes:
        category: Hand category (e.g., full house)
        kickers: Tie-break ranks, compared front to back
        cards_used: The five cards that make up the hand; not part of equality
    """
    category: Category
    kickers: Tuple[Rank, ...]
    cards_used: Optional[Tuple[Card, ...]] = field(default=None, compare=False)

    @property
    def name(self) -> str:
        return self.category.display_name

    def __str__(self) -> str:
        return f"{self.name} [{' '.join(str(r) for r in self.kickers)}]"
