"""Poker hand evaluation package."""

from hand_eval.core.card import Card, Rank, Suit
from hand_eval.core.hand import Hand
from hand_eval.evaluation.evaluator import HandEvaluator, compare, evaluate, parse_card
from hand_eval.evaluation.hand_description import describe_hand, describe_hand_detailed
from hand_eval.evaluation.types import Category, HandResult

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Hand",
    "Category",
    "HandResult",
    "HandEvaluator",
    "parse_card",
    "evaluate",
    "compare",
    "describe_hand",
    "describe_hand_detailed",
]
