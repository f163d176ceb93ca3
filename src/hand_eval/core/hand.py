"""Poker hand implementation."""

import logging
from typing import Iterable, Iterator, Set, Tuple

from .card import Card, CardError

logger = logging.getLogger(__name__)

# Only 5-card and 7-card evaluation is defined.
VALID_HAND_SIZES = (5, 7)


class HandError(ValueError):
    """Base class for errors raised while building a hand."""
    code = 'invalid_hand'


class InvalidHandSizeError(HandError):
    """Hand does not hold 5 or 7 cards."""
    code = 'invalid_hand_size'


class DuplicateCardError(HandError):
    """Same card appears more than once in a hand."""
    code = 'duplicate_card'


class Hand:
    """
    An immutable poker hand of 5 or 7 distinct cards.

    Attributes:
        cards: Cards in the order they were given
    """

    __slots__ = ('_cards',)

    def __init__(self, cards: Iterable[Card]):
        """
        Initialize a hand from already parsed cards.

        Args:
            cards: 5 or 7 distinct cards

        Raises:
            InvalidHandSizeError: If the number of cards is not 5 or 7
            DuplicateCardError: If any card appears twice
        """
        cards = tuple(cards)
        _validate_size(len(cards))

        seen: Set[str] = set()
        for card in cards:
            if card.canonical in seen:
                raise DuplicateCardError(f"Duplicate card in hand: {card}")
            seen.add(card.canonical)

        self._cards: Tuple[Card, ...] = cards

    @classmethod
    def from_string(cls, hand_str: str) -> 'Hand':
        """
        Create a Hand from a string representation.

        Args:
            hand_str: Whitespace separated card tokens (e.g., "H2 SQ C2 D2 CQ").
                      Each token is a suit symbol (H, D, C, S) followed by a
                      rank symbol (2-9, T, J, Q, K, A).

        Returns:
            Hand instance with the parsed cards

        Raises:
            InvalidHandSizeError: If there are not 5 or 7 tokens
            CardError: If a token is not a valid card
            DuplicateCardError: If a card appears twice
        """
        tokens = hand_str.split()
        _validate_size(len(tokens))

        cards = []
        seen: Set[str] = set()
        for i, token in enumerate(tokens):
            try:
                card = Card.from_string(token)
            except CardError as e:
                raise type(e)(f"Invalid card at position {i + 1} in hand '{hand_str}': {e}") from e

            if card.canonical in seen:
                raise DuplicateCardError(f"Duplicate card in hand: {card.canonical}")
            seen.add(card.canonical)
            cards.append(card)

        logger.debug(f"Created hand from string '{hand_str}': {[str(c) for c in cards]}")
        return cls(cards)

    @property
    def cards(self) -> Tuple[Card, ...]:
        return self._cards

    @property
    def size(self) -> int:
        """Number of cards in the hand."""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self._cards == other._cards

    def __hash__(self) -> int:
        return hash(self._cards)

    def __str__(self) -> str:
        return ' '.join(str(card) for card in self._cards)

    def __repr__(self) -> str:
        return f"Hand('{self}')"


def _validate_size(size: int) -> None:
    if size not in VALID_HAND_SIZES:
        raise InvalidHandSizeError(f"Hand must have 5 or 7 cards, got: {size}")
