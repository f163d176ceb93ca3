"""Card related classes and utilities."""
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Dict, List, Tuple


class CardError(ValueError):
    """Base class for errors raised while parsing a card token."""
    code = 'invalid_card'


class InvalidCardFormatError(CardError):
    """Card token is not exactly two characters."""
    code = 'invalid_format'


class InvalidSuitError(CardError):
    """First character of a card token is not a known suit symbol."""
    code = 'invalid_suit'


class InvalidRankError(CardError):
    """Second character of a card token is not a known rank symbol."""
    code = 'invalid_rank'


class Suit(Enum):
    """Card suits."""
    HEARTS = 'H'
    DIAMONDS = 'D'
    CLUBS = 'C'
    SPADES = 'S'

    def __str__(self) -> str:
        return self.value


@total_ordering
class Rank(Enum):
    """
    Card ranks, declared from lowest to highest.

    Ranks compare by face value. The ordinal (``Rank.TWO.order == 0``,
    ``Rank.ACE.order == 12``) indexes fixed-size per-rank tables.
    """
    TWO = '2'
    THREE = '3'
    FOUR = '4'
    FIVE = '5'
    SIX = '6'
    SEVEN = '7'
    EIGHT = '8'
    NINE = '9'
    TEN = 'T'
    JACK = 'J'
    QUEEN = 'Q'
    KING = 'K'
    ACE = 'A'

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.order < other.order

    @property
    def order(self) -> int:
        """Zero-based position of the rank, Two lowest."""
        return _RANK_ORDINALS[self]

    @property
    def full_name(self) -> str:
        return _RANK_NAMES[self][0]

    @property
    def plural_name(self) -> str:
        return _RANK_NAMES[self][1]


_RANK_ORDINALS: Dict[Rank, int] = {rank: index for index, rank in enumerate(Rank)}

# Walk order for "highest first" scans; Ace down to Two.
RANKS_DESCENDING: List[Rank] = sorted(Rank, reverse=True)

_RANK_NAMES: Dict[Rank, Tuple[str, str]] = {
    Rank.TWO: ('Two', 'Twos'),
    Rank.THREE: ('Three', 'Threes'),
    Rank.FOUR: ('Four', 'Fours'),
    Rank.FIVE: ('Five', 'Fives'),
    Rank.SIX: ('Six', 'Sixes'),
    Rank.SEVEN: ('Seven', 'Sevens'),
    Rank.EIGHT: ('Eight', 'Eights'),
    Rank.NINE: ('Nine', 'Nines'),
    Rank.TEN: ('Ten', 'Tens'),
    Rank.JACK: ('Jack', 'Jacks'),
    Rank.QUEEN: ('Queen', 'Queens'),
    Rank.KING: ('King', 'Kings'),
    Rank.ACE: ('Ace', 'Aces'),
}

_SUITS_BY_SYMBOL: Dict[str, Suit] = {suit.value: suit for suit in Suit}
_RANKS_BY_SYMBOL: Dict[str, Rank] = {rank.value: rank for rank in Rank}


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    Attributes:
        rank: Card rank (2-A)
        suit: Card suit (hearts, diamonds, clubs, spades)
    """
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        """Canonical form, suit then rank: 'HT' for the Ten of hearts."""
        return f"{self.suit}{self.rank}"

    def __repr__(self) -> str:
        return f"Card({self})"

    @property
    def canonical(self) -> str:
        """Two-character form used for display and duplicate detection."""
        return str(self)

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: String in format 'SA' for Ace of spades (suit first,
                      then rank). Symbols are upper case.

        Returns:
            Card instance

        Raises:
            InvalidCardFormatError: If the token is not two characters
            InvalidSuitError: If the suit symbol is not recognized
            InvalidRankError: If the rank symbol is not recognized
        """
        if len(card_str) != 2:
            raise InvalidCardFormatError(f"Invalid card format: {card_str!r}")

        suit = _SUITS_BY_SYMBOL.get(card_str[0])
        if suit is None:
            raise InvalidSuitError(f"Invalid suit: {card_str[0]!r} in {card_str!r}")

        rank = _RANKS_BY_SYMBOL.get(card_str[1])
        if rank is None:
            raise InvalidRankError(f"Invalid rank: {card_str[1]!r} in {card_str!r}")

        return cls(rank=rank, suit=suit)
