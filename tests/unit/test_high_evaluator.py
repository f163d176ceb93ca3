"""Tests for five-card category detection and kicker derivation."""
import pytest

from hand_eval.core.card import Card, Rank, Suit
from hand_eval.core.hand import DuplicateCardError, Hand, InvalidHandSizeError
from hand_eval.evaluation.detector import evaluate_five
from hand_eval.evaluation.evaluator import HandEvaluator, compare, evaluate
from hand_eval.evaluation.types import Category, HandResult, KICKER_LENGTHS


@pytest.fixture
def evaluator():
    """Create a hand evaluator instance."""
    return HandEvaluator()


def ranks(symbols: str):
    """Turn 'KQ542' into a tuple of Ranks."""
    return tuple(Rank(symbol) for symbol in symbols)


@pytest.mark.parametrize("hand_str,category,kickers", [
    ("CT CJ CQ CK CA", Category.ROYAL_FLUSH, "A"),
    ("D8 DQ DJ DT D9", Category.STRAIGHT_FLUSH, "Q"),
    ("H8 HT HJ H7 H9", Category.STRAIGHT_FLUSH, "J"),
    ("HA H2 H3 H4 H5", Category.STRAIGHT_FLUSH, "5"),
    ("HT SQ ST DT CT", Category.FOUR_OF_A_KIND, "TQ"),
    ("HT SK ST DT CT", Category.FOUR_OF_A_KIND, "TK"),
    ("H2 SQ C2 D2 CQ", Category.FULL_HOUSE, "2Q"),
    ("H2 SJ C2 D2 CJ", Category.FULL_HOUSE, "2J"),
    ("HK SK DK H5 S5", Category.FULL_HOUSE, "K5"),
    ("HK HQ H2 H4 H5", Category.FLUSH, "KQ542"),
    ("D5 D4 D2 DQ DK", Category.FLUSH, "KQ542"),
    ("H3 S7 H5 D6 H4", Category.STRAIGHT, "7"),
    ("C9 CT SJ D7 H8", Category.STRAIGHT, "J"),
    ("HT SJ DQ CK HA", Category.STRAIGHT, "A"),
    ("H4 S5 HA D3 H2", Category.STRAIGHT, "5"),
    ("H2 SQ S2 D2 CK", Category.THREE_OF_A_KIND, "2KQ"),
    ("H5 SQ C5 DT CT", Category.TWO_PAIR, "T5Q"),
    ("H9 SQ C9 DT CT", Category.TWO_PAIR, "T9Q"),
    ("HK DK H8 D8 C2", Category.TWO_PAIR, "K82"),
    ("H3 S8 H5 D8 CA", Category.ONE_PAIR, "8A53"),
    ("S4 DA H3 CA HT", Category.ONE_PAIR, "AT43"),
    ("HK DK SA C9 H4", Category.ONE_PAIR, "KA94"),
    ("H3 S8 H5 DK CA", Category.HIGH_CARD, "AK853"),
    ("H3 S8 H5 DK CT", Category.HIGH_CARD, "KT853"),
    ("H3 S8 H5 DK C2", Category.HIGH_CARD, "K8532"),
    ("HQ SK DA C2 H3", Category.HIGH_CARD, "AKQ32"),
])
def test_evaluate_five(evaluator, hand_str, category, kickers):
    """Test category and kickers for each kind of five-card hand."""
    result = evaluator.evaluate_hand(Hand.from_string(hand_str))
    assert result.category == category
    assert result.kickers == ranks(kickers)
    assert len(result.kickers) == KICKER_LENGTHS[category]


def test_royal_flush_is_distinct_from_straight_flush():
    """Test that an Ace-high straight flush is reported as a royal flush."""
    royal = evaluate(Hand.from_string("ST SJ SQ SK SA"))
    king_high = evaluate(Hand.from_string("S9 ST SJ SQ SK"))
    assert royal.category == Category.ROYAL_FLUSH
    assert king_high.category == Category.STRAIGHT_FLUSH
    assert royal.category > king_high.category


def test_wheel_kicker_is_five():
    """Test the wheel plays the Ace low."""
    result = evaluate(Hand.from_string("H4 S5 HA D3 H2"))
    assert result.category == Category.STRAIGHT
    assert result.kickers == (Rank.FIVE,)


@pytest.mark.parametrize("hand_str", [
    "HJ SQ DK CA H2",   # no wrap-around straights
    "HK SA D2 C3 H4",
])
def test_no_wraparound_straight(hand_str):
    """Test that only the wheel lets an Ace play low."""
    assert evaluate(Hand.from_string(hand_str)).category == Category.HIGH_CARD


def test_straight_flush_never_plain_flush_or_straight():
    """Test detection priority across every straight flush."""
    for suit in Suit:
        for high in range(Rank.FIVE.order, Rank.ACE.order + 1):
            if high == Rank.FIVE.order:
                orders = [Rank.ACE.order, 0, 1, 2, 3]
            else:
                orders = list(range(high - 4, high + 1))
            cards = [Card(list(Rank)[order], suit) for order in orders]
            result = evaluate_five(cards)
            assert result.category in (Category.STRAIGHT_FLUSH, Category.ROYAL_FLUSH)


def test_result_records_cards_used(evaluator):
    """Test that the evaluated cards are kept with the result."""
    hand = Hand.from_string("H2 SQ C2 D2 CQ")
    result = evaluator.evaluate_hand(hand)
    assert result.cards_used == hand.cards


def test_evaluate_accepts_card_lists(evaluator):
    """Test evaluating a plain list of distinct cards."""
    cards = [Card.from_string(token) for token in "H2 SQ C2 D2 CQ".split()]
    assert evaluator.evaluate_hand(cards).category == Category.FULL_HOUSE


def test_evaluate_rejects_duplicated_card_list(evaluator):
    """Test that a card list holding the same card twice is rejected."""
    cards = [Card(Rank.ACE, Suit.SPADES)] * 5
    with pytest.raises(DuplicateCardError):
        evaluator.evaluate_hand(cards)
    with pytest.raises(DuplicateCardError):
        evaluate(cards)


def test_compare_rejects_duplicated_card_list():
    """Test that comparing against an impossible card list raises."""
    cards = [Card(Rank.ACE, Suit.SPADES)] * 5
    with pytest.raises(DuplicateCardError):
        compare(cards, Hand.from_string("CT CJ CQ CK CA"))


@pytest.mark.parametrize("count", [4, 6, 8])
def test_evaluate_rejects_other_sizes(evaluator, count):
    """Test that raw card lists of unsupported sizes are rejected."""
    cards = [Card(rank, Suit.HEARTS) for rank in list(Rank)[:count]]
    with pytest.raises(InvalidHandSizeError):
        evaluator.evaluate_hand(cards)


def test_evaluate_five_rejects_other_sizes():
    """Test the five-card detector's own size guard."""
    cards = [Card(rank, Suit.CLUBS) for rank in list(Rank)[:7]]
    with pytest.raises(InvalidHandSizeError):
        evaluate_five(cards)


def test_result_equality_ignores_cards_used():
    """Test that results compare on category and kickers only."""
    first = evaluate(Hand.from_string("HK HQ H2 H4 H5"))
    second = evaluate(Hand.from_string("DK DQ D2 D4 D5"))
    assert first == second
    assert first == HandResult(Category.FLUSH, ranks("KQ542"))
    assert str(first) == "Flush [K Q 5 4 2]"
