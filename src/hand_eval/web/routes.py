"""Routes for hand evaluation."""

from flask import Blueprint, current_app, jsonify, request

from hand_eval.core.hand import Hand
from hand_eval.evaluation.comparator import compare_results
from hand_eval.evaluation.evaluator import evaluator
from hand_eval.evaluation.hand_description import describe_hand_detailed
from hand_eval.evaluation.types import Category, HandResult

hands_bp = Blueprint("hands", __name__, url_prefix="/api/hands")


def _result_to_dict(hand: Hand, result: HandResult) -> dict:
    return {
        "hand": str(hand),
        "category": result.category.name.lower(),
        "name": result.name,
        "strength": int(result.category),
        "kickers": [str(rank) for rank in result.kickers],
        "description": describe_hand_detailed(result),
        "cards_used": [str(card) for card in result.cards_used or ()],
    }


def _error(message: str, error_type: str | None = None, status: int = 400):
    body = {"success": False, "error": message}
    if error_type:
        body["error_type"] = error_type
    return jsonify(body), status


@hands_bp.route("/categories", methods=["GET"])
def get_categories():
    """Get all hand categories, weakest first.

    Returns:
        JSON response with list of categories
    """
    categories = [
        {"value": category.name.lower(), "name": category.display_name, "strength": int(category)}
        for category in Category
    ]
    return jsonify({"success": True, "categories": categories, "count": len(categories)})


@hands_bp.route("/evaluate", methods=["POST"])
def evaluate_hand():
    """Evaluate a single hand.

    Expected JSON payload:
    {
        "hand": "H2 SQ C2 D2 CQ"
    }

    Returns:
        JSON response with the hand's category and kickers
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not isinstance(data.get("hand"), str):
        return _error("Request body must be JSON with a 'hand' string")

    try:
        hand = Hand.from_string(data["hand"])
    except ValueError as e:
        current_app.logger.info(f"Rejected hand {data['hand']!r}: {e}")
        return _error(str(e), getattr(e, "code", None))

    result = evaluator.evaluate_hand(hand)
    return jsonify({"success": True, **_result_to_dict(hand, result)})


@hands_bp.route("/compare", methods=["POST"])
def compare_hands():
    """Compare two hands.

    Expected JSON payload:
    {
        "hand1": "D8 DQ DJ DT D9",
        "hand2": "H8 HT HJ H7 H9"
    }

    Returns:
        JSON response with both evaluations and the winner
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return _error("Request body must be JSON with 'hand1' and 'hand2' strings")

    missing = [key for key in ("hand1", "hand2") if not isinstance(data.get(key), str)]
    if missing:
        return _error(f"Missing required field(s): {', '.join(missing)}")

    hands = {}
    for key in ("hand1", "hand2"):
        try:
            hands[key] = Hand.from_string(data[key])
        except ValueError as e:
            current_app.logger.info(f"Rejected {key} {data[key]!r}: {e}")
            return _error(f"{key}: {e}", getattr(e, "code", None))

    result1 = evaluator.evaluate_hand(hands["hand1"])
    result2 = evaluator.evaluate_hand(hands["hand2"])
    outcome = compare_results(result1, result2)
    winner = {1: "hand1", -1: "hand2", 0: "tie"}[outcome]

    return jsonify(
        {
            "success": True,
            "result": outcome,
            "winner": winner,
            "hand1": _result_to_dict(hands["hand1"], result1),
            "hand2": _result_to_dict(hands["hand2"], result2),
        }
    )
