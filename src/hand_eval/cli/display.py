from hand_eval.evaluation.hand_description import describe_hand_detailed
from hand_eval.evaluation.types import HandResult


def display_result(hand_str: str, result: HandResult) -> None:
    """Display an evaluated hand in a user-friendly way."""
    print(f"Hand: {hand_str}")
    print(f"Value: {result.name}")
    print(f"Kickers: [{' '.join(str(rank) for rank in result.kickers)}]")
    print(f"Description: {describe_hand_detailed(result)}")
    if result.cards_used and len(result.cards_used) != len(hand_str.split()):
        print(f"Best Five: {' '.join(str(card) for card in result.cards_used)}")


def display_comparison(outcome: int) -> None:
    """Display which of two hands won."""
    if outcome > 0:
        print("Result: Hand 1 wins")
    elif outcome < 0:
        print("Result: Hand 2 wins")
    else:
        print("Result: Tie")


def display_error(error: Exception) -> None:
    print(f"Error: {error}")
