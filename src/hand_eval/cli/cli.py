"""Command line front end for the hand evaluator."""
import argparse
import logging
import sys
from typing import List, Optional

from hand_eval.config import Config, get_config
from hand_eval.core.hand import Hand
from hand_eval.evaluation.evaluator import evaluator
from .display import display_comparison, display_error, display_result

logger = logging.getLogger(__name__)


def evaluate_str(hand_str: str) -> bool:
    """
    Parse, evaluate and print one hand.

    Returns:
        True if the hand was evaluated, False if it was rejected
    """
    try:
        hand = Hand.from_string(hand_str)
    except ValueError as e:
        display_error(e)
        return False

    display_result(hand_str, evaluator.evaluate_hand(hand))
    return True


def compare_strs(hand1_str: str, hand2_str: str) -> bool:
    """Evaluate two hands, print both and the winner."""
    try:
        hand1 = Hand.from_string(hand1_str)
        hand2 = Hand.from_string(hand2_str)
    except ValueError as e:
        display_error(e)
        return False

    result1 = evaluator.evaluate_hand(hand1)
    result2 = evaluator.evaluate_hand(hand2)
    display_result(hand1_str, result1)
    print()
    display_result(hand2_str, result2)
    print()
    display_comparison(evaluator.compare_hands(hand1, hand2))
    return True


def run_interactive(settings: type[Config]) -> None:
    """Read hands from stdin until EOF or a quit command."""
    print("Enter poker hands (e.g., 'H2 SQ C2 D2 CQ') or 'quit' to exit:")
    while True:
        try:
            line = input(settings.INTERACTIVE_PROMPT)
        except EOFError:
            print()
            break

        line = line.strip()
        if not line:
            continue
        if line.lower() in settings.QUIT_COMMANDS:
            break
        evaluate_str(line)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hand-eval",
        description="Evaluate 5 or 7 card poker hands (e.g. 'H2 SQ C2 D2 CQ').",
    )
    parser.add_argument("hands", nargs="*", help="Hands to evaluate; prompts interactively when omitted")
    parser.add_argument(
        "--compare",
        nargs=2,
        metavar=("HAND1", "HAND2"),
        help="Compare two hands and report the winner",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Command line entry point."""
    args = build_parser().parse_args(argv)
    settings = get_config()

    logging.basicConfig(
        level=args.log_level or settings.LOG_LEVEL,
        format=settings.LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )

    if args.compare:
        return 0 if compare_strs(*args.compare) else 1

    if args.hands:
        failures = 0
        for hand_str in args.hands:
            if not evaluate_str(hand_str):
                failures += 1
        logger.debug(f"Evaluated {len(args.hands)} hand(s), {failures} rejected")
        return 1 if failures else 0

    run_interactive(settings)
    return 0
