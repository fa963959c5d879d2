"""Command line entry point for elorate."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from .elo import RatingEngine
from .models import EngineConfig, MatchOutcome


logger = logging.getLogger("elorate:main")


# Constants
PREFS_FILE = ".elo.json"
OUTCOMES = {
    "win": MatchOutcome.WIN,
    "loss": MatchOutcome.LOSS,
    "draw": MatchOutcome.DRAW,
}


class Prefs:
    """Preferences for elorate."""

    def __init__(self, data: dict[str, Any]):
        """Initialize preferences from dictionary."""
        self.adjustment_factor: float = data.get("adjustmentFactor", 32)
        self.round_result: bool = data.get("roundResult", True)


def load_prefs(path: Path) -> Prefs:
    """Load preferences from a JSON file.

    Args:
        path: Preferences file, may be missing

    Returns:
        Prefs, with defaults when the file does not exist
    """
    if not path.exists():
        logger.debug(f"No {path}, using defaults")
        return Prefs({})
    data = json.loads(path.read_text())
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object")
    return Prefs(data)


def create_engine(prefs: Prefs, args: argparse.Namespace) -> RatingEngine:
    """Create a rating engine from preferences and command line overrides.

    Args:
        prefs: Preferences
        args: Parsed arguments

    Returns:
        RatingEngine instance
    """
    config = EngineConfig(
        adjustment_factor=(
            args.k_factor if args.k_factor is not None else prefs.adjustment_factor
        ),
        round_result=False if args.no_round else prefs.round_result,
    )
    return RatingEngine.from_config(config)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="elorate",
        description="ELO ratings and win probabilities",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument(
        "--k-factor",
        type=float,
        default=None,
        help="Adjustment factor (default: from preferences, else 32)",
    )
    parser.add_argument(
        "--no-round",
        action="store_true",
        help="Return the unrounded rating",
    )
    parser.add_argument(
        "--prefs",
        type=Path,
        default=Path(PREFS_FILE),
        help=f"Preferences file (default: {PREFS_FILE})",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    update_parser = subparsers.add_parser(
        "update", help="New rating of the player after a match"
    )
    update_parser.add_argument("player", type=float)
    update_parser.add_argument("opponent", type=float)
    update_parser.add_argument("outcome", choices=sorted(OUTCOMES))
    update_parser.add_argument(
        "--margin", type=float, default=None, help="Difference in score"
    )

    probability_parser = subparsers.add_parser(
        "probability", help="Win probability of each side"
    )
    probability_parser.add_argument("player", type=float)
    probability_parser.add_argument("opponent", type=float)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(name)s: %(message)s'
    )

    try:
        prefs = load_prefs(args.prefs)
        engine = create_engine(prefs, args)

        if args.command == "update":
            rating = engine.update_rating(
                args.player,
                args.opponent,
                OUTCOMES[args.outcome],
                args.margin,
            )
            print(rating)
        else:
            probability = engine.win_probability(args.player, args.opponent)
            print(json.dumps(probability.model_dump(), indent=2))
    except (OSError, ValueError) as error:
        logger.error(f"Error: {error}")
        return 1

    return 0


def run() -> None:
    """Console script wrapper around main."""
    sys.exit(main())


if __name__ == "__main__":
    run()
