"""Command-line summary of the nutrition logged in a note."""

import argparse
import logging
import sys
from collections.abc import Sequence

from food_tracker.app_logging import configure_logging
from food_tracker.containers import build_container
from food_tracker.services.goals import parse_goals
from food_tracker.services.totals import calculate_totals, display_totals

_logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="food-tracker",
        description="Food Tracker: sum the #food and #workout entries of a note.",
        epilog=(
            "Only entries with literal values (e.g. '#food Toast 120kcal') are "
            "counted. Linked entries such as '#food [[Apple]] 150g' need a food "
            "catalog, which the command line does not load, so they add nothing."
        ),
    )
    parser.add_argument(
        "note",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default="-",
        help="note to read (default: stdin)",
    )
    parser.add_argument(
        "--goals",
        type=argparse.FileType("r", encoding="utf-8"),
        help="file with 'nutrient: value' goal lines",
    )
    return parser


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:f}".rstrip("0").rstrip(".")


def main(argv: Sequence[str] | None = None) -> int:
    """Print the totals of a note and its progress against goals."""
    args = _build_parser().parse_args(argv)
    container = build_container()
    configure_logging(container.settings.log_level)

    with args.note:
        content = args.note.read()
    goals = None
    if args.goals is not None:
        with args.goals:
            goals = parse_goals(args.goals.read())

    options = container.tag_options
    totals = calculate_totals(
        content,
        options.food_tag,
        options.workout_tag,
        container.catalog,
        goals=goals,
    )
    print("Food Tracker")
    if totals is None:
        _logger.info("No entries found")
        print("No food or workout entries found.")
        return 0

    for key, value in display_totals(totals.clamped_totals).items():
        print(f"{key}: {_format_number(value)}")
    burned = display_totals(totals.workout_totals).get("calories")
    if burned:
        print(f"burned: {_format_number(burned)}")
    for key, progress in (totals.goal_progress or {}).items():
        remaining = display_totals({key: progress.remaining})[key]
        print(
            f"{key} goal: {progress.percent_consumed}% consumed, "
            f"{_format_number(remaining)} remaining"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
