"""Daily nutrient goals."""

import re

from food_tracker.domain.nutrition import NUTRIENT_KEYS

_GOAL_LINE = re.compile(r"^(\w+):\s*(\d+(?:\.\d+)?)")
_LINE_SPLIT = re.compile(r"\r?\n")


def parse_goals(content: str) -> dict[str, float]:
    """Parse ``key: value`` lines into goals for known nutrients."""
    goals: dict[str, float] = {}
    for line in _LINE_SPLIT.split(content):
        match = _GOAL_LINE.match(line)
        if match is None:
            continue
        key = match.group(1).lower()
        if key in NUTRIENT_KEYS:
            goals[key] = float(match.group(2))
    return goals
