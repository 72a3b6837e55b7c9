"""Shared markup patterns and unit conversion."""

import math
import re
from dataclasses import dataclass

from food_tracker.domain.tags import TagOptions

_BASE_AMOUNT = 100
_DEFAULT_PIECE_GRAMS = 100

_UNIT_GRAMS = {
    "g": 1,
    "ml": 1,
    "kg": 1000,
    "l": 1000,
    "oz": 28.35,
    "lb": 453.6,
    "cup": 240,
    "cups": 240,
    "tbsp": 15,
    "tsp": 5,
}
_PIECE_UNITS = {"pc", "pcs"}

NUTRIENT_KEYWORDS: dict[str, str] = {
    "kcal": "calories",
    "fat": "fats",
    "satfat": "saturated_fats",
    "prot": "protein",
    "carbs": "carbs",
    "sugar": "sugar",
    "fiber": "fiber",
    "sodium": "sodium",
}

MEASURE_KEYWORDS: tuple[str, ...] = (
    "g",
    "ml",
    "kg",
    "l",
    "oz",
    "lb",
    "cup",
    "tbsp",
    "tsp",
    "pc",
)

NUMBER = r"\d+(?:\.\d+)?"
UNIT = r"(?:kg|lb|cups?|tbsp|tsp|ml|oz|g|l|pcs?)"
KEYWORD = r"(?:kcal|fat|satfat|prot|carbs|sugar|fiber|sodium)"
NUTRITION_VALUE = rf"-?{NUMBER}{KEYWORD}"
NUTRITION_RUN = rf"{NUTRITION_VALUE}(?:\s+{NUTRITION_VALUE})*"
# A name token may not contain a wikilink opener anywhere.
_NAME_TOKEN = r"(?:(?!\[\[)\S)+"
FOOD_NAME = rf"{_NAME_TOKEN}(?:\s+{_NAME_TOKEN})*?"
FILE_REFERENCE = (
    r"(?:\[\[(?P<wiki_link>[^\]]+)\]\]"
    r"|\[[^\]]*\]\((?P<markdown_link>[^)]+)\))"
)

_NEVER_MATCHES = r"[^\s\S]"


def escape_tag(tag: str) -> str:
    """Escape a tag name so every regex metacharacter is literal."""
    return re.escape(tag)


def unit_multiplier(amount: float, unit: str, serving_size: float | None = None) -> float:
    """Convert an amount in ``unit`` to a multiplier of the 100 g/ml basis."""
    normalized = unit.lower()
    if normalized in _PIECE_UNITS:
        grams = serving_size if serving_size and serving_size > 0 else _DEFAULT_PIECE_GRAMS
        return amount * grams / _BASE_AMOUNT
    return amount * _UNIT_GRAMS.get(normalized, 1) / _BASE_AMOUNT


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return math.floor(value + 0.5)


def tag_sign(tag: str | None, workout_tag: str) -> int:
    """Return -1 for entries under the workout tag and 1 otherwise."""
    return -1 if TagOptions(workout_tag=workout_tag).is_workout_tag(tag) else 1


def _tag_alternatives(escaped_tags: tuple[str, ...]) -> str | None:
    tags = [tag for tag in escaped_tags if tag]
    if not tags:
        return None
    return "|".join(tags)


def linked_entry_pattern(*escaped_tags: str) -> re.Pattern[str]:
    """Match ``#tag [[file]] 200g`` or ``#tag [label](path) 200g``."""
    tags = _tag_alternatives(escaped_tags)
    if tags is None:
        return re.compile(_NEVER_MATCHES)
    return re.compile(
        rf"#(?P<tag>{tags})\s+{FILE_REFERENCE}\s+(?P<amount>{NUMBER})(?P<unit>{UNIT})",
        re.IGNORECASE,
    )


def inline_entry_pattern(*escaped_tags: str) -> re.Pattern[str]:
    """Match ``#tag Chicken 300kcal 25prot``."""
    tags = _tag_alternatives(escaped_tags)
    if tags is None:
        return re.compile(_NEVER_MATCHES)
    return re.compile(
        rf"#(?P<tag>{tags})\s+(?P<food_name>{FOOD_NAME})\s+(?P<nutrition_values>{NUTRITION_RUN})",
        re.IGNORECASE,
    )


def combined_highlight_pattern(
    escaped_food_tag: str, escaped_workout_tag: str
) -> re.Pattern[str]:
    """Match either entry syntax, distinguished by named groups."""
    tags = _tag_alternatives((escaped_food_tag, escaped_workout_tag))
    if tags is None:
        return re.compile(_NEVER_MATCHES)
    inline = rf"(?P<food_name>{FOOD_NAME})\s+(?P<nutrition_values>{NUTRITION_RUN})"
    linked = rf"{FILE_REFERENCE}\s+(?P<amount_value>{NUMBER}{UNIT})"
    return re.compile(rf"#(?P<tag>{tags})\s+(?:{inline}|{linked})", re.IGNORECASE)


def kcal_annotation_pattern(*escaped_tags: str) -> re.Pattern[str]:
    """Match ``#tag Some text 300kcal`` for direct calorie annotations."""
    tags = _tag_alternatives(escaped_tags)
    if tags is None:
        return re.compile(_NEVER_MATCHES)
    return re.compile(
        rf"#(?P<tag>{tags})\s+{FOOD_NAME}\s+(?P<calories>{NUMBER})kcal",
        re.IGNORECASE,
    )


def tag_detection_pattern(*escaped_tags: str) -> re.Pattern[str]:
    """Match a bare tag followed by whitespace."""
    tags = _tag_alternatives(escaped_tags)
    if tags is None:
        return re.compile(_NEVER_MATCHES)
    return re.compile(rf"#(?P<tag>{tags})(?=\s)", re.IGNORECASE)


def nutrition_value_pattern() -> re.Pattern[str]:
    """Match a single ``<number><keyword>`` value such as ``-150kcal``."""
    return re.compile(NUTRITION_VALUE, re.IGNORECASE)


def nutrient_pair_pattern() -> re.Pattern[str]:
    """Match a value with its number and keyword captured separately."""
    return re.compile(rf"(?P<number>-?{NUMBER})\s*(?P<keyword>{KEYWORD})", re.IGNORECASE)


@dataclass(frozen=True)
class GrammarSet:
    """Compiled patterns for one tag configuration."""

    options: TagOptions
    combined_highlight: re.Pattern[str]
    linked_annotation: re.Pattern[str]
    kcal_annotation: re.Pattern[str]
    tag_detection: re.Pattern[str]


def recompile(options: TagOptions) -> GrammarSet:
    """Build a fresh pattern set for ``options``."""
    food = options.escaped_food_tag
    workout = options.escaped_workout_tag
    return GrammarSet(
        options=options,
        combined_highlight=combined_highlight_pattern(food, workout),
        linked_annotation=linked_entry_pattern(food, workout),
        kcal_annotation=kcal_annotation_pattern(food, workout),
        tag_detection=tag_detection_pattern(food, workout),
    )
