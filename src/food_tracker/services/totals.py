"""Nutrition totals for a single note."""

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Protocol

from food_tracker.domain.entries import InlineEntry, LinkedEntry
from food_tracker.domain.nutrition import (
    NUTRIENT_KEYS,
    SERVING_SIZE_KEY,
    GoalProgress,
    NutrientData,
    NutritionTotals,
)
from food_tracker.domain.tags import TagOptions
from food_tracker.services.entries import scan_inline_entries, scan_linked_entries
from food_tracker.services.exercise import ExerciseEntryParser
from food_tracker.services.grammar import round_half_up, tag_sign, unit_multiplier

_logger = logging.getLogger(__name__)


class NutrientDataProvider(Protocol):
    """Lookup of per-100 g nutrient data by food file name."""

    def get_nutrition_data(self, name: str) -> NutrientData | None:
        """Return nutrient data for a food, if known."""


class ExerciseCalorieProvider(Protocol):
    """Lookup of calories burned per repetition of an exercise."""

    def get_calories_per_rep(self, name: str) -> float | None:
        """Return calories per repetition, if known."""


def _log_read_error(name: str, error: Exception) -> None:
    _logger.error("Error reading nutrient data for %s: %s", name, error)


def calculate_totals(  # noqa: PLR0913
    content: str | None,
    food_tag: str,
    workout_tag: str,
    nutrient_provider: NutrientDataProvider,
    goals: Mapping[str, float] | None = None,
    on_read_error: Callable[[str, Exception], None] | None = None,
    exercise_provider: ExerciseCalorieProvider | None = None,
) -> NutritionTotals | None:
    """Aggregate the food and workout entries of ``content``.

    Returns None when the note holds no entries at all, so callers can tell
    "nothing logged" apart from "logged zero".
    """
    text = content or ""
    options = TagOptions(food_tag=food_tag, workout_tag=workout_tag)
    handle_error = on_read_error or _log_read_error

    linked_entries = scan_linked_entries(text, options.escaped_food_tag)
    inline_entries = scan_inline_entries(text, options.escaped_food_tag)
    workout_entries = scan_inline_entries(text, options.escaped_workout_tag)
    exercise_calories = _exercise_calories(text, options, exercise_provider)

    if not (linked_entries or inline_entries or workout_entries or exercise_calories):
        return None

    linked_totals = _linked_totals(linked_entries, nutrient_provider, handle_error)
    inline_totals = _sum_entries(inline_entries)

    workout_totals = _sum_entries(filter_valid_workout_entries(workout_entries))
    if exercise_calories:
        workout_totals["calories"] = workout_totals.get("calories", 0.0) + sum(
            exercise_calories
        )
    workout_sign = tag_sign(options.workout_tag, options.workout_tag)
    add_nutrients(inline_totals, workout_totals, workout_sign)

    combined_totals = dict(linked_totals)
    add_nutrients(combined_totals, inline_totals)
    clamped_totals = {key: max(0.0, value) for key, value in combined_totals.items()}

    return NutritionTotals(
        linked_totals=linked_totals,
        inline_totals=inline_totals,
        workout_totals=workout_totals,
        combined_totals=combined_totals,
        clamped_totals=clamped_totals,
        goal_progress=(
            calculate_goal_progress(clamped_totals, goals) if goals is not None else None
        ),
    )


def add_nutrients(
    target: NutrientData, source: Mapping[str, float], multiplier: float = 1
) -> None:
    """Add ``source`` times ``multiplier`` into ``target`` in place."""
    for key, value in source.items():
        if value is None:
            continue
        target[key] = target.get(key, 0.0) + value * multiplier


def filter_valid_workout_entries(entries: Iterable[InlineEntry]) -> list[InlineEntry]:
    """Keep workout entries that burn something and carry no negative value.

    Validity is decided per entry: an entry with any negative field is
    dropped with all of its fields.
    """
    valid = []
    for entry in entries:
        values = entry.nutrients.values()
        has_positive = any(value > 0 for value in values)
        has_negative = any(value < 0 for value in values)
        if has_positive and not has_negative:
            valid.append(entry)
    return valid


def calculate_goal_progress(
    consumed: Mapping[str, float], goals: Mapping[str, float]
) -> dict[str, GoalProgress]:
    """Compute remaining amounts and percentages for nutrients with goals."""
    progress: dict[str, GoalProgress] = {}
    for key in NUTRIENT_KEYS:
        goal = goals.get(key)
        if goal is None:
            continue
        consumed_value = consumed.get(key, 0.0)
        remaining = goal - consumed_value
        if goal > 0:
            percent_consumed = round_half_up(consumed_value / goal * 100)
            percent_remaining = max(0, round_half_up(remaining / goal * 100))
        else:
            percent_consumed = 0
            percent_remaining = 0
        progress[key] = GoalProgress(
            remaining=remaining,
            percent_consumed=percent_consumed,
            percent_remaining=percent_remaining,
        )
    return progress


def display_totals(data: Mapping[str, float]) -> dict[str, float]:
    """Round totals for display: whole calories, other nutrients to 0.1."""
    rounded: dict[str, float] = {}
    for key in NUTRIENT_KEYS:
        value = data.get(key)
        if value is None:
            continue
        if key == "calories":
            rounded[key] = round_half_up(value)
        else:
            rounded[key] = round_half_up(value * 10) / 10
    return rounded


def _sum_entries(entries: Iterable[InlineEntry]) -> NutrientData:
    totals: NutrientData = {}
    for entry in entries:
        add_nutrients(totals, entry.nutrients)
    return totals


def _linked_totals(
    entries: Iterable[LinkedEntry],
    provider: NutrientDataProvider,
    handle_error: Callable[[str, Exception], None],
) -> NutrientData:
    totals: NutrientData = {}
    for entry in entries:
        try:
            nutrients = provider.get_nutrition_data(entry.name)
        except Exception as exc:  # noqa: BLE001
            handle_error(entry.name, exc)
            continue
        if not nutrients:
            continue
        multiplier = unit_multiplier(
            entry.amount, entry.unit, nutrients.get(SERVING_SIZE_KEY)
        )
        add_nutrients(
            totals,
            {key: value for key, value in nutrients.items() if key != SERVING_SIZE_KEY},
            multiplier,
        )
    return totals


def _exercise_calories(
    content: str,
    options: TagOptions,
    provider: ExerciseCalorieProvider | None,
) -> list[float]:
    if provider is None:
        return []
    calories = []
    for entry in ExerciseEntryParser(options.workout_tag).parse(content):
        per_rep = provider.get_calories_per_rep(entry.name)
        if per_rep is None or per_rep <= 0:
            continue
        calories.append(entry.total_reps * per_rep)
    return calories
