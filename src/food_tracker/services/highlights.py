"""Highlight ranges and inline calorie hints for editor decorations."""

import math
from typing import Protocol

from food_tracker.domain.highlights import CalorieAnnotation, HighlightRange
from food_tracker.domain.tags import TagOptions
from food_tracker.services.entries import match_highlight_entry, parse_linked_match
from food_tracker.services.grammar import (
    nutrition_value_pattern,
    recompile,
    round_half_up,
    tag_sign,
    unit_multiplier,
)


class CalorieProvider(Protocol):
    """Lookup of calories per 100 g and serving sizes by food file name."""

    def get_calories_for_food(self, name: str) -> float | None:
        """Return calories per 100 g/ml, if known."""

    def get_serving_size(self, name: str) -> float | None:
        """Return the serving size in grams, if known."""


def extract_highlight_ranges(
    text: str, line_start: int, options: TagOptions
) -> list[HighlightRange]:
    """Return highlight ranges for the first entry on a single line."""
    grammar = recompile(options)
    match = match_highlight_entry(text, grammar.combined_highlight)
    if match is None:
        return []

    value_start = line_start + match.value_start
    if match.kind == "linked":
        return [
            HighlightRange(
                start=value_start, end=value_start + len(match.value), type="amount"
            )
        ]

    is_workout = options.is_workout_tag(match.tag)
    ranges = []
    for value_match in nutrition_value_pattern().finditer(match.value):
        value = value_match.group(0)
        is_negative = value.startswith("-")
        is_kcal = "kcal" in value.lower()
        if is_workout and is_negative and is_kcal:
            continue
        ranges.append(
            HighlightRange(
                start=value_start + value_match.start(),
                end=value_start + value_match.end(),
                type="negative-kcal" if is_kcal and (is_negative or is_workout) else "nutrition",
            )
        )
    return ranges


def extract_multiline_highlight_ranges(
    text: str, start_offset: int, options: TagOptions
) -> list[HighlightRange]:
    """Return highlight ranges for every line of ``text``."""
    ranges: list[HighlightRange] = []
    line_start = start_offset
    for line in text.split("\n"):
        ranges.extend(extract_highlight_ranges(line, line_start, options))
        line_start += len(line) + 1
    return ranges


def extract_inline_calorie_annotations(
    text: str,
    start_offset: int,
    options: TagOptions,
    calorie_provider: CalorieProvider,
) -> list[CalorieAnnotation]:
    """Return calorie hints for linked and direct kcal entries.

    Every match on a line is annotated and all hints for a line are placed at
    the end of that line. Workout entries are shown as negative calories.
    """
    grammar = recompile(options)
    annotations: list[CalorieAnnotation] = []
    line_start = start_offset
    for line in text.split("\n"):
        line_end = line_start + len(line)

        for match in grammar.linked_annotation.finditer(line):
            entry = parse_linked_match(match)
            if entry is None or entry.amount < 0:
                continue
            calories_per_hundred = calorie_provider.get_calories_for_food(entry.name)
            if calories_per_hundred is None or not math.isfinite(calories_per_hundred):
                continue
            serving_size = calorie_provider.get_serving_size(entry.name)
            calories = unit_multiplier(entry.amount, entry.unit, serving_size) * (
                calories_per_hundred
            )
            if not math.isfinite(calories):
                continue
            annotation = _annotation(line_end, calories, match.group("tag"), options)
            if annotation is not None:
                annotations.append(annotation)

        for match in grammar.kcal_annotation.finditer(line):
            calories = float(match.group("calories"))
            annotation = _annotation(line_end, calories, match.group("tag"), options)
            if annotation is not None:
                annotations.append(annotation)

        line_start = line_end + 1
    return annotations


def _annotation(
    position: int, calories: float, tag: str, options: TagOptions
) -> CalorieAnnotation | None:
    rounded = round_half_up(calories)
    if rounded < 0:
        return None
    signed = rounded * tag_sign(tag, options.workout_tag)
    return CalorieAnnotation(position=position, text=f"{signed}kcal")
