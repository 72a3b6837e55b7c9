"""Tests for highlight ranges and calorie annotations."""

import pytest

from food_tracker.domain.highlights import CalorieAnnotation, HighlightRange
from food_tracker.domain.tags import TagOptions
from food_tracker.services.highlights import (
    extract_highlight_ranges,
    extract_inline_calorie_annotations,
    extract_multiline_highlight_ranges,
)
from tests.conftest import FakeCalorieProvider


def _spans(ranges: list[HighlightRange]) -> list[tuple[int, int, str]]:
    return [(item.start, item.end, item.type) for item in ranges]


def test_inline_values_are_highlighted_individually(tags: TagOptions) -> None:
    ranges = extract_highlight_ranges(
        "#food Chicken Breast 300kcal 25prot 5fat 0carbs", 0, tags
    )

    assert _spans(ranges) == [
        (21, 28, "nutrition"),
        (29, 35, "nutrition"),
        (36, 40, "nutrition"),
        (41, 47, "nutrition"),
    ]


def test_line_start_offsets_ranges(tags: TagOptions) -> None:
    ranges = extract_highlight_ranges("#food Snack 200kcal", 50, tags)

    assert _spans(ranges) == [(62, 69, "nutrition")]


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("#food Recovery -150kcal", [(15, 23, "negative-kcal")]),
        ("#workout cardio -150kcal", []),
        ("#workout Run 300kcal", [(13, 20, "negative-kcal")]),
        ("#workout Lift 20prot", [(14, 20, "nutrition")]),
        ("#FOOD Snack 200KCAL", [(12, 19, "nutrition")]),
    ],
)
def test_kcal_values_by_sign_and_tag(
    tags: TagOptions, line: str, expected: list[tuple[int, int, str]]
) -> None:
    assert _spans(extract_highlight_ranges(line, 0, tags)) == expected


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("#food [[Chicken Breast]] 200g", [(25, 29, "amount")]),
        ("#food [[200g Rice]] 200g", [(20, 24, "amount")]),
        ("#food [Apple](foods/apple.md) 150g", [(30, 34, "amount")]),
    ],
)
def test_linked_amounts(
    tags: TagOptions, line: str, expected: list[tuple[int, int, str]]
) -> None:
    assert _spans(extract_highlight_ranges(line, 0, tags)) == expected


def test_repeated_value_text_uses_the_matched_occurrence(tags: TagOptions) -> None:
    ranges = extract_highlight_ranges("#food 300kcal Cereal with 300kcal 15prot", 0, tags)

    assert _spans(ranges) == [(26, 33, "nutrition"), (34, 40, "nutrition")]


def test_custom_tag_with_hyphen() -> None:
    options = TagOptions(food_tag="food-tracker", workout_tag="workout")

    ranges = extract_highlight_ranges("#food-tracker Chicken 300kcal", 0, options)

    assert _spans(ranges) == [(22, 29, "nutrition")]


def test_lines_without_entries(tags: TagOptions) -> None:
    assert extract_highlight_ranges("Just some text 300kcal", 0, tags) == []
    assert extract_highlight_ranges("#food [[Apple]]", 0, tags) == []
    assert extract_highlight_ranges("", 0, tags) == []


def test_empty_tags_match_nothing() -> None:
    options = TagOptions(food_tag="", workout_tag="")

    assert extract_highlight_ranges("#food Snack 200kcal", 0, options) == []


def test_multiline_ranges_track_line_offsets(tags: TagOptions) -> None:
    text = "#food Apple 95kcal\nplain\n#food [[Rice]] 200g"

    ranges = extract_multiline_highlight_ranges(text, 100, tags)

    assert _spans(ranges) == [(112, 118, "nutrition"), (140, 144, "amount")]


def test_linked_annotation_uses_calories_per_hundred(tags: TagOptions) -> None:
    provider = FakeCalorieProvider(calories={"bread": 290})

    annotations = extract_inline_calorie_annotations("#food [[Bread]] 10g", 0, tags, provider)

    assert annotations == [CalorieAnnotation(position=19, text="29kcal")]


def test_workout_annotations_are_negative(tags: TagOptions) -> None:
    provider = FakeCalorieProvider(calories={"rowing": 500})

    linked = extract_inline_calorie_annotations(
        "#workout [[Rowing]] 30g", 0, tags, provider
    )
    direct = extract_inline_calorie_annotations("#workout Run 300kcal", 0, tags, provider)

    assert linked == [CalorieAnnotation(position=23, text="-150kcal")]
    assert direct == [CalorieAnnotation(position=20, text="-300kcal")]


def test_direct_kcal_annotations_per_line(tags: TagOptions) -> None:
    annotations = extract_inline_calorie_annotations(
        "#food Apple 95kcal\n#food Pear 0kcal", 10, tags, FakeCalorieProvider()
    )

    assert annotations == [
        CalorieAnnotation(position=28, text="95kcal"),
        CalorieAnnotation(position=45, text="0kcal"),
    ]


def test_negative_kcal_is_not_annotated(tags: TagOptions) -> None:
    annotations = extract_inline_calorie_annotations(
        "#workout run -150kcal", 0, tags, FakeCalorieProvider()
    )

    assert annotations == []


def test_every_match_on_a_line_is_annotated_at_line_end(tags: TagOptions) -> None:
    provider = FakeCalorieProvider(calories={"bread": 290})

    annotations = extract_inline_calorie_annotations(
        "#food [[Bread]] 10g #food Tea 5kcal", 0, tags, provider
    )

    assert annotations == [
        CalorieAnnotation(position=35, text="29kcal"),
        CalorieAnnotation(position=35, text="5kcal"),
    ]


def test_piece_annotation_uses_serving_size(tags: TagOptions) -> None:
    provider = FakeCalorieProvider(calories={"egg": 155}, serving_sizes={"egg": 50})

    annotations = extract_inline_calorie_annotations("#food [[Egg]] 2pcs", 0, tags, provider)

    assert annotations == [CalorieAnnotation(position=18, text="155kcal")]


def test_unknown_or_non_finite_calories_are_skipped(tags: TagOptions) -> None:
    provider = FakeCalorieProvider(calories={"mystery": float("inf")})

    annotations = extract_inline_calorie_annotations(
        "#food [[Mystery]] 100g\n#food [[Unknown]] 100g", 0, tags, provider
    )

    assert annotations == []


def test_zero_amount_linked_entry_is_annotated(tags: TagOptions) -> None:
    provider = FakeCalorieProvider(calories={"bread": 290})

    annotations = extract_inline_calorie_annotations("#food [[Bread]] 0g", 0, tags, provider)

    assert annotations == [CalorieAnnotation(position=18, text="0kcal")]


def test_zero_workout_calories_are_not_negated(tags: TagOptions) -> None:
    provider = FakeCalorieProvider(calories={"rowing": 500})

    direct = extract_inline_calorie_annotations(
        "#workout Rest 0kcal", 0, tags, provider
    )
    linked = extract_inline_calorie_annotations(
        "#workout [[Rowing]] 0g", 0, tags, provider
    )

    assert direct == [CalorieAnnotation(position=19, text="0kcal")]
    assert linked == [CalorieAnnotation(position=22, text="0kcal")]
