"""Tests for goal parsing."""

from food_tracker.services.goals import parse_goals


def test_parses_known_nutrients() -> None:
    content = "calories: 2000\r\nprotein: 150.5\nfats:70\nwater: 3000\nnotes about carbs: 20"

    assert parse_goals(content) == {"calories": 2000, "protein": 150.5, "fats": 70}


def test_keys_are_case_insensitive() -> None:
    assert parse_goals("Calories: 1800") == {"calories": 1800}


def test_empty_content() -> None:
    assert parse_goals("") == {}
