"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from food_tracker.config import Settings
from food_tracker.domain.nutrition import NutrientData
from food_tracker.domain.tags import TagOptions
from food_tracker.services.highlights import CalorieProvider
from food_tracker.services.suggestions import NutrientNameProvider
from food_tracker.services.totals import ExerciseCalorieProvider, NutrientDataProvider


@dataclass
class FakeNutrientProvider(NutrientDataProvider):
    """Nutrient provider backed by a dict that records lookups."""

    foods: dict[str, NutrientData] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)

    def get_nutrition_data(self, name: str) -> NutrientData | None:
        self.calls.append(name)
        return self.foods.get(name)


@dataclass
class FailingNutrientProvider(NutrientDataProvider):
    """Nutrient provider whose backing store is unavailable."""

    def get_nutrition_data(self, name: str) -> NutrientData | None:
        raise RuntimeError("cache down")


@dataclass
class FakeCalorieProvider(CalorieProvider):
    """Calorie provider with per-100 g calories and serving sizes."""

    calories: dict[str, float] = field(default_factory=dict)
    serving_sizes: dict[str, float] = field(default_factory=dict)

    def get_calories_for_food(self, name: str) -> float | None:
        return self.calories.get(name.lower())

    def get_serving_size(self, name: str) -> float | None:
        return self.serving_sizes.get(name.lower())


@dataclass
class FakeNameProvider(NutrientNameProvider):
    """Food names with their backing file names."""

    file_names: dict[str, str] = field(
        default_factory=lambda: {
            "apple": "apple-nutrition",
            "banana": "banana-nutrition",
            "chicken breast": "chicken-breast-nutrition",
            "rice": "rice-nutrition",
            "milk": "milk-nutrition",
        }
    )

    def get_nutrient_names(self) -> list[str]:
        return list(self.file_names)

    def get_file_name_from_nutrient_name(self, name: str) -> str | None:
        return self.file_names.get(name)


@dataclass
class FakeExerciseProvider(ExerciseCalorieProvider):
    """Calories per repetition by exercise name."""

    per_rep: dict[str, float] = field(default_factory=dict)

    def get_calories_per_rep(self, name: str) -> float | None:
        return self.per_rep.get(name)


@pytest.fixture
def tags() -> TagOptions:
    return TagOptions(food_tag="food", workout_tag="workout")


@pytest.fixture
def settings() -> Settings:
    return Settings(food_tag="food", workout_tag="workout", environment="test")
