"""Nutrition domain models."""

from dataclasses import dataclass

NutrientData = dict[str, float]

NUTRIENT_KEYS: tuple[str, ...] = (
    "calories",
    "fats",
    "saturated_fats",
    "protein",
    "carbs",
    "fiber",
    "sugar",
    "sodium",
)

SERVING_SIZE_KEY = "serving_size"


@dataclass(frozen=True)
class GoalProgress:
    """Progress of a consumed nutrient against its daily goal."""

    remaining: float
    percent_consumed: int
    percent_remaining: int


@dataclass(frozen=True)
class NutritionTotals:
    """Totals derived from the entries of a single note."""

    linked_totals: NutrientData
    inline_totals: NutrientData
    workout_totals: NutrientData
    combined_totals: NutrientData
    clamped_totals: NutrientData
    goal_progress: dict[str, GoalProgress] | None = None
