"""Domain models for recognized markup entries."""

from dataclasses import dataclass
from typing import Literal

from food_tracker.domain.nutrition import NutrientData


@dataclass(frozen=True)
class LinkedEntry:
    """Entry referencing a food file with an amount, e.g. ``#food [[Apple]] 150g``."""

    name: str
    amount: float
    unit: str


@dataclass(frozen=True)
class InlineEntry:
    """Entry with literal nutrient values, e.g. ``#food Toast 120kcal 4prot``."""

    name: str
    nutrients: NutrientData


@dataclass(frozen=True)
class HighlightMatch:
    """Single entry located on a line for highlighting."""

    kind: Literal["linked", "inline"]
    tag: str
    value: str
    value_start: int


@dataclass(frozen=True)
class ExerciseWeight:
    """Weight lifted for a set-based exercise."""

    value: float
    unit: str


@dataclass(frozen=True)
class ExerciseEntry:
    """Set-based exercise entry, e.g. ``#workout [[Pec Fly]] 40kg 15-15-15``."""

    name: str
    sets: list[int]
    line_number: int
    raw_text: str
    weight: ExerciseWeight | None = None

    @property
    def total_reps(self) -> int:
        return sum(self.sets)
