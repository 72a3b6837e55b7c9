"""Domain models for editor highlights and annotations."""

from dataclasses import dataclass
from typing import Literal

HighlightType = Literal["nutrition", "amount", "negative-kcal"]


@dataclass(frozen=True)
class HighlightRange:
    """Absolute document range to decorate."""

    start: int
    end: int
    type: HighlightType


@dataclass(frozen=True)
class CalorieAnnotation:
    """Calorie hint rendered at the end of a line."""

    position: int
    text: str
