"""Tag configuration value objects."""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class TagOptions:
    """Configured consumption and workout tags (without the leading ``#``)."""

    food_tag: str = "food"
    workout_tag: str = "workout"

    @property
    def escaped_food_tag(self) -> str:
        return re.escape(self.food_tag.strip())

    @property
    def escaped_workout_tag(self) -> str:
        return re.escape(self.workout_tag.strip())

    def is_workout_tag(self, tag: str | None) -> bool:
        """Return True when ``tag`` names the workout tag (case-insensitive)."""
        workout_tag = self.workout_tag.strip().lower()
        return bool(workout_tag) and (tag or "").lower() == workout_tag
