"""Models for food files stored in the nutrient catalog."""

import re

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from food_tracker.domain.nutrition import NUTRIENT_KEYS, SERVING_SIZE_KEY, NutrientData

_LEADING_FLOAT = re.compile(r"^\s*[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?")


class NutrientRecord(BaseModel):
    """Frontmatter of a food file, validated leniently."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    calories: float | None = None
    fats: float | None = None
    saturated_fats: float | None = None
    protein: float | None = None
    carbs: float | None = Field(
        default=None, validation_alias=AliasChoices("carbs", "carbohydrates")
    )
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None
    serving_size: float | None = Field(
        default=None, validation_alias=AliasChoices("serving_size", "servingSize")
    )

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: object) -> str | None:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @field_validator(
        "calories",
        "fats",
        "saturated_fats",
        "protein",
        "carbs",
        "fiber",
        "sugar",
        "sodium",
        "serving_size",
        mode="before",
    )
    @classmethod
    def _coerce_number(cls, value: object) -> float | None:
        if value is None:
            return None
        if isinstance(value, bool):
            return 0.0
        if isinstance(value, (int, float)):
            return float(value)
        if isinstance(value, str):
            match = _LEADING_FLOAT.match(value)
            return float(match.group(0)) if match else 0.0
        return 0.0

    def to_nutrient_data(self) -> NutrientData:
        """Return the specified nutrient values as a sparse mapping."""
        data: NutrientData = {}
        for key in (*NUTRIENT_KEYS, SERVING_SIZE_KEY):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data
