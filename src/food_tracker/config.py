"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from food_tracker.domain.tags import TagOptions

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Settings loaded from ``FOOD_TRACKER_*`` environment variables."""

    food_tag: str = "food"
    workout_tag: str = "workout"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="FOOD_TRACKER_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def tag_options(self) -> TagOptions:
        """Return the configured tags."""
        return TagOptions(food_tag=self.food_tag, workout_tag=self.workout_tag)
