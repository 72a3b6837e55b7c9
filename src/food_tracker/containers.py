"""Dependency container wiring for the application."""

from dataclasses import dataclass

from food_tracker.config import Settings
from food_tracker.domain.tags import TagOptions
from food_tracker.services.catalog import InMemoryNutrientCatalog
from food_tracker.services.suggestions import SuggestionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    tag_options: TagOptions
    catalog: InMemoryNutrientCatalog
    suggestion_service: SuggestionService

    def apply_settings(self, settings: Settings) -> None:
        """Switch every tag-dependent service to new settings."""
        self.settings = settings
        self.tag_options = settings.tag_options()
        self.suggestion_service.update_tags(settings.food_tag, settings.workout_tag)


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    return AppContainer(
        settings=resolved_settings,
        tag_options=resolved_settings.tag_options(),
        catalog=InMemoryNutrientCatalog(),
        suggestion_service=SuggestionService.create(
            resolved_settings.food_tag, resolved_settings.workout_tag
        ),
    )
