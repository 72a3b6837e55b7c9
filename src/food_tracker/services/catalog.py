"""In-memory catalog of food files and their nutrient data."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from food_tracker.domain.catalog import NutrientRecord
from food_tracker.domain.nutrition import NutrientData
from food_tracker.services.entries import normalize_filename

_logger = logging.getLogger(__name__)


@dataclass
class _CatalogEntry:
    name: str
    file_name: str
    data: NutrientData


@dataclass
class InMemoryNutrientCatalog:
    """Nutrient, calorie and food-name provider backed by plain dictionaries.

    Callers feed it the frontmatter of each food file; reading files and
    reacting to file events stays with the host.
    """

    _entries: dict[str, _CatalogEntry]
    _name_to_path: dict[str, str]

    def __init__(self) -> None:
        self._entries = {}
        self._name_to_path = {}

    def upsert(self, path: str, frontmatter: Mapping[str, object]) -> None:
        """Add or replace the food stored at ``path``."""
        record = NutrientRecord.model_validate(dict(frontmatter))
        if record.name is None:
            self.remove(path)
            return

        existing_path = self._name_to_path.get(record.name)
        if existing_path is not None and existing_path != path:
            _logger.warning(
                "Duplicate nutrient name %r in %s conflicts with %s; using the latest",
                record.name,
                path,
                existing_path,
            )

        previous = self._entries.get(path)
        if previous is not None and previous.name != record.name:
            self._name_to_path.pop(previous.name, None)

        self._entries[path] = _CatalogEntry(
            name=record.name,
            file_name=normalize_filename(path) or path,
            data=record.to_nutrient_data(),
        )
        self._name_to_path[record.name] = path

    def remove(self, path: str) -> None:
        """Forget the food stored at ``path``."""
        entry = self._entries.pop(path, None)
        if entry is not None and self._name_to_path.get(entry.name) == path:
            self._name_to_path.pop(entry.name, None)

    def get_nutrition_data(self, name: str) -> NutrientData | None:
        """Return nutrient data for a food file name."""
        entry = self._find_by_file_name(name)
        return dict(entry.data) if entry else None

    def get_calories_for_food(self, name: str) -> float | None:
        """Return calories per 100 g for a food file name."""
        entry = self._find_by_file_name(name)
        return entry.data.get("calories") if entry else None

    def get_serving_size(self, name: str) -> float | None:
        """Return the serving size for a food file name."""
        entry = self._find_by_file_name(name)
        return entry.data.get("serving_size") if entry else None

    def get_nutrient_names(self) -> list[str]:
        """Return all food names in alphabetical order."""
        return sorted(self._name_to_path)

    def get_file_name_from_nutrient_name(self, name: str) -> str | None:
        """Return the file name (without ``.md``) of a food name."""
        path = self._name_to_path.get(name)
        if path is None:
            return None
        return self._entries[path].file_name

    def _find_by_file_name(self, file_name: str) -> _CatalogEntry | None:
        for entry in self._entries.values():
            if entry.file_name == file_name:
                return entry
        return None
