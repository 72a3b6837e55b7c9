"""Autocomplete trigger detection and suggestion ranking."""

import re
from dataclasses import dataclass, field
from typing import Protocol

from food_tracker.domain.suggestions import SuggestionContext, SuggestionTrigger, TagType
from food_tracker.domain.tags import TagOptions
from food_tracker.services.grammar import (
    MEASURE_KEYWORDS,
    NUTRIENT_KEYWORDS,
    GrammarSet,
    recompile,
)

NUTRITION_KEYWORDS: tuple[str, ...] = tuple(NUTRIENT_KEYWORDS)

# Text ending with whitespace and number+letters, e.g. "apple 100k".
_NUTRITION_QUERY = re.compile(r".*\s+(-?\d+[a-z]*)$", re.IGNORECASE)
# A file reference followed by number+letters, e.g. "[[apple]] 100g".
_FOOD_WITH_MEASURE = re.compile(
    r"(?:\[\[[^\]]+\]\]|\[[^\]]*\]\([^)]+\))\s+(-?\d+[a-z]*)$", re.IGNORECASE
)
_NUMBER_WITH_LETTERS = re.compile(r"^-?\d+[a-z]*$")
_LEADING_NUMBER = re.compile(r"^-?\d+")
_KEYWORD_SUFFIX = re.compile(r"\d+([a-z]+)$")


class NutrientNameProvider(Protocol):
    """Source of known food names for autocomplete."""

    def get_nutrient_names(self) -> list[str]:
        """Return all food names, sorted."""

    def get_file_name_from_nutrient_name(self, name: str) -> str | None:
        """Return the file name for a food name, if known."""


@dataclass
class SuggestionService:
    """Classify the typing context of a line and produce completions."""

    grammar: GrammarSet = field(default_factory=lambda: recompile(TagOptions()))

    @classmethod
    def create(cls, food_tag: str, workout_tag: str) -> "SuggestionService":
        """Create a service for the given tags."""
        return cls(grammar=recompile(TagOptions(food_tag, workout_tag)))

    def update_tags(self, food_tag: str, workout_tag: str) -> None:
        """Swap in patterns for a new tag configuration."""
        self.grammar = recompile(TagOptions(food_tag, workout_tag))

    def analyze_trigger(self, line: str, cursor: int) -> SuggestionTrigger | None:
        """Return what the user is completing at ``cursor``, if anything."""
        if cursor <= 0:
            return None
        grammar = self.grammar
        before_cursor = line[:cursor]

        tag_matches = list(grammar.tag_detection.finditer(before_cursor))
        if not tag_matches:
            return None
        # Bind to the tag nearest the cursor.
        last_tag = tag_matches[-1]

        content = before_cursor[last_tag.end() :].lstrip()
        tag_type: TagType = (
            "workout" if grammar.options.is_workout_tag(last_tag.group("tag")) else "food"
        )

        measure_match = _FOOD_WITH_MEASURE.search(content)
        if measure_match:
            return _keyword_trigger(measure_match.group(1), cursor, "measure", tag_type)

        nutrition_match = _NUTRITION_QUERY.search(content)
        if nutrition_match:
            return _keyword_trigger(nutrition_match.group(1), cursor, "nutrition", tag_type)

        if tag_type == "workout":
            return None

        return SuggestionTrigger(
            query=content,
            start_offset=cursor - len(content),
            end_offset=cursor,
            tag_type=tag_type,
        )

    def get_suggestions(
        self,
        query: str,
        provider: NutrientNameProvider,
        context: SuggestionContext | None = None,
        tag_type: TagType | None = None,
    ) -> list[str]:
        """Return keyword completions or matching food names for ``query``."""
        lower_query = query.lower()

        if _NUMBER_WITH_LETTERS.match(lower_query):
            number_part = _LEADING_NUMBER.match(lower_query).group(0)
            is_negative = number_part.startswith("-")
            is_workout = tag_type == "workout"
            if is_workout and (is_negative or int(number_part) <= 0):
                return []

            letters = lower_query[len(number_part) :]
            keywords = MEASURE_KEYWORDS if context == "measure" else NUTRITION_KEYWORDS
            matching = [keyword for keyword in keywords if keyword.startswith(letters)]
            if is_negative or is_workout:
                matching = [keyword for keyword in matching if keyword == "kcal"]
            if matching:
                return [number_part + keyword for keyword in matching]

        names = provider.get_nutrient_names()
        if not lower_query:
            return names
        return [name for name in names if lower_query in name.lower()]

    @staticmethod
    def is_nutrition_keyword(suggestion: str) -> bool:
        """Return True for keyword completions such as ``100g`` or ``50kcal``."""
        keywords = {*NUTRITION_KEYWORDS, *MEASURE_KEYWORDS}
        if suggestion in keywords:
            return True
        match = _KEYWORD_SUFFIX.search(suggestion)
        return bool(match) and match.group(1) in keywords

    @staticmethod
    def food_name_replacement(name: str, provider: NutrientNameProvider) -> str:
        """Return the wikilink inserted for a chosen food name."""
        file_name = provider.get_file_name_from_nutrient_name(name)
        return f"[[{file_name or name}]]"

    @staticmethod
    def nutrition_keyword_replacement(keyword: str) -> str:
        """Return the text inserted for a chosen keyword completion."""
        return f"{keyword} "


def _keyword_trigger(
    query: str, cursor: int, context: SuggestionContext, tag_type: TagType
) -> SuggestionTrigger:
    return SuggestionTrigger(
        query=query,
        start_offset=cursor - len(query),
        end_offset=cursor,
        tag_type=tag_type,
        context=context,
    )
