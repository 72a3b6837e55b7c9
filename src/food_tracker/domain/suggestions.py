"""Domain models for autocomplete triggers."""

from dataclasses import dataclass
from typing import Literal

SuggestionContext = Literal["measure", "nutrition"]
TagType = Literal["food", "workout"]


@dataclass(frozen=True)
class SuggestionTrigger:
    """Text span the editor should replace with a chosen suggestion."""

    query: str
    start_offset: int
    end_offset: int
    tag_type: TagType = "food"
    context: SuggestionContext | None = None
