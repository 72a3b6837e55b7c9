"""Parser for set-based exercise entries."""

import re
from dataclasses import dataclass

from food_tracker.domain.entries import ExerciseEntry, ExerciseWeight
from food_tracker.services.grammar import escape_tag

_LINE_SPLIT = re.compile(r"\r?\n")
_DEFAULT_WEIGHT_UNIT = "kg"


@dataclass
class ExerciseEntryParser:
    """Parse entries like ``#exercise [[Pec Fly]] 40kg 15-15-15``."""

    exercise_tag: str

    def __post_init__(self) -> None:
        self.exercise_tag = self.exercise_tag.strip()

    def update_exercise_tag(self, new_tag: str) -> None:
        """Switch to a different exercise tag."""
        self.exercise_tag = new_tag.strip()

    def parse(self, content: str) -> list[ExerciseEntry]:
        """Return every exercise entry found in ``content``."""
        if not self.exercise_tag:
            return []
        pattern = re.compile(
            rf"^#{escape_tag(self.exercise_tag)}\s+"
            r"(?P<name>\[\[[^\]]+\]\]|[^\d\r\n]+?)\s+"
            r"(?:(?P<weight>\d+(?:\.\d+)?)(?P<unit>kgs?|lbs?)?\s+)?"
            r"(?P<sets>\d+(?:-\d+)*)(?=\s*$|\s+\S)",
            re.IGNORECASE,
        )
        entries = []
        for index, raw_line in enumerate(_LINE_SPLIT.split(content), start=1):
            entry = _parse_line(raw_line.strip(), index, pattern)
            if entry is not None:
                entries.append(entry)
        return entries


def _parse_line(
    line: str, line_number: int, pattern: re.Pattern[str]
) -> ExerciseEntry | None:
    if not line:
        return None
    match = pattern.match(line)
    if match is None:
        return None
    sets = [int(reps) for reps in match.group("sets").split("-") if int(reps) > 0]
    if not sets:
        return None
    return ExerciseEntry(
        name=_extract_name(match.group("name")),
        sets=sets,
        weight=_parse_weight(match.group("weight"), match.group("unit")),
        line_number=line_number,
        raw_text=line,
    )


def _extract_name(raw_name: str) -> str:
    name = raw_name.strip()
    if name.startswith("[[") and name.endswith("]]"):
        return name[2:-2].strip()
    return name


def _parse_weight(raw_weight: str | None, unit: str | None) -> ExerciseWeight | None:
    if not raw_weight:
        return None
    value = float(raw_weight)
    if value <= 0:
        return None
    return ExerciseWeight(value=value, unit=(unit or _DEFAULT_WEIGHT_UNIT).lower())
