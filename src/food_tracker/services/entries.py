"""Recognition of food and workout entries in note text.

Aggregation scans each line once per syntax and keeps only the first match:
two inline entries (or two linked entries) sharing a line count once. This
mirrors how totals have always been computed and is kept so existing notes
keep their totals.
"""

import logging
import re
from urllib.parse import unquote

from food_tracker.domain.entries import HighlightMatch, InlineEntry, LinkedEntry
from food_tracker.domain.nutrition import NutrientData
from food_tracker.services.grammar import (
    NUTRIENT_KEYWORDS,
    inline_entry_pattern,
    linked_entry_pattern,
    nutrient_pair_pattern,
)

_logger = logging.getLogger(__name__)

_STRAY_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")


def normalize_filename(raw: str | None) -> str | None:
    """Reduce a link target to the bare food file name.

    Drops the ``|alias`` and ``#heading`` parts, any folder prefix and a
    trailing ``.md``, then percent-decodes what is left.
    """
    if not raw:
        return None
    without_alias = raw.split("|")[0]
    without_heading = without_alias.split("#")[0]
    filename = without_heading.split("/")[-1].strip()
    if not filename:
        return None
    if filename.lower().endswith(".md"):
        filename = filename[:-3]
    try:
        filename = unquote(_STRAY_PERCENT.sub("%25", filename), errors="strict")
    except UnicodeDecodeError as exc:
        _logger.warning("Failed to decode filename %s: %s", filename, exc)
    return filename


def match_highlight_entry(line: str, pattern: re.Pattern[str]) -> HighlightMatch | None:
    """Return the first entry on ``line`` matched by a combined highlight pattern."""
    match = pattern.search(line)
    if match is None:
        return None
    tag = match.group("tag") or ""
    if match.group("nutrition_values"):
        return HighlightMatch(
            kind="inline",
            tag=tag,
            value=match.group("nutrition_values"),
            value_start=match.start("nutrition_values"),
        )
    if match.group("amount_value"):
        return HighlightMatch(
            kind="linked",
            tag=tag,
            value=match.group("amount_value"),
            value_start=match.start("amount_value"),
        )
    return None


def parse_linked_match(match: re.Match[str]) -> LinkedEntry | None:
    """Build a linked entry from a linked-entry pattern match."""
    name = normalize_filename(match.group("wiki_link") or match.group("markdown_link"))
    if not name:
        return None
    try:
        amount = float(match.group("amount"))
    except ValueError:
        return None
    return LinkedEntry(name=name, amount=amount, unit=match.group("unit").lower())


def parse_nutrient_values(values: str) -> NutrientData:
    """Sum ``<number><keyword>`` pairs into a nutrient mapping."""
    data: NutrientData = {}
    for match in nutrient_pair_pattern().finditer(values):
        key = NUTRIENT_KEYWORDS[match.group("keyword").lower()]
        data[key] = data.get(key, 0.0) + float(match.group("number"))
    return data


def scan_linked_entries(content: str, escaped_tag: str) -> list[LinkedEntry]:
    """Return the first linked entry of each line tagged with ``escaped_tag``."""
    pattern = linked_entry_pattern(escaped_tag)
    entries = []
    for line in content.split("\n"):
        match = pattern.search(line)
        if match is None:
            continue
        entry = parse_linked_match(match)
        if entry is not None:
            entries.append(entry)
    return entries


def scan_inline_entries(content: str, escaped_tag: str) -> list[InlineEntry]:
    """Return the first inline entry of each line tagged with ``escaped_tag``."""
    pattern = inline_entry_pattern(escaped_tag)
    entries = []
    for line in content.split("\n"):
        match = pattern.search(line)
        if match is None:
            continue
        nutrients = parse_nutrient_values(match.group("nutrition_values"))
        if nutrients:
            entries.append(InlineEntry(name=match.group("food_name"), nutrients=nutrients))
    return entries
