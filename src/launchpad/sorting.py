"""Launcher ordering rules.

Alphabetary ordering groups entries by the uppercased first letter of their
transliteration (the *section* letter) and then resolves ties through a short
sequence of named stages. Each stage inspects the two entries and returns an
``Ordering``: ``LESS`` / ``GREATER`` when it decides, ``TIED`` when the
entries are equal under it, or ``NOT_APPLICABLE`` to hand over to the next
stage.

Stages (applied in order):
  1. ``compare_sections`` - section letters differ -> order by them. An empty
     transliteration has no section letter and sorts first.
  2. ``prefer_matching_display`` - exactly one entry's display name starts
     with the shared section letter (e.g. "Alpha" vs "α-test", both
     transliterated "alpha") -> that entry comes first.
  3. ``prefer_lowercase_lead`` - the raw first transliteration characters
     differ only in case -> the lowercase one comes first (inverting the
     code point order where "A" < "a").
  4. ``compare_transliterations`` - raw, case-sensitive string comparison.

Letter matching always uses uppercase-normalised single characters.

Category ordering uses ``baseline_less_than``: case-insensitive for strings,
natural ``<`` otherwise, and ``str()`` forms when values are not mutually
comparable. Sorting is stable, so ties keep their source order.
"""

from __future__ import annotations

import functools
from enum import Enum
from typing import Any, Callable, Iterable, List, NamedTuple, Protocol, Sequence, TypeVar

from .category import CategoryType

__all__ = [
    "Ordering",
    "SortEntry",
    "section_letter",
    "compare_sections",
    "prefer_matching_display",
    "prefer_lowercase_lead",
    "compare_transliterations",
    "ALPHABETARY_STAGES",
    "resolve",
    "transliterated_less_than",
    "baseline_less_than",
    "is_less",
    "sort_items",
]


class Ordering(Enum):
    LESS = "less"
    GREATER = "greater"
    TIED = "tied"
    NOT_APPLICABLE = "not_applicable"

    @classmethod
    def of(cls, left: Any, right: Any) -> "Ordering":
        if left < right:
            return cls.LESS
        if right < left:
            return cls.GREATER
        return cls.TIED


class SortEntry(NamedTuple):
    transliterated: str
    display_name: str


class _Sortable(Protocol):
    transliterated: str
    display_name: str
    category: Any


T = TypeVar("T", bound=_Sortable)
TieBreakStage = Callable[[SortEntry, SortEntry], Ordering]

# Stand-in for a missing first letter; compares below every real character
NULL_LETTER = ""


def _upper_char(ch: str) -> str:
    # Some characters expand when uppercased ("ß" -> "SS"); keep them as-is
    upper = ch.upper()
    return upper if len(upper) == 1 else ch


def section_letter(text: str) -> str:
    """Uppercased first character of ``text`` or ``NULL_LETTER`` when empty."""
    if not text:
        return NULL_LETTER
    return _upper_char(text[0])


def compare_sections(left: SortEntry, right: SortEntry) -> Ordering:
    left_letter = section_letter(left.transliterated)
    right_letter = section_letter(right.transliterated)
    if left_letter == right_letter:
        return Ordering.NOT_APPLICABLE
    return Ordering.of(left_letter, right_letter)


def prefer_matching_display(left: SortEntry, right: SortEntry) -> Ordering:
    # Section letters are equal once this stage runs
    letter = section_letter(left.transliterated)
    left_matches = section_letter(left.display_name) == letter
    right_matches = section_letter(right.display_name) == letter
    if left_matches == right_matches:
        return Ordering.NOT_APPLICABLE
    return Ordering.LESS if left_matches else Ordering.GREATER


def prefer_lowercase_lead(left: SortEntry, right: SortEntry) -> Ordering:
    if section_letter(left.transliterated) == NULL_LETTER:
        return Ordering.NOT_APPLICABLE
    left_lead = left.transliterated[0]
    right_lead = right.transliterated[0]
    if left_lead == right_lead:
        return Ordering.NOT_APPLICABLE
    left_lower = left_lead.islower()
    if left_lower == right_lead.islower():
        # Same case but distinct characters sharing an uppercase form
        return Ordering.NOT_APPLICABLE
    return Ordering.LESS if left_lower else Ordering.GREATER


def compare_transliterations(left: SortEntry, right: SortEntry) -> Ordering:
    return Ordering.of(left.transliterated, right.transliterated)


ALPHABETARY_STAGES: Sequence[TieBreakStage] = (
    compare_sections,
    prefer_matching_display,
    prefer_lowercase_lead,
    compare_transliterations,
)


def resolve(
    left: SortEntry, right: SortEntry, stages: Sequence[TieBreakStage] = ALPHABETARY_STAGES
) -> Ordering:
    """Run ``stages`` until one decides; ``TIED`` if none does."""
    for stage in stages:
        outcome = stage(left, right)
        if outcome is not Ordering.NOT_APPLICABLE:
            return outcome
    return Ordering.TIED


def transliterated_less_than(left: SortEntry, right: SortEntry) -> bool:
    return resolve(left, right) is Ordering.LESS


def baseline_less_than(left: Any, right: Any) -> bool:
    """Ascending, case-insensitive comparison that never raises."""
    if isinstance(left, str) and isinstance(right, str):
        return left.casefold() < right.casefold()
    try:
        return bool(left < right)
    except TypeError:
        return str(left).casefold() < str(right).casefold()


def is_less(left: _Sortable, right: _Sortable, category_type: CategoryType) -> bool:
    if category_type is CategoryType.ALPHABETARY:
        return transliterated_less_than(
            SortEntry(left.transliterated, left.display_name),
            SortEntry(right.transliterated, right.display_name),
        )
    return baseline_less_than(left.category, right.category)


def sort_items(items: Iterable[T], category_type: CategoryType) -> List[T]:
    """Stable sort of ``items`` under ``category_type`` ordering."""

    def compare(left: T, right: T) -> int:
        if is_less(left, right, category_type):
            return -1
        if is_less(right, left, category_type):
            return 1
        return 0

    return sorted(items, key=functools.cmp_to_key(compare))
