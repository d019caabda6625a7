"""Search filtering for launcher entries.

An entry is accepted when the search pattern matches (case-insensitively,
anywhere in the string) its display name, its transliteration, or its
phonetic initials. The initials arrive as a sequence of abbreviation
alternatives and are matched as one comma-joined string, so ``("zq", "cq")``
is searched as ``"zq,cq"``: ``"cq"`` matches, ``"zqcq"`` does not. Likewise
per-word initials ``("q", "n")`` become ``"q,n"`` which ``"qn"`` does not
match.

Pattern syntaxes mirror the usual sort/filter proxy choices: a fixed string
(default), a shell-style wildcard, or a regular expression. An empty pattern
accepts everything.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Protocol

from PyQt6.QtCore import QRegularExpression

from config.settings import INITIALS_SEPARATOR
from .errors import InvalidSearchPatternError

__all__ = [
    "PatternSyntax",
    "SearchPattern",
    "join_initials",
    "accepts_fields",
    "accepts",
]


class PatternSyntax(str, Enum):
    FIXED_STRING = "fixed_string"
    WILDCARD = "wildcard"
    REGULAR_EXPRESSION = "regular_expression"


class _Searchable(Protocol):
    display_name: str
    transliterated: str
    initials: Iterable[str]


def _wildcard_to_regex(text: str) -> str:
    # Same conversion QSortFilterProxyModel.setFilterWildcard uses; "*" and "?" stop at "/"
    return QRegularExpression.wildcardToRegularExpression(
        text, QRegularExpression.WildcardConversionOption.UnanchoredWildcardConversion
    )


@dataclass(frozen=True)
class SearchPattern:
    text: str = ""
    syntax: PatternSyntax = PatternSyntax.FIXED_STRING
    _compiled: "re.Pattern[str]" = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_compiled", self.compile())

    def compile(self) -> "re.Pattern[str]":
        if self.syntax is PatternSyntax.FIXED_STRING:
            source = re.escape(self.text)
        elif self.syntax is PatternSyntax.WILDCARD:
            source = _wildcard_to_regex(self.text)
        else:
            source = self.text
        try:
            return re.compile(source, re.IGNORECASE)
        except re.error as exc:
            raise InvalidSearchPatternError(
                f"invalid search pattern {self.text!r}: {exc}",
                context={"pattern": self.text, "syntax": self.syntax.value},
            ) from exc

    @property
    def is_empty(self) -> bool:
        return not self.text

    def search(self, text: str) -> bool:
        return self._compiled.search(text) is not None


def join_initials(initials: Iterable[str]) -> str:
    return INITIALS_SEPARATOR.join(initials)


def accepts_fields(
    display_name: str, transliterated: str, initials: str, pattern: SearchPattern
) -> bool:
    if pattern.is_empty:
        return True
    return (
        pattern.search(display_name)
        or pattern.search(transliterated)
        or pattern.search(initials)
    )


def accepts(item: _Searchable, pattern: SearchPattern) -> bool:
    return accepts_fields(
        item.display_name, item.transliterated, join_initials(item.initials), pattern
    )
