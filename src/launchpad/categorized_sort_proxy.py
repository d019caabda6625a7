"""Categorized Sort Proxy Model

Sorts and filters an ``AppsModel`` for the launcher grid. Entries are
ordered either alphabetically (by transliteration, see ``launchpad.sorting``)
or by their DDE category code, and narrowed by a case-insensitive search over
display name, transliteration and phonetic initials (see
``launchpad.filtering``).

The category type is stored explicitly; the sort role is derived from it.
Switching type re-runs the whole sort because the alphabetary comparator's
tie-breaks do not exist in category ordering. All calls are expected on the
Qt thread owning the proxy, which serialises mode switches with sort and
filter passes.

Search state lives in ``filterPattern()``; the inherited ``setFilterFixedString``,
``setFilterWildcard`` and ``setFilterRegularExpression`` feed it, while
``filterRegularExpression()`` is not kept in sync.
"""

from __future__ import annotations

import logging
from typing import Optional, Set

from PyQt6.QtCore import (
    QModelIndex,
    QRegularExpression,
    QSortFilterProxyModel,
    Qt,
    QTimer,
    pyqtSignal,
)

from config.settings import DEFAULT_CATEGORY_TYPE, FILTER_DEBOUNCE_MS
from .category import CategoryType, parse_category_type, sort_role_for
from .errors import InvalidSearchPatternError, UnknownCategoryTypeError
from .filtering import PatternSyntax, SearchPattern, accepts_fields
from .models import AppsRole
from .services.event_bus import EventBus, LauncherEvent
from .sorting import NULL_LETTER, SortEntry, baseline_less_than, section_letter, transliterated_less_than

__all__ = ["CategorizedSortProxyModel"]

_log = logging.getLogger(__name__)


def _default_category_type() -> CategoryType:
    try:
        return parse_category_type(DEFAULT_CATEGORY_TYPE)
    except UnknownCategoryTypeError:
        _log.warning(
            "unknown default category type %r, using alphabetary", DEFAULT_CATEGORY_TYPE
        )
        return CategoryType.ALPHABETARY


class CategorizedSortProxyModel(QSortFilterProxyModel):
    categoryTypeChanged = pyqtSignal()
    filterPatternChanged = pyqtSignal(str)

    def __init__(
        self,
        source_model=None,
        *,
        event_bus: Optional[EventBus] = None,
        category_type: CategoryType | str | None = None,
        parent=None,
    ):
        super().__init__(parent)
        self._event_bus = event_bus
        self._pattern = SearchPattern()
        self._pending_pattern: Optional[SearchPattern] = None
        self.setSortCaseSensitivity(Qt.CaseSensitivity.CaseInsensitive)
        self.setFilterCaseSensitivity(Qt.CaseSensitivity.CaseInsensitive)
        self.setDynamicSortFilter(True)

        if category_type is None:
            self._category_type = _default_category_type()
        else:
            self._category_type = parse_category_type(category_type)
        self.setSortRole(sort_role_for(self._category_type))

        # Debounce timer for search-as-you-type
        self._debounce = QTimer(self)
        self._debounce.setInterval(FILTER_DEBOUNCE_MS)
        self._debounce.setSingleShot(True)
        self._debounce.timeout.connect(self._apply_pending_pattern)  # type: ignore

        if source_model is not None:
            self.setSourceModel(source_model)
        self.sort(0, Qt.SortOrder.AscendingOrder)

    # Category type ------------------------------------------------
    def setCategoryType(self, category_type: CategoryType | str):
        new_type = parse_category_type(category_type)
        old_role = self.sortRole()
        new_role = sort_role_for(new_type)
        self._category_type = new_type
        if new_role == old_role:
            _log.debug("category type already %s", new_type.value)
            return
        self.setSortRole(new_role)
        _log.info("category type switched to %s", new_type.value)
        self.categoryTypeChanged.emit()
        if self._event_bus is not None:
            self._event_bus.publish(
                LauncherEvent.CATEGORY_TYPE_CHANGED, {"category_type": new_type.value}
            )
        # Comparator semantics changed: drop the old mapping and sort from scratch
        self.invalidate()
        self.sort(0, Qt.SortOrder.AscendingOrder)

    def categoryType(self) -> CategoryType:
        return self._category_type

    def sortRoleName(self) -> str:
        source = self.sourceModel()
        if source is None:
            return ""
        name = source.roleNames().get(self.sortRole())
        return bytes(name.data()).decode() if name is not None else ""

    # Sections -----------------------------------------------------
    def sectionKeys(self) -> Set[str]:
        """Uppercased first characters of the active sort field for rows in view.

        In category mode the field is the numeric DDE code, so keys are its
        leading digits and codes sharing one (Chat = 1, Others = 10) share a
        section. Use ``alphabetarySections`` for the letter index.
        """
        return self._collect_sections(self.sortRole())

    def alphabetarySections(self) -> Set[str]:
        return self._collect_sections(int(AppsRole.TransliteratedRole))

    def _collect_sections(self, role: int) -> Set[str]:
        keys: Set[str] = set()
        for row in range(self.rowCount()):
            value = self.data(self.index(row, 0), role)
            if value is None:
                continue
            letter = section_letter(value if isinstance(value, str) else str(value))
            if letter != NULL_LETTER:
                keys.add(letter)
        return keys

    # Search -------------------------------------------------------
    def scheduleFilterPattern(
        self, text: str, syntax: PatternSyntax = PatternSyntax.FIXED_STRING
    ):
        """Debounced filter setter; only the last pattern within the interval applies."""
        self._pending_pattern = self._make_pattern(text, syntax)
        self._debounce.start()

    def setFilterPattern(self, text: str, syntax: PatternSyntax = PatternSyntax.FIXED_STRING):
        self._apply_pattern(self._make_pattern(text, syntax))

    # Inherited QSortFilterProxyModel setters route into the same pattern state
    def setFilterFixedString(self, pattern: str):  # type: ignore[override]
        self.setFilterPattern(pattern, PatternSyntax.FIXED_STRING)

    def setFilterWildcard(self, pattern: str):  # type: ignore[override]
        self.setFilterPattern(pattern, PatternSyntax.WILDCARD)

    def setFilterRegularExpression(self, pattern: QRegularExpression | str):  # type: ignore[override]
        if isinstance(pattern, QRegularExpression):
            pattern = pattern.pattern()
        self.setFilterPattern(pattern, PatternSyntax.REGULAR_EXPRESSION)

    def filterPattern(self) -> SearchPattern:
        return self._pattern

    def _make_pattern(self, text: str, syntax: PatternSyntax) -> SearchPattern:
        text = text.strip()
        try:
            return SearchPattern(text, syntax)
        except InvalidSearchPatternError as exc:
            _log.warning("%s; matching it literally", exc)
            return SearchPattern(text, PatternSyntax.FIXED_STRING)

    def _apply_pattern(self, pattern: SearchPattern):
        if pattern == self._pattern:
            return
        self._pattern = pattern
        _log.debug("filter pattern set to %r (%s)", pattern.text, pattern.syntax.value)
        self.invalidateFilter()
        self.filterPatternChanged.emit(pattern.text)
        if self._event_bus is not None:
            self._event_bus.publish(LauncherEvent.FILTER_CHANGED, {"pattern": pattern.text})

    def _apply_pending_pattern(self):
        if self._pending_pattern is None:
            return
        pattern, self._pending_pattern = self._pending_pattern, None
        self._apply_pattern(pattern)

    # QSortFilterProxyModel overrides ------------------------------
    def lessThan(self, source_left: QModelIndex, source_right: QModelIndex) -> bool:  # type: ignore[override]
        model = source_left.model()
        if self._category_type is CategoryType.ALPHABETARY:
            left = SortEntry(
                model.data(source_left, AppsRole.TransliteratedRole) or "",
                model.data(source_left, Qt.ItemDataRole.DisplayRole) or "",
            )
            right = SortEntry(
                model.data(source_right, AppsRole.TransliteratedRole) or "",
                model.data(source_right, Qt.ItemDataRole.DisplayRole) or "",
            )
            return transliterated_less_than(left, right)
        role = self.sortRole()
        return baseline_less_than(model.data(source_left, role), model.data(source_right, role))

    def filterAcceptsRow(self, source_row: int, source_parent: QModelIndex) -> bool:  # type: ignore[override]
        if self._pattern.is_empty:
            return True
        source = self.sourceModel()
        idx = source.index(source_row, 0, source_parent)
        return accepts_fields(
            source.data(idx, Qt.ItemDataRole.DisplayRole) or "",
            source.data(idx, AppsRole.TransliteratedRole) or "",
            source.data(idx, AppsRole.InitialsRole) or "",
            self._pattern,
        )
