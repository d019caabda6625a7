"""Apps List Model

Flat QAbstractListModel over ``AppItem`` records. It is the item source the
categorized proxy sorts and filters; callers own loading and pass the model
to the proxy explicitly.

Roles:
  DisplayRole            -> display name
  TransliteratedRole     -> transliteration ("" when none)
  DDECategoryRole        -> DDECategory code
  InitialsRole           -> comma-joined phonetic initials
  DesktopIdRole          -> desktop entry id
  UserRole               -> the AppItem itself
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from PyQt6.QtCore import QAbstractListModel, QByteArray, QModelIndex, Qt

from .models import AppItem, AppsRole

__all__ = ["AppsModel"]

_log = logging.getLogger(__name__)


class AppsModel(QAbstractListModel):
    def __init__(self, items: Optional[Iterable[AppItem]] = None, parent=None):
        super().__init__(parent)
        self._items: List[AppItem] = list(items or [])

    # Required overrides
    def rowCount(self, parent: QModelIndex = QModelIndex()):  # type: ignore[override]
        if parent.isValid():
            return 0
        return len(self._items)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole):  # type: ignore[override]
        if not index.isValid() or not (0 <= index.row() < len(self._items)):
            return None
        item = self._items[index.row()]
        if role == Qt.ItemDataRole.DisplayRole:
            return item.display_name
        if role == AppsRole.TransliteratedRole:
            return item.transliterated
        if role == AppsRole.DDECategoryRole:
            return int(item.category)
        if role == AppsRole.InitialsRole:
            return item.joined_initials
        if role == AppsRole.DesktopIdRole:
            return item.desktop_id
        if role == Qt.ItemDataRole.UserRole:
            return item
        return None

    def roleNames(self) -> Dict[int, QByteArray]:  # type: ignore[override]
        names = dict(super().roleNames())
        names[int(AppsRole.TransliteratedRole)] = QByteArray(b"transliterated")
        names[int(AppsRole.DDECategoryRole)] = QByteArray(b"category")
        names[int(AppsRole.InitialsRole)] = QByteArray(b"initials")
        names[int(AppsRole.DesktopIdRole)] = QByteArray(b"desktopId")
        return names

    # Mutation API -------------------------------------------------
    def setItems(self, items: Iterable[AppItem]):
        self.beginResetModel()
        self._items = list(items)
        self.endResetModel()
        _log.debug("apps model reset with %d items", len(self._items))

    def appendItem(self, item: AppItem):
        row = len(self._items)
        self.beginInsertRows(QModelIndex(), row, row)
        self._items.append(item)
        self.endInsertRows()

    def removeItem(self, desktop_id: str) -> bool:
        row = self._row_of(desktop_id)
        if row is None:
            return False
        self.beginRemoveRows(QModelIndex(), row, row)
        del self._items[row]
        self.endRemoveRows()
        return True

    def updateItem(self, item: AppItem) -> bool:
        """Replace the item sharing ``item.desktop_id``; False if absent."""
        row = self._row_of(item.desktop_id)
        if row is None:
            return False
        self._items[row] = item
        idx = self.index(row, 0)
        self.dataChanged.emit(idx, idx, [])
        return True

    def itemAt(self, row: int) -> Optional[AppItem]:
        if 0 <= row < len(self._items):
            return self._items[row]
        return None

    def items(self) -> List[AppItem]:
        return list(self._items)

    # Helpers
    def _row_of(self, desktop_id: str) -> Optional[int]:
        for row, existing in enumerate(self._items):
            if existing.desktop_id == desktop_id:
                return row
        return None
