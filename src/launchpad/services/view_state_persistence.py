"""Launcher View State Persistence Service

Persists the launcher's grouping preference (category type) and last search
text in a small JSON file inside the user data dir (`base_dir`).

Failures are non-fatal; corrupted files are backed up with a suffix and the
defaults are returned.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict
import json
import logging
import os

from config.settings import DATA_DIR, VIEW_STATE_FILENAME
from ..category import CategoryType, parse_category_type
from ..errors import UnknownCategoryTypeError

__all__ = [
    "LauncherViewState",
    "ViewStatePersistenceService",
    "capture_view_state",
    "apply_view_state",
]

_log = logging.getLogger(__name__)

VIEW_STATE_VERSION = 1


@dataclass
class LauncherViewState:
    version: int = VIEW_STATE_VERSION
    category_type: CategoryType = CategoryType.ALPHABETARY
    search: str = ""

    def to_json_obj(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "category_type": self.category_type.value,
            "search": self.search,
        }

    @classmethod
    def from_json_obj(cls, obj: Dict[str, Any]) -> "LauncherViewState":
        if obj.get("version") != VIEW_STATE_VERSION:
            raise ValueError("version mismatch")
        return cls(
            version=obj["version"],
            category_type=parse_category_type(obj.get("category_type", "alphabetary")),
            search=str(obj.get("search", "")),
        )


class ViewStatePersistenceService:
    def __init__(self, base_dir: str = DATA_DIR):
        self.base_dir = base_dir
        os.makedirs(self.base_dir, exist_ok=True)

    def _path(self) -> str:
        return os.path.join(self.base_dir, VIEW_STATE_FILENAME)

    def load(self) -> LauncherViewState:
        path = self._path()
        if not os.path.exists(path):
            return LauncherViewState()
        try:
            with open(path, "r", encoding="utf-8") as f:
                obj = json.load(f)
            return LauncherViewState.from_json_obj(obj)
        except (OSError, ValueError, KeyError, AttributeError, UnknownCategoryTypeError) as exc:
            _log.warning("discarding unreadable view state %s: %s", path, exc)
            self._backup_corrupt(path)
            return LauncherViewState()

    def save(self, state: LauncherViewState) -> bool:
        path = self._path()
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(state.to_json_obj(), f, indent=2)
            return True
        except OSError as exc:
            _log.warning("could not save view state to %s: %s", path, exc)
            return False

    def _backup_corrupt(self, path: str):
        backup = path + f".corrupt.{datetime.now(timezone.utc).strftime('%Y%m%d%H%M%S')}"
        try:
            os.replace(path, backup)
        except OSError as exc:  # pragma: no cover
            _log.warning("could not back up corrupt view state %s: %s", path, exc)


def capture_view_state(proxy) -> LauncherViewState:
    """Snapshot a ``CategorizedSortProxyModel``'s grouping and search."""
    return LauncherViewState(category_type=proxy.categoryType(), search=proxy.filterPattern().text)


def apply_view_state(proxy, state: LauncherViewState):
    proxy.setCategoryType(state.category_type)
    proxy.setFilterPattern(state.search)
