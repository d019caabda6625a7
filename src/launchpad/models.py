"""Launcher item records and item-data roles."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Tuple

from PyQt6.QtCore import Qt

from config.settings import INITIALS_SEPARATOR
from .errors import InvalidAppItemError

__all__ = ["AppsRole", "DDECategory", "AppItem"]


class AppsRole(IntEnum):
    """Custom item-data roles exposed by ``AppsModel``.

    ``Qt.ItemDataRole.DisplayRole`` carries the display name.
    """

    TransliteratedRole = Qt.ItemDataRole.UserRole.value + 1
    DDECategoryRole = Qt.ItemDataRole.UserRole.value + 2
    InitialsRole = Qt.ItemDataRole.UserRole.value + 3
    DesktopIdRole = Qt.ItemDataRole.UserRole.value + 4


class DDECategory(IntEnum):
    """Categorical code assigned to an application by the desktop environment.

    Values double as the sort order when grouping by category.
    """

    Internet = 0
    Chat = 1
    Music = 2
    Video = 3
    Graphics = 4
    Game = 5
    Office = 6
    Reading = 7
    Development = 8
    System = 9
    Others = 10


@dataclass(frozen=True)
class AppItem:
    desktop_id: str
    display_name: str
    transliterated: str = ""  # may be empty when no phonetic form exists
    category: DDECategory = DDECategory.Others
    # Abbreviation alternatives supplied by the caller, e.g. ("zq", "cq") for a polyphonic name
    initials: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not self.display_name:
            raise InvalidAppItemError(
                "display name must not be empty", context={"desktop_id": self.desktop_id}
            )
        # Accept lists from callers but keep the record hashable
        if not isinstance(self.initials, tuple):
            object.__setattr__(self, "initials", tuple(self.initials))

    @property
    def joined_initials(self) -> str:
        return INITIALS_SEPARATOR.join(self.initials)
