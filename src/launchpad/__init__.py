"""Launchpad list models public API.

Curated, intentionally small surface for callers binding the launcher grid:
the item source, the categorized sort/filter proxy, and the pure ordering
and search helpers they are built on.

Avoid side-effect heavy imports here (no implicit QApplication creation).
"""

from __future__ import annotations

from .models import AppItem, AppsRole, DDECategory  # noqa: F401
from .apps_model import AppsModel  # noqa: F401
from .category import CategoryType  # noqa: F401
from .categorized_sort_proxy import CategorizedSortProxyModel  # noqa: F401
from .filtering import PatternSyntax, SearchPattern, accepts  # noqa: F401
from .sorting import is_less, sort_items  # noqa: F401
from .services.event_bus import EventBus, LauncherEvent  # noqa: F401

__all__ = [
    "AppItem",
    "AppsRole",
    "DDECategory",
    "AppsModel",
    "CategoryType",
    "CategorizedSortProxyModel",
    "PatternSyntax",
    "SearchPattern",
    "accepts",
    "is_less",
    "sort_items",
    "EventBus",
    "LauncherEvent",
]
