"""Service layer exports.

Responsibilities:
 - EventBus publish/subscribe core
 - Launcher view state persistence
"""

from .event_bus import EventBus, LauncherEvent  # noqa: F401
from .view_state_persistence import (  # noqa: F401
    LauncherViewState,
    ViewStatePersistenceService,
)

__all__ = [
    "EventBus",
    "LauncherEvent",
    "LauncherViewState",
    "ViewStatePersistenceService",
]
