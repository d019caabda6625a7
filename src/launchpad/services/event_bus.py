"""EventBus core.

Lightweight synchronous publish/subscribe mechanism used by the launcher
proxies to announce category type and search changes to interested parties
outside Qt's signal graph (persistence, telemetry, headless tests).

Goals:
 - No Qt dependency
 - One failing handler doesn't break the publish cycle
 - One-shot (once) subscriptions and unsubscribe handles
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from threading import RLock
from time import perf_counter
from typing import Any, Dict, List, Protocol

__all__ = [
    "LauncherEvent",
    "Event",
    "EventBus",
    "EventHandler",
    "Subscription",
]


class LauncherEvent(str, Enum):
    CATEGORY_TYPE_CHANGED = "category_type_changed"
    FILTER_CHANGED = "filter_changed"


@dataclass
class Event:
    name: str  # matches LauncherEvent value or custom string
    payload: Any
    timestamp: float


class EventHandler(Protocol):  # noqa: D401 - protocol signature docs implicit
    def __call__(self, event: Event) -> None: ...  # pragma: no cover - structural


@dataclass(eq=False)
class Subscription:
    event: str
    handler: EventHandler
    once: bool
    active: bool = True

    def cancel(self) -> None:
        self.active = False


def _key(name: str | LauncherEvent) -> str:
    return name.value if isinstance(name, LauncherEvent) else name


class EventBus:
    """Synchronous event dispatcher.

    Handlers run while the lock is NOT held (subscribers are snapshotted
    first) so a handler may subscribe or unsubscribe without deadlock.
    Handler exceptions are collected in ``errors`` instead of propagating.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._subs: Dict[str, List[Subscription]] = {}
        self._errors: List[tuple[Event, BaseException]] = []

    # Subscription management ------------------------------------------
    def subscribe(
        self, name: str | LauncherEvent, handler: EventHandler, *, once: bool = False
    ) -> Subscription:
        sub = Subscription(event=_key(name), handler=handler, once=once)
        with self._lock:
            self._subs.setdefault(sub.event, []).append(sub)
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        with self._lock:
            bucket = self._subs.get(sub.event)
            if bucket and sub in bucket:
                bucket.remove(sub)
                if not bucket:
                    self._subs.pop(sub.event, None)
        sub.active = False

    # Publishing -------------------------------------------------------
    def publish(self, name: str | LauncherEvent, payload: Any = None) -> Event:
        key = _key(name)
        evt = Event(name=key, payload=payload, timestamp=perf_counter())
        with self._lock:
            subs = list(self._subs.get(key, ()))
        for sub in subs:
            if not sub.active:
                continue
            try:
                sub.handler(evt)
            except Exception as exc:  # noqa: BLE001 - isolate handler failures
                with self._lock:
                    self._errors.append((evt, exc))
            if sub.once:
                self.unsubscribe(sub)
        return evt

    # Introspection ----------------------------------------------------
    def subscriber_count(self, name: str | LauncherEvent) -> int:
        with self._lock:
            return len(self._subs.get(_key(name), ()))

    @property
    def errors(self) -> list[tuple[Event, BaseException]]:
        with self._lock:
            return list(self._errors)
