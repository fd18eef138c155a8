from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List


class TileMapEvent(Enum):
    LOADED = "loaded"
    UNLOADED = "unloaded"


class EventBus:
    """Synchronous event bus with an explicit ordered subscriber list per event."""

    def __init__(self) -> None:
        self._subscribers: Dict[TileMapEvent, List[Callable]] = {}
        self._front_counts: Dict[TileMapEvent, int] = {}

    def subscribe(self, event: TileMapEvent, fn: Callable, *, first: bool = False) -> None:
        """Register ``fn`` for ``event``.

        ``first=True`` places the subscriber ahead of every normal subscriber,
        including ones registered later. Front subscribers keep their own
        registration order among themselves.
        """
        subscribers = self._subscribers.setdefault(event, [])
        if first:
            position = self._front_counts.get(event, 0)
            subscribers.insert(position, fn)
            self._front_counts[event] = position + 1
        else:
            subscribers.append(fn)

    def subscribers(self, event: TileMapEvent) -> List[Callable]:
        return list(self._subscribers.get(event, []))

    def emit(self, event: TileMapEvent, *args) -> None:
        # Snapshot so a callback that subscribes during dispatch runs next time.
        for fn in list(self._subscribers.get(event, [])):
            fn(*args)
