"""Event log — what recent loader calls scanned, imported and classified.

Keeps the most recent ``LoaderEvent`` objects (oldest dropped first) and
answers the questions a caller debugging a routes directory asks: which
modules were loaded, which shape each one matched, and how many routes each
shape produced.

Thread Safety:
    All methods are protected by a ``threading.Lock``; one log may be shared
    by concurrent ``load()`` calls.

"""

import threading
from collections import Counter, deque

from dirroutes._types import ModuleShape
from dirroutes.observability.events import LoaderEvent, ModuleClassified, RoutesAggregated


class EventLog:
    """Bounded store of loader events.

    Args:
        max_events: Maximum number of events to retain.

    """

    __slots__ = ("_events", "_lock")

    def __init__(self, max_events: int = 10_000) -> None:
        self._events: deque[LoaderEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    def append(self, event: LoaderEvent) -> None:
        """Record an event in the log."""
        with self._lock:
            self._events.append(event)

    def query(
        self,
        *,
        event_type: type | None = None,
        name: str | None = None,
        shape: ModuleShape | None = None,
        limit: int = 100,
    ) -> list[LoaderEvent]:
        """Return matching events, most recent first.

        Args:
            event_type: Only events of this type.
            name: Only events about the module with this name.
            shape: Only ``ModuleClassified`` events with this shape.
            limit: Maximum number of events to return.

        """
        with self._lock:
            events = list(self._events)

        results: list[LoaderEvent] = []
        for event in reversed(events):
            if len(results) >= limit:
                break
            if event_type is not None and not isinstance(event, event_type):
                continue
            if name is not None and getattr(event, "name", None) != name:
                continue
            if shape is not None and (
                not isinstance(event, ModuleClassified) or event.shape != shape
            ):
                continue
            results.append(event)
        return results

    def routes_by_shape(self) -> dict[ModuleShape, int]:
        """Total routes contributed per module shape across retained events."""
        totals: Counter[ModuleShape] = Counter()
        for event in self.query(event_type=ModuleClassified, limit=len(self)):
            totals[event.shape] += event.routes  # type: ignore[union-attr]
        return dict(totals)

    def last_load(self, path: str | None = None) -> RoutesAggregated | None:
        """The summary of the most recent completed call, optionally for *path*."""
        for event in self.query(event_type=RoutesAggregated, limit=len(self)):
            if path is None or event.path == path:  # type: ignore[union-attr]
                return event  # type: ignore[return-value]
        return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)
