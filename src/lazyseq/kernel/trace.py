"""Runtime trace infrastructure for pull adapters and tee groups.

Trace is observation only: it never changes what a sequence produces.
Adapters record one event per lifecycle step when a Trace is passed in.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class Event:
    """A single recorded lifecycle event.

    Attributes:
        action: What happened (e.g. "pull.next", "tee.fetch")
        id: Sequential event id within its Trace
        source: Name of the adapter that recorded it
        timestamp: Wall-clock time of recording
        info: Additional context
    """

    action: str
    id: int = 0
    source: str | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)


class Trace:
    """Append-only recorder of adapter events.

    Performance guarantees:
    - Trace disabled → single flag check overhead
    - Event append is O(1)
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Event] = []
        self._next_id: int = 0

    def record(
        self,
        action: str,
        source: str | None = None,
        info: dict[str, Any] | None = None,
    ) -> int | None:
        """Record an event.

        Args:
            action: What happened
            source: Name of the recording adapter
            info: Additional context

        Returns:
            Event ID, or None if tracing disabled
        """
        if not self.enabled:
            return None

        event_id = self._next_id
        self._next_id += 1
        self._events.append(
            Event(
                action=action,
                id=event_id,
                source=source,
                timestamp=datetime.now(UTC),
                info=info or {},
            )
        )
        return event_id

    def get_events(self) -> list[Event]:
        """Get all recorded events."""
        return list(self._events)

    def find_all(self, **kwargs: Any) -> list[Event]:
        """Find all events matching the given criteria.

        Args:
            **kwargs: Criteria to match against event fields or info keys
                (e.g., action="tee.fetch")

        Returns:
            Matching events in recording order
        """
        return [
            e
            for e in self._events
            if all(getattr(e, k, None) == v or e.info.get(k) == v for k, v in kwargs.items())
        ]

    def count(self, action: str) -> int:
        """Number of events recorded for an action."""
        return sum(1 for e in self._events if e.action == action)

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        """Clear all events (for reuse)."""
        self._events.clear()
        self._next_id = 0
