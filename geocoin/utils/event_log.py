"""Thread-safe bounded feed of gameplay events exposed via the API."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass

from geocoin.core.enums import EventCategory


@dataclass(frozen=True, slots=True)
class GameEvent:
    """A single gameplay event for the API event feed."""

    seq: int
    category: EventCategory
    message: str
    tokens: tuple[str, ...] = ()  # labels of tokens involved in this event


class EventLog:
    """Bounded event log. Writers record; readers copy a slice.

    The oldest events are dropped once ``limit`` is reached. Sequence numbers
    keep increasing across drops and ``clear()``.
    """

    __slots__ = ("_buffer", "_lock", "_next_seq")

    def __init__(self, limit: int = 500) -> None:
        self._buffer: deque[GameEvent] = deque(maxlen=limit)
        self._lock = threading.Lock()
        self._next_seq = 1

    def record(self, category: EventCategory, message: str, tokens: tuple[str, ...] = ()) -> GameEvent:
        with self._lock:
            event = GameEvent(self._next_seq, category, message, tokens)
            self._next_seq += 1
            self._buffer.append(event)
        return event

    def since(self, seq: int) -> list[GameEvent]:
        """Return all retained events with seq >= *seq*."""
        with self._lock:
            return [e for e in self._buffer if e.seq >= seq]

    def latest(self, count: int = 50) -> list[GameEvent]:
        """Return the *count* most recent events."""
        with self._lock:
            items = list(self._buffer)
        return items[-count:] if count > 0 else []

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)
