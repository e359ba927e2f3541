"""Timestamped, newest-first session log shown in the editor's log panel."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Deque, List, Optional

from pinball_editor.constants import LOG_CAPACITY

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogEntry:
    """A single human-readable event."""

    timestamp: datetime
    message: str

    def format(self) -> str:
        return f"[{self.timestamp:%H:%M:%S}] {self.message}"


class EventLog:
    """Bounded log buffer that notifies listeners on every new entry.

    Entries are kept newest first. Once ``capacity`` is reached the oldest
    entry is dropped. Every message is mirrored to the package logger so the
    console carries the same history as the log panel.
    """

    def __init__(
        self,
        capacity: int = LOG_CAPACITY,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        if capacity <= 0:
            raise ValueError("Log capacity must be positive")
        self._entries: Deque[LogEntry] = deque(maxlen=capacity)
        self._clock = clock or datetime.now
        self._listeners: List[Callable[[LogEntry], None]] = []

    @property
    def capacity(self) -> int:
        return self._entries.maxlen or 0

    def log(self, message: str) -> LogEntry:
        entry = LogEntry(timestamp=self._clock(), message=message)
        self._entries.appendleft(entry)
        logger.info(message)
        for listener in list(self._listeners):
            listener(entry)
        return entry

    def entries(self) -> List[LogEntry]:
        return list(self._entries)

    def lines(self) -> List[str]:
        """Formatted entries, newest first."""
        return [entry.format() for entry in self._entries]

    def messages(self) -> List[str]:
        return [entry.message for entry in self._entries]

    def add_listener(self, listener: Callable[[LogEntry], None]) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[LogEntry], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["LogEntry", "EventLog"]
