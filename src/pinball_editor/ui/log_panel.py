"""Read-only panel listing session log entries, newest first."""

from __future__ import annotations

from typing import Iterable, Optional

from PySide6.QtWidgets import QListWidget, QVBoxLayout, QWidget

from pinball_editor.services.event_log import EventLog, LogEntry


class LogPanel(QWidget):
    """Mirrors an :class:`EventLog`."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._log: Optional[EventLog] = None

        self._entries_list = QListWidget(self)
        self._entries_list.setSelectionMode(QListWidget.SelectionMode.NoSelection)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.addWidget(self._entries_list)

    def attach(self, log: EventLog) -> None:
        if self._log is not None:
            self._log.remove_listener(self._on_entry)
        self._log = log
        log.add_listener(self._on_entry)
        self.set_lines(log.lines())

    def set_lines(self, lines: Iterable[str]) -> None:
        self._entries_list.clear()
        self._entries_list.addItems(list(lines))

    def lines(self) -> list[str]:
        return [self._entries_list.item(row).text() for row in range(self._entries_list.count())]

    def _on_entry(self, entry: LogEntry) -> None:
        self._entries_list.insertItem(0, entry.format())
        capacity = self._log.capacity if self._log is not None else 0
        while capacity and self._entries_list.count() > capacity:
            self._entries_list.takeItem(self._entries_list.count() - 1)


__all__ = ["LogPanel"]
