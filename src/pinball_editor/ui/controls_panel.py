"""Side panel with wall thickness, session actions and the map JSON text."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QSignalBlocker, Qt, Signal
from PySide6.QtGui import QFontDatabase
from PySide6.QtWidgets import (
    QFormLayout,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPlainTextEdit,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from pinball_editor.constants import MAX_WALL_THICKNESS, MIN_WALL_THICKNESS


class ControlsPanel(QWidget):
    """Buttons and inputs that turn into editor commands."""

    thicknessChanged = Signal(int)
    spawnBallRequested = Signal()
    wireframeToggleRequested = Signal()
    clearDraftRequested = Signal()
    clearAllRequested = Signal()
    exportRequested = Signal()
    importRequested = Signal()

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        min_thickness: int = MIN_WALL_THICKNESS,
        max_thickness: int = MAX_WALL_THICKNESS,
    ) -> None:
        super().__init__(parent)

        self._thickness_slider = QSlider(Qt.Orientation.Horizontal, self)
        self._thickness_slider.setRange(min_thickness, max_thickness)
        self._thickness_value = QLabel(self)
        self._thickness_value.setMinimumWidth(28)

        self._spawn_button = QPushButton("Spawn Ball", self)
        self._wireframe_button = QPushButton(self)
        self._clear_draft_button = QPushButton("Clear Draft", self)
        self._clear_all_button = QPushButton("Clear Map", self)
        self._export_button = QPushButton("Export JSON", self)
        self._import_button = QPushButton("Import JSON", self)

        self._map_text = QPlainTextEdit(self)
        self._map_text.setPlaceholderText('{"thickness": 16, "lines": [[{"x": 0, "y": 0}, {"x": 40, "y": 40}]]}')
        self._map_text.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))

        hint = QLabel("Click to add points · Enter finalizes · Backspace removes last point", self)
        hint.setWordWrap(True)

        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(8, 8, 8, 8)
        root_layout.setSpacing(12)
        root_layout.addWidget(hint)
        root_layout.addWidget(self._build_walls_group())
        root_layout.addWidget(self._build_actions_group())
        root_layout.addWidget(self._build_map_group(), stretch=1)

        self._connect_signals()
        self.set_wireframe(False)

    def _build_walls_group(self) -> QWidget:
        group = QGroupBox("Walls", self)
        row = QHBoxLayout()
        row.addWidget(self._thickness_slider, stretch=1)
        row.addWidget(self._thickness_value)
        form = QFormLayout(group)
        form.setLabelAlignment(Qt.AlignmentFlag.AlignRight)
        form.addRow("Thickness", row)
        return group

    def _build_actions_group(self) -> QWidget:
        group = QGroupBox("Session", self)
        grid = QGridLayout(group)
        grid.addWidget(self._spawn_button, 0, 0)
        grid.addWidget(self._wireframe_button, 0, 1)
        grid.addWidget(self._clear_draft_button, 1, 0)
        grid.addWidget(self._clear_all_button, 1, 1)
        return group

    def _build_map_group(self) -> QWidget:
        group = QGroupBox("Map JSON", self)
        layout = QVBoxLayout(group)
        buttons = QHBoxLayout()
        buttons.addWidget(self._export_button)
        buttons.addWidget(self._import_button)
        layout.addLayout(buttons)
        layout.addWidget(self._map_text, stretch=1)
        return group

    def _connect_signals(self) -> None:
        self._thickness_slider.valueChanged.connect(self._on_slider_changed)
        self._spawn_button.clicked.connect(self.spawnBallRequested.emit)
        self._wireframe_button.clicked.connect(self.wireframeToggleRequested.emit)
        self._clear_draft_button.clicked.connect(self.clearDraftRequested.emit)
        self._clear_all_button.clicked.connect(self.clearAllRequested.emit)
        self._export_button.clicked.connect(self.exportRequested.emit)
        self._import_button.clicked.connect(self.importRequested.emit)

    @property
    def map_text_edit(self) -> QPlainTextEdit:
        return self._map_text

    def thickness(self) -> int:
        return self._thickness_slider.value()

    def set_thickness(self, value: float) -> None:
        """Reflect the current thickness without emitting ``thicknessChanged``."""
        rounded = int(round(value))
        blocker = QSignalBlocker(self._thickness_slider)
        self._thickness_slider.setValue(rounded)
        del blocker
        self._thickness_value.setText(str(rounded))

    def thickness_in_slider_range(self, value: float) -> bool:
        return self._thickness_slider.minimum() <= round(value) <= self._thickness_slider.maximum()

    def set_wireframe(self, enabled: bool) -> None:
        self._wireframe_button.setText(f"Wireframe: {'ON' if enabled else 'OFF'}")

    def map_text(self) -> str:
        return self._map_text.toPlainText()

    def set_map_text(self, text: str) -> None:
        self._map_text.setPlainText(text)

    def _on_slider_changed(self, value: int) -> None:
        self._thickness_value.setText(str(value))
        self.thicknessChanged.emit(value)


__all__ = ["ControlsPanel"]
