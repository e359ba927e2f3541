"""Main window definition for the pinball track editor."""

from __future__ import annotations

import logging
from typing import Any, Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QAction, QGuiApplication
from PySide6.QtWidgets import (
    QApplication,
    QDockWidget,
    QHBoxLayout,
    QLineEdit,
    QMainWindow,
    QPlainTextEdit,
    QStatusBar,
    QTextEdit,
    QWidget,
)

from pinball_editor.commands import (
    AddPoint,
    ClearAll,
    ClearDraft,
    EditorController,
    ExportMap,
    FinalizeDraft,
    ImportMap,
    RemoveLastPoint,
    SetThickness,
    SpawnBall,
    ToggleWireframe,
)
from pinball_editor.config import EditorConfig
from pinball_editor.constants import DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_WIDTH
from pinball_editor.models.session import EditorSession
from pinball_editor.ui.controls_panel import ControlsPanel
from pinball_editor.ui.log_panel import LogPanel
from pinball_editor.ui.track_canvas import TrackCanvas

logger = logging.getLogger(__name__)

_TEXT_INPUT_WIDGETS = (QLineEdit, QPlainTextEdit, QTextEdit)


class MainWindow(QMainWindow):
    """Top-level window hosting the field canvas, controls and session log."""

    def __init__(self, config: Optional[EditorConfig] = None, *, autostart: bool = True) -> None:
        super().__init__()
        self.setWindowTitle("Pinball Track Editor")
        self.resize(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)

        self._session = EditorSession.create(config)
        self._controller = EditorController(self._session)
        self._canvas = TrackCanvas(self._session.config.field_width, self._session.config.field_height, self)
        self._controls = ControlsPanel(
            self,
            min_thickness=self._session.config.min_thickness,
            max_thickness=self._session.config.max_thickness,
        )
        self._log_panel = LogPanel(self)
        self._log_panel.attach(self._session.log)
        self._simulation_timer = QTimer(self)
        self._simulation_timer.setInterval(max(1, int(round(self._session.config.time_step * 1000))))
        self._simulation_timer.timeout.connect(self._on_simulation_tick)

        self._init_status_bar()
        self._init_central_widget()
        self._create_actions()
        self._create_menus()
        self._create_docks()
        self._connect_signals()

        if autostart:
            self.start()

    @property
    def controller(self) -> EditorController:
        return self._controller

    @property
    def session(self) -> EditorSession:
        return self._session

    def start(self) -> None:
        """Seed the session and begin stepping the simulation."""
        self._controller.start()
        self._refresh_view()
        self._simulation_timer.start()

    def _init_status_bar(self) -> None:
        status = QStatusBar(self)
        status.showMessage("Ready")
        self.setStatusBar(status)

    def _init_central_widget(self) -> None:
        container = QWidget(self)
        layout = QHBoxLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._canvas)
        self.setCentralWidget(container)

    def _create_actions(self) -> None:
        self._action_exit = QAction("E&xit", self)
        self._action_exit.setShortcut("Ctrl+Q")
        self._action_exit.triggered.connect(self.close)

        self._action_export = QAction("&Export Map JSON", self)
        self._action_export.setShortcut("Ctrl+E")
        self._action_export.triggered.connect(self._export_map)

        self._action_import = QAction("&Import Map JSON", self)
        self._action_import.setShortcut("Ctrl+I")
        self._action_import.triggered.connect(self._import_map)

        self._action_spawn = QAction("&Spawn Ball", self)
        self._action_spawn.setShortcut("Ctrl+B")
        self._action_spawn.triggered.connect(lambda: self._dispatch(SpawnBall()))

        self._action_clear_draft = QAction("Clear &Draft", self)
        self._action_clear_draft.triggered.connect(lambda: self._dispatch(ClearDraft()))

        self._action_clear_all = QAction("Clear &Map", self)
        self._action_clear_all.triggered.connect(lambda: self._dispatch(ClearAll()))

        self._action_wireframe = QAction("&Wireframe", self)
        self._action_wireframe.setCheckable(True)
        self._action_wireframe.triggered.connect(self._toggle_wireframe)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()
        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self._action_export)
        file_menu.addAction(self._action_import)
        file_menu.addSeparator()
        file_menu.addAction(self._action_exit)

        edit_menu = menu_bar.addMenu("&Edit")
        edit_menu.addAction(self._action_clear_draft)
        edit_menu.addAction(self._action_clear_all)

        simulation_menu = menu_bar.addMenu("&Simulation")
        simulation_menu.addAction(self._action_spawn)
        simulation_menu.addAction(self._action_wireframe)

    def _create_docks(self) -> None:
        controls_dock = QDockWidget("Controls", self)
        controls_dock.setObjectName("controlsDock")
        controls_dock.setAllowedAreas(Qt.DockWidgetArea.RightDockWidgetArea | Qt.DockWidgetArea.LeftDockWidgetArea)
        controls_dock.setWidget(self._controls)
        controls_dock.setMinimumWidth(320)
        controls_dock.setFeatures(QDockWidget.DockWidgetFeature.DockWidgetMovable)
        self.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, controls_dock)

        log_dock = QDockWidget("Log", self)
        log_dock.setObjectName("logDock")
        log_dock.setAllowedAreas(Qt.DockWidgetArea.RightDockWidgetArea | Qt.DockWidgetArea.LeftDockWidgetArea)
        log_dock.setWidget(self._log_panel)
        log_dock.setMinimumWidth(320)
        log_dock.setFeatures(QDockWidget.DockWidgetFeature.DockWidgetMovable)
        self.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, log_dock)

    def _connect_signals(self) -> None:
        self._canvas.pointAdded.connect(lambda x, y: self._dispatch(AddPoint(x, y)))
        self._controls.thicknessChanged.connect(lambda value: self._dispatch(SetThickness(value)))
        self._controls.spawnBallRequested.connect(lambda: self._dispatch(SpawnBall()))
        self._controls.wireframeToggleRequested.connect(self._toggle_wireframe)
        self._controls.clearDraftRequested.connect(lambda: self._dispatch(ClearDraft()))
        self._controls.clearAllRequested.connect(lambda: self._dispatch(ClearAll()))
        self._controls.exportRequested.connect(self._export_map)
        self._controls.importRequested.connect(self._import_map)
        self._controller.walls.add_thickness_listener(self._controls.set_thickness)

    # Command plumbing ---------------------------------------------------

    def _dispatch(self, command: Any) -> Any:
        result = self._controller.dispatch(command)
        self._refresh_view()
        return result

    def _toggle_wireframe(self) -> None:
        self._dispatch(ToggleWireframe())

    def _export_map(self) -> None:
        clipboard = QGuiApplication.clipboard()
        text = self._dispatch(ExportMap(clipboard=clipboard.setText if clipboard is not None else None))
        if text is not None:
            self._controls.set_map_text(text)

    def _import_map(self) -> None:
        self._dispatch(ImportMap(self._controls.map_text()))

    def handle_key(self, key: int) -> bool:
        """Map Enter/Backspace to draft commands unless a text input has focus."""
        if self._text_input_focused():
            return False
        if key in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
            self._dispatch(FinalizeDraft())
            return True
        if key == Qt.Key.Key_Backspace:
            self._dispatch(RemoveLastPoint())
            return True
        return False

    def _text_input_focused(self) -> bool:
        return isinstance(QApplication.focusWidget(), _TEXT_INPUT_WIDGETS)

    def keyPressEvent(self, event):  # type: ignore[override]
        if self.handle_key(event.key()):
            event.accept()
            return
        super().keyPressEvent(event)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._simulation_timer.stop()
        super().closeEvent(event)

    # View refresh -------------------------------------------------------

    def _on_simulation_tick(self) -> None:
        self._controller.advance()
        self._update_ball_view()

    def _refresh_view(self) -> None:
        session = self._session
        self._canvas.set_wireframe(session.wireframe)
        self._action_wireframe.setChecked(session.wireframe)
        self._controls.set_wireframe(session.wireframe)
        self._controls.set_thickness(session.track.thickness)
        self._canvas.render_track(self._controller.walls.segments, session.track.lines, session.track.draft)
        self._update_ball_view()
        status = (
            f"Lines: {len(session.track.lines)} · Draft points: {len(session.track.draft)} · "
            f"Wall segments: {self._controller.walls.segment_count} · "
            f"Thickness: {session.track.thickness:g}"
        )
        if not self._controls.thickness_in_slider_range(session.track.thickness):
            config = session.config
            status += f" (outside slider range {config.min_thickness}-{config.max_thickness})"
        self.statusBar().showMessage(status)

    def _update_ball_view(self) -> None:
        ball = self._session.ball
        self._canvas.update_ball(ball.position if ball is not None else None, self._session.config.ball_radius)


__all__ = ["MainWindow"]
