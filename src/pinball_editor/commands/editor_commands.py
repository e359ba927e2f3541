"""Editor commands and the controller that applies them to a session."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from pinball_editor.constants import BALL_LABEL, WALL_LABEL
from pinball_editor.errors import EditorError, MapFormatError
from pinball_editor.models.session import EditorSession
from pinball_editor.models.track import Point2D
from pinball_editor.services.ball import BallController
from pinball_editor.services.physics_world import CollisionEvent
from pinball_editor.services.starter_track import starter_lines
from pinball_editor.services.track_editor import TrackEditor
from pinball_editor.services.wall_sync import WallSynchronizer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddPoint:
    x: float
    y: float


@dataclass(frozen=True)
class RemoveLastPoint:
    pass


@dataclass(frozen=True)
class FinalizeDraft:
    pass


@dataclass(frozen=True)
class ClearDraft:
    pass


@dataclass(frozen=True)
class ClearAll:
    pass


@dataclass(frozen=True)
class SetThickness:
    value: float


@dataclass(frozen=True)
class SpawnBall:
    pass


@dataclass(frozen=True)
class ToggleWireframe:
    pass


@dataclass(frozen=True)
class ExportMap:
    """Export the map; ``clipboard`` copies the text when the surface offers one."""

    clipboard: Optional[Callable[[str], None]] = None


@dataclass(frozen=True)
class ImportMap:
    text: str


@dataclass(frozen=True)
class SimulationTick:
    pass


@dataclass(frozen=True)
class CollisionStarted:
    event: CollisionEvent


class EditorController:
    """Single entry point translating commands into state transitions.

    Presentation callbacks (pointer, keys, buttons) and engine callbacks
    (tick, collision) only build commands; all editing logic lives in the
    services the controller owns. Recoverable failures are written to the
    session log and never propagate to the caller.
    """

    def __init__(self, session: EditorSession) -> None:
        self.session = session
        self.walls = WallSynchronizer(session)
        self.track = TrackEditor(session, self.walls)
        self.ball = BallController(session)
        self._handlers: Dict[type, Callable[[Any], Any]] = {
            AddPoint: self._add_point,
            RemoveLastPoint: lambda command: self.track.remove_last_point(),
            FinalizeDraft: lambda command: self.track.finalize(),
            ClearDraft: lambda command: self.track.clear_draft(),
            ClearAll: lambda command: self.track.clear_all(),
            SetThickness: lambda command: self.track.set_thickness(command.value),
            SpawnBall: lambda command: self.ball.spawn(),
            ToggleWireframe: self._toggle_wireframe,
            ExportMap: self._export_map,
            ImportMap: self._import_map,
            SimulationTick: lambda command: self.ball.on_tick(),
            CollisionStarted: self._collision_started,
        }
        session.world.add_tick_listener(lambda: self.dispatch(SimulationTick()))
        session.world.add_collision_listener(lambda event: self.dispatch(CollisionStarted(event)))

    def dispatch(self, command: Any) -> Any:
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"Unsupported editor command: {command!r}")
        try:
            return handler(command)
        except MapFormatError as exc:
            self.session.log.log(f"Import error: {exc}")
        except EditorError as exc:
            self.session.log.log(str(exc))
        return None

    def start(self) -> None:
        """Seed the starter layout (when configured), drop the ball and announce readiness."""
        if self.session.config.seed_starter_track:
            self.track.replace_lines(starter_lines())
        else:
            self.walls.rebuild()
        self.ball.spawn()
        self.session.log.log("Editor ready")

    def advance(self, dt: Optional[float] = None) -> None:
        """Run one simulation step; tick and collision callbacks fire from here."""
        self.session.world.step(self.session.config.time_step if dt is None else dt)

    # Handlers ----------------------------------------------------------

    def _add_point(self, command: AddPoint) -> None:
        self.track.add_point(Point2D(float(command.x), float(command.y)))

    def _toggle_wireframe(self, command: ToggleWireframe) -> bool:
        self.session.wireframe = not self.session.wireframe
        self.session.log.log(f"Wireframe {'enabled' if self.session.wireframe else 'disabled'}")
        return self.session.wireframe

    def _export_map(self, command: ExportMap) -> str:
        text = self.track.export_text()
        if command.clipboard is None:
            self.session.log.log("Exported JSON (clipboard API unavailable)")
            return text
        try:
            command.clipboard(text)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Clipboard write failed: %s", exc)
            self.session.log.log("Exported JSON (clipboard denied)")
        else:
            self.session.log.log("Exported JSON and copied to clipboard")
        return text

    def _import_map(self, command: ImportMap) -> bool:
        self.track.import_text(command.text)
        return True

    def _collision_started(self, command: CollisionStarted) -> None:
        event = command.event
        if event.involves(BALL_LABEL, WALL_LABEL):
            self.session.log.log(
                f"Ball-wall collision near ({round(event.contact.x)}, {round(event.contact.y)})"
            )


__all__ = [
    "AddPoint",
    "ClearAll",
    "ClearDraft",
    "CollisionStarted",
    "EditorController",
    "ExportMap",
    "FinalizeDraft",
    "ImportMap",
    "RemoveLastPoint",
    "SetThickness",
    "SimulationTick",
    "SpawnBall",
    "ToggleWireframe",
]
