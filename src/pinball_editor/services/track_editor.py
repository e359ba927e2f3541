"""Draft/line state machine driving wall regeneration."""

from __future__ import annotations

import logging
import math
from enum import Enum, auto
from typing import Iterable, Optional

from pinball_editor.errors import TrackValidationError
from pinball_editor.models.session import EditorSession
from pinball_editor.models.track import Line, Point2D, make_line
from pinball_editor.services.map_serializer import ImportedMap, dumps_map, import_map
from pinball_editor.services.wall_sync import WallSynchronizer

logger = logging.getLogger(__name__)


class TrackMode(Enum):
    IDLE = auto()
    DRAFTING = auto()


class TrackEditor:
    """Owns the draft and the finalized lines of a session.

    Every transition that changes the finalized lines runs exactly one wall
    rebuild before returning. Rejected transitions raise
    :class:`TrackValidationError` (or :class:`MapFormatError` for imports)
    without touching any state.
    """

    def __init__(self, session: EditorSession, walls: WallSynchronizer) -> None:
        self._session = session
        self._walls = walls

    @property
    def mode(self) -> TrackMode:
        return TrackMode.DRAFTING if self._session.track.draft else TrackMode.IDLE

    @property
    def draft(self) -> list[Point2D]:
        return list(self._session.track.draft)

    @property
    def lines(self) -> list[Line]:
        return list(self._session.track.lines)

    @property
    def thickness(self) -> float:
        return self._session.track.thickness

    # Draft edits -------------------------------------------------------

    def add_point(self, point: Point2D) -> None:
        self._session.track.draft.append(point)
        self._session.log.log(f"Draft point added: ({_fmt(point.x)}, {_fmt(point.y)})")

    def remove_last_point(self) -> Optional[Point2D]:
        """Pop the newest draft point; returns ``None`` when the draft is empty."""
        draft = self._session.track.draft
        if not draft:
            return None
        removed = draft.pop()
        self._session.log.log(f"Draft point removed: ({_fmt(removed.x)}, {_fmt(removed.y)})")
        return removed

    def clear_draft(self) -> None:
        self._session.track.draft.clear()
        self._session.log.log("Draft cleared")

    # Structural edits --------------------------------------------------

    def finalize(self) -> Line:
        track = self._session.track
        if len(track.draft) < 2:
            raise TrackValidationError("Need at least 2 points to finalize a line")

        line = make_line(track.draft)
        track.lines.append(line)
        track.draft.clear()
        self._walls.rebuild(track.thickness)
        self._session.log.log(f"Line finalized. Total lines: {len(track.lines)}")
        return line

    def clear_all(self) -> None:
        self._session.track.clear()
        self._walls.rebuild(self._session.track.thickness)
        self._session.log.log("All map lines cleared")

    def set_thickness(self, value: float) -> None:
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value) or value <= 0:
            raise TrackValidationError(f"Wall thickness must be a positive finite number, got {value!r}")
        self._walls.rebuild(float(value))
        self._session.log.log(f"Wall thickness set: {_fmt(value)}")

    def replace_lines(self, lines: Iterable[Line], thickness: Optional[float] = None) -> None:
        """Install a complete line set, drop the draft and rebuild once."""
        self._session.track.replace_lines(lines)
        self._walls.rebuild(self._session.track.thickness if thickness is None else thickness)

    # Map text ----------------------------------------------------------

    def export_text(self) -> str:
        return dumps_map(self._session.track)

    def import_text(self, text: str) -> ImportedMap:
        """Validate ``text`` fully, then replace lines and thickness in one step."""
        imported = import_map(text, default_thickness=self._session.config.wall_thickness)
        logger.debug("Applying imported map: %d lines, thickness %g", len(imported.lines), imported.thickness)
        self.replace_lines(imported.lines, imported.thickness)
        self._session.log.log(f"Imported map: {len(imported.lines)} lines")
        return imported


def _fmt(value: float) -> str:
    """Render whole numbers without a trailing ``.0``."""
    return str(int(value)) if float(value).is_integer() else f"{value:g}"


__all__ = ["TrackMode", "TrackEditor"]
