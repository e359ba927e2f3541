"""Keep the physics world's wall bodies in step with the finalized track lines."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from pinball_editor.constants import WALL_ELASTICITY, WALL_FRICTION
from pinball_editor.models.session import EditorSession
from pinball_editor.services.geometry import WallSegment, compile_lines
from pinball_editor.services.physics_world import WALL_STYLE, PhysicsBody

logger = logging.getLogger(__name__)

ThicknessListener = Callable[[float], None]


class WallSynchronizer:
    """Rebuilds every wall body from scratch whenever the track geometry changes.

    There is no incremental diffing: a rebuild removes all current walls,
    recompiles all lines at the requested thickness and adds the new set. Edits
    are rare next to simulation steps, so the world never holds a stale or
    partial wall set and no per-segment bookkeeping is needed.
    """

    def __init__(self, session: EditorSession) -> None:
        self._session = session
        self._segments: List[WallSegment] = []
        self._thickness_listeners: List[ThicknessListener] = []
        self.rebuild_count = 0

    @property
    def segments(self) -> List[WallSegment]:
        return list(self._segments)

    @property
    def segment_count(self) -> int:
        return len(self._session.wall_bodies)

    @property
    def thickness(self) -> float:
        return self._session.track.thickness

    def add_thickness_listener(self, listener: ThicknessListener) -> None:
        self._thickness_listeners.append(listener)

    def rebuild(self, thickness: Optional[float] = None) -> int:
        """Replace all wall bodies and return the new segment count."""
        session = self._session
        target = session.track.thickness if thickness is None else float(thickness)

        if session.wall_bodies:
            session.world.remove_bodies(session.wall_bodies)
            session.wall_bodies = []

        segments = compile_lines(session.track.lines, target)
        logger.debug("Compiled %d segments from %d lines at thickness %g", len(segments), len(session.track.lines), target)
        bodies = [self._segment_to_body(segment) for segment in segments]
        if bodies:
            session.world.add_bodies(bodies)

        session.wall_bodies = bodies
        session.track.thickness = target
        self._segments = segments
        self.rebuild_count += 1

        for listener in list(self._thickness_listeners):
            listener(target)
        session.log.log(f"Wall rebuild: {len(bodies)} segments")
        return len(bodies)

    def _segment_to_body(self, segment: WallSegment) -> PhysicsBody:
        world = self._session.world
        body = world.create_static_rectangle(
            segment.center,
            segment.length,
            segment.thickness,
            WALL_STYLE,
            friction=WALL_FRICTION,
            elasticity=WALL_ELASTICITY,
        )
        world.set_rotation(body, segment.angle)
        return body


__all__ = ["WallSynchronizer"]
