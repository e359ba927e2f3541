"""Lifecycle of the single dynamic ball: spawn, watch, respawn."""

from __future__ import annotations

import logging
from typing import Optional

from pinball_editor import constants
from pinball_editor.models.session import EditorSession
from pinball_editor.models.track import Point2D
from pinball_editor.services.physics_world import BALL_STYLE, MaterialProperties, PhysicsBody

logger = logging.getLogger(__name__)

BALL_MATERIAL = MaterialProperties(
    elasticity=constants.BALL_ELASTICITY,
    friction=constants.BALL_FRICTION,
    air_drag=constants.BALL_AIR_DRAG,
    density=constants.BALL_DENSITY,
)


class BallController:
    """Keeps at most one ball in the world and respawns it when it leaves the field."""

    def __init__(self, session: EditorSession, material: MaterialProperties = BALL_MATERIAL) -> None:
        self._session = session
        self._material = material

    @property
    def ball(self) -> Optional[PhysicsBody]:
        return self._session.ball

    @property
    def has_ball(self) -> bool:
        return self._session.ball is not None

    @property
    def spawn_point(self) -> Point2D:
        x, y = self._session.config.spawn_point
        return Point2D(x, y)

    def spawn(self) -> PhysicsBody:
        """Destroy any current ball and drop a fresh one at the spawn point."""
        self._remove_current()
        world = self._session.world
        ball = world.create_dynamic_circle(
            self.spawn_point,
            self._session.config.ball_radius,
            self._material,
            BALL_STYLE,
        )
        world.add_bodies([ball])
        self._session.ball = ball
        self._session.log.log("Ball spawned")
        return ball

    def despawn(self) -> None:
        self._remove_current()

    def is_out_of_bounds(self, position: Point2D) -> bool:
        config = self._session.config
        margin = config.out_of_bounds_margin
        out_x = position.x < -margin or position.x > config.field_width + margin
        out_y = position.y < -margin or position.y > config.field_height + margin
        return out_x or out_y

    def on_tick(self) -> bool:
        """Per-step watchdog; returns True when the ball was respawned."""
        ball = self._session.ball
        if ball is None:
            return False
        if not self.is_out_of_bounds(ball.position):
            return False
        logger.debug("Ball left the field at (%.1f, %.1f)", ball.position.x, ball.position.y)
        self._session.log.log("Ball out of bounds -> reset")
        self.spawn()
        return True

    def _remove_current(self) -> None:
        ball = self._session.ball
        if ball is not None:
            self._session.world.remove_bodies([ball])
            self._session.ball = None


__all__ = ["BALL_MATERIAL", "BallController"]
