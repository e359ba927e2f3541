"""Thin adapter over a pymunk space exposing only what the editor needs."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Tuple

import pymunk

from pinball_editor.constants import BALL_LABEL, WALL_LABEL
from pinball_editor.models.track import Point2D

logger = logging.getLogger(__name__)

# pymunk dispatches collision callbacks on integer collision types.
COLLISION_TYPES: Dict[str, int] = {
    BALL_LABEL: 1,
    WALL_LABEL: 2,
}


@dataclass(frozen=True)
class BodyStyle:
    """Render hints carried alongside a body."""

    fill: str
    stroke: str
    line_width: float = 1.0


WALL_STYLE = BodyStyle(fill="#355474", stroke="#95c4f2")
BALL_STYLE = BodyStyle(fill="#f6b26b", stroke="#ffd8a8")


@dataclass(frozen=True)
class MaterialProperties:
    """Surface and mass properties of a dynamic body."""

    elasticity: float
    friction: float
    air_drag: float
    density: float


@dataclass(eq=False)
class PhysicsBody:
    """A pymunk body with its single shape and role label."""

    body: pymunk.Body
    shape: pymunk.Shape
    label: str
    style: BodyStyle

    @property
    def position(self) -> Point2D:
        x, y = self.body.position
        return Point2D(float(x), float(y))

    @property
    def angle(self) -> float:
        return float(self.body.angle)

    @property
    def is_static(self) -> bool:
        return self.body.body_type == pymunk.Body.STATIC


@dataclass(frozen=True)
class CollisionEvent:
    """Start of contact between two labelled bodies."""

    first: PhysicsBody
    second: PhysicsBody
    contact: Point2D

    @property
    def labels(self) -> Tuple[str, str]:
        return self.first.label, self.second.label

    def involves(self, label_a: str, label_b: str) -> bool:
        return {label_a, label_b} == set(self.labels)


TickListener = Callable[[], None]
CollisionListener = Callable[[CollisionEvent], None]


class PhysicsWorld:
    """Owns the pymunk space and tracks which labelled bodies live in it."""

    def __init__(self, gravity: Tuple[float, float]) -> None:
        self.space = pymunk.Space()
        self.space.gravity = gravity
        self._bodies: Dict[PhysicsBody, None] = {}
        self._by_shape: Dict[pymunk.Shape, PhysicsBody] = {}
        self._tick_listeners: List[TickListener] = []
        self._collision_listeners: List[CollisionListener] = []
        self.space.on_collision(
            collision_type_a=COLLISION_TYPES[BALL_LABEL],
            collision_type_b=COLLISION_TYPES[WALL_LABEL],
            begin=self._on_collision_begin,
        )

    # Body factories ----------------------------------------------------

    @staticmethod
    def create_static_rectangle(
        center: Point2D,
        length: float,
        thickness: float,
        style: BodyStyle = WALL_STYLE,
        *,
        friction: float = 0.0,
        elasticity: float = 0.0,
        label: str = WALL_LABEL,
    ) -> PhysicsBody:
        """Build an axis-aligned static box; rotate it with :meth:`set_rotation`."""
        body = pymunk.Body(body_type=pymunk.Body.STATIC)
        body.position = (center.x, center.y)
        shape = pymunk.Poly.create_box(body, (length, thickness))
        shape.friction = friction
        shape.elasticity = elasticity
        shape.collision_type = COLLISION_TYPES.get(label, 0)
        return PhysicsBody(body=body, shape=shape, label=label, style=style)

    @staticmethod
    def create_dynamic_circle(
        center: Point2D,
        radius: float,
        material: MaterialProperties,
        style: BodyStyle = BALL_STYLE,
        *,
        label: str = BALL_LABEL,
    ) -> PhysicsBody:
        mass = material.density * math.pi * radius * radius
        body = pymunk.Body(mass, pymunk.moment_for_circle(mass, 0, radius))
        body.position = (center.x, center.y)
        body.velocity_func = _air_drag_velocity(material.air_drag)
        shape = pymunk.Circle(body, radius)
        shape.friction = material.friction
        shape.elasticity = material.elasticity
        shape.collision_type = COLLISION_TYPES.get(label, 0)
        return PhysicsBody(body=body, shape=shape, label=label, style=style)

    @staticmethod
    def set_rotation(physics_body: PhysicsBody, angle: float) -> None:
        body = physics_body.body
        body.angle = angle
        # Static shapes are not re-indexed automatically once in a space.
        if body.space is not None and body.body_type == pymunk.Body.STATIC:
            body.space.reindex_shapes_for_body(body)

    # World membership --------------------------------------------------

    def add_bodies(self, bodies: Iterable[PhysicsBody]) -> None:
        for physics_body in bodies:
            if physics_body in self._bodies:
                continue
            self.space.add(physics_body.body, physics_body.shape)
            self._bodies[physics_body] = None
            self._by_shape[physics_body.shape] = physics_body

    def remove_bodies(self, bodies: Iterable[PhysicsBody]) -> None:
        for physics_body in bodies:
            if physics_body not in self._bodies:
                continue
            self.space.remove(physics_body.shape, physics_body.body)
            del self._bodies[physics_body]
            del self._by_shape[physics_body.shape]

    def contains(self, physics_body: PhysicsBody) -> bool:
        return physics_body in self._bodies

    def bodies(self, label: Optional[str] = None) -> List[PhysicsBody]:
        """Bodies currently in the world, optionally filtered by role label."""
        return [body for body in self._bodies if label is None or body.label == label]

    def count(self, label: Optional[str] = None) -> int:
        return len(self.bodies(label))

    # Simulation --------------------------------------------------------

    def add_tick_listener(self, listener: TickListener) -> None:
        self._tick_listeners.append(listener)

    def add_collision_listener(self, listener: CollisionListener) -> None:
        self._collision_listeners.append(listener)

    def step(self, dt: float) -> None:
        """Notify tick listeners, then advance the space by ``dt`` seconds."""
        for listener in list(self._tick_listeners):
            listener()
        self.space.step(dt)

    def _on_collision_begin(self, arbiter: pymunk.Arbiter, space: pymunk.Space, data) -> None:
        shape_a, shape_b = arbiter.shapes
        first = self._by_shape.get(shape_a)
        second = self._by_shape.get(shape_b)
        if first is None or second is None:
            return
        points = arbiter.contact_point_set.points
        if points:
            contact_x, contact_y = points[0].point_a
            contact = Point2D(float(contact_x), float(contact_y))
        else:
            contact = first.position
        event = CollisionEvent(first=first, second=second, contact=contact)
        for listener in list(self._collision_listeners):
            listener(event)


def create_world(gravity: Tuple[float, float]) -> PhysicsWorld:
    """Create an empty world with the given gravity vector (px/s^2)."""
    logger.debug("Creating physics world with gravity %s", gravity)
    return PhysicsWorld(gravity)


def _air_drag_velocity(air_drag: float):
    """Velocity integrator applying per-step linear damping on top of gravity."""

    def update_velocity(body: pymunk.Body, gravity, damping: float, dt: float) -> None:
        pymunk.Body.update_velocity(body, gravity, damping, dt)
        body.velocity = body.velocity * (1.0 - air_drag)

    return update_velocity


__all__ = [
    "BALL_STYLE",
    "BodyStyle",
    "COLLISION_TYPES",
    "CollisionEvent",
    "MaterialProperties",
    "PhysicsBody",
    "PhysicsWorld",
    "WALL_STYLE",
    "create_world",
]
