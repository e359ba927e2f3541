"""Owned context object for one editing session."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Optional

from pinball_editor.config import EditorConfig
from pinball_editor.models.track import TrackState
from pinball_editor.services.event_log import EventLog
from pinball_editor.services.physics_world import PhysicsBody, PhysicsWorld, create_world


@dataclass
class EditorSession:
    """Everything one editing session mutates: track, world, ball and log."""

    config: EditorConfig
    world: PhysicsWorld
    track: TrackState
    log: EventLog
    ball: Optional[PhysicsBody] = None
    wireframe: bool = False
    wall_bodies: list[PhysicsBody] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        config: Optional[EditorConfig] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> "EditorSession":
        """Return a fresh session with an empty track and world."""
        config = config or EditorConfig()
        return cls(
            config=config,
            world=create_world(config.gravity),
            track=TrackState(thickness=config.wall_thickness),
            log=EventLog(clock=clock),
        )


__all__ = ["EditorSession"]
