"""Service layer: geometry, physics synchronization, ball lifecycle and map I/O."""

__all__ = [
    "ball",
    "event_log",
    "geometry",
    "map_serializer",
    "physics_world",
    "starter_track",
    "track_editor",
    "wall_sync",
]
