"""Editor command variants and their dispatcher."""

from .editor_commands import (
    AddPoint,
    ClearAll,
    ClearDraft,
    CollisionStarted,
    EditorController,
    ExportMap,
    FinalizeDraft,
    ImportMap,
    RemoveLastPoint,
    SetThickness,
    SimulationTick,
    SpawnBall,
    ToggleWireframe,
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
