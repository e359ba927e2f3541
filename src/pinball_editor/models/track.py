"""Track data structures: points, finalized lines and the draft."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from pinball_editor.constants import DEFAULT_WALL_THICKNESS


@dataclass(frozen=True)
class Point2D:
    """Cartesian point in field coordinates (pixels, y down)."""

    x: float
    y: float


# Finalized polylines are immutable; order defines the connected segments.
Line = Tuple[Point2D, ...]


def make_line(points: Iterable[Point2D]) -> Line:
    """Freeze a point sequence into a line record."""
    return tuple(points)


@dataclass
class TrackState:
    """Finalized lines, the draft under construction and the shared wall thickness."""

    lines: List[Line] = field(default_factory=list)
    draft: List[Point2D] = field(default_factory=list)
    thickness: float = DEFAULT_WALL_THICKNESS

    @property
    def is_drafting(self) -> bool:
        return bool(self.draft)

    def replace_lines(self, lines: Iterable[Line]) -> None:
        """Swap in a new finalized line list and drop the draft."""
        self.lines = [make_line(line) for line in lines]
        self.draft.clear()

    def clear(self) -> None:
        """Remove the draft and every finalized line."""
        self.lines.clear()
        self.draft.clear()


__all__ = ["Point2D", "Line", "make_line", "TrackState"]
