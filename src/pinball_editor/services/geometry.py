"""Compile track polylines into rigid wall segment descriptors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from pinball_editor.constants import MIN_SEGMENT_LENGTH
from pinball_editor.models.track import Point2D


@dataclass(frozen=True)
class WallSegment:
    """Rectangle centred between two points and rotated along them."""

    center: Point2D
    length: float
    angle: float  # radians, atan2 of the segment direction
    thickness: float

    def corners(self) -> List[Point2D]:
        """Rectangle outline in field coordinates, counter-clockwise."""
        half_length = self.length * 0.5
        half_thickness = self.thickness * 0.5
        cos_a = math.cos(self.angle)
        sin_a = math.sin(self.angle)
        result = []
        for local_x, local_y in (
            (-half_length, -half_thickness),
            (half_length, -half_thickness),
            (half_length, half_thickness),
            (-half_length, half_thickness),
        ):
            result.append(
                Point2D(
                    self.center.x + local_x * cos_a - local_y * sin_a,
                    self.center.y + local_x * sin_a + local_y * cos_a,
                )
            )
        return result


def compile_segment(a: Point2D, b: Point2D, thickness: float) -> Optional[WallSegment]:
    """Return the wall for the pair ``a -> b`` or ``None`` when the pair is degenerate."""
    dx = b.x - a.x
    dy = b.y - a.y
    length = math.hypot(dx, dy)
    if length < MIN_SEGMENT_LENGTH:
        return None
    return WallSegment(
        center=Point2D((a.x + b.x) * 0.5, (a.y + b.y) * 0.5),
        length=length,
        angle=math.atan2(dy, dx),
        thickness=thickness,
    )


def compile_line(points: Sequence[Point2D], thickness: float) -> List[WallSegment]:
    """Compile every consecutive pair of a polyline; N points yield at most N-1 walls."""
    segments: List[WallSegment] = []
    for i in range(len(points) - 1):
        segment = compile_segment(points[i], points[i + 1], thickness)
        if segment is not None:
            segments.append(segment)
    return segments


def compile_lines(lines: Iterable[Sequence[Point2D]], thickness: float) -> List[WallSegment]:
    """Compile all lines in order into one flat segment list."""
    segments: List[WallSegment] = []
    for line in lines:
        segments.extend(compile_line(line, thickness))
    return segments


__all__ = ["WallSegment", "compile_segment", "compile_line", "compile_lines"]
