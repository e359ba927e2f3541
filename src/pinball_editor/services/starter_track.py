"""Default layout loaded into a fresh session."""

from __future__ import annotations

from typing import List

from pinball_editor.models.track import Line, Point2D, make_line


def _line(*coords: tuple[float, float]) -> Line:
    return make_line(Point2D(float(x), float(y)) for x, y in coords)


STARTER_LINES: List[Line] = [
    _line((90, 20), (90, 860)),  # left rail
    _line((240, 20), (240, 860)),  # right rail
    _line((90, 220), (170, 300), (170, 520), (240, 590)),  # deflector
    _line((90, 640), (160, 700)),
]


def starter_lines() -> List[Line]:
    return list(STARTER_LINES)


__all__ = ["STARTER_LINES", "starter_lines"]
