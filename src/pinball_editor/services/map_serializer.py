"""JSON export and validated import of track maps."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Any, Dict, List

from pinball_editor.constants import DEFAULT_WALL_THICKNESS
from pinball_editor.errors import MapFormatError
from pinball_editor.models.track import Line, Point2D, TrackState, make_line


@dataclass(frozen=True)
class ImportedMap:
    """Validated, normalized result of parsing map text."""

    lines: List[Line]
    thickness: float


def export_map(track: TrackState) -> Dict[str, Any]:
    """Project thickness and finalized lines into a JSON-compatible mapping.

    The draft is never part of the exported state.
    """
    return {
        "thickness": track.thickness,
        "lines": [[{"x": point.x, "y": point.y} for point in line] for line in track.lines],
    }


def dumps_map(track: TrackState) -> str:
    return json.dumps(export_map(track), indent=2, allow_nan=False)


def import_map(text: str, default_thickness: float = DEFAULT_WALL_THICKNESS) -> ImportedMap:
    """Parse and validate map text; raises :class:`MapFormatError` on any defect.

    Validation completes before anything is returned, so callers either get
    the whole line list or nothing.
    """
    try:
        parsed = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise MapFormatError(f"Invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})") from exc

    if not isinstance(parsed, dict) or not isinstance(parsed.get("lines"), list):
        raise MapFormatError("JSON must have lines[]")

    lines = [_parse_line(raw, index) for index, raw in enumerate(parsed["lines"])]
    return ImportedMap(lines=lines, thickness=_effective_thickness(parsed.get("thickness"), default_thickness))


def _parse_line(raw: Any, line_index: int) -> Line:
    if not isinstance(raw, list) or len(raw) < 2:
        raise MapFormatError(f"line {line_index + 1} needs at least 2 points")
    return make_line(_parse_point(point, line_index, point_index) for point_index, point in enumerate(raw))


def _parse_point(raw: Any, line_index: int, point_index: int) -> Point2D:
    if not isinstance(raw, dict):
        raise MapFormatError(f"line {line_index + 1}, point {point_index + 1} invalid")
    x, y = raw.get("x"), raw.get("y")
    if not (_is_finite_number(x) and _is_finite_number(y)):
        raise MapFormatError(f"line {line_index + 1}, point {point_index + 1} invalid")
    # Extra keys on the point are dropped.
    return Point2D(float(x), float(y))


def _effective_thickness(raw: Any, default: float) -> float:
    if _is_finite_number(raw) and raw > 0:
        return float(raw)
    return float(default)


def _reject_constant(name: str) -> Any:
    raise MapFormatError(f"Invalid JSON: {name} is not a number")


def _is_finite_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # 1e400 decodes to inf and huge integer literals overflow float.
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


__all__ = ["ImportedMap", "export_map", "dumps_map", "import_map"]
