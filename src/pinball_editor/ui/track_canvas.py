"""Graphics view that renders the play field, walls, track lines and ball."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from PySide6.QtCore import QPointF, QRectF, Qt, Signal
from PySide6.QtGui import QBrush, QColor, QPainter, QPen, QPolygonF
from PySide6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsItem,
    QGraphicsPolygonItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsView,
)

from pinball_editor.models.track import Line, Point2D
from pinball_editor.services.geometry import WallSegment
from pinball_editor.services.physics_world import BALL_STYLE, WALL_STYLE

BACKGROUND_COLOR = "#0a1420"
LINE_COLOR = "#3fd6a4"
DRAFT_COLOR = "#f29f5c"
DRAFT_POINT_COLOR = "#ffd6b2"
BOUNDS_COLOR = "#5d7a99"
DRAFT_POINT_RADIUS = 3.5


class TrackCanvas(QGraphicsView):
    """Field-sized scene; left clicks are reported in field coordinates."""

    pointAdded = Signal(float, float)

    def __init__(self, field_width: float, field_height: float, parent=None) -> None:
        super().__init__(parent)
        self._scene = QGraphicsScene(self)
        self.setScene(self._scene)

        self._field_width = float(field_width)
        self._field_height = float(field_height)
        self._static_items: list[QGraphicsItem] = []
        self._ball_item: Optional[QGraphicsEllipseItem] = None
        self._wireframe = False

        self._scene.setSceneRect(QRectF(0.0, 0.0, self._field_width, self._field_height))
        self.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        self.setBackgroundBrush(QColor(BACKGROUND_COLOR))
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

    # Public API ---------------------------------------------------------

    @property
    def field_size(self) -> tuple[float, float]:
        return self._field_width, self._field_height

    @property
    def wireframe(self) -> bool:
        return self._wireframe

    def set_wireframe(self, enabled: bool) -> None:
        self._wireframe = enabled

    def render_track(
        self,
        segments: Sequence[WallSegment],
        lines: Iterable[Line],
        draft: Sequence[Point2D],
    ) -> None:
        """Replace wall, line and draft overlays."""
        for item in self._static_items:
            self._scene.removeItem(item)
        self._static_items.clear()

        for segment in segments:
            self._add_wall_items(segment)

        line_pen = QPen(QColor(LINE_COLOR), 1.0)
        line_pen.setStyle(Qt.PenStyle.DashLine)
        for line in lines:
            self._add_polyline(line, line_pen, z_value=5)

        if draft:
            self._add_polyline(draft, QPen(QColor(DRAFT_COLOR), 2.0), z_value=6)
            point_brush = QBrush(QColor(DRAFT_POINT_COLOR))
            for point in draft:
                marker = QGraphicsEllipseItem(
                    point.x - DRAFT_POINT_RADIUS,
                    point.y - DRAFT_POINT_RADIUS,
                    DRAFT_POINT_RADIUS * 2,
                    DRAFT_POINT_RADIUS * 2,
                )
                marker.setPen(QPen(Qt.PenStyle.NoPen))
                marker.setBrush(point_brush)
                marker.setZValue(7)
                self._track_item(marker)

    def update_ball(self, position: Optional[Point2D], radius: float) -> None:
        """Move the ball marker, creating or hiding it as needed."""
        if position is None:
            if self._ball_item is not None:
                self._ball_item.setVisible(False)
            return
        if self._ball_item is None:
            self._ball_item = QGraphicsEllipseItem()
            self._ball_item.setZValue(10)
            self._scene.addItem(self._ball_item)
        self._ball_item.setRect(-radius, -radius, radius * 2, radius * 2)
        self._ball_item.setPos(position.x, position.y)
        self._ball_item.setPen(QPen(QColor(BALL_STYLE.stroke), BALL_STYLE.line_width))
        if self._wireframe:
            self._ball_item.setBrush(QBrush(Qt.BrushStyle.NoBrush))
        else:
            self._ball_item.setBrush(QBrush(QColor(BALL_STYLE.fill)))
        self._ball_item.setVisible(True)

    def fit_to_view(self) -> None:
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)

    # Event overrides ----------------------------------------------------

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self.fit_to_view()

    def mousePressEvent(self, event):  # type: ignore[override]
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return

        field_point = self._scene_to_field(self.mapToScene(event.position().toPoint()))
        if field_point is None:
            event.ignore()
            return
        self.pointAdded.emit(*field_point)
        event.accept()

    # Internal helpers ---------------------------------------------------

    def _scene_to_field(self, scene_pos: QPointF) -> Optional[tuple[float, float]]:
        """Round a scene position to whole field pixels; None outside the field."""
        x = float(round(scene_pos.x()))
        y = float(round(scene_pos.y()))
        if not (0.0 <= x <= self._field_width and 0.0 <= y <= self._field_height):
            return None
        return x, y

    def _track_item(self, item: QGraphicsItem) -> None:
        self._static_items.append(item)
        self._scene.addItem(item)

    def _add_wall_items(self, segment: WallSegment) -> None:
        polygon = QPolygonF([QPointF(corner.x, corner.y) for corner in segment.corners()])
        wall = QGraphicsPolygonItem(polygon)
        wall.setPen(QPen(QColor(WALL_STYLE.stroke), WALL_STYLE.line_width))
        wall.setZValue(3)
        if self._wireframe:
            wall.setBrush(QBrush(Qt.BrushStyle.NoBrush))
            bounds = QGraphicsRectItem(polygon.boundingRect())
            bounds_pen = QPen(QColor(BOUNDS_COLOR), 0.5)
            bounds_pen.setStyle(Qt.PenStyle.DotLine)
            bounds.setPen(bounds_pen)
            bounds.setZValue(2)
            self._track_item(bounds)
        else:
            wall.setBrush(QBrush(QColor(WALL_STYLE.fill)))
        self._track_item(wall)

    def _add_polyline(self, points: Sequence[Point2D], pen: QPen, z_value: float) -> None:
        for start, end in zip(points, points[1:]):
            item = self._scene.addLine(start.x, start.y, end.x, end.y, pen)
            item.setZValue(z_value)
            self._static_items.append(item)


__all__ = ["TrackCanvas"]
