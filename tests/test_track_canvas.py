"""Canvas coordinate mapping and overlay rendering."""

from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QPointF
from PySide6.QtWidgets import QApplication

from pinball_editor.models.track import Point2D
from pinball_editor.services.geometry import compile_lines
from pinball_editor.ui.track_canvas import TrackCanvas

app = QApplication.instance() or QApplication([])


def test_scene_to_field_rounds_to_whole_pixels():
    canvas = TrackCanvas(520, 900)

    assert canvas._scene_to_field(QPointF(12.4, 99.6)) == (12.0, 100.0)


def test_scene_to_field_rejects_points_outside_field():
    canvas = TrackCanvas(520, 900)

    assert canvas._scene_to_field(QPointF(-3.0, 10.0)) is None
    assert canvas._scene_to_field(QPointF(10.0, 950.0)) is None


def test_render_track_replaces_previous_items():
    canvas = TrackCanvas(520, 900)
    lines = [(Point2D(0.0, 0.0), Point2D(100.0, 0.0), Point2D(100.0, 100.0))]
    segments = compile_lines(lines, 16.0)

    canvas.render_track(segments, lines, [Point2D(5.0, 5.0), Point2D(50.0, 5.0)])
    first_count = len(canvas.scene().items())
    canvas.render_track(segments, lines, [Point2D(5.0, 5.0), Point2D(50.0, 5.0)])

    # 2 walls + 2 dashed line pieces + 1 draft piece + 2 draft markers
    assert first_count == 7
    assert len(canvas.scene().items()) == first_count


def test_wireframe_adds_bounds_per_wall():
    canvas = TrackCanvas(520, 900)
    lines = [(Point2D(0.0, 0.0), Point2D(100.0, 50.0))]
    canvas.set_wireframe(True)

    canvas.render_track(compile_lines(lines, 16.0), lines, [])

    # wall + bounds + dashed line
    assert len(canvas.scene().items()) == 3


def test_update_ball_moves_single_marker():
    canvas = TrackCanvas(520, 900)

    canvas.update_ball(Point2D(10.0, 20.0), 11.0)
    canvas.update_ball(Point2D(30.0, 40.0), 11.0)

    items = canvas.scene().items()
    assert len(items) == 1
    assert items[0].pos() == QPointF(30.0, 40.0)

    canvas.update_ball(None, 11.0)
    assert not items[0].isVisible()
