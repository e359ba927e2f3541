"""Unit tests for polyline to wall segment compilation."""

from __future__ import annotations

import math

import pytest

from pinball_editor.models.track import Point2D
from pinball_editor.services.geometry import compile_line, compile_lines, compile_segment


def test_compile_segment_matches_pair_geometry():
    a = Point2D(10.0, 20.0)
    b = Point2D(40.0, 60.0)

    segment = compile_segment(a, b, 16.0)

    assert segment is not None
    assert segment.length == pytest.approx(50.0)
    assert segment.angle == pytest.approx(math.atan2(40.0, 30.0))
    assert segment.center == Point2D(25.0, 40.0)
    assert segment.thickness == 16.0


@pytest.mark.parametrize(
    "b, expected_angle",
    [
        (Point2D(-5.0, 0.0), math.pi),
        (Point2D(0.0, -5.0), -math.pi / 2),
        (Point2D(0.0, 5.0), math.pi / 2),
    ],
)
def test_compile_segment_angle_follows_direction(b, expected_angle):
    segment = compile_segment(Point2D(0.0, 0.0), b, 4.0)
    assert segment is not None
    assert segment.angle == pytest.approx(expected_angle)


def test_compile_segment_drops_pairs_shorter_than_two_units():
    assert compile_segment(Point2D(0.0, 0.0), Point2D(1.0, 1.0), 16.0) is None
    assert compile_segment(Point2D(5.0, 5.0), Point2D(5.0, 5.0), 16.0) is None


def test_compile_segment_keeps_pair_at_exact_threshold():
    segment = compile_segment(Point2D(0.0, 0.0), Point2D(2.0, 0.0), 16.0)
    assert segment is not None
    assert segment.length == pytest.approx(2.0)


def test_compile_line_skips_degenerate_pairs_only():
    points = [Point2D(0.0, 0.0), Point2D(100.0, 0.0), Point2D(100.5, 0.5), Point2D(100.5, 50.0)]

    segments = compile_line(points, 10.0)

    assert len(segments) == 2
    assert segments[0].length == pytest.approx(100.0)
    assert segments[1].length == pytest.approx(49.5)


def test_compile_line_with_single_point_is_empty():
    assert compile_line([Point2D(3.0, 4.0)], 10.0) == []


def test_compile_lines_concatenates_in_order():
    lines = [
        (Point2D(0.0, 0.0), Point2D(10.0, 0.0), Point2D(10.0, 10.0)),
        (Point2D(50.0, 50.0), Point2D(60.0, 50.0)),
    ]

    segments = compile_lines(lines, 8.0)

    assert [segment.center for segment in segments] == [
        Point2D(5.0, 0.0),
        Point2D(10.0, 5.0),
        Point2D(55.0, 50.0),
    ]


def test_wall_corners_span_length_and_thickness():
    segment = compile_segment(Point2D(0.0, 0.0), Point2D(0.0, 20.0), 4.0)
    assert segment is not None

    corners = segment.corners()
    xs = [corner.x for corner in corners]
    ys = [corner.y for corner in corners]

    assert max(xs) - min(xs) == pytest.approx(4.0)
    assert max(ys) - min(ys) == pytest.approx(20.0)
