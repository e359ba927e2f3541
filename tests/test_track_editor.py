"""Track state machine transitions and their wall side effects."""

from __future__ import annotations

import json

import pytest

from pinball_editor.constants import WALL_LABEL
from pinball_editor.errors import MapFormatError, TrackValidationError
from pinball_editor.models.track import Point2D, TrackState, make_line
from pinball_editor.services.track_editor import TrackEditor, TrackMode
from pinball_editor.services.wall_sync import WallSynchronizer


@pytest.fixture
def walls(session):
    return WallSynchronizer(session)


@pytest.fixture
def editor(session, walls):
    return TrackEditor(session, walls)


def test_add_point_enters_drafting(editor, session):
    assert editor.mode is TrackMode.IDLE

    editor.add_point(Point2D(10.0, 20.0))

    assert editor.mode is TrackMode.DRAFTING
    assert editor.draft == [Point2D(10.0, 20.0)]
    assert session.log.messages()[0] == "Draft point added: (10, 20)"


def test_remove_last_point_returns_to_idle(editor):
    editor.add_point(Point2D(1.0, 1.0))

    removed = editor.remove_last_point()

    assert removed == Point2D(1.0, 1.0)
    assert editor.mode is TrackMode.IDLE


def test_remove_last_point_on_empty_draft_is_noop(editor, session, walls):
    before = len(session.log)

    assert editor.remove_last_point() is None
    assert editor.remove_last_point() is None

    assert editor.draft == []
    assert len(session.log) == before
    assert walls.rebuild_count == 0


def test_finalize_with_single_point_is_rejected(editor, session, walls):
    editor.add_point(Point2D(5.0, 5.0))

    with pytest.raises(TrackValidationError, match="at least 2 points"):
        editor.finalize()

    assert editor.draft == [Point2D(5.0, 5.0)]
    assert editor.lines == []
    assert walls.rebuild_count == 0


def test_finalize_moves_draft_into_lines_and_rebuilds_once(editor, session, walls):
    editor.add_point(Point2D(0.0, 0.0))
    editor.add_point(Point2D(60.0, 0.0))
    editor.add_point(Point2D(60.0, 80.0))

    line = editor.finalize()

    assert line == (Point2D(0.0, 0.0), Point2D(60.0, 0.0), Point2D(60.0, 80.0))
    assert editor.lines == [line]
    assert editor.draft == []
    assert editor.mode is TrackMode.IDLE
    assert walls.rebuild_count == 1
    assert session.world.count(WALL_LABEL) == 2
    assert session.log.messages()[0] == "Line finalized. Total lines: 1"


def test_finalized_line_is_not_affected_by_later_draft_edits(editor):
    editor.add_point(Point2D(0.0, 0.0))
    editor.add_point(Point2D(10.0, 0.0))
    line = editor.finalize()

    editor.add_point(Point2D(99.0, 99.0))

    assert editor.lines == [line]
    assert len(line) == 2


def test_clear_draft_keeps_lines(editor, walls):
    editor.add_point(Point2D(0.0, 0.0))
    editor.add_point(Point2D(10.0, 0.0))
    editor.finalize()
    editor.add_point(Point2D(50.0, 50.0))

    editor.clear_draft()

    assert editor.draft == []
    assert len(editor.lines) == 1
    assert walls.rebuild_count == 1


def test_clear_all_removes_lines_and_walls(editor, session, walls):
    editor.add_point(Point2D(0.0, 0.0))
    editor.add_point(Point2D(10.0, 0.0))
    editor.finalize()
    editor.add_point(Point2D(3.0, 3.0))

    editor.clear_all()

    assert editor.lines == []
    assert editor.draft == []
    assert walls.rebuild_count == 2
    assert session.world.count(WALL_LABEL) == 0


def test_set_thickness_rebuilds_existing_walls(editor, session, walls):
    editor.add_point(Point2D(0.0, 0.0))
    editor.add_point(Point2D(10.0, 0.0))
    editor.finalize()

    editor.set_thickness(24)

    assert editor.thickness == 24.0
    assert walls.rebuild_count == 2
    assert [segment.thickness for segment in walls.segments] == [24.0]
    assert session.log.messages()[0] == "Wall thickness set: 24"


@pytest.mark.parametrize("value", [0, -3, True, "12", float("nan"), float("inf"), float("-inf")])
def test_set_thickness_rejects_non_positive_values(editor, walls, value):
    with pytest.raises(TrackValidationError):
        editor.set_thickness(value)
    assert walls.rebuild_count == 0


def test_import_text_replaces_state_and_rebuilds_once(editor, session, walls):
    editor.add_point(Point2D(1.0, 1.0))

    imported = editor.import_text('{"thickness": 9, "lines": [[{"x": 0, "y": 0}, {"x": 30, "y": 40}]]}')

    assert imported.thickness == 9.0
    assert editor.lines == [(Point2D(0.0, 0.0), Point2D(30.0, 40.0))]
    assert editor.draft == []
    assert editor.thickness == 9.0
    assert walls.rebuild_count == 1
    assert session.log.messages()[0] == "Imported map: 1 lines"


def test_failed_import_leaves_state_untouched(editor, session, walls):
    editor.add_point(Point2D(0.0, 0.0))
    editor.add_point(Point2D(10.0, 0.0))
    editor.finalize()
    editor.add_point(Point2D(7.0, 7.0))
    lines_before = editor.lines

    with pytest.raises(MapFormatError):
        editor.import_text('{"lines": [[{"x": 0, "y": 0}, {"x": 1, "y": 1}], [{"x": 0, "y": 0}]]}')

    assert editor.lines == lines_before
    assert editor.draft == [Point2D(7.0, 7.0)]
    assert walls.rebuild_count == 1
    assert session.world.count(WALL_LABEL) == 1


@pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity", "1e400"])
def test_non_finite_import_keeps_walls_and_export_valid(editor, session, walls, literal):
    editor.add_point(Point2D(0.0, 0.0))
    editor.add_point(Point2D(10.0, 0.0))
    editor.finalize()

    with pytest.raises(MapFormatError):
        editor.import_text('{"lines": [[{"x": %s, "y": 0}, {"x": 5, "y": 5}]]}' % literal)

    assert walls.rebuild_count == 1
    assert [body.position for body in session.wall_bodies] == [Point2D(5.0, 0.0)]
    exported = json.loads(editor.export_text(), parse_constant=lambda name: pytest.fail(name))
    assert exported["lines"] == [[{"x": 0.0, "y": 0.0}, {"x": 10.0, "y": 0.0}]]


def test_track_state_replace_lines_swaps_list_and_drops_draft():
    track = TrackState(thickness=16.0)
    previous = track.lines
    track.draft.append(Point2D(1.0, 1.0))

    track.replace_lines([[Point2D(0.0, 0.0), Point2D(4.0, 0.0)]])

    assert previous == []
    assert track.lines == [make_line([Point2D(0.0, 0.0), Point2D(4.0, 0.0)])]
    assert track.draft == []
