"""Editor settings YAML loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from pinball_editor.config import EditorConfig, dump_editor_config, load_editor_config
from pinball_editor.errors import EditorConfigError


def test_missing_file_yields_defaults(tmp_path: Path):
    config = load_editor_config(tmp_path / "absent.yaml")

    assert config == EditorConfig()
    assert config.spawn_point == (104.0, 40.0)
    assert config.time_step == pytest.approx(1 / 60)


def test_load_overrides_and_preserves_unknown_keys(tmp_path: Path):
    path = tmp_path / "pinball_editor.yaml"
    path.write_text(
        "field_width: 600\n"
        "wall_thickness: 10\n"
        "gravity: [0, 900]\n"
        "seed_starter_track: false\n"
        "theme: dark\n",
        encoding="utf-8",
    )

    config = load_editor_config(path)

    assert config.field_width == 600.0
    assert config.wall_thickness == 10.0
    assert config.gravity == (0.0, 900.0)
    assert config.seed_starter_track is False
    assert config.field_height == 900.0
    assert config.extra_fields == {"theme": "dark"}


def test_dump_then_load_round_trip(tmp_path: Path):
    original = EditorConfig(field_width=640.0, ball_radius=8.0, simulation_hz=120)
    path = tmp_path / "settings.yaml"

    dump_editor_config(original, destination=path)

    assert load_editor_config(path) == original


@pytest.mark.parametrize(
    "text",
    [
        "- not\n- a mapping\n",
        "field_width: wide\n",
        "field_height: -1\n",
        "gravity: [0]\n",
        "simulation_hz: 0\n",
        "min_thickness: 80\n",
        "seed_starter_track: yes please\n",
        "field_width: [unclosed\n",
    ],
)
def test_invalid_settings_raise(tmp_path: Path, text: str):
    path = tmp_path / "bad.yaml"
    path.write_text(text, encoding="utf-8")

    with pytest.raises(EditorConfigError):
        load_editor_config(path)
