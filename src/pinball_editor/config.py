"""Editor settings loaded from an optional YAML file."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from pinball_editor import constants
from pinball_editor.errors import EditorConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "pinball_editor.yaml"


@dataclass(frozen=True)
class EditorConfig:
    """Field geometry and simulation parameters for one editing session."""

    field_width: float = constants.FIELD_WIDTH
    field_height: float = constants.FIELD_HEIGHT
    wall_thickness: float = constants.DEFAULT_WALL_THICKNESS
    min_thickness: int = constants.MIN_WALL_THICKNESS
    max_thickness: int = constants.MAX_WALL_THICKNESS
    ball_radius: float = constants.BALL_RADIUS
    out_of_bounds_margin: float = constants.BALL_OUT_MARGIN
    gravity: Tuple[float, float] = (constants.GRAVITY_X, constants.GRAVITY_Y)
    simulation_hz: int = constants.SIMULATION_HZ
    seed_starter_track: bool = True
    extra_fields: Dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def spawn_point(self) -> Tuple[float, float]:
        return self.field_width * constants.BALL_SPAWN_X_RATIO, constants.BALL_SPAWN_Y

    @property
    def time_step(self) -> float:
        return 1.0 / self.simulation_hz

    def as_dict(self) -> Dict[str, Any]:
        """Convert the settings back into a serializable mapping."""
        data: Dict[str, Any] = {
            "field_width": self.field_width,
            "field_height": self.field_height,
            "wall_thickness": self.wall_thickness,
            "min_thickness": self.min_thickness,
            "max_thickness": self.max_thickness,
            "ball_radius": self.ball_radius,
            "out_of_bounds_margin": self.out_of_bounds_margin,
            "gravity": list(self.gravity),
            "simulation_hz": self.simulation_hz,
            "seed_starter_track": self.seed_starter_track,
        }
        if self.extra_fields:
            data.update(self.extra_fields)
        return data


_KNOWN_KEYS = {f.name for f in fields(EditorConfig)} - {"extra_fields"}


def load_editor_config(config_path: Optional[Path] = None) -> EditorConfig:
    """Load and validate editor settings, falling back to defaults."""
    if config_path is None or not config_path.exists():
        if config_path is not None:
            logger.info("No settings file at %s, using defaults", config_path)
        return EditorConfig()

    with config_path.open("r", encoding="utf-8") as handle:
        try:
            parsed = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            raise EditorConfigError(f"Settings file is not valid YAML: {exc}") from exc

    if parsed is None:
        return EditorConfig()
    if not isinstance(parsed, dict):
        raise EditorConfigError("Settings YAML must be a mapping at the top level")

    defaults = EditorConfig()
    config = EditorConfig(
        field_width=_expect_positive(parsed, "field_width", defaults.field_width),
        field_height=_expect_positive(parsed, "field_height", defaults.field_height),
        wall_thickness=_expect_positive(parsed, "wall_thickness", defaults.wall_thickness),
        min_thickness=_expect_int(parsed, "min_thickness", defaults.min_thickness),
        max_thickness=_expect_int(parsed, "max_thickness", defaults.max_thickness),
        ball_radius=_expect_positive(parsed, "ball_radius", defaults.ball_radius),
        out_of_bounds_margin=_expect_float(parsed, "out_of_bounds_margin", defaults.out_of_bounds_margin),
        gravity=_expect_pair(parsed, "gravity", defaults.gravity),
        simulation_hz=_expect_int(parsed, "simulation_hz", defaults.simulation_hz),
        seed_starter_track=_expect_bool(parsed, "seed_starter_track", defaults.seed_starter_track),
        extra_fields={key: value for key, value in parsed.items() if key not in _KNOWN_KEYS},
    )

    if config.min_thickness <= 0 or config.min_thickness > config.max_thickness:
        raise EditorConfigError("min_thickness must be positive and not above max_thickness")
    if config.simulation_hz <= 0:
        raise EditorConfigError("simulation_hz must be positive")
    if config.extra_fields:
        logger.warning(
            "Settings contain unknown keys that are ignored: %s",
            ", ".join(sorted(config.extra_fields)),
        )
    return config


def dump_editor_config(config: EditorConfig, destination: Optional[Path] = None) -> str:
    """Serialize settings to YAML, optionally writing to disk."""
    yaml_text = yaml.safe_dump(config.as_dict(), sort_keys=False)

    if destination is not None:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(yaml_text, encoding="utf-8")

    return yaml_text


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _expect_float(mapping: Dict[str, Any], key: str, default: float) -> float:
    if key not in mapping:
        return float(default)
    value = mapping[key]
    if not _is_number(value):
        raise EditorConfigError(f"Field '{key}' must be a number")
    return float(value)


def _expect_positive(mapping: Dict[str, Any], key: str, default: float) -> float:
    value = _expect_float(mapping, key, default)
    if value <= 0:
        raise EditorConfigError(f"Field '{key}' must be positive")
    return value


def _expect_int(mapping: Dict[str, Any], key: str, default: int) -> int:
    if key not in mapping:
        return default
    value = mapping[key]
    if not isinstance(value, int) or isinstance(value, bool):
        raise EditorConfigError(f"Field '{key}' must be an integer")
    return value


def _expect_bool(mapping: Dict[str, Any], key: str, default: bool) -> bool:
    if key not in mapping:
        return default
    value = mapping[key]
    if not isinstance(value, bool):
        raise EditorConfigError(f"Field '{key}' must be true or false")
    return value


def _expect_pair(mapping: Dict[str, Any], key: str, default: Tuple[float, float]) -> Tuple[float, float]:
    if key not in mapping:
        return default
    value = mapping[key]
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise EditorConfigError(f"Field '{key}' must be a 2-long array [x, y]")
    if not all(_is_number(item) for item in value):
        raise EditorConfigError(f"Field '{key}' values must be numeric")
    return float(value[0]), float(value[1])


__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "EditorConfig",
    "load_editor_config",
    "dump_editor_config",
]
