"""Configuration models and loaders."""
from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Callable, Dict, Tuple

from matrixplay.physics.dots import PhysicsParams
from matrixplay.rendering.shapes import DotShape

Color = Tuple[int, int, int]

DEFAULT_PALETTE: Tuple[Color, ...] = (
    (255, 0, 0),
    (255, 160, 0),
    (255, 235, 60),
    (0, 220, 90),
    (0, 200, 255),
    (80, 110, 255),
    (200, 80, 255),
    (255, 255, 255),
)


class ConfigError(ValueError):
    """Raised when a configuration file holds an unusable value."""


@dataclass(frozen=True)
class WindowConfig:
    size: Tuple[int, int] = (800, 600)
    fullscreen: bool = False
    title: str = "MatrixPlay"
    target_fps: int = 60
    background_color: Color = (0, 0, 0)


@dataclass(frozen=True)
class GridConfig:
    spacing: float = 20.0


@dataclass(frozen=True)
class RenderConfig:
    shape: DotShape = DotShape.CIRCLE
    color: Color = (255, 0, 0)
    palette: Tuple[Color, ...] = DEFAULT_PALETTE


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"
    log_file: str = ""
    fps_log_interval: float = 1.0


@dataclass(frozen=True)
class AppConfig:
    window: WindowConfig = field(default_factory=WindowConfig)
    grid: GridConfig = field(default_factory=GridConfig)
    physics: PhysicsParams = field(default_factory=PhysicsParams)
    render: RenderConfig = field(default_factory=RenderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _load_json(path: Path) -> Dict[str, Any]:
    return json.loads(path.read_text())


def _section(payload: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = payload.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"Section '{name}' must be an object, got {type(section).__name__}")
    return section


def _number(value: Any, key: str, kind: Callable[[Any], Any] = float) -> Any:
    if isinstance(value, bool):
        raise ConfigError(f"'{key}' must be a number, got {value!r}")
    try:
        return kind(value)
    except (TypeError, ValueError):
        raise ConfigError(f"'{key}' must be a number, got {value!r}") from None


def _parse_color(value: Any, key: str) -> Color:
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise ConfigError(f"'{key}' must be a list of three integers, got {value!r}")
    color = tuple(_number(channel, key, int) for channel in value)
    if any(channel < 0 or channel > 255 for channel in color):
        raise ConfigError(f"'{key}' channels must lie in 0..255, got {value!r}")
    return color  # type: ignore[return-value]


def _parse_shape(value: Any) -> DotShape:
    try:
        return DotShape(str(value).lower())
    except ValueError:
        choices = ", ".join(shape.value for shape in DotShape)
        raise ConfigError(f"Unknown dot shape '{value}'. Must be one of: {choices}") from None


def _require_positive(value: float, key: str) -> float:
    if value <= 0:
        raise ConfigError(f"'{key}' must be positive, got {value!r}")
    return value


def _load_window(section: Dict[str, Any]) -> WindowConfig:
    defaults = WindowConfig()
    size = section.get("size", defaults.size)
    if not isinstance(size, (list, tuple)) or len(size) != 2:
        raise ConfigError(f"'window.size' must be [width, height], got {size!r}")
    return WindowConfig(
        size=(_number(size[0], "window.size", int), _number(size[1], "window.size", int)),
        fullscreen=bool(section.get("fullscreen", defaults.fullscreen)),
        title=str(section.get("title", defaults.title)),
        target_fps=_require_positive(
            _number(section.get("target_fps", defaults.target_fps), "window.target_fps", int), "window.target_fps"
        ),
        background_color=_parse_color(
            section.get("background_color", defaults.background_color), "window.background_color"
        ),
    )


def _load_physics(section: Dict[str, Any]) -> PhysicsParams:
    known = {f.name for f in fields(PhysicsParams)}
    unknown = set(section) - known
    if unknown:
        raise ConfigError(f"Unknown physics keys: {', '.join(sorted(unknown))}")
    values = {key: _number(value, f"physics.{key}") for key, value in section.items()}
    params = PhysicsParams(**values)
    _require_positive(params.influence_radius, "physics.influence_radius")
    return params


def _load_render(section: Dict[str, Any]) -> RenderConfig:
    defaults = RenderConfig()
    palette = section.get("palette", defaults.palette)
    if not palette:
        raise ConfigError("'render.palette' must list at least one colour")
    return RenderConfig(
        shape=_parse_shape(section.get("shape", defaults.shape.value)),
        color=_parse_color(section.get("color", defaults.color), "render.color"),
        palette=tuple(_parse_color(entry, "render.palette") for entry in palette),
    )


def load_app_config(path: Path) -> AppConfig:
    """Read an ``AppConfig`` from JSON, falling back to defaults for missing keys.

    A missing file yields the default configuration.
    """
    if not path.exists():
        return AppConfig()

    payload = _load_json(path)

    window = _load_window(_section(payload, "window"))

    grid_section = _section(payload, "grid")
    grid = GridConfig(
        spacing=_require_positive(_number(grid_section.get("spacing", GridConfig.spacing), "grid.spacing"), "grid.spacing"),
    )

    physics = _load_physics(_section(payload, "physics"))
    render = _load_render(_section(payload, "render"))

    logging_section = _section(payload, "logging")
    logging_config = LoggingConfig(
        level=str(logging_section.get("level", LoggingConfig.level)).upper(),
        log_file=str(logging_section.get("log_file", LoggingConfig.log_file)),
        fps_log_interval=_number(
            logging_section.get("fps_log_interval", LoggingConfig.fps_log_interval), "logging.fps_log_interval"
        ),
    )

    return AppConfig(window=window, grid=grid, physics=physics, render=render, logging=logging_config)
