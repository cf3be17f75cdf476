from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

DEFAULT_BRIGHTNESS = 1.0
DEFAULT_SATURATION = 0.7
DEFAULT_TINT = "1b3f66"


@dataclass(frozen=True, slots=True)
class SourceConfig:
    path: str
    batch: bool | None = None  # None: infer from the path


@dataclass(frozen=True, slots=True)
class OutputConfig:
    path: str | None = None


@dataclass(frozen=True, slots=True)
class RenderConfig:
    brightness: float = DEFAULT_BRIGHTNESS
    saturation: float = DEFAULT_SATURATION
    tint: str = DEFAULT_TINT


@dataclass(frozen=True, slots=True)
class AppConfig:
    source: SourceConfig
    output: OutputConfig
    render: RenderConfig


def _as_dict_table(value: Any, name: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise TypeError(f"config: [{name}] must be a TOML table")
    return value


def _require_str(value: Any, name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise TypeError(f"config: {name} must be a non-empty string path")
    return value


def _get_optional_str(table: dict[str, Any], key: str) -> str | None:
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"config: {key} must be a string")
    return value


def _get_optional_bool(table: dict[str, Any], key: str) -> bool | None:
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise TypeError(f"config: {key} must be a bool")
    return value


def _get_float(table: dict[str, Any], key: str, default: float) -> float:
    value = table.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"config: {key} must be a number")
    return float(value)


def _get_str(table: dict[str, Any], key: str, default: str) -> str:
    value = table.get(key, default)
    if not isinstance(value, str):
        raise TypeError(f"config: {key} must be a string")
    return value


def _validate(config: AppConfig) -> None:
    from sanchez_files.render import parse_tint

    if not config.output.path:
        raise ValueError("config: output.path is required")
    if config.render.brightness < 0.0:
        raise ValueError("config: render.brightness must be >= 0")
    if config.render.saturation < 0.0:
        raise ValueError("config: render.saturation must be >= 0")
    try:
        parse_tint(config.render.tint)
    except ValueError as e:
        raise ValueError(f"config: render.{e}") from e


def read_config_data(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"config not found: {path}")

    import tomllib

    return tomllib.loads(path.read_text(encoding="utf-8"))


def parse_config(data: dict[str, Any]) -> AppConfig:
    source_table = _as_dict_table(data.get("source"), "source")
    output_table = _as_dict_table(data.get("output"), "output")
    render_table = _as_dict_table(data.get("render"), "render")

    config = AppConfig(
        source=SourceConfig(
            path=_require_str(source_table.get("path"), "source.path"),
            batch=_get_optional_bool(source_table, "batch"),
        ),
        output=OutputConfig(
            path=_get_optional_str(output_table, "path"),
        ),
        render=RenderConfig(
            brightness=_get_float(render_table, "brightness", DEFAULT_BRIGHTNESS),
            saturation=_get_float(render_table, "saturation", DEFAULT_SATURATION),
            tint=_get_str(render_table, "tint", DEFAULT_TINT),
        ),
    )

    _validate(config)
    return config


def load_config(path: Path) -> AppConfig:
    return parse_config(read_config_data(path))
