from __future__ import annotations

import re
from dataclasses import dataclass

from sanchez_files.config import RenderConfig

_HEX_TINT = re.compile(r"#?([0-9a-fA-F]{6})")


@dataclass(frozen=True, slots=True)
class RenderOptions:
    brightness: float
    saturation: float
    tint: tuple[int, int, int]


def parse_tint(value: str) -> tuple[int, int, int]:
    """
    Parses a `RRGGBB` hex colour (leading `#` optional) into an (r, g, b) tuple.
    """
    match = _HEX_TINT.fullmatch(value.strip())
    if match is None:
        raise ValueError(f"tint must be a 6-digit hex colour such as 1b3f66, got {value!r}")
    digits = match.group(1)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def to_render_options(config: RenderConfig) -> RenderOptions:
    return RenderOptions(
        brightness=config.brightness,
        saturation=config.saturation,
        tint=parse_tint(config.tint),
    )
