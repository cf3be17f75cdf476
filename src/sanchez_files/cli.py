from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any

from sanchez_files.config import AppConfig, parse_config, read_config_data
from sanchez_files.errors import SourceResolutionError
from sanchez_files.pipeline import run_resolution

LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sanchez-files",
        description="Resolve a source file, directory or glob into the files to process and their outputs.",
    )
    parser.add_argument("--config", help="Optional config TOML; command-line flags take precedence.")
    parser.add_argument("-s", "--source", help="Source file, directory or glob (e.g. 'source/**/*IR.jpg').")
    parser.add_argument("-o", "--output", help="Output file, or output directory in batch mode.")
    parser.add_argument(
        "-b",
        "--batch",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Force batch mode on or off (default: inferred from the source).",
    )
    parser.add_argument("--brightness", type=float, help="Brightness multiplier.")
    parser.add_argument("--saturation", type=float, help="Saturation multiplier.")
    parser.add_argument("--tint", help="Tint as a hex colour, e.g. 1b3f66.")
    parser.add_argument("--manifest", help="Write the resolved plan as JSON to this path.")
    parser.add_argument("--list", action="store_true", help="Print 'source -> output' for every file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def _apply_overrides(data: dict[str, Any], args: argparse.Namespace) -> None:
    overrides = {
        ("source", "path"): args.source,
        ("source", "batch"): args.batch,
        ("output", "path"): args.output,
        ("render", "brightness"): args.brightness,
        ("render", "saturation"): args.saturation,
        ("render", "tint"): args.tint,
    }
    for (table, key), value in overrides.items():
        if value is None:
            continue
        section = data.setdefault(table, {})
        if not isinstance(section, dict):
            raise TypeError(f"config: [{table}] must be a TOML table")
        section[key] = value


def _load(args: argparse.Namespace) -> AppConfig:
    data: dict[str, Any] = {}
    if args.config:
        data = read_config_data(Path(args.config).expanduser().resolve())
    _apply_overrides(data, args)
    return parse_config(data)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _load(args)
    except (OSError, TypeError, ValueError) as e:
        LOGGER.error("%s", e)
        return 1

    manifest_path = Path(args.manifest).expanduser() if args.manifest else None
    try:
        files = run_resolution(config=config, manifest_path=manifest_path)
    except (SourceResolutionError, OSError, ValueError) as e:
        LOGGER.error("%s", e)
        return 1

    if args.list:
        for f in files:
            print(f"{f.source} -> {f.output}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
