from __future__ import annotations

import logging
import os
from pathlib import Path

from sanchez_files.config import AppConfig
from sanchez_files.output import write_manifest
from sanchez_files.paths import (
    ResolutionRequest,
    ResolvedFile,
    find_output_collisions,
    has_wildcard,
    prepare_output,
    resolve_files,
)
from sanchez_files.render import to_render_options

LOGGER = logging.getLogger(__name__)


def build_request(config: AppConfig) -> ResolutionRequest:
    source = config.source.path
    batch = config.source.batch
    if batch is None:
        batch = has_wildcard(source) or os.path.isdir(source)

    return ResolutionRequest(
        source_path=source,
        output_path=config.output.path or "",
        is_batch=batch,
    )


def run_resolution(*, config: AppConfig, manifest_path: Path | None = None) -> list[ResolvedFile]:
    request = build_request(config)
    render = to_render_options(config.render)

    prepare_output(request)
    files = resolve_files(request)
    LOGGER.info(
        "Resolved %d source file(s) from %s (batch=%s)", len(files), request.source_path, request.is_batch
    )

    for output, sources in find_output_collisions(files).items():
        LOGGER.warning(
            "%d sources share output %s; later files overwrite earlier ones: %s",
            len(sources),
            output,
            ", ".join(str(s) for s in sources),
        )

    for f in files:
        LOGGER.debug("%s -> %s", f.source, f.output)

    if manifest_path is not None:
        write_manifest(output_path=manifest_path, files=files, request=request, render=render)
        LOGGER.info("Wrote manifest to %s", manifest_path)

    return files
