from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from sanchez_files.paths import ResolutionRequest, ResolvedFile
from sanchez_files.render import RenderOptions


def write_manifest(
    *,
    output_path: Path,
    files: list[ResolvedFile],
    request: ResolutionRequest,
    render: RenderOptions,
) -> None:
    payload: dict[str, Any] = {
        "format_version": "1.0",
        "batch": request.is_batch,
        "render": {
            "brightness": float(render.brightness),
            "saturation": float(render.saturation),
            "tint": list(render.tint),
        },
        "files": [{"source": str(f.source), "output": str(f.output)} for f in files],
    }

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
