from __future__ import annotations

import json
from pathlib import Path

from sanchez_files.output import write_manifest
from sanchez_files.paths import ResolutionRequest, ResolvedFile
from sanchez_files.render import RenderOptions


def test_write_manifest(tmp_path: Path) -> None:
    out_path = tmp_path / "plans" / "manifest.json"
    files = [
        ResolvedFile(source=Path("/in/a.jpg"), output=Path("/out/a-fc.jpg")),
        ResolvedFile(source=Path("/in/b.jpg"), output=Path("/out/b-fc.jpg")),
    ]
    write_manifest(
        output_path=out_path,
        files=files,
        request=ResolutionRequest(source_path="/in", output_path="/out", is_batch=True),
        render=RenderOptions(brightness=1.0, saturation=0.7, tint=(27, 63, 102)),
    )

    payload = json.loads(out_path.read_text(encoding="utf-8"))
    assert payload["format_version"] == "1.0"
    assert payload["batch"] is True
    assert payload["render"]["tint"] == [27, 63, 102]
    assert len(payload["files"]) == 2
    assert payload["files"][0] == {"source": str(Path("/in/a.jpg")), "output": str(Path("/out/a-fc.jpg"))}
