from __future__ import annotations

import glob
import os
import re
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path

from sanchez_files.errors import InvalidGlobError, OutputDirectoryError, PathNotFoundError

BATCH_FILE_SUFFIX = "-fc"
WILDCARD_CHARS: tuple[str, ...] = ("*", "?")


@dataclass(frozen=True, slots=True)
class ResolutionRequest:
    source_path: str
    output_path: str
    is_batch: bool

    def __post_init__(self) -> None:
        if not self.source_path:
            raise ValueError("source_path must be a non-empty string")
        if not self.output_path:
            raise ValueError("output_path must be a non-empty string")


@dataclass(frozen=True, slots=True)
class ResolvedFile:
    source: Path
    output: Path


def has_wildcard(path: str) -> bool:
    return any(ch in path for ch in WILDCARD_CHARS)


def prepare_output(request: ResolutionRequest) -> None:
    """
    Creates the batch output directory (and any missing parents) if required.
    Single-file requests write to a path the caller chose, so nothing is created.
    """
    if not request.is_batch:
        return

    output_dir = Path(request.output_path)
    if output_dir.exists() and not output_dir.is_dir():
        raise OutputDirectoryError(f"output path exists and is not a directory: {output_dir}")
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputDirectoryError(f"cannot create output directory {output_dir}: {e}") from e


def get_output_filename(request: ResolutionRequest, source_file: Path | str) -> Path:
    """
    Returns the output path for `source_file`.

    In batch mode this is `<output_path>/<stem>-fc<suffix>`; otherwise the output
    path is used verbatim. Batch sources sharing a basename map to the same output.
    """
    if not request.is_batch:
        return Path(request.output_path)

    source = Path(source_file)
    return Path(request.output_path) / f"{source.stem}{BATCH_FILE_SUFFIX}{source.suffix}"


def get_source_files(request: ResolutionRequest) -> list[Path]:
    """
    Returns the files to process for `request.source_path`, which may name a
    single file, a directory or a glob pattern such as `source/**/*IR.jpg`.
    """
    absolute_path = os.path.abspath(request.source_path)

    if not request.is_batch:
        return [Path(absolute_path)]

    if os.path.isdir(absolute_path):
        return _iter_files(Path(absolute_path))

    matcher = compile_glob(absolute_path)
    scan_root = _scan_root(absolute_path)
    return [p for p in _iter_files(scan_root) if matcher.match(_normalize(str(p)))]


def resolve_files(request: ResolutionRequest) -> list[ResolvedFile]:
    return [
        ResolvedFile(source=source, output=get_output_filename(request, source))
        for source in get_source_files(request)
    ]


def find_output_collisions(files: list[ResolvedFile]) -> dict[Path, list[Path]]:
    claimed: dict[Path, list[Path]] = defaultdict(list)
    for f in files:
        claimed[f.output].append(f.source)
    return {output: sources for output, sources in claimed.items() if len(sources) > 1}


def compute_glob_base(path: str) -> str:
    """
    Returns the leading directories of `path` that contain no wildcard.

    `[a-z]` style ranges are not glob syntax here, so only `*` and `?` end the base.
    """
    segments: list[str] = []
    for segment in _normalize(path).split("/"):
        if has_wildcard(segment):
            break
        segments.append(segment)
    return os.sep.join(segments)


def compile_glob(pattern: str) -> re.Pattern[str]:
    """
    Compiles a glob over forward-slash paths: `*` and `?` stay within one
    segment, a `**` segment spans any number of directories, brackets are literal.

    With brackets escaped every pattern translates to a valid expression;
    `InvalidGlobError` only surfaces if the translator emits one that is not.
    """
    literal_brackets = _normalize(pattern).replace("[", "[[]")
    try:
        return re.compile(
            glob.translate(literal_brackets, recursive=True, include_hidden=True, seps="/")
        )
    except re.error as e:
        raise InvalidGlobError(f"invalid glob pattern {pattern!r}: {e}") from e


def _normalize(path: str) -> str:
    return path.replace("\\", "/")


def _scan_root(absolute_pattern: str) -> Path:
    base = compute_glob_base(absolute_pattern)
    # An empty base (or a bare drive such as "C:") means the pattern starts at the root.
    if not base or base.endswith(":"):
        return Path(Path(absolute_pattern).anchor or os.sep)
    return Path(base)


def _iter_files(root: Path) -> list[Path]:
    if not root.is_dir():
        raise PathNotFoundError(f"source directory not found: {root}")

    files = [p for p in root.rglob("*") if p.is_file()]
    files.sort(key=str)
    return files
