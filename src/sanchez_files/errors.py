from __future__ import annotations


class SourceResolutionError(Exception):
    """Base class for failures while turning a source specification into files."""


class PathNotFoundError(SourceResolutionError, FileNotFoundError):
    pass


class InvalidGlobError(SourceResolutionError, ValueError):
    pass


class OutputDirectoryError(SourceResolutionError, OSError):
    pass
