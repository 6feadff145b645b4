"""Exceptions raised while slicing a codebase."""

from __future__ import annotations

import enum
from pathlib import Path


class SlicerError(Exception):
    """Base class for all codebase-slicer errors."""


class ParseError(SlicerError):
    """Raised when a source file cannot be parsed into a compilation unit."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(message)


class ExtractionFailure(enum.Enum):
    NOT_FOUND = "not found"
    PARSE_FAILED = "parse failed"
    UNREADABLE = "unreadable"


class ExtractionError(SlicerError):
    """Raised when dependencies of one entity cannot be extracted."""

    def __init__(
        self,
        name: str,
        reason: ExtractionFailure,
        detail: str = "",
        path: Path | None = None,
    ):
        self.name = name
        self.reason = reason
        self.detail = detail
        self.path = path
        msg = f"{name}: {reason.value}"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)


class RootNotFoundError(SlicerError):
    """Raised when the root entity has no source file under any source root."""

    def __init__(self, name: str, source_roots: list[Path]):
        self.name = name
        self.source_roots = list(source_roots)
        roots = ", ".join(str(r) for r in self.source_roots) or "<none>"
        super().__init__(
            f"Could not find source file for root class {name} in: {roots}"
        )
