"""Map fully-qualified type names to source files under the source roots."""

from __future__ import annotations

from pathlib import Path

from codebase_slicer.models import outer_name

SOURCE_SUFFIX = ".java"


class Locator:
    """Finds the source file of a type by probing each source root in order."""

    def __init__(self, source_roots: list[Path]):
        self.source_roots = [Path(r) for r in source_roots]

    def relative_path(self, name: str) -> Path:
        # Nested types live in their outer type's file
        return Path(*outer_name(name).split(".")).with_suffix(SOURCE_SUFFIX)

    def locate(self, name: str) -> Path | None:
        if not is_well_formed(name):
            return None
        relative = self.relative_path(name)
        for root in self.source_roots:
            candidate = root / relative
            if candidate.is_file():
                return candidate
        return None

    def exists(self, name: str) -> bool:
        return self.locate(name) is not None


def is_well_formed(name: str) -> bool:
    """True if every dot-separated segment of the outer type name is non-empty."""
    outer = outer_name(name)
    return bool(outer) and all(outer.split("."))
