"""Abstract base parser."""

from __future__ import annotations

import abc

from codebase_slicer.models import CompilationUnit


class BaseParser(abc.ABC):
    """Turns the raw bytes of one source file into a compilation unit."""

    @abc.abstractmethod
    def parse(self, source: bytes) -> CompilationUnit:
        """Parse source bytes. Raises ParseError on malformed input."""
