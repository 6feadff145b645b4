"""Abstract base symbol resolver."""

from __future__ import annotations

import abc

from codebase_slicer.models import CompilationUnit, TypeReference


class BaseResolver(abc.ABC):
    """Maps a type reference, as written in a compilation unit, to a qualified name."""

    @abc.abstractmethod
    def resolve(self, reference: TypeReference, unit: CompilationUnit) -> str | None:
        """Return the fully-qualified name, or None when the reference is unresolvable.

        Unresolvable references (type variables, third-party types) are an
        expected outcome and must not raise.
        """
