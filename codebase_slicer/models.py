"""Data models for the codebase-slicer pipeline."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from codebase_slicer.errors import ExtractionError

NESTED_SEPARATOR = "$"


def outer_name(name: str) -> str:
    """Strip a nested-type suffix: ``a.b.Outer$Inner`` -> ``a.b.Outer``."""
    return name.split(NESTED_SEPARATOR, 1)[0]


class LanguageLevel(enum.Enum):
    JAVA_1_0 = 0
    JAVA_1_1 = 1
    JAVA_1_2 = 2
    JAVA_1_3 = 3
    JAVA_1_4 = 4
    JAVA_5 = 5
    JAVA_6 = 6
    JAVA_7 = 7
    JAVA_8 = 8
    JAVA_9 = 9
    JAVA_10 = 10
    JAVA_11 = 11
    JAVA_12 = 12
    JAVA_13 = 13
    JAVA_14 = 14
    JAVA_15 = 15
    JAVA_16 = 16
    JAVA_17 = 17
    JAVA_18 = 18
    JAVA_19 = 19
    JAVA_20 = 20
    JAVA_21 = 21

    @classmethod
    def parse(cls, text: str) -> LanguageLevel:
        """Parse a ``-java`` value such as ``17``, ``1_4`` or ``LATEST``."""
        value = text.strip()
        if value.upper() == "LATEST":
            return cls.JAVA_21
        key = "JAVA_" + value.replace(".", "_").upper()
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Invalid Java version: {text!r}") from None


class ReferenceKind(enum.Enum):
    EXTENDS = "extends"
    IMPLEMENTS = "implements"
    FIELD = "field"
    PARAMETER = "parameter"
    RETURN = "return"
    OTHER = "other"


@dataclass(frozen=True)
class ImportDeclaration:
    name: str
    is_static: bool = False
    on_demand: bool = False


@dataclass(frozen=True)
class TypeDeclaration:
    """A type declared in a compilation unit; ``outer`` chain is outermost first."""
    name: str
    outer: tuple[str, ...] = ()

    @property
    def binary_name(self) -> str:
        return NESTED_SEPARATOR.join(self.outer + (self.name,))


@dataclass(frozen=True)
class TypeReference:
    """A type mentioned in source, as written (possibly dotted)."""
    name: str
    kind: ReferenceKind = ReferenceKind.OTHER
    type_variables: frozenset[str] = frozenset()
    line: int = 0

    @property
    def head(self) -> str:
        return self.name.split(".", 1)[0]


@dataclass
class CompilationUnit:
    """Structural model of one source file."""
    package: str | None = None
    imports: list[ImportDeclaration] = field(default_factory=list)
    declared_types: list[TypeDeclaration] = field(default_factory=list)
    type_references: list[TypeReference] = field(default_factory=list)

    def qualify(self, binary_name: str) -> str:
        if self.package:
            return f"{self.package}.{binary_name}"
        return binary_name


@dataclass(frozen=True)
class WorkItem:
    name: str
    depth: int


@dataclass
class ExtractedEntity:
    """Result from the extractor stage."""
    name: str
    path: Path
    dependencies: frozenset[str] = frozenset()


@dataclass
class TraversalContext:
    """State of a single slicing run, owned by the closure driver."""
    root: str
    max_depth: int
    queue: deque[WorkItem] = field(default_factory=deque)
    visited: set[str] = field(default_factory=set)
    pending: set[str] = field(default_factory=set)
    entities: dict[str, Path] = field(default_factory=dict)
    failures: list[ExtractionError] = field(default_factory=list)


@dataclass
class MergeReport:
    added: list[str] = field(default_factory=list)
    duplicates: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)


@dataclass
class SliceConfig:
    """Configuration for a slicing run."""
    root: str
    source_roots: list[Path] = field(default_factory=list)
    output_path: Path = field(default_factory=lambda: Path("slice.txt"))
    max_depth: int = 0
    language_level: LanguageLevel = LanguageLevel.JAVA_21
    includes: list[str] = field(default_factory=list)
    excluded_namespaces: tuple[str, ...] = ("java.", "javax.")


@dataclass
class SliceResult:
    """What a slicing run produced."""
    output_path: Path
    entities: dict[str, Path] = field(default_factory=dict)
    files: list[Path] = field(default_factory=list)
    failures: list[ExtractionError] = field(default_factory=list)
    merge: MergeReport = field(default_factory=MergeReport)
