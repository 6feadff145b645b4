"""Per-entity dependency extraction: locate, parse, resolve, filter."""

from __future__ import annotations

import logging

from codebase_slicer.errors import ExtractionError, ExtractionFailure, ParseError
from codebase_slicer.locator import Locator
from codebase_slicer.models import ExtractedEntity, outer_name
from codebase_slicer.parser.base import BaseParser
from codebase_slicer.resolver.base import BaseResolver
from codebase_slicer.resolver.platform import PLATFORM_NAMESPACES

logger = logging.getLogger(__name__)


class DependencyExtractor:
    """Finds the qualified names an entity's source file refers to."""

    def __init__(
        self,
        locator: Locator,
        parser: BaseParser,
        resolver: BaseResolver,
        excluded_namespaces: tuple[str, ...] = PLATFORM_NAMESPACES,
    ):
        self.locator = locator
        self.parser = parser
        self.resolver = resolver
        self.excluded_namespaces = tuple(excluded_namespaces)

    def extract(self, name: str) -> ExtractedEntity:
        path = self.locator.locate(name)
        if path is None:
            raise ExtractionError(name, ExtractionFailure.NOT_FOUND, "no source file under any source root")

        try:
            source = path.read_bytes()
        except OSError as e:
            raise ExtractionError(name, ExtractionFailure.UNREADABLE, str(e), path=path) from e
        try:
            unit = self.parser.parse(source)
        except ParseError as e:
            raise ExtractionError(name, ExtractionFailure.PARSE_FAILED, str(e), path=path) from e

        own_file = outer_name(name)
        dependencies: set[str] = set()
        for reference in unit.type_references:
            try:
                resolved = self.resolver.resolve(reference, unit)
            except Exception as e:
                logger.debug("  -> %s: cannot resolve %s (line %d): %s", name, reference.name, reference.line, e)
                continue
            if resolved is None:
                continue
            if self.is_excluded(resolved) or outer_name(resolved) == own_file:
                continue
            logger.debug("  -> %s: %s reference %s (line %d) is %s",
                         name, reference.kind.value, reference.name, reference.line, resolved)
            dependencies.add(resolved)

        return ExtractedEntity(name=name, path=path, dependencies=frozenset(dependencies))

    def is_excluded(self, name: str) -> bool:
        return bool(self.excluded_namespaces) and name.startswith(self.excluded_namespaces)
