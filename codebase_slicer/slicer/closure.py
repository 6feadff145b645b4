"""Breadth-first, depth-limited dependency closure from one root entity."""

from __future__ import annotations

import logging

from codebase_slicer.errors import (
    ExtractionError,
    ExtractionFailure,
    RootNotFoundError,
    SlicerError,
)
from codebase_slicer.models import TraversalContext
from codebase_slicer.slicer.extractor import DependencyExtractor
from codebase_slicer.slicer.frontier import Frontier

logger = logging.getLogger(__name__)


class ClosureDriver:
    """Runs the traversal loop and collects the included entities."""

    def __init__(self, extractor: DependencyExtractor, max_depth: int):
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")
        self.extractor = extractor
        self.max_depth = max_depth

    def run(self, root: str) -> TraversalContext:
        context = TraversalContext(root=root, max_depth=self.max_depth)
        frontier = Frontier(context)
        frontier.enqueue(root, 0)

        while True:
            item = frontier.dequeue()
            if item is None:
                break
            if frontier.is_visited(item.name) or item.depth > self.max_depth:
                continue

            logger.info("Processing: %s (Depth: %d)", item.name, item.depth)
            frontier.mark_visited(item.name)

            try:
                entity = self.extractor.extract(item.name)
            except ExtractionError as e:
                self._handle_failure(context, item.depth, e)
                continue

            context.entities[item.name] = entity.path
            for dependency in sorted(entity.dependencies):
                frontier.enqueue(dependency, item.depth + 1)

        return context

    def _handle_failure(self, context: TraversalContext, depth: int, error: ExtractionError) -> None:
        if depth == 0:
            if error.reason is ExtractionFailure.NOT_FOUND:
                raise RootNotFoundError(error.name, self.extractor.locator.source_roots) from error
            if error.reason is ExtractionFailure.UNREADABLE:
                raise SlicerError(f"Could not read root class {error.name}: {error.detail}") from error
            # The root is always part of the slice once located
            logger.warning("Root %s could not be parsed; including it without dependencies. Error: %s",
                           error.name, error.detail)
            context.entities[error.name] = error.path
            context.failures.append(error)
            return

        logger.warning("Could not resolve or parse: %s. Skipping. Error: %s", error.name, error)
        context.failures.append(error)
