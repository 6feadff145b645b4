"""Slicing pipeline orchestrator: traverse -> merge -> assemble -> write."""

from __future__ import annotations

import logging
from typing import Callable

from codebase_slicer.exporter import assemble, sorted_files, write_slice
from codebase_slicer.locator import Locator
from codebase_slicer.models import SliceConfig, SliceResult
from codebase_slicer.parser import create_parser
from codebase_slicer.resolver import JavaSymbolResolver
from codebase_slicer.slicer import ClosureDriver, DependencyExtractor, merge_explicit_includes

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int], None]


def build_extractor(config: SliceConfig) -> DependencyExtractor:
    locator = Locator(config.source_roots)
    for root in locator.source_roots:
        if root.is_dir():
            logger.info("Adding source directory to solver: %s", root)
        else:
            logger.warning("Source directory does not exist: %s", root)
    logger.info("Setting Java language level to: %s", config.language_level.name)
    return DependencyExtractor(
        locator=locator,
        parser=create_parser(config.language_level),
        resolver=JavaSymbolResolver(locator),
        excluded_namespaces=config.excluded_namespaces,
    )


def run_slice(config: SliceConfig, progress: ProgressCallback | None = None) -> SliceResult:
    """Run a full slicing pass and write the artifact.

    Nothing is written unless traversal, merging and assembly all succeed;
    a root that cannot be located raises RootNotFoundError.
    """
    extractor = build_extractor(config)

    # Stage 1: Traverse
    if progress:
        progress("Traversing", 0, 1)
    logger.info("Starting analysis...")
    context = ClosureDriver(extractor, config.max_depth).run(config.root)
    if progress:
        progress("Traversing", 1, 1)

    # Stage 2: Merge explicit includes
    if progress:
        progress("Merging", 0, len(config.includes))
    merge = merge_explicit_includes(context.entities, config.includes, extractor.locator)
    if progress:
        progress("Merging", len(config.includes), len(config.includes))

    # Stage 3: Assemble and write
    files = sorted_files(context.entities)
    if progress:
        progress("Writing", 0, len(files))
    text = assemble(context.entities, config.root, config.max_depth, extractor.locator.source_roots)
    write_slice(text, config.output_path)
    if progress:
        progress("Writing", len(files), len(files))

    return SliceResult(
        output_path=config.output_path,
        entities=dict(context.entities),
        files=files,
        failures=list(context.failures),
        merge=merge,
    )
