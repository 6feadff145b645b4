"""Add explicitly requested entities to the slice without expanding them."""

from __future__ import annotations

import logging
from pathlib import Path

from codebase_slicer.locator import Locator
from codebase_slicer.models import MergeReport

logger = logging.getLogger(__name__)


def merge_explicit_includes(
    entities: dict[str, Path],
    names: list[str],
    locator: Locator,
) -> MergeReport:
    """Add each located name to ``entities`` in place; names already present are skipped."""
    report = MergeReport()
    if not names:
        return report

    logger.info("Processing explicitly included classes...")
    for name in names:
        if name in entities:
            logger.info("  -> %s was already included by the dependency tree. Skipping.", name)
            report.duplicates.append(name)
            continue
        path = locator.locate(name)
        if path is None:
            logger.warning("  -> Could not find source file for explicitly included class: %s", name)
            report.missing.append(name)
            continue
        logger.info("  -> Adding: %s", name)
        entities[name] = path
        report.added.append(name)
    return report
