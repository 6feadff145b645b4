"""Parser layer."""

from __future__ import annotations

from codebase_slicer.models import LanguageLevel
from codebase_slicer.parser.base import BaseParser


def create_parser(language_level: LanguageLevel = LanguageLevel.JAVA_21) -> BaseParser:
    """Build the Java parser for the given language level."""
    from codebase_slicer.parser.treesitter_parser import TreeSitterJavaParser
    return TreeSitterJavaParser(language_level)


__all__ = ["BaseParser", "create_parser"]
