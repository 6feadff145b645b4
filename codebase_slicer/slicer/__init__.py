"""Dependency-closure layer."""

from codebase_slicer.slicer.closure import ClosureDriver
from codebase_slicer.slicer.extractor import DependencyExtractor
from codebase_slicer.slicer.frontier import Frontier
from codebase_slicer.slicer.merger import merge_explicit_includes

__all__ = ["ClosureDriver", "DependencyExtractor", "Frontier", "merge_explicit_includes"]
