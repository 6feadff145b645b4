"""codebase-slicer: cut a dependency-closed slice out of a Java codebase."""

__version__ = "0.1.0"
