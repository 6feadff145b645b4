"""Exporter layer."""

from codebase_slicer.exporter.assembler import assemble, display_path, sorted_files, write_slice

__all__ = ["assemble", "display_path", "sorted_files", "write_slice"]
