"""Render the included source files into one delimited slice artifact."""

from __future__ import annotations

from pathlib import Path

from codebase_slicer.errors import SlicerError

# Undecodable bytes survive the str round trip unchanged
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def sorted_files(entities: dict[str, Path]) -> list[Path]:
    """Distinct file paths in code-point order of their string form."""
    return sorted(set(entities.values()), key=str)


def display_path(path: Path, source_roots: list[Path]) -> str:
    """Path relative to the first source root that contains it, '/'-separated."""
    absolute = path.absolute()
    for root in source_roots:
        root_abs = Path(root).absolute()
        if absolute.is_relative_to(root_abs):
            return absolute.relative_to(root_abs).as_posix()
    return str(path)


def render_header(root: str, max_depth: int) -> str:
    return f"### Codebase Slice starting from root: {root} (Depth: {max_depth}) ###\n\n"


def render_file(path: Path, source_roots: list[Path]) -> str:
    shown = display_path(path, source_roots)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise SlicerError(f"Could not read {shown}: {e}") from e
    content = raw.decode(_ENCODING, errors=_ERRORS)
    return (
        f"--- START FILE: {shown} ---\n"
        f"{content}"
        f"\n--- END FILE: {shown} ---\n\n"
    )


def assemble(
    entities: dict[str, Path],
    root: str,
    max_depth: int,
    source_roots: list[Path],
) -> str:
    """Build the slice text: header, then one START/END block per file."""
    parts = [render_header(root, max_depth)]
    for path in sorted_files(entities):
        parts.append(render_file(path, source_roots))
    return "".join(parts)


def write_slice(text: str, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding=_ENCODING, errors=_ERRORS, newline="") as fh:
        fh.write(text)
    return output_path
