"""Click command that slices a Java codebase starting from one root class."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from codebase_slicer import __version__
from codebase_slicer.errors import SlicerError
from codebase_slicer.models import LanguageLevel, SliceConfig
from codebase_slicer.pipeline import run_slice
from codebase_slicer.resolver import PLATFORM_NAMESPACES


def _split_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def _parse_sources(ctx, param, value: str) -> list[Path]:
    roots = [Path(p) for p in _split_csv(value)]
    if not roots:
        raise click.BadParameter("at least one source directory is required")
    return roots


def _parse_language_level(ctx, param, value: str) -> LanguageLevel:
    try:
        return LanguageLevel.parse(value)
    except ValueError:
        raise click.BadParameter(f"Invalid Java version specified: {value}")


def _configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(message)s")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__)
@click.option("-root", "--root", "root", required=True, metavar="<com.example.MyClass>",
              help="Fully qualified name of the class to start from")
@click.option("-source", "--source", "source_roots", required=True, callback=_parse_sources,
              metavar="<path1,path2,...>", help="Comma-separated source root directories")
@click.option("-output", "--output", "output", required=True, type=click.Path(path_type=Path),
              metavar="<summary.txt>", help="File to write the slice to")
@click.option("-depth", "--depth", "depth", required=True, type=click.IntRange(min=0),
              metavar="<number>", help="Maximum dependency depth (0 = root only)")
@click.option("-java", "--java", "language_level", default="LATEST", callback=_parse_language_level,
              metavar="<version>", help="Java language level, e.g. 8, 17, 21 or LATEST")
@click.option("-include", "--include", "include", default=None, metavar="<class1,class2,...>",
              help="Classes to add verbatim without following their dependencies")
@click.option("-exclude", "--exclude", "exclude", default=",".join(PLATFORM_NAMESPACES),
              show_default=True, metavar="<prefix1,prefix2,...>",
              help="Namespace prefixes never pulled into the slice")
@click.option("-v", "--verbose", is_flag=True, help="Log resolution details")
@click.option("-q", "--quiet", is_flag=True, help="Only log warnings and errors")
def main(
    root: str,
    source_roots: list[Path],
    output: Path,
    depth: int,
    language_level: LanguageLevel,
    include: str | None,
    exclude: str,
    verbose: bool,
    quiet: bool,
):
    """Write the source of ROOT and every class it depends on, up to DEPTH, into one file."""
    _configure_logging(verbose, quiet)

    config = SliceConfig(
        root=root.strip(),
        source_roots=source_roots,
        output_path=output,
        max_depth=depth,
        language_level=language_level,
        includes=_split_csv(include),
        excluded_namespaces=tuple(_split_csv(exclude)),
    )

    try:
        result = run_slice(config)
    except SlicerError as e:
        raise click.ClickException(str(e))

    click.echo(f"\nProcessing complete. Summary saved to {result.output_path}")
    click.echo(f"  {len(result.files)} file(s), {len(result.entities)} class(es)")
    if result.failures:
        click.echo(f"  {len(result.failures)} class(es) skipped (see log)")
    if result.merge.added:
        click.echo(f"  {len(result.merge.added)} explicitly included")


if __name__ == "__main__":
    main()
