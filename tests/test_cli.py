"""Tests for the click command."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from codebase_slicer.cli import main

try:
    import codebase_slicer.parser.treesitter_parser  # noqa: F401
    HAS_TREESITTER = True
except ImportError:
    HAS_TREESITTER = False

needs_treesitter = pytest.mark.skipif(not HAS_TREESITTER, reason="tree-sitter not installed")

SHOP = Path(__file__).parent / "fixtures" / "shop"
SOURCES = f"{SHOP / 'src/main/java'},{SHOP / 'src/test/java'}"


@pytest.fixture
def runner():
    return CliRunner()


def _args(output, **overrides):
    flags = {
        "-root": "com.acme.shop.OrderService",
        "-source": SOURCES,
        "-output": str(output),
        "-depth": "1",
    }
    flags.update(overrides)
    args = []
    for flag, value in flags.items():
        if value is not None:
            args.extend([flag, value])
    return args


@pytest.mark.parametrize("missing", ["-root", "-source", "-output", "-depth"])
def test_missing_required_flag(runner, tmp_path, missing):
    output = tmp_path / "slice.txt"
    result = runner.invoke(main, _args(output, **{missing: None}))
    assert result.exit_code == 2
    assert "Usage:" in result.output
    assert not output.exists()


@pytest.mark.parametrize("depth", ["two", "-1", "1.5"])
def test_invalid_depth(runner, tmp_path, depth):
    output = tmp_path / "slice.txt"
    result = runner.invoke(main, _args(output, **{"-depth": depth}))
    assert result.exit_code == 2
    assert not output.exists()


def test_invalid_java_version(runner, tmp_path):
    output = tmp_path / "slice.txt"
    result = runner.invoke(main, _args(output, **{"-java": "99"}))
    assert result.exit_code == 2
    assert "Invalid Java version" in result.output
    assert not output.exists()


@needs_treesitter
def test_missing_root_fails(runner, tmp_path):
    output = tmp_path / "slice.txt"
    result = runner.invoke(main, _args(output, **{"-root": "com.acme.shop.Ghost"}))
    assert result.exit_code == 1
    assert "com.acme.shop.Ghost" in result.output
    assert not output.exists()


@needs_treesitter
def test_slice_written(runner, tmp_path):
    output = tmp_path / "out" / "slice.txt"
    result = runner.invoke(main, _args(output, **{"-java": "17"}))
    assert result.exit_code == 0, result.output
    assert f"Summary saved to {output}" in result.output
    text = output.read_text()
    assert text.startswith("### Codebase Slice starting from root: com.acme.shop.OrderService (Depth: 1) ###")
    assert "--- START FILE: com/acme/shop/BaseService.java ---" in text


@needs_treesitter
def test_double_dash_flags_and_include(runner, tmp_path):
    output = tmp_path / "slice.txt"
    result = runner.invoke(main, [
        "--root", "com.acme.shop.OrderService",
        "--source", SOURCES,
        "--output", str(output),
        "--depth", "0",
        "--include", " com.acme.shop.util.Money , ",
    ])
    assert result.exit_code == 0, result.output
    text = output.read_text()
    assert "com/acme/shop/util/Money.java" in text
    assert "com/acme/shop/BaseService.java" not in text


@needs_treesitter
def test_empty_exclude_keeps_platform_names_out_of_reach(runner, tmp_path):
    # JDK sources are not under any source root, so they still cannot be located
    output = tmp_path / "slice.txt"
    result = runner.invoke(main, _args(output, **{"-exclude": "", "-depth": "1"}))
    assert result.exit_code == 0, result.output
    assert "java/util" not in output.read_text()


@needs_treesitter
@pytest.mark.parametrize("root", ["$X", "com.acme..OrderService", "com.acme.shop.$Inner"])
def test_malformed_root_reports_not_found(runner, tmp_path, root):
    output = tmp_path / "slice.txt"
    result = runner.invoke(main, _args(output, **{"-root": root, "-depth": "0"}))
    assert result.exit_code == 1
    assert not isinstance(result.exception, ValueError)
    assert "Could not find source file for root class" in result.output
    assert not output.exists()


@needs_treesitter
def test_malformed_include_is_skipped(runner, tmp_path):
    output = tmp_path / "slice.txt"
    result = runner.invoke(main, _args(output, **{"-depth": "0", "-include": "$Y,com.acme..util.Money"}))
    assert result.exit_code == 0, result.output
    assert "Money.java" not in output.read_text()
