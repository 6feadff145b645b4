"""Tests for the data model helpers."""

import pytest

from codebase_slicer.models import CompilationUnit, LanguageLevel, TypeReference, outer_name


@pytest.mark.parametrize("text, expected", [
    ("LATEST", LanguageLevel.JAVA_21),
    ("latest", LanguageLevel.JAVA_21),
    ("17", LanguageLevel.JAVA_17),
    ("8", LanguageLevel.JAVA_8),
    ("1_4", LanguageLevel.JAVA_1_4),
    ("1.4", LanguageLevel.JAVA_1_4),
])
def test_language_level_parse(text, expected):
    assert LanguageLevel.parse(text) is expected


@pytest.mark.parametrize("text", ["99", "1.8", "", "java17"])
def test_language_level_parse_invalid(text):
    with pytest.raises(ValueError):
        LanguageLevel.parse(text)


def test_outer_name():
    assert outer_name("a.b.Outer$Inner$Deep") == "a.b.Outer"
    assert outer_name("a.b.Plain") == "a.b.Plain"


def test_qualify():
    assert CompilationUnit(package="a.b").qualify("C$D") == "a.b.C$D"
    assert CompilationUnit().qualify("C") == "C"


def test_reference_head():
    assert TypeReference(name="Map.Entry").head == "Map"
