"""Java language level each grammar construct requires."""

from __future__ import annotations

from typing import Callable

from codebase_slicer.models import LanguageLevel

# tree-sitter-java node type -> (first level that accepts it, human label)
MINIMUM_LEVEL: dict[str, tuple[LanguageLevel, str]] = {
    "enum_declaration": (LanguageLevel.JAVA_5, "enum declarations"),
    "annotation_type_declaration": (LanguageLevel.JAVA_5, "annotation type declarations"),
    "annotation": (LanguageLevel.JAVA_5, "annotations"),
    "marker_annotation": (LanguageLevel.JAVA_5, "annotations"),
    "enhanced_for_statement": (LanguageLevel.JAVA_5, "enhanced for loops"),
    "type_arguments": (LanguageLevel.JAVA_5, "generics"),
    "type_parameters": (LanguageLevel.JAVA_5, "generics"),
    "spread_parameter": (LanguageLevel.JAVA_5, "varargs parameters"),
    "try_with_resources_statement": (LanguageLevel.JAVA_7, "try-with-resources"),
    "lambda_expression": (LanguageLevel.JAVA_8, "lambda expressions"),
    "method_reference": (LanguageLevel.JAVA_8, "method references"),
    "module_declaration": (LanguageLevel.JAVA_9, "module declarations"),
    "switch_rule": (LanguageLevel.JAVA_14, "switch rules"),
    "text_block": (LanguageLevel.JAVA_15, "text blocks"),
    "yield_statement": (LanguageLevel.JAVA_14, "yield statements"),
    "record_declaration": (LanguageLevel.JAVA_16, "records"),
    "type_pattern": (LanguageLevel.JAVA_16, "type patterns"),
    "permits": (LanguageLevel.JAVA_17, "sealed classes"),
    "record_pattern": (LanguageLevel.JAVA_21, "record patterns"),
}

# Local variable forms where ``var`` is the inferred type, not a class name
_VAR_OWNERS = {"local_variable_declaration", "enhanced_for_statement", "resource"}


def _static_import(node):
    if any(child.type == "static" for child in node.children):
        return LanguageLevel.JAVA_5, "static imports"
    return None


def _var_type(node):
    if node.text == b"var" and node.parent is not None and node.parent.type in _VAR_OWNERS:
        return LanguageLevel.JAVA_10, "var local variables"
    return None


def _text_block(node):
    if node.text and node.text.startswith(b'"""'):
        return LanguageLevel.JAVA_15, "text blocks"
    return None


def _instanceof_binding(node):
    if node.child_by_field_name("name") is not None:
        return LanguageLevel.JAVA_16, "type patterns"
    return None


def _sealed_modifier(node):
    if any(child.type in ("sealed", "non-sealed") for child in node.children):
        return LanguageLevel.JAVA_17, "sealed classes"
    return None


# Constructs whose node type alone does not tell the level apart
_REFINED: dict[str, Callable] = {
    "import_declaration": _static_import,
    "type_identifier": _var_type,
    "string_literal": _text_block,
    "instanceof_expression": _instanceof_binding,
    "modifiers": _sealed_modifier,
}


def required_level(node) -> tuple[LanguageLevel, str] | None:
    """Return the level ``node`` needs and its label, or None if any level will do."""
    entry = MINIMUM_LEVEL.get(node.type)
    if entry is not None:
        return entry
    check = _REFINED.get(node.type)
    if check is not None:
        return check(node)
    return None


def unsupported_construct(node, level: LanguageLevel) -> str | None:
    """Return a message if ``level`` does not support the construct at ``node``."""
    entry = required_level(node)
    if entry is None:
        return None
    minimum, label = entry
    if level.value < minimum.value:
        return f"{label} are not supported at {level.name} (requires {minimum.name})"
    return None
