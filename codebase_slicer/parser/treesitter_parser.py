"""Tree-sitter-based parser for Java compilation units."""

from __future__ import annotations

from codebase_slicer.errors import ParseError
from codebase_slicer.models import (
    CompilationUnit,
    ImportDeclaration,
    LanguageLevel,
    ReferenceKind,
    TypeDeclaration,
    TypeReference,
)
from codebase_slicer.parser.base import BaseParser
from codebase_slicer.parser.language_levels import unsupported_construct

try:
    from tree_sitter_language_pack import get_parser
except ImportError as _err:
    raise ImportError(
        "tree-sitter-language-pack is required. Install with: "
        "pip install tree-sitter-language-pack"
    ) from _err

_TYPE_DECLARATIONS = {
    "class_declaration", "interface_declaration", "enum_declaration",
    "record_declaration", "annotation_type_declaration",
}

# Declarations that may introduce type variables
_GENERIC_SCOPES = {
    "class_declaration", "interface_declaration", "record_declaration",
    "method_declaration", "constructor_declaration",
}

_TYPE_NAME_NODES = {"type_identifier", "scoped_type_identifier", "generic_type"}

_NAME_NODES = {"identifier", "scoped_identifier"}

# Nearest matching ancestor decides the kind of a type reference
_KIND_BY_ANCESTOR: dict[str, ReferenceKind] = {
    "superclass": ReferenceKind.EXTENDS,
    "extends_interfaces": ReferenceKind.EXTENDS,
    "super_interfaces": ReferenceKind.IMPLEMENTS,
    "formal_parameter": ReferenceKind.PARAMETER,
    "spread_parameter": ReferenceKind.PARAMETER,
    "receiver_parameter": ReferenceKind.PARAMETER,
    "field_declaration": ReferenceKind.FIELD,
    "constant_declaration": ReferenceKind.FIELD,
    "modifiers": ReferenceKind.OTHER,
    "type_parameters": ReferenceKind.OTHER,
    "throws": ReferenceKind.OTHER,
    "block": ReferenceKind.OTHER,
    "constructor_body": ReferenceKind.OTHER,
    "method_declaration": ReferenceKind.RETURN,
    "annotation_type_element_declaration": ReferenceKind.RETURN,
}


class TreeSitterJavaParser(BaseParser):
    """Parses Java source into a CompilationUnit by walking the tree-sitter AST."""

    def __init__(self, language_level: LanguageLevel = LanguageLevel.JAVA_21):
        self.language_level = language_level
        self._parser = get_parser("java")

    def parse(self, source: bytes) -> CompilationUnit:
        tree = self._parser.parse(source)
        root = tree.root_node
        if root.has_error:
            raise ParseError("Syntax error", line=_first_error_line(root))

        unit = CompilationUnit()
        for node in _walk(root):
            problem = unsupported_construct(node, self.language_level)
            if problem:
                raise ParseError(problem, line=node.start_point[0] + 1)

            if node.type == "package_declaration":
                unit.package = _first_name(node)
            elif node.type == "import_declaration":
                declaration = _import_declaration(node)
                if declaration is not None:
                    unit.imports.append(declaration)
            elif node.type in _TYPE_DECLARATIONS:
                declaration = _type_declaration(node)
                if declaration is not None:
                    unit.declared_types.append(declaration)
            elif node.type in ("type_identifier", "scoped_type_identifier"):
                reference = _type_reference(node)
                if reference is not None:
                    unit.type_references.append(reference)
        return unit


def _walk(root):
    """Pre-order traversal without recursion."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def _text(node) -> str:
    return node.text.decode("utf-8", errors="replace") if node.text else ""


def _compact(node) -> str:
    # Qualified names may be split across lines
    return "".join(_text(node).split())


def _first_error_line(root) -> int | None:
    for node in _walk(root):
        if node.type == "ERROR" or node.is_missing:
            return node.start_point[0] + 1
    return None


def _first_name(node) -> str | None:
    for child in node.named_children:
        if child.type in _NAME_NODES:
            return _compact(child)
    return None


def _import_declaration(node) -> ImportDeclaration | None:
    name = _first_name(node)
    if not name:
        return None
    return ImportDeclaration(
        name=name,
        is_static=any(c.type == "static" for c in node.children),
        on_demand=any(c.type == "asterisk" for c in node.children),
    )


def _declared_name(node) -> str | None:
    name_node = node.child_by_field_name("name")
    if name_node is None:
        return None
    return _text(name_node) or None


def _type_declaration(node) -> TypeDeclaration | None:
    name = _declared_name(node)
    if name is None:
        return None
    outer: list[str] = []
    current = node.parent
    while current is not None:
        if current.type in _TYPE_DECLARATIONS:
            outer_name = _declared_name(current)
            if outer_name:
                outer.insert(0, outer_name)
        current = current.parent
    return TypeDeclaration(name=name, outer=tuple(outer))


def _type_reference(node) -> TypeReference | None:
    parent = node.parent
    # Segments of a scoped type are covered by the outermost scoped node,
    # and a type parameter's own name is a declaration, not a reference.
    if parent is not None and parent.type in ("scoped_type_identifier", "type_parameter"):
        return None
    name = _type_name(node)
    if not name or name == "var":
        return None
    return TypeReference(
        name=name,
        kind=_reference_kind(node),
        type_variables=_type_variables_in_scope(node),
        line=node.start_point[0] + 1,
    )


def _type_name(node) -> str | None:
    if node.type == "type_identifier":
        return _text(node)
    if node.type == "generic_type":
        for child in node.named_children:
            if child.type in _TYPE_NAME_NODES:
                return _type_name(child)
        return None
    if node.type == "scoped_type_identifier":
        parts = [_type_name(c) for c in node.named_children if c.type in _TYPE_NAME_NODES]
        if not parts or not all(parts):
            return None
        return ".".join(parts)
    return None


def _reference_kind(node) -> ReferenceKind:
    current = node.parent
    while current is not None:
        kind = _KIND_BY_ANCESTOR.get(current.type)
        if kind is not None:
            return kind
        if current.type in _TYPE_DECLARATIONS:
            break
        current = current.parent
    return ReferenceKind.OTHER


def _type_variables_in_scope(node) -> frozenset[str]:
    names: set[str] = set()
    current = node.parent
    while current is not None:
        if current.type in _GENERIC_SCOPES:
            for child in current.children:
                if child.type == "type_parameters":
                    names.update(_type_parameter_names(child))
        current = current.parent
    return frozenset(names)


def _type_parameter_names(type_parameters) -> list[str]:
    names = []
    for param in type_parameters.named_children:
        if param.type != "type_parameter":
            continue
        for child in param.named_children:
            if child.type == "type_identifier":
                names.append(_text(child))
                break
    return names
