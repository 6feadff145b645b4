"""Resolve Java type references via package, imports and the source roots."""

from __future__ import annotations

from codebase_slicer.locator import Locator
from codebase_slicer.models import NESTED_SEPARATOR, CompilationUnit, TypeReference
from codebase_slicer.resolver.base import BaseResolver
from codebase_slicer.resolver.platform import (
    JAVA_LANG_TYPES,
    PLATFORM_NAMESPACES,
    is_platform_name,
)

# Single-type import that hides a simple name but points outside the project
_SHADOWED = object()


class JavaSymbolResolver(BaseResolver):
    """Resolves simple and dotted type names using Java's scoping order.

    The first segment of a written name is looked up as: type variable in
    scope (unresolvable), type declared in the same file, single-type
    import, type in the same package, on-demand import, ``java.lang``.
    Remaining segments name member types and become ``$`` suffixes.
    Project types are only accepted if the locator can find their file.
    """

    def __init__(
        self,
        locator: Locator,
        platform_namespaces: tuple[str, ...] = PLATFORM_NAMESPACES,
    ):
        self.locator = locator
        self.platform_namespaces = tuple(platform_namespaces)
        self._known: dict[str, bool] = {}

    def resolve(self, reference: TypeReference, unit: CompilationUnit) -> str | None:
        head = reference.head
        rest = reference.name[len(head) + 1:]
        if head in reference.type_variables:
            return None

        base = self._resolve_simple(head, unit)
        if base is _SHADOWED:
            return None
        if base is None:
            return self._resolve_qualified(reference.name)
        if rest:
            return base + NESTED_SEPARATOR + rest.replace(".", NESTED_SEPARATOR)
        return base

    def _resolve_simple(self, name: str, unit: CompilationUnit):
        declared = _declared_in_unit(unit)
        if name in declared:
            return unit.qualify(declared[name])

        for imp in unit.imports:
            if imp.is_static or imp.on_demand:
                continue
            if imp.name.rsplit(".", 1)[-1] == name:
                return self._resolve_import(imp.name)

        same_package = unit.qualify(name)
        if self._is_project_type(same_package):
            return same_package

        for imp in unit.imports:
            if imp.is_static or not imp.on_demand:
                continue
            found = self._project_name(f"{imp.name}.{name}")
            if found is not None:
                return found

        if name in JAVA_LANG_TYPES:
            return f"java.lang.{name}"
        return None

    def _resolve_import(self, name: str):
        if is_platform_name(name, self.platform_namespaces):
            return name
        found = self._project_name(name)
        return found if found is not None else _SHADOWED

    def _resolve_qualified(self, name: str) -> str | None:
        if "." not in name:
            return None
        if is_platform_name(name, self.platform_namespaces):
            return name
        return self._project_name(name)

    def _project_name(self, dotted: str) -> str | None:
        """Find the longest prefix of ``dotted`` that is a project type file."""
        parts = dotted.split(".")
        for i in range(len(parts), 0, -1):
            candidate = ".".join(parts[:i])
            if self._is_project_type(candidate):
                nested = parts[i:]
                return NESTED_SEPARATOR.join([candidate] + nested)
        return None

    def _is_project_type(self, name: str) -> bool:
        if name not in self._known:
            self._known[name] = self.locator.exists(name)
        return self._known[name]


def _declared_in_unit(unit: CompilationUnit) -> dict[str, str]:
    """Simple name -> binary name; top-level declarations win over nested ones."""
    declared: dict[str, str] = {}
    for decl in sorted(unit.declared_types, key=lambda d: len(d.outer)):
        declared.setdefault(decl.name, decl.binary_name)
    return declared
