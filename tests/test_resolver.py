"""Tests for Java symbol resolution against an on-disk source root."""

from pathlib import Path

import pytest

from codebase_slicer.locator import Locator
from codebase_slicer.models import (
    CompilationUnit,
    ImportDeclaration,
    TypeDeclaration,
    TypeReference,
)
from codebase_slicer.resolver import JavaSymbolResolver


@pytest.fixture
def source_root(tmp_path):
    for relative in (
        "com/acme/app/Service.java",
        "com/acme/app/Helper.java",
        "com/acme/model/Order.java",
        "com/acme/model/Customer.java",
        "com/acme/util/Outer.java",
        "com/acme/String.java",
    ):
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("class X {}\n")
    return tmp_path


@pytest.fixture
def resolver(source_root):
    return JavaSymbolResolver(Locator([source_root]))


def _unit(package="com.acme.app", imports=(), declared=()):
    return CompilationUnit(
        package=package,
        imports=[ImportDeclaration(*i) if isinstance(i, tuple) else ImportDeclaration(i) for i in imports],
        declared_types=list(declared),
    )


def _ref(name, type_variables=()):
    return TypeReference(name=name, type_variables=frozenset(type_variables))


def test_same_package(resolver):
    assert resolver.resolve(_ref("Helper"), _unit()) == "com.acme.app.Helper"


def test_single_type_import(resolver):
    unit = _unit(imports=["com.acme.model.Order"])
    assert resolver.resolve(_ref("Order"), unit) == "com.acme.model.Order"


def test_on_demand_import(resolver):
    unit = _unit(imports=[("com.acme.model", False, True)])
    assert resolver.resolve(_ref("Customer"), unit) == "com.acme.model.Customer"


def test_on_demand_import_of_unknown_type(resolver):
    unit = _unit(imports=[("com.acme.model", False, True)])
    assert resolver.resolve(_ref("Invoice"), unit) is None


def test_java_lang_is_implicit(resolver):
    assert resolver.resolve(_ref("Integer"), _unit()) == "java.lang.Integer"


def test_same_package_shadows_java_lang(resolver):
    unit = _unit(package="com.acme")
    assert resolver.resolve(_ref("String"), unit) == "com.acme.String"


def test_platform_import_skips_disk_lookup(resolver):
    unit = _unit(imports=["java.util.List"])
    assert resolver.resolve(_ref("List"), unit) == "java.util.List"


def test_third_party_import_is_unresolved(resolver):
    unit = _unit(imports=["org.slf4j.Logger"])
    assert resolver.resolve(_ref("Logger"), unit) is None


def test_third_party_import_shadows_same_package(resolver):
    unit = _unit(imports=["org.other.Helper"])
    assert resolver.resolve(_ref("Helper"), unit) is None


def test_type_variable_is_unresolved(resolver):
    assert resolver.resolve(_ref("Helper", type_variables={"Helper"}), _unit()) is None
    assert resolver.resolve(_ref("T", type_variables={"T"}), _unit()) is None


def test_unknown_simple_name(resolver):
    assert resolver.resolve(_ref("Nowhere"), _unit()) is None


def test_declared_nested_type(resolver):
    unit = _unit(declared=[
        TypeDeclaration(name="Service"),
        TypeDeclaration(name="Mode", outer=("Service",)),
    ])
    assert resolver.resolve(_ref("Mode"), unit) == "com.acme.app.Service$Mode"


def test_member_type_through_import(resolver):
    unit = _unit(imports=["com.acme.util.Outer"])
    assert resolver.resolve(_ref("Outer.Inner"), unit) == "com.acme.util.Outer$Inner"


def test_import_of_nested_type(resolver):
    unit = _unit(imports=["com.acme.util.Outer.Inner"])
    assert resolver.resolve(_ref("Inner"), unit) == "com.acme.util.Outer$Inner"


def test_fully_qualified_reference(resolver):
    assert resolver.resolve(_ref("com.acme.model.Order"), _unit()) == "com.acme.model.Order"
    assert resolver.resolve(_ref("com.acme.util.Outer.Inner"), _unit()) == "com.acme.util.Outer$Inner"


def test_fully_qualified_platform_reference(resolver):
    assert resolver.resolve(_ref("java.util.Map.Entry"), _unit()) == "java.util.Map.Entry"


def test_fully_qualified_third_party_reference(resolver):
    assert resolver.resolve(_ref("org.other.Thing"), _unit()) is None


def test_default_package(tmp_path):
    (tmp_path / "Loose.java").write_text("class Loose {}\n")
    resolver = JavaSymbolResolver(Locator([tmp_path]))
    assert resolver.resolve(_ref("Loose"), _unit(package=None)) == "Loose"
    # Default-package types are not visible from a named package
    assert resolver.resolve(_ref("Loose"), _unit(package="a.b")) is None
