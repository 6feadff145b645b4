"""Symbol resolver layer."""

from codebase_slicer.resolver.base import BaseResolver
from codebase_slicer.resolver.java_resolver import JavaSymbolResolver
from codebase_slicer.resolver.platform import JAVA_LANG_TYPES, PLATFORM_NAMESPACES

__all__ = ["BaseResolver", "JavaSymbolResolver", "JAVA_LANG_TYPES", "PLATFORM_NAMESPACES"]
