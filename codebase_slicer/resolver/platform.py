"""Catalog of platform (JDK) types known without reading any source."""

from __future__ import annotations

PLATFORM_NAMESPACES: tuple[str, ...] = ("java.", "javax.")

# Implicitly imported into every compilation unit
JAVA_LANG_TYPES: frozenset[str] = frozenset({
    "Appendable", "ArithmeticException", "ArrayIndexOutOfBoundsException",
    "ArrayStoreException", "AssertionError", "AutoCloseable", "Boolean",
    "Byte", "CharSequence", "Character", "Class", "ClassCastException",
    "ClassLoader", "ClassNotFoundException", "CloneNotSupportedException",
    "Cloneable", "Comparable", "Deprecated", "Double", "Enum", "Error",
    "Exception", "Float", "FunctionalInterface", "IllegalAccessException",
    "IllegalArgumentException", "IllegalMonitorStateException",
    "IllegalStateException", "IndexOutOfBoundsException",
    "InheritableThreadLocal", "InstantiationException", "Integer",
    "InterruptedException", "Iterable", "LinkageError", "Long", "Math",
    "Module", "NegativeArraySizeException", "NoSuchFieldException",
    "NoSuchMethodException", "NullPointerException", "Number",
    "NumberFormatException", "Object", "OutOfMemoryError", "Override",
    "Package", "Process", "ProcessBuilder", "Readable", "Record",
    "ReflectiveOperationException", "Runnable", "Runtime",
    "RuntimeException", "SafeVarargs", "SecurityException", "Short",
    "StackOverflowError", "StackTraceElement", "StrictMath", "String",
    "StringBuffer", "StringBuilder", "StringIndexOutOfBoundsException",
    "SuppressWarnings", "System", "Thread", "ThreadGroup", "ThreadLocal",
    "Throwable", "TypeNotPresentException", "UnsupportedOperationException",
    "VirtualMachineError", "Void",
})


def is_platform_name(name: str, namespaces: tuple[str, ...] = PLATFORM_NAMESPACES) -> bool:
    return name.startswith(namespaces)
