"""Pattern databases for C++ source line classification."""

from methodsep.patterns.definitions import is_function_definition_line

__all__ = [
    "is_function_definition_line",
]
