"""Static types of the language.

There are four primitive types plus ``unknown``, which marks an expression
whose type could not be derived because an error was already reported for
it. The only implicit conversion is widening an ``int`` where a ``real`` is
expected.
"""

from enum import Enum


class TypeKind(str, Enum):
    """
    Enumeration of declared and derived types.
    """
    INT = "int"
    REAL = "real"
    STRING = "string"
    BOOL = "bool"
    UNKNOWN = "unknown"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value

    @property
    def is_numeric(self) -> bool:
        return self in (TypeKind.INT, TypeKind.REAL)


# Type keywords that start a declaration.
TYPE_KEYWORDS: dict[str, TypeKind] = {
    "int": TypeKind.INT,
    "float": TypeKind.REAL,
    "string": TypeKind.STRING,
    "boolean": TypeKind.BOOL,
}


def is_assignable(target: TypeKind, source: TypeKind) -> bool:
    """
    Check whether a value of type ``source`` may be stored in ``target``.

    Parameters:
        target (TypeKind): The declared type of the variable.
        source (TypeKind): The type of the value being stored.

    Returns:
        bool: True on an exact match or on int to real widening.
    """
    if target == source:
        return True
    return target == TypeKind.REAL and source == TypeKind.INT


__all__ = ["TypeKind", "TYPE_KEYWORDS", "is_assignable"]
