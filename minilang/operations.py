"""Shared definitions for binary operators.

This module centralizes the operator symbols used by the parser, the
semantic analyzer and the interpreter. Keeping them in one place prevents
the three stages from drifting apart when an operator is added.
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of supported binary operators, keyed by source symbol.
    """

    # Arithmetic
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"

    # Comparison
    EQ = "=="
    NE = "!="
    LT = "<"
    GT = ">"
    LE = "<="
    GE = ">="

    # Boolean
    AND = "&&"
    OR = "||"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying symbol for nicer debug output.
        """
        return self.value

    @property
    def is_arithmetic(self) -> bool:
        return self in ARITHMETIC

    @property
    def is_comparison(self) -> bool:
        return self in COMPARISON

    @property
    def is_logical(self) -> bool:
        return self in LOGICAL


ARITHMETIC = frozenset({Op.ADD, Op.SUB, Op.MUL, Op.DIV, Op.MOD})
COMPARISON = frozenset({Op.EQ, Op.NE, Op.LT, Op.GT, Op.LE, Op.GE})
LOGICAL = frozenset({Op.AND, Op.OR})

# Operators per precedence level, lowest first.
OR_OPS = (Op.OR,)
AND_OPS = (Op.AND,)
EQUALITY_OPS = (Op.EQ, Op.NE)
RELATIONAL_OPS = (Op.LT, Op.GT, Op.LE, Op.GE)
ADDITIVE_OPS = (Op.ADD, Op.SUB)
MULTIPLICATIVE_OPS = (Op.MUL, Op.DIV, Op.MOD)


__all__ = [
    "Op",
    "ARITHMETIC",
    "COMPARISON",
    "LOGICAL",
    "OR_OPS",
    "AND_OPS",
    "EQUALITY_OPS",
    "RELATIONAL_OPS",
    "ADDITIVE_OPS",
    "MULTIPLICATIVE_OPS",
]
