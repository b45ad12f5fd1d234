"""
Expression parsing utilities for minilang.

These functions operate on a `minilang.parser.Parser` instance and
implement the recursive descent logic for expressions. Each binary level
parses one operand of the next higher precedence level, then folds further
operands in from the left, so every operator is left-associative.
"""

from typing import TYPE_CHECKING

from minilang.lexer import TokenKind
from minilang.nodes import Binary, Identifier, Literal, Node
from minilang.operations import (
    ADDITIVE_OPS,
    AND_OPS,
    EQUALITY_OPS,
    MULTIPLICATIVE_OPS,
    OR_OPS,
    RELATIONAL_OPS,
)

if TYPE_CHECKING:
    from minilang.parser import Parser


# ---- Highest precedence ----

def parse_primary(parser: 'Parser') -> Node:
    """Parse a literal, variable or parenthesized expression."""
    tok = parser.curr_token

    if tok.kind == TokenKind.IDENTIFIER:
        parser.advance()
        parser.note_use(tok)
        return Identifier(tok)

    if tok.kind in (TokenKind.INT, TokenKind.REAL, TokenKind.STRING):
        parser.advance()
        return Literal(tok)

    if tok.is_(TokenKind.KEYWORD, 'true') or tok.is_(TokenKind.KEYWORD, 'false'):
        parser.advance()
        return Literal(tok)

    if parser.match(TokenKind.PUNCTUATION, '('):
        node = parser.expr()
        parser.eat(TokenKind.PUNCTUATION, ')', "esperado ')' apos expressao")
        return node

    parser.error("expressao, identificador ou literal esperado")


def parse_multiplicative(parser: 'Parser') -> Node:
    """Parse multiplication, division and modulus expressions."""
    result = parser.primary()
    while parser.check_op(MULTIPLICATIVE_OPS):
        op_tok = parser.advance()
        result = Binary(op_tok, result, parser.primary())
    return result


def parse_additive(parser: 'Parser') -> Node:
    """Parse addition and subtraction expressions."""
    result = parser.multiplicative()
    while parser.check_op(ADDITIVE_OPS):
        op_tok = parser.advance()
        result = Binary(op_tok, result, parser.multiplicative())
    return result


def parse_relational(parser: 'Parser') -> Node:
    """Parse ordering comparisons (<, >, <=, >=)."""
    result = parser.additive()
    while parser.check_op(RELATIONAL_OPS):
        op_tok = parser.advance()
        result = Binary(op_tok, result, parser.additive())
    return result


def parse_equality(parser: 'Parser') -> Node:
    """Parse equality comparisons (==, !=)."""
    result = parser.relational()
    while parser.check_op(EQUALITY_OPS):
        op_tok = parser.advance()
        result = Binary(op_tok, result, parser.relational())
    return result


def parse_logical_and(parser: 'Parser') -> Node:
    """Parse logical AND expressions using '&&'."""
    result = parser.equality()
    while parser.check_op(AND_OPS):
        op_tok = parser.advance()
        result = Binary(op_tok, result, parser.equality())
    return result


def parse_logical_or(parser: 'Parser') -> Node:
    """Parse logical OR expressions using '||'."""
    result = parser.logical_and()
    while parser.check_op(OR_OPS):
        op_tok = parser.advance()
        result = Binary(op_tok, result, parser.logical_and())
    return result


# ---- Entry point ----

def parse_expr(parser: 'Parser') -> Node:
    """Parse an expression starting from the lowest-precedence operator."""
    return parser.logical_or()
