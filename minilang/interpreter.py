"""Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the
parser and checked by the semantic analyzer.

1. Execution Model
The interpreter evaluates the tree top-down and recursively. Statements are
executed via `exec_node()`, and expressions are evaluated using
`eval_expr()`. Every value is a :class:`RuntimeValue` tagged with its type.

2. Environment
The interpreter keeps one flat dictionary `values` from variable name to
runtime value, alongside the symbol table handed over by the semantic
analyzer. The symbol table gives each variable its declared type; a
declaration creates the zero value of that type (0, 0.0, "" or false).

3. Expression Evaluation
Arithmetic is done in integer arithmetic when both operands are `int`
(division and modulus truncate toward zero) and in floating point as soon as
one operand is `real`. Comparisons are numeric. `&&` and `||` need booleans.
An `int` stored into a `real` variable is promoted.

4. Error Handling
The first type violation aborts the run with a `RuntimeException` carrying
the source position. A program that passed semantic analysis does not hit
these, apart from division by zero.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass

from minilang.exceptions import (
    RuntimeException,
    UndefinedVariableException,
    UnknownOpException,
)
from minilang.lexer import Token, TokenKind
from minilang.nodes import Node, NodeKind, format_expr
from minilang.operations import Op
from minilang.types import TypeKind


@dataclass(frozen=True)
class RuntimeValue:
    """
    A value tagged with its type.
    """
    type: TypeKind
    value: int | float | str | bool | None = None

    @classmethod
    def default(cls, type_: TypeKind) -> 'RuntimeValue':
        """
        Return the zero value of a type.
        """
        match type_:
            case TypeKind.INT:
                return cls(TypeKind.INT, 0)
            case TypeKind.REAL:
                return cls(TypeKind.REAL, 0.0)
            case TypeKind.STRING:
                return cls(TypeKind.STRING, "")
            case TypeKind.BOOL:
                return cls(TypeKind.BOOL, False)
        return cls(TypeKind.UNKNOWN)

    @classmethod
    def from_literal(cls, tok: Token) -> 'RuntimeValue':
        """
        Build a value from a literal token.

        String literals keep their whole lexeme, quotes included; escape
        sequences are not interpreted.
        """
        if tok.kind == TokenKind.INT:
            return cls(TypeKind.INT, int(tok.lexeme))
        if tok.kind == TokenKind.REAL:
            return cls(TypeKind.REAL, float(tok.lexeme))
        if tok.kind == TokenKind.STRING:
            return cls(TypeKind.STRING, tok.lexeme)
        if tok.kind == TokenKind.KEYWORD and tok.lexeme in ('true', 'false'):
            return cls(TypeKind.BOOL, tok.lexeme == 'true')
        return cls(TypeKind.UNKNOWN)

    @property
    def is_numeric(self) -> bool:
        return self.type.is_numeric

    def as_real(self) -> 'RuntimeValue':
        """
        Promote an int value to real.
        """
        if self.type == TypeKind.REAL:
            return self
        return RuntimeValue(TypeKind.REAL, float(self.value))

    def format(self) -> str:
        """
        Render the value the way the command line prints bindings.
        """
        match self.type:
            case TypeKind.BOOL:
                return "true" if self.value else "false"
            case TypeKind.REAL:
                return f"{self.value:g}"
            case TypeKind.UNKNOWN:
                return "<unknown>"
        return str(self.value)

    def __str__(self) -> str:
        return self.format()


def _trunc_div(lhs: int, rhs: int) -> int:
    quotient = abs(lhs) // abs(rhs)
    return -quotient if (lhs < 0) != (rhs < 0) else quotient


def _trunc_mod(lhs: int, rhs: int) -> int:
    return lhs - rhs * _trunc_div(lhs, rhs)


class Interpreter:
    """Tree-walk interpreter for minilang."""

    def __init__(self, symbols: dict[str, TypeKind]):
        """
        Initialize the interpreter.

        Parameters:
            symbols (dict): Declared type per variable, from semantic analysis.
        """
        self.symbols = symbols
        self.values: dict[str, RuntimeValue] = {}

    def fail(self, detail: str, node: Node):
        raise RuntimeException(detail, node.line, node.column)

    def declared_type(self, name: str) -> TypeKind:
        return self.symbols.get(name, TypeKind.UNKNOWN)

    def execute(self, root: Node) -> dict[str, RuntimeValue]:
        """
        Run a program.

        Parameters:
            root (Node): The AST root.

        Returns:
            dict: Final value of every variable, in declaration order.

        Raises:
            RuntimeException: On the first type violation.
        """
        self.exec_node(root)
        return self.values

    def exec_node(self, node: Node) -> None:
        """
        Execute a statement node.
        """
        match node.kind:
            case NodeKind.PROGRAM | NodeKind.BLOCK:
                for child in node.children:
                    self.exec_node(child)

            case NodeKind.DECL:
                declared = self.declared_type(node.name)
                value = RuntimeValue.default(declared)
                if node.initializer is not None:
                    init = self.eval_expr(node.initializer)
                    if declared == TypeKind.REAL and init.type == TypeKind.INT:
                        value = init.as_real()
                    elif declared in (init.type, TypeKind.UNKNOWN):
                        value = init
                    else:
                        self.fail(f"inicializacao incompativel de '{node.name}'", node)
                self.values[node.name] = value

            case NodeKind.ASSIGN:
                value = self.eval_expr(node.expr)
                target = self.declared_type(node.name)
                if target == TypeKind.REAL and value.type == TypeKind.INT:
                    value = value.as_real()
                elif target not in (value.type, TypeKind.UNKNOWN):
                    self.fail(f"atribuicao incompativel para '{node.name}'", node)
                self.values[node.name] = value

            case NodeKind.IF:
                cond = self.eval_expr(node.condition)
                if cond.type != TypeKind.BOOL:
                    self.fail("condicao do if nao booleana", node.condition)
                if cond.value:
                    self.exec_node(node.then_branch)
                elif node.else_branch is not None:
                    self.exec_node(node.else_branch)

            case _:
                # Literals and identifiers only occur inside expressions.
                pass

    def eval_expr(self, node: Node) -> RuntimeValue:
        """
        Recursively evaluate an expression node and return its value.

        Raises:
            UndefinedVariableException: If a variable has no runtime value.
            RuntimeException: On an operand of the wrong type.
        """
        match node.kind:
            case NodeKind.LITERAL:
                return RuntimeValue.from_literal(node.token)

            case NodeKind.IDENTIFIER:
                if node.name not in self.values:
                    raise UndefinedVariableException(node.name, node.line, node.column)
                return self.values[node.name]

            case NodeKind.BINARY:
                lhs = self.eval_expr(node.left)
                rhs = self.eval_expr(node.right)
                return self.eval_binary(node, lhs, rhs)

        return RuntimeValue(TypeKind.UNKNOWN)

    def eval_binary(self, node: Node, lhs: RuntimeValue, rhs: RuntimeValue) -> RuntimeValue:
        """
        Apply a binary operator to two evaluated operands.
        """
        try:
            op = Op(node.value)
        except ValueError:
            raise UnknownOpException(node.value, node.line, node.column) from None

        if op.is_arithmetic or op.is_comparison:
            for side, operand in (("esquerda", lhs), ("direita", rhs)):
                if not operand.is_numeric:
                    self.fail(
                        f"operando nao numerico em '{op.value}': {side} ({format_expr(node)})",
                        node,
                    )

        if op.is_arithmetic:
            return self._arithmetic(node, op, lhs, rhs)

        if op.is_comparison:
            if TypeKind.REAL in (lhs.type, rhs.type):
                left, right = lhs.as_real().value, rhs.as_real().value
            else:
                left, right = lhs.value, rhs.value
            match op:
                case Op.EQ:
                    result = left == right
                case Op.NE:
                    result = left != right
                case Op.LT:
                    result = left < right
                case Op.GT:
                    result = left > right
                case Op.LE:
                    result = left <= right
                case _:
                    result = left >= right
            return RuntimeValue(TypeKind.BOOL, result)

        # Logical
        if lhs.type != TypeKind.BOOL or rhs.type != TypeKind.BOOL:
            self.fail(f"operador logico '{op.value}' exige bool", node)
        if op == Op.AND:
            return RuntimeValue(TypeKind.BOOL, lhs.value and rhs.value)
        return RuntimeValue(TypeKind.BOOL, lhs.value or rhs.value)

    def _arithmetic(self, node: Node, op: Op, lhs: RuntimeValue, rhs: RuntimeValue) -> RuntimeValue:
        if op == Op.MOD:
            if lhs.type != TypeKind.INT or rhs.type != TypeKind.INT:
                self.fail("operador '%' exige int", node)
            if rhs.value == 0:
                self.fail(f"divisao por zero ({format_expr(node)})", node)
            return RuntimeValue(TypeKind.INT, _trunc_mod(lhs.value, rhs.value))

        if op == Op.DIV and rhs.value == 0:
            self.fail(f"divisao por zero ({format_expr(node)})", node)

        if TypeKind.REAL in (lhs.type, rhs.type):
            left, right = lhs.as_real().value, rhs.as_real().value
            match op:
                case Op.ADD:
                    term = left + right
                case Op.SUB:
                    term = left - right
                case Op.MUL:
                    term = left * right
                case _:
                    term = left / right
            return RuntimeValue(TypeKind.REAL, term)

        left, right = lhs.value, rhs.value
        match op:
            case Op.ADD:
                term = left + right
            case Op.SUB:
                term = left - right
            case Op.MUL:
                term = left * right
            case _:
                term = _trunc_div(left, right)
        return RuntimeValue(TypeKind.INT, term)


def execute(root: Node, symbols: dict[str, TypeKind]) -> dict[str, RuntimeValue]:
    """
    Run a checked program and return its final variable bindings.
    """
    return Interpreter(symbols).execute(root)
