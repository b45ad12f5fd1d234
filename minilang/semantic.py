"""Semantic analyzer.

The analyzer walks a finished AST, rebuilds the symbol table from the
declarations it meets and checks every statement and expression against
the type rules of the language:

1. Symbol table
There is one flat table for the whole program: a declaration inside a block
is visible everywhere after it. Redeclaring a name is reported, and the
last declaration wins.

2. Type rules
- A value may be stored in a variable of the same type, and an ``int`` may be
  stored in a ``real`` (widening). Nothing else converts implicitly.
- Arithmetic (``+ - * / %``) needs numeric operands and yields ``real`` if
  either side is ``real``, else ``int``. ``%`` also needs both sides ``int``.
- Comparisons need numeric operands and yield ``bool``.
- ``&&`` and ``||`` need ``bool`` operands and yield ``bool``.
- ``if`` conditions must be ``bool``.

3. Diagnostics
Problems never raise. Each becomes a :class:`Diagnostic` and analysis goes
on, so the caller sees every problem in the program at once. Expressions
whose type is ``unknown`` were already reported and are not flagged again.


File: semantic.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass, field

from minilang.lexer import Token, TokenKind
from minilang.nodes import Node, NodeKind
from minilang.operations import Op
from minilang.types import TYPE_KEYWORDS, TypeKind, is_assignable


@dataclass(frozen=True)
class Diagnostic:
    """
    A non-fatal semantic problem and where it was found.
    """
    message: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"[Erro semantico] {self.message} ({self.line},{self.column})"


@dataclass
class SemanticResult:
    """
    The symbol table built from the program and every problem found in it.
    """
    symbols: dict[str, TypeKind] = field(default_factory=dict)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics


def literal_type(tok: Token) -> TypeKind:
    """
    Derive a literal's type from its token.
    """
    if tok.kind == TokenKind.INT:
        return TypeKind.INT
    if tok.kind == TokenKind.REAL:
        return TypeKind.REAL
    if tok.kind == TokenKind.STRING:
        return TypeKind.STRING
    if tok.kind == TokenKind.KEYWORD and tok.lexeme in ('true', 'false'):
        return TypeKind.BOOL
    return TypeKind.UNKNOWN


class SemanticAnalyzer:
    """Type and declaration checker."""

    def __init__(self):
        self.symbols: dict[str, TypeKind] = {}
        self.diagnostics: list[Diagnostic] = []

    def report(self, message: str, tok: Token) -> None:
        self.diagnostics.append(Diagnostic(message, tok.line, tok.column))

    def check(self, root: Node) -> SemanticResult:
        """
        Check a whole tree.

        Parameters:
            root (Node): The AST root, normally a Program.

        Returns:
            SemanticResult: The symbol table and diagnostics. Analysis always
            completes, whether or not problems were found.
        """
        self.check_node(root)
        return SemanticResult(self.symbols, self.diagnostics)

    def check_node(self, node: Node) -> None:
        """
        Check a statement node and, recursively, everything below it.
        """
        match node.kind:
            case NodeKind.PROGRAM | NodeKind.BLOCK:
                for child in node.children:
                    self.check_node(child)

            case NodeKind.DECL:
                declared = TYPE_KEYWORDS.get(node.type_name, TypeKind.UNKNOWN)
                if node.name in self.symbols:
                    self.report(f"variavel '{node.name}' redeclarada", node.token)
                init_type = None
                if node.initializer is not None:
                    init_type = self.eval_expr(node.initializer)
                self.symbols[node.name] = declared
                if (
                    init_type is not None
                    and declared != TypeKind.UNKNOWN
                    and init_type != TypeKind.UNKNOWN
                    and not is_assignable(declared, init_type)
                ):
                    self.report(
                        f"tipos incompativeis na inicializacao: "
                        f"esperado {declared.value}, obtido {init_type.value}",
                        node.token,
                    )

            case NodeKind.ASSIGN:
                target = self.symbols.get(node.name)
                if target is None:
                    self.report(
                        f"variavel '{node.name}' usada sem declarar", node.target.token
                    )
                    target = TypeKind.UNKNOWN
                expr_type = self.eval_expr(node.expr)
                if (
                    target != TypeKind.UNKNOWN
                    and expr_type != TypeKind.UNKNOWN
                    and not is_assignable(target, expr_type)
                ):
                    self.report(
                        f"tipos incompativeis na atribuicao: "
                        f"esperado {target.value}, obtido {expr_type.value}",
                        node.token,
                    )

            case NodeKind.IF:
                cond_type = self.eval_expr(node.condition)
                if cond_type not in (TypeKind.BOOL, TypeKind.UNKNOWN):
                    self.report("condicao do if deve ser bool", node.condition.token)
                self.check_node(node.then_branch)
                if node.else_branch is not None:
                    self.check_node(node.else_branch)

            case _:
                # Expressions only appear below statements.
                self.eval_expr(node)

    def eval_expr(self, node: Node) -> TypeKind:
        """
        Derive the type of an expression, reporting problems on the way.

        Returns:
            TypeKind: The expression type, ``UNKNOWN`` when it cannot be derived.
        """
        match node.kind:
            case NodeKind.LITERAL:
                return literal_type(node.token)

            case NodeKind.IDENTIFIER:
                declared = self.symbols.get(node.name)
                if declared is None:
                    self.report(f"variavel '{node.name}' usada sem declarar", node.token)
                    return TypeKind.UNKNOWN
                return declared

            case NodeKind.BINARY:
                return self._binary_type(node)

        return TypeKind.UNKNOWN

    def _binary_type(self, node: Node) -> TypeKind:
        lhs = self.eval_expr(node.left)
        rhs = self.eval_expr(node.right)
        op = node.op
        both_numeric = lhs.is_numeric and rhs.is_numeric

        if op.is_arithmetic:
            if not both_numeric:
                self.report(f"operador '{op.value}' exige operandos numericos", node.token)
                return TypeKind.UNKNOWN
            if op == Op.MOD and (lhs != TypeKind.INT or rhs != TypeKind.INT):
                self.report("operador '%' exige operandos int", node.token)
            if TypeKind.REAL in (lhs, rhs):
                return TypeKind.REAL
            return TypeKind.INT

        if op.is_comparison:
            if not both_numeric:
                self.report(f"comparacao '{op.value}' exige operandos numericos", node.token)
            return TypeKind.BOOL

        if op.is_logical:
            if lhs != TypeKind.BOOL or rhs != TypeKind.BOOL:
                self.report(f"operador logico '{op.value}' exige operandos bool", node.token)
            return TypeKind.BOOL

        return TypeKind.UNKNOWN


def check(root: Node) -> SemanticResult:
    """
    Check a tree with a fresh analyzer.
    """
    return SemanticAnalyzer().check(root)
