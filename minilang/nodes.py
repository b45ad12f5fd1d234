"""AST node definitions.

Every node carries the token that produced it (for its source position and,
for operators and types, the operative text), a ``value`` string and an
ordered tuple of children. Each of the eight node kinds has its own class with
a fixed child layout:

- ``Program``/``Block``: statements in source order.
- ``Decl``: ``(Identifier,)`` or ``(Identifier, initializer)``.
- ``Assign``: ``(Identifier, expression)``.
- ``If``: ``(condition, then_branch)`` or ``(condition, then_branch, else_branch)``.
- ``Binary``: ``(left, right)``; ``value`` is the operator symbol.
- ``Literal``/``Identifier``: no children.

Nodes are not modified after construction and each node has exactly one
parent.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum

from minilang.lexer import Token
from minilang.operations import Op


class NodeKind(str, Enum):
    """
    Enumeration of AST node kinds. The values are the names printed by ``--ast``.
    """
    PROGRAM = "Program"
    BLOCK = "Block"
    DECL = "Decl"
    ASSIGN = "Assign"
    IF = "If"
    BINARY = "Binary"
    LITERAL = "Literal"
    IDENTIFIER = "Identifier"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


class Node:
    """Base class for AST nodes."""

    kind: NodeKind

    __slots__ = ("token", "value", "children")

    def __init__(self, token: Token, value: str, children=()):
        self.token = token
        self.value = value
        self.children = tuple(children)

    @property
    def line(self) -> int:
        return self.token.line

    @property
    def column(self) -> int:
        return self.token.column

    def shape(self) -> tuple:
        """
        Return the kind, value and child shapes as nested tuples.

        Two trees with equal shapes were built from the same statements, even
        when they are distinct objects.
        """
        return (self.kind, self.value, tuple(child.shape() for child in self.children))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.value!r}, "
            f"line={self.line}, column={self.column}, children={len(self.children)})"
        )


class Program(Node):
    """Root of the tree."""
    kind = NodeKind.PROGRAM
    __slots__ = ()

    def __init__(self, token: Token, statements):
        super().__init__(token, "program", statements)

    @property
    def statements(self) -> tuple:
        return self.children


class Block(Node):
    """Brace-delimited statement list."""
    kind = NodeKind.BLOCK
    __slots__ = ()

    def __init__(self, token: Token, statements):
        super().__init__(token, "block", statements)

    @property
    def statements(self) -> tuple:
        return self.children


class Identifier(Node):
    """Reference to a variable by name."""
    kind = NodeKind.IDENTIFIER
    __slots__ = ()

    def __init__(self, token: Token):
        super().__init__(token, token.lexeme)

    @property
    def name(self) -> str:
        return self.value


class Literal(Node):
    """Integer, real, string or boolean literal; its type comes from the token."""
    kind = NodeKind.LITERAL
    __slots__ = ()

    def __init__(self, token: Token):
        super().__init__(token, token.lexeme)


class Decl(Node):
    """
    Variable declaration. The token is the type keyword.
    """
    kind = NodeKind.DECL
    __slots__ = ()

    def __init__(self, type_token: Token, target: Identifier, initializer: Node | None = None):
        children = (target,) if initializer is None else (target, initializer)
        super().__init__(type_token, target.name, children)

    @property
    def name(self) -> str:
        return self.value

    @property
    def type_name(self) -> str:
        return self.token.lexeme

    @property
    def target(self) -> Identifier:
        return self.children[0]

    @property
    def initializer(self) -> Node | None:
        return self.children[1] if len(self.children) > 1 else None


class Assign(Node):
    """
    Assignment to an existing variable. The token is the target identifier.
    """
    kind = NodeKind.ASSIGN
    __slots__ = ()

    def __init__(self, target: Identifier, expr: Node):
        super().__init__(target.token, "=", (target, expr))

    @property
    def target(self) -> Identifier:
        return self.children[0]

    @property
    def name(self) -> str:
        return self.children[0].name

    @property
    def expr(self) -> Node:
        return self.children[1]


class If(Node):
    """Conditional with an optional else branch."""
    kind = NodeKind.IF
    __slots__ = ()

    def __init__(self, token: Token, condition: Node, then_branch: Node, else_branch: Node | None = None):
        children = [condition, then_branch]
        if else_branch is not None:
            children.append(else_branch)
        super().__init__(token, "if", children)

    @property
    def condition(self) -> Node:
        return self.children[0]

    @property
    def then_branch(self) -> Node:
        return self.children[1]

    @property
    def else_branch(self) -> Node | None:
        return self.children[2] if len(self.children) > 2 else None


class Binary(Node):
    """
    Binary operation. The token is the operator.
    """
    kind = NodeKind.BINARY
    __slots__ = ()

    def __init__(self, op_token: Token, left: Node, right: Node):
        super().__init__(op_token, op_token.lexeme, (left, right))

    @property
    def op(self) -> Op:
        return Op(self.value)

    @property
    def left(self) -> Node:
        return self.children[0]

    @property
    def right(self) -> Node:
        return self.children[1]


def format_tree(node: Node, indent: int = 0) -> list[str]:
    """
    Render a tree as one line per node, indented two spaces per level.

    Parameters:
        node (Node): Root of the subtree to render.
        indent (int): Depth of ``node``.

    Returns:
        list[str]: Lines of the form ``Kind : "value" [line,column]``.
    """
    lines = [f'{"  " * indent}{node.kind.value} : "{node.value}" [{node.line},{node.column}]']
    for child in node.children:
        lines.extend(format_tree(child, indent + 1))
    return lines


def format_expr(node: Node) -> str:
    """
    Convert an expression back to readable source text for error messages.
    """
    match node.kind:
        case NodeKind.BINARY:
            return f"({format_expr(node.left)} {node.value} {format_expr(node.right)})"
        case NodeKind.LITERAL | NodeKind.IDENTIFIER:
            return node.value
        case _:
            return f"<{node.kind.value.lower()}>"


__all__ = [
    "NodeKind",
    "Node",
    "Program",
    "Block",
    "Identifier",
    "Literal",
    "Decl",
    "Assign",
    "If",
    "Binary",
    "format_tree",
    "format_expr",
]
