"""
Main parser entry point for minilang.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process over a token list with one token of lookahead. The
actual parsing routines are split across `minilang.parser.expressions` and
`minilang.parser.statements`.

Comment tokens are skipped by the cursor itself, so no grammar rule ever
sees one. The first syntax error aborts parsing.

While parsing, the parser keeps a provisional set of declared names and
records an advisory diagnostic when an identifier is used before any
declaration of it has been seen. The semantic analyzer repeats this check
authoritatively.
"""

from minilang.exceptions import SyntaxException
from minilang.lexer import Token, TokenKind
from minilang.nodes import Node, Program
from minilang.semantic import Diagnostic

from . import expressions as _expr
from . import statements as _stmt


class Parser:
    """minilang parser."""

    def __init__(self, tokens: list[Token]):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances ending with an EOF token.
        """
        if not tokens or tokens[-1].kind != TokenKind.EOF:
            raise ValueError("token list must end with an EOF token")
        self.tokens = tokens
        self.position = 0
        self.declared: set[str] = set()
        self.diagnostics: list[Diagnostic] = []
        self.prev_token: Token | None = None
        self.curr_token = self.tokens[0]
        self._skip_comments()

    def _skip_comments(self) -> None:
        while self.curr_token.kind == TokenKind.COMMENT:
            self.position += 1
            self.curr_token = self.tokens[self.position]

    def at_end(self) -> bool:
        """
        Return True when the current token is EOF.
        """
        return self.curr_token.kind == TokenKind.EOF

    def advance(self) -> Token:
        """
        Consume the current token and return it. EOF is never consumed.
        """
        tok = self.curr_token
        if not self.at_end():
            self.prev_token = tok
            self.position += 1
            self.curr_token = self.tokens[self.position]
            self._skip_comments()
        return tok

    def check(self, kind: TokenKind, lexeme: str | None = None) -> bool:
        """
        Test the current token without consuming it.
        """
        return self.curr_token.is_(kind, lexeme)

    def check_op(self, ops) -> bool:
        """
        Test whether the current token is one of the given operators.
        """
        return (
            self.curr_token.kind == TokenKind.OPERATOR
            and self.curr_token.lexeme in ops
        )

    def match(self, kind: TokenKind, lexeme: str | None = None) -> bool:
        """
        Consume the current token if it matches.
        """
        if self.check(kind, lexeme):
            self.advance()
            return True
        return False

    def eat(self, kind: TokenKind, lexeme: str | None, message: str) -> Token:
        """
        Consume the current token if it matches the expected kind and text.

        Parameters:
            kind (TokenKind): The expected token kind.
            lexeme (str | None): The expected text, or None for any text.
            message (str): What was expected, for the error message.

        Raises:
            SyntaxException: If the token does not match.
        """
        if self.check(kind, lexeme):
            return self.advance()
        self.error(message)

    def error(self, message: str, token: Token | None = None):
        """
        Raise a syntax error at ``token`` (the current token by default).
        """
        raise SyntaxException(message, token or self.curr_token)

    def declare(self, name: str) -> None:
        """
        Record a name in the provisional declaration table.
        """
        self.declared.add(name)

    def note_use(self, tok: Token) -> None:
        """
        Record an advisory diagnostic if ``tok`` names an undeclared variable.
        """
        if tok.lexeme not in self.declared:
            self.diagnostics.append(
                Diagnostic(f"variavel '{tok.lexeme}' usada sem declarar", tok.line, tok.column)
            )


    # Expression wrappers
    def primary(self) -> Node:
        """
        Parse a literal, identifier or parenthesized expression.
        """
        return _expr.parse_primary(self)

    def multiplicative(self) -> Node:
        """
        Parse multiplication, division and modulus.
        """
        return _expr.parse_multiplicative(self)

    def additive(self) -> Node:
        """
        Parse addition and subtraction.
        """
        return _expr.parse_additive(self)

    def relational(self) -> Node:
        """
        Parse ordering comparisons.
        """
        return _expr.parse_relational(self)

    def equality(self) -> Node:
        """
        Parse equality comparisons.
        """
        return _expr.parse_equality(self)

    def logical_and(self) -> Node:
        """
        Parse a logical AND expression.
        """
        return _expr.parse_logical_and(self)

    def logical_or(self) -> Node:
        """
        Parse a logical OR expression.
        """
        return _expr.parse_logical_or(self)

    def expr(self) -> Node:
        """
        Parse a full expression.
        """
        return _expr.parse_expr(self)


    # Statement wrappers
    def statement(self) -> Node:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def block(self) -> Node:
        """
        Parse a block of statements enclosed in braces.
        """
        return _stmt.parse_block(self)

    def parse_declaration(self) -> Node:
        """
        Parse a typed variable declaration.
        """
        return _stmt.parse_declaration(self)

    def parse_if(self) -> Node:
        """
        Parse an 'if' conditional statement.
        """
        return _stmt.parse_if(self)

    def parse_assignment(self) -> Node:
        """
        Parse an assignment to an existing variable.
        """
        return _stmt.parse_assignment(self)


    def parse(self) -> Program:
        """
        Parse the full input into a Program node.
        """
        statements = []
        while not self.at_end():
            statements.append(self.statement())
        root_token = self.prev_token if self.prev_token is not None else self.curr_token
        return Program(root_token, statements)


def parse(tokens: list[Token]) -> Program:
    """
    Parse a token list and return the AST root.

    Raises:
        SyntaxException: On the first syntax error.
    """
    return Parser(tokens).parse()
