"""Lexer for minilang.

This lexer performs a single pass over the source code using a combined
regular expression of named groups. Each match yields a :class:`Token`
containing its kind, exact lexeme and the line/column of its first
character.

Tokens cover identifiers and keywords, integer and real literals, strings,
operators and punctuation. Line comments (``// ...``) are kept in the token
stream as ``COMMENT`` tokens; the parser skips them. The lexer never fails:
an unterminated string or an unrecognized character becomes an ``UNKNOWN``
token and is left for the parser to reject.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from minilang.exceptions import SourceReadException


class TokenKind(str, Enum):
    """
    Lexical categories. The values are the labels printed by ``--tokens``.
    """
    IDENTIFIER = "IDENTIFICADOR"
    INT = "NUM_INT"
    REAL = "NUM_REAL"
    STRING = "STRING"
    KEYWORD = "KEYWORD"
    OPERATOR = "OPERADOR"
    PUNCTUATION = "PONTUACAO"
    EOF = "FIM DE ARQUIVO"
    UNKNOWN = "UNKNOWN"
    COMMENT = "COMMENTARIO"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


KEYWORDS = frozenset({
    # Control flow
    "if", "else", "while", "for", "switch", "case", "return", "break",
    "continue", "do",
    # Primitive types
    "int", "float", "string", "boolean", "void",
    # Literals
    "true", "false", "null",
    # Reserved for later use
    "enum", "struct", "typedef", "const", "static", "public", "private",
    "protected", "class", "new", "this", "super", "import", "package",
    "include",
})

EOF_LEXEME = "<EOF>"
UNTERMINATED_STRING_SUFFIX = "(String nunca foi fechada)"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token with a kind, its source text and position.
    """
    kind: TokenKind
    lexeme: str
    line: int
    column: int

    def is_(self, kind: TokenKind, lexeme: str | None = None) -> bool:
        """
        Check the token kind and, optionally, its exact text.
        """
        if self.kind != kind:
            return False
        return lexeme is None or self.lexeme == lexeme

    def __str__(self) -> str:
        return f'{self.kind.value} -> "{self.lexeme}" [{self.line},{self.column}]'


token_specification: list[tuple[str, str]] = [
    ('SKIP',         r'[ \t\n]+'),

    # Identifiers and keywords
    ('ID',           r'[A-Za-z_][A-Za-z0-9_]*'),

    # Numbers: a single decimal point, only when a digit follows it
    ('NUMBER',       r'[0-9]+(?:\.[0-9]+)?'),

    # Strings, backslash escapes are kept verbatim
    ('STRING',       r'"(?:[^"\\]|\\[\s\S])*"'),
    ('UNTERMINATED', r'"(?:[^"\\]|\\[\s\S])*\\?'),

    # Comments
    ('COMMENT',      r'//[^\n]*'),

    # Operators, two-character ones first
    ('OP2',          r'==|!=|<=|>=|&&|\|\|'),
    ('OP1',          r'[+\-*/=<>%]'),

    # Delimiters
    ('PUNCT',        r'[();,{}\[\]]'),

    # Anything else
    ('MISMATCH',     r'[\s\S]'),
]

tok_regex = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification)
)


def iter_tokens(code: str) -> Iterator[Token]:
    """
    Lazily scan source code, yielding tokens and a final EOF token.

    Parameters:
        code (str): The source code to tokenize.

    Yields:
        Token: Each token in source order.
    """
    line_num = 1
    line_start = 0

    for match_obj in tok_regex.finditer(code):
        kind = match_obj.lastgroup
        value = match_obj.group()
        start = match_obj.start()
        column = start - line_start + 1

        if kind == 'ID':
            token_kind = TokenKind.KEYWORD if value in KEYWORDS else TokenKind.IDENTIFIER
            yield Token(token_kind, value, line_num, column)
        elif kind == 'NUMBER':
            token_kind = TokenKind.REAL if '.' in value else TokenKind.INT
            yield Token(token_kind, value, line_num, column)
        elif kind == 'STRING':
            yield Token(TokenKind.STRING, value, line_num, column)
        elif kind == 'UNTERMINATED':
            yield Token(
                TokenKind.UNKNOWN, value + UNTERMINATED_STRING_SUFFIX, line_num, column
            )
        elif kind == 'COMMENT':
            yield Token(TokenKind.COMMENT, value, line_num, column)
        elif kind in ('OP2', 'OP1'):
            yield Token(TokenKind.OPERATOR, value, line_num, column)
        elif kind == 'PUNCT':
            yield Token(TokenKind.PUNCTUATION, value, line_num, column)
        elif kind == 'MISMATCH':
            yield Token(TokenKind.UNKNOWN, value, line_num, column)

        # Whitespace and strings may span lines
        newlines = value.count('\n')
        if newlines:
            line_num += newlines
            line_start = start + value.rindex('\n') + 1

    yield Token(TokenKind.EOF, EOF_LEXEME, line_num, len(code) - line_start + 1)


def tokenize(code: str) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.

    Returns:
        list[Token]: A list of Token instances ending with an EOF token.
    """
    return list(iter_tokens(code))


def read_source(path: str) -> str:
    """
    Read a source file.

    Raises:
        SourceReadException: If the file cannot be opened or decoded.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadException(path) from e


def tokenize_file(path: str) -> list[Token]:
    """
    Read and tokenize a source file.
    """
    return tokenize(read_source(path))
