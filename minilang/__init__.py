"""minilang: lexer, parser, semantic analyzer and tree-walk interpreter for a
small typed teaching language.

Pipeline::

    tokens = tokenize(source)
    ast = Parser(tokens).parse()
    result = check(ast)
    if not result.diagnostics:
        values = execute(ast, result.symbols)


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from minilang.interpreter import Interpreter, RuntimeValue, execute
from minilang.lexer import Token, TokenKind, tokenize, tokenize_file
from minilang.parser import Parser, parse
from minilang.semantic import Diagnostic, SemanticAnalyzer, SemanticResult, check

__version__ = "0.1.1"

__all__ = [
    "Token",
    "TokenKind",
    "tokenize",
    "tokenize_file",
    "Parser",
    "parse",
    "Diagnostic",
    "SemanticAnalyzer",
    "SemanticResult",
    "check",
    "Interpreter",
    "RuntimeValue",
    "execute",
]
