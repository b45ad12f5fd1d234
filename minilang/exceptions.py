"""Errors.

Syntax and runtime failures are fatal and raised as exceptions carrying the
source position of the offending token. Semantic problems are not raised;
see :mod:`minilang.semantic`.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class SyntaxException(SyntaxError):
    """
    Error raised by the parser when an expected token is missing.
    """
    def __init__(self, expectation, token):
        self.expectation = expectation
        self.token = token
        self.line = token.line
        self.column = token.column
        self.lexeme = token.lexeme
        message = (
            f"Erro sintatico na linha {token.line}, coluna {token.column}: "
            f"{expectation} (encontrei '{token.lexeme}')"
        )
        super().__init__(message)


class RuntimeException(RuntimeError):
    """
    Error raised by the interpreter on a type violation during execution.
    """
    def __init__(self, detail, line=None, column=None):
        self.detail = detail
        self.line = line
        self.column = column
        if line is not None:
            message = f"Erro de execucao na linha {line}, coluna {column}: {detail}"
        else:
            message = f"Erro de execucao: {detail}"
        super().__init__(message)


class UndefinedVariableException(RuntimeException):
    """
    Error for variables read before they hold a runtime value.
    """
    def __init__(self, varname, line=None, column=None):
        self.varname = varname
        super().__init__(
            f"variavel '{varname}' sem valor em tempo de execucao", line, column
        )


class UnknownOpException(RuntimeException):
    """
    Error for unknown operations.
    """
    def __init__(self, op, line=None, column=None):
        self.op = op
        super().__init__(f"operador nao suportado: {op}", line, column)


class SourceReadException(OSError):
    """
    Error for source files that cannot be opened or decoded.
    """
    def __init__(self, path):
        self.path = path
        super().__init__(f"Nao foi possivel abrir: {path}")
