"""Statement parsing utilities for minilang.

These functions operate on a `minilang.parser.Parser` instance and handle
the statement forms of the language: declarations, conditionals, blocks
and assignments.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from minilang.lexer import TokenKind
from minilang.nodes import Assign, Block, Decl, Identifier, If, Node
from minilang.types import TYPE_KEYWORDS

if TYPE_CHECKING:
    from minilang.parser import Parser


def parse_statement(parser: 'Parser') -> Node:
    """
    Parse a single statement, dispatching on its leading token.

    Syntax:
        <decl> | <if> | <block> | <assign>

    Args:
        parser: The parser instance.

    Returns:
        Node: The statement node.
    """
    tok = parser.curr_token
    if tok.kind == TokenKind.KEYWORD and tok.lexeme in TYPE_KEYWORDS:
        return parser.parse_declaration()
    if tok.is_(TokenKind.KEYWORD, 'if'):
        return parser.parse_if()
    if tok.is_(TokenKind.PUNCTUATION, '{'):
        return parser.block()
    if tok.kind == TokenKind.IDENTIFIER:
        return parser.parse_assignment()
    parser.error("declaracao, if, bloco ou atribuicao esperado")


def parse_declaration(parser: 'Parser') -> Decl:
    """
    Parse a typed variable declaration with an optional initializer.

    Syntax:
        <type> <identifier> ( = <expression> )? ;

    Args:
        parser: The parser instance.

    Returns:
        Decl: The declaration node; its token is the type keyword.
    """
    type_tok = parser.advance()
    id_tok = parser.eat(
        TokenKind.IDENTIFIER, None, f"identificador esperado apos '{type_tok.lexeme}'"
    )
    initializer = None
    if parser.match(TokenKind.OPERATOR, '='):
        initializer = parser.expr()
    parser.declare(id_tok.lexeme)
    parser.eat(TokenKind.PUNCTUATION, ';', "';' esperado ao final da declaracao")
    return Decl(type_tok, Identifier(id_tok), initializer)


def parse_block(parser: 'Parser') -> Block:
    """
    Parse a block of statements enclosed in braces.

    Syntax:
        { <statement>* }

    Args:
        parser: The parser instance.

    Returns:
        Block: The block node.
    """
    tok = parser.eat(TokenKind.PUNCTUATION, '{', "esperado '{' para iniciar bloco")
    statements = []
    while not parser.check(TokenKind.PUNCTUATION, '}') and not parser.at_end():
        statements.append(parser.statement())
    parser.eat(TokenKind.PUNCTUATION, '}', "esperado '}' ao final do bloco")
    return Block(tok, statements)


def parse_if(parser: 'Parser') -> If:
    """
    Parse a conditional 'if' statement with an optional else branch.

    Syntax:
        if ( <condition> ) <statement> ( else <statement> )?

    Args:
        parser: The parser instance.

    Returns:
        If: The conditional node.
    """
    tok = parser.eat(TokenKind.KEYWORD, 'if', "esperado 'if'")
    parser.eat(TokenKind.PUNCTUATION, '(', "esperado '(' apos if")
    condition = parser.expr()
    parser.eat(TokenKind.PUNCTUATION, ')', "esperado ')' apos condicao do if")
    then_branch = parser.statement()
    else_branch = None
    if parser.match(TokenKind.KEYWORD, 'else'):
        else_branch = parser.statement()
    return If(tok, condition, then_branch, else_branch)


def parse_assignment(parser: 'Parser') -> Assign:
    """
    Parse an assignment to a variable.

    Syntax:
        <identifier> = <expression> ;

    Args:
        parser: The parser instance.

    Returns:
        Assign: The assignment node; its token is the target identifier.
    """
    id_tok = parser.advance()
    parser.note_use(id_tok)
    parser.eat(TokenKind.OPERATOR, '=', "esperado '=' na atribuicao")
    expr_node = parser.expr()
    parser.eat(TokenKind.PUNCTUATION, ';', "esperado ';' ao final da atribuicao")
    return Assign(Identifier(id_tok), expr_node)
