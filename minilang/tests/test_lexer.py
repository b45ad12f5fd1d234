"""
Tests for the minilang lexer.
"""
import pytest

from minilang.exceptions import SourceReadException
from minilang.lexer import (
    UNTERMINATED_STRING_SUFFIX,
    Token,
    TokenKind,
    tokenize,
    tokenize_file,
)


def kinds_and_lexemes(source: str) -> list[tuple[TokenKind, str]]:
    return [(t.kind, t.lexeme) for t in tokenize(source)]


def test_declaration_tokens_and_positions():
    """
    Test kinds, lexemes and 1-based positions of a simple declaration.
    """
    tokens = tokenize("int x = 5;\n  x = x + 1;")
    assert [str(t) for t in tokens] == [
        'KEYWORD -> "int" [1,1]',
        'IDENTIFICADOR -> "x" [1,5]',
        'OPERADOR -> "=" [1,7]',
        'NUM_INT -> "5" [1,9]',
        'PONTUACAO -> ";" [1,10]',
        'IDENTIFICADOR -> "x" [2,3]',
        'OPERADOR -> "=" [2,5]',
        'IDENTIFICADOR -> "x" [2,7]',
        'OPERADOR -> "+" [2,9]',
        'NUM_INT -> "1" [2,11]',
        'PONTUACAO -> ";" [2,12]',
        'FIM DE ARQUIVO -> "<EOF>" [2,13]',
    ]


def test_empty_source_yields_only_eof():
    """
    Test that empty and blank input produce a single EOF token.
    """
    assert tokenize("") == [Token(TokenKind.EOF, "<EOF>", 1, 1)]
    tokens = tokenize(" \t\n\n")
    assert len(tokens) == 1
    assert tokens[0].kind == TokenKind.EOF
    assert (tokens[0].line, tokens[0].column) == (3, 1)


def test_keywords_and_identifiers():
    """
    Test that reserved words are keywords and everything else is an identifier.
    """
    tokens = kinds_and_lexemes("if else while float boolean _tmp count1 iff")
    assert tokens[:-1] == [
        (TokenKind.KEYWORD, "if"),
        (TokenKind.KEYWORD, "else"),
        (TokenKind.KEYWORD, "while"),
        (TokenKind.KEYWORD, "float"),
        (TokenKind.KEYWORD, "boolean"),
        (TokenKind.IDENTIFIER, "_tmp"),
        (TokenKind.IDENTIFIER, "count1"),
        (TokenKind.IDENTIFIER, "iff"),
    ]


def test_integer_and_real_literals():
    """
    Test that a decimal point is only taken when a digit follows it.
    """
    assert kinds_and_lexemes("42 3.14 7. 1.2.3")[:-1] == [
        (TokenKind.INT, "42"),
        (TokenKind.REAL, "3.14"),
        (TokenKind.INT, "7"),
        (TokenKind.UNKNOWN, "."),
        (TokenKind.REAL, "1.2"),
        (TokenKind.UNKNOWN, "."),
        (TokenKind.INT, "3"),
    ]


def test_string_with_escapes_is_kept_verbatim():
    """
    Test that backslash escapes are included without interpretation.
    """
    tokens = tokenize(r'"a\"b\n" x')
    assert tokens[0].kind == TokenKind.STRING
    assert tokens[0].lexeme == r'"a\"b\n"'
    assert tokens[1].lexeme == "x"


def test_unterminated_string_becomes_unknown():
    """
    Test that an unterminated string is tagged, not raised.
    """
    tokens = tokenize('string s = "abc;\nint y;')
    bad = tokens[3]
    assert bad.kind == TokenKind.UNKNOWN
    assert bad.lexeme == '"abc;\nint y;' + UNTERMINATED_STRING_SUFFIX
    assert (bad.line, bad.column) == (1, 12)
    assert tokens[-1].kind == TokenKind.EOF
    assert tokens[-1].line == 2


def test_comments_stay_in_stream():
    """
    Test that line comments become COMMENT tokens up to the newline.
    """
    tokens = tokenize("x = 1; // set x\ny = 2;")
    comment = tokens[4]
    assert comment.kind == TokenKind.COMMENT
    assert comment.lexeme == "// set x"
    assert (comment.line, comment.column) == (1, 8)
    assert tokens[5].lexeme == "y"
    assert tokens[5].line == 2


def test_two_character_operators_before_single():
    """
    Test that two-character operators win over their one-character prefixes.
    """
    assert kinds_and_lexemes("== != <= >= && || < > = ! & |")[:-1] == [
        (TokenKind.OPERATOR, "=="),
        (TokenKind.OPERATOR, "!="),
        (TokenKind.OPERATOR, "<="),
        (TokenKind.OPERATOR, ">="),
        (TokenKind.OPERATOR, "&&"),
        (TokenKind.OPERATOR, "||"),
        (TokenKind.OPERATOR, "<"),
        (TokenKind.OPERATOR, ">"),
        (TokenKind.OPERATOR, "="),
        (TokenKind.UNKNOWN, "!"),
        (TokenKind.UNKNOWN, "&"),
        (TokenKind.UNKNOWN, "|"),
    ]


def test_punctuation_and_unknown_characters():
    """
    Test punctuation characters and single unknown characters.
    """
    assert kinds_and_lexemes("(){}[];,@#")[:-1] == [
        (TokenKind.PUNCTUATION, "("),
        (TokenKind.PUNCTUATION, ")"),
        (TokenKind.PUNCTUATION, "{"),
        (TokenKind.PUNCTUATION, "}"),
        (TokenKind.PUNCTUATION, "["),
        (TokenKind.PUNCTUATION, "]"),
        (TokenKind.PUNCTUATION, ";"),
        (TokenKind.PUNCTUATION, ","),
        (TokenKind.UNKNOWN, "@"),
        (TokenKind.UNKNOWN, "#"),
    ]


@pytest.mark.parametrize(
    "source",
    [
        "int x = 5; int y = 2; int z = x + y;",
        "if (a<=b&&c!=d) { s = \"hi\"; } else f = 1.5 % 2;",
        "@@ 1..2 __ \t\n",
    ],
)
def test_lexemes_reproduce_significant_characters(source):
    """
    Test that concatenated lexemes equal the source without whitespace.
    """
    tokens = tokenize(source)
    assert tokens[-1].kind == TokenKind.EOF
    assert sum(t.kind == TokenKind.EOF for t in tokens) == 1
    text = "".join(t.lexeme for t in tokens[:-1])
    assert text == "".join(source.split())


def test_printed_lexemes_tokenize_to_same_sequence():
    """
    Test that re-tokenizing the space-joined lexemes gives the same tokens.
    """
    source = 'float f=1.5;if(f>=2||true){string s="ok";}'
    first = kinds_and_lexemes(source)
    printed = " ".join(lexeme for _, lexeme in first[:-1])
    second = kinds_and_lexemes(printed)
    assert first[:-1] == second[:-1]


def test_tokenize_file(tmp_path):
    """
    Test reading a source file and the error for a missing one.
    """
    path = tmp_path / "prog.txt"
    path.write_text("int a;", encoding="utf-8")
    assert [t.lexeme for t in tokenize_file(str(path))] == ["int", "a", ";", "<EOF>"]

    missing = tmp_path / "missing.txt"
    with pytest.raises(SourceReadException) as excinfo:
        tokenize_file(str(missing))
    assert str(excinfo.value) == f"Nao foi possivel abrir: {missing}"
