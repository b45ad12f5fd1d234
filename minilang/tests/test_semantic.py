"""
Tests for semantic analysis: declarations, the symbol table and type rules.
"""
import pytest

from minilang.semantic import Diagnostic, check
from minilang.tests.utils import analyze_source, messages, parse_source
from minilang.types import TypeKind, is_assignable


def test_clean_program_builds_symbol_table():
    """
    Test that every type keyword maps to its type and no problems are found.
    """
    _, result = analyze_source(
        'int i = 1; float f = 2.5; string s = "x"; boolean b = true;'
    )
    assert result.ok
    assert result.symbols == {
        "i": TypeKind.INT,
        "f": TypeKind.REAL,
        "s": TypeKind.STRING,
        "b": TypeKind.BOOL,
    }


def test_incompatible_assignment_reported_at_assignment():
    """
    Test the assignment diagnostic text and location.
    """
    _, result = analyze_source('int a;\na = "hi";')
    assert result.diagnostics == [
        Diagnostic("tipos incompativeis na atribuicao: esperado int, obtido string", 2, 1)
    ]
    assert str(result.diagnostics[0]) == (
        "[Erro semantico] tipos incompativeis na atribuicao: "
        "esperado int, obtido string (2,1)"
    )


def test_int_widens_to_real_only():
    """
    Test that int goes into real, but real does not go into int.
    """
    _, result = analyze_source("float f = 1; f = f + 1; int i = 2.5; i = f;")
    assert messages(result) == [
        "tipos incompativeis na inicializacao: esperado int, obtido real",
        "tipos incompativeis na atribuicao: esperado int, obtido real",
    ]


@pytest.mark.parametrize(
    "target, source, expected",
    [
        (TypeKind.REAL, TypeKind.INT, True),
        (TypeKind.INT, TypeKind.INT, True),
        (TypeKind.INT, TypeKind.REAL, False),
        (TypeKind.STRING, TypeKind.BOOL, False),
        (TypeKind.BOOL, TypeKind.BOOL, True),
    ],
)
def test_is_assignable(target, source, expected):
    """
    Test the widening rule on its own.
    """
    assert is_assignable(target, source) is expected


def test_redeclaration_reported_and_last_wins():
    """
    Test that redeclaring is reported and the new type replaces the old one.
    """
    _, result = analyze_source("int a;\nfloat a = 1.5;")
    assert messages(result) == ["variavel 'a' redeclarada"]
    assert (result.diagnostics[0].line, result.diagnostics[0].column) == (2, 1)
    assert result.symbols["a"] == TypeKind.REAL


def test_use_without_declaration():
    """
    Test undeclared identifiers on both sides of an assignment.
    """
    _, result = analyze_source("x = 1; int y = z;")
    assert messages(result) == [
        "variavel 'x' usada sem declarar",
        "variavel 'z' usada sem declarar",
    ]


def test_initializer_cannot_use_the_variable_it_declares():
    """
    Test that a variable is not in scope inside its own initializer.
    """
    _, result = analyze_source("int x = x + 1;")
    assert messages(result)[0] == "variavel 'x' usada sem declarar"


def test_if_condition_must_be_bool():
    """
    Test the condition check and that both branches are still checked.
    """
    _, result = analyze_source('int a; if (a) a = "s"; else a = true;')
    assert messages(result) == [
        "condicao do if deve ser bool",
        "tipos incompativeis na atribuicao: esperado int, obtido string",
        "tipos incompativeis na atribuicao: esperado int, obtido bool",
    ]


def test_unknown_condition_not_double_reported():
    """
    Test that an undeclared condition is reported only once.
    """
    _, result = analyze_source("if (ghost) { }")
    assert messages(result) == ["variavel 'ghost' usada sem declarar"]


def test_arithmetic_rules():
    """
    Test numeric operand checks, the % rule and result types.
    """
    _, result = analyze_source(
        'float r = 1 + 2.0; int m = 5 % 2; float bad = 5.0 % 2; int s = "a" + 1;'
    )
    assert messages(result) == [
        "operador '%' exige operandos int",
        "operador '+' exige operandos numericos",
    ]
    assert result.symbols["r"] == TypeKind.REAL


def test_real_arithmetic_result_does_not_fit_int():
    """
    Test that mixing int and real yields real.
    """
    _, result = analyze_source("int i = 1 * 2.0;")
    assert messages(result) == [
        "tipos incompativeis na inicializacao: esperado int, obtido real"
    ]


def test_comparison_and_logical_rules():
    """
    Test comparison and logical operand checks.
    """
    _, result = analyze_source(
        'boolean a = 1 < 2.5; boolean b = "x" == "x"; boolean c = a && 1; boolean d = a || b;'
    )
    assert messages(result) == [
        "comparacao '==' exige operandos numericos",
        "operador logico '&&' exige operandos bool",
    ]


def test_flat_scope_across_blocks():
    """
    Test that a declaration inside a block is visible after the block.
    """
    _, result = analyze_source("{ int inner = 1; } inner = 2;")
    assert result.ok
    assert "inner" in result.symbols


def test_all_problems_are_collected():
    """
    Test that analysis continues past the first problem.
    """
    source = (
        "int a = true;\n"
        "b = 1;\n"
        "if (1 + 1) { string s = 1; }\n"
        "int a;\n"
    )
    _, result = analyze_source(source)
    assert [(d.message, d.line) for d in result.diagnostics] == [
        ("tipos incompativeis na inicializacao: esperado int, obtido bool", 1),
        ("variavel 'b' usada sem declarar", 2),
        ("condicao do if deve ser bool", 3),
        ("tipos incompativeis na inicializacao: esperado string, obtido int", 3),
        ("variavel 'a' redeclarada", 4),
    ]


def test_check_shortcut_uses_fresh_table():
    """
    Test that each check call starts from an empty table.
    """
    ast = parse_source("int a;")
    assert check(ast).ok
    assert check(ast).ok
