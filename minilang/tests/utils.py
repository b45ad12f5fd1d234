"""
Utility functions shared across minilang tests.
"""
from pathlib import Path
import subprocess
import sys

from minilang.interpreter import Interpreter
from minilang.lexer import tokenize
from minilang.parser import Parser
from minilang.semantic import SemanticAnalyzer

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def parse_source(source: str):
    """
    Parse source code and return the AST.
    """
    parser = Parser(tokenize(source))
    return parser.parse()


def analyze_source(source: str):
    """
    Parse and check source code, returning the AST and the semantic result.
    """
    ast = parse_source(source)
    return ast, SemanticAnalyzer().check(ast)


def messages(result) -> list[str]:
    """
    Return the diagnostic messages of a semantic result.
    """
    return [d.message for d in result.diagnostics]


def run_source(source: str) -> dict[str, str]:
    """
    Check and execute source code, returning the final bindings as printed text.
    """
    ast, result = analyze_source(source)
    assert result.diagnostics == [], [str(d) for d in result.diagnostics]
    values = Interpreter(result.symbols).execute(ast)
    return {name: value.format() for name, value in values.items()}


def run_cli(*args: str) -> subprocess.CompletedProcess:
    """
    Run the command line driver and capture its output.
    """
    return subprocess.run(
        [sys.executable, str(PROJECT_ROOT / "mini.py"), *args],
        capture_output=True,
        text=True,
        cwd=PROJECT_ROOT,
        timeout=30,
    )
