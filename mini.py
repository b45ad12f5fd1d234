"""
minilang front end

This is the main entry point for the minilang command line.

Workflow:
1. The source file is read from the path given on the command line.
2. The Lexer tokenizes the source code into tokens (`--tokens` stops here).
3. The Parser processes tokens into an AST following the language grammar.
4. The semantic analyzer checks declarations and types, collecting every
   problem it finds (`--ast` stops here).
5. If no problems were found, the Interpreter walks the AST and the final
   value of every variable is printed (`--run`).

Set MINIDEBUG to dump tokens, the AST and parser notes to stderr.
"""
import os
import sys

from minilang.exceptions import SourceReadException
from minilang.interpreter import Interpreter
from minilang.lexer import read_source, tokenize
from minilang.nodes import format_tree
from minilang.parser import Parser
from minilang.semantic import SemanticAnalyzer

MODES = ("--tokens", "--ast", "--run")


def print_usage(prog: str = "mini"):
    """
    Print usage to stderr.
    """
    err = sys.stderr
    print("Uso:", file=err)
    print(f"  {prog} --tokens <arquivo>", file=err)
    print(f"  {prog} --ast    <arquivo>", file=err)
    print(f"  {prog} --run    <arquivo>", file=err)
    print(file=err)
    print("Modos:", file=err)
    print("  --tokens   lista os tokens do arquivo", file=err)
    print("  --ast      imprime a AST e os erros semanticos", file=err)
    print("  --run      verifica e executa o programa", file=err)


def debug_print_tokens_ast(tokens, ast=None, parser=None):
    """
    Print tokenized source and AST to stderr.
    """
    err = sys.stderr
    print("\nTokens:\n", file=err)
    for tok in tokens:
        print(tok, file=err)
    if ast is not None:
        print("\nAST:\n", file=err)
        print("\n".join(format_tree(ast)), file=err)
    if parser is not None and parser.diagnostics:
        print("\nParser notes:\n", file=err)
        for diag in parser.diagnostics:
            print(diag, file=err)
    print(" ", file=err)


def run_tokens(source: str) -> int:
    """
    Print one line per token, including EOF.
    """
    for tok in tokenize(source):
        print(tok)
    return 0


def _parse_and_check(source: str):
    tokens = tokenize(source)
    parser = Parser(tokens)
    ast = parser.parse()
    if os.environ.get('MINIDEBUG'):
        debug_print_tokens_ast(tokens, ast, parser)
    result = SemanticAnalyzer().check(ast)
    return ast, result


def run_ast(source: str) -> int:
    """
    Print the AST, then the semantic diagnostics to stderr.
    """
    ast, result = _parse_and_check(source)
    print("\n".join(format_tree(ast)))
    for diag in result.diagnostics:
        print(diag, file=sys.stderr)
    return 0


def run_program(source: str) -> int:
    """
    Check and execute a program, then print its final bindings.
    """
    ast, result = _parse_and_check(source)
    if result.diagnostics:
        for diag in result.diagnostics:
            print(diag, file=sys.stderr)
        return 1

    values = Interpreter(result.symbols).execute(ast)
    for name, value in values.items():
        print(f"{name} = {value.format()}")
    return 0


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - `--tokens <file>`, `--ast <file>` or `--run <file>`: run that mode.
    - Any other pattern: print usage to stderr and return 1.

    Syntax errors, runtime errors and unreadable files are printed to stderr
    and return 1.
    """
    prog = os.path.basename(argv[0]) if argv else "mini"
    args = argv[1:]
    if len(args) != 2 or args[0] not in MODES:
        print_usage(prog)
        return 1

    mode, script_name = args
    try:
        source = read_source(script_name)
        if mode == "--tokens":
            return run_tokens(source)
        if mode == "--ast":
            return run_ast(source)
        return run_program(source)
    except (SyntaxError, RuntimeError, SourceReadException) as e:
        print(f"Erro: {e}", file=sys.stderr)
        return 1


def entrypoint():
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    entrypoint()
