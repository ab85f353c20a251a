"""
Utility functions shared across Monkey Language tests.
"""
from pathlib import Path
import sys

# Ensure the project root is on the Python path
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

from monkeylang.environment import Environment  # noqa: E402
from monkeylang.evaluator import evaluate  # noqa: E402
from monkeylang.lexer import Lexer  # noqa: E402
from monkeylang.parser import Parser  # noqa: E402


def parse_source(source: str):
    """
    Parse source code and return the program, failing on any parse error.
    """
    parser = Parser(Lexer(source))
    program = parser.parse_program()
    assert parser.errors == [], f"parser had errors: {parser.errors}"
    return program


def parse_errors(source: str) -> list[str]:
    """
    Parse source code and return the parse errors.
    """
    parser = Parser(Lexer(source))
    parser.parse_program()
    return parser.errors


def eval_source(source: str, env: Environment | None = None):
    """
    Parse and evaluate source code, returning the resulting value.
    """
    program = parse_source(source)
    return evaluate(program, env if env is not None else Environment.new_root())
