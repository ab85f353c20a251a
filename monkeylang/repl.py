"""Interactive read-eval-print loop for Monkey.

Each input line is parsed and evaluated in one environment that lives for the
whole session, so bindings made on one line are visible on the next. Lines
with parse errors are reported and not evaluated.


File: repl.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TextIO

from monkeylang import nodes
from monkeylang.environment import Environment
from monkeylang.evaluator import evaluate
from monkeylang.objects import is_error
from monkeylang.parser import parse

PROMPT = ">> "


def print_parser_errors(out: TextIO, errors: list[str]) -> None:
    """
    Write parse errors to ``out``, one tab-indented message per line.
    """
    out.write("parser errors:\n")
    for msg in errors:
        out.write(f"\t{msg}\n")


def run_source(source: str, env: Environment, out: TextIO) -> bool:
    """
    Parse and evaluate ``source`` in ``env``, writing the outcome to ``out``.

    Returns:
        bool: False if the source failed to parse or evaluated to an error.
    """
    program, errors = parse(source)
    if errors:
        print_parser_errors(out, errors)
        return False

    try:
        result = evaluate(program, env)
    except RecursionError as e:
        out.write(f"{type(e).__name__}: {e}\n")
        return False

    last = program.statements[-1] if program.statements else None
    # A trailing let binds silently; errors are always reported.
    if is_error(result) or (last is not None and not isinstance(last, nodes.LetStatement)):
        out.write(result.inspect())
        out.write("\n")
    return not is_error(result)


def start(stdin: TextIO, stdout: TextIO) -> None:
    """
    Run the REPL until ``stdin`` is exhausted.

    Parameters:
        stdin (TextIO): Source of input lines.
        stdout (TextIO): Destination for prompts and results.
    """
    env = Environment.new_root()
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            return
        if not line.strip():
            continue
        run_source(line, env, stdout)
