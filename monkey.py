"""
Monkey Language Interpreter

This is the main entry point for the Monkey language interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into tokens on demand.
3. The Parser builds an AST, collecting any syntax errors along the way.
4. If there were no syntax errors, the Evaluator walks the AST and the
   resulting value is printed.

Set the environment variable ``MONKEYDEBUG`` to trace lexing, parsing and
function calls on stderr.
"""
import logging
import os
import sys

from monkeylang.environment import Environment
from monkeylang.repl import run_source, start


def print_usage():
    """
    Print usage.
    """
    print()
    print("Monkey Language Interpreter")
    print()
    print("Usage:")
    print("    monkey <script.monkey>")
    print()
    print("Arguments:")
    print("    <script.monkey>")
    print("        Path to a Monkey source file to run. The value of the last")
    print("        statement is printed.")
    print()
    print("Example:")
    print("    monkey fib.monkey")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")
    print()
    print("Environment:")
    print("    MONKEYDEBUG")
    print("        When set, write debug traces to stderr.")


def configure_logging():
    """
    Enable debug logging when MONKEYDEBUG is set.
    """
    if os.environ.get("MONKEYDEBUG"):
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s: %(message)s",
            stream=sys.stderr,
        )


def run_script(script_name: str) -> int:
    """
    Run a Monkey script and return the process exit code.
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"{type(e).__name__}: {e}")
        return 1

    ok = run_source(code, Environment.new_root(), sys.stdout)
    return 0 if ok else 1


def run_repl():
    """
    Run the interactive REPL
    """
    print("Monkey Language Interpreter - REPL")
    print("Press Ctrl-D to leave.")
    try:
        start(sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        print("\nInterrupted.")


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    configure_logging()
    args = argv[1:]
    if not args:
        run_repl()
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1:
        return run_script(args[0])
    print_usage()
    return 1


def cli():
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
