"""
Lint script runner.

pylint reads its settings from ``[tool.pylint.*]`` in pyproject.toml; flake8
does not read pyproject.toml, so its line length is passed here to match.
"""
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
TARGETS = ["monkeylang", "monkey.py", "scripts"]
MAX_LINE_LENGTH = 100


def main() -> int:
    """
    Lint the Monkey project using flake8 and pylint.

    Returns the exit code of the first failing linter, or 0.
    """
    print("Running flake8...")
    result = subprocess.run([
        "flake8",
        *TARGETS,
        f"--max-line-length={MAX_LINE_LENGTH}",
        "--exclude=monkeylang/tests",
    ], cwd=PROJECT_ROOT, check=False)
    if result.returncode:
        return result.returncode

    print("Running pylint...")
    result = subprocess.run([
        "pylint",
        *TARGETS,
        "--rcfile=pyproject.toml",
    ], cwd=PROJECT_ROOT, check=False)
    return result.returncode


if __name__ == "__main__":
    sys.exit(main())
