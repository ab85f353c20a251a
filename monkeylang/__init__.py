"""Monkey language front end and evaluator.

The two entry points are :func:`parse`, which turns source text into a
:class:`~monkeylang.nodes.Program` plus a list of parse errors, and
:func:`evaluate`, which runs a program in an
:class:`~monkeylang.environment.Environment`.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging

from monkeylang.environment import Environment
from monkeylang.evaluator import evaluate
from monkeylang.parser import parse

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["Environment", "evaluate", "parse"]
