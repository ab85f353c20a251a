"""Errors.

Language-level failures (type mismatches, unbound identifiers, bad calls) are
reported as :class:`monkeylang.objects.Error` values, not exceptions. The
exceptions here signal misuse of the library by the host program.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class UnknownNodeException(TypeError):
    """
    Error for values handed to the evaluator that are not AST nodes.
    """
    def __init__(self, node, line=None):
        self.node = node
        self.line = line
        message = f"Unknown node type '{type(node).__name__}'"
        if line is not None:
            message += f" on line {line}"
        super().__init__(message)
