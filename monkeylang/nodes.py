"""Abstract syntax tree for Monkey.

Every node keeps the token it was parsed from so error messages and debug
output can point back at the source. Nodes come in two disjoint families,
:class:`Statement` and :class:`Expression`, with :class:`Program` as the root.

``str(node)`` renders a node back to source-like text. Infix and prefix
expressions are fully parenthesised and blocks keep their braces, so the
rendering of a parsed program can itself be parsed again and renders to the
same text.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass, field
from typing import Optional

from monkeylang.tokens import Token


class Node:
    """Base class for every AST node."""

    token: Token

    def token_literal(self) -> str:
        """
        Return the literal of the token this node was parsed from.
        """
        return self.token.literal


class Statement(Node):
    """A construct that does not itself produce a value."""


class Expression(Node):
    """A construct that produces a value."""


# ---- Root ----

@dataclass
class Program(Node):
    """Root node holding the top-level statements."""

    statements: list[Statement] = field(default_factory=list)

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def __str__(self) -> str:
        # No separator between statements: "x; -1" renders as "x(-1)", which
        # reads back as a call.
        return "".join(str(s) for s in self.statements)


# ---- Expressions ----

@dataclass
class Identifier(Expression):
    token: Token
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class IntegerLiteral(Expression):
    token: Token
    value: int

    def __str__(self) -> str:
        return self.token.literal


@dataclass
class Boolean(Expression):
    token: Token
    value: bool

    def __str__(self) -> str:
        return self.token.literal


@dataclass
class PrefixExpression(Expression):
    """Unary operator applied to the expression on its right, e.g. ``-x``."""

    token: Token
    operator: str
    right: Optional[Expression] = None

    def __str__(self) -> str:
        return f"({self.operator}{_render(self.right)})"


@dataclass
class InfixExpression(Expression):
    """Binary operator expression, e.g. ``a + b``."""

    token: Token
    left: Expression
    operator: str
    right: Optional[Expression] = None

    def __str__(self) -> str:
        return f"({_render(self.left)} {self.operator} {_render(self.right)})"


@dataclass
class IfExpression(Expression):
    token: Token
    condition: Optional[Expression] = None
    consequence: Optional["BlockStatement"] = None
    alternative: Optional["BlockStatement"] = None

    def __str__(self) -> str:
        out = f"if ({_render(self.condition)}) {_render(self.consequence)}"
        if self.alternative is not None:
            out += f" else {self.alternative}"
        return out


@dataclass
class FunctionLiteral(Expression):
    """``fn(<parameters>) { <body> }``"""

    token: Token
    parameters: list[Identifier] = field(default_factory=list)
    body: Optional["BlockStatement"] = None

    def __str__(self) -> str:
        params = ", ".join(str(p) for p in self.parameters)
        return f"{self.token_literal()}({params}) {_render(self.body)}"


@dataclass
class CallExpression(Expression):
    token: Token
    function: Expression
    arguments: list[Expression] = field(default_factory=list)

    def __str__(self) -> str:
        args = ", ".join(str(a) for a in self.arguments)
        return f"{self.function}({args})"


# ---- Statements ----

@dataclass
class LetStatement(Statement):
    """``let <name> = <value>;``"""

    token: Token
    name: Identifier
    value: Optional[Expression] = None

    def __str__(self) -> str:
        return f"{self.token_literal()} {self.name} = {_render(self.value)};"


@dataclass
class ReturnStatement(Statement):
    token: Token
    value: Optional[Expression] = None

    def __str__(self) -> str:
        return f"{self.token_literal()} {_render(self.value)};"


@dataclass
class ExpressionStatement(Statement):
    """A statement consisting of a single expression, e.g. ``x + 10;``."""

    token: Token
    expression: Optional[Expression] = None

    def __str__(self) -> str:
        return _render(self.expression)


@dataclass
class BlockStatement(Statement):
    token: Token
    statements: list[Statement] = field(default_factory=list)

    def __str__(self) -> str:
        if not self.statements:
            return "{ }"
        return "{ " + "".join(str(s) for s in self.statements) + " }"


def _render(node: Optional[Node]) -> str:
    # Nodes left out by a failed parse render as nothing.
    return "" if node is None else str(node)
