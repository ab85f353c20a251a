"""Runtime values for Monkey.

Every value the evaluator produces is one of the frozen dataclasses below.
``true``, ``false`` and the "no value" result are process-wide singletons
(:data:`TRUE`, :data:`FALSE`, :data:`NULL`) so they can be compared by
identity.

:class:`ReturnValue` and :class:`Error` never escape a well-formed program as
ordinary data: the first marks a ``return`` that is unwinding through blocks,
the second is an evaluation error travelling up to the caller.


File: objects.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from monkeylang.environment import Environment
    from monkeylang.nodes import BlockStatement, Identifier


class ObjectType(str, Enum):
    """
    Enumeration of runtime value type names.
    """

    INTEGER = "INTEGER"
    BOOLEAN = "BOOLEAN"
    NULL = "NULL"
    FUNCTION = "FUNCTION"
    RETURN_VALUE = "RETURN_VALUE"
    ERROR = "ERROR"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for error messages.
        """
        return self.value


class Object:
    """Base class for runtime values."""

    def type(self) -> ObjectType:
        raise NotImplementedError

    def inspect(self) -> str:
        """
        Return a human-readable rendering of the value.
        """
        raise NotImplementedError


@dataclass(frozen=True)
class Integer(Object):
    value: int

    def type(self) -> ObjectType:
        return ObjectType.INTEGER

    def inspect(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Boolean(Object):
    value: bool

    def type(self) -> ObjectType:
        return ObjectType.BOOLEAN

    def inspect(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Null(Object):
    def type(self) -> ObjectType:
        return ObjectType.NULL

    def inspect(self) -> str:
        return "null"


@dataclass(frozen=True, eq=False)
class Function(Object):
    """
    A function value closed over the environment it was defined in.

    ``env`` is shared, not copied: bindings added to the defining scope after
    the function is created are visible when it runs.
    """

    parameters: list[Identifier]
    body: BlockStatement
    env: Environment = field(repr=False)

    def type(self) -> ObjectType:
        return ObjectType.FUNCTION

    def inspect(self) -> str:
        params = ", ".join(str(p) for p in self.parameters)
        return f"fn({params}) {self.body}"


@dataclass(frozen=True)
class ReturnValue(Object):
    """Wraps the value of a ``return`` while it unwinds enclosing blocks."""

    value: Object

    def type(self) -> ObjectType:
        return ObjectType.RETURN_VALUE

    def inspect(self) -> str:
        return self.value.inspect()


@dataclass(frozen=True)
class Error(Object):
    message: str

    def type(self) -> ObjectType:
        return ObjectType.ERROR

    def inspect(self) -> str:
        return f"ERROR: {self.message}"


TRUE = Boolean(True)
FALSE = Boolean(False)
NULL = Null()


def native_bool_to_boolean(value: bool) -> Boolean:
    """
    Return the shared :data:`TRUE` or :data:`FALSE` singleton for ``value``.
    """
    return TRUE if value else FALSE


def is_truthy(obj: Object) -> bool:
    """
    Return False for ``false`` and the "no value" result, True for anything else.
    """
    return obj is not FALSE and obj is not NULL


def is_error(obj: Object) -> bool:
    return isinstance(obj, Error)
