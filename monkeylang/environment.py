"""Lexical environments for Monkey.

An :class:`Environment` maps names to runtime values and optionally points at
an enclosing environment. Lookups walk outward through the chain; definitions
always land in the innermost scope, so a ``let`` inside a function shadows an
outer binding of the same name instead of overwriting it.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Optional

from monkeylang.objects import Object


class Environment:
    """Chained variable scope."""

    def __init__(self, outer: Optional["Environment"] = None):
        """
        Initialize an empty scope.

        Parameters:
            outer (Environment | None): The enclosing scope, if any.
        """
        self.store: dict[str, Object] = {}
        self.outer = outer

    @classmethod
    def new_root(cls) -> "Environment":
        """
        Create a top-level environment with no enclosing scope.
        """
        return cls()

    @classmethod
    def new_enclosed(cls, outer: "Environment") -> "Environment":
        """
        Create a scope nested inside ``outer``.
        """
        return cls(outer)

    def get(self, name: str) -> Optional[Object]:
        """
        Look up ``name`` in this scope and then in each enclosing scope.

        Returns:
            Object | None: The bound value, or None if the name is unbound.
        """
        env: Optional[Environment] = self
        while env is not None:
            if name in env.store:
                return env.store[name]
            env = env.outer
        return None

    def set(self, name: str, value: Object) -> Object:
        """
        Bind ``name`` to ``value`` in this scope and return the value.
        """
        self.store[name] = value
        return value

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def __repr__(self) -> str:
        names = ", ".join(sorted(self.store))
        return f"Environment([{names}], outer={self.outer is not None})"
