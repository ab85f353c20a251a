"""Token definitions for Monkey.

Token kinds are kept in a single enumeration so the lexer, the parser's
dispatch tables and the error messages all agree on their spelling. Operator
and delimiter kinds use the literal symbol as their value; literal and keyword
kinds use an upper-case name.


File: tokens.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class TokenKind(str, Enum):
    """
    Enumeration of token kinds produced by the lexer.
    """

    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    # Identifiers and literals
    IDENT = "IDENT"
    INT = "INT"

    # Operators
    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"
    LT = "<"
    GT = ">"
    EQ = "=="
    NOT_EQ = "!="

    # Delimiters
    COMMA = ","
    SEMICOLON = ";"
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    # Keywords
    FUNCTION = "FUNCTION"
    LET = "LET"
    TRUE = "TRUE"
    FALSE = "FALSE"
    IF = "IF"
    ELSE = "ELSE"
    RETURN = "RETURN"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer error messages.
        """
        return self.value


KEYWORDS: dict[str, TokenKind] = {
    "fn": TokenKind.FUNCTION,
    "let": TokenKind.LET,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "return": TokenKind.RETURN,
}


def lookup_ident(ident: str) -> TokenKind:
    """
    Return the keyword kind for ``ident``, or ``IDENT`` if it is not reserved.
    """
    return KEYWORDS.get(ident, TokenKind.IDENT)


class Token:
    """
    Represents a lexical token with a kind, its literal text and source line.
    """
    def __init__(self, kind: TokenKind, literal: str, line: int = 1):
        """
        Initialize a new token.

        Parameters:
            kind (TokenKind): The token kind.
            literal (str): The source text the token was read from.
            line (int): The 1-based line the token starts on.
        """
        self.kind = kind
        self.literal = literal
        self.line = line

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.kind == other.kind and self.literal == other.literal

    def __hash__(self) -> int:
        return hash((self.kind, self.literal))

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.kind.name}, {self.literal!r}, line={self.line})"


__all__ = ["TokenKind", "Token", "KEYWORDS", "lookup_ident"]
