"""Lexer for Monkey.

The lexer walks the source with a cursor and hands out one :class:`Token` per
call to :meth:`Lexer.next_token`. Token patterns are declared as a table of
named regular expression groups which is matched at the cursor position, so
tokens are produced lazily rather than in one up-front pass.

Whitespace is skipped. Identifiers that spell a keyword are reclassified as
that keyword. ``==`` and ``!=`` are tried before ``=`` and ``!``. Anything
the table does not recognise becomes an ``ILLEGAL`` token carrying the
offending character, and lexing carries on after it. Once the input is
exhausted every further call returns ``EOF``.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
import re
from typing import Iterator

from monkeylang.tokens import Token, TokenKind, lookup_ident

logger = logging.getLogger(__name__)


token_specification: list[tuple[str, str]] = [
    # Literals
    ('INT',       r'[0-9]+'),
    ('IDENT',     r'[A-Za-z_][A-Za-z0-9_]*'),

    # Two-character operators come before their one-character prefixes
    ('EQ',        r'=='),
    ('NOT_EQ',    r'!='),

    # Operators
    ('ASSIGN',    r'='),
    ('BANG',      r'!'),
    ('PLUS',      r'\+'),
    ('MINUS',     r'-'),
    ('ASTERISK',  r'\*'),
    ('SLASH',     r'/'),
    ('LT',        r'<'),
    ('GT',        r'>'),

    # Delimiters
    ('COMMA',     r','),
    ('SEMICOLON', r';'),
    ('LPAREN',    r'\('),
    ('RPAREN',    r'\)'),
    ('LBRACE',    r'\{'),
    ('RBRACE',    r'\}'),

    # Miscellaneous
    ('NEWLINE',   r'\n'),
    ('SKIP',      r'[ \t\r]+'),
    ('MISMATCH',  r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification),
    re.DOTALL,
)


class Lexer:
    """Monkey lexer."""

    def __init__(self, source: str):
        """
        Initialize the lexer over a string of source code.

        Parameters:
            source (str): The source code to tokenize.
        """
        self.source = source
        self.position = 0
        self.line = 1

    def next_token(self) -> Token:
        """
        Consume and return the next token from the source.

        Returns:
            Token: The next token, or an ``EOF`` token once input is exhausted.
        """
        while self.position < len(self.source):
            match_obj = TOKEN_REGEX.match(self.source, self.position)
            kind = match_obj.lastgroup
            value = match_obj.group()
            self.position = match_obj.end()

            if kind == 'NEWLINE':
                self.line += 1
                continue
            if kind == 'SKIP':
                continue
            if kind == 'MISMATCH':
                logger.debug("Illegal character %r on line %d", value, self.line)
                return Token(TokenKind.ILLEGAL, value, self.line)
            if kind == 'IDENT':
                return Token(lookup_ident(value), value, self.line)
            return Token(TokenKind[kind], value, self.line)

        return Token(TokenKind.EOF, "", self.line)

    def __iter__(self) -> Iterator[Token]:
        """
        Yield tokens up to and including the first ``EOF`` token.
        """
        while True:
            tok = self.next_token()
            yield tok
            if tok.kind == TokenKind.EOF:
                return


def tokenize(source: str) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        source (str): The source code to tokenize.

    Returns:
        list[Token]: The tokens, terminated by a single ``EOF`` token.
    """
    return list(Lexer(source))
