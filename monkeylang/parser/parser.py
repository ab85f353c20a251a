"""
Main parser entry point for Monkey.

This module defines the `Parser` class, which holds the parser state (the
current token, one token of lookahead and the accumulated errors) and drives
the Pratt expression loop. The actual parsing routines are split across
`monkeylang.parser.expressions` and `monkeylang.parser.statements`.

Each token kind that can start an expression has a prefix handler, and each
token kind that can continue one has an infix handler plus a precedence.
Both tables are filled once, when the parser is constructed.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
from typing import Callable, Optional

from monkeylang import nodes
from monkeylang.lexer import Lexer
from monkeylang.tokens import Token, TokenKind

from . import expressions as _expr
from . import statements as _stmt
from .precedence import PRECEDENCES, Precedence

logger = logging.getLogger(__name__)

PrefixParseFn = Callable[[], Optional[nodes.Expression]]
InfixParseFn = Callable[[nodes.Expression], Optional[nodes.Expression]]


class Parser:
    """Monkey parser."""

    def __init__(self, lexer: Lexer):
        """
        Initialize the parser over a lexer.

        Parameters:
            lexer (Lexer): The token source. Tokens are pulled one at a time.
        """
        self.lexer = lexer
        self.errors: list[str] = []

        self.curr_token = Token(TokenKind.EOF, "")
        self.peek_token = Token(TokenKind.EOF, "")

        self.prefix_parse_fns: dict[TokenKind, PrefixParseFn] = {}
        self.register_prefix(TokenKind.IDENT, self.parse_identifier)
        self.register_prefix(TokenKind.INT, self.parse_integer_literal)
        self.register_prefix(TokenKind.TRUE, self.parse_boolean)
        self.register_prefix(TokenKind.FALSE, self.parse_boolean)
        self.register_prefix(TokenKind.BANG, self.parse_prefix_expression)
        self.register_prefix(TokenKind.MINUS, self.parse_prefix_expression)
        self.register_prefix(TokenKind.LPAREN, self.parse_grouped_expression)
        self.register_prefix(TokenKind.IF, self.parse_if_expression)
        self.register_prefix(TokenKind.FUNCTION, self.parse_function_literal)

        self.infix_parse_fns: dict[TokenKind, InfixParseFn] = {}
        for kind in PRECEDENCES:
            self.register_infix(kind, self.parse_infix_expression)
        self.register_infix(TokenKind.LPAREN, self.parse_call_expression)

        # Read two tokens, so curr_token and peek_token are both set.
        self.next_token()
        self.next_token()

    def register_prefix(self, kind: TokenKind, fn: PrefixParseFn) -> None:
        """
        Associate a prefix parse function with a token kind.
        """
        self.prefix_parse_fns[kind] = fn

    def register_infix(self, kind: TokenKind, fn: InfixParseFn) -> None:
        """
        Associate an infix parse function with a token kind.
        """
        self.infix_parse_fns[kind] = fn

    def next_token(self) -> None:
        """
        Shift the lookahead into the current token and pull a new lookahead.
        """
        self.curr_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def curr_token_is(self, kind: TokenKind) -> bool:
        return self.curr_token.kind == kind

    def peek_token_is(self, kind: TokenKind) -> bool:
        return self.peek_token.kind == kind

    def expect_peek(self, kind: TokenKind) -> bool:
        """
        Advance if the lookahead is of the expected kind, else record an error.

        Parameters:
            kind (TokenKind): The expected token kind.

        Returns:
            bool: True if the parser advanced.
        """
        if self.peek_token_is(kind):
            self.next_token()
            return True
        self.peek_error(kind)
        return False

    def peek_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.peek_token.kind, Precedence.LOWEST)

    def curr_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.curr_token.kind, Precedence.LOWEST)

    # Errors
    def peek_error(self, kind: TokenKind) -> None:
        msg = (
            f"expected next token to be {kind}, "
            f"got {self.peek_token.kind} instead"
        )
        logger.debug("Parse error on line %d: %s", self.peek_token.line, msg)
        self.errors.append(msg)

    def no_prefix_parse_fn_error(self, kind: TokenKind) -> None:
        msg = f"no prefix parse function for {kind} found"
        logger.debug("Parse error on line %d: %s", self.curr_token.line, msg)
        self.errors.append(msg)

    def parse_expression(self, precedence: Precedence) -> Optional[nodes.Expression]:
        """
        Parse an expression whose operators bind tighter than ``precedence``.

        The prefix handler for the current token produces the left operand.
        While the lookahead is an infix operator that binds tighter than
        ``precedence``, the parser advances onto it and lets its infix handler
        fold the left operand into a larger expression.

        Parameters:
            precedence (Precedence): The binding power of the enclosing operator.

        Returns:
            Expression | None: The parsed expression, or None on a parse error.
        """
        logger.debug(
            "Parsing expression at %s, precedence %s",
            self.curr_token.kind.name, precedence.name,
        )
        prefix = self.prefix_parse_fns.get(self.curr_token.kind)
        if prefix is None:
            self.no_prefix_parse_fn_error(self.curr_token.kind)
            return None
        left = prefix()

        while not self.peek_token_is(TokenKind.SEMICOLON) and precedence < self.peek_precedence():
            infix = self.infix_parse_fns.get(self.peek_token.kind)
            if infix is None or left is None:
                return left
            self.next_token()
            left = infix(left)

        return left

    # Expression wrappers
    def parse_identifier(self) -> nodes.Expression:
        """
        Parse an identifier reference.
        """
        return _expr.parse_identifier(self)

    def parse_integer_literal(self) -> Optional[nodes.Expression]:
        """
        Parse a base-10 integer literal.
        """
        return _expr.parse_integer_literal(self)

    def parse_boolean(self) -> nodes.Expression:
        """
        Parse a ``true`` or ``false`` literal.
        """
        return _expr.parse_boolean(self)

    def parse_prefix_expression(self) -> nodes.Expression:
        """
        Parse a unary ``!`` or ``-`` expression.
        """
        return _expr.parse_prefix_expression(self)

    def parse_infix_expression(self, left: nodes.Expression) -> nodes.Expression:
        """
        Parse a binary operator expression given its left operand.
        """
        return _expr.parse_infix_expression(self, left)

    def parse_grouped_expression(self) -> Optional[nodes.Expression]:
        """
        Parse a parenthesised expression.
        """
        return _expr.parse_grouped_expression(self)

    def parse_if_expression(self) -> Optional[nodes.Expression]:
        """
        Parse an ``if`` expression with an optional ``else`` branch.
        """
        return _expr.parse_if_expression(self)

    def parse_function_literal(self) -> Optional[nodes.Expression]:
        """
        Parse a ``fn`` literal.
        """
        return _expr.parse_function_literal(self)

    def parse_call_expression(self, function: nodes.Expression) -> nodes.Expression:
        """
        Parse the argument list of a call given the callee.
        """
        return _expr.parse_call_expression(self, function)

    # Statement wrappers
    def parse_statement(self) -> Optional[nodes.Statement]:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def parse_block_statement(self) -> nodes.BlockStatement:
        """
        Parse a block of statements enclosed in braces.
        """
        return _stmt.parse_block_statement(self)

    def parse_program(self) -> nodes.Program:
        """
        Parse the full input into a Program.

        Malformed statements are recorded in ``errors`` and dropped; parsing
        resumes at the next token so later errors are reported too.
        """
        logger.debug("Parsing program")
        program = nodes.Program()
        while not self.curr_token_is(TokenKind.EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                program.statements.append(stmt)
            self.next_token()
        logger.debug("Finished parsing with %d error(s)", len(self.errors))
        return program


def parse(source: str) -> tuple[nodes.Program, list[str]]:
    """
    Parse a string of source code.

    Parameters:
        source (str): The source code to parse.

    Returns:
        Program: The parsed program.
        list[str]: The parse errors, in the order they were found.
    """
    parser = Parser(Lexer(source))
    program = parser.parse_program()
    return program, parser.errors
