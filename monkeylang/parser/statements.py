"""Statement parsing utilities for Monkey.

These functions operate on a `monkeylang.parser.parser.Parser` instance and
handle the statement forms of the language: ``let`` bindings, ``return``,
bare expressions and brace-delimited blocks.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
from typing import TYPE_CHECKING, Optional

from monkeylang import nodes
from monkeylang.tokens import TokenKind

from .precedence import Precedence

if TYPE_CHECKING:
    from monkeylang.parser import Parser

logger = logging.getLogger(__name__)


def parse_statement(parser: 'Parser') -> Optional[nodes.Statement]:
    """
    Parse a single statement.

    Args:
        parser: The parser instance.

    Returns:
        Statement | None: The statement, or None if it was malformed.
    """
    kind = parser.curr_token.kind
    if kind == TokenKind.LET:
        return parse_let_statement(parser)
    if kind == TokenKind.RETURN:
        return parse_return_statement(parser)
    return parse_expression_statement(parser)


def parse_let_statement(parser: 'Parser') -> Optional[nodes.LetStatement]:
    """
    Parse a 'let' statement.

    Syntax:
        let <identifier> = <expression> [;]

    Args:
        parser: The parser instance.

    Returns:
        LetStatement | None: The statement, or None if the name or ``=`` is missing.
    """
    logger.debug("Parsing 'let' statement on line %d", parser.curr_token.line)
    tok = parser.curr_token

    if not parser.expect_peek(TokenKind.IDENT):
        return None
    name = nodes.Identifier(parser.curr_token, parser.curr_token.literal)

    if not parser.expect_peek(TokenKind.ASSIGN):
        return None

    parser.next_token()
    stmt = nodes.LetStatement(tok, name, parser.parse_expression(Precedence.LOWEST))

    if parser.peek_token_is(TokenKind.SEMICOLON):
        parser.next_token()
    return stmt


def parse_return_statement(parser: 'Parser') -> nodes.ReturnStatement:
    """
    Parse a 'return' statement.

    Syntax:
        return <expression> [;]
    """
    logger.debug("Parsing 'return' statement on line %d", parser.curr_token.line)
    stmt = nodes.ReturnStatement(parser.curr_token)
    parser.next_token()
    stmt.value = parser.parse_expression(Precedence.LOWEST)

    if parser.peek_token_is(TokenKind.SEMICOLON):
        parser.next_token()
    return stmt


def parse_expression_statement(parser: 'Parser') -> nodes.ExpressionStatement:
    """
    Parse a statement made of a single expression.

    Syntax:
        <expression> [;]
    """
    logger.debug("Parsing expression statement on line %d", parser.curr_token.line)
    stmt = nodes.ExpressionStatement(parser.curr_token)
    stmt.expression = parser.parse_expression(Precedence.LOWEST)

    if parser.peek_token_is(TokenKind.SEMICOLON):
        parser.next_token()
    return stmt


def parse_block_statement(parser: 'Parser') -> nodes.BlockStatement:
    """
    Parse a block of statements enclosed in braces.

    Syntax:
        { <statement>* }

    The current token is the opening brace on entry and the closing brace
    on exit. An unterminated block is recorded as an error.
    """
    block = nodes.BlockStatement(parser.curr_token)
    parser.next_token()

    while not parser.curr_token_is(TokenKind.RBRACE) and not parser.curr_token_is(TokenKind.EOF):
        stmt = parser.parse_statement()
        if stmt is not None:
            block.statements.append(stmt)
        parser.next_token()

    if parser.curr_token_is(TokenKind.EOF):
        parser.errors.append(
            f"expected next token to be {TokenKind.RBRACE}, got {TokenKind.EOF} instead"
        )
    return block
