"""
Expression parsing utilities for Monkey.

These functions operate on a `monkeylang.parser.parser.Parser` instance and
implement the prefix and infix handlers used by the Pratt loop in
`Parser.parse_expression`. On entry the parser's current token is the token
the handler was registered for; on exit it is the last token of the parsed
expression.
"""

from typing import TYPE_CHECKING, Optional

from monkeylang import nodes
from monkeylang.tokens import TokenKind

from .precedence import Precedence

if TYPE_CHECKING:
    from monkeylang.parser import Parser

INT64_MAX = 2 ** 63 - 1
INT64_DIGITS = len(str(INT64_MAX))


# ---- Prefix handlers ----

def parse_identifier(parser: 'Parser') -> nodes.Expression:
    """Parse an identifier reference."""
    tok = parser.curr_token
    return nodes.Identifier(tok, tok.literal)


def parse_integer_literal(parser: 'Parser') -> Optional[nodes.Expression]:
    """Parse an integer literal that fits in a signed 64-bit integer."""
    tok = parser.curr_token
    digits = tok.literal.lstrip("0") or "0"
    # Compare lengths first so huge literals never reach int().
    value = int(digits) if len(digits) <= INT64_DIGITS else None
    if value is None or value > INT64_MAX:
        parser.errors.append(f"could not parse {tok.literal!r} as integer")
        return None
    return nodes.IntegerLiteral(tok, value)


def parse_boolean(parser: 'Parser') -> nodes.Expression:
    """Parse ``true`` or ``false``."""
    tok = parser.curr_token
    return nodes.Boolean(tok, tok.kind == TokenKind.TRUE)


def parse_prefix_expression(parser: 'Parser') -> nodes.Expression:
    """Parse ``!<expr>`` or ``-<expr>``."""
    tok = parser.curr_token
    expression = nodes.PrefixExpression(tok, tok.literal)
    parser.next_token()
    expression.right = parser.parse_expression(Precedence.PREFIX)
    return expression


def parse_grouped_expression(parser: 'Parser') -> Optional[nodes.Expression]:
    """Parse ``( <expr> )``."""
    parser.next_token()
    expression = parser.parse_expression(Precedence.LOWEST)
    if not parser.expect_peek(TokenKind.RPAREN):
        return None
    return expression


def parse_if_expression(parser: 'Parser') -> Optional[nodes.Expression]:
    """
    Parse an if expression.

    Syntax:
        if ( <condition> ) { <consequence> } [ else { <alternative> } ]
    """
    expression = nodes.IfExpression(parser.curr_token)

    if not parser.expect_peek(TokenKind.LPAREN):
        return None
    parser.next_token()
    expression.condition = parser.parse_expression(Precedence.LOWEST)

    if not parser.expect_peek(TokenKind.RPAREN):
        return None
    if not parser.expect_peek(TokenKind.LBRACE):
        return None
    expression.consequence = parser.parse_block_statement()

    if parser.peek_token_is(TokenKind.ELSE):
        parser.next_token()
        if not parser.expect_peek(TokenKind.LBRACE):
            return None
        expression.alternative = parser.parse_block_statement()

    return expression


def _parse_function_parameters(parser: 'Parser') -> Optional[list[nodes.Identifier]]:
    """Parse a comma separated parameter list up to and including ``)``."""
    identifiers: list[nodes.Identifier] = []

    if parser.peek_token_is(TokenKind.RPAREN):
        parser.next_token()
        return identifiers

    if not parser.expect_peek(TokenKind.IDENT):
        return None
    identifiers.append(nodes.Identifier(parser.curr_token, parser.curr_token.literal))

    while parser.peek_token_is(TokenKind.COMMA):
        parser.next_token()
        # A trailing comma before the closing parenthesis is allowed.
        if parser.peek_token_is(TokenKind.RPAREN):
            break
        if not parser.expect_peek(TokenKind.IDENT):
            return None
        identifiers.append(nodes.Identifier(parser.curr_token, parser.curr_token.literal))

    if not parser.expect_peek(TokenKind.RPAREN):
        return None
    return identifiers


def parse_function_literal(parser: 'Parser') -> Optional[nodes.Expression]:
    """
    Parse a function literal.

    Syntax:
        fn ( <identifier>, ... ) { <body> }
    """
    literal = nodes.FunctionLiteral(parser.curr_token)

    if not parser.expect_peek(TokenKind.LPAREN):
        return None
    parameters = _parse_function_parameters(parser)
    if parameters is None:
        return None
    literal.parameters = parameters

    if not parser.expect_peek(TokenKind.LBRACE):
        return None
    literal.body = parser.parse_block_statement()
    return literal


# ---- Infix handlers ----

def parse_infix_expression(parser: 'Parser', left: nodes.Expression) -> nodes.Expression:
    """Parse ``<left> <op> <right>``."""
    tok = parser.curr_token
    expression = nodes.InfixExpression(tok, left, tok.literal)
    precedence = parser.curr_precedence()
    parser.next_token()
    # Parsing the right operand at the operator's own precedence keeps
    # operators of equal precedence left-associative.
    expression.right = parser.parse_expression(precedence)
    return expression


def _parse_call_arguments(parser: 'Parser') -> Optional[list[nodes.Expression]]:
    """Parse a comma separated argument list up to and including ``)``."""
    args: list[nodes.Expression] = []

    if parser.peek_token_is(TokenKind.RPAREN):
        parser.next_token()
        return args

    parser.next_token()
    args.append(parser.parse_expression(Precedence.LOWEST))

    while parser.peek_token_is(TokenKind.COMMA):
        parser.next_token()
        parser.next_token()
        args.append(parser.parse_expression(Precedence.LOWEST))

    if not parser.expect_peek(TokenKind.RPAREN):
        return None
    return args


def parse_call_expression(parser: 'Parser', function: nodes.Expression) -> nodes.Expression:
    """Parse ``<function>( <argument>, ... )``."""
    expression = nodes.CallExpression(parser.curr_token, function)
    arguments = _parse_call_arguments(parser)
    if arguments is not None:
        expression.arguments = arguments
    return expression
