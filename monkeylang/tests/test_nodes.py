"""
Tests for AST rendering in Monkey.
"""
import pytest

from monkeylang import nodes
from monkeylang.tokens import Token, TokenKind

from monkeylang.tests.utils import parse_source


def test_program_string_from_hand_built_tree():
    """
    Test rendering a tree built without the parser.
    """
    program = nodes.Program([
        nodes.LetStatement(
            Token(TokenKind.LET, "let"),
            nodes.Identifier(Token(TokenKind.IDENT, "my_var"), "my_var"),
            nodes.Identifier(Token(TokenKind.IDENT, "another_var"), "another_var"),
        ),
    ])
    assert str(program) == "let my_var = another_var;"
    assert program.token_literal() == "let"


def test_empty_program():
    program = nodes.Program()
    assert str(program) == ""
    assert program.token_literal() == ""


def test_statement_and_expression_are_disjoint():
    for cls in (nodes.LetStatement, nodes.ReturnStatement,
                nodes.ExpressionStatement, nodes.BlockStatement):
        assert issubclass(cls, nodes.Statement)
        assert not issubclass(cls, nodes.Expression)
    for cls in (nodes.Identifier, nodes.IntegerLiteral, nodes.Boolean,
                nodes.PrefixExpression, nodes.InfixExpression, nodes.IfExpression,
                nodes.FunctionLiteral, nodes.CallExpression):
        assert issubclass(cls, nodes.Expression)
        assert not issubclass(cls, nodes.Statement)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("if (x < y) { x } else { y }", "if ((x < y)) { x } else { y }"),
        ("if (x) { }", "if (x) { }"),
        ("fn(a, b) { return a + b; }", "fn(a, b) { return (a + b); }"),
        ("fn() { 1 }()", "fn() { 1 }()"),
        ("let f = fn(x) { x * 2 };", "let f = fn(x) { (x * 2) };"),
    ],
)
def test_compound_rendering(source, expected):
    assert str(parse_source(source)) == expected


@pytest.mark.parametrize(
    "source",
    [
        "5 + 5 * 10",
        "-a * b",
        "a + b - c",
        "!(true == false)",
        "let x = 1 + 2 * 3;",
        "return add(1, 2 * 3);",
        "if (x < y) { x } else { y }",
        "if (!x) { return 1; }",
        "let adder = fn(x) { fn(y) { x + y } };",
        "let max = fn(a, b) { if (a > b) { a } else { b } }; max(1, 2)",
        "fn(x) { x }(5)",
    ],
)
def test_rendering_is_stable_when_reparsed(source):
    """
    Test that parsing a rendering gives a tree with the same rendering.
    """
    rendered = str(parse_source(source))
    assert str(parse_source(rendered)) == rendered


def test_adjacent_expression_statements_reparse_as_a_call():
    """
    Statements render without separators, so two adjacent expression
    statements read back as a single call expression.
    """
    rendered = str(parse_source("x; -1"))
    assert rendered == "x(-1)"
    assert str(parse_source(rendered)) == "x((-1))"
