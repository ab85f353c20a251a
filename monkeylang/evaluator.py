"""Evaluator.

This is a tree-walk evaluator for the AST produced by the parser. It supports
integer and boolean arithmetic, ``let`` bindings, conditionals, first-class
functions with closures, and ``return``.

1. Execution Model
`evaluate()` is a structural recursion over AST nodes, dispatching on the node
class. It keeps no state of its own; everything it needs is in the node and
the environment passed in.

2. Environment
Bindings live in `monkeylang.environment.Environment` objects. A function
value holds a reference to the environment it was defined in, and each call
runs its body in a fresh scope enclosed by that environment.

3. Return
A ``return`` statement produces a `ReturnValue` wrapper. Blocks, operators,
``let`` and argument lists stop at the first wrapper and hand it up
unchanged; the function call (or the program) that owns the block unwraps it.

4. Error Handling
Evaluation failures produce an `Error` value. Every composite step checks its
sub-results and hands an error up untouched, so the first error reaches the
caller as the overall result.


File: evaluator.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
from typing import Optional

from monkeylang import nodes
from monkeylang.environment import Environment
from monkeylang.exceptions import UnknownNodeException
from monkeylang.objects import (
    FALSE,
    NULL,
    TRUE,
    Error,
    Function,
    Integer,
    Object,
    ObjectType,
    ReturnValue,
    is_truthy,
    native_bool_to_boolean,
)

logger = logging.getLogger(__name__)

INT64_BITS = 64


def evaluate(node: nodes.Node, env: Environment) -> Object:
    """
    Evaluate an AST node in the given environment.

    Parameters:
        node (Node): The node to evaluate.
        env (Environment): The scope for lookups and ``let`` bindings.

    Returns:
        Object: The resulting value. An `Error` if evaluation failed.

    Raises:
        UnknownNodeException: If ``node`` is not an AST node.
    """
    match node:
        # Statements
        case nodes.Program():
            return _eval_program(node, env)
        case nodes.BlockStatement():
            return _eval_block_statement(node, env)
        case nodes.ExpressionStatement():
            return _eval_optional(node.expression, env)
        case nodes.ReturnStatement():
            value = _eval_optional(node.value, env)
            if _is_unwinding(value):
                return value
            return ReturnValue(value)
        case nodes.LetStatement():
            value = _eval_optional(node.value, env)
            if _is_unwinding(value):
                return value
            env.set(node.name.value, value)
            return NULL

        # Literals
        case nodes.IntegerLiteral():
            return Integer(node.value)
        case nodes.Boolean():
            return native_bool_to_boolean(node.value)

        # Expressions
        case nodes.PrefixExpression():
            right = _eval_optional(node.right, env)
            if _is_unwinding(right):
                return right
            return _eval_prefix_expression(node.operator, right)
        case nodes.InfixExpression():
            left = evaluate(node.left, env)
            if _is_unwinding(left):
                return left
            right = _eval_optional(node.right, env)
            if _is_unwinding(right):
                return right
            return _eval_infix_expression(node.operator, left, right)
        case nodes.IfExpression():
            return _eval_if_expression(node, env)
        case nodes.Identifier():
            return _eval_identifier(node, env)
        case nodes.FunctionLiteral():
            return Function(node.parameters, node.body, env)
        case nodes.CallExpression():
            function = evaluate(node.function, env)
            if _is_unwinding(function):
                return function
            args = _eval_expressions(node.arguments, env)
            if len(args) == 1 and _is_unwinding(args[0]):
                return args[0]
            return _apply_function(function, args)

    raise UnknownNodeException(node, getattr(getattr(node, "token", None), "line", None))


def _is_unwinding(obj: Object) -> bool:
    # A return or an error stops every enclosing step until a call or the
    # program takes it.
    return isinstance(obj, (ReturnValue, Error))


def _eval_optional(node: Optional[nodes.Node], env: Environment) -> Object:
    # Parts left empty by a failed parse evaluate to "no value".
    if node is None:
        return NULL
    return evaluate(node, env)


def _eval_program(program: nodes.Program, env: Environment) -> Object:
    result: Object = NULL
    for stmt in program.statements:
        result = evaluate(stmt, env)
        if isinstance(result, ReturnValue):
            return result.value
        if isinstance(result, Error):
            return result
    return result


def _eval_block_statement(block: nodes.BlockStatement, env: Environment) -> Object:
    """
    Evaluate the statements of a block in order.

    Unlike `_eval_program`, a `ReturnValue` is handed up still wrapped so that
    enclosing blocks stop too; only the owning call or program unwraps it.
    """
    result: Object = NULL
    for stmt in block.statements:
        result = evaluate(stmt, env)
        if isinstance(result, (ReturnValue, Error)):
            return result
    return result


def _eval_expressions(exprs: list[nodes.Expression], env: Environment) -> list[Object]:
    """
    Evaluate expressions left to right.

    Returns:
        list[Object]: The values, or a single-element list holding the first
        error or unwinding return.
    """
    result = []
    for expr in exprs:
        evaluated = _eval_optional(expr, env)
        if _is_unwinding(evaluated):
            return [evaluated]
        result.append(evaluated)
    return result


def _eval_prefix_expression(operator: str, right: Object) -> Object:
    match operator:
        case "!":
            return FALSE if is_truthy(right) else TRUE
        case "-":
            if not isinstance(right, Integer):
                return Error(f"unknown operator: -{right.type()}")
            return Integer(_wrap_int64(-right.value))
    return Error(f"unknown operator: {operator}{right.type()}")


def _eval_infix_expression(operator: str, left: Object, right: Object) -> Object:
    if isinstance(left, Integer) and isinstance(right, Integer):
        return _eval_integer_infix_expression(operator, left, right)
    if left.type() != right.type():
        return Error(f"type mismatch: {left.type()} {operator} {right.type()}")
    if left.type() == ObjectType.BOOLEAN:
        # Booleans are singletons, so identity is equality.
        if operator == "==":
            return native_bool_to_boolean(left is right)
        if operator == "!=":
            return native_bool_to_boolean(left is not right)
    return Error(f"unknown operator: {left.type()} {operator} {right.type()}")


def _eval_integer_infix_expression(operator: str, left: Integer, right: Integer) -> Object:
    lhs = left.value
    rhs = right.value
    match operator:
        # Arithmetic
        case "+":
            return Integer(_wrap_int64(lhs + rhs))
        case "-":
            return Integer(_wrap_int64(lhs - rhs))
        case "*":
            return Integer(_wrap_int64(lhs * rhs))
        case "/":
            if rhs == 0:
                return Error("division by zero")
            quotient = abs(lhs) // abs(rhs)
            if (lhs < 0) != (rhs < 0):
                quotient = -quotient
            return Integer(_wrap_int64(quotient))
        # Comparison
        case "<":
            return native_bool_to_boolean(lhs < rhs)
        case ">":
            return native_bool_to_boolean(lhs > rhs)
        case "==":
            return native_bool_to_boolean(lhs == rhs)
        case "!=":
            return native_bool_to_boolean(lhs != rhs)
    return Error(f"unknown operator: {left.type()} {operator} {right.type()}")


def _wrap_int64(value: int) -> int:
    """Wrap ``value`` into the signed 64-bit range, two's complement style."""
    value &= (1 << INT64_BITS) - 1
    if value >= 1 << (INT64_BITS - 1):
        value -= 1 << INT64_BITS
    return value


def _eval_if_expression(node: nodes.IfExpression, env: Environment) -> Object:
    condition = _eval_optional(node.condition, env)
    if _is_unwinding(condition):
        return condition
    if is_truthy(condition):
        return _eval_optional(node.consequence, env)
    if node.alternative is not None:
        return evaluate(node.alternative, env)
    return NULL


def _eval_identifier(node: nodes.Identifier, env: Environment) -> Object:
    value = env.get(node.value)
    if value is None:
        return Error(f"identifier not found: {node.value}")
    return value


def _apply_function(function: Object, args: list[Object]) -> Object:
    """
    Call a function value with already evaluated arguments.

    The body runs in a fresh scope enclosed by the function's defining
    environment. Nothing is bound unless the argument count matches exactly.
    """
    if not isinstance(function, Function):
        return Error(f"not a function: {function.type()}")
    if len(args) != len(function.parameters):
        return Error(
            f"wrong number of arguments: "
            f"want={len(function.parameters)}, got={len(args)}"
        )

    logger.debug("Calling %s with %d argument(s)", function.inspect(), len(args))
    extended_env = Environment.new_enclosed(function.env)
    for param, arg in zip(function.parameters, args):
        extended_env.set(param.value, arg)

    evaluated = _eval_optional(function.body, extended_env)
    if isinstance(evaluated, ReturnValue):
        return evaluated.value
    return evaluated
