"""
Tests for first-class functions and closures in Monkey.
"""
from monkeylang.environment import Environment
from monkeylang.objects import Function, Integer

from monkeylang.tests.utils import eval_source


def test_closure_reads_outer_parameter():
    source = (
        "let new_adder = fn(x) { fn(y) { x + y } };"
        "let add_two = new_adder(2);"
        "add_two(3)"
    )
    assert eval_source(source) == Integer(5)


def test_each_call_gets_its_own_binding():
    """
    Test that two closures from the same factory do not share parameters.
    """
    env = Environment.new_root()
    eval_source(
        "let new_adder = fn(x) { fn(y) { x + y } };"
        "let add_two = new_adder(2);"
        "let add_ten = new_adder(10);",
        env,
    )
    assert eval_source("add_two(1)", env) == Integer(3)
    assert eval_source("add_ten(1)", env) == Integer(11)
    assert eval_source("add_two(1)", env) == Integer(3)


def test_closure_outlives_defining_call():
    env = Environment.new_root()
    eval_source("let make = fn() { let secret = 42; fn() { secret } }; let get = make();", env)
    get = env.get("get")
    assert isinstance(get, Function)
    assert get.env.get("secret") == Integer(42)
    assert eval_source("get()", env) == Integer(42)


def test_closure_captures_environment_by_reference():
    """
    Test that bindings added after a function is defined are visible to it.
    """
    source = (
        "let f = fn() { later };"
        "let later = 7;"
        "f()"
    )
    assert eval_source(source) == Integer(7)


def test_functions_as_arguments():
    source = (
        "let add = fn(a, b) { a + b };"
        "let apply_func = fn(a, b, func) { func(a, b) };"
        "apply_func(2, 2, add);"
    )
    assert eval_source(source) == Integer(4)


def test_higher_order_composition():
    source = (
        "let twice = fn(f) { fn(x) { f(f(x)) } };"
        "let inc = fn(x) { x + 1 };"
        "twice(twice(inc))(0)"
    )
    assert eval_source(source) == Integer(4)


def test_functions_have_fresh_env():
    """
    Test that a callee sees its defining scope, not its caller's.
    """
    source = (
        "let inner = fn() { x };"
        "let outer = fn() { let x = 2; inner() };"
        "outer()"
    )
    result = eval_source(source)
    assert result.inspect() == "ERROR: identifier not found: x"
