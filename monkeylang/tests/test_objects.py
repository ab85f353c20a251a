"""
Tests for Monkey runtime values.
"""
import dataclasses

import pytest

from monkeylang.objects import (
    FALSE,
    NULL,
    TRUE,
    Error,
    Integer,
    ObjectType,
    ReturnValue,
    is_truthy,
    native_bool_to_boolean,
)

from monkeylang.tests.utils import eval_source


@pytest.mark.parametrize(
    "value, text, kind",
    [
        (Integer(-3), "-3", ObjectType.INTEGER),
        (TRUE, "true", ObjectType.BOOLEAN),
        (FALSE, "false", ObjectType.BOOLEAN),
        (NULL, "null", ObjectType.NULL),
        (ReturnValue(Integer(1)), "1", ObjectType.RETURN_VALUE),
        (Error("boom"), "ERROR: boom", ObjectType.ERROR),
    ],
)
def test_inspect_and_type(value, text, kind):
    assert value.inspect() == text
    assert value.type() == kind


def test_function_inspect():
    fn = eval_source("fn(a, b) { a + b }")
    assert fn.inspect() == "fn(a, b) { (a + b) }"
    assert fn.type() == ObjectType.FUNCTION


def test_booleans_are_singletons():
    assert native_bool_to_boolean(True) is TRUE
    assert native_bool_to_boolean(False) is FALSE
    assert eval_source("1 < 2") is TRUE


def test_truthiness():
    assert not is_truthy(FALSE)
    assert not is_truthy(NULL)
    assert is_truthy(TRUE)
    assert is_truthy(Integer(0))


def test_values_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Integer(1).value = 2
