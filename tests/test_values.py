import pytest

from samlisp.builtin.env_builtin import add
from samlisp.types.environment import Environment
from samlisp.types.function import BuiltIn, Lambda
from samlisp.types.symbol import Symbol
from samlisp.types.value import kind_of, render, wrap_i64, I64_MAX, I64_MIN


@pytest.mark.parametrize(
    "value,expected",
    [
        (True, "true"),
        (False, "false"),
        (42, "42"),
        (-3, "-3"),
        (2.5, "2.5"),
        (1.0, "1.0"),
        ([], "()"),
        ([1, [2, 3], True], "(1 (2 3) true)"),
        ([1.5, False], "(1.5 false)"),
    ]
)
def test_render(value, expected):
    assert render(value) == expected


def test_render_functions():
    assert render(BuiltIn("+", add)) == "<built-in function '+'>"
    assert render(Lambda((Symbol("x"),), Symbol("x"), Environment())) == "<function>"


def test_lambda_repr_lists_params():
    lam = Lambda((Symbol("a"), Symbol("b")), 1, Environment())
    assert repr(lam) == "<function (a b)>"
    assert lam.arity == 2


def test_lambda_extend_env_binds_in_child_of_captured_env():
    captured = Environment()
    lam = Lambda((Symbol("a"), Symbol("b")), 1, captured)
    frame = lam.extend_env([1, 2])
    assert frame.outer is captured
    assert frame.vars == {Symbol("a"): 1, Symbol("b"): 2}
    assert captured.vars == {}


@pytest.mark.parametrize(
    "value,kind",
    [
        (True, "bool"),
        (False, "bool"),
        (0, "integer"),
        (0.0, "float"),
        ([], "list"),
        (BuiltIn("+", add), "function"),
        (Lambda((), 1, Environment()), "function"),
    ]
)
def test_kind_of(value, kind):
    assert kind_of(value) == kind


@pytest.mark.parametrize("value", ["text", None, (1, 2), Symbol("x")])
def test_non_values_are_rejected(value):
    with pytest.raises(TypeError):
        kind_of(value)
    with pytest.raises(TypeError):
        render(value)


@pytest.mark.parametrize(
    "n,expected",
    [
        (0, 0),
        (I64_MAX, I64_MAX),
        (I64_MIN, I64_MIN),
        (I64_MAX + 1, I64_MIN),
        (I64_MIN - 1, I64_MAX),
        (2 ** 64 + 5, 5),
    ]
)
def test_wrap_i64(n, expected):
    assert wrap_i64(n) == expected


def test_symbols_are_interned_and_hashable():
    assert Symbol("abc") == Symbol("abc")
    assert Symbol("abc") != "abc"
    assert len({Symbol("a"), Symbol("a"), Symbol("b")}) == 2
    assert str(Symbol("abc")) == "abc"
    assert repr(Symbol("abc")) == "Symbol('abc')"
