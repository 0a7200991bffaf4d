"""Built-in functions for the samlisp runtime environment.

This module defines the strict arithmetic and comparison builtins and the
registration helpers that build a session's default environment. Every
builtin receives its operands unevaluated; the strict ones below evaluate
all of them left to right and type-check against the kind of the first.
Integers and floats never mix.
"""
from __future__ import annotations

import math
import operator
from typing import Callable

from samlisp import EvaluatorFn, Expression, LispValue
from samlisp.errors import ArityMismatch, DivisionByZero, TypeMismatch
from samlisp.evaluation.special_forms import SPECIAL_FORMS
from samlisp.types.environment import Environment
from samlisp.types.function import BuiltIn
from samlisp.types.symbol import Symbol
from samlisp.types.value import BOOL, FLOAT, INTEGER, kind_of, render, wrap_i64

NUMERIC = (INTEGER, FLOAT)
SCALAR = (BOOL, INTEGER, FLOAT)


def _describe(kinds: tuple[str, ...]) -> str:
    return " or ".join(kinds)


def _evaluate_homogeneous(
    name: str,
    tail: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    allowed: tuple[str, ...],
) -> tuple[str, list[LispValue]]:
    """Evaluate operands left to right, failing on the first kind mismatch.

    The first operand fixes the kind; it must itself be one of `allowed`.
    """
    first = evaluate_fn(tail[0], env)
    kind = kind_of(first)
    if kind not in allowed:
        raise TypeMismatch(name, _describe(allowed), render(first))
    values = [first]
    for item in tail[1:]:
        value = evaluate_fn(item, env)
        if kind_of(value) != kind:
            raise TypeMismatch(name, kind, render(value))
        values.append(value)
    return kind, values


# -------------------------------
# Arithmetic
# -------------------------------
def int_div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    if b == 0:
        raise DivisionByZero("/")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def float_div(a: float, b: float) -> float:
    """IEEE division: dividing by zero gives a signed infinity or nan."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def arithmetic_builtin(
    name: str,
    int_op: Callable[[int, int], int],
    float_op: Callable[[float, float], float],
):
    """Build a left-folding arithmetic builtin over one numeric kind."""

    def builtin(tail: tuple[Expression, ...], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
        if not tail:
            raise ArityMismatch(name, 1, 0, at_least=True)
        kind, values = _evaluate_homogeneous(name, tail, env, evaluate_fn, NUMERIC)
        result = values[0]
        if kind == INTEGER:
            for v in values[1:]:
                result = wrap_i64(int_op(result, v))
        else:
            for v in values[1:]:
                result = float_op(result, v)
        return result

    builtin.__name__ = f"arith_{int_op.__name__}"
    return builtin


add = arithmetic_builtin("+", operator.add, operator.add)
sub = arithmetic_builtin("-", operator.sub, operator.sub)
mul = arithmetic_builtin("*", operator.mul, operator.mul)
div = arithmetic_builtin("/", int_div, float_div)


# -------------------------------
# Equality and comparison
# -------------------------------
def equals(tail: tuple[Expression, ...], env: Environment, evaluate_fn: EvaluatorFn) -> bool:
    """(= a b ...): true iff every operand equals the first; all of one scalar kind."""
    if len(tail) < 2:
        raise ArityMismatch("=", 2, len(tail), at_least=True)
    _, values = _evaluate_homogeneous("=", tail, env, evaluate_fn, SCALAR)
    first = values[0]
    return all(v == first for v in values[1:])


def less_than(tail: tuple[Expression, ...], env: Environment, evaluate_fn: EvaluatorFn) -> bool:
    """(< a b): strict less-than of two integers or two floats."""
    if len(tail) != 2:
        raise ArityMismatch("<", 2, len(tail))
    _, (a, b) = _evaluate_homogeneous("<", tail, env, evaluate_fn, NUMERIC)
    return a < b


BUILTINS = {
    **SPECIAL_FORMS,
    "=": equals,
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "<": less_than,
}


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    env.update({Symbol(name): BuiltIn(name, func) for name, func in BUILTINS.items()})


def default_environment() -> Environment:
    """Create a root environment holding every builtin.

    Each call returns an independent session environment.
    """
    env = Environment()
    register(env)
    return env


new_default_environment = default_environment
