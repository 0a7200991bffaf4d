"""Function values: native builtins and user-defined closures."""

from __future__ import annotations

from typing import Callable

from samlisp import Expression, LispValue, EvaluatorFn
from samlisp.types.environment import Environment
from samlisp.types.symbol import Symbol

# Native operation: (unevaluated operands, calling env, evaluator) -> value
NativeFn = Callable[[tuple, Environment, EvaluatorFn], LispValue]


class BuiltIn:
    """A native operation identified by its registered name.

    The native function receives its operands unevaluated and decides itself
    which of them to evaluate, and in what order.
    """

    __slots__ = ("name", "func")

    def __init__(self, name: str, func: NativeFn):
        self.name = name
        self.func = func

    def __call__(self, tail: tuple, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
        return self.func(tail, env, evaluate_fn)

    def __str__(self) -> str:
        return f"<built-in function '{self.name}'>"

    def __repr__(self) -> str:
        return str(self)


class Lambda:
    """A first-class closure with formal parameters, body, and captured env."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: tuple[Symbol, ...], body: Expression, env: Environment):
        self.params: tuple[Symbol, ...] = tuple(params)
        self.body: Expression = body
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.params)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Bind already-evaluated `args` to the formals in a new child of the captured env."""
        frame = Environment.child_of(self.env)
        for param, arg in zip(self.params, args):
            frame.define(param, arg)
        return frame

    def __str__(self) -> str:
        return "<function>"

    def __repr__(self) -> str:
        return f"<function ({' '.join(str(p) for p in self.params)})>"
