"""Core evaluator for the samlisp interpreter.

Evaluation is plain recursive descent over the expression tree. There is no
special-form table: special forms are builtins that receive their operands
unevaluated (see `samlisp.evaluation.special_forms`).
"""

from __future__ import annotations

from samlisp import Expression, LispValue
from samlisp.errors import EmptyApplication
from samlisp.evaluation.apply import apply
from samlisp.types.environment import Environment
from samlisp.types.symbol import Symbol


def evaluate(expr: Expression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env`.

    Raises an EvalError subclass on failure. Unbounded recursion in user code
    surfaces as Python's RecursionError.
    """
    match expr:
        # Literals are self-evaluating (bool is matched by int() too)
        case bool() | int() | float():
            return expr

        case Symbol():
            return env.lookup(expr)

        case tuple() if not expr:
            raise EmptyApplication()

        case tuple():
            fn = evaluate(expr[0], env)
            return apply(fn, expr[1:], env, evaluate)

    raise TypeError(f"Not an expression: {expr!r}")
