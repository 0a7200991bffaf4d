"""Application engine for samlisp.

This module centralizes function application semantics for the interpreter:
- Builtins receive their operands unevaluated together with the calling
  environment, so special forms and strict operations share one protocol.
- Lambdas are applied by checking arity, evaluating operands in the caller's
  environment, and evaluating the body in a fresh child of the environment the
  closure captured when it was created (lexical scoping).
"""

from __future__ import annotations

from samlisp import Expression, LispValue, EvaluatorFn
from samlisp.errors import ArityMismatch, NotAFunction
from samlisp.types.environment import Environment
from samlisp.types.function import BuiltIn, Lambda
from samlisp.types.value import render


def apply_lambda(
    fn: Lambda,
    tail: tuple[Expression, ...],
    caller_env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a user-defined function to unevaluated operand expressions.

    Arity is checked before any operand is evaluated, so a mismatched call
    neither evaluates the body nor binds any parameter.
    """
    if len(tail) != fn.arity:
        raise ArityMismatch(render(fn), fn.arity, len(tail))
    args = [evaluate_fn(arg, caller_env) for arg in tail]
    frame = fn.extend_env(args)
    return evaluate_fn(fn.body, frame)


def apply(
    head: LispValue,
    tail: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply an evaluated operator to its unevaluated operands.

    - For BuiltIn, hand over the operands and the calling environment.
    - For Lambda, defer to apply_lambda.
    - Otherwise, raise NotAFunction.
    """
    if isinstance(head, BuiltIn):
        return head(tail, env, evaluate_fn)
    if isinstance(head, Lambda):
        return apply_lambda(head, tail, env, evaluate_fn)
    raise NotAFunction(render(head))
