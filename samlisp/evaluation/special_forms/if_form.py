from samlisp import EvaluatorFn
from samlisp import Expression, LispValue
from samlisp.errors import ArityMismatch, TypeMismatch
from samlisp.types.environment import Environment
from samlisp.types.value import render


def if_form(
    tail: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise ArityMismatch("if", 3, len(tail))

    cond = evaluate_fn(tail[0], env)
    # No truthiness: the condition must be a boolean
    if not isinstance(cond, bool):
        raise TypeMismatch("if", "a boolean condition", render(cond))

    if cond:
        return evaluate_fn(tail[1], env)
    return evaluate_fn(tail[2], env)
