from samlisp import EvaluatorFn
from samlisp import Expression, LispValue
from samlisp.errors import ArityMismatch, MalformedSpecialForm
from samlisp.types.environment import Environment
from samlisp.types.function import Lambda
from samlisp.types.symbol import Symbol


def lambda_form(
    tail: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (fn (params...) body)
    The body is stored unevaluated; the closure captures `env`.
    """
    if len(tail) != 2:
        raise ArityMismatch("fn", 2, len(tail))

    params, body = tail
    if not isinstance(params, tuple):
        raise MalformedSpecialForm("fn", "parameter list must be a list")
    for p in params:
        if not isinstance(p, Symbol):
            raise MalformedSpecialForm("fn", f"parameter {p!r} is not a symbol")

    return Lambda(params, body, env)
