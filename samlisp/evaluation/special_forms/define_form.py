from samlisp import EvaluatorFn
from samlisp import Expression, LispValue
from samlisp.errors import ArityMismatch, MalformedSpecialForm
from samlisp.types.environment import Environment
from samlisp.types.symbol import Symbol

# Value returned by (def ...); callers should not rely on it.
DEF_RESULT = 0


def define_form(
    tail: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def name value)
    Binds in the current frame only; outer frames are never touched.
    """
    if len(tail) != 2:
        raise ArityMismatch("def", 2, len(tail))

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise MalformedSpecialForm("def", "first argument must be a symbol")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return DEF_RESULT
