from __future__ import annotations
import logging
from typing import Callable, Optional

from samlisp import Expression, LispValue
from samlisp.builtin.env_builtin import default_environment
from samlisp.reader.parser import read_all
from samlisp.types.environment import Environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating samlisp code.
    Maintains one root Environment across calls, so definitions persist for
    the lifetime of the session. Sessions are independent of each other.
    """

    def __init__(
        self,
        env: Optional[Environment] = None,
        eval_fn: Callable[[Expression, Environment], LispValue] | None = None,
    ):
        if eval_fn is None:
            from samlisp.evaluation.evaluator import evaluate
            eval_fn = evaluate
        self.eval_fn = eval_fn
        self.env: Environment = env if env is not None else default_environment()

    def eval_expr(self, expr: Expression) -> LispValue:
        logger.debug("evaluating %r", expr)
        result = self.eval_fn(expr, self.env)
        logger.debug("result %r", result)
        return result

    def eval(self, code: str) -> LispValue | None:
        """Evaluate every form in `code` and return the value of the last one.

        The whole source is read before anything runs, so a ParseError
        anywhere in `code` means no form is evaluated. Returns None when
        `code` holds no forms. The first failing form stops evaluation;
        definitions made by earlier forms remain in place.
        """
        result: LispValue | None = None
        for expr in read_all(code):
            result = self.eval_expr(expr)
        return result
