"""Special forms for the samlisp evaluator.

Special forms are not dispatched by the evaluator. Each handler here is
installed into the default environment as an ordinary BuiltIn; like every
builtin it receives its operands unevaluated, and unlike the strict builtins
it chooses which of them to evaluate.
"""

from samlisp.evaluation.special_forms.define_form import define_form
from samlisp.evaluation.special_forms.lambda_form import lambda_form
from samlisp.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    "def": define_form,
    "fn": lambda_form,
    "if": if_form,
}
