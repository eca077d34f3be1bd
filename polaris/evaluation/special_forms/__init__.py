"""Special forms for the Polaris evaluator.

Maps head-symbol names to handler functions that receive the unevaluated
operands and decide themselves what to evaluate. Each Evaluator takes its
own copy of this table, so hosts can add forms to one evaluator without
touching any other.
"""

from polaris import SExpression, LispValue, EvaluatorFn
from polaris.types.environment import Environment
from polaris.evaluation.special_forms.quote_forms import quote_form
from polaris.evaluation.special_forms.if_form import if_form
from polaris.evaluation.special_forms.set_form import set_form
from polaris.evaluation.special_forms.define_form import define_form
from polaris.evaluation.special_forms.lambda_form import lambda_form
from polaris.evaluation.special_forms.begin_form import begin_form

from typing import Callable

SpecialForm = Callable[[list[SExpression], Environment, EvaluatorFn], LispValue]


def default_special_forms() -> dict[str, SpecialForm]:
    return {
        "quote": quote_form,
        "if": if_form,
        "set!": set_form,
        "define": define_form,
        "lambda": lambda_form,
        "begin": begin_form,
    }
