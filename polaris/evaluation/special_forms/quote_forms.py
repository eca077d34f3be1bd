from polaris import SExpression, LispValue, EvaluatorFn
from polaris.errors import MalformedForm
from polaris.types.environment import Environment


def quote_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(quote expr) returns expr unevaluated."""
    if not tail:
        raise MalformedForm("quote expects an expression")
    return tail[0]
