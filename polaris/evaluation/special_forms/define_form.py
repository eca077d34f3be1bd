from polaris import EvaluatorFn
from polaris import SExpression, LispValue
from polaris.errors import MalformedForm
from polaris.types.cell import Tag
from polaris.types.environment import Environment


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current (innermost) frame and returns the bound value.
    """
    if len(tail) < 2:
        raise MalformedForm("define requires a name and a value")

    name, val_expr = tail[0], tail[1]
    if name.tag is not Tag.SYMBOL:
        raise MalformedForm(f"Cannot define {name} as a symbol")
    value = evaluate_fn(val_expr, env)
    return env.define(name, value)
