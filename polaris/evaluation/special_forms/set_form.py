from polaris import EvaluatorFn
from polaris import SExpression, LispValue
from polaris.errors import MalformedForm
from polaris.types.cell import Tag
from polaris.types.environment import Environment


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(set! var value): overwrite an existing binding, wherever it lives."""
    if len(tail) < 2:
        raise MalformedForm("set! requires a name and a value: (set! var value)")
    var_sym, val_expr = tail[0], tail[1]
    if var_sym.tag is not Tag.SYMBOL:
        raise MalformedForm(f"set! first argument must be a symbol, got {var_sym}")
    value = evaluate_fn(val_expr, env)
    return env.set(var_sym, value)
