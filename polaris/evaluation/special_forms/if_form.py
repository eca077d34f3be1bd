from polaris import EvaluatorFn
from polaris import SExpression, LispValue
from polaris.errors import MalformedForm
from polaris.types.cell import false_sym, nil
from polaris.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) < 2:
        raise MalformedForm("if requires a condition and a then-expression")

    cond = evaluate_fn(tail[0], env)
    # Only a value rendering as #f is false
    if str(cond) != false_sym.text:
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return nil
