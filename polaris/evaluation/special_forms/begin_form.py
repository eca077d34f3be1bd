from polaris import EvaluatorFn
from polaris import SExpression, LispValue
from polaris.types.cell import nil
from polaris.types.environment import Environment


def begin_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    result: LispValue = nil
    for e in tail:
        result = evaluate_fn(e, env)
    return result
