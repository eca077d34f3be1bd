from polaris.errors import MalformedForm
from polaris.types.lambda_fn import Lambda

from polaris import EvaluatorFn
from polaris import SExpression, LispValue
from polaris.types.cell import Tag
from polaris.types.environment import Environment


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (var*) exp)
    if len(tail) < 2:
        raise MalformedForm("lambda requires a parameter list and a body")

    params, body = tail[0], tail[1]
    if params.tag is not Tag.LIST:
        raise MalformedForm(f"lambda parameters must be a list, got {params}")

    # The closure frame is a fresh child of the defining environment, so
    # definitions made there later are still visible when the lambda runs.
    return Lambda(params, body, Environment(env))
