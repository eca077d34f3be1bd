"""Application engine for Polaris.

Function application lives in one place so the evaluator and any builtin
that calls back into Lisp share the same rules:
- A Lambda runs its body in a fresh frame whose parent is the lambda's
  captured environment, with parameters bound positionally.
- A Procedure is called with the caller's environment and the evaluated
  arguments.
- Anything else is not callable.
"""

from polaris import LispValue, EvaluatorFn
from polaris.errors import NotCallable
from polaris.types.cell import Cell, Procedure
from polaris.types.environment import Environment
from polaris.types.lambda_fn import Lambda


def apply(
    head: Cell,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if isinstance(head, Lambda):
        return evaluate_fn(head.body, head.extend_env(args))
    elif isinstance(head, Procedure):
        return head(env, args)
    else:
        raise NotCallable(f"Not a function: {head}")
