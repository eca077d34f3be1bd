"""Core evaluator for the Polaris interpreter.

A plain recursive tree walker: symbols are looked up, atoms evaluate to
themselves, special forms are dispatched through the evaluator's own table
and every other list is an application. There is no tail-call elimination,
so nesting depth is bounded by the Python stack.
"""

from __future__ import annotations

import logging

from polaris import SExpression, LispValue
from polaris.errors import RecursionDepthExceeded
from polaris.evaluation.apply import apply
from polaris.evaluation.special_forms import SpecialForm, default_special_forms
from polaris.types.cell import Tag, nil
from polaris.types.environment import Environment

logger = logging.getLogger(__name__)


class Evaluator:
    """Evaluates cells against an Environment."""

    def __init__(self, special_forms: dict[str, SpecialForm] | None = None):
        self.special_forms: dict[str, SpecialForm] = (
            dict(special_forms) if special_forms is not None else default_special_forms()
        )

    def evaluate(self, expr: SExpression, env: Environment) -> LispValue:
        """Evaluate one top-level form."""
        try:
            return self.evaluate0(expr, env)
        except RecursionError:
            raise RecursionDepthExceeded(
                "Maximum evaluation depth exceeded (no tail-call elimination)"
            ) from None

    def evaluate0(self, expr: SExpression, env: Environment) -> LispValue:
        match expr.tag:
            case Tag.SYMBOL:
                return env.lookup(expr)
            case Tag.LIST:
                pass
            case _:
                # Integer, Double, String (and procedure values) evaluate to themselves
                return expr

        if not expr.items:
            return nil

        head, *tail = expr.items

        # --- Special forms handling ---
        if head.tag is Tag.SYMBOL and head.text in self.special_forms:
            logger.debug("special form %s", head.text)
            return self.special_forms[head.text](tail, env, self.evaluate0)

        # Head first, then arguments left to right.
        proc = self.evaluate0(head, env)
        args = [self.evaluate0(arg, env) for arg in tail]
        return apply(proc, args, env, self.evaluate0)
