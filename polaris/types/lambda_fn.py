"""Lambda representation for Polaris."""

from __future__ import annotations

from polaris import LispValue
from polaris.types.cell import Cell, ListCell, Symbol, Tag
from polaris.types.environment import Environment

LAMBDA_MARKER = Symbol("lambda")


class Lambda(Cell):
    """A first-class lambda with formal parameters, body, and closure env.

    `env` is fixed when the lambda form is evaluated and never rebound.
    """

    __slots__ = ("params", "body", "env")
    tag = Tag.LAMBDA

    def __init__(self, params: ListCell, body: Cell, env: Environment):
        self.params: ListCell = params
        self.body: Cell = body
        self.env: Environment = env

    @property
    def items(self) -> list[Cell]:
        return [LAMBDA_MARKER, self.params, self.body]

    def __str__(self) -> str:
        return "<Lambda>"

    def __repr__(self) -> str:
        return f"Lambda({self.params} {self.body})"

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this lambda's formal parameters and
        return a new Environment for evaluating the body.

        The new frame's parent is the captured environment, not the caller's.
        """
        return Environment.for_call(self.params.items, args, self.env)
