from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from polaris import LispValue, NativeFn
from polaris.builtin.env_builtin import register
from polaris.errors import ErrorCallback, RecursionDepthExceeded, log_error
from polaris.evaluation.evaluator import Evaluator
from polaris.feeder import Feeder
from polaris.modules.importer import Importer
from polaris.reader.parser import read_all
from polaris.types.cell import Procedure, nil
from polaris.types.environment import Environment


class Interpreter:
    """
    Host-facing session: one evaluator, one root environment with the
    builtin library, an importer over `include_dirs`, and a line feeder.
    """

    def __init__(
        self,
        include_dirs: Iterable[str | Path] = (),
        error_cb: Optional[ErrorCallback] = log_error,
        recoverable: bool = False,
    ):
        self.evaluator = Evaluator()
        self.env = Environment()
        self.importer = Importer(self.evaluator, self.env, include_dirs)
        register(self.env, self.importer)
        self.feeder = Feeder(
            self.evaluator, self.env, error_cb=error_cb, recoverable=recoverable
        )

    def feed(self, line: str, print_result: bool = False) -> bool:
        return self.feeder.feed(line, print_result)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code` and return the last result (nil if none)."""
        result: LispValue = nil
        try:
            for expr in read_all(code):
                result = self.evaluator.evaluate(expr, self.env)
        except RecursionError:
            raise RecursionDepthExceeded("Maximum nesting depth exceeded") from None
        return result

    def define(self, name: str, fn: NativeFn) -> Procedure:
        """Expose a host callable `fn(env, args)` to Lisp code as `name`."""
        proc = Procedure(fn, name)
        self.env.define(name, proc)
        return proc

    def lookup(self, name: str) -> LispValue:
        return self.env.lookup(name)
