"""Incremental statement assembly.

A Feeder receives source one line (or fragment) at a time, strips comments,
and keeps a running count of open parentheses. As soon as the buffered text
is balanced it is read, evaluated against the bound environment, and the
buffer is cleared. The boolean returned by `feed` tells a driver whether a
statement was just completed, which is when an interactive prompt should be
shown again.

String literals follow the reader's escape rule: inside a string a backslash
consumes the next character, so `\\"` does not close it and `\\\\"` does.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from polaris.errors import ErrorCallback, ErrorLevel, PolarisError, RecursionDepthExceeded
from polaris.evaluation.evaluator import Evaluator
from polaris.reader.parser import read_all
from polaris.types.cell import to_string
from polaris.types.environment import Environment

logger = logging.getLogger(__name__)

# Cuts at the first unescaped ';', string literals included.
COMMENT_RE = re.compile(r"(?<!\\);")


class Feeder:
    """
    Reassembles fragmented input into complete forms and evaluates them.

    Errors raised while reading, evaluating or printing a statement are
    passed to `error_cb` (if any) and the buffer is discarded. A recoverable
    feeder then reports the statement as complete so the session can carry
    on; otherwise the error propagates to the caller.
    """

    def __init__(
        self,
        evaluator: Evaluator,
        env: Environment,
        *,
        error_cb: Optional[ErrorCallback] = None,
        recoverable: bool = False,
    ):
        self.evaluator = evaluator
        self.env = env
        self.error_cb = error_cb
        self.recoverable = recoverable

        self._statement = ""
        self._depth = 0
        self._in_string = False
        self._escaped = False

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def pending(self) -> bool:
        """True while an incomplete statement is buffered."""
        return bool(self._statement)

    def reset(self) -> None:
        self._statement = ""
        self._depth = 0
        self._in_string = False
        self._escaped = False

    def feed(self, line: str, print_result: bool = False) -> bool:
        match = COMMENT_RE.search(line)
        if match:
            line = line[: match.start()]

        # Blank input counts as complete so a prompt is shown again.
        if not line:
            return True

        for c in line:
            if self._in_string:
                if self._escaped:
                    self._escaped = False
                elif c == "\\":
                    self._escaped = True
                elif c == '"':
                    self._in_string = False
            elif c == '"':
                self._in_string = True
            elif c == "(":
                self._depth += 1
            elif c == ")":
                self._depth -= 1
            self._statement += c

        if self._depth == 0 and not self._in_string and self._statement:
            statement = self._statement
            self.reset()
            self._submit(statement, print_result)
            return True

        # The joining space is string content when a literal spans lines.
        self._statement += " "
        self._escaped = False
        return False

    def _submit(self, statement: str, print_result: bool) -> None:
        logger.debug("submitting statement: %s", statement)
        try:
            self._run(statement, print_result)
        except PolarisError as err:
            level = ErrorLevel.FAILURE if self.recoverable else err.level
            if self.error_cb is not None:
                self.error_cb(level, str(err))
            if not self.recoverable:
                raise

    def _run(self, statement: str, print_result: bool) -> None:
        # Reading and rendering recurse too, not only evaluation.
        try:
            for expr in read_all(statement):
                result = self.evaluator.evaluate(expr, self.env)
                if print_result:
                    print(to_string(result))
        except RecursionError:
            raise RecursionDepthExceeded("Maximum nesting depth exceeded") from None
