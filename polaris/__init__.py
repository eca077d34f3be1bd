# Core type aliases for the Polaris runtime.
# Every value, whether parsed source or an evaluation result, is a Cell
# (see polaris.types.cell). The aliases below are used in annotations so the
# reader and evaluator can say which role a cell plays.
#
# Naming guidance:
# - SExpression: a parsed form handed to the evaluator (code-as-data).
# - LispValue:   the result of evaluating a form.
# - NativeFn:    a host procedure, called with the caller's environment and
#                the already-evaluated argument cells.

from typing import Any, Callable

__version__ = "0.3.0"

# Runtime value alias
LispValue = Any
# Forms and values are both cells
SExpression = LispValue

# Evaluator function type passed into special forms
EvaluatorFn = Callable[..., LispValue]

# Host-defined procedure type
NativeFn = Callable[[Any, list], LispValue]
