"""Numeric builtins: + - * / and the comparison operators.

Operands are converted from their text, so any cell whose text reads as a
number is accepted. Results are Integer cells unless a Double-tagged cell
took part, in which case they are Double cells. Integer-only arithmetic is
exact; once a fractional operand is involved the running total is a float
and a non-Double result is truncated toward zero.
"""

from __future__ import annotations

import math
import operator
import re
from typing import Callable, Optional

from polaris import LispValue
from polaris.errors import MalformedForm, NumericConversion, NumericRange
from polaris.types.cell import Cell, Double, Integer, Symbol, Tag, false_sym, true_sym
from polaris.types.environment import Environment

Number = int | float

# Decimal text with an optional exponent (Double cells render as e.g. 1e+20).
# No digit separators, padding or inf/nan.
NUMERIC_TEXT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?", re.ASCII)


def to_number(cell: Cell) -> Number:
    """Parse a cell's text as an int, or failing that a finite float."""
    text = cell.text
    if not NUMERIC_TEXT_RE.fullmatch(text):
        raise NumericConversion(f"invalid argument for numerical conversion: {cell}")
    try:
        return int(text)
    except ValueError:
        # fractional, or too many digits for an int conversion
        pass
    value = float(text)
    if not math.isfinite(value):
        raise NumericRange(f"out of range: {text}")
    return value


def _divide(a: Number, b: Number) -> Number:
    if b == 0:
        raise NumericRange("division by zero")
    if isinstance(a, int) and isinstance(b, int):
        q = abs(a) // abs(b)
        return q if (a < 0) == (b < 0) else -q
    return a / b


def _result(total: Number, as_double: bool) -> Cell:
    try:
        if as_double:
            total = float(total)
            if not math.isfinite(total):
                raise NumericRange("out of range")
            return Double(total)
        if isinstance(total, float) and not math.isfinite(total):
            raise NumericRange("out of range")
        return Integer(int(total))
    except (OverflowError, ValueError):
        raise NumericRange("out of range") from None


def _accumulate(
    name: str,
    op: Callable[[Number, Number], Number],
    args: list[LispValue],
    seed: Optional[int] = None,
) -> Cell:
    if seed is None:
        if not args:
            raise MalformedForm(f"{name} requires at least 1 argument")
        total = to_number(args[0])
        as_double = args[0].tag is Tag.DOUBLE
        rest = args[1:]
    else:
        total = seed
        as_double = False
        rest = args
    for cell in rest:
        try:
            total = op(total, to_number(cell))
        except (OverflowError, ValueError):
            raise NumericRange("out of range") from None
        if cell.tag is Tag.DOUBLE:
            as_double = True
    return _result(total, as_double)


def add(env: Environment, args: list[LispValue]) -> LispValue:
    """Sum all arguments, seeded from the first."""
    return _accumulate("+", operator.add, args)


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    """Subtract all later arguments from the first; (- x) is just x."""
    return _accumulate("-", operator.sub, args)


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    """Product of all arguments; (*) is 1."""
    return _accumulate("*", operator.mul, args, seed=1)


def div(env: Environment, args: list[LispValue]) -> LispValue:
    """Divide the first argument by each later one in turn."""
    return _accumulate("/", _divide, args)


def _compare(name: str, test: Callable[[Number, Number], bool], args: list[LispValue]) -> Symbol:
    # Every later operand is checked against the first, not its neighbour.
    if not args:
        raise MalformedForm(f"{name} requires at least 1 argument")
    first = to_number(args[0])
    for cell in args[1:]:
        if not test(first, to_number(cell)):
            return false_sym
    return true_sym


def gt(env: Environment, args: list[LispValue]) -> Symbol:
    return _compare(">", operator.gt, args)


def lt(env: Environment, args: list[LispValue]) -> Symbol:
    return _compare("<", operator.lt, args)


def lte(env: Environment, args: list[LispValue]) -> Symbol:
    return _compare("<=", operator.le, args)


def gte(env: Environment, args: list[LispValue]) -> Symbol:
    return _compare(">=", operator.ge, args)
