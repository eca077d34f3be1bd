"""Built-in procedures for the Polaris runtime environment.

This module defines the control/utility procedures, list processing and
equality, and registers them (together with the numeric builtins) into an
Environment.
"""
from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Optional

from polaris import LispValue
from polaris.errors import MalformedForm, NumericConversion
from polaris.builtin.arithmetic import add, sub, mul, div, gt, lt, lte, gte
from polaris.types.cell import (
    Cell,
    Integer,
    ListCell,
    Procedure,
    String,
    Symbol,
    false_sym,
    nil,
    true_sym,
)
from polaris.types.environment import Environment

if TYPE_CHECKING:
    from polaris.modules.importer import Importer


def _require(name: str, args: list[LispValue], count: int) -> None:
    if len(args) < count:
        raise MalformedForm(f"{name} requires {count} argument{'s' if count > 1 else ''}")


# -------------------------------
# Control / utility
# -------------------------------
def print_builtin(env: Environment, args: list[LispValue]) -> Symbol:
    """Write the concatenated renderings of all arguments as one line."""
    print("".join(str(c) for c in args))
    return true_sym


def exit_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(exit [code]) terminates the session with the given status."""
    code = 0
    if args:
        try:
            code = int(float(args[0].text))
        except (ValueError, OverflowError):
            raise NumericConversion("failed to cast return code") from None
    sys.exit(code)


def ref(env: Environment, args: list[LispValue]) -> ListCell:
    """Return a list holding the type name of each argument."""
    return ListCell(String(c.tag.value) for c in args)


# -------------------------------
# List operations
# -------------------------------
def car(env: Environment, args: list[LispValue]) -> LispValue:
    _require("car", args, 1)
    xs = args[0].items
    if not xs:
        raise MalformedForm(f"car of an empty list: {args[0]}")
    return xs[0]


def cdr(env: Environment, args: list[LispValue]) -> LispValue:
    """All but the first element; nil (not an empty list) when fewer than 2 remain."""
    _require("cdr", args, 1)
    xs = args[0].items
    if len(xs) < 2:
        return nil
    return ListCell(xs[1:])


def cons(env: Environment, args: list[LispValue]) -> ListCell:
    """Prepend head to the elements of tail; an atom tail counts as empty."""
    _require("cons", args, 2)
    head, tail = args[0], args[1]
    return ListCell([head, *tail.items])


def append(env: Environment, args: list[LispValue]) -> ListCell:
    _require("append", args, 2)
    return ListCell([*args[0].items, *args[1].items])


def list_builtin(env: Environment, args: list[LispValue]) -> ListCell:
    return ListCell(args)


def length(env: Environment, args: list[LispValue]) -> Integer:
    _require("length", args, 1)
    return Integer(len(args[0].items))


def is_null(env: Environment, args: list[LispValue]) -> Symbol:
    """#t for any cell without children, atoms included."""
    _require("null?", args, 1)
    return false_sym if args[0].items else true_sym


# -------------------------------
# Equality
# -------------------------------
def _same(a: Cell, b: Cell) -> bool:
    # Tag and text only: two lists always compare equal.
    return a.tag is b.tag and a.text == b.text


def _last_comparison(name: str, args: list[LispValue]) -> bool:
    # Only the comparison of the final argument against the first counts.
    _require(name, args, 1)
    equal = False
    first = args[0]
    for other in args[1:]:
        equal = _same(first, other)
    return equal


def eq(env: Environment, args: list[LispValue]) -> Symbol:
    return true_sym if _last_comparison("eq", args) else false_sym


def neq(env: Environment, args: list[LispValue]) -> Symbol:
    return false_sym if _last_comparison("neq", args) else true_sym


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment, importer: Optional[Importer] = None) -> None:
    """Populate `env` with the constants and builtin procedures.

    The `import` procedure is only available when an importer is supplied.
    """
    env.update({
        "nil": nil,
        "#f": false_sym,
        "#t": true_sym,
    })

    procedures = {
        "print": print_builtin,
        "exit": exit_builtin,
        "ref": ref,
        "car": car,
        "cdr": cdr,
        "cons": cons,
        "append": append,
        "list": list_builtin,
        "length": length,
        "null?": is_null,
        "eq": eq,
        "neq": neq,
        "+": add,
        "-": sub,
        "*": mul,
        "/": div,
        ">": gt,
        "<": lt,
        "<=": lte,
        ">=": gte,
    }

    if importer is not None:

        def import_builtin(env: Environment, args: list[LispValue]) -> Symbol:
            """(import "file" ...) loads each named module at most once."""
            if not args:
                raise MalformedForm("Malformed import statement")
            for c in args:
                importer.load(c.text)
            return true_sym

        procedures["import"] = import_builtin

    env.update({name: Procedure(fn, name) for name, fn in procedures.items()})
