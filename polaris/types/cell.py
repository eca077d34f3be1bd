"""Cell model for Polaris.

A cell is one node of the expression tree. Source text is read into cells
and evaluation produces cells, so the same family represents code and data:

    - Symbol, Integer, Double, String -> atoms carrying their source text
    - ListCell                        -> ordered children
    - Procedure                       -> a host (Python) callable
    - Lambda                          -> see polaris.types.lambda_fn

Every variant answers `tag`, `text` and `items`; atoms have no items and
non-atoms have empty text.
"""

from __future__ import annotations

import enum
import sys
from typing import Callable, Iterable


class Tag(enum.Enum):
    SYMBOL = "symbol"
    INTEGER = "integer"
    DOUBLE = "double"
    STRING = "string"
    LIST = "list"
    PROC = "proc"
    LAMBDA = "lambda"


class Cell:
    __slots__ = ()

    tag: Tag

    @property
    def text(self) -> str:
        return ""

    @property
    def items(self) -> list[Cell]:
        return []


class Atom(Cell):
    __slots__ = ("_text",)

    def __init__(self, text: str):
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Atom) and self.tag is other.tag and self._text == other._text

    def __hash__(self) -> int:
        return hash((self.tag, self._text))

    def __repr__(self):
        return f"{type(self).__name__}({self._text!r})"

    def __str__(self):
        return self._text


class Symbol(Atom):
    __slots__ = ()
    tag = Tag.SYMBOL

    def __init__(self, name: str):
        # Intern to keep symbol comparisons cheap
        super().__init__(sys.intern(name))


class Integer(Atom):
    __slots__ = ()
    tag = Tag.INTEGER

    def __init__(self, value: int | str):
        super().__init__(value if isinstance(value, str) else str(int(value)))


class Double(Atom):
    __slots__ = ()
    tag = Tag.DOUBLE

    def __init__(self, value: float | str):
        super().__init__(value if isinstance(value, str) else repr(float(value)))


class String(Atom):
    __slots__ = ()
    tag = Tag.STRING


class ListCell(Cell):
    __slots__ = ("_items",)
    tag = Tag.LIST

    def __init__(self, items: Iterable[Cell] = ()):
        self._items: list[Cell] = list(items)

    @property
    def items(self) -> list[Cell]:
        return self._items

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ListCell) and self._items == other._items

    __hash__ = None  # mutable

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self):
        return f"ListCell({self._items!r})"

    def __str__(self):
        return "(" + " ".join(str(item) for item in self._items) + ")"


class Procedure(Cell):
    """A host-implemented procedure, called as fn(env, args)."""

    __slots__ = ("fn", "name")
    tag = Tag.PROC

    def __init__(self, fn: Callable, name: str = ""):
        self.fn = fn
        self.name = name or getattr(fn, "__name__", "")

    def __call__(self, env, args: list[Cell]) -> Cell:
        return self.fn(env, args)

    def __repr__(self):
        return f"Procedure({self.name!r})"

    def __str__(self):
        return "<Proc>"


nil = Symbol("nil")
true_sym = Symbol("#t")
false_sym = Symbol("#f")


def to_string(cell: Cell) -> str:
    """Render a cell as source-like text."""
    return str(cell)
