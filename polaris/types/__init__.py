from polaris.types.cell import (
    Tag,
    Cell,
    Atom,
    Symbol,
    Integer,
    Double,
    String,
    ListCell,
    Procedure,
    nil,
    true_sym,
    false_sym,
    to_string,
)
from polaris.types.environment import Environment
from polaris.types.lambda_fn import Lambda

__all__ = [
    "Tag",
    "Cell",
    "Atom",
    "Symbol",
    "Integer",
    "Double",
    "String",
    "ListCell",
    "Procedure",
    "Lambda",
    "Environment",
    "nil",
    "true_sym",
    "false_sym",
    "to_string",
]
