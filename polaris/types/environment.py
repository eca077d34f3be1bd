"""Runtime environment for Polaris.

An Environment is one lexical frame: a mapping of names to cells plus an
optional `outer` link. Lookups walk outward; definitions always land in the
frame they are made in. Frames only ever point at their parent, so a chain
is acyclic and ordinary reference counting keeps captured frames alive for
as long as a lambda refers to them.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Mapping, Optional

from polaris.errors import UnboundSymbol
from polaris.types.cell import Cell


def _name(key: Cell | str) -> str:
    return key if isinstance(key, str) else key.text


class Environment:
    """Hierarchical mapping from names to cells."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, Cell] = {}
        self.outer: Environment | None = outer

    @classmethod
    def for_call(
        cls, params: Iterable[Cell], args: Iterable[Cell], outer: Environment
    ) -> Environment:
        """Frame for one lambda invocation, binding params to args positionally.

        Surplus arguments are dropped and surplus parameters stay unbound.
        """
        env = cls(outer)
        for param, arg in zip(params, args):
            env.vars[param.text] = arg
        return env

    def define(self, name: Cell | str, value: Cell) -> Cell:
        """Bind `name` to `value` in this frame, creating it if absent."""
        self.vars[_name(name)] = value
        return value

    def find(self, name: Cell | str) -> Environment:
        """Return the innermost frame that binds `name`.

        Raises UnboundSymbol if no frame in the chain does.
        """
        key = _name(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        raise UnboundSymbol(f"Unbound symbol : [{key}]")

    def set(self, name: Cell | str, value: Cell) -> Cell:
        """Overwrite an existing binding wherever it lives in the chain."""
        key = _name(name)
        self.find(key).vars[key] = value
        return value

    def lookup(self, name: Cell | str) -> Cell:
        key = _name(name)
        return self.find(key).vars[key]

    def update(self, mapping: Mapping[str, Cell]) -> None:
        """Bulk-define a mapping of name -> cell in the current frame."""
        for k, v in mapping.items():
            self.vars[_name(k)] = v

    def __getitem__(self, name: Cell | str) -> Cell:
        return self.lookup(name)

    def __setitem__(self, name: Cell | str, value: Cell) -> None:
        self.define(name, value)

    def __contains__(self, name: Cell | str) -> bool:
        key = _name(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return True
            env = env.outer
        return False

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env: Optional[Environment] = self
            while env is not None:
                frame = StringIO()
                env._write_vars(frame)
                chain.append(frame.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
