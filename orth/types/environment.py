"""Runtime environment for Orth.

A single flat table from names to values. There is no scoping: quotations run
against the same table as top-level code, and `define` overwrites whatever was
bound before.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from orth import OrthValue


class Environment:
    """Flat mapping from names to Orth values."""

    __slots__ = ("vars",)

    def __init__(self, bindings: dict[str, OrthValue] | None = None):
        self.vars: dict[str, OrthValue] = dict(bindings) if bindings else {}

    def define(self, name: str, value: OrthValue) -> None:
        """Bind `name` to `value`, replacing any existing binding."""
        self.vars[name] = value

    insert = define

    def get(self, name: str) -> Optional[OrthValue]:
        """Return the value bound to `name`, or None if unbound."""
        return self.vars.get(name)

    def items(self):
        return self.vars.items()

    def __contains__(self, name: str) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {self}>"
