"""LIFO value store shared by the evaluator and the builtins."""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from orth import OrthValue
from orth.errors import OrthStackUnderflow


class Stack:
    __slots__ = ("items",)

    def __init__(self, items: list[OrthValue] | None = None):
        self.items: list[OrthValue] = list(items) if items else []

    def push(self, value: OrthValue) -> None:
        self.items.append(value)

    def pop(self) -> Optional[OrthValue]:
        """Remove and return the top value, or None when the stack is empty."""
        return self.items.pop() if self.items else None

    def peek(self) -> Optional[OrthValue]:
        return self.items[-1] if self.items else None

    def pop_many(self, n: int, who: str) -> list[OrthValue]:
        """Pop `n` operands, returned bottom first.

        Raises OrthStackUnderflow and leaves the stack untouched if fewer than
        `n` values are present.
        """
        if len(self.items) < n:
            raise OrthStackUnderflow(
                f"{who}: stack underflow (needs {n}, has {len(self.items)})"
            )
        if n == 0:
            return []
        operands = self.items[-n:]
        del self.items[-n:]
        return operands

    def extend(self, values: list[OrthValue]) -> None:
        self.items.extend(values)

    def clear(self) -> None:
        self.items.clear()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[OrthValue]:
        return iter(self.items)

    def __eq__(self, other):
        if isinstance(other, Stack):
            return self.items == other.items
        if isinstance(other, list):
            return self.items == other
        return NotImplemented

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Stack [")
            buffer.write(", ".join(repr(v) for v in self.items))
            buffer.write("]>")
            return buffer.getvalue()
