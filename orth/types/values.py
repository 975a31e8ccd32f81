"""Value variants that have no native Python representation.

Int, Float, Boolean, String, Vec and Map are plain ``int``, ``float``, ``bool``,
``str``, ``list`` and ``dict``. Everything else is defined here (Symbol lives in
``orth.types.symbol`` and the quotation markers in ``orth.types.marker``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from orth import OrthValue
from orth.types.marker import MarkerType
from orth.types.symbol import Symbol


@dataclass(frozen=True, slots=True)
class Word:
    """An identifier resolved against the environment at evaluation time."""
    text: str

    def __str__(self):
        return self.text


@dataclass(frozen=True, slots=True)
class BuiltinRef:
    """Opaque handle to a registry entry: name plus index."""
    name: str
    index: int

    def __str__(self):
        return self.name


class Quotation:
    """A deferred block of already-parsed values."""
    __slots__ = ("values",)

    def __init__(self, values: Iterable[OrthValue] = ()):
        self.values: tuple[OrthValue, ...] = tuple(values)

    def __eq__(self, other):
        return isinstance(other, Quotation) and self.values == other.values

    def __hash__(self):
        return hash(_freeze(self.values))

    def __len__(self):
        return len(self.values)

    def __iter__(self):
        return iter(self.values)

    def __repr__(self):
        return f"Quotation({list(self.values)!r})"


def _freeze(value: OrthValue):
    """Hashable stand-in for `value`; Vecs and Maps are frozen recursively."""
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, dict):
        return frozenset((k, _freeze(v)) for k, v in value.items())
    return value


def clone(value: OrthValue) -> OrthValue:
    """Deep copy with value semantics. Immutable variants are shared."""
    if isinstance(value, list):
        return [clone(v) for v in value]
    if isinstance(value, dict):
        return {k: clone(v) for k, v in value.items()}
    return value


def type_name(value: OrthValue) -> str:
    """Name of the variant of `value`, as used in error messages."""
    match value:
        case bool():
            return "Boolean"
        case int():
            return "Int"
        case float():
            return "Float"
        case str():
            return "String"
        case list():
            return "Vec"
        case dict():
            return "Map"
        case Symbol():
            return "Symbol"
        case Word():
            return "Word"
        case Quotation():
            return "Quotation"
        case BuiltinRef():
            return "Builtin"
        case MarkerType():
            return repr(value)
    return type(value).__name__


def is_int(value: OrthValue) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
