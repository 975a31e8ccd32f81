"""Builtin registry: the table of named primitives.

The parser turns a word matching a registered name into a `BuiltinRef`
handle; the evaluator resolves the handle here when it is called.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from orth import BuiltinFn
from orth.errors import OrthUnboundWord
from orth.types.values import BuiltinRef


@dataclass(frozen=True)
class Builtin:
    name: str
    fn: BuiltinFn
    index: int

    @property
    def ref(self) -> BuiltinRef:
        return BuiltinRef(self.name, self.index)

    def __repr__(self):
        return f"Builtin({self.name!r})"


class Registry:
    """Ordered name -> Builtin table. Read-only once handed to the parser."""

    __slots__ = ("_by_name", "_by_index")

    def __init__(self):
        self._by_name: dict[str, Builtin] = {}
        self._by_index: list[Builtin] = []

    def define(self, name: str, fn: BuiltinFn) -> Builtin:
        """Register `fn` under `name`; redefining a name keeps its index."""
        old = self._by_name.get(name)
        index = old.index if old is not None else len(self._by_index)
        entry = Builtin(name, fn, index)
        if old is not None:
            self._by_index[index] = entry
        else:
            self._by_index.append(entry)
        self._by_name[name] = entry
        return entry

    def update(self, mapping: dict[str, BuiltinFn]) -> None:
        for name, fn in mapping.items():
            self.define(name, fn)

    def get(self, name: str) -> Optional[Builtin]:
        return self._by_name.get(name)

    def resolve(self, ref: BuiltinRef) -> Builtin:
        """Return the entry a handle points at.

        Raises OrthUnboundWord if the handle does not belong to this registry.
        """
        if 0 <= ref.index < len(self._by_index):
            entry = self._by_index[ref.index]
            if entry.name == ref.name:
                return entry
        raise OrthUnboundWord(f"builtin {ref.name} not registered")

    def names(self) -> list[str]:
        return [b.name for b in self._by_index]

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._by_index)

    def __iter__(self) -> Iterator[Builtin]:
        return iter(self._by_index)

    def __repr__(self):
        return f"<Registry {self.names()}>"


def default_registry(debug: bool = True) -> Registry:
    """Registry holding the core builtins, plus the show-* ones unless `debug` is off."""
    from orth.builtin import core_builtin, debug_builtin

    registry = Registry()
    core_builtin.register(registry)
    if debug:
        debug_builtin.register(registry)
    return registry
