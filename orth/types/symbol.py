from __future__ import annotations
import sys


class Symbol:
    """Interned identifier: an id in assignment order plus a shared name."""
    __slots__ = ("id", "name")

    def __init__(self, id: int, name: str):
        self.id = id
        # Intern so every occurrence shares one name string
        self.name = sys.intern(name)

    def __setattr__(self, key, value):
        if hasattr(self, key):
            raise AttributeError(f"Symbol is immutable; cannot rebind {key!r}")
        object.__setattr__(self, key, value)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Symbol)
            and self.id == other.id
            and self.name == other.name
        )

    def __hash__(self) -> int:
        return hash((self.id, self.name))

    def __repr__(self):
        return f"Symbol({self.id}, {self.name!r})"

    def __str__(self):
        return ":" + self.name


class SymbolTable:
    """Maps symbol text to its Symbol, minting ids in assignment order."""
    __slots__ = ("_symbols",)

    def __init__(self):
        self._symbols: dict[str, Symbol] = {}

    def intern(self, text: str) -> Symbol:
        sym = self._symbols.get(text)
        if sym is None:
            sym = Symbol(len(self._symbols), text)
            self._symbols[text] = sym
        return sym

    def __contains__(self, text: str) -> bool:
        return text in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __repr__(self):
        return f"<SymbolTable {list(self._symbols)}>"
