"""
  Orth parser

Turns tokens into runtime values:

    - symbol tokens -> Symbol, interned per symbol table
    - string tokens -> str
    - word tokens, first match wins:
        integer literal   -> int
        float literal     -> float
        #t / #f           -> bool
        { / }             -> QuoteOpen / QuoteClose
        registered name   -> BuiltinRef
        anything else     -> Word, resolved at evaluation time

Numbers are tried first, so a builtin cannot be named like a number.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional

from orth import OrthValue
from orth.builtin.registry import Registry
from orth.reader.tokenizer import STRING, SYMBOL, Token
from orth.types.marker import QuoteClose, QuoteOpen
from orth.types.symbol import SymbolTable
from orth.types.values import Word

INT_RE = re.compile(r"[+-]?[0-9]+")
FLOAT_RE = re.compile(
    r"[+-]?(?:"
    r"(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"  # 1.5, 1., .5, 1e3
    r"|inf|infinity|nan"
    r")",
    re.IGNORECASE,
)

INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1

LITERALS: dict[str, OrthValue] = {
    "#t": True,
    "#f": False,
    "{": QuoteOpen,
    "}": QuoteClose,
}


def parse_number(text: str) -> Optional[int | float]:
    """Return the int or float `text` spells, or None."""
    if INT_RE.fullmatch(text):
        n = int(text)
        if INT_MIN <= n <= INT_MAX:
            return n
        # Out of 64-bit range: falls through to a float
    if FLOAT_RE.fullmatch(text):
        return float(text)
    return None


def parse_word(text: str, registry: Registry) -> OrthValue:
    number = parse_number(text)
    if number is not None:
        return number
    if text in LITERALS:
        return LITERALS[text]
    builtin = registry.get(text)
    if builtin is not None:
        return builtin.ref
    return Word(text)


def parse(
    tokens: Iterable[Token],
    registry: Registry,
    symbols: SymbolTable | None = None,
) -> list[OrthValue]:
    """Resolve `tokens` into values.

    A fresh symbol table is used unless `symbols` is given; passing one keeps
    Symbol ids consistent across several parses (e.g. a REPL session).
    """
    if symbols is None:
        symbols = SymbolTable()

    values: list[OrthValue] = []
    for kind, text, _line in tokens:
        if kind == SYMBOL:
            values.append(symbols.intern(text))
        elif kind == STRING:
            values.append(text)
        else:
            values.append(parse_word(text, registry))
    return values
