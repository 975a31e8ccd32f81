"""
  Orth tokenizer

A character-level state machine over the source text. Emits (kind, text, line)
tokens where kind is one of:

    - "symbol" -> `:name`, text without the colon
    - "string" -> `"..."`, text without the quotes, no escapes
    - "word"   -> anything else, including the lone `{` and `}` markers

Whitespace and `;` delimit tokens; `;` also starts a comment running to the
end of the line. The first lexical error aborts with its 1-based line number.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Iterator, NamedTuple

from orth.errors import OrthInvalidSymbol, OrthInvalidWord, OrthUnfinishedString

SYMBOL = "symbol"
STRING = "string"
WORD = "word"

# Not allowed after the first character of a word / symbol
WORD_INVALID = frozenset('":{}')
SYMBOL_INVALID = frozenset('":')
QUOTE_MARKERS = frozenset("{}")


class Token(NamedTuple):
    kind: str
    text: str
    line: int


class State(Enum):
    EMPTY = auto()
    IN_WORD = auto()
    IN_SYMBOL = auto()
    IN_COMMENT = auto()
    IN_STRING = auto()


def is_delimiter(ch: str) -> bool:
    return ch.isspace() or ch == ";"


def lex(source: str) -> Iterator[Token]:
    """Token generator. Raises an OrthLexicalError subclass on the first bad character."""
    state = State.EMPTY
    start = 0
    line = 1
    token_line = 1

    for i, ch in enumerate(source):
        if state is State.EMPTY:
            if ch.isspace():
                pass
            elif ch == ";":
                state = State.IN_COMMENT
            else:
                token_line = line
                if ch == ":":
                    state, start = State.IN_SYMBOL, i + 1
                elif ch == '"':
                    state, start = State.IN_STRING, i + 1
                else:
                    state, start = State.IN_WORD, i

        elif state is State.IN_WORD:
            if is_delimiter(ch):
                yield Token(WORD, source[start:i], token_line)
                state = State.IN_COMMENT if ch == ";" else State.EMPTY
            elif ch in WORD_INVALID or source[start] in QUOTE_MARKERS:
                # `{` and `}` only stand alone
                raise OrthInvalidWord(line)

        elif state is State.IN_SYMBOL:
            if is_delimiter(ch):
                if i == start:
                    raise OrthInvalidSymbol(line)
                yield Token(SYMBOL, source[start:i], token_line)
                state = State.IN_COMMENT if ch == ";" else State.EMPTY
            elif ch in SYMBOL_INVALID:
                raise OrthInvalidSymbol(line)

        elif state is State.IN_COMMENT:
            if ch == "\n":
                state = State.EMPTY

        elif state is State.IN_STRING:
            if ch == '"':
                yield Token(STRING, source[start:i], token_line)
                state = State.EMPTY
            elif ch == "\n":
                raise OrthUnfinishedString(line)

        # Advance after the character so errors at a newline report its own line
        if ch == "\n":
            line += 1

    # End of input
    if state is State.IN_WORD:
        yield Token(WORD, source[start:], token_line)
    elif state is State.IN_SYMBOL:
        if start == len(source):
            raise OrthInvalidSymbol(line)
        yield Token(SYMBOL, source[start:], token_line)
    elif state is State.IN_STRING:
        raise OrthUnfinishedString(line)


def tokenize(source: str) -> list[Token]:
    """Tokenize the whole of `source`; no partial result on error."""
    return list(lex(source))


def quotation_depth(tokens: list[Token]) -> int:
    """Number of `{` markers still open after `tokens`; a stray `}` is ignored."""
    depth = 0
    for kind, text, _line in tokens:
        if kind != WORD:
            continue
        if text == "{":
            depth += 1
        elif text == "}" and depth > 0:
            depth -= 1
    return depth
