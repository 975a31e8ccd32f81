"""Source-like rendering of Orth values for the show-* builtins and the REPL."""

from __future__ import annotations

from orth import OrthValue
from orth.types.environment import Environment
from orth.types.marker import MarkerType
from orth.types.stack import Stack
from orth.types.symbol import Symbol
from orth.types.values import BuiltinRef, Quotation, Word


def format_value(value: OrthValue) -> str:
    match value:
        case bool():
            return "#t" if value else "#f"
        case int():
            return str(value)
        case float():
            return repr(value)
        case str():
            return f'"{value}"'
        case Symbol():
            return str(value)
        case Word() | MarkerType():
            return str(value)
        case BuiltinRef():
            return f"<builtin {value.name}>"
        case Quotation():
            inner = " ".join(format_value(v) for v in value)
            return f"{{ {inner} }}" if inner else "{ }"
        case list():
            return "[" + " ".join(format_value(v) for v in value) + "]"
        case dict():
            pairs = ", ".join(f"{format_value(k)} => {format_value(v)}" for k, v in value.items())
            return "#{" + pairs + "}"
    return repr(value)


def format_stack(stack: Stack) -> str:
    """`stack:` header then one ` depth: value` line per entry, top (depth 0) first."""
    lines = ["stack:"]
    size = len(stack)
    for i, value in reversed(list(enumerate(stack))):
        lines.append(f" {size - i - 1}: {format_value(value)}")
    return "\n".join(lines)


def format_env(env: Environment) -> str:
    lines = ["env:"]
    for name, value in env.items():
        shown = "quotation" if isinstance(value, Quotation) else format_value(value)
        lines.append(f" {name}: {shown}")
    return "\n".join(lines)
