"""Core primitives: binding, stack shuffling and vectors.

Every primitive takes the Context and manages its own arity. Operands are
popped with `Stack.pop_many`, so an underflow leaves the stack untouched. On a
type mismatch the operands are pushed back before the fault is handled, which
makes the primitive a no-op in lenient mode.
"""
from __future__ import annotations

from orth import OrthValue
from orth.builtin.registry import Registry
from orth.errors import OrthIndexError, OrthTypeError
from orth.types.context import Context
from orth.types.symbol import Symbol
from orth.types.values import clone, is_int, type_name


def _mismatch(ctx: Context, operands: list[OrthValue], message: str) -> None:
    """Restore `operands` (bottom first) and hand the fault to the context."""
    ctx.stack.extend(operands)
    ctx.mismatch(OrthTypeError(message))


# -------------------------------
# Binding
# -------------------------------
def bind(ctx: Context) -> None:
    """( value symbol -- ) bind the symbol's name to value."""
    value, sym = ctx.stack.pop_many(2, "@")
    if not isinstance(sym, Symbol):
        return _mismatch(ctx, [value, sym], f"@ expects a Symbol on top, got {type_name(sym)}")
    ctx.env.define(sym.name, value)


# -------------------------------
# Stack shuffling
# -------------------------------
def swap(ctx: Context) -> None:
    """( a b -- b a )"""
    a, b = ctx.stack.pop_many(2, "swap")
    ctx.stack.push(b)
    ctx.stack.push(a)


# -------------------------------
# Vectors
# -------------------------------
def make_vec(ctx: Context) -> None:
    """( -- vec ) push a new empty vector."""
    ctx.stack.push([])


def vec_push(ctx: Context) -> None:
    """( vec value -- vec ) append value to vec in place."""
    vec, value = ctx.stack.pop_many(2, "vpush!")
    if not isinstance(vec, list):
        return _mismatch(ctx, [vec, value], f"vpush! expects a Vec, got {type_name(vec)}")
    vec.append(value)
    ctx.stack.push(vec)


def vec_get(ctx: Context) -> None:
    """( vec index -- value ) replace vec by a copy of its element at index."""
    vec, at = ctx.stack.pop_many(2, "vget")
    if not is_int(at):
        return _mismatch(ctx, [vec, at], f"vget expects an Int index, got {type_name(at)}")
    if not isinstance(vec, list):
        return _mismatch(ctx, [vec, at], f"vget expects a Vec, got {type_name(vec)}")
    if not 0 <= at < len(vec):
        ctx.stack.extend([vec, at])
        raise OrthIndexError(f"vget: index {at} out of range for Vec of length {len(vec)}")
    ctx.stack.push(clone(vec[at]))


def register(registry: Registry) -> None:
    """Register the core primitives into the given registry."""
    registry.update(
        {
            "@": bind,
            "swap": swap,
            "make-vec": make_vec,
            "vpush!": vec_push,
            "vget": vec_get,
        }
    )
