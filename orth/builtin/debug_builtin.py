"""Introspection primitives. They print to stdout and leave the context unchanged."""
from __future__ import annotations

from orth.builtin.registry import Registry
from orth.debug_utils.pprint import format_env, format_stack, format_value
from orth.types.context import Context


def show_ctx(ctx: Context) -> None:
    print(format_env(ctx.env))
    print(format_stack(ctx.stack))


def show_top(ctx: Context) -> None:
    top = ctx.stack.peek()
    print("empty" if top is None else format_value(top))


def show_stack(ctx: Context) -> None:
    print(format_stack(ctx.stack))


def show_env(ctx: Context) -> None:
    print(format_env(ctx.env))


def register(registry: Registry) -> None:
    registry.update(
        {
            "show-ctx": show_ctx,
            "show-top": show_top,
            "show-stack": show_stack,
            "show-env": show_env,
        }
    )
