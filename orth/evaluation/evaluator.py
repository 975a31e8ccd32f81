"""Core evaluator for the Orth interpreter.

A single pass over a value sequence. Quotation markers are folded into
Quotation values as they are met; everything else is executed against the
Context: builtins are called, words are resolved in the environment, and all
other values are pushed as literals.
"""

from __future__ import annotations

import logging
from typing import Sequence

from orth import OrthValue
from orth.errors import OrthUnbalancedQuotation
from orth.types.context import Context
from orth.types.marker import QuoteClose, QuoteOpen
from orth.types.values import BuiltinRef, Quotation, Word, clone

logger = logging.getLogger(__name__)


def evaluate(values: Sequence[OrthValue], ctx: Context) -> None:
    """
    Execute `values` against `ctx`. Results are observed on ctx.stack / ctx.env.
    """
    depth = 0
    buffer: list[OrthValue] = []

    for value in values:
        if value is QuoteOpen:
            depth += 1
            if depth == 1:
                buffer = []
                continue
        elif value is QuoteClose:
            if depth == 0:
                ctx.report(OrthUnbalancedQuotation("unmatched '}'"))
                continue
            depth -= 1
            if depth == 0:
                ctx.stack.push(Quotation(buffer))
                continue

        # Inside a quotation: keep everything, nested markers included
        if depth > 0:
            buffer.append(value)
            continue

        evaluate_value(value, ctx)

    if depth > 0:
        ctx.report(
            OrthUnbalancedQuotation(f"unterminated '{{' ({len(buffer)} values dropped)")
        )


def evaluate_value(value: OrthValue, ctx: Context) -> None:
    """Execute one value that is not part of a quotation being captured."""
    match value:
        case BuiltinRef():
            call_builtin(value, ctx)
        case Word():
            evaluate_word(value, ctx)
        case _:
            ctx.stack.push(clone(value))


def evaluate_word(word: Word, ctx: Context) -> None:
    bound = ctx.env.get(word.text)
    match bound:
        case None:
            ctx.unbound(word.text)
        case Quotation():
            logger.debug("calling quotation %s (%d values)", word.text, len(bound))
            # Same context: the quotation sees and mutates the ambient state
            evaluate(bound.values, ctx)
        case BuiltinRef():
            call_builtin(bound, ctx)
        case _:
            ctx.stack.push(clone(bound))


def call_builtin(ref: BuiltinRef, ctx: Context) -> None:
    builtin = ctx.registry.resolve(ref)
    logger.debug("calling builtin %s", builtin.name)
    builtin.fn(ctx)
