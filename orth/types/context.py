"""Execution context threaded through every evaluation and builtin call."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from orth.config import EvalOptions
from orth.errors import OrthError, OrthTypeError, OrthUnboundWord
from orth.types.environment import Environment
from orth.types.stack import Stack

if TYPE_CHECKING:
    from orth.builtin.registry import Registry

logger = logging.getLogger(__name__)


class Context:
    """One Environment, one Stack, and the registry their builtins come from.

    Never copied: recursive quotation calls and builtins all mutate the same
    instance.
    """

    __slots__ = ("env", "stack", "registry", "options", "diagnostics")

    def __init__(
        self,
        registry: Registry,
        env: Environment | None = None,
        stack: Stack | None = None,
        options: EvalOptions | None = None,
    ):
        self.registry = registry
        self.env: Environment = env if env is not None else Environment()
        self.stack: Stack = stack if stack is not None else Stack()
        self.options: EvalOptions = options if options is not None else EvalOptions()
        # Soft faults reported (not raised) during evaluation, oldest first
        self.diagnostics: list[OrthError] = []

    def report(self, err: OrthError) -> None:
        """Record a soft fault and keep going."""
        logger.warning("%s", err)
        self.diagnostics.append(err)

    def fault(self, err: OrthError, fatal: bool) -> None:
        if fatal:
            raise err
        self.report(err)

    def unbound(self, name: str) -> None:
        self.fault(OrthUnboundWord(f"{name} not found"), self.options.strict_words)

    def mismatch(self, err: OrthTypeError) -> None:
        self.fault(err, self.options.strict_types)

    def __repr__(self) -> str:
        return f"<Context env={self.env} stack={self.stack!r}>"
