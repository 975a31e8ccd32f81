from __future__ import annotations

from pathlib import Path

from orth import OrthValue
from orth.builtin.registry import Registry, default_registry
from orth.config import EvalOptions, load_options
from orth.errors import OrthError
from orth.evaluation.evaluator import evaluate
from orth.reader.parser import parse
from orth.reader.tokenizer import tokenize
from orth.types.context import Context
from orth.types.environment import Environment
from orth.types.stack import Stack
from orth.types.symbol import SymbolTable


class Interpreter:
    """
    Drives tokenize -> parse -> evaluate for Orth source.
    Keeps one Context (stack and environment) and one symbol table across calls.
    """

    def __init__(
        self,
        registry: Registry | None = None,
        options: EvalOptions | None = None,
    ):
        self.registry: Registry = registry if registry is not None else default_registry()
        self.options: EvalOptions = options if options is not None else load_options()
        self.context = Context(self.registry, options=self.options)
        self.symbols = SymbolTable()

    @property
    def stack(self) -> Stack:
        return self.context.stack

    @property
    def env(self) -> Environment:
        return self.context.env

    @property
    def diagnostics(self) -> list[OrthError]:
        return self.context.diagnostics

    def read(self, code: str) -> list[OrthValue]:
        """Tokenize and parse `code`. Lexical errors propagate before anything runs."""
        return parse(tokenize(code), self.registry, self.symbols)

    def eval(self, code: str) -> Stack:
        evaluate(self.read(code), self.context)
        return self.context.stack

    def eval_file(self, path: str | Path) -> Stack:
        return self.eval(Path(path).read_text(encoding="utf-8"))

    def define(self, name: str, value: OrthValue) -> None:
        """Bind `name` in the session environment from the host side."""
        self.context.env.define(name, value)
