"""
Command line host for Orth.

    orth [FILE]          run a source file (default: $ORTH_SOURCE or test.orth)
    orth -i              interactive session; errors are reported, the session survives
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from orth.config import get_default_source, get_log_level, load_options
from orth.debug_utils.pprint import format_stack
from orth.errors import OrthError, OrthLexicalError
from orth.interpreter import Interpreter
from orth.reader.tokenizer import quotation_depth, tokenize

logger = logging.getLogger("orth")

EXIT_INPUT = 1
EXIT_RUNTIME = 2


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orth",
        description="Run Orth, a small concatenative language.",
    )
    parser.add_argument("file", nargs="?", type=Path, help="source file to run")
    parser.add_argument("-i", "--interactive", action="store_true",
                        help="start a REPL (after running FILE, if given)")
    parser.add_argument("--strict", action="store_true",
                        help="unbound words and type mismatches abort evaluation")
    parser.add_argument("--strict-words", action="store_true", default=None,
                        help="unbound words abort evaluation")
    parser.add_argument("--strict-types", action="store_true", default=None,
                        help="type mismatches abort evaluation")
    parser.add_argument("--show-stack", action="store_true",
                        help="print the stack when the program ends")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="more logging (-v info, -vv debug)")
    return parser


def _configure_logging(verbose: int) -> None:
    if verbose >= 2:
        level = "DEBUG"
    elif verbose == 1:
        level = "INFO"
    else:
        level = get_log_level()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def run_file(interp: Interpreter, path: Path) -> int:
    try:
        interp.eval_file(path)
    except OSError as e:
        print(f"error: cannot read {path}: {e.strerror or e}", file=sys.stderr)
        return EXIT_INPUT
    except OrthLexicalError as e:
        print(f"{path}: line {e.line}: {e.kind}", file=sys.stderr)
        return EXIT_INPUT
    except OrthError as e:
        print(f"{path}: {e}", file=sys.stderr)
        return EXIT_RUNTIME
    except RecursionError:
        print(f"{path}: quotation nesting too deep", file=sys.stderr)
        return EXIT_RUNTIME
    return 0


def _eval_chunk(interp: Interpreter, source: str) -> None:
    try:
        interp.eval(source)
    except OrthLexicalError as e:
        print(f"line {e.line}: {e.kind}", file=sys.stderr)
    except (OrthError, RecursionError) as e:
        print(f"error: {e}", file=sys.stderr)


def _open_quotations(source: str) -> bool:
    """True while `source` has an unclosed `{`. Lexical errors count as complete input."""
    try:
        return quotation_depth(tokenize(source)) > 0
    except OrthLexicalError:
        return False


def repl(interp: Interpreter, stdin=None) -> None:
    """Read-eval loop. Lines are collected until every `{` is closed, then run."""
    stdin = stdin or sys.stdin
    interactive = stdin.isatty()
    source = ""
    while True:
        if interactive:
            print("...   " if source else "orth> ", end="", flush=True)
        line = stdin.readline()
        if not line:
            break
        source += line
        if _open_quotations(source):
            continue
        _eval_chunk(interp, source)
        source = ""
    if source:
        # Input ended inside a quotation; let the evaluator report it
        _eval_chunk(interp, source)


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    _configure_logging(args.verbose)

    options = load_options()
    if args.strict:
        options = options.with_overrides(strict_words=True, strict_types=True)
    options = options.with_overrides(strict_words=args.strict_words, strict_types=args.strict_types)
    interp = Interpreter(options=options)
    logger.debug("options: %s", options)

    status = 0
    path = args.file
    if path is None and not args.interactive:
        path = get_default_source()
    if path is not None:
        status = run_file(interp, path)
    if args.interactive:
        repl(interp)
    if args.show_stack:
        print(format_stack(interp.stack))
    return status


if __name__ == "__main__":
    sys.exit(main())
