import pytest

from orth.builtin.registry import Registry, default_registry
from orth.errors import OrthIndexError, OrthStackUnderflow, OrthTypeError, OrthUnboundWord
from orth.evaluation.evaluator import evaluate
from orth.reader.parser import parse
from orth.reader.tokenizer import tokenize
from orth.types.values import BuiltinRef


def run(source, ctx):
    evaluate(parse(tokenize(source), ctx.registry), ctx)
    return ctx.stack.items


# -------------------------------
# Registry
# -------------------------------
def test_default_registry_names():
    assert default_registry().names() == [
        "@", "swap", "make-vec", "vpush!", "vget",
        "show-ctx", "show-top", "show-stack", "show-env",
    ]
    assert "show-ctx" not in default_registry(debug=False)


def test_redefine_keeps_index():
    registry = Registry()
    first = registry.define("f", lambda ctx: None)
    registry.define("g", lambda ctx: None)
    second = registry.define("f", print)
    assert first.index == second.index == 0
    assert registry.resolve(first.ref).fn is print
    assert len(registry) == 2


def test_resolve_foreign_handle():
    with pytest.raises(OrthUnboundWord):
        Registry().resolve(BuiltinRef("swap", 1))


def test_custom_builtin(ctx):
    ctx.registry.define("dup", lambda c: c.stack.push(c.stack.peek()))
    assert run("4 dup", ctx) == [4, 4]


# -------------------------------
# Core builtins
# -------------------------------
def test_swap(ctx):
    assert run("1 2 swap", ctx) == [2, 1]


def test_vectors(ctx):
    assert run('make-vec 1 vpush! "two" vpush!', ctx) == [[1, "two"]]
    assert run("1 vget", ctx) == ["two"]


def test_vget_copies_element(ctx):
    run("make-vec make-vec vpush! :v @ v 0 vget 9 vpush!", ctx)
    assert ctx.env.get("v") == [[]]
    assert ctx.stack.items == [[9]]


@pytest.mark.parametrize("source", ["@", "1 @", "swap", "1 swap", "vpush!", "make-vec vget"])
def test_underflow_leaves_stack_untouched(source, ctx):
    with pytest.raises(OrthStackUnderflow):
        run(source, ctx)
    assert len(ctx.stack) == source.count("1") + source.count("make-vec")


@pytest.mark.parametrize(
    "source",
    ["1 2 @", "1 2 vpush!", "make-vec #t vget", "make-vec 1.0 vget", '"s" 0 vget'],
)
def test_mismatch_is_a_no_op_when_lenient(source, ctx):
    before = parse(tokenize(source.rsplit(" ", 1)[0]), ctx.registry)
    stack = run(source, ctx)
    assert len(stack) == len(before)
    assert isinstance(ctx.diagnostics[-1], OrthTypeError)


def test_mismatch_raises_when_strict(strict_ctx):
    with pytest.raises(OrthTypeError):
        run("1 2 @", strict_ctx)
    assert strict_ctx.stack.items == [1, 2]


@pytest.mark.parametrize("index", ["0", "-1", "5"])
def test_vget_out_of_range(index, ctx):
    with pytest.raises(OrthIndexError):
        run(f"make-vec {index} vget", ctx)
    assert ctx.stack.items == [[], int(index)]


# -------------------------------
# Debug builtins
# -------------------------------
def test_show_stack(ctx, capsys):
    run("1 :a show-stack", ctx)
    assert capsys.readouterr().out == "stack:\n 0: :a\n 1: 1\n"


def test_show_top(ctx, capsys):
    run("show-top 2.5 show-top", ctx)
    assert capsys.readouterr().out == "empty\n2.5\n"


def test_show_env(ctx, capsys):
    run('{ 1 } :q @ "v" :s @ #t :b @ show-env', ctx)
    assert capsys.readouterr().out == 'env:\n q: quotation\n s: "v"\n b: #t\n'


def test_show_ctx(ctx, capsys):
    run("make-vec 3 vpush! :v @ 7 show-ctx", ctx)
    assert capsys.readouterr().out == "env:\n v: [3]\nstack:\n 0: 7\n"
    assert ctx.stack.items == [7]
