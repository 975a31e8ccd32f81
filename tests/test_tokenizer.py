import pytest
from hypothesis import given, strategies as st

from orth.errors import (
    OrthInvalidSymbol,
    OrthInvalidWord,
    OrthLexicalError,
    OrthUnfinishedString,
)
from orth.reader.tokenizer import Token, lex, quotation_depth, tokenize


@pytest.mark.parametrize(
    "source,expected",
    [
        (":foo bar", [("symbol", "foo", 1), ("word", "bar", 1)]),
        ('"hello world"', [("string", "hello world", 1)]),
        ('""', [("string", "", 1)]),
        ("{ 1 }", [("word", "{", 1), ("word", "1", 1), ("word", "}", 1)]),
        ("a\nb\n\nc", [("word", "a", 1), ("word", "b", 2), ("word", "c", 4)]),
        ("dup ; comment here\nswap", [("word", "dup", 1), ("word", "swap", 2)]),
        ("dup;comment\nswap", [("word", "dup", 1), ("word", "swap", 2)]),
        (":x;comment", [("symbol", "x", 1)]),
        ('"a;b" c', [("string", "a;b", 1), ("word", "c", 1)]),
        ("\t 5  :x\t@ ", [("word", "5", 1), ("symbol", "x", 1), ("word", "@", 1)]),
        (":{", [("symbol", "{", 1)]),
        ("#t #f", [("word", "#t", 1), ("word", "#f", 1)]),
    ]
)
def test_tokenize_basic(source, expected):
    assert tokenize(source) == expected


def test_tokens_are_named_tuples():
    (tok,) = tokenize("vget")
    assert isinstance(tok, Token)
    assert tok.kind == "word"
    assert tok.text == "vget"
    assert tok.line == 1


@pytest.mark.parametrize("source", ["", "   ", "; only a comment", "\n\n", ";a\n;b"])
def test_tokenize_empty(source):
    assert tokenize(source) == []


def test_string_spanning_lines_is_unfinished():
    with pytest.raises(OrthUnfinishedString) as exc:
        tokenize('"abc\n')
    assert exc.value.line == 1


def test_unfinished_string_at_end_of_input():
    with pytest.raises(OrthUnfinishedString) as exc:
        tokenize('1\n2\n"abc')
    assert exc.value.line == 3


def test_empty_symbol_reports_line_of_delimiter():
    with pytest.raises(OrthInvalidSymbol) as exc:
        tokenize(":\n")
    assert exc.value.line == 1


def test_empty_symbol_on_later_line():
    with pytest.raises(OrthInvalidSymbol) as exc:
        tokenize("a\nb\n: c")
    assert exc.value.line == 3


def test_empty_symbol_at_end_of_input():
    with pytest.raises(OrthInvalidSymbol):
        tokenize("1 :")


@pytest.mark.parametrize("source", [':a"b', ":a:b", "::"])
def test_invalid_symbol_body(source):
    with pytest.raises(OrthInvalidSymbol):
        tokenize(source)


@pytest.mark.parametrize("source", ['ab"c', "a:b", "a{", "a}", "{{", "{a", "}x"])
def test_invalid_word_body(source):
    with pytest.raises(OrthInvalidWord) as exc:
        tokenize(source)
    assert exc.value.line == 1


def test_invalid_word_line_number():
    with pytest.raises(OrthInvalidWord) as exc:
        tokenize("ok\nstill ok\nnot:ok")
    assert exc.value.line == 3


def test_error_aborts_without_partial_result():
    gen = lex("a b c:d e")
    assert next(gen) == ("word", "a", 1)
    assert next(gen) == ("word", "b", 1)
    with pytest.raises(OrthInvalidWord):
        next(gen)


def test_lexical_errors_share_a_base_class():
    for source in ('"x\n', ":\n", "a:b"):
        with pytest.raises(OrthLexicalError):
            tokenize(source)


# -------------------------------
# Hypothesis tests
# -------------------------------
alphabet = st.sampled_from(list('ab1.:;"{}#-\n \t'))


@given(st.text(alphabet, max_size=40))
def test_tokenizer_only_raises_lexical_errors(source):
    try:
        tokens = tokenize(source)
    except OrthLexicalError as e:
        assert e.line >= 1
        return
    for kind, text, line in tokens:
        assert kind in ("symbol", "string", "word")
        assert 1 <= line <= source.count("\n") + 1
        if kind != "string":
            assert text


word_strat = st.text(st.sampled_from(list("abcxyz0123456789-+!?@#")), min_size=1, max_size=8)


@given(st.lists(word_strat, max_size=10))
def test_words_round_trip(words):
    assert [t.text for t in tokenize(" ".join(words))] == words


@pytest.mark.parametrize(
    "source, depth",
    [("1 2", 0), ("{ 1", 1), ("{ { }", 1), ("{ }", 0), ("} {", 1), ('"{" :x', 0)],
)
def test_quotation_depth(source, depth):
    assert quotation_depth(tokenize(source)) == depth
