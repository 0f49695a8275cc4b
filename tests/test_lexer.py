"""Tests for the line lexer / highlighter."""

import pytest

from code_presenter.core.grammars import DEFAULT_GRAMMARS
from code_presenter.core.lexer import (
    Highlighter,
    comment_only_body,
    highlight_fragment,
    lex_line,
    spans_to_html,
)
from code_presenter.model import TokenClass
from code_presenter.model.span import ScanState

JS = DEFAULT_GRAMMARS.lookup("javascript")
PY = DEFAULT_GRAMMARS.lookup("python")
HTML = DEFAULT_GRAMMARS.lookup("html")


def _significant(spans):
    return [(s.token, s.text) for s in spans if not s.is_whitespace]


@pytest.mark.parametrize(
    "line",
    [
        "function foo() { return 1; }",
        "  const s = 'it\\'s'; // trailing",
        "/* open",
        "x = `tpl ${a}` + \"unterminated",
        "a /* inline */ b",
        "3.14.15 + 0x1F",
        "",
        "\t\tπ ≠ λ",
    ],
)
def test_spans_reconstruct_line(line):
    spans, _ = lex_line(line, JS)
    assert "".join(s.text for s in spans) == line


def test_function_line_classification():
    spans, state = lex_line("function foo() { return 1; }", JS)
    assert _significant(spans) == [
        (TokenClass.KEYWORD, "function"),
        (TokenClass.FUNCTION, "foo"),
        (TokenClass.OPERATOR, "("),
        (TokenClass.OPERATOR, ")"),
        (TokenClass.OPERATOR, "{"),
        (TokenClass.KEYWORD, "return"),
        (TokenClass.NUMBER, "1"),
        (TokenClass.OPERATOR, ";"),
        (TokenClass.OPERATOR, "}"),
    ]
    assert state.in_block_comment is False


def test_capitalized_identifier_is_type():
    spans, _ = lex_line("let m = Map", JS)
    assert (TokenClass.TYPE, "Map") in _significant(spans)
    assert (TokenClass.VARIABLE, "m") in _significant(spans)


def test_line_comment_consumes_rest_of_line():
    spans, _ = lex_line("x = 1; // note \"quoted\" 42", JS)
    last = spans[-1]
    assert last.token is TokenClass.COMMENT
    assert last.text == "// note \"quoted\" 42"
    assert last.comment_body == 'note "quoted" 42'


def test_comment_marker_inside_string_is_not_a_comment():
    spans, _ = lex_line('url = "http://example.com"', JS)
    assert all(s.token is not TokenClass.COMMENT for s in spans)
    assert (TokenClass.STRING, '"http://example.com"') in _significant(spans)


def test_unterminated_string_closes_at_end_of_line():
    spans, state = lex_line('s = "abc', JS)
    assert spans[-1].token is TokenClass.STRING
    assert spans[-1].text == '"abc'
    assert state.in_string is False


def test_escaped_quote_stays_in_string():
    spans, _ = lex_line(r'"a\"b" + c', JS)
    assert spans[0].text == r'"a\"b"'


def test_block_comment_carries_across_lines():
    hl = Highlighter(JS)
    first = hl.feed("/* start")
    assert hl.state.in_block_comment is True
    middle = hl.feed(" * middle")
    last = hl.feed(" end */ x")
    assert hl.state.in_block_comment is False

    assert first[0].comment_body == "start"
    assert middle[0].token is TokenClass.COMMENT
    assert middle[0].comment_body == "middle"
    assert last[0].text == " end */"
    assert (TokenClass.VARIABLE, "x") in _significant(last)


def test_lex_line_does_not_mutate_incoming_state():
    state = ScanState(in_block_comment=True)
    _, out = lex_line("done */", JS, state)
    assert state.in_block_comment is True
    assert out.in_block_comment is False


def test_highlight_resets_state_between_buffers():
    hl = Highlighter(JS)
    hl.highlight(["/* never closed"])
    assert hl.state.in_block_comment is True
    spans = hl.highlight(["x"])[0]
    assert spans[0].token is TokenClass.VARIABLE


def test_python_hash_comment():
    spans, _ = lex_line("def f(): # hi", PY)
    assert spans[0].token is TokenClass.KEYWORD
    assert spans[-1].token is TokenClass.COMMENT
    assert spans[-1].comment_body == "hi"


def test_html_block_comment_markers():
    spans, state = lex_line("<!-- banner -->", HTML)
    assert len(spans) == 1
    assert spans[0].comment_body == "banner"
    assert state.in_block_comment is False


def test_unknown_language_falls_back_to_default_grammar():
    grammar = DEFAULT_GRAMMARS.lookup("klingon")
    assert grammar.language_id == "csharp"
    spans, _ = lex_line("public void Run()", grammar)
    assert spans[0].token is TokenClass.KEYWORD


class TestCommentOnlyBody:
    def test_indented_comment_line(self):
        spans, _ = lex_line("    // hello world", JS)
        assert comment_only_body(spans) == "hello world"

    def test_code_with_comment_is_not_comment_only(self):
        spans, _ = lex_line("x(); // call", JS)
        assert comment_only_body(spans) is None

    def test_bare_opener_has_empty_body(self):
        spans, _ = lex_line("/**", JS)
        assert comment_only_body(spans) == ""


class TestHtmlOutput:
    def test_spans_are_escaped(self):
        out = highlight_fragment('a < "<b>"', JS)
        assert "<b>" not in out
        assert '<span class="string">&quot;&lt;b&gt;&quot;</span>' in out

    def test_whitespace_is_emitted_unwrapped(self):
        spans, _ = lex_line("  x", JS)
        assert spans_to_html(spans) == '  <span class="variable">x</span>'
