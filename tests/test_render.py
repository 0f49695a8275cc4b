"""End-to-end tests for the render assembler."""

import pytest

from code_presenter.core.grammars import DEFAULT_GRAMMARS
from code_presenter.core.lexer import lex_line
from code_presenter.core.render import build_css, classify_line, render
from code_presenter.model import LineKind
from code_presenter.model.style_profile import DEFAULT_PROFILE, StyleProfile
from code_presenter.utils.html import html_to_plain_text

JS = DEFAULT_GRAMMARS.lookup("javascript")


def _kind(text):
    spans, _ = lex_line(text, JS)
    return classify_line(text, spans)


@pytest.mark.parametrize(
    "text, kind",
    [
        ("", LineKind.BLANK),
        ("   \t", LineKind.BLANK),
        ("// note", LineKind.COMMENT),
        ("    /* boxed */", LineKind.COMMENT),
        ("========", LineKind.DECORATIVE),
        ("x = 1; // trailing", LineKind.CODE),
        ("return;", LineKind.CODE),
    ],
)
def test_classify_line(text, kind):
    assert _kind(text) is kind


def test_comment_group_reflows_into_paragraphs():
    doc = render("// a\n// b\n\n// c", "javascript")
    assert list(doc.lines) == [
        '<span class="comment">a b</span>',
        "&nbsp;",
        '<span class="comment">c</span>',
    ]
    assert doc.line_count == 3


def test_function_line_spans():
    doc = render("function foo() { return 1; }", "javascript")
    assert doc.lines == (
        '<span class="keyword">function</span> '
        '<span class="function">foo</span>'
        '<span class="operator">(</span><span class="operator">)</span> '
        '<span class="operator">{</span> '
        '<span class="keyword">return</span> '
        '<span class="number">1</span><span class="operator">;</span> '
        '<span class="operator">}</span>',
    )


def test_decorative_code_line_fills_width():
    doc = render("============", "javascript", StyleProfile(max_width=40))
    assert doc.lines == ("=" * 40,)


def test_banner_inside_comment_group():
    source = "// ======\n// Title\n// ======\nx;"
    doc = render(source, "javascript")
    banner = '<span class="comment">' + "=" * 80 + "</span>"
    assert list(doc.lines) == [
        banner,
        '<span class="comment">Title</span>',
        banner,
        '<span class="variable">x</span><span class="operator">;</span>',
    ]


def test_long_code_line_wraps_with_indent():
    line = "  " + "a" * 58 + "," + "b" * 29
    doc = render(line, "javascript")
    assert len(doc.lines) == 2
    assert html_to_plain_text(doc.lines[0]) == "  " + "a" * 58 + ","
    assert html_to_plain_text(doc.lines[1]) == "  " + "b" * 29


def test_wrapped_trailing_comment_stays_comment():
    line = "call(alpha, beta); // " + "lorem ipsum " * 8
    doc = render(line.rstrip(), "javascript")
    assert len(doc.lines) == 2
    assert '<span class="function">call</span>' in doc.lines[0]
    assert doc.lines[1].startswith('<span class="comment">')


def test_block_comment_run_is_reflowed():
    source = "/**\n * Adds two\n * numbers.\n */\nfunction add(a, b) {}"
    doc = render(source, "javascript")
    assert doc.lines[0] == '<span class="comment">Adds two numbers.</span>'
    assert '<span class="function">add</span>' in doc.lines[1]
    assert len(doc.lines) == 2


def test_text_is_escaped():
    doc = render('x = "<script>";', "javascript")
    assert "<script>" not in doc.lines[0]
    assert "&lt;script&gt;" in doc.lines[0]


def test_blank_lines_and_crlf():
    doc = render("a\r\n\r\nb", "javascript")
    assert doc.lines == (
        '<span class="variable">a</span>',
        "",
        '<span class="variable">b</span>',
    )


def test_unknown_language_uses_default_grammar():
    doc = render("public int x;", "brainfuck")
    assert doc.language == "csharp"
    assert doc.lines[0].startswith('<span class="keyword">public</span>')


class TestStandaloneHtml:
    def test_page_has_one_container_per_line(self):
        doc = render("let a = 1;\nlet b = 2;", "javascript")
        assert doc.standalone_html.count('<div class="code-line">') == doc.line_count
        assert "<title>Formatted Code - JavaScript</title>" in doc.standalone_html

    def test_css_follows_profile(self):
        profile = DEFAULT_PROFILE.derive(
            {"colors": {"keyword": "#123456"}, "fontStyles": {"commentItalic": True}}
        )
        css = build_css(profile)
        assert ".keyword { color: #123456; font-weight: 600; }" in css
        assert "font-style: italic" in css
        assert "font-size: 11pt" in css

    def test_profile_is_carried_on_document(self):
        profile = StyleProfile(max_width=120)
        doc = render("x", "javascript", profile)
        assert doc.profile is profile
        assert doc.to_dict()["profile"]["maxWidth"] == 120
