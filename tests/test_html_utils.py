"""Tests for the HTML text helpers."""

from code_presenter.utils.html import escape_html, html_to_plain_text


def test_escape_all_special_characters():
    assert escape_html("& < > \" '") == "&amp; &lt; &gt; &quot; &#x27;"


def test_escape_non_string():
    assert escape_html(42) == "42"
    assert escape_html(None) == ""


def test_html_to_plain_text():
    fragment = '<span class="keyword">if</span> a &lt; b&nbsp;'
    assert html_to_plain_text(fragment) == "if a < b "
    assert html_to_plain_text("") == ""
