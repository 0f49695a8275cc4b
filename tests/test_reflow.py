"""Tests for code-line wrapping and comment-paragraph reflow."""

from code_presenter.core.reflow import (
    leading_indent,
    reflow_comment_group,
    wrap_line,
    wrap_segments,
)
from code_presenter.model import LineKind


class TestWrapLine:
    def test_fitting_line_is_unchanged(self):
        line = "    return compute(a, b);"
        assert wrap_line(line, 80, leading_indent(line)) == [line]

    def test_exact_width_is_unchanged(self):
        line = "x" * 80
        assert wrap_line(line, 80) == [line]

    def test_breaks_after_comma_and_keeps_indent(self):
        line = "  " + "a" * 58 + "," + "b" * 29
        assert len(line) == 90
        assert line.index(",") == 60

        out = wrap_line(line, 80, leading_indent(line))
        assert out == ["  " + "a" * 58 + ",", "  " + "b" * 29]

    def test_no_break_char_breaks_at_width(self):
        line = "z" * 100
        out = wrap_line(line, 80)
        assert out == ["z" * 80, "z" * 20]

    def test_every_fragment_fits(self):
        line = "    call(" + ", ".join(f"arg{i}" for i in range(60)) + ");"
        out = wrap_line(line, 60, leading_indent(line))
        assert len(out) > 1
        # a break character on the boundary column stays with its fragment
        assert all(len(part) <= 61 for part in out)
        assert all(part.startswith("    ") for part in out)

    def test_decorative_line_is_normalized(self):
        assert wrap_line("=" * 100, 80) == ["=" * 80]

    def test_segments_track_source_offsets(self):
        line = "  " + "a" * 58 + ", " + "b" * 29
        segs = wrap_segments(line, 80, "  ")
        assert segs[0].source_offset == 0
        assert line[segs[1].source_offset:] == "b" * 29


class TestReflowCommentGroup:
    def test_paragraphs_and_separator(self):
        entries = reflow_comment_group(["a", "b", "", "c"], 80)
        assert [(e.kind, e.text) for e in entries] == [
            (LineKind.COMMENT, "a b"),
            (LineKind.BLANK, ""),
            (LineKind.COMMENT, "c"),
        ]

    def test_consecutive_blanks_collapse(self):
        entries = reflow_comment_group(["a", "", "", "", "b"], 80)
        assert [e.kind for e in entries] == [
            LineKind.COMMENT,
            LineKind.BLANK,
            LineKind.COMMENT,
        ]

    def test_leading_and_trailing_blanks_dropped(self):
        entries = reflow_comment_group(["", "a", "", ""], 80)
        assert [(e.kind, e.text) for e in entries] == [(LineKind.COMMENT, "a")]

    def test_long_paragraph_is_wrapped(self):
        words = ["word%02d" % i for i in range(30)]
        entries = reflow_comment_group([" ".join(words[:15]), " ".join(words[15:])], 40)
        texts = [e.text for e in entries]
        assert len(texts) > 1
        assert all(len(t) <= 40 for t in texts)
        assert " ".join(texts).split() == words

    def test_decorative_body_is_a_delimiter(self):
        entries = reflow_comment_group(["Title", "=====", "body text"], 40)
        assert [(e.kind, e.text) for e in entries] == [
            (LineKind.COMMENT, "Title"),
            (LineKind.DECORATIVE, "=" * 40),
            (LineKind.BLANK, ""),
            (LineKind.COMMENT, "body text"),
        ]

    def test_empty_group(self):
        assert reflow_comment_group([], 80) == []
