"""Render assembler — source buffer in, styled HTML document out.

Pipeline per buffer::

    lex every line (carrying ScanState)
      → comment-only runs   → comment-paragraph reflow
      → decorative lines    → normalized to width
      → over-width lines    → wrapped, fragments re-highlighted
      → everything else     → highlighted as-is
    → standalone HTML page with CSS generated from the StyleProfile

The assembler is a pure function of its inputs: no I/O, no shared state.
"""

from __future__ import annotations

import logging
from typing import Optional

from code_presenter.core.decorative import analyze_decorative_line, normalize_decorative
from code_presenter.core.grammars import DEFAULT_GRAMMARS, GrammarTable, LanguageGrammar
from code_presenter.core.lexer import (
    Highlighter,
    comment_only_body,
    highlight_fragment,
    spans_to_html,
)
from code_presenter.core.reflow import leading_indent, reflow_comment_group, wrap_segments
from code_presenter.model import LineKind, TokenClass
from code_presenter.model.rendered import RenderedDocument
from code_presenter.model.span import Span
from code_presenter.model.style_profile import DEFAULT_PROFILE, StyleProfile
from code_presenter.utils.html import escape_html

logger = logging.getLogger(__name__)

BLANK_FRAGMENT = "&nbsp;"


def classify_line(text: str, spans: list[Span]) -> LineKind:
    """Derive the kind of one lexed line."""
    if not text.strip():
        return LineKind.BLANK
    if comment_only_body(spans) is not None:
        return LineKind.COMMENT
    if analyze_decorative_line(text) is not None:
        return LineKind.DECORATIVE
    return LineKind.CODE


def _comment_fragment(text: str) -> str:
    return f'<span class="comment">{escape_html(text)}</span>'


def _comment_start(spans: list[Span]) -> Optional[int]:
    offset = 0
    for span in spans:
        if span.is_comment:
            return offset
        offset += len(span.text)
    return None


def _wrap_code_line(
    text: str,
    spans: list[Span],
    width: int,
    grammar: LanguageGrammar,
) -> list[str]:
    comment_at = _comment_start(spans)
    out: list[str] = []
    for seg in wrap_segments(text, width, leading_indent(text)):
        if comment_at is not None and seg.source_offset >= comment_at:
            out.append(_comment_fragment(seg.text))
        else:
            out.append(highlight_fragment(seg.text, grammar))
    return out


def format_lines(
    source_text: str,
    grammar: LanguageGrammar,
    width: int,
) -> list[str]:
    """Return the rendered HTML fragment for every output line."""
    lines = source_text.replace("\r\n", "\n").split("\n")
    lexed = Highlighter(grammar).highlight(lines)
    kinds = [classify_line(text, spans) for text, spans in zip(lines, lexed)]
    out: list[str] = []

    i = 0
    total = len(lines)
    while i < total:
        text = lines[i]
        spans = lexed[i]
        kind = kinds[i]

        if kind is LineKind.COMMENT:
            bodies: list[str] = []
            j = i
            while j < total and kinds[j] in (LineKind.COMMENT, LineKind.BLANK):
                bodies.append(comment_only_body(lexed[j]) or "")
                j += 1
            for entry in reflow_comment_group(bodies, width):
                if entry.kind is LineKind.BLANK:
                    out.append(BLANK_FRAGMENT)
                else:
                    out.append(_comment_fragment(entry.text))
            i = j
            continue

        i += 1
        if kind is LineKind.BLANK:
            out.append(escape_html(text))
            continue

        if kind is LineKind.DECORATIVE:
            out.append(escape_html(normalize_decorative(text, width)))
            continue

        if len(text) <= width:
            out.append(spans_to_html(spans))
            continue

        out.extend(_wrap_code_line(text, spans, width, grammar))

    return out


# ── standalone document ─────────────────────────────────────────────

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Formatted Code - {title}</title>
    <style>
{css}
    </style>
</head>
<body>
    <div class="container">
        <div class="code-container">
{body}
        </div>
    </div>
</body>
</html>
"""


def _weight(flag: bool) -> str:
    return "bold" if flag else "normal"


def _style(flag: bool) -> str:
    return "italic" if flag else "normal"


def build_css(profile: StyleProfile) -> str:
    """Inline CSS for a rendered page, one rule per token class."""
    colors = profile.colors
    sizes = profile.font_sizes
    fonts = profile.fonts
    styles = profile.font_styles
    rules = [
        "* { margin: 0; padding: 0; box-sizing: border-box; }",
        (
            f"body {{ font-family: {fonts.code}; background: #ffffff; padding: 3rem;"
            f" color: #000000; line-height: 1.6; font-size: {sizes.code}pt;"
            f" font-weight: {_weight(styles.code_bold)};"
            f" font-style: {_style(styles.code_italic)}; }}"
        ),
        ".container { max-width: 1200px; margin: 0 auto; background: #ffffff; }",
        ".code-container { background: #ffffff; padding: 0; }",
        ".code-line { white-space: pre-wrap; word-wrap: break-word; margin-bottom: 0.1rem; }",
        (
            f".comment {{ color: {colors.comment}; font-size: {sizes.comment}pt;"
            f" font-family: {fonts.comment};"
            f" font-weight: {_weight(styles.comment_bold)};"
            f" font-style: {_style(styles.comment_italic)}; }}"
        ),
    ]
    for token in TokenClass:
        if token is TokenClass.COMMENT:
            continue
        extra = " font-weight: 600;" if token is TokenClass.KEYWORD else ""
        rules.append(f".{token.value} {{ color: {colors.for_token(token)};{extra} }}")
    rules.append("@media print { body { padding: 1rem; } .code-container { border: none; padding: 0; } }")
    return "\n".join(f"        {rule}" for rule in rules)


def build_standalone_html(
    lines: list[str] | tuple[str, ...],
    profile: StyleProfile,
    title: str,
) -> str:
    """Wrap rendered fragments in a complete page with embedded CSS."""
    body = "\n".join(
        f'            <div class="code-line">{line}</div>' for line in lines
    )
    return _HTML_TEMPLATE.format(
        title=escape_html(title),
        css=build_css(profile),
        body=body,
    )


def render(
    source_text: str,
    language_id: Optional[str] = "javascript",
    profile: Optional[StyleProfile] = None,
    *,
    grammars: GrammarTable = DEFAULT_GRAMMARS,
) -> RenderedDocument:
    """Render *source_text* as highlighted, reflowed HTML."""
    profile = profile or DEFAULT_PROFILE
    grammar = grammars.lookup(language_id)
    lines = tuple(format_lines(source_text or "", grammar, profile.max_width))
    logger.debug(
        "rendered %d fragments (%s, width %d)",
        len(lines), grammar.language_id, profile.max_width,
    )
    return RenderedDocument(
        lines=lines,
        standalone_html=build_standalone_html(lines, profile, grammar.display_name),
        profile=profile,
        language=grammar.language_id,
        line_count=len(lines),
    )
