"""Single-pass, line-at-a-time lexer/highlighter.

Each line is scanned once, left to right, with lookahead restricted to the
line itself.  Priority at every scan position:

1. continuation of a block comment carried from the previous line
2. block-comment opener
3. line-comment marker (rest of the line, scanning stops)
4. quoted string (``\\`` escapes the next character; closes at end of line)
5. numeric literal (digits and ``.``)
6. identifier → keyword | function | type | variable
7. any other single character → operator

The lexer is total and lossless: every character lands in exactly one
span, and the spans of a line concatenate back to the line.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional

from code_presenter.core.grammars import LanguageGrammar
from code_presenter.model import TokenClass
from code_presenter.model.span import ScanState, Span
from code_presenter.utils.html import escape_html

_DIGITS = frozenset("0123456789")
_NUMBER_CHARS = _DIGITS | {"."}
_IDENT_START = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_")
_IDENT_CHARS = _IDENT_START | _DIGITS

# Leading " * " gutter of javadoc-style block comment lines.
_BLOCK_GUTTER_RE = re.compile(r"^\s*\*\s?")


def _block_body(inner: str) -> str:
    return _BLOCK_GUTTER_RE.sub("", inner, count=1).strip()


def _classify_word(word: str, line: str, end: int, grammar: LanguageGrammar) -> TokenClass:
    if grammar.is_keyword(word):
        return TokenClass.KEYWORD
    if end < len(line) and line[end] == "(":
        return TokenClass.FUNCTION
    if word[0].isupper():
        return TokenClass.TYPE
    return TokenClass.VARIABLE


def lex_line(
    line: str,
    grammar: LanguageGrammar,
    state: Optional[ScanState] = None,
) -> tuple[list[Span], ScanState]:
    """Classify one line.

    Returns the spans and the outgoing state.  The incoming *state* is not
    modified.
    """
    in_block = bool(state and state.in_block_comment)
    block = grammar.block_comment
    spans: list[Span] = []
    i = 0
    n = len(line)

    while i < n:
        if block is not None:
            opener, closer = block
            if in_block:
                close = line.find(closer, i)
                if close == -1:
                    spans.append(Span(TokenClass.COMMENT, line[i:], _block_body(line[i:])))
                    break
                end = close + len(closer)
                spans.append(Span(TokenClass.COMMENT, line[i:end], _block_body(line[i:close])))
                in_block = False
                i = end
                continue
            if line.startswith(opener, i):
                start = i + len(opener)
                close = line.find(closer, start)
                if close == -1:
                    spans.append(Span(TokenClass.COMMENT, line[i:], _block_body(line[start:])))
                    in_block = True
                    break
                end = close + len(closer)
                spans.append(
                    Span(TokenClass.COMMENT, line[i:end], _block_body(line[start:close]))
                )
                i = end
                continue

        marker = grammar.line_comment_at(line, i)
        if marker is not None:
            spans.append(
                Span(TokenClass.COMMENT, line[i:], line[i + len(marker):].strip())
            )
            break

        ch = line[i]

        if ch in grammar.quotes:
            start = i
            i += 1
            while i < n:
                if line[i] == "\\":
                    i += 2
                    continue
                if line[i] == ch:
                    i += 1
                    break
                i += 1
            i = min(i, n)
            spans.append(Span(TokenClass.STRING, line[start:i]))
            continue

        if ch in _DIGITS:
            start = i
            while i < n and line[i] in _NUMBER_CHARS:
                i += 1
            spans.append(Span(TokenClass.NUMBER, line[start:i]))
            continue

        if ch in _IDENT_START:
            start = i
            while i < n and line[i] in _IDENT_CHARS:
                i += 1
            word = line[start:i]
            spans.append(Span(_classify_word(word, line, i, grammar), word))
            continue

        spans.append(Span(TokenClass.OPERATOR, ch))
        i += 1

    return spans, ScanState(in_block_comment=in_block)


class Highlighter:
    """Per-buffer highlighting pass that owns its :class:`ScanState`."""

    def __init__(self, grammar: LanguageGrammar) -> None:
        self.grammar = grammar
        self.state = ScanState()

    def reset(self) -> None:
        self.state.reset()

    def feed(self, line: str) -> list[Span]:
        spans, self.state = lex_line(line, self.grammar, self.state)
        return spans

    def highlight(self, lines: Iterable[str]) -> list[list[Span]]:
        """Highlight a whole buffer, starting from a fresh state."""
        self.reset()
        return [self.feed(line) for line in lines]


def comment_only_body(spans: list[Span]) -> Optional[str]:
    """Return the comment body if *spans* form a comment-only line.

    Whitespace-only spans are ignored; what remains must be exactly one
    comment span.  Returns ``None`` for any other line.
    """
    significant = [s for s in spans if not s.is_whitespace]
    if len(significant) != 1 or not significant[0].is_comment:
        return None
    return significant[0].comment_body or ""


def spans_to_html(spans: Iterable[Span]) -> str:
    """Render spans as escaped ``<span class="…">`` markup.

    Whitespace-only operator spans are emitted as bare text.
    """
    parts: list[str] = []
    for span in spans:
        text = escape_html(span.text)
        if span.token is TokenClass.OPERATOR and span.is_whitespace:
            parts.append(text)
        else:
            parts.append(f'<span class="{span.token.value}">{text}</span>')
    return "".join(parts)


def highlight_fragment(text: str, grammar: LanguageGrammar) -> str:
    """Highlight *text* on its own, with a fresh state, and return HTML."""
    spans, _ = lex_line(text, grammar)
    return spans_to_html(spans)
