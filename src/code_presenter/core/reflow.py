"""Reflow engine: greedy code-line wrapping and comment-paragraph reflow.

Both operations are bounded by the profile's ``max_width``.

*Code-line wrap* scans backward from the width boundary, inside a
:data:`BREAK_WINDOW`-column window that never reaches into the indent, for
a break character and breaks just after it; with no candidate it breaks at
the width.  Continuation lines carry the line's own indent.

*Comment-paragraph reflow* turns a group of comment bodies into prose:
consecutive non-blank bodies are joined into one paragraph and re-wrapped,
blank bodies become single blank separators, and decorative bodies are
kept (normalized) as structural delimiters.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable

from code_presenter.core.decorative import normalize_decorative
from code_presenter.model import LineKind

logger = logging.getLogger(__name__)

BREAK_WINDOW = 30
BREAK_CHARS = frozenset(" ,;.(){}[]<>")

_WS_RE = re.compile(r"\s+")


@dataclass(frozen=True, slots=True)
class WrappedSegment:
    """One output fragment of a wrapped line.

    ``source_offset`` is the index in the input line of the first
    character this fragment took from it (indent prefixes excluded).
    """

    text: str
    source_offset: int


def wrap_segments(line: str, width: int, indent: str = "") -> list[WrappedSegment]:
    """Wrap *line* to *width*, keeping track of where each fragment came from."""
    decorative = normalize_decorative(line, width)
    if decorative:
        return [WrappedSegment(decorative, 0)]
    if len(indent) >= width or len(line) <= width:
        return [WrappedSegment(line, 0)]

    segments: list[WrappedSegment] = []
    remaining = line
    offset = 0
    prefix = 0
    while len(remaining) > width:
        brk = width
        i = width
        while i > width - BREAK_WINDOW and i > len(indent):
            if remaining[i] in BREAK_CHARS:
                brk = i + 1
                break
            i -= 1
        segments.append(WrappedSegment(remaining[:brk].rstrip(), offset))
        rest = remaining[brk:]
        stripped = rest.lstrip()
        offset += (brk - prefix) + (len(rest) - len(stripped))
        remaining = indent + stripped
        prefix = len(indent)

    if remaining.strip():
        segments.append(WrappedSegment(remaining, offset))
    return segments


def wrap_line(line: str, width: int, indent: str = "") -> list[str]:
    """Wrap *line* to *width*; lines that already fit come back unchanged."""
    return [seg.text for seg in wrap_segments(line, width, indent)]


def leading_indent(line: str) -> str:
    return line[: len(line) - len(line.lstrip())]


# ── comment paragraphs ──────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class ReflowEntry:
    """One output line of a reflowed comment group."""

    kind: LineKind          # COMMENT | DECORATIVE | BLANK
    text: str = ""


_BLANK = ReflowEntry(LineKind.BLANK)


def reflow_comment_group(bodies: Iterable[str], width: int) -> list[ReflowEntry]:
    """Reflow the comment *bodies* of one group into paragraphs.

    ``["a", "b", "", "c"]`` becomes paragraph ``a b``, a blank separator,
    then paragraph ``c``.  Consecutive blanks collapse to one, and blanks
    at either end of the group are dropped.
    """
    entries: list[ReflowEntry] = []
    buffer: list[str] = []
    has_text = False

    def add_blank() -> None:
        if entries and entries[-1].kind is not LineKind.BLANK:
            entries.append(_BLANK)

    def flush() -> None:
        nonlocal has_text
        if not buffer:
            return
        paragraph = _WS_RE.sub(" ", " ".join(buffer)).strip()
        buffer.clear()
        if not paragraph:
            return
        for text in wrap_line(paragraph, width, ""):
            entries.append(ReflowEntry(LineKind.COMMENT, text))
            has_text = True

    for raw in bodies:
        raw = raw or ""
        trimmed = raw.strip()
        if not trimmed:
            flush()
            add_blank()
            continue

        decorative = normalize_decorative(raw, width)
        if decorative:
            flush()
            entries.append(ReflowEntry(LineKind.DECORATIVE, decorative))
            if has_text:
                add_blank()
            has_text = False
            continue

        buffer.append(trimmed)

    flush()
    while entries and entries[-1].kind is LineKind.BLANK:
        entries.pop()

    logger.debug("reflowed comment group into %d lines", len(entries))
    return entries
