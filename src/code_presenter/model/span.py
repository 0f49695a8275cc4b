"""Span and ScanState: the lexer's output unit and its carried state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from . import TokenClass


@dataclass(frozen=True, slots=True)
class Span:
    """A classified fragment of one line.

    ``text`` is the raw source slice, so joining every span of a line gives
    the line back.  Comment spans also carry ``comment_body``: the text
    with its markers removed and whitespace trimmed.
    """

    token: TokenClass
    text: str
    comment_body: Optional[str] = None

    @property
    def is_comment(self) -> bool:
        return self.token is TokenClass.COMMENT

    @property
    def is_whitespace(self) -> bool:
        return not self.text.strip()

    def to_dict(self) -> dict:
        d: dict = {"class": self.token.value, "text": self.text}
        if self.comment_body is not None:
            d["comment_body"] = self.comment_body
        return d


@dataclass(slots=True)
class ScanState:
    """Lexer state threaded from one line to the next within a buffer.

    Only ``in_block_comment`` survives a line boundary.  Strings are
    closed at end of line, so ``in_string`` / ``string_delimiter`` are
    always reset when a line is finished.
    """

    in_block_comment: bool = False
    in_string: bool = False
    string_delimiter: str = ""

    def reset(self) -> None:
        self.in_block_comment = False
        self.in_string = False
        self.string_delimiter = ""
