"""Enums shared across the lexer, reflow and rendering layers."""

from __future__ import annotations

from enum import Enum


class TokenClass(str, Enum):
    """Lexical category of a span; doubles as its CSS class name."""

    COMMENT = "comment"
    KEYWORD = "keyword"
    STRING = "string"
    NUMBER = "number"
    FUNCTION = "function"
    TYPE = "type"
    VARIABLE = "variable"
    OPERATOR = "operator"


class LineKind(str, Enum):
    """Derived kind of one source line (never stored independently)."""

    CODE = "code"
    COMMENT = "comment"
    DECORATIVE = "decorative"
    BLANK = "blank"
