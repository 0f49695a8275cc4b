"""Decorative-line detection and width normalization.

A decorative line is three or more repetitions of one border character,
optionally indented, e.g. ``    ==========``.  Normalizing stretches or
shrinks the run so the line exactly fills the target width.
"""

from __future__ import annotations

import re
from typing import NamedTuple, Optional

DECORATIVE_CHARS = frozenset("=-*_#~")

_DECORATIVE_RE = re.compile(r"^(\s*)([=\-*#_~]{3,})\s*$")


class DecorativeLine(NamedTuple):
    leading: str
    char: str


def analyze_decorative_line(line: Optional[str]) -> Optional[DecorativeLine]:
    """Return the indent and border character, or ``None`` if not decorative."""
    if not line:
        return None
    match = _DECORATIVE_RE.match(line)
    if match is None:
        return None
    leading, run = match.groups()
    char = run[0]
    if char not in DECORATIVE_CHARS or run.strip(char):
        return None
    return DecorativeLine(leading, char)


def normalize_decorative(line: Optional[str], width: int) -> Optional[str]:
    """Rewrite a decorative *line* to fill *width* columns.

    Returns ``None`` for lines that are not decorative.  When the indent
    already uses the full width only the indent is returned.  Idempotent
    whenever at least three columns remain after the indent.
    """
    info = analyze_decorative_line(line)
    if info is None:
        return None
    available = max(width - len(info.leading), 0)
    if available == 0:
        return info.leading
    return info.leading + info.char * available
