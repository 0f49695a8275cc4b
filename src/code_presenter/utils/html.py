"""HTML text helpers shared by the renderer and the render pipeline."""

from __future__ import annotations

import html as html_mod
import re
from typing import Any

_TAG_RE = re.compile(r"</?[^>]+>")


def escape_html(text: Any) -> str:
    """Escape ``& < > " '`` for safe embedding in HTML; ``None`` → ``""``."""
    if text is None:
        return ""
    return html_mod.escape(str(text), quote=True)


def html_to_plain_text(fragment: str) -> str:
    """Strip tags and decode entities (``&nbsp;`` becomes a plain space)."""
    if not fragment:
        return ""
    return html_mod.unescape(_TAG_RE.sub("", fragment)).replace("\xa0", " ")
