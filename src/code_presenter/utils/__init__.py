"""Shared utilities for code_presenter."""

from code_presenter.utils.html import escape_html, html_to_plain_text
from code_presenter.utils.json_norm import stable_json_dump, stable_json_dumps

__all__ = [
    "escape_html",
    "html_to_plain_text",
    "stable_json_dump",
    "stable_json_dumps",
]
