"""Pages the render pipeline emits instead of a highlighted document."""

from code_presenter.reports.plain_text import count_lines, render_plain_text_page

__all__ = ["count_lines", "render_plain_text_page"]
