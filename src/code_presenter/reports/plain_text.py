"""Plain-text fallback page for sources too large to highlight.

The page is self-contained HTML with embedded CSS: a notice, the language
and line count, and the escaped source in a ``<pre>`` block.
"""

from __future__ import annotations

from code_presenter.model.rendered import RenderedDocument
from code_presenter.model.style_profile import StyleProfile
from code_presenter.utils.html import escape_html

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{label}</title>
<style>
  * {{ box-sizing: border-box; }}
  body {{ font-family: "Courier New", Courier, monospace; background: #ffffff; padding: 2rem; margin: 0; color: #111; }}
  .container {{ max-width: 1200px; margin: 0 auto; }}
  .notice {{ background: #f0f4ff; border: 1px solid #c6d4ff; padding: 1rem; border-radius: 6px; margin-bottom: 1.5rem; color: #234; font-size: 0.95rem; }}
  .meta {{ margin-bottom: 1rem; color: #555; font-size: 0.9rem; }}
  pre {{ background: #fafafa; border: 1px solid #e0e0e0; border-radius: 6px; padding: 1.5rem; overflow-x: auto; white-space: pre-wrap; word-wrap: break-word; line-height: 1.4; font-size: 13px; }}
</style>
</head>
<body>
<div class="container">
<div class="notice">Displaying <strong>{label}</strong> as plain text because it exceeds the syntax highlighting size threshold.</div>
<div class="meta">
<div>Language: {language}</div>
<div>Lines: {line_count:,}</div>
</div>
<pre>{source}</pre>
</div>
</body>
</html>
"""


def count_lines(text: str) -> int:
    """Number of lines in *text*; an empty string has none."""
    if not text:
        return 0
    return text.count("\n") + 1


def render_plain_text_page(
    source_text: str,
    *,
    language: str,
    language_label: str,
    profile: StyleProfile,
    label: str = "Large File",
) -> RenderedDocument:
    """Build the plain-text fallback document for *source_text*."""
    line_count = count_lines(source_text)
    page = _HTML_TEMPLATE.format(
        label=escape_html(label),
        language=escape_html(language_label),
        line_count=line_count,
        source=escape_html(source_text),
    )
    return RenderedDocument(
        lines=(),
        standalone_html=page,
        profile=profile,
        language=language,
        line_count=line_count,
        is_plain_text=True,
    )
