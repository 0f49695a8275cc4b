"""
code_presenter.api
==================

Programmatic entrypoints for the presentation engine.

Goals:
  - No argparse / HTTP dependencies
  - Pure rendering: callers own reading sources and writing pages
  - Total style resolution: bad style input degrades to defaults

Non-goals:
  - Directory traversal, manifests and index pages (callers build those)
  - Extension sniffing beyond :func:`language_for_path`

Usage::

    from code_presenter.api import render, resolve_style_profile

    profile = resolve_style_profile("dark", overrides={"maxWidth": 100})
    doc = render(source, "javascript", profile)
    Path("out.html").write_text(doc.standalone_html, encoding="utf-8")
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from code_presenter.core.config import RenderConfig
from code_presenter.core.grammars import DEFAULT_GRAMMARS, GrammarTable
from code_presenter.core.render import render as _render
from code_presenter.model.rendered import RenderedDocument
from code_presenter.model.style_profile import DEFAULT_PROFILE, StyleProfile
from code_presenter.reports.plain_text import render_plain_text_page
from code_presenter.styles import PresetRegistry, StyleSpec
from code_presenter.styles import resolve_style_profile as _resolve_style_profile
from code_presenter.utils.html import escape_html

logger = logging.getLogger(__name__)

__all__ = [
    "LANGUAGE_BY_EXTENSION",
    "SourceTooLargeError",
    "escape_html",
    "language_for_path",
    "render",
    "render_source",
    "resolve_style_profile",
]

LANGUAGE_BY_EXTENSION = {
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".json": "json",
    ".html": "html",
    ".htm": "html",
    ".css": "css",
    ".py": "python",
    ".java": "java",
    ".cs": "csharp",
    ".cpp": "cpp",
    ".cc": "cpp",
    ".h": "cpp",
    ".hpp": "cpp",
}


class SourceTooLargeError(ValueError):
    """Raised by :func:`render_source` for sources over ``max_source_length``."""

    def __init__(self, length: int, limit: int) -> None:
        self.length = length
        self.limit = limit
        super().__init__(f"source is {length:,} characters (limit {limit:,})")


def language_for_path(path: str | Path) -> Optional[str]:
    """Map a file extension to a language id; ``None`` when unknown."""
    return LANGUAGE_BY_EXTENSION.get(Path(path).suffix.lower())


# ── resolveStyleProfile ─────────────────────────────────────────────


@lru_cache(maxsize=1)
def _builtin_registry() -> PresetRegistry:
    return PresetRegistry.with_builtins()


def resolve_style_profile(
    name_or_overrides: StyleSpec = None,
    *,
    overrides: StyleSpec = None,
    registry: Optional[PresetRegistry] = None,
) -> StyleProfile:
    """Resolve a style name, inline JSON, base64 JSON or mapping.

    Without an explicit *registry*, string styles are looked up in the
    built-in presets (loaded once per process).  ``None`` and mappings
    never touch a registry.
    """
    if registry is None and (
        isinstance(name_or_overrides, str) or isinstance(overrides, str)
    ):
        registry = _builtin_registry()
    return _resolve_style_profile(name_or_overrides, overrides=overrides, registry=registry)


# ── render ──────────────────────────────────────────────────────────


def _as_profile(style: StyleSpec, registry: Optional[PresetRegistry]) -> StyleProfile:
    if isinstance(style, StyleProfile):
        return style
    if style is None:
        return DEFAULT_PROFILE
    return resolve_style_profile(style, registry=registry)


def render(
    source_text: str,
    language_id: Optional[str] = "javascript",
    style_profile: StyleSpec = None,
    *,
    grammars: GrammarTable = DEFAULT_GRAMMARS,
    registry: Optional[PresetRegistry] = None,
) -> RenderedDocument:
    """Render *source_text* into highlighted, reflowed HTML.

    *style_profile* may be a resolved :class:`StyleProfile` or anything
    :func:`resolve_style_profile` accepts.
    """
    style_profile = _as_profile(style_profile, registry)
    return _render(source_text, language_id, style_profile, grammars=grammars)


def render_source(
    source_text: str,
    language_id: Optional[str],
    style_profile: StyleSpec = None,
    *,
    label: Optional[str] = None,
    config: Optional[RenderConfig] = None,
    grammars: GrammarTable = DEFAULT_GRAMMARS,
    registry: Optional[PresetRegistry] = None,
) -> RenderedDocument:
    """Render like :func:`render`, applying the pipeline's size policy.

    Sources over ``config.max_source_length`` raise
    :class:`SourceTooLargeError`; sources over
    ``config.plain_text_threshold`` get the plain-text fallback page.
    """
    config = config or RenderConfig()
    style_profile = _as_profile(style_profile, registry)

    length = len(source_text)
    if length > config.max_source_length:
        raise SourceTooLargeError(length, config.max_source_length)

    if length > config.plain_text_threshold:
        grammar = grammars.lookup(language_id)
        logger.info(
            "Large source (%s characters); rendering %s as plain text",
            f"{length:,}", label or "input",
        )
        return render_plain_text_page(
            source_text,
            language=grammar.language_id,
            language_label=grammar.display_name,
            profile=style_profile,
            label=label or "Large File",
        )

    return _render(source_text, language_id, style_profile, grammars=grammars)
