"""RenderedDocument: the immutable result of rendering one source buffer."""

from __future__ import annotations

from dataclasses import dataclass

from .style_profile import StyleProfile


@dataclass(frozen=True, slots=True)
class RenderedDocument:
    """Rendered HTML line-fragments plus the standalone page built from them.

    ``line_count`` is the number of rendered fragments, which differs from
    the source line count once lines are wrapped or comment groups reflowed.
    """

    lines: tuple[str, ...]
    standalone_html: str
    profile: StyleProfile
    language: str
    line_count: int
    is_plain_text: bool = False

    def to_dict(self) -> dict:
        return {
            "lines": list(self.lines),
            "standalone_html": self.standalone_html,
            "line_count": self.line_count,
            "language": self.language,
            "is_plain_text": self.is_plain_text,
            "profile": self.profile.to_dict(),
        }
