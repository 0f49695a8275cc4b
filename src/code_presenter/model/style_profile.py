"""StyleProfile — the fully-populated presentation settings for one render.

Profiles are immutable values.  Build them with
:func:`code_presenter.styles.resolve.resolve_profile`; derive variants with
:meth:`StyleProfile.derive` rather than mutating a resolved profile.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from . import TokenClass

MIN_WIDTH = 40
MAX_WIDTH = 200
DEFAULT_WIDTH = 80


@dataclass(frozen=True, slots=True)
class ColorScheme:
    """One CSS color string per token class."""

    comment: str = "#228b22"
    keyword: str = "#0000ff"
    string: str = "#a31515"
    number: str = "#098658"
    function: str = "#795e26"
    type: str = "#267f99"
    variable: str = "#001080"
    operator: str = "#000000"

    def for_token(self, token: TokenClass) -> str:
        return getattr(self, token.value)

    def to_dict(self) -> dict[str, str]:
        return {t.value: self.for_token(t) for t in TokenClass}


@dataclass(frozen=True, slots=True)
class FontSizes:
    """Point sizes for comment text and code text."""

    comment: int = 11
    code: int = 12

    def to_dict(self) -> dict[str, int]:
        return {"comment": self.comment, "code": self.code}


@dataclass(frozen=True, slots=True)
class Fonts:
    """CSS font-family strings for comment text and code text."""

    comment: str = "'Bookman Old Style', serif"
    code: str = "'Courier New', Courier, monospace"

    def to_dict(self) -> dict[str, str]:
        return {"comment": self.comment, "code": self.code}


@dataclass(frozen=True, slots=True)
class FontStyles:
    comment_bold: bool = False
    comment_italic: bool = False
    code_bold: bool = True
    code_italic: bool = False

    def to_dict(self) -> dict[str, bool]:
        return {
            "commentBold": self.comment_bold,
            "commentItalic": self.comment_italic,
            "codeBold": self.code_bold,
            "codeItalic": self.code_italic,
        }


@dataclass(frozen=True, slots=True)
class StyleProfile:
    """Immutable, always fully-populated style profile.

    Equality is structural: two profiles are equal iff every field matches.
    """

    max_width: int = DEFAULT_WIDTH
    colors: ColorScheme = field(default_factory=ColorScheme)
    font_sizes: FontSizes = field(default_factory=FontSizes)
    fonts: Fonts = field(default_factory=Fonts)
    font_styles: FontStyles = field(default_factory=FontStyles)

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """Serialise using the camelCase keys of preset files."""
        return {
            "maxWidth": self.max_width,
            "colors": self.colors.to_dict(),
            "fontSizes": self.font_sizes.to_dict(),
            "fonts": self.fonts.to_dict(),
            "fontStyles": self.font_styles.to_dict(),
        }

    def derive(self, overrides: Optional[Mapping[str, Any]] = None) -> "StyleProfile":
        """Return a new profile with *overrides* layered on top of this one."""
        from code_presenter.styles.resolve import resolve_profile

        return resolve_profile(overrides, preset=self)


DEFAULT_PROFILE = StyleProfile()
