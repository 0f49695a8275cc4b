"""Style-profile resolution: defaults ← preset ← explicit overrides.

Resolution is total.  Every field is validated on its own and takes the
value of the last layer in which it is valid, so malformed caller input
degrades to "looks like the preset / the defaults" instead of raising.

Override mappings may be partial at any depth and may use either the
camelCase keys of preset files (``maxWidth``, ``fontStyles.codeBold``) or
snake_case (``max_width``, ``font_styles.code_bold``).
"""

from __future__ import annotations

import math
from typing import Any, Callable, Mapping, Optional, Union

from code_presenter.model import TokenClass
from code_presenter.model.style_profile import (
    DEFAULT_PROFILE,
    MAX_WIDTH,
    MIN_WIDTH,
    ColorScheme,
    Fonts,
    FontSizes,
    FontStyles,
    StyleProfile,
)

ProfileSource = Union[StyleProfile, Mapping[str, Any], None]

# wire key → snake_case alias
_SECTION_ALIASES = {
    "maxWidth": "max_width",
    "colors": "colors",
    "fontSizes": "font_sizes",
    "fonts": "fonts",
    "fontStyles": "font_styles",
}
_FONT_STYLE_KEYS = {
    "commentBold": "comment_bold",
    "commentItalic": "comment_italic",
    "codeBold": "code_bold",
    "codeItalic": "code_italic",
}

_MISSING = object()


# ── field validators ────────────────────────────────────────────────
# Each returns the normalized value, or _MISSING when the input is unusable.


def _to_number(value: Any) -> Any:
    if value is None or isinstance(value, bool):
        return _MISSING
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return _MISSING
    if not math.isfinite(numeric):
        return _MISSING
    return numeric


def _round_half_up(numeric: float) -> int:
    return math.floor(numeric + 0.5)


def clamp_width(value: Any) -> Any:
    numeric = _to_number(value)
    if numeric is _MISSING:
        return _MISSING
    return max(MIN_WIDTH, min(MAX_WIDTH, _round_half_up(numeric)))


def _font_size(value: Any) -> Any:
    numeric = _to_number(value)
    if numeric is _MISSING or numeric <= 0:
        return _MISSING
    return max(1, _round_half_up(numeric))


# Characters that would end a declaration, a rule or the <style> element.
_CSS_UNSAFE = frozenset("<>{};")


def _css_value(value: Any) -> Any:
    if not isinstance(value, str) or not value.strip():
        return _MISSING
    if _CSS_UNSAFE.intersection(value):
        return _MISSING
    return value.strip()


def _flag(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    return _MISSING


# ── layer access ────────────────────────────────────────────────────


def _as_layer(source: ProfileSource) -> Mapping[str, Any]:
    if isinstance(source, StyleProfile):
        return source.to_dict()
    if isinstance(source, Mapping):
        return source
    return {}


def _section(layer: Mapping[str, Any], key: str) -> Any:
    if key in layer:
        return layer[key]
    alias = _SECTION_ALIASES.get(key)
    if alias is not None and alias in layer:
        return layer[alias]
    return _MISSING


def _entry(section: Any, key: str, alias: Optional[str] = None) -> Any:
    if not isinstance(section, Mapping):
        return _MISSING
    if key in section:
        return section[key]
    if alias is not None and alias in section:
        return section[alias]
    return _MISSING


def _pick(
    layers: list[Mapping[str, Any]],
    section_key: str,
    entry_key: Optional[str],
    validate: Callable[[Any], Any],
    default: Any,
    alias: Optional[str] = None,
) -> Any:
    for layer in reversed(layers):
        raw = _section(layer, section_key)
        if raw is _MISSING:
            continue
        if entry_key is not None:
            raw = _entry(raw, entry_key, alias)
            if raw is _MISSING:
                continue
        value = validate(raw)
        if value is not _MISSING:
            return value
    return default


def resolve_profile(
    overrides: ProfileSource = None,
    *,
    preset: ProfileSource = None,
    defaults: StyleProfile = DEFAULT_PROFILE,
) -> StyleProfile:
    """Merge *defaults* ← *preset* ← *overrides* into a new StyleProfile.

    Never raises; non-mapping inputs are treated as empty layers.
    """
    layers = [_as_layer(defaults), _as_layer(preset), _as_layer(overrides)]

    colors = ColorScheme(
        **{
            t.value: _pick(layers, "colors", t.value, _css_value, defaults.colors.for_token(t))
            for t in TokenClass
        }
    )
    font_sizes = FontSizes(
        comment=_pick(layers, "fontSizes", "comment", _font_size, defaults.font_sizes.comment),
        code=_pick(layers, "fontSizes", "code", _font_size, defaults.font_sizes.code),
    )
    fonts = Fonts(
        comment=_pick(layers, "fonts", "comment", _css_value, defaults.fonts.comment),
        code=_pick(layers, "fonts", "code", _css_value, defaults.fonts.code),
    )
    default_styles = defaults.font_styles.to_dict()
    font_styles = FontStyles(
        **{
            snake: _pick(layers, "fontStyles", wire, _flag, default_styles[wire], alias=snake)
            for wire, snake in _FONT_STYLE_KEYS.items()
        }
    )
    return StyleProfile(
        max_width=_pick(layers, "maxWidth", None, clamp_width, defaults.max_width),
        colors=colors,
        font_sizes=font_sizes,
        fonts=fonts,
        font_styles=font_styles,
    )


def profiles_match(a: ProfileSource, b: ProfileSource) -> bool:
    """True when *a* and *b* resolve to the same profile."""
    if a is None or b is None:
        return False
    return resolve_profile(a) == resolve_profile(b)
