"""code_presenter: render source text as styled, reflowed, standalone HTML."""

__all__ = [
    "__version__",
    "render",
    "render_source",
    "resolve_style_profile",
    "escape_html",
    # Model
    "RenderedDocument",
    "StyleProfile",
    # Presets
    "PresetRegistry",
]
__version__ = "0.1.0"

# Programmatic engine entrypoints (see api.py).
from code_presenter.api import (  # noqa: E402, F401
    escape_html,
    render,
    render_source,
    resolve_style_profile,
)
from code_presenter.model.rendered import RenderedDocument  # noqa: E402, F401
from code_presenter.model.style_profile import StyleProfile  # noqa: E402, F401
from code_presenter.styles.registry import PresetRegistry  # noqa: E402, F401
