"""Style profiles: resolution, presets and the caller-facing resolver."""

from __future__ import annotations

import base64
import binascii
import json
import logging
from typing import Any, Mapping, Optional, Union

from code_presenter.model.style_profile import DEFAULT_PROFILE, StyleProfile
from code_presenter.styles.registry import (
    Preset,
    PresetError,
    PresetLoadError,
    PresetRegistry,
    _profile_source,
)
from code_presenter.styles.resolve import profiles_match, resolve_profile

logger = logging.getLogger(__name__)

StyleSpec = Union[StyleProfile, Mapping[str, Any], str, None]

__all__ = [
    "Preset",
    "PresetError",
    "PresetLoadError",
    "PresetRegistry",
    "StyleSpec",
    "decode_style_config",
    "profiles_match",
    "resolve_profile",
    "resolve_style_profile",
]


def decode_style_config(text: str) -> Optional[Mapping[str, Any]]:
    """Decode inline JSON or base64-encoded JSON into an override mapping.

    Returns ``None`` when *text* is neither.
    """
    candidate = text.strip()
    if not candidate.startswith("{"):
        try:
            candidate = base64.b64decode(candidate, validate=True).decode("utf-8").strip()
        except (binascii.Error, UnicodeDecodeError, ValueError):
            return None
    try:
        data = json.loads(candidate)
    except json.JSONDecodeError:
        return None
    return _profile_source(data)


def _layer(
    spec: StyleSpec,
    registry: Optional[PresetRegistry],
) -> Union[StyleProfile, Mapping[str, Any], None]:
    if spec is None or isinstance(spec, StyleProfile):
        return spec
    if isinstance(spec, Mapping):
        return _profile_source(spec)
    if isinstance(spec, str):
        name = spec.strip()
        if not name:
            return None
        if registry is not None:
            profile = registry.get_profile(name)
            if profile is not None:
                return profile
        decoded = decode_style_config(name)
        if decoded is not None:
            return decoded
        logger.warning("Unknown style %r; using defaults", name)
        return None
    logger.warning("Ignoring style of type %s", type(spec).__name__)
    return None


def resolve_style_profile(
    name_or_overrides: StyleSpec = None,
    *,
    overrides: StyleSpec = None,
    registry: Optional[PresetRegistry] = None,
) -> StyleProfile:
    """Turn a style name, inline JSON, base64 JSON or mapping into a profile.

    *name_or_overrides* is the preset layer and *overrides* is layered on
    top of it.  Never raises: anything unusable resolves to the defaults.
    """
    preset = _layer(name_or_overrides, registry)
    extra = _layer(overrides, registry)
    if preset is None and extra is None:
        return DEFAULT_PROFILE
    return resolve_profile(extra, preset=preset)
