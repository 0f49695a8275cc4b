"""Named style presets: built-in, shipped, external and custom.

The registry is an explicit object handed to whoever resolves style names;
there is no module-level singleton.  ``register`` is last-write-wins.

Preset files are JSON or YAML documents of the form::

    {"key": "ocean", "displayName": "Ocean", "profile": {"maxWidth": 100, ...}}

or a bare profile object.  Files are schema-checked on load; broken files
raise :class:`PresetLoadError` from :meth:`PresetRegistry.load_file` and are
logged and skipped by :meth:`PresetRegistry.load_directory`.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from importlib import resources
from pathlib import Path
from typing import Any, Iterator, Mapping, Optional

import jsonschema
import yaml

from code_presenter.contracts.load import YAML_SUFFIXES, validate_file
from code_presenter.model.style_profile import StyleProfile
from code_presenter.styles.resolve import ProfileSource, resolve_profile
from code_presenter.utils.json_norm import stable_json_dumps

logger = logging.getLogger(__name__)

SHIPPED_PRESET_DIR = "data/presets"
PRESET_SUFFIXES = frozenset({".json"}) | YAML_SUFFIXES

SOURCE_BUILTIN = "builtin"
SOURCE_EXTERNAL = "external"
SOURCE_CUSTOM = "custom"


class PresetError(ValueError):
    """Raised for registry operations that would break a protected preset."""


class PresetLoadError(PresetError):
    """Raised when a preset file cannot be read, parsed or validated."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


@dataclass(frozen=True, slots=True)
class Preset:
    key: str
    display_name: str
    profile: StyleProfile
    source: str = SOURCE_CUSTOM

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "displayName": self.display_name,
            "source": self.source,
            "profile": self.profile.to_dict(),
        }


# ── built-in presets ────────────────────────────────────────────────

BUILTIN_PRESETS: dict[str, dict[str, Any]] = {
    "default": {"displayName": "Default", "profile": {}},
    "classic": {
        "displayName": "Classic",
        "profile": {
            "colors": {
                "comment": "#228b22",
                "keyword": "#0000ff",
                "string": "#a31515",
                "number": "#098658",
                "function": "#795e26",
                "type": "#267f99",
                "variable": "#001080",
                "operator": "#000000",
            },
            "fontSizes": {"comment": 11, "code": 12},
            "fonts": {
                "comment": "'Bookman Old Style', serif",
                "code": "'Courier New', Courier, monospace",
            },
            "fontStyles": {
                "commentBold": False,
                "commentItalic": False,
                "codeBold": True,
                "codeItalic": False,
            },
        },
    },
    "dark": {
        "displayName": "Dark Mode",
        "profile": {
            "colors": {
                "comment": "#6a9955",
                "keyword": "#569cd6",
                "string": "#ce9178",
                "number": "#b5cea8",
                "function": "#dcdcaa",
                "type": "#4ec9b0",
                "variable": "#9cdcfe",
                "operator": "#d4d4d4",
            },
            "fontSizes": {"comment": 10, "code": 12},
            "fonts": {
                "comment": "Monaco, 'Lucida Console', monospace",
                "code": "Monaco, 'Lucida Console', monospace",
            },
            "fontStyles": {
                "commentBold": False,
                "commentItalic": True,
                "codeBold": False,
                "codeItalic": False,
            },
        },
    },
    "vibrant": {
        "displayName": "Vibrant",
        "profile": {
            "colors": {
                "comment": "#ff6b6b",
                "keyword": "#4ecdc4",
                "string": "#ffe66d",
                "number": "#95e1d3",
                "function": "#f38181",
                "type": "#aa96da",
                "variable": "#5f27cd",
                "operator": "#341f97",
            },
            "fontSizes": {"comment": 10, "code": 12},
            "fonts": {
                "comment": "Verdana, Geneva, sans-serif",
                "code": "'Lucida Console', Monaco, monospace",
            },
            "fontStyles": {
                "commentBold": True,
                "commentItalic": False,
                "codeBold": False,
                "codeItalic": False,
            },
        },
    },
}

_SLUG_RE = re.compile(r"[^a-z0-9]+")


def slugify(text: Any, fallback: str = "preset") -> str:
    if not isinstance(text, str) or not text.strip():
        return fallback
    return _SLUG_RE.sub("-", text.strip().lower()).strip("-") or fallback


def _profile_source(payload: Any) -> Optional[Mapping[str, Any]]:
    if not isinstance(payload, Mapping):
        return None
    inner = payload.get("profile")
    return inner if isinstance(inner, Mapping) else payload


def _shipped_preset_dir() -> Path:
    canonical = Path(__file__).resolve().parents[1] / SHIPPED_PRESET_DIR
    if canonical.exists():
        return canonical
    with resources.as_file(resources.files("code_presenter") / SHIPPED_PRESET_DIR) as p:
        return p


class PresetRegistry:
    """Mutable ``key -> Preset`` registry with last-write-wins semantics."""

    def __init__(self) -> None:
        self._presets: dict[str, Preset] = {}

    @classmethod
    def with_builtins(cls, *, include_shipped: bool = True) -> "PresetRegistry":
        """A registry holding the built-in presets (and shipped preset files)."""
        registry = cls()
        for key, entry in BUILTIN_PRESETS.items():
            registry.register(
                key,
                entry["profile"],
                display_name=entry["displayName"],
                source=SOURCE_BUILTIN,
            )
        if include_shipped:
            registry.load_directory(_shipped_preset_dir(), replace_existing=True)
        return registry

    # ── mapping-ish surface ─────────────────────────────────────────

    def __contains__(self, key: object) -> bool:
        return key in self._presets

    def __len__(self) -> int:
        return len(self._presets)

    def __iter__(self) -> Iterator[Preset]:
        return iter(list(self._presets.values()))

    def keys(self) -> list[str]:
        return list(self._presets)

    # ── core operations ─────────────────────────────────────────────

    def register(
        self,
        key: str,
        profile: ProfileSource = None,
        *,
        display_name: Optional[str] = None,
        source: str = SOURCE_CUSTOM,
    ) -> Preset:
        """Resolve *profile* and store it under *key*, replacing any entry."""
        preset = Preset(
            key=key,
            display_name=display_name or key,
            profile=resolve_profile(profile),
            source=source,
        )
        self._presets[key] = preset
        return preset

    def lookup(self, key: Optional[str]) -> Optional[Preset]:
        if not key:
            return None
        return self._presets.get(key) or self._presets.get(key.strip().lower())

    def get_profile(self, key: Optional[str]) -> Optional[StyleProfile]:
        preset = self.lookup(key)
        return preset.profile if preset else None

    def unregister(self, key: str) -> bool:
        preset = self._presets.get(key)
        if preset is None:
            return False
        if preset.source == SOURCE_BUILTIN:
            raise PresetError(f"cannot remove built-in preset {key!r}")
        del self._presets[key]
        return True

    def find_matching(self, profile: ProfileSource) -> Optional[str]:
        """Key of the first preset whose profile equals *profile*, if any."""
        if profile is None:
            return None
        target = resolve_profile(profile)
        for preset in self._presets.values():
            if preset.profile == target:
                return preset.key
        return None

    # ── files ───────────────────────────────────────────────────────

    def _external_key(self, base: str) -> str:
        candidate = f"external:{base}"
        counter = 2
        while candidate in self._presets or candidate == SOURCE_CUSTOM:
            candidate = f"external:{base}-{counter}"
            counter += 1
        return candidate

    def register_payload(
        self,
        payload: Any,
        *,
        fallback_name: str = "preset",
        replace_existing: bool = False,
    ) -> Preset:
        """Register a parsed preset document.

        The key is taken from ``key``, ``name`` or ``displayName`` (slugified).
        A key already in use gets an ``external:`` key unless
        *replace_existing* is set; built-in keys are never replaced.
        """
        source = _profile_source(payload)
        if source is None:
            raise PresetError("preset document must be an object")
        display_name = (
            payload.get("displayName") or payload.get("name") or fallback_name
        )
        preferred = payload.get("key") or payload.get("name") or display_name
        key = slugify(preferred)
        existing = self._presets.get(key)
        if existing is not None and (
            not replace_existing or existing.source == SOURCE_BUILTIN
        ):
            key = self._external_key(key)
        return self.register(
            key, source, display_name=str(display_name), source=SOURCE_EXTERNAL
        )

    def load_file(self, path: Path, *, replace_existing: bool = False) -> Preset:
        """Load one preset file.  Raises :class:`PresetLoadError`."""
        path = Path(path)
        try:
            payload = validate_file(path)
        except OSError as e:
            raise PresetLoadError(path, f"cannot read file ({e})") from e
        except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise PresetLoadError(path, f"unparsable preset ({e})") from e
        except jsonschema.ValidationError as e:
            raise PresetLoadError(path, f"invalid preset structure ({e.message})") from e

        preset = self.register_payload(
            payload,
            fallback_name=slugify(path.stem),
            replace_existing=replace_existing,
        )
        logger.info("Loaded preset %r from %s", preset.key, path)
        return preset

    def load_directory(
        self, directory: Path, *, replace_existing: bool = False
    ) -> list[Preset]:
        """Load every preset file in *directory*; broken files are skipped."""
        directory = Path(directory)
        if not directory.is_dir():
            logger.debug("Preset directory %s does not exist", directory)
            return []
        loaded: list[Preset] = []
        for path in sorted(directory.iterdir()):
            if path.suffix.lower() not in PRESET_SUFFIXES:
                continue
            try:
                loaded.append(self.load_file(path, replace_existing=replace_existing))
            except PresetError as e:
                logger.warning("Skipped preset file: %s", e)
        return loaded

    def save_custom(
        self,
        name: str,
        profile: ProfileSource,
        directory: Path,
    ) -> Path:
        """Persist *profile* as a JSON preset file, then register it under *name*.

        A failed write (``OSError``) leaves the registry unchanged.
        """
        key = slugify(name)
        existing = self._presets.get(key)
        if existing is not None and existing.source == SOURCE_BUILTIN:
            raise PresetError(f"cannot overwrite built-in preset {key!r}")
        preset = Preset(
            key=key,
            display_name=name.strip() or key,
            profile=resolve_profile(profile),
            source=SOURCE_CUSTOM,
        )

        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        out = directory / f"{key}.json"
        payload = {
            "key": key,
            "name": preset.display_name,
            "createdAt": datetime.now(timezone.utc).isoformat(),
            "profile": preset.profile.to_dict(),
        }
        out.write_text(stable_json_dumps(payload), encoding="utf-8")
        self._presets[key] = preset
        logger.info("Saved preset %r to %s", key, out)
        return out
