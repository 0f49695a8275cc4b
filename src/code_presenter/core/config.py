"""Render-pipeline configuration dataclass."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Mapping, Optional

ENV_PREFIX = "CODE_PRESENTER_"

DEFAULT_MAX_SOURCE_LENGTH = 20_000_000
LARGE_FILE_PLAIN_TEXT_THRESHOLD = 5_000_000


@dataclass(frozen=True)
class RenderConfig:
    """Immutable settings for the pipeline around :func:`render`.

    The engine itself has no size limits; these belong to the callers that
    decide whether to render at all.
    """

    default_language: str = "javascript"
    default_style: str = "default"
    preset_dir: Optional[Path] = None
    plain_text_threshold: int = LARGE_FILE_PLAIN_TEXT_THRESHOLD
    max_source_length: int = DEFAULT_MAX_SOURCE_LENGTH

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "RenderConfig":
        """Build a config from ``CODE_PRESENTER_*`` environment variables.

        Malformed integers are ignored and the default is kept.
        """
        if env is None:
            env = os.environ
        values: dict = {}
        for f in fields(cls):
            raw = env.get(ENV_PREFIX + f.name.upper())
            if raw is None or not raw.strip():
                continue
            if f.name == "preset_dir":
                values[f.name] = Path(raw).expanduser()
            elif f.name in ("plain_text_threshold", "max_source_length"):
                try:
                    values[f.name] = int(raw)
                except ValueError:
                    continue
            else:
                values[f.name] = raw.strip()
        return cls(**values)
