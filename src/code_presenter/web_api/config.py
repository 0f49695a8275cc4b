"""
Configuration settings for the API.
Environment variables override defaults.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from code_presenter.core.config import RenderConfig


@dataclass
class Settings:
    """API Configuration"""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False

    # CORS
    CORS_ORIGINS: List[str] = field(default_factory=lambda: ["*"])

    # Rendering
    PRESET_DIR: str = ""
    DEFAULT_LANGUAGE: str = "javascript"
    DEFAULT_STYLE: str = "default"
    MAX_SOURCE_LENGTH: int = 20_000_000
    PLAIN_TEXT_THRESHOLD: int = 5_000_000

    def __post_init__(self):
        """Load from environment variables"""
        for key in self.__dataclass_fields__:
            env_value = os.getenv(key)
            if env_value is not None:
                field_type = self.__dataclass_fields__[key].type
                if field_type == bool:
                    setattr(self, key, env_value.lower() in ("true", "1", "yes"))
                elif field_type == int:
                    setattr(self, key, int(env_value))
                elif field_type == List[str]:
                    setattr(self, key, env_value.split(","))
                else:
                    setattr(self, key, env_value)

    @property
    def preset_dir(self) -> Optional[Path]:
        return Path(self.PRESET_DIR) if self.PRESET_DIR else None

    def render_config(self) -> RenderConfig:
        return RenderConfig(
            default_language=self.DEFAULT_LANGUAGE,
            default_style=self.DEFAULT_STYLE,
            preset_dir=self.preset_dir,
            plain_text_threshold=self.PLAIN_TEXT_THRESHOLD,
            max_source_length=self.MAX_SOURCE_LENGTH,
        )


# Global settings instance
settings = Settings()
