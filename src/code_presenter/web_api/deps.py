"""
Shared FastAPI dependencies.
"""
import logging
from functools import lru_cache

from code_presenter.core.config import RenderConfig
from code_presenter.styles import PresetRegistry
from code_presenter.web_api.config import settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_registry() -> PresetRegistry:
    """Built-in presets plus the configured preset directory, loaded once."""
    registry = PresetRegistry.with_builtins()
    if settings.preset_dir is not None:
        loaded = registry.load_directory(settings.preset_dir)
        logger.info("Loaded %d presets from %s", len(loaded), settings.preset_dir)
    return registry


def get_render_config() -> RenderConfig:
    return settings.render_config()
