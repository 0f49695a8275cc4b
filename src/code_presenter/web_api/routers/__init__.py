"""
API Routers
===========
Each router handles a specific domain of the API.
"""
from . import health, presets, render

__all__ = ["health", "presets", "render"]
