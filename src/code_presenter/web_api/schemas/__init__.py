"""
Pydantic Schemas
===============
Request and response models for the API.
"""
from .render import PresetDetail, PresetSummary, RenderRequest, RenderResponse

__all__ = ["PresetDetail", "PresetSummary", "RenderRequest", "RenderResponse"]
