"""
Presets Router
==============
Read-only access to the style preset registry.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from code_presenter.styles import PresetRegistry
from code_presenter.web_api.deps import get_registry
from code_presenter.web_api.schemas.render import PresetDetail, PresetSummary

router = APIRouter()


@router.get("", response_model=List[PresetSummary])
async def list_presets(registry: PresetRegistry = Depends(get_registry)):
    """List every registered preset."""
    return [
        PresetSummary(key=p.key, display_name=p.display_name, source=p.source)
        for p in registry
    ]


@router.get("/{key}", response_model=PresetDetail)
async def get_preset(key: str, registry: PresetRegistry = Depends(get_registry)):
    """Return one preset with its resolved profile."""
    preset = registry.lookup(key)
    if preset is None:
        raise HTTPException(status_code=404, detail=f"Preset not found: {key}")
    return PresetDetail(
        key=preset.key,
        display_name=preset.display_name,
        source=preset.source,
        profile=preset.profile.to_dict(),
    )
