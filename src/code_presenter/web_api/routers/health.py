"""
Health Check Router
==================
Endpoints for health checks and readiness probes.
"""
from fastapi import APIRouter, Depends

from code_presenter import __version__
from code_presenter.styles import PresetRegistry
from code_presenter.web_api.deps import get_registry

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint.
    Returns OK if the service is running.
    """
    return {"status": "ok", "version": __version__}


@router.get("/ready")
async def readiness_check(registry: PresetRegistry = Depends(get_registry)):
    """
    Readiness check endpoint.
    Ready once the preset registry has loaded.
    """
    return {"status": "ready", "presets": len(registry)}
