"""
Render Router
=============
Endpoint for rendering source text to HTML.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException

from code_presenter import api as core_api
from code_presenter.core.config import RenderConfig
from code_presenter.styles import PresetRegistry
from code_presenter.web_api.deps import get_registry, get_render_config
from code_presenter.web_api.schemas.render import RenderRequest, RenderResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=RenderResponse)
async def render_source(
    request: RenderRequest,
    registry: PresetRegistry = Depends(get_registry),
    config: RenderConfig = Depends(get_render_config),
):
    """
    Render a source buffer.

    - **source**: Source text
    - **language**: Language id (default from settings)
    - **style**: Preset name, inline/base64 JSON or a style object
    - **overrides**: Extra style overrides
    """
    profile = core_api.resolve_style_profile(
        request.style if request.style is not None else config.default_style,
        overrides=request.overrides,
        registry=registry,
    )
    try:
        doc = core_api.render_source(
            request.source,
            request.language or config.default_language,
            profile,
            label=request.label,
            config=config,
            registry=registry,
        )
    except core_api.SourceTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))

    return RenderResponse(
        language=doc.language,
        line_count=doc.line_count,
        is_plain_text=doc.is_plain_text,
        lines=list(doc.lines),
        standalone_html=doc.standalone_html if request.include_page else None,
        profile=doc.profile.to_dict(),
    )
