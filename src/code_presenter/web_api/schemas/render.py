"""
Render Schemas
==============
Request and response models for render and preset endpoints.
"""
from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List, Union
from datetime import datetime, timezone


class RenderRequest(BaseModel):
    """Request to render one source buffer"""

    source: str = Field(..., description="Source text to render")
    language: Optional[str] = Field(
        default=None, description="Language id; unknown ids use the default grammar"
    )
    style: Optional[Union[str, Dict[str, Any]]] = Field(
        default=None,
        description="Preset name, inline JSON, base64 JSON or a style object",
    )
    overrides: Optional[Dict[str, Any]] = Field(
        default=None, description="Style overrides layered on top of style"
    )
    label: Optional[str] = Field(default=None, description="Display label for the page")
    include_page: bool = Field(default=True, description="Include the standalone HTML page")

    class Config:
        json_schema_extra = {
            "example": {
                "source": "// hello\nfunction foo() { return 1; }\n",
                "language": "javascript",
                "style": "dark",
                "overrides": {"maxWidth": 100},
            }
        }


class RenderResponse(BaseModel):
    """Rendered line fragments and page"""

    language: str
    line_count: int = Field(default=0)
    is_plain_text: bool = Field(default=False)
    lines: List[str] = Field(default_factory=list)
    standalone_html: Optional[str] = Field(default=None)
    profile: Dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class PresetSummary(BaseModel):
    """One entry of the preset listing"""

    key: str
    display_name: str
    source: str


class PresetDetail(PresetSummary):
    """A preset with its resolved profile"""

    profile: Dict[str, Any] = Field(default_factory=dict)
