"""Schemas for rendering layouts and listing presets."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .layout import TemplateLayoutSchema

RenderModeLiteral = Literal["edit", "preview"]


class RenderRequest(BaseModel):
    """Unsaved editor state to render."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    layout: TemplateLayoutSchema
    sample_data: Any = Field(default_factory=dict)
    mode: RenderModeLiteral = "preview"


class RenderedPageRead(BaseModel):
    page_size: str
    orientation: str
    width: int
    height: int
    mode: RenderModeLiteral
    elements: list[dict[str, Any]]


class TextPresetRead(BaseModel):
    id: str
    name: str
    description: str
    element: dict[str, Any]


__all__ = ["RenderModeLiteral", "RenderRequest", "RenderedPageRead", "TextPresetRead"]
