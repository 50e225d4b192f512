from .layout import (
    ElementStyleSchema,
    TableColumnSchema,
    TableConfigSchema,
    TemplateElementSchema,
    TemplateLayoutSchema,
)
from .render import RenderModeLiteral, RenderRequest, RenderedPageRead, TextPresetRead
from .template import TemplateCreate, TemplateRead, TemplateUpdate

__all__ = [
    "ElementStyleSchema",
    "RenderModeLiteral",
    "RenderRequest",
    "RenderedPageRead",
    "TableColumnSchema",
    "TableConfigSchema",
    "TemplateCreate",
    "TemplateElementSchema",
    "TemplateLayoutSchema",
    "TemplateRead",
    "TemplateUpdate",
    "TextPresetRead",
]
