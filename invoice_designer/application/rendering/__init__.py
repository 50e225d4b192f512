"""Element rendering: binding substitution and table formatting per element."""

from .element_renderer import ElementRenderer, render_element, render_layout
from .formatting import format_cell, format_currency, to_number
from .visuals import (
    RENDER_MODES,
    ImageVisual,
    InvalidVisual,
    RenderedElement,
    RenderedPage,
    ShapeVisual,
    TableVisual,
    TextVisual,
)

__all__ = [
    "ElementRenderer",
    "ImageVisual",
    "InvalidVisual",
    "RENDER_MODES",
    "RenderedElement",
    "RenderedPage",
    "ShapeVisual",
    "TableVisual",
    "TextVisual",
    "format_cell",
    "format_currency",
    "render_element",
    "render_layout",
    "to_number",
]
