"""Derive the visual representation of template elements.

Rendering is a pure function of ``(element, mode, sample_data)``. Every
lookup degrades to a placeholder or the literal binding token, so nothing
on this path raises for bad or missing data.
"""

from __future__ import annotations

from typing import Any, Final
from urllib.parse import quote

from invoice_designer.config import Settings, get_settings
from invoice_designer.domain.bindings import display_text, interpolate, placeholder, resolve
from invoice_designer.domain.entities import ElementStyle, TemplateElement, TemplateLayout

from .formatting import format_cell
from .visuals import (
    ImageVisual,
    InvalidVisual,
    RenderedElement,
    RenderedPage,
    ShapeVisual,
    TableColumnHeader,
    TableVisual,
    TextVisual,
)

# A4 and US Letter at 96 DPI.
PAGE_DIMENSIONS: Final[dict[str, tuple[int, int]]] = {
    "A4": (794, 1123),
    "Letter": (816, 1056),
}
EDIT_PLACEHOLDER_ROWS: Final[int] = 3
DEFAULT_QR_PAYLOAD: Final[str] = "https://example.com"
DEFAULT_BADGE_LABEL: Final[str] = "PAID"
DEFAULT_TEXT: Final[str] = "Text"
INVALID_TABLE_MESSAGE: Final[str] = "Invalid Table Config"
TABLE_VARIANTS: Final[frozenset[str]] = frozenset({"default", "minimal", "modern"})

# encodeURIComponent leaves these unescaped.
_URI_COMPONENT_SAFE: Final[str] = "-_.!~*'()"


def _px(value: int | float | None, default: str) -> str:
    return f"{value}px" if value is not None else default


def _text_style(style: ElementStyle) -> dict[str, str]:
    line_height = style.line_height
    return {
        "fontSize": _px(style.font_size, "14px"),
        "textAlign": style.text_align or "left",
        "color": style.color or "inherit",
        "fontWeight": style.font_weight or "normal",
        "lineHeight": str(line_height) if line_height not in (None, "") else "normal",
        "fontStyle": style.font_style or "normal",
        "textTransform": style.text_transform or "none",
        "letterSpacing": _px(style.letter_spacing, "normal"),
        "fontFamily": style.font_family or "inherit",
        "borderBottom": style.border_bottom or "none",
        "paddingBottom": _px(style.padding_bottom, "0"),
    }


def _shape_style(element_type: str, style: ElementStyle) -> dict[str, str]:
    if element_type == "line":
        background = "#000"
    elif element_type == "badge":
        background = "#3b82f6"
    else:
        background = "#eee"
    return {
        "backgroundColor": style.background_color or background,
        "border": style.border or "none",
        "color": style.color or "#fff",
        "fontSize": _px(style.font_size, "12px"),
    }


class ElementRenderer:
    """Render elements for either the editing canvas or the data preview."""

    def __init__(
        self,
        *,
        qr_service_url: str,
        placeholder_image_url: str,
        signature_placeholder_url: str,
    ) -> None:
        self.qr_service_url = qr_service_url
        self.placeholder_image_url = placeholder_image_url
        self.signature_placeholder_url = signature_placeholder_url

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "ElementRenderer":
        settings = settings or get_settings()
        return cls(
            qr_service_url=settings.qr_service_url,
            placeholder_image_url=settings.placeholder_image_url,
            signature_placeholder_url=settings.signature_placeholder_url,
        )

    def render_layout(self, layout: TemplateLayout, mode: str, sample_data: Any) -> RenderedPage:
        width, height = PAGE_DIMENSIONS.get(layout.page_size, PAGE_DIMENSIONS["A4"])
        if layout.orientation == "landscape":
            width, height = height, width
        return RenderedPage(
            page_size=layout.page_size,
            orientation=layout.orientation,
            width=width,
            height=height,
            mode=mode,
            elements=[self.render_element(element, mode, sample_data) for element in layout.elements],
        )

    def render_element(self, element: TemplateElement, mode: str, sample_data: Any) -> RenderedElement:
        preview = mode == "preview"
        if element.type == "text":
            return self._render_text(element, preview, sample_data)
        if element.type in ("image", "qr", "signature"):
            return self._render_image(element, preview, sample_data)
        if element.type in ("box", "line", "badge"):
            return self._render_shape(element, preview, sample_data)
        if element.type == "table":
            return self._render_table(element, preview, sample_data)
        return InvalidVisual(
            **_geometry(element), message=f"Unsupported element type: {element.type}"
        )

    def _render_text(self, element: TemplateElement, preview: bool, sample_data: Any) -> TextVisual:
        if preview and element.binding:
            value: Any = resolve(sample_data, element.binding, placeholder(element.binding))
        elif element.content:
            value = element.content
        elif element.binding:
            value = placeholder(element.binding)
        else:
            value = DEFAULT_TEXT

        if preview and isinstance(value, str):
            value = interpolate(value, sample_data)

        return TextVisual(
            **_geometry(element),
            text=display_text(value),
            style=_text_style(element.style),
        )

    def _render_image(self, element: TemplateElement, preview: bool, sample_data: Any) -> ImageVisual:
        if element.type == "qr":
            payload: Any = element.content
            if preview and element.binding:
                payload = resolve(sample_data, element.binding, element.content)
            text = display_text(payload) or DEFAULT_QR_PAYLOAD
            src = self.qr_service_url + quote(text, safe=_URI_COMPONENT_SAFE)
        elif element.type == "signature":
            src = element.content or self.signature_placeholder_url
        else:
            src = element.content or self.placeholder_image_url
        return ImageVisual(**_geometry(element), src=src, alt=element.type)

    def _render_shape(self, element: TemplateElement, preview: bool, sample_data: Any) -> ShapeVisual:
        label: str | None = None
        if element.type == "badge":
            if element.content:
                label = element.content
            elif element.binding:
                token = placeholder(element.binding)
                label = display_text(resolve(sample_data, element.binding, token)) if preview else token
            else:
                label = DEFAULT_BADGE_LABEL
        return ShapeVisual(
            **_geometry(element),
            label=label,
            rounded=element.type == "badge",
            style=_shape_style(element.type, element.style),
        )

    def _render_table(self, element: TemplateElement, preview: bool, sample_data: Any) -> RenderedElement:
        config = element.table_config
        if config is None:
            return InvalidVisual(**_geometry(element), message=INVALID_TABLE_MESSAGE)

        variant = element.style.table_variant
        if variant not in TABLE_VARIANTS:
            variant = "default"

        rows: list[list[str]] = []
        if preview:
            data = resolve(sample_data, config.data_source, [])
            if isinstance(data, list):
                for row in data:
                    rows.append(
                        [
                            display_text(format_cell(resolve(row, column.binding), column.format))
                            for column in config.columns
                        ]
                    )
        else:
            template_row = ["{" + column.binding + "}" for column in config.columns]
            rows = [list(template_row) for _ in range(EDIT_PLACEHOLDER_ROWS)]

        return TableVisual(
            **_geometry(element),
            variant=variant,
            columns=[TableColumnHeader(header=column.header, width=column.width) for column in config.columns],
            rows=rows,
        )


def _geometry(element: TemplateElement) -> dict[str, Any]:
    return {
        "element_id": element.id,
        "type": element.type,
        "x": element.x,
        "y": element.y,
        "width": element.width,
        "height": element.height,
    }


def render_element(element: TemplateElement, mode: str, sample_data: Any) -> RenderedElement:
    """Render a single element with the renderer configured from settings."""

    return ElementRenderer.from_settings().render_element(element, mode, sample_data)


def render_layout(layout: TemplateLayout, mode: str, sample_data: Any) -> RenderedPage:
    """Render every element of ``layout`` in order."""

    return ElementRenderer.from_settings().render_layout(layout, mode, sample_data)


__all__ = [
    "DEFAULT_QR_PAYLOAD",
    "ElementRenderer",
    "INVALID_TABLE_MESSAGE",
    "PAGE_DIMENSIONS",
    "render_element",
    "render_layout",
]
