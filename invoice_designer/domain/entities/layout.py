"""Domain entities describing the element layout of a template page.

The persisted JSON uses camelCase keys (``tableConfig``, ``fontSize`` ...).
``from_dict`` is tolerant so rows written by older editors still load;
strict validation happens at the API boundary.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from typing import Any, Literal

ElementType = Literal["text", "image", "table", "box", "line", "qr", "signature", "badge"]
ELEMENT_TYPES: tuple[str, ...] = (
    "text",
    "image",
    "table",
    "box",
    "line",
    "qr",
    "signature",
    "badge",
)

PageSize = Literal["A4", "Letter"]
Orientation = Literal["portrait", "landscape"]
ColumnFormat = Literal["currency", "number", "text"]
TableVariant = Literal["default", "minimal", "modern"]

_PIXEL_PATTERN = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*(?:px)?\s*$", re.IGNORECASE)


def parse_pixels(value: Any) -> int | float | None:
    """Return the numeric part of a pixel value such as ``14`` or ``"24px"``.

    Raises ``ValueError`` for strings that are not pixel lengths.
    """

    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValueError("Pixel values must be numbers")
    if isinstance(value, (int, float)):
        return value
    match = _PIXEL_PATTERN.match(str(value))
    if not match:
        raise ValueError(f"Invalid pixel value: {value!r}")
    number = float(match.group(1))
    return int(number) if number.is_integer() else number


def _optional_text(value: Any) -> str | None:
    """Return scalars as text; ``None`` and nested JSON become ``None``."""

    if value is None or isinstance(value, (dict, list)):
        return None
    return value if isinstance(value, str) else str(value)


@dataclass
class ElementStyle:
    """Closed set of style properties an element may carry."""

    font_size: int | float | None = None
    text_align: str | None = None
    color: str | None = None
    font_weight: str | None = None
    line_height: int | float | str | None = None
    font_style: str | None = None
    text_transform: str | None = None
    letter_spacing: int | float | None = None
    font_family: str | None = None
    border_bottom: str | None = None
    padding_bottom: int | float | None = None
    background_color: str | None = None
    border: str | None = None
    table_variant: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "ElementStyle":
        if not isinstance(data, dict):
            return cls()
        values: dict[str, Any] = {}
        for attribute, key in STYLE_KEYS.items():
            if key not in data:
                continue
            raw = data[key]
            if attribute in PIXEL_STYLE_FIELDS:
                try:
                    raw = parse_pixels(raw)
                except ValueError:
                    raw = None
            elif attribute == "font_weight" and raw is not None:
                raw = str(raw)
            values[attribute] = raw
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        return {
            STYLE_KEYS[item.name]: getattr(self, item.name)
            for item in fields(self)
            if getattr(self, item.name) is not None
        }


STYLE_KEYS: dict[str, str] = {
    "font_size": "fontSize",
    "text_align": "textAlign",
    "color": "color",
    "font_weight": "fontWeight",
    "line_height": "lineHeight",
    "font_style": "fontStyle",
    "text_transform": "textTransform",
    "letter_spacing": "letterSpacing",
    "font_family": "fontFamily",
    "border_bottom": "borderBottom",
    "padding_bottom": "paddingBottom",
    "background_color": "backgroundColor",
    "border": "border",
    "table_variant": "tableVariant",
}
PIXEL_STYLE_FIELDS = frozenset({"font_size", "letter_spacing", "padding_bottom"})


@dataclass
class TableColumn:
    header: str
    binding: str
    width: str | None = None
    format: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TableColumn":
        return cls(
            header=str(data.get("header", "")),
            binding=str(data.get("binding", "")),
            width=data.get("width"),
            format=data.get("format"),
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"header": self.header, "binding": self.binding}
        if self.width is not None:
            payload["width"] = self.width
        if self.format is not None:
            payload["format"] = self.format
        return payload


@dataclass
class TableConfig:
    """Where a table reads its rows from and how each column is bound."""

    data_source: str
    columns: list[TableColumn] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TableConfig":
        columns = data.get("columns") or []
        return cls(
            data_source=str(data.get("dataSource", "")),
            columns=[TableColumn.from_dict(col) for col in columns if isinstance(col, dict)],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "dataSource": self.data_source,
            "columns": [column.to_dict() for column in self.columns],
        }


@dataclass
class TemplateElement:
    """One positioned, typed visual unit on the page."""

    id: str
    type: str
    x: int | float = 0
    y: int | float = 0
    width: int | float = 0
    height: int | float = 0
    content: str | None = None
    binding: str | None = None
    orientation: str | None = None
    table_config: TableConfig | None = None
    style: ElementStyle = field(default_factory=ElementStyle)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TemplateElement":
        table_config = data.get("tableConfig")
        return cls(
            id=str(data.get("id", "")),
            type=str(data.get("type", "")),
            x=data.get("x", 0),
            y=data.get("y", 0),
            width=data.get("width", 0),
            height=data.get("height", 0),
            content=_optional_text(data.get("content")),
            binding=_optional_text(data.get("binding")),
            orientation=_optional_text(data.get("orientation")),
            table_config=(
                TableConfig.from_dict(table_config) if isinstance(table_config, dict) else None
            ),
            style=ElementStyle.from_dict(data.get("style")),
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "id": self.id,
            "type": self.type,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }
        for key, value in (
            ("content", self.content),
            ("binding", self.binding),
            ("orientation", self.orientation),
        ):
            if value is not None:
                payload[key] = value
        if self.table_config is not None:
            payload["tableConfig"] = self.table_config.to_dict()
        style = self.style.to_dict()
        if style:
            payload["style"] = style
        return payload


@dataclass
class TemplateLayout:
    """Ordered collection of positioned elements making up one page."""

    page_size: str = "A4"
    orientation: str = "portrait"
    elements: list[TemplateElement] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "TemplateLayout":
        if not isinstance(data, dict):
            return cls()
        elements = data.get("elements") or []
        return cls(
            page_size=data.get("pageSize") or "A4",
            orientation=data.get("orientation") or "portrait",
            elements=[
                TemplateElement.from_dict(element)
                for element in elements
                if isinstance(element, dict)
            ],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "pageSize": self.page_size,
            "orientation": self.orientation,
            "elements": [element.to_dict() for element in self.elements],
        }


__all__ = [
    "ELEMENT_TYPES",
    "ColumnFormat",
    "ElementStyle",
    "ElementType",
    "Orientation",
    "PIXEL_STYLE_FIELDS",
    "PageSize",
    "STYLE_KEYS",
    "TableColumn",
    "TableConfig",
    "TableVariant",
    "TemplateElement",
    "TemplateLayout",
    "parse_pixels",
]
