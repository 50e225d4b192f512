"""Visual descriptions produced by the element renderer."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Literal

RenderMode = Literal["edit", "preview"]
RENDER_MODES: tuple[str, ...] = ("edit", "preview")


@dataclass
class RenderedElement:
    element_id: str
    type: str
    x: int | float
    y: int | float
    width: int | float
    height: int | float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class TextVisual(RenderedElement):
    kind: str = "text"
    text: str = ""
    style: dict[str, str] = field(default_factory=dict)


@dataclass
class ImageVisual(RenderedElement):
    kind: str = "image"
    src: str = ""
    alt: str = ""


@dataclass
class ShapeVisual(RenderedElement):
    """Box, line or badge. Badges are pill shaped and carry a label."""

    kind: str = "shape"
    label: str | None = None
    rounded: bool = False
    style: dict[str, str] = field(default_factory=dict)


@dataclass
class TableColumnHeader:
    header: str
    width: str | None = None


@dataclass
class TableVisual(RenderedElement):
    kind: str = "table"
    variant: str = "default"
    columns: list[TableColumnHeader] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)


@dataclass
class InvalidVisual(RenderedElement):
    kind: str = "invalid"
    message: str = ""


@dataclass
class RenderedPage:
    page_size: str
    orientation: str
    width: int
    height: int
    mode: str
    elements: list[RenderedElement] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "page_size": self.page_size,
            "orientation": self.orientation,
            "width": self.width,
            "height": self.height,
            "mode": self.mode,
            "elements": [element.to_dict() for element in self.elements],
        }


__all__ = [
    "ImageVisual",
    "InvalidVisual",
    "RENDER_MODES",
    "RenderMode",
    "RenderedElement",
    "RenderedPage",
    "ShapeVisual",
    "TableColumnHeader",
    "TableVisual",
    "TextVisual",
]
