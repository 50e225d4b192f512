"""Mutable, ordered element collection backing an editing session."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterator
from copy import deepcopy
from dataclasses import replace
from typing import Any, Final
from uuid import uuid4

from invoice_designer.domain.entities import (
    ELEMENT_TYPES,
    ElementStyle,
    TableColumn,
    TableConfig,
    TemplateElement,
    TemplateLayout,
)
from invoice_designer.domain.presets import get_text_preset

logger = logging.getLogger(__name__)

GRID_SIZE: Final[int] = 10
NEW_ELEMENT_POSITION: Final[tuple[int, int]] = (50, 50)
NEW_TEXT_CONTENT: Final[str] = "Double click to edit"

_UPDATABLE_FIELDS: Final[frozenset[str]] = frozenset(
    {"x", "y", "width", "height", "content", "binding", "orientation", "table_config", "style"}
)


def snap_to_grid(value: int | float, grid_size: int = GRID_SIZE) -> int:
    """Round ``value`` to the nearest multiple of ``grid_size``, halves upward."""

    return math.floor(value / grid_size + 0.5) * grid_size


def default_table_config() -> TableConfig:
    return TableConfig(
        data_source="items",
        columns=[
            TableColumn(header="Description", binding="description", width="50%"),
            TableColumn(header="Price", binding="price", width="20%", format="currency"),
            TableColumn(header="Qty", binding="quantity", width="15%"),
        ],
    )


class LayoutStore:
    """Hold a page layout and apply the editor's element operations to it.

    Element order is preserved; later elements paint over earlier ones.
    """

    def __init__(
        self,
        layout: TemplateLayout | None = None,
        *,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        layout = deepcopy(layout) if layout is not None else TemplateLayout()
        self.page_size = layout.page_size
        self.orientation = layout.orientation
        self._elements: list[TemplateElement] = list(layout.elements)
        self._id_factory = id_factory or (lambda: str(uuid4()))

    def __iter__(self) -> Iterator[TemplateElement]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def get(self, element_id: str) -> TemplateElement | None:
        for element in self._elements:
            if element.id == element_id:
                return element
        return None

    def add_element(self, element_type: str) -> TemplateElement:
        """Append a new element of ``element_type`` with editor defaults."""

        if element_type not in ELEMENT_TYPES:
            raise ValueError(f"Unknown element type: {element_type}")

        is_table = element_type == "table"
        x, y = NEW_ELEMENT_POSITION
        element = TemplateElement(
            id=self._id_factory(),
            type=element_type,
            x=x,
            y=y,
            width=400 if is_table else 200,
            height=150 if is_table else 50,
            style=ElementStyle(color="#000000", font_size=14),
        )
        if is_table:
            element.table_config = default_table_config()
        elif element_type == "text":
            element.content = NEW_TEXT_CONTENT

        self._elements.append(element)
        logger.debug("Added %s element %s", element_type, element.id)
        return element

    def add_preset(self, preset_id: str) -> TemplateElement:
        preset = get_text_preset(preset_id)
        if preset is None:
            raise ValueError(f"Unknown text preset: {preset_id}")
        x, y = NEW_ELEMENT_POSITION
        element = preset.build_element(self._id_factory(), x=x, y=y)
        self._elements.append(element)
        return element

    def update_element(self, element_id: str, **changes: Any) -> TemplateElement | None:
        """Merge ``changes`` into the element; unknown ids are ignored."""

        unknown = set(changes) - _UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update element fields: {', '.join(sorted(unknown))}")

        for index, element in enumerate(self._elements):
            if element.id == element_id:
                updated = replace(element, **changes)
                self._elements[index] = updated
                return updated
        return None

    def update_style(self, element_id: str, **changes: Any) -> TemplateElement | None:
        element = self.get(element_id)
        if element is None:
            return None
        return self.update_element(element_id, style=replace(element.style, **changes))

    def move_element(self, element_id: str, x: int | float, y: int | float) -> TemplateElement | None:
        return self.update_element(element_id, x=snap_to_grid(x), y=snap_to_grid(y))

    def resize_element(
        self,
        element_id: str,
        *,
        x: int | float,
        y: int | float,
        width: int | float,
        height: int | float,
    ) -> TemplateElement | None:
        return self.update_element(
            element_id,
            x=snap_to_grid(x),
            y=snap_to_grid(y),
            width=snap_to_grid(width),
            height=snap_to_grid(height),
        )

    def remove_element(self, element_id: str) -> bool:
        remaining = [element for element in self._elements if element.id != element_id]
        removed = len(remaining) != len(self._elements)
        self._elements = remaining
        return removed

    def to_layout(self) -> TemplateLayout:
        return TemplateLayout(
            page_size=self.page_size,
            orientation=self.orientation,
            elements=deepcopy(self._elements),
        )


__all__ = ["GRID_SIZE", "LayoutStore", "default_table_config", "snap_to_grid"]
