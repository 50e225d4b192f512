"""Schemas validating the persisted layout JSON at the API boundary."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from invoice_designer.domain.entities import (
    ElementStyle,
    TableColumn,
    TableConfig,
    TemplateElement,
    TemplateLayout,
)
from invoice_designer.domain.entities.layout import parse_pixels
from invoice_designer.domain.errors import TemplateValidationError

ElementTypeLiteral = Literal["text", "image", "table", "box", "line", "qr", "signature", "badge"]


class ElementStyleSchema(BaseModel):
    """Closed style schema; unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    font_size: int | float | None = Field(default=None, alias="fontSize")
    text_align: Literal["left", "center", "right", "justify"] | None = Field(
        default=None, alias="textAlign"
    )
    color: str | None = None
    font_weight: str | None = Field(default=None, alias="fontWeight")
    line_height: int | float | str | None = Field(default=None, alias="lineHeight")
    font_style: Literal["normal", "italic", "oblique"] | None = Field(
        default=None, alias="fontStyle"
    )
    text_transform: Literal["none", "uppercase", "lowercase", "capitalize"] | None = Field(
        default=None, alias="textTransform"
    )
    letter_spacing: int | float | None = Field(default=None, alias="letterSpacing")
    font_family: str | None = Field(default=None, alias="fontFamily")
    border_bottom: str | None = Field(default=None, alias="borderBottom")
    padding_bottom: int | float | None = Field(default=None, alias="paddingBottom")
    background_color: str | None = Field(default=None, alias="backgroundColor")
    border: str | None = None
    table_variant: Literal["default", "minimal", "modern"] | None = Field(
        default=None, alias="tableVariant"
    )

    @field_validator("font_size", "letter_spacing", "padding_bottom", mode="before")
    @classmethod
    def _parse_pixel_value(cls, value: Any) -> Any:
        return parse_pixels(value)

    @field_validator("font_weight", mode="before")
    @classmethod
    def _stringify_weight(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(int(value))
        return value

    def to_entity(self) -> ElementStyle:
        return ElementStyle(**self.model_dump())


class TableColumnSchema(BaseModel):
    header: str
    binding: str = Field(..., min_length=1)
    width: str | None = None
    format: Literal["currency", "number", "text"] | None = None

    def to_entity(self) -> TableColumn:
        return TableColumn(**self.model_dump())


class TableConfigSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    data_source: str = Field(..., alias="dataSource", min_length=1)
    columns: list[TableColumnSchema]

    def to_entity(self) -> TableConfig:
        return TableConfig(
            data_source=self.data_source,
            columns=[column.to_entity() for column in self.columns],
        )


class TemplateElementSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1)
    type: ElementTypeLiteral
    x: int | float
    y: int | float
    width: int | float = Field(..., ge=0)
    height: int | float = Field(..., ge=0)
    content: str | None = None
    binding: str | None = None
    orientation: Literal["horizontal", "vertical"] | None = None
    table_config: TableConfigSchema | None = Field(default=None, alias="tableConfig")
    style: ElementStyleSchema | None = None

    def to_entity(self, *, path: str) -> TemplateElement:
        if self.type == "table" and self.table_config is None:
            raise TemplateValidationError(
                "Table elements require a tableConfig", field=f"{path}.tableConfig"
            )
        if self.type != "table" and self.table_config is not None:
            raise TemplateValidationError(
                "Only table elements may define a tableConfig", field=f"{path}.tableConfig"
            )
        return TemplateElement(
            id=self.id,
            type=self.type,
            x=self.x,
            y=self.y,
            width=self.width,
            height=self.height,
            content=self.content,
            binding=self.binding,
            orientation=self.orientation,
            table_config=self.table_config.to_entity() if self.table_config else None,
            style=self.style.to_entity() if self.style else ElementStyle(),
        )


class TemplateLayoutSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    page_size: Literal["A4", "Letter"] = Field(default="A4", alias="pageSize")
    orientation: Literal["portrait", "landscape"] = "portrait"
    elements: list[TemplateElementSchema] = Field(default_factory=list)

    def to_entity(self, *, path: str = "layout") -> TemplateLayout:
        """Convert to the domain layout, enforcing the table configuration invariant."""

        return TemplateLayout(
            page_size=self.page_size,
            orientation=self.orientation,
            elements=[
                element.to_entity(path=f"{path}.elements.{index}")
                for index, element in enumerate(self.elements)
            ],
        )


__all__ = [
    "ElementStyleSchema",
    "TableColumnSchema",
    "TableConfigSchema",
    "TemplateElementSchema",
    "TemplateLayoutSchema",
]
