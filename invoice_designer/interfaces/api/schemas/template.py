"""Schemas for template endpoints.

Field names travel in camelCase (``sampleData``, ``createdAt``) to keep the
wire format the editor already speaks.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from invoice_designer.domain.entities import Template

from .layout import TemplateLayoutSchema

_CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _reject_null(value: Any) -> Any:
    if value is None:
        raise ValueError("Value cannot be null")
    return value


class TemplateCreate(BaseModel):
    """Payload required to create a template."""

    model_config = _CAMEL_CONFIG

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    layout: TemplateLayoutSchema
    sample_data: Any = Field(...)

    _sample_data_not_null = field_validator("sample_data")(_reject_null)


class TemplateUpdate(BaseModel):
    """Partial update; only the fields present in the body are changed."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    layout: TemplateLayoutSchema | None = None
    sample_data: Any = None

    _values_not_null = field_validator("name", "layout", "sample_data")(_reject_null)


class TemplateRead(BaseModel):
    model_config = _CAMEL_CONFIG

    id: int
    name: str
    description: str | None
    layout: dict[str, Any]
    sample_data: Any
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, template: Template) -> "TemplateRead":
        return cls(
            id=template.id,
            name=template.name,
            description=template.description,
            layout=template.layout.to_dict(),
            sample_data=template.sample_data,
            created_at=template.created_at,
            updated_at=template.updated_at,
        )


__all__ = ["TemplateCreate", "TemplateRead", "TemplateUpdate"]
