"""Domain entity representing an invoice template."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .layout import TemplateLayout


@dataclass
class Template:
    """A named page layout together with the sample data used to preview it."""

    id: int | None
    name: str
    description: str | None
    layout: TemplateLayout = field(default_factory=TemplateLayout)
    sample_data: Any = field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["Template"]
