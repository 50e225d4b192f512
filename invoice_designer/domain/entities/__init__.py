from .layout import (
    ELEMENT_TYPES,
    ElementStyle,
    TableColumn,
    TableConfig,
    TemplateElement,
    TemplateLayout,
)
from .template import Template

__all__ = [
    "ELEMENT_TYPES",
    "ElementStyle",
    "TableColumn",
    "TableConfig",
    "Template",
    "TemplateElement",
    "TemplateLayout",
]
