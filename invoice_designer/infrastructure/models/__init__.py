"""ORM models used by the application infrastructure."""

from .template import TemplateModel

__all__ = ["TemplateModel"]
