"""Repository implementations for infrastructure layer."""

from .template_repository import TemplateRepository

__all__ = ["TemplateRepository"]
