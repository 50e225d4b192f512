"""Use case for creating templates."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from invoice_designer.domain.entities import Template, TemplateLayout
from invoice_designer.domain.errors import TemplateValidationError
from invoice_designer.domain.presets import default_layout, default_sample_data
from invoice_designer.infrastructure.repositories import TemplateRepository
from invoice_designer.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def normalize_name(name: str) -> str:
    normalized = name.strip()
    if not normalized:
        raise TemplateValidationError("Template name cannot be empty", field="name")
    return normalized


def create_template(
    session: Session,
    *,
    name: str,
    description: str | None = None,
    layout: TemplateLayout | None = None,
    sample_data: Any = None,
) -> Template:
    """Create a template; a missing layout or sample data gets the starter content."""

    repository = TemplateRepository(session)

    now = now_in_app_timezone()
    template = Template(
        id=None,
        name=normalize_name(name),
        description=description,
        layout=layout if layout is not None else default_layout(),
        sample_data=sample_data if sample_data is not None else default_sample_data(),
        created_at=now,
        updated_at=now,
    )

    saved_template = repository.create(template)
    logger.info("Created template %s (%s)", saved_template.id, saved_template.name)
    return saved_template
