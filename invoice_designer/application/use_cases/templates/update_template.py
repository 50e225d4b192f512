"""Use case for updating templates."""

import logging
from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from invoice_designer.domain.entities import Template, TemplateLayout
from invoice_designer.domain.errors import TemplateNotFoundError, TemplateValidationError
from invoice_designer.infrastructure.repositories import TemplateRepository
from invoice_designer.utils import now_in_app_timezone

from .create_template import normalize_name

logger = logging.getLogger(__name__)


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


def update_template(
    session: Session,
    *,
    template_id: int,
    name: str = UNSET,
    description: str | None = UNSET,
    layout: TemplateLayout = UNSET,
    sample_data: Any = UNSET,
) -> Template:
    """Apply the provided fields to a template; omitted fields keep their value.

    ``description`` may be set to ``None`` to clear it. Layout and sample data
    are replaced wholesale.

    Raises:
        TemplateNotFoundError: If the template does not exist.
        TemplateValidationError: If a required field is cleared or blank.
    """

    repository = TemplateRepository(session)
    current = repository.get(template_id)
    if current is None:
        logger.warning("Cannot update missing template %s", template_id)
        raise TemplateNotFoundError(template_id)

    for field_name, value in (("name", name), ("layout", layout), ("sampleData", sample_data)):
        if value is None:
            raise TemplateValidationError(f"{field_name} cannot be null", field=field_name)

    updated_template = replace(
        current,
        name=normalize_name(name) if name is not UNSET else current.name,
        description=description if description is not UNSET else current.description,
        layout=layout if layout is not UNSET else current.layout,
        sample_data=sample_data if sample_data is not UNSET else current.sample_data,
        updated_at=now_in_app_timezone(),
    )

    saved_template = repository.update(updated_template)
    logger.info("Updated template %s", saved_template.id)
    return saved_template
