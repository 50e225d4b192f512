"""Use case for retrieving a template."""

import logging

from sqlalchemy.orm import Session

from invoice_designer.domain.entities import Template
from invoice_designer.domain.errors import TemplateNotFoundError
from invoice_designer.infrastructure.repositories import TemplateRepository

logger = logging.getLogger(__name__)


def get_template(session: Session, template_id: int) -> Template:
    """Return the template identified by ``template_id`` or raise an error."""

    repository = TemplateRepository(session)
    template = repository.get(template_id)
    if template is None:
        logger.warning("Template %s not found", template_id)
        raise TemplateNotFoundError(template_id)
    return template
