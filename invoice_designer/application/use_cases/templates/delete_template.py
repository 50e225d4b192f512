"""Use case for deleting templates."""

import logging

from sqlalchemy.orm import Session

from invoice_designer.infrastructure.repositories import TemplateRepository

logger = logging.getLogger(__name__)


def delete_template(session: Session, template_id: int) -> None:
    """Delete the template; deleting an unknown id is a no-op."""

    removed = TemplateRepository(session).delete(template_id)
    if removed:
        logger.info("Deleted template %s", template_id)
    else:
        logger.debug("Template %s already absent, nothing to delete", template_id)
