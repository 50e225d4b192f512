"""Use case for listing templates."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from invoice_designer.domain.entities import Template
from invoice_designer.infrastructure.repositories import TemplateRepository


def list_templates(session: Session) -> Sequence[Template]:
    """Return every template, least recently updated first."""

    return TemplateRepository(session).list()
