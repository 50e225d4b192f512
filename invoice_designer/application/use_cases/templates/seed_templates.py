"""Use case inserting the example template into an empty database."""

import logging
from copy import deepcopy

from sqlalchemy.orm import Session

from invoice_designer.domain.entities import Template, TemplateLayout
from invoice_designer.domain.presets import SEED_TEMPLATE
from invoice_designer.infrastructure.repositories import TemplateRepository

from .create_template import create_template

logger = logging.getLogger(__name__)


def seed_templates(session: Session) -> Template | None:
    """Create the "Standard Invoice" example when no template exists yet."""

    if TemplateRepository(session).count() > 0:
        return None

    logger.info("Seeding database with example template...")
    seed = deepcopy(SEED_TEMPLATE)
    template = create_template(
        session,
        name=seed["name"],
        description=seed["description"],
        layout=TemplateLayout.from_dict(seed["layout"]),
        sample_data=seed["sample_data"],
    )
    logger.info("Database seeded with template %s", template.id)
    return template
