"""Persistence layer for templates."""

from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from invoice_designer.domain.entities import Template, TemplateLayout
from invoice_designer.infrastructure.models import TemplateModel
from invoice_designer.utils import ensure_app_timezone, now_in_app_timezone


class TemplateRepository:
    """Provide CRUD operations for templates.

    Layout and sample data are stored wholesale as JSON; there are no partial
    column updates and no concurrency checks, so the last writer wins.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[Template]:
        query = self.session.query(TemplateModel).order_by(
            TemplateModel.updated_at.asc(), TemplateModel.id.asc()
        )
        return [self._to_entity(model) for model in query.all()]

    def count(self) -> int:
        return self.session.query(func.count(TemplateModel.id)).scalar() or 0

    def get(self, template_id: int) -> Template | None:
        model = self._get_model(template_id)
        return self._to_entity(model) if model else None

    def create(self, template: Template) -> Template:
        model = TemplateModel()
        self._apply_entity_to_model(model, template)
        now = now_in_app_timezone()
        model.created_at = ensure_app_timezone(template.created_at) or now
        model.updated_at = ensure_app_timezone(template.updated_at) or model.created_at
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, template: Template) -> Template:
        model = self._get_model(template.id)
        if not model:
            msg = f"Template with id {template.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, template)
        model.updated_at = ensure_app_timezone(template.updated_at) or now_in_app_timezone()
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, template_id: int) -> bool:
        """Delete the template and report whether a row was removed."""

        model = self._get_model(template_id)
        if not model:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    def _get_model(self, template_id: int | None) -> TemplateModel | None:
        if template_id is None:
            return None
        return self.session.get(TemplateModel, template_id)

    @staticmethod
    def _to_entity(model: TemplateModel) -> Template:
        return Template(
            id=model.id,
            name=model.name,
            description=model.description,
            layout=TemplateLayout.from_dict(model.layout),
            sample_data=model.sample_data,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )

    @staticmethod
    def _apply_entity_to_model(model: TemplateModel, template: Template) -> None:
        model.name = template.name
        model.description = template.description
        model.layout = template.layout.to_dict()
        model.sample_data = template.sample_data


__all__ = ["TemplateRepository"]
