"""Use cases rendering stored or unsaved layouts."""

from typing import Any

from sqlalchemy.orm import Session

from invoice_designer.application.rendering import ElementRenderer, RenderedPage
from invoice_designer.domain.entities import TemplateLayout

from .get_template import get_template


def render_template(
    session: Session,
    template_id: int,
    *,
    mode: str = "preview",
    sample_data: Any = None,
    renderer: ElementRenderer | None = None,
) -> RenderedPage:
    """Render a stored template against its own sample data unless overridden."""

    template = get_template(session, template_id)
    data = template.sample_data if sample_data is None else sample_data
    return render_layout_preview(template.layout, data, mode=mode, renderer=renderer)


def render_layout_preview(
    layout: TemplateLayout,
    sample_data: Any,
    *,
    mode: str = "preview",
    renderer: ElementRenderer | None = None,
) -> RenderedPage:
    renderer = renderer or ElementRenderer.from_settings()
    return renderer.render_layout(layout, mode, sample_data)
