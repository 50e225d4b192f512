"""Rutas para renderizar diseños aún no guardados."""

from fastapi import APIRouter

from invoice_designer.application.use_cases.templates import render_layout_preview
from invoice_designer.interfaces.api.schemas import RenderRequest, RenderedPageRead

router = APIRouter(prefix="/api/render", tags=["render"])


@router.post("", response_model=RenderedPageRead)
def render_layout(payload: RenderRequest) -> RenderedPageRead:
    """Renderiza el estado actual del editor sin persistirlo."""

    page = render_layout_preview(
        payload.layout.to_entity(), payload.sample_data, mode=payload.mode
    )
    return RenderedPageRead.model_validate(page.to_dict())
