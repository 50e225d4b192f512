"""Rutas para administrar plantillas de factura y previsualizarlas."""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from invoice_designer.application.use_cases.templates import (
    create_template as create_template_uc,
    delete_template as delete_template_uc,
    get_template as get_template_uc,
    list_templates as list_templates_uc,
    render_template as render_template_uc,
    update_template as update_template_uc,
)
from invoice_designer.infrastructure.database import get_db
from invoice_designer.interfaces.api.schemas import (
    RenderModeLiteral,
    RenderedPageRead,
    TemplateCreate,
    TemplateRead,
    TemplateUpdate,
)

router = APIRouter(prefix="/api/templates", tags=["templates"])


@router.get("", response_model=list[TemplateRead])
def list_templates(db: Session = Depends(get_db)) -> list[TemplateRead]:
    """Devuelve todas las plantillas ordenadas por fecha de actualización."""

    return [TemplateRead.from_entity(template) for template in list_templates_uc(db)]


@router.get("/{template_id}", response_model=TemplateRead)
def get_template(template_id: int, db: Session = Depends(get_db)) -> TemplateRead:
    """Obtiene una plantilla por su identificador."""

    return TemplateRead.from_entity(get_template_uc(db, template_id))


@router.post("", response_model=TemplateRead, status_code=status.HTTP_201_CREATED)
def create_template(
    template_in: TemplateCreate, db: Session = Depends(get_db)
) -> TemplateRead:
    """Crea una nueva plantilla con su diseño y datos de ejemplo."""

    template = create_template_uc(
        db,
        name=template_in.name,
        description=template_in.description,
        layout=template_in.layout.to_entity(),
        sample_data=template_in.sample_data,
    )
    return TemplateRead.from_entity(template)


@router.put("/{template_id}", response_model=TemplateRead)
def update_template(
    template_id: int,
    template_in: TemplateUpdate,
    db: Session = Depends(get_db),
) -> TemplateRead:
    """Actualiza los campos enviados de una plantilla existente."""

    changes = {
        field_name: getattr(template_in, field_name)
        for field_name in template_in.model_fields_set
    }
    if "layout" in changes:
        changes["layout"] = template_in.layout.to_entity()

    template = update_template_uc(db, template_id=template_id, **changes)
    return TemplateRead.from_entity(template)


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_template(template_id: int, db: Session = Depends(get_db)) -> Response:
    """Elimina una plantilla; si no existe la operación no tiene efecto."""

    delete_template_uc(db, template_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{template_id}/render", response_model=RenderedPageRead)
def render_template(
    template_id: int,
    mode: RenderModeLiteral = Query(default="preview"),
    db: Session = Depends(get_db),
) -> RenderedPageRead:
    """Renderiza la plantilla en modo edición o vista previa con sus datos de ejemplo."""

    page = render_template_uc(db, template_id, mode=mode)
    return RenderedPageRead.model_validate(page.to_dict())
