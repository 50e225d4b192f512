"""Rutas para consultar los bloques de texto predefinidos."""

from fastapi import APIRouter

from invoice_designer.domain.presets import TEXT_PRESETS
from invoice_designer.interfaces.api.schemas import TextPresetRead

router = APIRouter(prefix="/api/presets", tags=["presets"])


@router.get("/text", response_model=list[TextPresetRead])
def list_text_presets() -> list[TextPresetRead]:
    """Devuelve los bloques de texto con estilos predefinidos."""

    return [
        TextPresetRead(
            id=preset.id,
            name=preset.name,
            description=preset.description,
            element=preset.element,
        )
        for preset in TEXT_PRESETS
    ]
