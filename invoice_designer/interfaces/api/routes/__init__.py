from fastapi import FastAPI

from .presets import router as presets_router
from .render import router as render_router
from .templates import router as templates_router


def register_routes(app: FastAPI) -> None:
    """Registra todos los routers de la API en la aplicación FastAPI."""

    app.include_router(templates_router)
    app.include_router(render_router)
    app.include_router(presets_router)
