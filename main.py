import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from invoice_designer.application.use_cases.templates import seed_templates
from invoice_designer.config import get_settings
from invoice_designer.infrastructure.database import SessionLocal, engine, initialize_database
from invoice_designer.interfaces.api.errors import register_exception_handlers
from invoice_designer.interfaces.api.routes import register_routes
from invoice_designer.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Inicializa la base de datos al arrancar y libera los recursos al cerrar."""

    initialize_database()
    if get_settings().seed_on_startup:
        with SessionLocal() as session:
            seed_templates(session)
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Crea y configura la aplicación principal de FastAPI."""

    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Invoice Template Designer API", lifespan=lifespan)

    # Autoriza peticiones desde el editor web.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    register_routes(app)
    return app


app = create_app()
