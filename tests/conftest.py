"""Shared fixtures: a throwaway SQLite database and a FastAPI test client."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "invoice_designer_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ["APP_TIMEZONE"] = "UTC"

from invoice_designer.config import get_settings  # noqa: E402

get_settings.cache_clear()


@pytest.fixture()
def db_session():
    """Yield a session bound to freshly created tables."""

    from invoice_designer.infrastructure.database import (
        Base,
        SessionLocal,
        engine,
        initialize_database,
    )

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(db_session):
    """Return a test client bound to a clean application instance."""

    pytest.importorskip("fastapi")
    from fastapi.testclient import TestClient

    from main import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client
