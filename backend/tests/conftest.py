import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from resumepdf.api import deps
from resumepdf.core.config import Settings
from resumepdf.core.exceptions import RenderFailure
from resumepdf.db.session import create_db_engine, init_db
from resumepdf.main import create_app

FAKE_PDF = b"%PDF-1.4\n% fake document\n%%EOF\n"


class FakeRenderer:
    """Stands in for PdfRenderer and remembers what it was asked to render."""

    def __init__(self):
        self.calls = []
        self.fail = False

    async def render(self, html, margin="20mm"):
        self.calls.append({"html": html, "margin": margin})
        if self.fail:
            raise RenderFailure("Failed to generate PDF")
        return FAKE_PDF


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}",
        ENVIRONMENT="test",
        MAX_UPLOAD_BYTES=1024,
    )


@pytest.fixture
def db(settings):
    engine = create_db_engine(settings.DATABASE_URL)
    init_db(engine)
    session = Session(engine)
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def renderer():
    return FakeRenderer()


@pytest.fixture
def app(settings, renderer):
    application = create_app(settings)
    application.dependency_overrides[deps.get_renderer] = lambda: renderer
    return application


@pytest.fixture
def client(app):
    # Context manager runs the lifespan, which opens the database
    with TestClient(app) as c:
        yield c
