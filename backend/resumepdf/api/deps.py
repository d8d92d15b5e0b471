from typing import Generator

from fastapi import Request
from sqlalchemy.orm import Session

from resumepdf.core.config import Settings
from resumepdf.services.pdf_renderer import PdfRenderer


def get_db(request: Request) -> Generator[Session, None, None]:
    """One session per request, bound to the engine opened at startup."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_renderer(request: Request) -> PdfRenderer:
    return request.app.state.renderer
