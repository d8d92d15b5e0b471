from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from resumepdf.api import deps
from resumepdf.core.config import Settings
from resumepdf.core.exceptions import NotFound
from resumepdf.schemas.health import HealthResponse

router = APIRouter()


@router.get("/", include_in_schema=False)
def index(settings: Settings = Depends(deps.get_settings)):
    page = settings.PUBLIC_DIR / "index.html"
    if not page.is_file():
        raise NotFound("Route not found")
    return FileResponse(page, media_type="text/html")


@router.get("/health", response_model=HealthResponse)
def health(settings: Settings = Depends(deps.get_settings)) -> Any:
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc),
        "environment": settings.ENVIRONMENT,
        "version": settings.VERSION,
    }
