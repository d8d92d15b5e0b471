import logging
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# ========================================================
# 1. Paths
# ========================================================
# __file__ -> core/config.py
# .parent -> core/
# .parent -> resumepdf/
# .parent -> backend/  <-- .env, resumes.db and public/ live here
BACKEND_DIR = Path(__file__).resolve().parent.parent.parent
ENV_PATH = BACKEND_DIR / ".env"


# ========================================================
# 2. Settings
# ========================================================
class Settings(BaseSettings):
    PROJECT_NAME: str = "Resume PDF Service"
    VERSION: str = "1.0.0"
    # "development" passes raw error messages through to clients
    ENVIRONMENT: str = "development"

    # --- Server ---
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    # Comma separated, "*" allows everything
    CORS_ORIGINS: str = "*"
    # Seconds uvicorn waits for in-flight requests before forcing exit
    SHUTDOWN_TIMEOUT: int = 10

    # --- Storage ---
    DATABASE_URL: str = f"sqlite:///{BACKEND_DIR / 'resumes.db'}"

    # --- Static files ---
    PUBLIC_DIR: Path = BACKEND_DIR / "public"

    # --- Upload / PDF ---
    MAX_UPLOAD_BYTES: int = 5 * 1024 * 1024
    # A4 at 96 DPI
    PDF_VIEWPORT_WIDTH: int = 794
    PDF_VIEWPORT_HEIGHT: int = 1123
    PDF_STANDARD_MARGIN: str = "20mm"
    PDF_COMPACT_MARGIN: str = "5mm"

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"

    @property
    def cors_origin_list(self) -> List[str]:
        if self.CORS_ORIGINS.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


# ========================================================
# 3. Instance
# ========================================================
settings = Settings()

if not ENV_PATH.exists():
    logger.debug("No .env file at %s, using environment and defaults", ENV_PATH)
