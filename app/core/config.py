# app/core/config.py
import logging
import os

from dotenv import load_dotenv

# .env im Projekt-Root laden (eine Ebene über app/)
PROJECT_ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
dotenv_path = os.path.join(PROJECT_ROOT_DIR, ".env")
if os.path.exists(dotenv_path):
    load_dotenv(dotenv_path)
else:
    load_dotenv()

logger = logging.getLogger(__name__)


class Settings:
    """Runtime settings, read once from the environment."""

    DATABASE_URL: str
    BACKEND_ALLOWED_ORIGINS: list
    LOG_LEVEL: str
    SQL_ECHO: bool
    HOST: str
    PORT: int

    def __init__(self):
        self.DATABASE_URL = os.getenv("DATABASE_URL") or self._fallback_database_url()
        self.BACKEND_ALLOWED_ORIGINS = self._parse_origins(
            os.getenv("BACKEND_ALLOWED_ORIGINS")
        )
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
        self.SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"
        self.HOST = os.getenv("HOST", "0.0.0.0")
        self.PORT = int(os.getenv("PORT", "3000"))

    @staticmethod
    def _fallback_database_url() -> str:
        # Fallback auf eine lokale SQLite-DB, wenn keine DATABASE_URL gesetzt ist
        sqlite_db_path = os.path.join(PROJECT_ROOT_DIR, "survey_responses.db")
        logger.warning(
            "DATABASE_URL not set, falling back to local SQLite database at %s",
            sqlite_db_path,
        )
        return f"sqlite+aiosqlite:///{sqlite_db_path}"

    @staticmethod
    def _parse_origins(raw):
        if not raw:
            return ["*"]
        origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
        return origins or ["*"]


settings = Settings()
