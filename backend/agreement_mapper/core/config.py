"""
Pydantic Settings — centralized configuration loaded from environment variables.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Application ───────────────────────────
    APP_ENV: str = "development"

    # ── Logging ───────────────────────────────
    LOG_LEVEL: str = ""
    LOG_JSON: bool = False

    # ── Agreement document ────────────────────
    # IANA zone for the agreement "date" field, e.g. "Asia/Kolkata".
    # Empty means the server's local time.
    DOCUMENT_TIMEZONE: str = ""

    # ── HTTP ──────────────────────────────────
    CORS_ORIGINS: list[str] = ["*"]

    model_config = {"env_file": ["../.env", ".env"], "extra": "ignore"}

    @property
    def effective_log_level(self) -> str:
        """Explicit LOG_LEVEL, else DEBUG in development and INFO elsewhere."""
        if self.LOG_LEVEL:
            return self.LOG_LEVEL.upper()
        return "DEBUG" if self.APP_ENV == "development" else "INFO"


settings = Settings()
