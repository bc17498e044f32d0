"""
Settings — Configuration SokoConnect (Pydantic Settings).

Lue depuis les variables d'environnement puis `.env`. Importer le
singleton plutôt que d'appeler os.getenv() :

    from sokoconnect.core.settings import settings
    settings.CURRENCY
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Service HTTP ---
    APP_NAME: str = "SokoConnect Advisor"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    ALLOWED_ORIGINS: list[str] = ["*"]

    # --- Logging / Sentry ---
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""
    SENTRY_DSN: str = ""
    SENTRY_ENVIRONMENT: str = "development"

    # --- Moteur de conseil ---
    CURRENCY: str = "KES"
    TOP_RESULTS: int = Field(default=3, ge=1)   # entrées max par liste de réponse
    MAX_MESSAGE_LENGTH: int = Field(default=2000, ge=1)
    # Réponses en langues locales (swahili, kikuyu, luo...) avant le flux anglais
    MULTILINGUAL_REPLIES: bool = False

    @property
    def sentry_enabled(self) -> bool:
        return bool(self.SENTRY_DSN)


settings = Settings()
