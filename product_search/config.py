"""Configuration du service de recherche de produits."""
from pathlib import Path

from pydantic_settings import BaseSettings

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Configuration de l'application."""

    # Scoring
    EXACT_SCORE: float = 1.0
    SUBSTRING_SCORE: float = 0.9

    # Seuils
    SEARCH_THRESHOLD: float = 0.3
    AUTOCOMPLETE_THRESHOLD: float = 0.4
    AUTOCOMPLETE_MIN_LENGTH: int = 2
    MAX_SUGGESTIONS: int = 5

    # Catalogue (lecture seule)
    CATALOG_PATH: Path = PACKAGE_DIR / "data" / "spreader_settings.json"

    # Redis
    REDIS_URL: str = "redis://redis:6379/0"
    CACHE_TTL_SECONDS: int = 300
    ENABLE_CACHE: bool = True

    # Logs
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
