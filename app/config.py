from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=BASE_DIR / ".env", env_file_encoding="utf-8")

    # Snapshot written by the upstream news pipeline
    NEWS_DATA_FILE: Path = BASE_DIR / "data" / "processed" / "biosimilar_news" / "news.json"

    # Dashboard defaults
    DEFAULT_DAY_WINDOW: int = 30

    # HTTP
    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"


settings = Settings()
