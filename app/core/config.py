from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    # -------------------------
    # App core settings
    # -------------------------
    APP_NAME: str = "Customer Data Service"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # -------------------------
    # Server
    # -------------------------
    HOST: str = "0.0.0.0"
    PORT: int = 3002

    # -------------------------
    # Storage
    # -------------------------
    DATA_FILE: Path = BASE_DIR / "data" / "customers.json"

    # -------------------------
    # Pydantic v2 config
    # -------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


# Singleton
settings = Settings()
