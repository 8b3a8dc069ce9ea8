# src/artisan_core/config.py
import os
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_ENDPOINT = "https://labs.google/fx/api/trpc/videoFx.generateNextScenePrompts"


class Settings(BaseSettings):
    """
    Prompt Artisan configuration.
    Loads variables from .env file or environment variables.
    """
    # --- Remote generation endpoint ---
    ARTISAN_API_ENDPOINT: str = os.getenv("ARTISAN_API_ENDPOINT", DEFAULT_API_ENDPOINT)
    # No per-user session negotiation: every call carries the same sentinel.
    ARTISAN_SESSION_ID: str = os.getenv("ARTISAN_SESSION_ID", "anonymous")
    ARTISAN_REQUEST_TIMEOUT: float = float(os.getenv("ARTISAN_REQUEST_TIMEOUT", "60"))

    # --- Local state ---
    ARTISAN_HISTORY_PATH: str = os.getenv(
        "ARTISAN_HISTORY_PATH",
        os.path.join(os.getcwd(), ".artisan", "prompt_history.json"),
    )
    ARTISAN_HISTORY_LIMIT: int = int(os.getenv("ARTISAN_HISTORY_LIMIT", "20"))

    # --- Observability ---
    ARTISAN_LOG_LEVEL: str = os.getenv("ARTISAN_LOG_LEVEL", "INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        env_file_encoding='utf-8'
    )


# Initialize a global settings instance
settings = Settings()
