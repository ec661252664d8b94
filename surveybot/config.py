from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when a required setting is missing or invalid at startup."""


class Settings(BaseSettings):
    # ---- LLM ----
    GROQ_API_KEY: str = Field(..., min_length=1)
    GROQ_MODEL_NAME: str = Field(default="llama-3.1-8b-instant")
    GROQ_BASE_URL: Optional[str] = Field(default=None)
    LLM_TEMPERATURE: float = Field(default=0.3)
    LLM_MAX_TOKENS: int = Field(default=200)

    # ---- LLM Runtime ----
    LLM_REQUEST_TIMEOUT: float = Field(default=30)

    # ---- Telegram ----
    TELEGRAM_BOT_TOKEN: Optional[str] = Field(default=None)
    TELEGRAM_CHAT_ID: Optional[str] = Field(default=None)
    TELEGRAM_API_URL: str = Field(default="https://api.telegram.org")
    TELEGRAM_POLL_TIMEOUT: int = Field(default=30)
    TELEGRAM_READ_TIMEOUT: float = Field(default=35)
    TELEGRAM_SEND_TIMEOUT: float = Field(default=10)
    POLL_INTERVAL: float = Field(default=2)

    # ---- Storage ----
    RESULT_FILE: str = Field(default="result.txt")

    # ---- Logging ----
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE_PATH: str = Field(default="surveybot.log")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def telegram_enabled(self) -> bool:
        return bool(self.TELEGRAM_BOT_TOKEN)


def load_settings(**overrides) -> Settings:
    """
    Build the settings object once at process start.

    Missing or empty required values are reported as ConfigurationError
    so the entry points can abort before any network activity.
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        missing = ", ".join(str(err["loc"][0]) for err in e.errors() if err.get("loc"))
        raise ConfigurationError(f"Invalid or missing settings: {missing}") from e
