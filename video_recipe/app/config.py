from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from video_recipe.services.fetcher import DEFAULT_TIMEOUT_SECONDS, DEFAULT_USER_AGENT
from video_recipe.services import gemini_client


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8-sig",
        case_sensitive=False,
        extra="ignore",
    )

    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = gemini_client.DEFAULT_MODEL_NAME
    GEMINI_TIMEOUT_SECONDS: float = Field(default=gemini_client.DEFAULT_TIMEOUT_SECONDS, gt=0)
    PROXY_URL: Optional[str] = None
    HTTP_TIMEOUT_SECONDS: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    USER_AGENT: str = DEFAULT_USER_AGENT
    APP_ENV: str = "local"
    HOST: str = "0.0.0.0"
    PORT: int = Field(default=8000, gt=0)
    FRONTEND_CORS_ORIGINS: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:5173"],
    )


settings = Settings()
