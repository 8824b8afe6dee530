"""Configuration management using Pydantic Settings."""

import os
from typing import List

from pydantic import SecretStr
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # OpenRouter (completion provider)
    openrouter_api_key: SecretStr = SecretStr("")
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    openrouter_model: str = "openai/gpt-3.5-turbo"
    openrouter_referer: str = "http://localhost:3000"
    openrouter_title: str = "Travel Planner"
    llm_temperature: float = 0.7

    # App Configuration
    environment: str = "development"
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    # Performance Settings
    request_timeout: int = 60

    class Config:
        """Pydantic configuration."""
        env_file = os.path.join(os.path.dirname(__file__), "..", ".env")
        case_sensitive = False
        extra = "ignore"

    @property
    def llm_configured(self) -> bool:
        return bool(self.openrouter_api_key.get_secret_value())


# Global settings instance
settings = Settings()
