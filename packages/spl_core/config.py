"""
Configuración central del proyecto
"""
import json
from functools import lru_cache
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from .guardrails.policy import (
    DEFAULT_ALLOWED_COMMANDS,
    DEFAULT_ALLOWED_INDEXES,
    DEFAULT_BLOCKED_KEYWORDS,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Provider LLM ("demo", "azure_openai", "groq", "gemini"; vacío = primero disponible)
    llm_provider: str | None = "demo"

    # Azure OpenAI
    azure_openai_endpoint: str | None = None
    azure_openai_api_key: str | None = None
    azure_openai_deployment: str | None = None
    azure_openai_api_version: str = "2024-06-01"

    # Groq
    groq_api_key: str | None = None
    groq_model: str = "llama-3.3-70b-versatile"

    # Gemini
    google_api_key: str | None = None
    gemini_model: str = "gemini-2.5-flash"

    # Generación
    max_tokens: int = 1024
    temperature: float = 0.2

    # Guardrails
    # Aceptan JSON (["main", "web"]) o lista separada por comas (main,web)
    allowed_indexes: Annotated[list[str], NoDecode] = list(DEFAULT_ALLOWED_INDEXES)
    blocked_keywords: Annotated[list[str], NoDecode] = list(DEFAULT_BLOCKED_KEYWORDS)
    allowed_commands: Annotated[list[str], NoDecode] = list(DEFAULT_ALLOWED_COMMANDS)
    block_on_invalid: bool = False

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    @field_validator(
        "allowed_indexes", "blocked_keywords", "allowed_commands", mode="before"
    )
    @classmethod
    def split_comma_separated(cls, value):
        if not isinstance(value, str):
            return value
        value = value.strip()
        if value.startswith("["):
            return json.loads(value)
        return [item.strip() for item in value.split(",") if item.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
