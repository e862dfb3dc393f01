"""
Groq Provider - Groq API (OpenAI-compatible, ultra-fast inference)
"""

import logging
from typing import Optional

from .base import LLMProvider, LLMResponse

logger = logging.getLogger(__name__)


class GroqProvider(LLMProvider):
    """Provider para Groq (LPU inference)"""

    provider_name = "groq"

    # Modelos disponibles en Groq
    MODELS = {
        "llama-3.3-70b-versatile": "llama-3.3-70b-versatile",
        "openai/gpt-oss-120b": "openai/gpt-oss-120b",
        "llama-3.1-8b-instant": "llama-3.1-8b-instant",
    }

    def __init__(self, api_key: Optional[str] = None):
        self._api_key = api_key
        self._client = None

    def _ensure_initialized(self):
        """Inicializa el cliente de Groq si no está inicializado"""
        if self._client is None:
            from openai import OpenAI

            from ..config import get_settings

            settings = get_settings()
            api_key = self._api_key or settings.groq_api_key

            if not api_key:
                raise ValueError("GROQ_API_KEY no configurada")

            self._client = OpenAI(
                api_key=api_key,
                base_url="https://api.groq.com/openai/v1",
            )

    def generate(
        self,
        question: str,
        system_prompt: str,
        model: Optional[str] = None,
        max_tokens: int = 1024,
        temperature: float = 0.2,
    ) -> LLMResponse:
        """Genera respuesta con Groq"""
        self._ensure_initialized()

        model_name = model or self.default_model
        logger.info("Calling Groq model '%s' for SPL generation", model_name)

        try:
            response = self._client.chat.completions.create(
                model=model_name,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": question},
                ],
                max_tokens=max_tokens,
                temperature=temperature,
            )

            return LLMResponse(
                text=response.choices[0].message.content or "",
                model=model_name,
                provider=self.provider_name,
                prompt_tokens=response.usage.prompt_tokens if response.usage else None,
                completion_tokens=(
                    response.usage.completion_tokens if response.usage else None
                ),
                total_tokens=response.usage.total_tokens if response.usage else None,
            )
        except Exception as e:
            raise RuntimeError(f"Error en Groq: {str(e)}") from e

    def is_available(self) -> bool:
        """Verifica si Groq está disponible"""
        try:
            from ..config import get_settings

            settings = get_settings()
            return bool(self._api_key or settings.groq_api_key)
        except Exception:
            return False

    @property
    def default_model(self) -> str:
        from ..config import get_settings

        return get_settings().groq_model

    @property
    def available_models(self) -> list[str]:
        return list(self.MODELS.keys())
