"""
Azure OpenAI Provider - Chat completions sobre un deployment de Azure OpenAI
"""

import logging
from typing import Optional
from urllib.parse import urlparse

from .base import LLMProvider, LLMResponse

logger = logging.getLogger(__name__)


def _is_absolute_url(value: str) -> bool:
    parsed = urlparse(value)
    return bool(parsed.scheme and parsed.netloc)


class AzureOpenAIProvider(LLMProvider):
    """Provider para Azure OpenAI (deployment de chat)"""

    provider_name = "azure_openai"

    def __init__(
        self,
        endpoint: Optional[str] = None,
        api_key: Optional[str] = None,
        deployment: Optional[str] = None,
        api_version: Optional[str] = None,
    ):
        self._endpoint = endpoint
        self._api_key = api_key
        self._deployment = deployment
        self._api_version = api_version
        self._client = None

    def _resolve(self) -> tuple[str | None, str | None, str | None, str]:
        """Combina argumentos explícitos con Settings"""
        from ..config import get_settings

        settings = get_settings()
        return (
            self._endpoint or settings.azure_openai_endpoint,
            self._api_key or settings.azure_openai_api_key,
            self._deployment or settings.azure_openai_deployment,
            self._api_version or settings.azure_openai_api_version,
        )

    def _ensure_initialized(self):
        """Inicializa el cliente de Azure OpenAI si no está inicializado"""
        if self._client is not None:
            return

        from openai import AzureOpenAI

        endpoint, api_key, deployment, api_version = self._resolve()

        if not endpoint or not endpoint.strip():
            raise ValueError(
                "AZURE_OPENAI_ENDPOINT no configurado. "
                "Define la URL del recurso de Azure OpenAI."
            )
        if not _is_absolute_url(endpoint):
            raise ValueError(
                f"AZURE_OPENAI_ENDPOINT no es una URL absoluta válida: '{endpoint}'"
            )
        if not api_key or not api_key.strip():
            raise ValueError("AZURE_OPENAI_API_KEY no configurada")
        if not deployment or not deployment.strip():
            raise ValueError(
                "AZURE_OPENAI_DEPLOYMENT no configurado. "
                "Define el deployment a usar para chat completions."
            )

        self._deployment = deployment
        self._client = AzureOpenAI(
            api_key=api_key,
            azure_endpoint=endpoint,
            api_version=api_version,
        )

    def generate(
        self,
        question: str,
        system_prompt: str,
        model: Optional[str] = None,
        max_tokens: int = 1024,
        temperature: float = 0.2,
    ) -> LLMResponse:
        """Genera respuesta con Azure OpenAI"""
        self._ensure_initialized()

        model_name = model or self.default_model
        logger.info("Calling Azure OpenAI deployment '%s' for SPL generation", model_name)

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
        except Exception as e:
            logger.error("Error while calling Azure OpenAI: %s", e)
            raise RuntimeError(f"Error en Azure OpenAI: {str(e)}") from e

        content = response.choices[0].message.content if response.choices else None

        return LLMResponse(
            text=content or "",
            model=model_name,
            provider=self.provider_name,
            prompt_tokens=response.usage.prompt_tokens if response.usage else None,
            completion_tokens=(
                response.usage.completion_tokens if response.usage else None
            ),
            total_tokens=response.usage.total_tokens if response.usage else None,
        )

    def is_available(self) -> bool:
        """Verifica si Azure OpenAI está configurado"""
        try:
            endpoint, api_key, deployment, _ = self._resolve()
            return bool(endpoint and api_key and deployment)
        except Exception:
            return False

    @property
    def default_model(self) -> str:
        if self._deployment:
            return self._deployment
        _, _, deployment, _ = self._resolve()
        return deployment or ""

    @property
    def available_models(self) -> list[str]:
        return [self.default_model] if self.default_model else []
