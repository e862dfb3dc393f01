"""
Generator - Convierte preguntas en SPL usando un LLMProvider (JSON estructurado)
"""
import json
import logging
import re
import time
from dataclasses import dataclass

from .config import get_settings
from .guardrails.policy import DEFAULT_POLICY, SplPolicy
from .prompt import build_system_prompt
from .providers import LLMProvider, get_provider

logger = logging.getLogger(__name__)


class SplGenerationError(RuntimeError):
    """El provider falló o devolvió una respuesta inutilizable"""


@dataclass(frozen=True)
class SplLlmResult:
    """Respuesta estructurada del LLM"""

    spl: str
    explanation: tuple[str, ...] = ()
    optimizations: tuple[str, ...] = ()
    guardrails: tuple[str, ...] = ()
    model: str | None = None
    provider: str | None = None
    latency_ms: int | None = None


class SplGenerator:
    """Generador de SPL sobre cualquier LLMProvider"""

    def __init__(
        self,
        provider: LLMProvider | None = None,
        policy: SplPolicy | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ):
        settings = get_settings()
        self.provider = provider or get_provider(settings.llm_provider)
        self.policy = policy or DEFAULT_POLICY
        self.system_prompt = build_system_prompt(self.policy)
        self.max_tokens = max_tokens or settings.max_tokens
        self.temperature = temperature if temperature is not None else settings.temperature

    @property
    def model_name(self) -> str:
        return self.provider.default_model

    def generate(self, question: str) -> SplLlmResult:
        """
        Genera SPL para una pregunta en lenguaje natural.

        Raises:
            ValueError: Si la pregunta está vacía
            SplGenerationError: Si el provider falla o la respuesta no es válida
        """
        if not question or not question.strip():
            raise ValueError("Question must be provided.")

        start_time = time.time()

        try:
            response = self.provider.generate(
                question,
                self.system_prompt,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except ValueError:
            raise
        except Exception as e:
            logger.error("LLM provider '%s' failed: %s", self.provider.provider_name, e)
            raise SplGenerationError(str(e)) from e

        content = response.text
        if not content or not content.strip():
            logger.error("LLM response content was empty.")
            raise SplGenerationError("LLM did not return any content.")

        parsed = self._parse_json_response(content)
        if parsed is None:
            logger.error("Failed to parse LLM response as JSON. Raw content: %s", content)
            raise SplGenerationError("LLM response was not valid JSON.")

        spl = parsed.get("spl")
        if not isinstance(spl, str) or not spl.strip():
            logger.error("LLM JSON response is missing required 'spl' field. Raw content: %s", content)
            raise SplGenerationError("LLM response JSON was missing required fields.")

        result = SplLlmResult(
            spl=spl.strip(),
            explanation=_as_strings(parsed.get("explanation")),
            optimizations=_as_strings(parsed.get("optimizations")),
            guardrails=_as_strings(parsed.get("guardrails")),
            model=response.model,
            provider=response.provider,
            latency_ms=int((time.time() - start_time) * 1000),
        )

        # Sanity check: no rechaza, solo avisa
        lowered = result.spl.lower()
        if "index=" not in lowered or "stats" not in lowered:
            logger.warning("Generated SPL may not meet expected patterns. SPL: %s", result.spl)

        return result

    def _parse_json_response(self, text: str) -> dict | None:
        """
        Extrae y parsea JSON de la respuesta del LLM.
        Maneja casos donde el LLM agrega texto extra o bloques markdown.
        """
        candidates = [text.strip()]

        # Bloques de código markdown
        for pattern in (r"```json\s*([\s\S]*?)\s*```", r"```\s*([\s\S]*?)\s*```"):
            match = re.search(pattern, text)
            if match:
                candidates.append(match.group(1).strip())

        # Objeto JSON más externo
        json_match = re.search(r"\{[\s\S]*\}", text)
        if json_match:
            candidates.append(json_match.group(0))

        for candidate in candidates:
            try:
                parsed = json.loads(candidate)
            except json.JSONDecodeError:
                continue
            if isinstance(parsed, dict):
                return parsed

        return None


def _as_strings(value) -> tuple[str, ...]:
    """Normaliza una lista del JSON a tupla de strings no vacíos"""
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        return ()
    return tuple(str(item).strip() for item in value if item is not None and str(item).strip())
