"""
Demo Provider - Genera SPL plausible sin llamar a ningún LLM ni requerir secretos
"""

import json
import logging
from typing import Optional

from .base import LLMProvider, LLMResponse

logger = logging.getLogger(__name__)

MAX_TERM_LENGTH = 40

EXPLANATION = [
    "This is a demo-only SPL generated without any external LLM.",
    "The search looks for events that roughly match your question text.",
    "The pipeline then aggregates results by host and source using stats.",
]

OPTIMIZATIONS = [
    "Add an index or sourcetype filter to narrow the dataset.",
    "Constrain the time range (e.g., last 24 hours) for faster execution.",
    "Project only the fields you actually need downstream.",
]

GUARDRAILS = [
    "Do not run this SPL against unrestricted production indexes without validation.",
    "Treat user-provided text as untrusted; sanitize before integrating into SPL.",
    "Review and test generated SPL in a non-production environment first.",
]


def build_demo_spl(question: str) -> str:
    """Construye un search simple a partir del texto de la pregunta"""
    term = question.replace('"', "")
    if len(term) > MAX_TERM_LENGTH:
        term = term[:MAX_TERM_LENGTH] + "..."
    return f'search "{term}" | stats count by host, source'


class DemoProvider(LLMProvider):
    """Provider de demo: respuesta JSON fabricada localmente"""

    provider_name = "demo"

    def generate(
        self,
        question: str,
        system_prompt: str,
        model: Optional[str] = None,
        max_tokens: int = 1024,
        temperature: float = 0.2,
    ) -> LLMResponse:
        """Fabrica una respuesta con el mismo schema JSON que un LLM real"""
        logger.info("Demo provider generating SPL for question: %s", question)

        payload = {
            "spl": build_demo_spl(question),
            "explanation": EXPLANATION,
            "optimizations": OPTIMIZATIONS,
            "guardrails": GUARDRAILS,
        }

        return LLMResponse(
            text=json.dumps(payload),
            model=model or self.default_model,
            provider=self.provider_name,
        )

    def is_available(self) -> bool:
        return True

    @property
    def default_model(self) -> str:
        return "demo"

    @property
    def available_models(self) -> list[str]:
        return ["demo"]
