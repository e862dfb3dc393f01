"""
Dobles de prueba compartidos
"""
from typing import Optional

from packages.spl_core.providers import LLMProvider, LLMResponse


class FakeProvider(LLMProvider):
    """Provider que retorna un texto fijo y registra las llamadas"""

    provider_name = "fake"

    def __init__(self, text: str = "", error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls = []

    def generate(
        self,
        question: str,
        system_prompt: str,
        model: Optional[str] = None,
        max_tokens: int = 1024,
        temperature: float = 0.2,
    ) -> LLMResponse:
        self.calls.append(
            {"question": question, "system_prompt": system_prompt, "max_tokens": max_tokens}
        )
        if self.error:
            raise self.error
        return LLMResponse(text=self.text, model="fake-model", provider=self.provider_name)

    def is_available(self) -> bool:
        return True

    @property
    def default_model(self) -> str:
        return "fake-model"

    @property
    def available_models(self) -> list[str]:
        return ["fake-model"]
