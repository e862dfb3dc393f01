"""
SPL Whisperer - Orquesta generación de SPL y validación con guardrails
"""
import logging
from dataclasses import dataclass

from .config import get_settings
from .generator import SplGenerator
from .guardrails import GuardrailValidationResult, SplGuardrailValidator, SplPolicy

logger = logging.getLogger(__name__)


class SplBlockedError(Exception):
    """El SPL generado viola la política y block_on_invalid está activo"""

    def __init__(self, spl: str, validation: GuardrailValidationResult):
        self.spl = spl
        self.validation = validation
        super().__init__(
            f"Generated SPL violates governance policy: {'; '.join(validation.messages)}"
        )


@dataclass(frozen=True)
class WhispererResult:
    """Resultado completo de una consulta"""

    spl: str
    explanation: tuple[str, ...]
    optimizations: tuple[str, ...]
    guardrails: tuple[str, ...]
    validation: GuardrailValidationResult
    model: str | None = None
    provider: str | None = None
    latency_ms: int | None = None

    @property
    def is_valid(self) -> bool:
        return self.validation.is_valid


class SplWhisperer:
    """Servicio que convierte preguntas en SPL validado"""

    def __init__(
        self,
        generator: SplGenerator | None = None,
        validator: SplGuardrailValidator | None = None,
        block_on_invalid: bool | None = None,
    ):
        settings = get_settings()

        if validator is None:
            validator = SplGuardrailValidator(SplPolicy.from_settings(settings))
        self.validator = validator
        self.policy = validator.policy

        self.generator = generator or SplGenerator(policy=self.policy)
        self.block_on_invalid = (
            settings.block_on_invalid if block_on_invalid is None else block_on_invalid
        )

    def ask(self, question: str) -> WhispererResult:
        """
        Genera SPL para la pregunta y lo valida contra la política.

        Los mensajes del validador se agregan a las notas de guardrails
        del modelo. Si block_on_invalid está activo, un SPL inválido
        lanza SplBlockedError en lugar de retornarse.
        """
        if not question or not question.strip():
            raise ValueError("Question must not be empty.")

        logger.info("Generating SPL for question: %s", question)
        llm_result = self.generator.generate(question)

        validation = self.validator.validate(llm_result.spl)
        if not validation.is_valid:
            logger.warning(
                "Generated SPL failed %d guardrail check(s): %s",
                len(validation.messages),
                llm_result.spl,
            )
            if self.block_on_invalid:
                raise SplBlockedError(llm_result.spl, validation)

        return WhispererResult(
            spl=llm_result.spl,
            explanation=llm_result.explanation,
            optimizations=llm_result.optimizations,
            guardrails=llm_result.guardrails + validation.messages,
            validation=validation,
            model=llm_result.model,
            provider=llm_result.provider,
            latency_ms=llm_result.latency_ms,
        )

    def validate(self, spl: str) -> GuardrailValidationResult:
        """Valida un SPL arbitrario con la política del servicio"""
        return self.validator.validate(spl)

    def get_stats(self) -> dict:
        """Retorna configuración activa del servicio"""
        return {
            "llm_provider": self.generator.provider.provider_name,
            "llm_model": self.generator.model_name,
            "block_on_invalid": self.block_on_invalid,
            "policy": self.policy.to_dict(),
        }
