"""
SPL Guardrail Validator - Valida SPL generado contra la política de gobierno
"""

import re
from dataclasses import dataclass

from .policy import DEFAULT_POLICY, SplPolicy

INDEX_PATTERN = re.compile(r"\bindex\s*=\s*(?P<name>[^\s|]+)", re.IGNORECASE)
COMMAND_WORD_PATTERN = re.compile(r"[a-zA-Z_]+")


@dataclass(frozen=True)
class GuardrailValidationResult:
    """Resultado de la validación de SPL"""

    messages: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.messages

    def to_dict(self) -> dict:
        return {"is_valid": self.is_valid, "messages": list(self.messages)}


class SplGuardrailValidator:
    """
    Valida SPL generado con reglas básicas de seguridad:
    - Solo comandos de lectura en el pipeline
    - Índices restringidos a una allow-list
    - Bloqueo de comandos destructivos o administrativos

    No hace I/O ni guarda estado: se puede compartir entre threads.
    """

    def __init__(self, policy: SplPolicy | None = None):
        self.policy = policy or DEFAULT_POLICY

        # Compilar patrones de keywords bloqueadas
        self.keyword_patterns = [
            (keyword, re.compile(rf"\b{re.escape(keyword)}\b", re.IGNORECASE))
            for keyword in self.policy.blocked_keywords
        ]

    def validate(self, spl: str | None) -> GuardrailValidationResult:
        """
        Valida un SPL y acumula todas las violaciones encontradas.

        Nunca lanza excepciones: cualquier problema se reporta como
        mensaje en el resultado.
        """
        if not spl or not spl.strip():
            return GuardrailValidationResult(messages=("SPL is empty.",))

        normalized = spl.strip()

        messages: list[str] = []
        messages.extend(self._check_blocked_keywords(normalized))
        messages.extend(self._check_indexes(normalized))
        messages.extend(self._check_pipeline(normalized))

        return GuardrailValidationResult(messages=tuple(messages))

    def _check_blocked_keywords(self, spl: str) -> list[str]:
        """Busca keywords bloqueadas como palabra completa en todo el SPL"""
        lowered = spl.lower()
        return [
            f"SPL uses blocked command or keyword '{keyword}', which is not allowed."
            for keyword, pattern in self.keyword_patterns
            if pattern.search(lowered)
        ]

    def _check_indexes(self, spl: str) -> list[str]:
        """Exige un index= explícito y que todos estén en la allow-list"""
        names = [match.group("name").strip() for match in INDEX_PATTERN.finditer(spl)]

        if not names:
            return [
                "SPL must specify an explicit index "
                f"({self.policy.describe_indexes('or')})."
            ]

        return [
            f"Index '{name}' is not allowed. "
            f"Allowed indexes: {self.policy.describe_indexes()}."
            for name in names
            if not self.policy.is_index_allowed(name)
        ]

    def _check_pipeline(self, spl: str) -> list[str]:
        """Verifica el comando de cada segmento del pipeline"""
        messages = []
        segments = [s.strip() for s in spl.split("|")]
        segments = [s for s in segments if s]

        for i, segment in enumerate(segments):
            command = get_first_token(segment)
            if not command:
                continue

            # El primer segmento puede ser un search implícito
            if i == 0:
                if not self.policy.is_command_allowed(
                    command
                ) and not looks_like_implicit_search(command):
                    messages.append(
                        f"First SPL segment uses unsupported command '{command}'. "
                        "Only read-only search is allowed."
                    )
                continue

            if not self.policy.is_command_allowed(command):
                messages.append(f"Command '{command}' is not allowed in the SPL pipeline.")

        return messages


def get_first_token(segment: str) -> str:
    """Primer token separado por espacios ("" si no hay)"""
    parts = segment.split(maxsplit=1)
    return parts[0] if parts else ""


def looks_like_implicit_search(token: str) -> bool:
    """
    Un token que parece comparación de campo o término de búsqueda
    (ej: "host=web01", "404", "*error*") se trata como search implícito.
    """
    return "=" in token or COMMAND_WORD_PATTERN.fullmatch(token) is None
