"""
Guardrails - Validación de gobierno para SPL generado
"""

from .policy import DEFAULT_POLICY, SplPolicy
from .spl_validator import GuardrailValidationResult, SplGuardrailValidator

__all__ = [
    "DEFAULT_POLICY",
    "GuardrailValidationResult",
    "SplGuardrailValidator",
    "SplPolicy",
]
