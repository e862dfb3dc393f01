"""
SPL Whisperer - Generación de Splunk SPL con guardrails de gobierno
"""

__version__ = "0.1.0"

from .generator import SplGenerationError, SplGenerator, SplLlmResult  # noqa: E402
from .guardrails import (  # noqa: E402
    DEFAULT_POLICY,
    GuardrailValidationResult,
    SplGuardrailValidator,
    SplPolicy,
)
from .whisperer import SplBlockedError, SplWhisperer, WhispererResult  # noqa: E402

__all__ = [
    "__version__",
    "DEFAULT_POLICY",
    "GuardrailValidationResult",
    "SplBlockedError",
    "SplGenerationError",
    "SplGenerator",
    "SplGuardrailValidator",
    "SplLlmResult",
    "SplPolicy",
    "SplWhisperer",
    "WhispererResult",
]
