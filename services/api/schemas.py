"""
Pydantic schemas para la API
"""

from pydantic import BaseModel, Field


class SplWhispererRequest(BaseModel):
    """Request para generar SPL desde una pregunta"""

    question: str = Field(..., min_length=1, description="Pregunta en lenguaje natural")


class SplWhispererResponse(BaseModel):
    """Response con SPL, explicación y guardrails combinados"""

    spl: str
    explanation: list[str]
    optimizations: list[str]
    guardrails: list[str]
    is_valid: bool = True
    violations: list[str] = []
    model: str | None = None
    provider: str | None = None
    latency_ms: int | None = None


class ValidateRequest(BaseModel):
    """Request para validar un SPL existente"""

    spl: str = Field(..., description="SPL a validar")


class ValidateResponse(BaseModel):
    """Resultado de la validación de guardrails"""

    is_valid: bool
    messages: list[str]


class PolicyInfo(BaseModel):
    """Tablas de la política activa"""

    allowed_indexes: list[str]
    blocked_keywords: list[str]
    allowed_commands: list[str]


class StatsResponse(BaseModel):
    """Configuración activa del servicio"""

    llm_provider: str
    llm_model: str
    block_on_invalid: bool
    policy: PolicyInfo


class HealthResponse(BaseModel):
    """Health check response"""

    status: str
    version: str
