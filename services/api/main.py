"""
FastAPI Application - SPL Whisperer API
"""

import asyncio
import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path

# Agregar packages al path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from fastapi import FastAPI, HTTPException  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from packages.spl_core import (  # noqa: E402
    SplBlockedError,
    SplGenerationError,
    SplWhisperer,
    __version__,
)
from packages.spl_core.config import get_settings  # noqa: E402
from packages.spl_core.logging_config import configure_logging  # noqa: E402

from .schemas import (  # noqa: E402
    HealthResponse,
    SplWhispererRequest,
    SplWhispererResponse,
    StatsResponse,
    ValidateRequest,
    ValidateResponse,
)

logger = logging.getLogger(__name__)

# Servicio global
whisperer: SplWhisperer | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Inicialización y cleanup del servicio"""
    global whisperer
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_file)

    logger.info("Inicializando SPL Whisperer...")
    whisperer = SplWhisperer()
    stats = whisperer.get_stats()
    logger.info(
        "Servicio listo. Provider: %s, block_on_invalid: %s",
        stats["llm_provider"],
        stats["block_on_invalid"],
    )
    yield
    logger.info("Cerrando aplicación...")
    whisperer = None


app = FastAPI(
    title="SPL Whisperer API",
    description="Convierte preguntas en Splunk SPL de solo lectura con guardrails de gobierno",
    version=__version__,
    lifespan=lifespan,
)

# CORS para desarrollo
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _get_whisperer() -> SplWhisperer:
    if whisperer is None:
        raise HTTPException(status_code=503, detail="Servicio no inicializado")
    return whisperer


@app.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Verifica el estado del servicio"""
    return HealthResponse(status="healthy", version=__version__)


@app.get("/stats", response_model=StatsResponse, tags=["System"])
async def get_stats():
    """Configuración activa: provider, modelo y política"""
    return StatsResponse(**_get_whisperer().get_stats())


@app.post("/api/spl-whisperer", response_model=SplWhispererResponse, tags=["SPL"])
async def spl_whisperer(request: SplWhispererRequest):
    """
    Genera SPL para una pregunta y lo valida con los guardrails.

    Por defecto las violaciones se agregan a "guardrails" como avisos.
    Con BLOCK_ON_INVALID=true un SPL inválido responde 422.
    """
    service = _get_whisperer()

    try:
        # La llamada al LLM es bloqueante: correr fuera del event loop
        result = await asyncio.to_thread(service.ask, request.question)
    except SplBlockedError as e:
        raise HTTPException(
            status_code=422,
            detail={
                "message": "Generated SPL was rejected by guardrails.",
                "spl": e.spl,
                "violations": list(e.validation.messages),
            },
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SplGenerationError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return SplWhispererResponse(
        spl=result.spl,
        explanation=list(result.explanation),
        optimizations=list(result.optimizations),
        guardrails=list(result.guardrails),
        is_valid=result.is_valid,
        violations=list(result.validation.messages),
        model=result.model,
        provider=result.provider,
        latency_ms=result.latency_ms,
    )


@app.post("/api/spl/validate", response_model=ValidateResponse, tags=["SPL"])
async def validate_spl(request: ValidateRequest):
    """Valida un SPL existente contra la política activa"""
    validation = _get_whisperer().validate(request.spl)
    return ValidateResponse(**validation.to_dict())


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("main:app", host=settings.api_host, port=settings.api_port, reload=True)
