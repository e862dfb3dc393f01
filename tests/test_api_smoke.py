"""
Smoke tests para la API
"""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from fastapi.testclient import TestClient  # noqa: E402

from packages.spl_core.config import get_settings  # noqa: E402
from packages.spl_core.providers import reset_providers  # noqa: E402
from services.api.main import app  # noqa: E402


class TestAPISmoke:
    """Smoke tests básicos para la API (provider demo, sin secretos)"""

    @pytest.fixture
    def client(self, monkeypatch):
        """Cliente de test para FastAPI con lifespan"""
        monkeypatch.setenv("LLM_PROVIDER", "demo")
        monkeypatch.delenv("BLOCK_ON_INVALID", raising=False)
        get_settings.cache_clear()
        reset_providers()
        with TestClient(app) as client:
            yield client
        get_settings.cache_clear()

    @pytest.fixture
    def blocking_client(self, monkeypatch):
        """Cliente con BLOCK_ON_INVALID activo"""
        monkeypatch.setenv("LLM_PROVIDER", "demo")
        monkeypatch.setenv("BLOCK_ON_INVALID", "true")
        get_settings.cache_clear()
        reset_providers()
        with TestClient(app) as client:
            yield client
        get_settings.cache_clear()

    def test_health_endpoint(self, client):
        """GET /health responde correctamente"""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data

    def test_stats_endpoint(self, client):
        """GET /stats expone provider y política"""
        response = client.get("/stats")

        assert response.status_code == 200
        data = response.json()
        assert data["llm_provider"] == "demo"
        assert data["block_on_invalid"] is False
        assert data["policy"]["allowed_indexes"] == ["security", "app", "infra"]

    def test_spl_whisperer_advises(self, client):
        """POST /api/spl-whisperer agrega violaciones como guardrails"""
        response = client.post(
            "/api/spl-whisperer",
            json={"question": "How many errors per host?"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["spl"].startswith('search "How many errors per host?"')
        assert data["is_valid"] is False
        assert data["violations"] == [
            "SPL must specify an explicit index (security, app, or infra)."
        ]
        assert data["guardrails"][-1] == data["violations"][0]
        assert len(data["explanation"]) == 3
        assert data["provider"] == "demo"

    def test_spl_whisperer_blocks(self, blocking_client):
        """Con BLOCK_ON_INVALID el SPL inválido responde 422"""
        response = blocking_client.post(
            "/api/spl-whisperer",
            json={"question": "How many errors per host?"}
        )

        assert response.status_code == 422
        detail = response.json()["detail"]
        assert detail["violations"] == [
            "SPL must specify an explicit index (security, app, or infra)."
        ]

    def test_spl_whisperer_validation(self, client):
        """POST /api/spl-whisperer valida input"""
        response = client.post("/api/spl-whisperer", json={"question": ""})

        assert response.status_code == 422  # Validation error

    def test_spl_whisperer_blank_question(self, client):
        """Una pregunta solo con espacios es un 400"""
        response = client.post("/api/spl-whisperer", json={"question": "   "})

        assert response.status_code == 400

    def test_validate_endpoint(self, client):
        """POST /api/spl/validate reporta todas las violaciones"""
        response = client.post(
            "/api/spl/validate",
            json={"spl": "index=prod error | delete"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        assert len(data["messages"]) == 3

    def test_validate_endpoint_valid_spl(self, client):
        response = client.post(
            "/api/spl/validate",
            json={"spl": "index=security error | stats count by host"}
        )

        assert response.json() == {"is_valid": True, "messages": []}

    def test_openapi_docs(self, client):
        """Documentación OpenAPI disponible"""
        response = client.get("/openapi.json")

        assert response.status_code == 200
        data = response.json()
        assert "openapi" in data
        assert "paths" in data
        assert "/api/spl-whisperer" in data["paths"]
        assert "/health" in data["paths"]
