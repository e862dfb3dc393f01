"""
Provider Factory - Gestiona la creación y selección de providers
"""

from typing import Optional

from .azure_openai import AzureOpenAIProvider
from .base import LLMProvider
from .demo import DemoProvider
from .gemini import GeminiProvider
from .groq import GroqProvider

# Registro de providers disponibles
PROVIDERS = {
    "azure_openai": AzureOpenAIProvider,
    "groq": GroqProvider,
    "gemini": GeminiProvider,
    "demo": DemoProvider,
}

# Orden de preferencia cuando no se especifica provider
PREFERENCE_ORDER = ["azure_openai", "groq", "gemini", "demo"]

# Instancias singleton
_provider_instances: dict[str, LLMProvider] = {}


def get_provider(name: Optional[str] = None) -> LLMProvider:
    """
    Obtiene una instancia del provider especificado.

    Args:
        name: Nombre del provider ("azure_openai", "groq", "gemini", "demo").
              Si es None o vacío, retorna el primer provider disponible.

    Returns:
        Instancia del LLMProvider

    Raises:
        ValueError: Si el provider no existe o no está disponible
    """
    if not name:
        for provider_name in PREFERENCE_ORDER:
            try:
                return get_provider(provider_name)
            except ValueError:
                continue
        raise ValueError("No hay providers disponibles")

    # Normalizar nombre
    name = name.strip().lower()

    if name not in PROVIDERS:
        available = ", ".join(PROVIDERS.keys())
        raise ValueError(f"Provider '{name}' no existe. Disponibles: {available}")

    if name not in _provider_instances:
        _provider_instances[name] = PROVIDERS[name]()

    provider = _provider_instances[name]

    if not provider.is_available():
        raise ValueError(f"Provider '{name}' no está configurado. Falta API key.")

    return provider


def get_available_providers() -> list[str]:
    """
    Retorna la lista de providers disponibles y configurados.
    """
    available = []
    for name, provider_class in PROVIDERS.items():
        provider = _provider_instances.get(name) or provider_class()
        if provider.is_available():
            available.append(name)
    return available


def reset_providers():
    """Descarta las instancias cacheadas (útil al cambiar configuración)"""
    _provider_instances.clear()
