"""
LLM Providers - Abstracción para múltiples proveedores de LLM
"""

from .azure_openai import AzureOpenAIProvider
from .base import LLMProvider, LLMResponse
from .demo import DemoProvider
from .factory import get_available_providers, get_provider, reset_providers
from .gemini import GeminiProvider
from .groq import GroqProvider

__all__ = [
    "LLMProvider",
    "LLMResponse",
    "AzureOpenAIProvider",
    "DemoProvider",
    "GeminiProvider",
    "GroqProvider",
    "get_provider",
    "get_available_providers",
    "reset_providers",
]
