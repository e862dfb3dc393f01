"""
API Service - FastAPI endpoints
"""

from .main import app
from .schemas import SplWhispererRequest, SplWhispererResponse, ValidateRequest, ValidateResponse

__all__ = ["app", "SplWhispererRequest", "SplWhispererResponse", "ValidateRequest", "ValidateResponse"]
