"""
API module for the Starknet address checker.

Provides FastAPI routes and models for exposing the checker as a REST API.
"""

from starknet_checker.api.models import ClassificationResponse, NormalizeResponse

__all__ = [
    "ClassificationResponse",
    "NormalizeResponse",
]
