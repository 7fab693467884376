"""
Models module containing Pydantic schemas.
"""

from .schemas import TokenRefreshRequest, TokenRefreshResponse

__all__ = ["TokenRefreshRequest", "TokenRefreshResponse"]
