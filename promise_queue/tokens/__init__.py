"""
Tokens module for bearer token storage and refresh.
"""

from .store import BearerTokenStore
from .handler import (
    BearerTokenHandler,
    TokenError,
    TokenUnavailableError,
    RefreshTokenMissingError
)

__all__ = [
    "BearerTokenStore",
    "BearerTokenHandler",
    "TokenError",
    "TokenUnavailableError",
    "RefreshTokenMissingError"
]
