"""
Configuration module for the serialized promise queue.

Manages environment variables for the queue bookkeeping and the
bearer token handler. Every value has a development default so the
package works out of the box.
"""

import os
from dataclasses import dataclass

from .. import __version__


@dataclass(frozen=True)
class QueueConfig:
    """
    Configuration for pending entry identifiers.

    Attributes:
        id_prefix: Prefix of every pending entry identifier
        id_length: Number of random characters after the prefix
    """
    id_prefix: str = "promise-"
    id_length: int = 6


@dataclass(frozen=True)
class TokenConfig:
    """
    Configuration for the bearer token handler.

    Attributes:
        service_name: Namespace the tokens are stored under
        refresh_token_url: Endpoint that exchanges a refresh token
        refresh_timeout: HTTP timeout for the refresh call (seconds)
    """
    service_name: str = "tao"
    refresh_token_url: str = ""
    refresh_timeout: float = 3.0


class Settings:
    """
    Central settings manager that aggregates all configuration.

    Loads configuration from environment variables with fallbacks
    to default values.
    """

    def __init__(self):
        self.queue = QueueConfig(
            id_prefix=os.getenv("QUEUE_ID_PREFIX", "promise-"),
            id_length=int(os.getenv("QUEUE_ID_LENGTH", "6"))
        )

        self.token = TokenConfig(
            service_name=os.getenv("TOKEN_SERVICE_NAME", "tao"),
            refresh_token_url=os.getenv("TOKEN_REFRESH_URL", ""),
            refresh_timeout=float(os.getenv("TOKEN_REFRESH_TIMEOUT", "3.0"))
        )

    @property
    def version(self) -> str:
        """Package version string."""
        return __version__


# Global settings instance - imported throughout the package
settings = Settings()
