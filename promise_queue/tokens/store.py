"""
Token Storage - Keeps bearer tokens per service namespace.

Tokens live in process memory, in a bucket named
'bearer.<namespace>'. Two stores created with the same namespace
see the same tokens, so handlers for one service can be created
anywhere in the application.

The interface is asynchronous so the store can be swapped for a
persistent backend without changing its callers.
"""

import logging
from typing import Optional

# Configure logging
logger = logging.getLogger(__name__)

ACCESS_TOKEN = "accessToken"
REFRESH_TOKEN = "refreshToken"

# bucket name -> {token name -> token}
_buckets: dict[str, dict[str, str]] = {}


class BearerTokenStore:
    """
    Stores an access token and a refresh token for one namespace.

    Every write and clear returns True once done, reads return the
    token or None when nothing is stored.
    """

    def __init__(self, namespace: str = "global"):
        """
        Initialize the store.

        Args:
            namespace: Name of the service the tokens belong to
        """
        self.namespace = namespace
        self.store_name = f"bearer.{namespace}"

    @property
    def _bucket(self) -> dict[str, str]:
        return _buckets.setdefault(self.store_name, {})

    async def set_access_token(self, token: str) -> bool:
        self._bucket[ACCESS_TOKEN] = token
        return True

    async def get_access_token(self) -> Optional[str]:
        return self._bucket.get(ACCESS_TOKEN)

    async def set_refresh_token(self, token: str) -> bool:
        self._bucket[REFRESH_TOKEN] = token
        return True

    async def get_refresh_token(self) -> Optional[str]:
        return self._bucket.get(REFRESH_TOKEN)

    async def set_tokens(self, access_token: str, refresh_token: str) -> bool:
        """
        Store both tokens at once.

        Args:
            access_token: The bearer token
            refresh_token: The token used to obtain a new bearer token

        Returns:
            True once both are stored
        """
        await self.set_access_token(access_token)
        await self.set_refresh_token(refresh_token)
        return True

    async def clear_access_token(self) -> bool:
        self._bucket.pop(ACCESS_TOKEN, None)
        return True

    async def clear_refresh_token(self) -> bool:
        self._bucket.pop(REFRESH_TOKEN, None)
        return True

    async def clear(self) -> bool:
        """Remove both tokens of this namespace."""
        await self.clear_access_token()
        await self.clear_refresh_token()
        logger.debug(f"Cleared tokens of {self.store_name}")
        return True
