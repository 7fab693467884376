"""
Bearer Token Handler - Gives and refreshes bearer tokens.

Every operation goes through a SerialQueue, so two callers asking
for a token at the same time never trigger two refreshes in
parallel: the second one waits and then reads the token the first
one stored.
"""

import httpx
import logging
from typing import Optional

from ..core.config import settings
from ..models.schemas import TokenRefreshRequest, TokenRefreshResponse
from ..queue.serial import SerialQueue
from .store import BearerTokenStore

# Configure logging
logger = logging.getLogger(__name__)


class TokenError(Exception):
    """Base class for token handling failures."""


class TokenUnavailableError(TokenError):
    """No access token is stored and none can be refreshed."""


class RefreshTokenMissingError(TokenError):
    """A refresh was requested without a stored refresh token."""


class BearerTokenHandler:
    """
    Stores, hands out and refreshes the bearer token of a service.

    The refresh endpoint receives {"refreshToken": ...} as JSON and
    answers with {"accessToken": ...}.
    """

    def __init__(
        self,
        service_name: Optional[str] = None,
        refresh_token_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize the handler.

        Args:
            service_name: Name of the service the token belongs to
            refresh_token_url: Endpoint used to refresh the token
            timeout: HTTP timeout of the refresh call (seconds)
            transport: Optional httpx transport, mostly for tests
        """
        self.service_name = service_name or settings.token.service_name
        self.refresh_token_url = refresh_token_url or settings.token.refresh_token_url
        self.timeout = settings.token.refresh_timeout if timeout is None else timeout
        self.transport = transport

        self.token_storage = BearerTokenStore(namespace=self.service_name)

        # Action queue to avoid concurrent token updates
        self.action_queue = SerialQueue()

    async def get_token(self) -> str:
        """
        Get the bearer token, refreshing it when none is stored.

        Returns:
            The access token

        Raises:
            TokenUnavailableError: nothing stored and no refresh token
        """
        return await self.action_queue.serie(self._get_or_refresh)

    async def store_refresh_token(self, refresh_token: str) -> bool:
        return await self.action_queue.serie(
            lambda: self.token_storage.set_refresh_token(refresh_token)
        )

    async def store_access_token(self, access_token: str) -> bool:
        return await self.action_queue.serie(
            lambda: self.token_storage.set_access_token(access_token)
        )

    async def clear_store(self) -> bool:
        """Remove every token of this service."""
        return await self.action_queue.serie(self.token_storage.clear)

    async def refresh_token(self) -> str:
        """
        Refresh the bearer token, waiting for queued operations first.

        Returns:
            The new access token
        """
        return await self.action_queue.serie(self._unqueued_refresh_token)

    async def _get_or_refresh(self) -> str:
        access_token = await self.token_storage.get_access_token()
        if access_token:
            return access_token

        if await self.token_storage.get_refresh_token():
            return await self._unqueued_refresh_token()

        raise TokenUnavailableError("Token not available and cannot be refreshed")

    async def _unqueued_refresh_token(self) -> str:
        """
        Exchange the refresh token for a new access token and store it.

        Not queued: only call it from a task already running in the
        action queue.

        Returns:
            The new access token

        Raises:
            RefreshTokenMissingError: no refresh token is stored
            httpx.HTTPError: the refresh call failed
            pydantic.ValidationError: the response carries no token
        """
        refresh_token = await self.token_storage.get_refresh_token()
        if not refresh_token:
            raise RefreshTokenMissingError("Refresh token is not available")

        body = TokenRefreshRequest(refresh_token=refresh_token)

        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self.transport
        ) as client:
            response = await client.post(
                self.refresh_token_url,
                json=body.model_dump(by_alias=True)
            )
            response.raise_for_status()

        refreshed = TokenRefreshResponse.model_validate(response.json())
        await self.token_storage.set_access_token(refreshed.access_token)

        logger.info(f"Refreshed bearer token of service '{self.service_name}'")
        return refreshed.access_token
