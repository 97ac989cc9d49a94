"""
HTTP client for the remote partner sync service.

The remote service is the system of record for partners only. This client
reads the full partner snapshot and publishes locally created or changed
partners. There is no retry: failures are raised as RemoteSyncError and
the caller decides whether to re-invoke.
"""

from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from ..config import Config, config
from ..errors import (
    RemoteSyncConnectionError,
    RemoteSyncResponseError,
    wrap_sync_error,
)
from ..logging import get_logger
from ..models.partner import Partner

logger = get_logger(__name__)


class PartnerSyncClient:
    """Async client for the partner sync service."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Root URL of the sync service
            api_key: Bearer token for the sync service
            timeout_seconds: Per-request timeout
            transport: Optional httpx transport (tests inject a MockTransport)
        """
        self.base_url = base_url.rstrip('/')
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                'Authorization': f'Bearer {api_key}',
                'Content-Type': 'application/json',
            },
            timeout=timeout_seconds,
            transport=transport,
        )

    @classmethod
    def from_config(cls, settings: Config | None = None) -> 'PartnerSyncClient':
        """Build a client from PARTNER_SYNC_* configuration."""
        settings = settings or config
        return cls(
            base_url=settings.PARTNER_SYNC_URL,
            api_key=settings.PARTNER_SYNC_API_KEY,
            timeout_seconds=settings.PARTNER_SYNC_TIMEOUT_SECONDS,
        )

    async def fetch_partners(self) -> list[Partner]:
        """
        Fetch the remote partner snapshot.

        Returns:
            Partners in the order the service returned them

        Raises:
            RemoteSyncError: Transport failure, error status or bad body
        """
        body = await self._request('GET', '/partners')
        items = body.get('partners', body) if isinstance(body, dict) else body
        if not isinstance(items, list):
            raise RemoteSyncResponseError(
                'Partner snapshot is not a list',
                context={'body_type': type(items).__name__},
            )
        try:
            return [Partner.model_validate(item) for item in items]
        except PydanticValidationError as exc:
            raise RemoteSyncResponseError(
                'Partner snapshot failed validation',
                context={'errors': exc.error_count()},
            ) from exc

    async def publish_partner(self, partner: Partner) -> None:
        """Upsert one partner on the remote service."""
        await self._request(
            'PUT',
            f'/partners/{partner.id}',
            json=partner.model_dump(mode='json'),
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        context = {'method': method, 'path': path}
        try:
            response = await self._client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise RemoteSyncResponseError(
                f'Partner sync returned HTTP {exc.response.status_code}',
                context={**context, 'status_code': exc.response.status_code},
            ) from exc
        except (httpx.TimeoutException, httpx.ConnectError) as exc:
            raise RemoteSyncConnectionError(
                f'Partner sync unreachable: {type(exc).__name__}',
                context={**context, 'error': str(exc)},
            ) from exc
        except httpx.HTTPError as exc:
            raise wrap_sync_error(exc, context) from exc

        logger.debug('sync_client.response', status_code=response.status_code, **context)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise RemoteSyncResponseError(
                'Partner sync returned invalid JSON',
                context=context,
            ) from exc
