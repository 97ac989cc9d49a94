"""
Partner sync service.

Bridges the remote partner sync collaborator and the in-memory store:
- refresh(): replace the partner collection with the remote snapshot
- publish(): push one partner to the remote service
- consume(): apply a stream of remote change events one at a time

Remote failures are logged and reported in a SyncOutcome; the store is
left exactly as it was. Nothing is retried.
"""

from collections.abc import AsyncIterable
from dataclasses import dataclass
from typing import Any

import httpx

from .clients.partner_sync_client import PartnerSyncClient
from .errors import (
    PartialSuccessResult,
    ReconciliationError,
    RemoteSyncError,
    wrap_sync_error,
)
from .logging import get_logger
from .models.events import PartnerChangeEvent, PartnerChangeKind
from .models.partner import Partner
from .store import PartnerStore

logger = get_logger(__name__)


@dataclass
class SyncOutcome:
    """Result of one remote sync call."""

    success: bool
    applied: int = 0
    error: RemoteSyncError | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            'success': self.success,
            'applied': self.applied,
            'error': str(self.error) if self.error else None,
        }


class PartnerSyncService:
    """Keeps the store's partner collection reconciled with the remote service."""

    def __init__(self, store: PartnerStore, client: PartnerSyncClient):
        """
        Initialize the service.

        Args:
            store: Store whose partner collection is reconciled
            client: Remote partner sync client
        """
        self.store = store
        self.client = client

    async def refresh(self) -> SyncOutcome:
        """Replace the local partner collection with the remote snapshot."""
        try:
            partners = await self.client.fetch_partners()
        except RemoteSyncError as exc:
            logger.error(
                'sync.refresh_failed',
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return SyncOutcome(success=False, error=exc)

        self.store.apply_remote_change(
            PartnerChangeEvent(kind=PartnerChangeKind.REPLACE, partners=partners)
        )
        logger.info('sync.refresh_complete', partner_count=len(partners))
        return SyncOutcome(success=True, applied=len(partners))

    async def publish(self, partner: Partner) -> SyncOutcome:
        """Push a partner to the remote service; local state is never changed."""
        try:
            await self.client.publish_partner(partner)
        except RemoteSyncError as exc:
            logger.error(
                'sync.publish_failed',
                partner_id=partner.id,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return SyncOutcome(success=False, error=exc)

        logger.info('sync.publish_complete', partner_id=partner.id)
        return SyncOutcome(success=True, applied=1)

    async def consume(self, events: AsyncIterable[PartnerChangeEvent]) -> PartialSuccessResult:
        """
        Apply remote change notifications in arrival order.

        Each event is applied atomically before the next is read. Malformed
        events are recorded as failures and skipped. A failing stream is
        recorded as one failure; events applied before it are kept.
        """
        result = PartialSuccessResult()
        try:
            async for event in events:
                try:
                    self.store.apply_remote_change(event)
                except ReconciliationError as exc:
                    logger.warning('sync.event_rejected', error=str(exc))
                    result.add_failure(exc, item_id=event.target_id)
                else:
                    result.add_success(
                        item_id=event.target_id,
                        data={'kind': PartnerChangeKind(event.kind).value},
                    )
        except (RemoteSyncError, httpx.HTTPError) as exc:
            error = wrap_sync_error(exc)
            logger.error(
                'sync.consume_failed',
                applied=result.success_count,
                error=str(error),
                error_type=type(error).__name__,
            )
            result.add_failure(error)

        logger.info(
            'sync.consume_complete',
            applied=result.success_count,
            rejected=result.failure_count,
        )
        return result
