"""
Custom exceptions and error handling for the partner desk.

Provides:
- Typed exception hierarchy for store and remote sync failures
- Error context preservation for debugging
- Partial success handling for batches of remote change events

Store create operations never raise for borderline input or missing
partner references; these errors cover reconciliation and the remote
partner sync collaborator.
"""

from dataclasses import dataclass, field
from typing import Any


class PartnerDeskError(Exception):
    """Base exception for all partner desk errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} | context={self.context}"
        return self.message


# =============================================================================
# Store Errors
# =============================================================================


class StoreError(PartnerDeskError):
    """Base class for in-memory store errors."""

    pass


class ReconciliationError(StoreError):
    """A remote change event could not be applied to the partner collection."""

    pass


# =============================================================================
# Client Errors
# =============================================================================


class ClientError(PartnerDeskError):
    """Base class for remote collaborator errors."""

    pass


class RemoteSyncError(ClientError):
    """Error from the remote partner sync service."""

    pass


class RemoteSyncConnectionError(RemoteSyncError):
    """Failed to reach the remote partner sync service."""

    pass


class RemoteSyncResponseError(RemoteSyncError):
    """Remote partner sync service returned an error or unusable body."""

    pass


# =============================================================================
# Partial Success Handling
# =============================================================================


@dataclass
class ItemResult:
    """Result for a single item in a batch operation."""

    item_id: str | None
    success: bool
    error: PartnerDeskError | None = None
    data: dict[str, Any] = field(default_factory=dict)


@dataclass
class PartialSuccessResult:
    """
    Result of a batch operation that may partially succeed.

    Allows processing to continue even when some items fail,
    while preserving error context for debugging.
    """

    succeeded: list[ItemResult] = field(default_factory=list)
    failed: list[ItemResult] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.succeeded)

    @property
    def failure_count(self) -> int:
        return len(self.failed)

    @property
    def total_count(self) -> int:
        return self.success_count + self.failure_count

    @property
    def all_succeeded(self) -> bool:
        return self.failure_count == 0

    @property
    def all_failed(self) -> bool:
        return self.success_count == 0

    @property
    def partial_success(self) -> bool:
        return self.success_count > 0 and self.failure_count > 0

    def add_success(
        self,
        item_id: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> None:
        """Record a successful item."""
        self.succeeded.append(
            ItemResult(item_id=item_id, success=True, data=data or {})
        )

    def add_failure(
        self,
        error: PartnerDeskError,
        item_id: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> None:
        """Record a failed item."""
        self.failed.append(
            ItemResult(item_id=item_id, success=False, error=error, data=data or {})
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'success_count': self.success_count,
            'failure_count': self.failure_count,
            'total_count': self.total_count,
            'all_succeeded': self.all_succeeded,
            'succeeded_ids': [r.item_id for r in self.succeeded if r.item_id],
            'failed_ids': [r.item_id for r in self.failed if r.item_id],
            'errors': [
                {'item_id': r.item_id, 'error': str(r.error)}
                for r in self.failed
                if r.error
            ],
        }


# =============================================================================
# Error Handling Utilities
# =============================================================================


def wrap_sync_error(exc: Exception, context: dict[str, Any] | None = None) -> RemoteSyncError:
    """
    Wrap a remote sync exception in our typed error hierarchy.

    Args:
        exc: The original exception
        context: Additional context for debugging

    Returns:
        Typed RemoteSyncError subclass
    """
    if isinstance(exc, RemoteSyncError):
        return exc

    error_str = str(exc).lower()
    ctx = dict(context or {})
    ctx['original_error'] = str(exc)
    ctx['error_type'] = type(exc).__name__

    if 'connect' in error_str or 'timeout' in error_str or 'timed out' in error_str:
        return RemoteSyncConnectionError(
            f"Partner sync connection failed: {exc}",
            context=ctx,
        )
    elif 'status' in error_str or 'http' in error_str or 'invalid' in error_str:
        return RemoteSyncResponseError(
            f"Partner sync returned an error: {exc}",
            context=ctx,
        )
    else:
        return RemoteSyncError(
            f"Partner sync error: {exc}",
            context=ctx,
        )
