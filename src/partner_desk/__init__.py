"""
Partner Desk

In-memory core of a partner account management dashboard: partners,
their interactions and work threads, health tracking, and the read-side
rollups (metrics, health ring, focus list) built on top of them.
"""

__version__ = '0.1.0'

# Re-export key classes for convenience
from .store import PartnerStore
from .sync import PartnerSyncService, SyncOutcome
from .clients import PartnerSyncClient
from .models import (
    Contact,
    HealthHistoryEntry,
    Interaction,
    Partner,
    PartnerChangeEvent,
    PartnerChangeKind,
    PartnerHealth,
    PartnerTier,
    Thread,
)
from .logging import (
    configure_logging,
    get_logger,
    logging_context,
)
from .errors import (
    PartnerDeskError,
    StoreError,
    ReconciliationError,
    RemoteSyncError,
    RemoteSyncConnectionError,
    RemoteSyncResponseError,
    PartialSuccessResult,
)

__all__ = [
    # Version
    '__version__',
    # Store
    'PartnerStore',
    # Sync
    'PartnerSyncService',
    'SyncOutcome',
    'PartnerSyncClient',
    # Models
    'Partner',
    'PartnerTier',
    'PartnerHealth',
    'HealthHistoryEntry',
    'Contact',
    'Interaction',
    'Thread',
    'PartnerChangeEvent',
    'PartnerChangeKind',
    # Logging
    'configure_logging',
    'get_logger',
    'logging_context',
    # Errors
    'PartnerDeskError',
    'StoreError',
    'ReconciliationError',
    'RemoteSyncError',
    'RemoteSyncConnectionError',
    'RemoteSyncResponseError',
    'PartialSuccessResult',
]
