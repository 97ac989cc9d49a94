"""
Data models for the partner desk.

Entities, creation inputs and remote change events.
"""

from .activity import (
    DailyFocusItem,
    FocusItemType,
    Interaction,
    InteractionChannel,
    InteractionKind,
    InteractionType,
    Priority,
    TeamOwner,
    Thread,
    ThreadStatus,
    ThreadVisibility,
)
from .events import PartnerChangeEvent, PartnerChangeKind
from .inputs import (
    ContactCreateInput,
    HealthUpdate,
    InteractionCreateInput,
    PartnerCreateInput,
    ThreadCreateInput,
)
from .partner import (
    Contact,
    ContactRole,
    HealthHistoryEntry,
    HealthTrend,
    Partner,
    PartnerHealth,
    PartnerTier,
)

__all__ = [
    'Partner',
    'PartnerTier',
    'PartnerHealth',
    'HealthTrend',
    'HealthHistoryEntry',
    'Contact',
    'ContactRole',
    'Interaction',
    'InteractionChannel',
    'InteractionKind',
    'InteractionType',
    'TeamOwner',
    'Priority',
    'Thread',
    'ThreadStatus',
    'ThreadVisibility',
    'DailyFocusItem',
    'FocusItemType',
    'PartnerCreateInput',
    'InteractionCreateInput',
    'ThreadCreateInput',
    'HealthUpdate',
    'ContactCreateInput',
    'PartnerChangeEvent',
    'PartnerChangeKind',
]
