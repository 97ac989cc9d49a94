"""
Activity entity models: interactions, threads and daily focus items.

Interactions and threads carry a denormalized ``partner_name`` snapshot
copied at creation time. It is not kept in sync with later partner renames.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class InteractionChannel(str, Enum):
    """Medium an interaction happened over."""

    CALL = 'call'
    EMAIL = 'email'
    SLACK = 'slack'
    MEETING = 'meeting'
    SUPPORT = 'support'
    SYSTEM = 'system'


INDIRECT_CHANNELS = frozenset({InteractionChannel.SUPPORT, InteractionChannel.SYSTEM})


class InteractionKind(str, Enum):
    """Whether the account manager was directly involved."""

    DIRECT = 'direct'
    INDIRECT = 'indirect'

    @classmethod
    def for_channel(cls, channel: InteractionChannel) -> 'InteractionKind':
        """Support and system traffic is indirect; everything else is direct."""
        if InteractionChannel(channel) in INDIRECT_CHANNELS:
            return cls.INDIRECT
        return cls.DIRECT


class InteractionType(str, Enum):
    """Category of a logged interaction."""

    TECH_QUERY = 'tech_query'
    PRICING = 'pricing'
    MEETING_REQUEST = 'meeting_request'
    INTEGRATION_HELP = 'integration_help'
    ACCOUNT_CLOSURE = 'account_closure'
    PROCESS_ADVICE = 'process_advice'
    ESCALATION = 'escalation'
    SUPPORT_TICKET = 'support_ticket'
    SYSTEM_ALERT = 'system_alert'


class TeamOwner(str, Enum):
    """Team that owns an interaction, thread or focus item."""

    CAM = 'cam'
    SUPPORT = 'support'
    RISK = 'risk'
    OPS = 'ops'
    FINANCE = 'finance'
    OTHER = 'other'


class Priority(str, Enum):
    """Priority of a thread or focus item, lowest first."""

    LOW = 'low'
    MEDIUM = 'medium'
    HIGH = 'high'
    URGENT = 'urgent'

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {
    Priority.LOW: 0,
    Priority.MEDIUM: 1,
    Priority.HIGH: 2,
    Priority.URGENT: 3,
}


class Interaction(BaseModel):
    """A single logged contact event with a partner. Immutable once created."""

    id: str
    partner_id: str
    partner_name: str

    type: InteractionKind = Field(..., description='Derived from channel, never caller-chosen')
    channel: InteractionChannel
    interaction_type: InteractionType
    summary: str

    date: datetime
    resolved: bool = False
    follow_up_required: bool = False
    follow_up_date: datetime | None = None
    owner: TeamOwner


class ThreadStatus(str, Enum):
    """
    Thread workflow status.

    No transition graph is enforced; RESOLVED only matters to the
    partner's open-thread counter.
    """

    OPEN = 'open'
    IN_PROGRESS = 'in_progress'
    AWAITING_RESPONSE = 'awaiting_response'
    RESOLVED = 'resolved'


class ThreadVisibility(str, Enum):
    """Who must look at a thread, in grouped display order."""

    OWNED = 'owned'
    ACTION_REQUIRED = 'action_required'
    FYI = 'fyi'


class Thread(BaseModel):
    """
    A longer-lived issue or cross-team handoff about a partner.

    ``updated_at`` is only set at creation and ``interaction_count`` is not
    incremented by later interaction logging. ``last_activity`` is a
    free-text description, not a timestamp.
    """

    id: str
    partner_id: str
    partner_name: str

    title: str
    status: ThreadStatus
    owner: TeamOwner
    visibility: ThreadVisibility
    priority: Priority

    created_at: datetime
    updated_at: datetime
    interaction_count: int = Field(default=0, ge=0)
    last_activity: str = ''


class FocusItemType(str, Enum):
    """Reason a focus item surfaced."""

    FOLLOW_UP = 'follow_up'
    THREAD = 'thread'
    SILENT_PARTNER = 'silent_partner'
    ESCALATION = 'escalation'
    UPSELL = 'upsell'


class DailyFocusItem(BaseModel):
    """A daily-priority task surfaced on the dashboard."""

    id: str
    type: FocusItemType
    partner_id: str
    partner_name: str
    title: str
    reason: str
    owner: TeamOwner
    priority: Priority
    due_date: datetime | None = None
    action_required: bool = False
