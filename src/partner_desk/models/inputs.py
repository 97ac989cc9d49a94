"""
Creation inputs supplied by the UI forms.

These are deliberately permissive: the forms enforce required fields and
minimum lengths before calling the store, and the store coerces whatever
borderline values still arrive instead of rejecting them.
"""

from datetime import datetime

from pydantic import BaseModel

from .activity import (
    InteractionChannel,
    InteractionType,
    Priority,
    TeamOwner,
    ThreadStatus,
    ThreadVisibility,
)
from .partner import ContactRole, PartnerHealth, PartnerTier


class PartnerCreateInput(BaseModel):
    """Fields for a new partner."""

    name: str = ''
    tier: PartnerTier = PartnerTier.BRONZE
    health: PartnerHealth = PartnerHealth.NEUTRAL
    revenue: float = 0.0
    segment: str = ''
    account_manager: str = ''


class InteractionCreateInput(BaseModel):
    """Fields for logging an interaction."""

    partner_id: str
    channel: InteractionChannel
    interaction_type: InteractionType
    summary: str = ''
    follow_up_required: bool = False
    follow_up_date: datetime | None = None
    owner: TeamOwner = TeamOwner.CAM


class ThreadCreateInput(BaseModel):
    """Fields for opening a thread."""

    partner_id: str
    title: str = ''
    status: ThreadStatus = ThreadStatus.OPEN
    visibility: ThreadVisibility = ThreadVisibility.OWNED
    priority: Priority = Priority.MEDIUM
    owner: TeamOwner = TeamOwner.CAM
    last_activity: str = ''


class HealthUpdate(BaseModel):
    """A health reclassification for one partner."""

    partner_id: str
    health: PartnerHealth
    reason: str | None = None


class ContactCreateInput(BaseModel):
    """Fields for a new partner contact."""

    partner_id: str
    first_name: str
    last_name: str = ''
    email: str | None = None
    phone: str | None = None
    role: ContactRole = ContactRole.OTHER
    is_primary: bool = False
    notes: str | None = None
