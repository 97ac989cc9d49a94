"""
Partner-side entity models.

- Partner: a business account tracked by the desk
- HealthHistoryEntry: one recorded health classification for a partner
- Contact: a named person at a partner

Tier and health are ordered enumerations; their ``rank`` is the stable
ordering used for display and for sorting/trend comparison.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class PartnerTier(str, Enum):
    """Commercial tier, listed in display order."""

    PLATINUM = 'platinum'
    GOLD = 'gold'
    SILVER = 'silver'
    BRONZE = 'bronze'

    @property
    def rank(self) -> int:
        """Display rank: platinum first."""
        return _TIER_RANK[self]


class PartnerHealth(str, Enum):
    """Coarse relationship-risk classification, worst first."""

    CRITICAL = 'critical'
    ATTENTION = 'attention'
    NEUTRAL = 'neutral'
    HEALTHY = 'healthy'

    @property
    def rank(self) -> int:
        """Severity rank: critical=0 ... healthy=3."""
        return _HEALTH_RANK[self]


_TIER_RANK = {
    PartnerTier.PLATINUM: 0,
    PartnerTier.GOLD: 1,
    PartnerTier.SILVER: 2,
    PartnerTier.BRONZE: 3,
}

_HEALTH_RANK = {
    PartnerHealth.CRITICAL: 0,
    PartnerHealth.ATTENTION: 1,
    PartnerHealth.NEUTRAL: 2,
    PartnerHealth.HEALTHY: 3,
}


class HealthTrend(str, Enum):
    """Direction of a partner's health between two classifications."""

    IMPROVING = 'improving'
    DECLINING = 'declining'
    STABLE = 'stable'


class Partner(BaseModel):
    """
    Business account tracked by the desk.

    ``last_activity`` and ``open_threads`` are derived fields owned by the
    store: the former never moves backward, the latter is an incrementally
    maintained counter of the partner's non-resolved threads.
    """

    id: str = Field(..., description='Store-generated partner identifier')
    name: str = Field(..., description='Partner display name')
    tier: PartnerTier
    health: PartnerHealth

    last_activity: datetime = Field(..., description='Most recent activity timestamp')
    open_threads: int = Field(default=0, ge=0, description='Cached count of open threads')

    revenue: float = Field(default=0.0, ge=0)
    segment: str = ''
    account_manager: str = ''


class HealthHistoryEntry(BaseModel):
    """One health classification recorded for a partner."""

    id: str
    partner_id: str
    health: PartnerHealth
    reason: str = ''
    date: datetime


class ContactRole(str, Enum):
    """Role a contact plays at the partner."""

    FINANCE = 'finance'
    MARKETING = 'marketing'
    TECHNICAL = 'technical'
    OPERATIONS = 'operations'
    EXECUTIVE = 'executive'
    OTHER = 'other'


class Contact(BaseModel):
    """A named stakeholder at a partner."""

    id: str
    partner_id: str

    first_name: str
    last_name: str = ''
    email: str | None = None
    phone: str | None = None
    role: ContactRole = ContactRole.OTHER
    is_primary: bool = False
    notes: str | None = None

    created_at: datetime
    updated_at: datetime

    @property
    def full_name(self) -> str:
        return f'{self.first_name} {self.last_name}'.strip()
