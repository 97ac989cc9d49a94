"""
Partner profile view: everything the desk knows about one partner.
"""

from dataclasses import dataclass, field
from datetime import datetime

from ..models.activity import Interaction, Thread
from ..models.partner import Contact, HealthHistoryEntry, HealthTrend, Partner
from ..store import PartnerStore
from .filters import sort_interactions, sort_threads
from .health import trend_from_history


@dataclass
class PartnerProfile:
    """Assembled profile for a single partner."""

    partner: Partner
    interactions: list[Interaction] = field(default_factory=list)
    threads: list[Thread] = field(default_factory=list)
    contacts: list[Contact] = field(default_factory=list)
    health_history: list[HealthHistoryEntry] = field(default_factory=list)
    trend: HealthTrend | None = None
    days_since_activity: int = 0

    @property
    def primary_contact(self) -> Contact | None:
        return next((c for c in self.contacts if c.is_primary), None)


def partner_profile(
    store: PartnerStore,
    partner_id: str,
    now: datetime | None = None,
) -> PartnerProfile | None:
    """
    Assemble a partner's profile from the store.

    Interactions are newest first, threads most recently updated first and
    contacts primary first.

    Returns:
        PartnerProfile, or None when the partner is unknown
    """
    partner = store.get_partner(partner_id)
    if partner is None:
        return None

    now = now or store.now()
    history = store.health_history(partner_id)
    contacts = sorted(store.contacts_for(partner_id), key=lambda c: not c.is_primary)

    return PartnerProfile(
        partner=partner,
        interactions=sort_interactions(i for i in store.interactions if i.partner_id == partner_id),
        threads=sort_threads(t for t in store.threads if t.partner_id == partner_id),
        contacts=contacts,
        health_history=history,
        trend=trend_from_history(partner, history),
        days_since_activity=max((now - partner.last_activity).days, 0),
    )
