"""Partner list, creation, profile, health and contact endpoints."""

import structlog
from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from partner_desk.aggregation import PartnerSortField, health_counts, partner_profile, query_partners
from partner_desk.models import (
    ContactCreateInput,
    ContactRole,
    PartnerCreateInput,
    PartnerHealth,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/partners")


class HealthChange(BaseModel):
    """Body for POST /partners/{id}/health."""

    health: PartnerHealth
    reason: str | None = None


class NewContact(BaseModel):
    """Body for POST /partners/{id}/contacts."""

    first_name: str
    last_name: str = ""
    email: str | None = None
    phone: str | None = None
    role: ContactRole = ContactRole.OTHER
    is_primary: bool = False
    notes: str | None = None


@router.get("")
async def list_partners(
    request: Request,
    search: str = "",
    health: PartnerHealth | None = None,
    sort: PartnerSortField = PartnerSortField.LAST_ACTIVITY,
):
    """Filtered, sorted partner list plus per-health counts."""
    store = request.app.state.store
    partners = query_partners(store.partners, search=search, health=health, sort=sort)
    return {
        "partners": [p.model_dump(mode="json") for p in partners],
        "health_counts": {h.value: n for h, n in health_counts(store.partners).items()},
    }


@router.post("", status_code=201)
async def create_partner(data: PartnerCreateInput, request: Request):
    """Create a partner; publish it to the sync service when one is configured."""
    partner = request.app.state.store.add_partner(data)

    logger.info("partners.created", partner_id=partner.id)

    # Publish failures are logged by the sync service; the local record stands
    sync = getattr(request.app.state, "sync", None)
    if sync is not None:
        await sync.publish(partner)

    return partner.model_dump(mode="json")


@router.get("/{partner_id}")
async def get_partner_profile(partner_id: str, request: Request):
    """Partner profile: timeline, threads, contacts and health history."""
    profile = partner_profile(request.app.state.store, partner_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Partner not found")

    return {
        "partner": profile.partner.model_dump(mode="json"),
        "interactions": [i.model_dump(mode="json") for i in profile.interactions],
        "threads": [t.model_dump(mode="json") for t in profile.threads],
        "contacts": [c.model_dump(mode="json") for c in profile.contacts],
        "health_history": [h.model_dump(mode="json") for h in profile.health_history],
        "trend": profile.trend.value if profile.trend else None,
        "days_since_activity": profile.days_since_activity,
    }


@router.post("/{partner_id}/health")
async def change_partner_health(partner_id: str, body: HealthChange, request: Request):
    """Reclassify a partner's health."""
    partner = request.app.state.store.update_partner_health(partner_id, body.health, body.reason)
    if partner is None:
        raise HTTPException(status_code=404, detail="Partner not found")
    return partner.model_dump(mode="json")


@router.post("/{partner_id}/contacts", status_code=201)
async def create_contact(partner_id: str, body: NewContact, request: Request):
    """Add a contact to a partner."""
    contact = request.app.state.store.add_contact(
        ContactCreateInput(partner_id=partner_id, **body.model_dump())
    )
    return contact.model_dump(mode="json")
