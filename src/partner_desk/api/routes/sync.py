"""POST /sync/partners: apply a remote partner change event."""

from typing import Any

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request

from partner_desk.errors import ReconciliationError
from partner_desk.models import PartnerChangeEvent

from ..auth import verify_sync_token

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post("/sync/partners")
async def apply_partner_change(
    event_data: dict[str, Any],
    request: Request,
    _auth: None = Depends(verify_sync_token),
):
    """Validate a change event and reconcile it into the partner collection."""
    try:
        event = PartnerChangeEvent.model_validate(event_data)
    except Exception as e:
        raise HTTPException(status_code=422, detail=str(e))

    log = logger.bind(change_kind=event.kind.value, partner_id=event.target_id)

    try:
        partner = request.app.state.store.apply_remote_change(event)
    except ReconciliationError as e:
        log.warning("sync_webhook.rejected", error=str(e))
        raise HTTPException(status_code=422, detail=e.message)

    log.info("sync_webhook.applied")
    return {
        "applied": True,
        "kind": event.kind.value,
        "partner": partner.model_dump(mode="json") if partner else None,
    }
