"""Dashboard endpoint."""

from fastapi import APIRouter, Request

from partner_desk.aggregation import (
    dashboard_metrics,
    derive_focus_items,
    partition_focus_items,
    recent_owned_threads,
)

router = APIRouter()


@router.get("/dashboard")
async def dashboard(request: Request):
    """Headline metrics, health ring, today's focus and recently updated owned threads."""
    store = request.app.state.store
    now = store.now()

    metrics = dashboard_metrics(store.partners, store.interactions, store.threads, now)
    focus = partition_focus_items(
        derive_focus_items(store.partners, store.interactions, store.threads, now)
    )

    return {
        "metrics": metrics.to_dict(),
        "focus": {
            "urgent": [item.model_dump(mode="json") for item in focus.urgent],
            "other": [item.model_dump(mode="json") for item in focus.other],
        },
        "recent_threads": [t.model_dump(mode="json") for t in recent_owned_threads(store.threads)],
    }
