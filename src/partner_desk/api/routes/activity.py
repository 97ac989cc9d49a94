"""Interaction and thread endpoints."""

from fastapi import APIRouter, Request

from partner_desk.aggregation import (
    group_interactions_by_day,
    group_threads_by_visibility,
    kind_counts,
    query_interactions,
    query_threads,
    visibility_counts,
)
from partner_desk.models import (
    InteractionCreateInput,
    InteractionKind,
    ThreadCreateInput,
    ThreadStatus,
    ThreadVisibility,
)

router = APIRouter()


@router.get("/interactions")
async def list_interactions(
    request: Request,
    search: str = "",
    kind: InteractionKind | None = None,
    grouped: bool = False,
):
    """Interactions newest first, optionally grouped by calendar day."""
    store = request.app.state.store
    interactions = query_interactions(store.interactions, search=search, kind=kind)
    counts = {k.value: n for k, n in kind_counts(store.interactions).items()}

    if grouped:
        return {
            "groups": [
                {"day": day.isoformat(), "interactions": [i.model_dump(mode="json") for i in items]}
                for day, items in group_interactions_by_day(interactions).items()
            ],
            "counts": counts,
        }
    return {
        "interactions": [i.model_dump(mode="json") for i in interactions],
        "counts": counts,
    }


@router.post("/interactions", status_code=201)
async def log_interaction(data: InteractionCreateInput, request: Request):
    """Log an interaction against a partner."""
    interaction = request.app.state.store.log_interaction(data)
    return interaction.model_dump(mode="json")


@router.get("/threads")
async def list_threads(
    request: Request,
    search: str = "",
    visibility: ThreadVisibility | None = None,
    status: ThreadStatus | None = None,
    grouped: bool = False,
):
    """Threads most recently updated first, optionally grouped by visibility."""
    store = request.app.state.store
    threads = query_threads(store.threads, search=search, visibility=visibility, status=status)
    counts = {v.value: n for v, n in visibility_counts(store.threads).items()}

    if grouped:
        return {
            "groups": {
                v.value: [t.model_dump(mode="json") for t in items]
                for v, items in group_threads_by_visibility(threads).items()
            },
            "counts": counts,
        }
    return {
        "threads": [t.model_dump(mode="json") for t in threads],
        "counts": counts,
    }


@router.post("/threads", status_code=201)
async def create_thread(data: ThreadCreateInput, request: Request):
    """Open a thread against a partner."""
    thread = request.app.state.store.add_thread(data)
    return thread.model_dump(mode="json")
