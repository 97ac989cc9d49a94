"""Health check endpoint."""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health(request: Request):
    """Report that the store is mounted and how much it holds."""
    store = request.app.state.store
    return {
        "status": "ok",
        "partners": len(store.partners),
        "interactions": len(store.interactions),
        "threads": len(store.threads),
    }
