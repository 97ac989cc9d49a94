"""Bearer token authentication for the remote partner change webhook."""

from fastapi import Header, HTTPException

from .config import get_settings


async def verify_sync_token(authorization: str = Header(...)) -> None:
    """Validate the bearer token sent by the partner sync service."""
    expected = f"Bearer {get_settings().SYNC_WEBHOOK_KEY}"
    if authorization != expected:
        raise HTTPException(status_code=401, detail="Invalid or missing bearer token")
