"""
Utility helpers for the partner desk.

uuid7() wraps fastuuid.uuid7() to return a stdlib uuid.UUID instance.
fastuuid.UUID is a Rust-backed type that is NOT isinstance-compatible with
uuid.UUID, so we roundtrip through the string representation.
"""

import math
from datetime import datetime
from typing import Any
from uuid import UUID

import fastuuid


def uuid7() -> UUID:
    """Generate a UUIDv7 (time-sortable) as a stdlib uuid.UUID."""
    return UUID(str(fastuuid.uuid7()))


def make_id(prefix: str) -> str:
    """Build an opaque, globally unique record id such as ``partner_<uuid7>``."""
    return f'{prefix}_{uuid7().hex}'


def start_of_day(moment: datetime) -> datetime:
    """Local midnight of the day containing ``moment``."""
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def as_local(moment: datetime | None) -> datetime | None:
    """Convert an aware datetime to naive local time; naive values pass through."""
    if moment is None or moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)


def coerce_revenue(value: Any) -> float:
    """Coerce a caller-supplied revenue to a finite, non-negative float."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def text_or_default(value: str | None, default: str) -> str:
    """Trim ``value``; fall back to ``default`` when nothing is left."""
    cleaned = (value or '').strip()
    return cleaned or default
