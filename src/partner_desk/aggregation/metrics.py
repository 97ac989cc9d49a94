"""
Dashboard metrics.

All values are recomputed from the collections on every call.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any

from ..config import config
from ..models.activity import Interaction, Thread, ThreadStatus
from ..models.partner import Partner
from ..utils import start_of_day
from .health import HealthRing, health_ring

_DAY = timedelta(days=1)


def count_open_threads(threads: Iterable[Thread]) -> int:
    """Threads whose status is anything but resolved."""
    return sum(1 for t in threads if t.status != ThreadStatus.RESOLVED)


def is_overdue(interaction: Interaction, now: datetime) -> bool:
    """
    Whether an interaction's follow-up is overdue.

    Overdue means a follow-up is required, the interaction is unresolved and
    the follow-up date falls before local midnight today.
    """
    if not interaction.follow_up_required or interaction.resolved:
        return False
    if interaction.follow_up_date is None:
        return False
    return interaction.follow_up_date < start_of_day(now)


def count_overdue_follow_ups(interactions: Iterable[Interaction], now: datetime) -> int:
    return sum(1 for i in interactions if is_overdue(i, now))


def count_recent_interactions(
    interactions: Iterable[Interaction],
    now: datetime,
    window_days: int | None = None,
) -> int:
    """Interactions at most ``window_days`` days old (boundary inclusive)."""
    window = window_days if window_days is not None else config.WEEKLY_WINDOW_DAYS
    return sum(1 for i in interactions if (now - i.date) / _DAY <= window)


@dataclass
class DashboardMetrics:
    """Headline numbers for the dashboard."""

    active_partners: int
    open_threads: int
    overdue_follow_ups: int
    weekly_interactions: int
    health: HealthRing = field(default_factory=HealthRing)

    def to_dict(self) -> dict[str, Any]:
        return {
            'active_partners': self.active_partners,
            'open_threads': self.open_threads,
            'overdue_follow_ups': self.overdue_follow_ups,
            'weekly_interactions': self.weekly_interactions,
            'health': self.health.to_dict(),
        }


def dashboard_metrics(
    partners: Sequence[Partner],
    interactions: Sequence[Interaction],
    threads: Sequence[Thread],
    now: datetime,
) -> DashboardMetrics:
    """
    Compute the dashboard headline metrics.

    Args:
        partners: Current partner collection
        interactions: Current interaction collection
        threads: Current thread collection
        now: Reference time (local, naive)

    Returns:
        DashboardMetrics snapshot
    """
    return DashboardMetrics(
        active_partners=len(partners),
        open_threads=count_open_threads(threads),
        overdue_follow_ups=count_overdue_follow_ups(interactions, now),
        weekly_interactions=count_recent_interactions(interactions, now),
        health=health_ring(partners),
    )
