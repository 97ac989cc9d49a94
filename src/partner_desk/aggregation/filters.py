"""
Filter, sort and grouping rules behind the partner, interaction and
thread lists.

Search terms are case-insensitive substring matches. The literal filter
value ``"all"`` disables a filter. Sorting is stable, so ties keep the
collection's most-recent-first order.
"""

from collections.abc import Iterable
from datetime import date
from enum import Enum

from ..models.activity import (
    Interaction,
    InteractionKind,
    Thread,
    ThreadStatus,
    ThreadVisibility,
)
from ..models.partner import Partner, PartnerHealth
from .health import health_rank

ALL = 'all'


class PartnerSortField(str, Enum):
    """Sort keys offered on the partner list."""

    NAME = 'name'
    HEALTH = 'health'
    REVENUE = 'revenue'
    LAST_ACTIVITY = 'last_activity'


def _matches(haystack: str, needle: str) -> bool:
    return (needle or '').lower() in (haystack or '').lower()


def _selected(value: Enum | str, wanted: Enum | str | None) -> bool:
    if wanted is None or wanted == ALL:
        return True
    return value == wanted


# =============================================================================
# Partners
# =============================================================================


def filter_partners(
    partners: Iterable[Partner],
    search: str = '',
    health: PartnerHealth | str | None = ALL,
) -> list[Partner]:
    """Partners whose name contains ``search`` and whose health matches."""
    return [
        p for p in partners
        if _matches(p.name, search) and _selected(p.health, health)
    ]


def sort_partners(
    partners: Iterable[Partner],
    field: PartnerSortField | str = PartnerSortField.LAST_ACTIVITY,
) -> list[Partner]:
    """
    Sort partners for display.

    - name: case-insensitive lexicographic
    - health: severity ascending (critical first)
    - revenue: descending
    - last_activity: descending (default)
    """
    field = PartnerSortField(field)
    if field == PartnerSortField.NAME:
        return sorted(partners, key=lambda p: p.name.casefold())
    if field == PartnerSortField.HEALTH:
        return sorted(partners, key=lambda p: health_rank(p.health))
    if field == PartnerSortField.REVENUE:
        return sorted(partners, key=lambda p: p.revenue, reverse=True)
    return sorted(partners, key=lambda p: p.last_activity, reverse=True)


def query_partners(
    partners: Iterable[Partner],
    search: str = '',
    health: PartnerHealth | str | None = ALL,
    sort: PartnerSortField | str = PartnerSortField.LAST_ACTIVITY,
) -> list[Partner]:
    """Filter then sort partners."""
    return sort_partners(filter_partners(partners, search, health), sort)


# =============================================================================
# Interactions
# =============================================================================


def filter_interactions(
    interactions: Iterable[Interaction],
    search: str = '',
    kind: InteractionKind | str | None = ALL,
) -> list[Interaction]:
    """Interactions whose partner name or summary contains ``search``."""
    return [
        i for i in interactions
        if (_matches(i.partner_name, search) or _matches(i.summary, search))
        and _selected(i.type, kind)
    ]


def sort_interactions(interactions: Iterable[Interaction]) -> list[Interaction]:
    """Newest interaction first."""
    return sorted(interactions, key=lambda i: i.date, reverse=True)


def query_interactions(
    interactions: Iterable[Interaction],
    search: str = '',
    kind: InteractionKind | str | None = ALL,
) -> list[Interaction]:
    """Filter then sort interactions."""
    return sort_interactions(filter_interactions(interactions, search, kind))


def group_interactions_by_day(interactions: Iterable[Interaction]) -> dict[date, list[Interaction]]:
    """Group interactions by calendar day, keeping their incoming order."""
    groups: dict[date, list[Interaction]] = {}
    for interaction in interactions:
        groups.setdefault(interaction.date.date(), []).append(interaction)
    return groups


def kind_counts(interactions: Iterable[Interaction]) -> dict[InteractionKind, int]:
    """Number of direct and indirect interactions."""
    counts = {kind: 0 for kind in InteractionKind}
    for interaction in interactions:
        counts[InteractionKind(interaction.type)] += 1
    return counts


# =============================================================================
# Threads
# =============================================================================


def filter_threads(
    threads: Iterable[Thread],
    search: str = '',
    visibility: ThreadVisibility | str | None = ALL,
    status: ThreadStatus | str | None = ALL,
) -> list[Thread]:
    """Threads whose title or partner name contains ``search``."""
    return [
        t for t in threads
        if (_matches(t.title, search) or _matches(t.partner_name, search))
        and _selected(t.visibility, visibility)
        and _selected(t.status, status)
    ]


def sort_threads(threads: Iterable[Thread]) -> list[Thread]:
    """Most recently updated thread first."""
    return sorted(threads, key=lambda t: t.updated_at, reverse=True)


def query_threads(
    threads: Iterable[Thread],
    search: str = '',
    visibility: ThreadVisibility | str | None = ALL,
    status: ThreadStatus | str | None = ALL,
) -> list[Thread]:
    """Filter then sort threads."""
    return sort_threads(filter_threads(threads, search, visibility, status))


def group_threads_by_visibility(threads: Iterable[Thread]) -> dict[ThreadVisibility, list[Thread]]:
    """Bucket threads into owned, action_required and fyi, in that order."""
    groups: dict[ThreadVisibility, list[Thread]] = {v: [] for v in ThreadVisibility}
    for thread in threads:
        groups[ThreadVisibility(thread.visibility)].append(thread)
    return groups


def visibility_counts(threads: Iterable[Thread]) -> dict[ThreadVisibility, int]:
    """Number of threads per visibility bucket."""
    return {v: len(items) for v, items in group_threads_by_visibility(threads).items()}


def recent_owned_threads(threads: Iterable[Thread], limit: int = 3) -> list[Thread]:
    """The most recently updated threads the user owns."""
    owned = [t for t in threads if t.visibility == ThreadVisibility.OWNED]
    return sort_threads(owned)[:limit]
