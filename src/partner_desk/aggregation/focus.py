"""
Daily focus items.

Focus items are classified into two buckets: urgent attention (priority
urgent or high) and everything else. ``derive_focus_items`` surfaces items
from the current collections:

- Unresolved escalation interactions -> escalation (urgent)
- Other overdue follow-ups -> follow_up (high)
- Non-resolved action-required threads -> thread (thread's own priority)
- Partners silent for longer than the configured window -> silent_partner
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from ..config import config
from ..models.activity import (
    DailyFocusItem,
    FocusItemType,
    Interaction,
    InteractionType,
    Priority,
    TeamOwner,
    Thread,
    ThreadStatus,
    ThreadVisibility,
)
from ..models.partner import Partner, PartnerHealth
from .metrics import is_overdue

URGENT_PRIORITIES = frozenset({Priority.URGENT, Priority.HIGH})


@dataclass
class FocusPartition:
    """Focus items split into urgent attention and other focus."""

    urgent: list[DailyFocusItem] = field(default_factory=list)
    other: list[DailyFocusItem] = field(default_factory=list)


def is_urgent(item: DailyFocusItem) -> bool:
    return Priority(item.priority) in URGENT_PRIORITIES


def partition_focus_items(items: Iterable[DailyFocusItem]) -> FocusPartition:
    """Split focus items into urgent (urgent/high) and other, keeping order."""
    partition = FocusPartition()
    for item in items:
        if is_urgent(item):
            partition.urgent.append(item)
        else:
            partition.other.append(item)
    return partition


def _interaction_item(interaction: Interaction, now: datetime) -> DailyFocusItem | None:
    if interaction.resolved:
        return None
    if interaction.interaction_type == InteractionType.ESCALATION:
        return DailyFocusItem(
            id=f'focus_{interaction.id}',
            type=FocusItemType.ESCALATION,
            partner_id=interaction.partner_id,
            partner_name=interaction.partner_name,
            title=f'Escalation open for {interaction.partner_name}',
            reason=interaction.summary,
            owner=interaction.owner,
            priority=Priority.URGENT,
            due_date=interaction.follow_up_date,
            action_required=True,
        )
    if is_overdue(interaction, now):
        return DailyFocusItem(
            id=f'focus_{interaction.id}',
            type=FocusItemType.FOLLOW_UP,
            partner_id=interaction.partner_id,
            partner_name=interaction.partner_name,
            title=f'Overdue follow-up with {interaction.partner_name}',
            reason=interaction.summary,
            owner=interaction.owner,
            priority=Priority.HIGH,
            due_date=interaction.follow_up_date,
            action_required=True,
        )
    return None


def _thread_item(thread: Thread) -> DailyFocusItem | None:
    if thread.status == ThreadStatus.RESOLVED:
        return None
    if thread.visibility != ThreadVisibility.ACTION_REQUIRED:
        return None
    return DailyFocusItem(
        id=f'focus_{thread.id}',
        type=FocusItemType.THREAD,
        partner_id=thread.partner_id,
        partner_name=thread.partner_name,
        title=thread.title,
        reason=thread.last_activity,
        owner=thread.owner,
        priority=thread.priority,
        action_required=True,
    )


def _silent_partner_item(
    partner: Partner,
    now: datetime,
    silent_after: timedelta,
) -> DailyFocusItem | None:
    idle = now - partner.last_activity
    if idle <= silent_after:
        return None
    at_risk = partner.health in (PartnerHealth.CRITICAL, PartnerHealth.ATTENTION)
    return DailyFocusItem(
        id=f'focus_{partner.id}',
        type=FocusItemType.SILENT_PARTNER,
        partner_id=partner.id,
        partner_name=partner.name,
        title=f'Check in with {partner.name}',
        reason=f'No activity for {idle.days} days',
        owner=TeamOwner.CAM,
        priority=Priority.HIGH if at_risk else Priority.MEDIUM,
        action_required=at_risk,
    )


def derive_focus_items(
    partners: Sequence[Partner],
    interactions: Sequence[Interaction],
    threads: Sequence[Thread],
    now: datetime,
    silent_after_days: int | None = None,
) -> list[DailyFocusItem]:
    """
    Build today's focus items from the collections.

    Args:
        partners: Current partner collection
        interactions: Current interaction collection
        threads: Current thread collection
        now: Reference time (local, naive)
        silent_after_days: Idle days before a partner counts as silent
            (defaults to config.SILENT_PARTNER_DAYS)

    Returns:
        Focus items, highest priority first
    """
    days = silent_after_days if silent_after_days is not None else config.SILENT_PARTNER_DAYS
    silent_after = timedelta(days=days)

    candidates: list[DailyFocusItem | None] = []
    candidates.extend(_interaction_item(i, now) for i in interactions)
    candidates.extend(_thread_item(t) for t in threads)
    candidates.extend(_silent_partner_item(p, now, silent_after) for p in partners)

    items = [item for item in candidates if item is not None]
    return sorted(items, key=lambda item: Priority(item.priority).rank, reverse=True)
