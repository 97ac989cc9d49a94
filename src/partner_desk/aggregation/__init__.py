"""
Read-side aggregation rules.

Pure functions over the store's collections: dashboard metrics, health
ring and trend, focus classification, and list filters/sorts/groupings.
"""

from .filters import (
    ALL,
    PartnerSortField,
    filter_interactions,
    filter_partners,
    filter_threads,
    group_interactions_by_day,
    group_threads_by_visibility,
    kind_counts,
    query_interactions,
    query_partners,
    query_threads,
    recent_owned_threads,
    sort_interactions,
    sort_partners,
    sort_threads,
    visibility_counts,
)
from .focus import FocusPartition, derive_focus_items, partition_focus_items
from .health import HealthRing, health_counts, health_rank, health_ring, health_trend, trend_from_history
from .metrics import DashboardMetrics, dashboard_metrics, is_overdue
from .profile import PartnerProfile, partner_profile

__all__ = [
    'ALL',
    'PartnerSortField',
    'filter_partners',
    'sort_partners',
    'query_partners',
    'filter_interactions',
    'sort_interactions',
    'query_interactions',
    'group_interactions_by_day',
    'kind_counts',
    'filter_threads',
    'sort_threads',
    'query_threads',
    'group_threads_by_visibility',
    'visibility_counts',
    'recent_owned_threads',
    'FocusPartition',
    'partition_focus_items',
    'derive_focus_items',
    'HealthRing',
    'health_rank',
    'health_trend',
    'trend_from_history',
    'health_counts',
    'health_ring',
    'DashboardMetrics',
    'dashboard_metrics',
    'is_overdue',
    'PartnerProfile',
    'partner_profile',
]
