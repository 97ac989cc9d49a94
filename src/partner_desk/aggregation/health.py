"""
Health ranking, trend inference and health ring counts.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from ..models.partner import HealthHistoryEntry, HealthTrend, Partner, PartnerHealth


def health_rank(health: PartnerHealth | str) -> int:
    """
    Severity rank of a health value (critical=0 ... healthy=3).

    Unrecognized strings rank as neutral.
    """
    try:
        return PartnerHealth(health).rank
    except ValueError:
        return PartnerHealth.NEUTRAL.rank


def health_trend(
    current: PartnerHealth | str,
    previous: PartnerHealth | str | None,
) -> HealthTrend | None:
    """
    Compare a current health value against a previous one.

    Returns:
        IMPROVING when the rank went up, DECLINING when it went down,
        STABLE when equal, None when there is no previous value
    """
    if previous is None:
        return None
    current_rank = health_rank(current)
    previous_rank = health_rank(previous)
    if current_rank > previous_rank:
        return HealthTrend.IMPROVING
    if current_rank < previous_rank:
        return HealthTrend.DECLINING
    return HealthTrend.STABLE


def trend_from_history(
    partner: Partner,
    history: Sequence[HealthHistoryEntry],
) -> HealthTrend | None:
    """
    Trend of a partner's current health against its history.

    ``history`` is newest first; its first entry is the classification the
    partner currently holds, so the comparison point is the second entry.
    """
    previous = history[1].health if len(history) > 1 else None
    return health_trend(partner.health, previous)


@dataclass
class HealthRing:
    """Three-way health split shown on the dashboard. Neutral is excluded."""

    healthy: int = 0
    attention: int = 0
    critical: int = 0

    @property
    def total(self) -> int:
        return self.healthy + self.attention + self.critical

    def percentages(self) -> dict[str, float]:
        """Share of each bucket in percent; all zero for an empty ring."""
        total = self.total
        if total == 0:
            return {'healthy': 0.0, 'attention': 0.0, 'critical': 0.0}
        return {
            'healthy': self.healthy / total * 100,
            'attention': self.attention / total * 100,
            'critical': self.critical / total * 100,
        }

    def to_dict(self) -> dict[str, object]:
        return {
            'healthy': self.healthy,
            'attention': self.attention,
            'critical': self.critical,
            'total': self.total,
            'percentages': self.percentages(),
        }


def health_counts(partners: Iterable[Partner]) -> dict[PartnerHealth, int]:
    """Number of partners per health value (every value present, possibly 0)."""
    counts = {health: 0 for health in PartnerHealth}
    for partner in partners:
        counts[PartnerHealth(partner.health)] += 1
    return counts


def health_ring(partners: Iterable[Partner]) -> HealthRing:
    """Healthy/attention/critical counts for the dashboard ring."""
    counts = health_counts(partners)
    return HealthRing(
        healthy=counts[PartnerHealth.HEALTHY],
        attention=counts[PartnerHealth.ATTENTION],
        critical=counts[PartnerHealth.CRITICAL],
    )
