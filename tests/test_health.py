"""
Tests for health ranking, trend inference and the health ring.
"""

from datetime import datetime

import pytest

from partner_desk.aggregation import (
    health_counts,
    health_rank,
    health_ring,
    health_trend,
    trend_from_history,
)
from partner_desk.aggregation.health import HealthRing
from partner_desk.models import HealthHistoryEntry, HealthTrend, PartnerHealth


class TestHealthRank:
    """Test severity ordering."""

    def test_rank_order(self):
        """critical < attention < neutral < healthy."""
        ranks = [health_rank(h) for h in PartnerHealth]
        assert ranks == [0, 1, 2, 3]

    def test_accepts_plain_strings(self):
        assert health_rank("healthy") == 3

    def test_unknown_ranks_as_neutral(self):
        """Unrecognized values sort with neutral instead of failing."""
        assert health_rank("thriving") == PartnerHealth.NEUTRAL.rank


class TestHealthTrend:
    """Test trend comparison."""

    @pytest.mark.parametrize(
        "current,previous,expected",
        [
            (PartnerHealth.HEALTHY, PartnerHealth.ATTENTION, HealthTrend.IMPROVING),
            (PartnerHealth.CRITICAL, PartnerHealth.NEUTRAL, HealthTrend.DECLINING),
            (PartnerHealth.NEUTRAL, PartnerHealth.NEUTRAL, HealthTrend.STABLE),
        ],
    )
    def test_trend(self, current, previous, expected):
        assert health_trend(current, previous) == expected

    def test_no_previous(self):
        """Without a previous value there is no trend."""
        assert health_trend(PartnerHealth.HEALTHY, None) is None

    def test_trend_from_history_uses_second_entry(self, make_partner):
        """The newest history entry is the current value; compare against the one before."""
        partner = make_partner(health=PartnerHealth.ATTENTION)
        history = [
            HealthHistoryEntry(
                id="h2", partner_id=partner.id, health=PartnerHealth.ATTENTION,
                date=datetime(2026, 10, 18),
            ),
            HealthHistoryEntry(
                id="h1", partner_id=partner.id, health=PartnerHealth.HEALTHY,
                date=datetime(2026, 10, 1),
            ),
        ]

        assert trend_from_history(partner, history) == HealthTrend.DECLINING

    def test_trend_from_short_history(self, make_partner):
        partner = make_partner()
        assert trend_from_history(partner, []) is None


class TestHealthRing:
    """Test dashboard ring counts."""

    def test_counts_every_value(self, seeded_store):
        """health_counts includes zero buckets."""
        counts = health_counts(seeded_store.partners)
        assert counts == {
            PartnerHealth.CRITICAL: 1,
            PartnerHealth.ATTENTION: 0,
            PartnerHealth.NEUTRAL: 1,
            PartnerHealth.HEALTHY: 1,
        }

    def test_ring_excludes_neutral(self, seeded_store):
        ring = health_ring(seeded_store.partners)

        assert ring.healthy == 1
        assert ring.critical == 1
        assert ring.attention == 0
        assert ring.total == 2
        assert ring.percentages() == {"healthy": 50.0, "attention": 0.0, "critical": 50.0}

    def test_empty_ring_has_zero_percentages(self):
        """An empty ring never divides by zero."""
        ring = HealthRing()
        assert ring.total == 0
        assert ring.percentages() == {"healthy": 0.0, "attention": 0.0, "critical": 0.0}

    def test_to_dict(self):
        data = HealthRing(healthy=3, attention=1).to_dict()
        assert data["total"] == 4
        assert data["percentages"]["healthy"] == 75.0
