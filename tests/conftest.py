"""
Pytest configuration and shared fixtures.

Key fixtures:
- now: Fixed reference time used by every store clock
- store: Empty PartnerStore on the fixed clock
- seeded_store: PartnerStore holding a small realistic book of partners
- make_partner / make_interaction / make_thread: Entity builders with defaults
"""

import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest

# Add src to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

# Load environment variables
from dotenv import load_dotenv

env_file = Path(__file__).parent.parent / '.env'
if env_file.exists():
    load_dotenv(env_file)

from partner_desk.models import (
    Interaction,
    InteractionChannel,
    InteractionKind,
    InteractionType,
    Partner,
    PartnerHealth,
    PartnerTier,
    Priority,
    TeamOwner,
    Thread,
    ThreadStatus,
    ThreadVisibility,
)
from partner_desk.store import PartnerStore

NOW = datetime(2026, 10, 19, 10, 0, 0)


@pytest.fixture
def now() -> datetime:
    """Fixed 'now' shared by stores and aggregation tests."""
    return NOW


@pytest.fixture
def make_partner():
    """Build a Partner with sensible defaults."""

    def _make(**overrides) -> Partner:
        fields = {
            'id': 'partner_acme',
            'name': 'Acme Payments',
            'tier': PartnerTier.GOLD,
            'health': PartnerHealth.HEALTHY,
            'last_activity': NOW - timedelta(days=1),
            'open_threads': 0,
            'revenue': 50000.0,
            'segment': 'Enterprise',
            'account_manager': 'Jordan',
        }
        fields.update(overrides)
        return Partner(**fields)

    return _make


@pytest.fixture
def make_interaction():
    """Build an Interaction with sensible defaults."""

    def _make(**overrides) -> Interaction:
        fields = {
            'id': 'interaction_1',
            'partner_id': 'partner_acme',
            'partner_name': 'Acme Payments',
            'type': InteractionKind.DIRECT,
            'channel': InteractionChannel.CALL,
            'interaction_type': InteractionType.PRICING,
            'summary': 'Discussed renewal pricing',
            'date': NOW - timedelta(hours=2),
            'owner': TeamOwner.CAM,
        }
        fields.update(overrides)
        return Interaction(**fields)

    return _make


@pytest.fixture
def make_thread():
    """Build a Thread with sensible defaults."""

    def _make(**overrides) -> Thread:
        fields = {
            'id': 'thread_1',
            'partner_id': 'partner_acme',
            'partner_name': 'Acme Payments',
            'title': 'Settlement delays',
            'status': ThreadStatus.OPEN,
            'owner': TeamOwner.CAM,
            'visibility': ThreadVisibility.OWNED,
            'priority': Priority.MEDIUM,
            'created_at': NOW - timedelta(days=3),
            'updated_at': NOW - timedelta(days=1),
            'last_activity': 'Waiting on ops',
        }
        fields.update(overrides)
        return Thread(**fields)

    return _make


@pytest.fixture
def store() -> PartnerStore:
    """Empty store on the fixed clock."""
    return PartnerStore(clock=lambda: NOW)


@pytest.fixture
def seeded_store(make_partner) -> PartnerStore:
    """Store holding three partners across the health range."""
    partners = [
        make_partner(),
        make_partner(
            id='partner_globex',
            name='Globex',
            tier=PartnerTier.PLATINUM,
            health=PartnerHealth.CRITICAL,
            last_activity=NOW - timedelta(days=20),
            revenue=250000.0,
        ),
        make_partner(
            id='partner_initech',
            name='initech',
            tier=PartnerTier.SILVER,
            health=PartnerHealth.NEUTRAL,
            last_activity=NOW - timedelta(days=5),
            revenue=1200.0,
        ),
    ]
    return PartnerStore(partners=partners, clock=lambda: NOW)
