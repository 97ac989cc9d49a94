"""
Tests for id generation and input coercion helpers.

uuid7() must return a stdlib uuid.UUID with correct UUIDv7 properties;
make_id() builds the prefixed record ids the store hands out.
"""

import time
from datetime import datetime, timedelta, timezone
from uuid import UUID

import pytest

from partner_desk.utils import (
    as_local,
    coerce_revenue,
    make_id,
    start_of_day,
    text_or_default,
    uuid7,
)


class TestUuid7:
    """Core properties that must always hold."""

    def test_returns_stdlib_uuid(self):
        """uuid7() must return a stdlib uuid.UUID, not fastuuid.UUID."""
        result = uuid7()
        assert type(result) is UUID

    def test_version_is_7(self):
        assert uuid7().version == 7

    def test_ordering_after_sleep(self):
        """UUIDs generated 3ms apart must be strictly ordered."""
        a = uuid7()
        time.sleep(0.003)
        b = uuid7()
        assert b.int > a.int, "Later UUID must have larger int value"


class TestMakeId:
    """Test prefixed record ids."""

    def test_prefix_and_hex(self):
        record_id = make_id("partner")
        prefix, _, suffix = record_id.partition("_")

        assert prefix == "partner"
        assert len(suffix) == 32
        assert UUID(hex=suffix).version == 7

    def test_unique(self):
        assert len({make_id("thread") for _ in range(100)}) == 100


class TestCoercion:
    """Test borderline input coercion."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (1500, 1500.0),
            ("2500.5", 2500.5),
            (None, 0.0),
            ("abc", 0.0),
            (float("nan"), 0.0),
            (float("-inf"), 0.0),
            (-1, 0.0),
        ],
    )
    def test_coerce_revenue(self, value, expected):
        assert coerce_revenue(value) == expected

    def test_text_or_default(self):
        assert text_or_default("  Mid-Market ", "SMB") == "Mid-Market"
        assert text_or_default("   ", "SMB") == "SMB"
        assert text_or_default(None, "SMB") == "SMB"


class TestDates:
    """Test local date helpers."""

    def test_start_of_day(self):
        moment = datetime(2026, 10, 19, 17, 45, 12, 999)
        assert start_of_day(moment) == datetime(2026, 10, 19)

    def test_as_local_passes_naive_through(self):
        moment = datetime(2026, 10, 19, 9, 0)
        assert as_local(moment) is moment
        assert as_local(None) is None

    def test_as_local_converts_aware(self):
        aware = datetime(2026, 10, 19, 9, 0, tzinfo=timezone(timedelta(hours=2)))
        local = as_local(aware)

        assert local.tzinfo is None
        assert local == aware.astimezone().replace(tzinfo=None)
