"""Tests for the partner sync service."""

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock

from partner_desk.errors import RemoteSyncConnectionError, RemoteSyncError
from partner_desk.models import PartnerChangeEvent, PartnerChangeKind
from partner_desk.sync import PartnerSyncService


async def _events(*events):
    for event in events:
        yield event


def _mock_client():
    client = MagicMock()
    client.fetch_partners = AsyncMock()
    client.publish_partner = AsyncMock()
    return client


class TestRefresh:
    @pytest.mark.asyncio
    async def test_replaces_partners(self, seeded_store, make_partner):
        client = _mock_client()
        client.fetch_partners.return_value = [make_partner(id="partner_remote")]

        outcome = await PartnerSyncService(seeded_store, client).refresh()

        assert outcome.success is True
        assert outcome.applied == 1
        assert [p.id for p in seeded_store.partners] == ["partner_remote"]

    @pytest.mark.asyncio
    async def test_failure_leaves_state_untouched(self, seeded_store):
        client = _mock_client()
        client.fetch_partners.side_effect = RemoteSyncConnectionError("Partner sync unreachable")
        before = seeded_store.partners

        outcome = await PartnerSyncService(seeded_store, client).refresh()

        assert outcome.success is False
        assert isinstance(outcome.error, RemoteSyncConnectionError)
        assert seeded_store.partners == before
        assert outcome.to_dict()["error"] == "Partner sync unreachable"


class TestPublish:
    @pytest.mark.asyncio
    async def test_publishes(self, seeded_store):
        client = _mock_client()
        partner = seeded_store.get_partner("partner_acme")

        outcome = await PartnerSyncService(seeded_store, client).publish(partner)

        assert outcome.success is True
        client.publish_partner.assert_awaited_once_with(partner)

    @pytest.mark.asyncio
    async def test_failure_is_reported_not_raised(self, seeded_store):
        client = _mock_client()
        client.publish_partner.side_effect = RemoteSyncConnectionError("down")
        before = seeded_store.partners

        outcome = await PartnerSyncService(seeded_store, client).publish(before[0])

        assert outcome.success is False
        assert seeded_store.partners == before


class TestConsume:
    @pytest.mark.asyncio
    async def test_applies_events_in_order(self, seeded_store, make_partner):
        service = PartnerSyncService(seeded_store, _mock_client())

        result = await service.consume(
            _events(
                PartnerChangeEvent(kind=PartnerChangeKind.INSERT, partner=make_partner(id="p_new")),
                PartnerChangeEvent(kind=PartnerChangeKind.DELETE, partner_id="p_new"),
                PartnerChangeEvent(kind=PartnerChangeKind.UPDATE),
            )
        )

        assert result.success_count == 2
        assert result.failure_count == 1
        assert seeded_store.get_partner("p_new") is None

    @pytest.mark.asyncio
    async def test_stream_failure_keeps_applied_events(self, seeded_store, make_partner):
        """A dropped stream is reported as a failure; earlier events stay applied."""

        async def dropping_stream():
            yield PartnerChangeEvent(kind=PartnerChangeKind.INSERT, partner=make_partner(id="p_new"))
            raise RemoteSyncConnectionError("stream dropped")

        result = await PartnerSyncService(seeded_store, _mock_client()).consume(dropping_stream())

        assert result.success_count == 1
        assert result.failure_count == 1
        assert isinstance(result.failed[0].error, RemoteSyncConnectionError)
        assert seeded_store.get_partner("p_new") is not None

    @pytest.mark.asyncio
    async def test_transport_error_is_wrapped(self, seeded_store):
        """Raw httpx errors from the stream become typed sync errors."""

        async def broken_stream():
            raise httpx.ReadTimeout("read timed out")
            yield

        result = await PartnerSyncService(seeded_store, _mock_client()).consume(broken_stream())

        assert result.success_count == 0
        assert isinstance(result.failed[0].error, RemoteSyncError)
