"""Tests for sync webhook bearer token authentication."""

import pytest
from unittest.mock import patch, MagicMock
from fastapi import HTTPException

from partner_desk.api.auth import verify_sync_token


class TestBearerAuth:
    @pytest.mark.asyncio
    async def test_valid_token_passes(self):
        mock_settings = MagicMock()
        mock_settings.SYNC_WEBHOOK_KEY = "test-secret-key"

        with patch("partner_desk.api.auth.get_settings", return_value=mock_settings):
            await verify_sync_token(authorization="Bearer test-secret-key")

    @pytest.mark.asyncio
    async def test_invalid_token_raises_401(self):
        mock_settings = MagicMock()
        mock_settings.SYNC_WEBHOOK_KEY = "test-secret-key"

        with patch("partner_desk.api.auth.get_settings", return_value=mock_settings):
            with pytest.raises(HTTPException) as exc_info:
                await verify_sync_token(authorization="Bearer wrong-key")
            assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_missing_bearer_prefix_raises_401(self):
        mock_settings = MagicMock()
        mock_settings.SYNC_WEBHOOK_KEY = "test-secret-key"

        with patch("partner_desk.api.auth.get_settings", return_value=mock_settings):
            with pytest.raises(HTTPException) as exc_info:
                await verify_sync_token(authorization="test-secret-key")
            assert exc_info.value.status_code == 401
