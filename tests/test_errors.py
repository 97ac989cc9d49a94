"""
Tests for the errors module.
"""

from partner_desk.errors import (
    ClientError,
    PartialSuccessResult,
    PartnerDeskError,
    ReconciliationError,
    RemoteSyncConnectionError,
    RemoteSyncError,
    RemoteSyncResponseError,
    StoreError,
    wrap_sync_error,
)


class TestErrorHierarchy:
    """Test error class hierarchy."""

    def test_base_error_with_context(self):
        """Test that base error captures context."""
        error = PartnerDeskError(
            "Something went wrong",
            context={"partner_id": "partner_1", "count": 42},
        )

        assert error.message == "Something went wrong"
        assert error.context == {"partner_id": "partner_1", "count": 42}
        assert "partner_id" in str(error)

    def test_base_error_without_context(self):
        """Test error without context."""
        error = PartnerDeskError("Simple error")

        assert error.message == "Simple error"
        assert error.context == {}
        assert str(error) == "Simple error"

    def test_store_error_inheritance(self):
        """Test store error hierarchy."""
        reconciliation = ReconciliationError("Bad event")

        assert isinstance(reconciliation, StoreError)
        assert isinstance(reconciliation, PartnerDeskError)

    def test_client_error_inheritance(self):
        """Test client error hierarchy."""
        connection = RemoteSyncConnectionError("Connection failed")
        response = RemoteSyncResponseError("HTTP 500")

        assert isinstance(connection, RemoteSyncError)
        assert isinstance(response, RemoteSyncError)
        assert isinstance(connection, ClientError)
        assert isinstance(response, PartnerDeskError)


class TestErrorWrapping:
    """Test error wrapping utilities."""

    def test_wrap_connection(self):
        """Test wrapping connection errors."""
        wrapped = wrap_sync_error(Exception("Unable to connect to host"))

        assert isinstance(wrapped, RemoteSyncConnectionError)
        assert wrapped.context["error_type"] == "Exception"

    def test_wrap_timeout(self):
        """Test wrapping timeouts."""
        wrapped = wrap_sync_error(Exception("Read timed out"))
        assert isinstance(wrapped, RemoteSyncConnectionError)

    def test_wrap_response(self):
        """Test wrapping bad responses."""
        wrapped = wrap_sync_error(Exception("Invalid chunked encoding"))
        assert isinstance(wrapped, RemoteSyncResponseError)

    def test_wrap_generic_keeps_context(self):
        """Test wrapping generic errors."""
        wrapped = wrap_sync_error(Exception("Something odd"), context={"path": "/partners"})

        assert type(wrapped) is RemoteSyncError
        assert wrapped.context["path"] == "/partners"
        assert wrapped.context["original_error"] == "Something odd"

    def test_already_typed_passes_through(self):
        """Errors already in the hierarchy are returned unchanged."""
        original = RemoteSyncResponseError("HTTP 502")
        assert wrap_sync_error(original) is original


class TestPartialSuccessResult:
    """Test partial success handling."""

    def test_empty_result(self):
        """Test empty partial success result."""
        result = PartialSuccessResult()

        assert result.success_count == 0
        assert result.failure_count == 0
        assert result.total_count == 0
        assert result.all_succeeded is True  # Vacuously true
        assert result.all_failed is True  # Vacuously true
        assert result.partial_success is False

    def test_all_failure(self):
        """Test all items failing."""
        result = PartialSuccessResult()
        result.add_failure(ReconciliationError("No payload"), item_id="p1")
        result.add_failure(ReconciliationError("No id"))

        assert result.success_count == 0
        assert result.failure_count == 2
        assert result.all_failed is True
        assert result.partial_success is False

    def test_partial_success(self):
        """Test partial success scenario."""
        result = PartialSuccessResult()
        result.add_success(item_id="p1")
        result.add_failure(ReconciliationError("Failed"), item_id="p2")
        result.add_success(item_id="p3")

        assert result.success_count == 2
        assert result.failure_count == 1
        assert result.total_count == 3
        assert result.partial_success is True

    def test_to_dict(self):
        """Test dictionary serialization."""
        result = PartialSuccessResult()
        result.add_success(item_id="p1", data={"kind": "update"})
        result.add_failure(ReconciliationError("Bad event"), item_id="p2")

        data = result.to_dict()

        assert data["success_count"] == 1
        assert data["failure_count"] == 1
        assert data["all_succeeded"] is False
        assert data["succeeded_ids"] == ["p1"]
        assert data["failed_ids"] == ["p2"]
        assert data["errors"] == [{"item_id": "p2", "error": "Bad event"}]
