"""Tests for shared utilities."""

from datetime import datetime, timedelta

from sand_patterns.api.base.exceptions import ServiceError
from sand_patterns.utils.errors import create_error, error_from_service_error
from sand_patterns.utils.health import ComponentHealth, get_uptime, overall_status


class TestErrors:
    """Test HTTP error helpers."""

    def test_create_error(self):
        """Test error detail layout."""
        error = create_error(404, "Missing", {"id": "x"})
        assert error.status_code == 404
        assert error.detail == {"status": "error", "message": "Missing", "details": {"id": "x"}}

    def test_create_error_without_details(self):
        """Test details are omitted when empty."""
        assert create_error(500, "Boom").detail == {"status": "error", "message": "Boom"}

    def test_from_service_error(self):
        """Test service error context becomes error details."""
        error = error_from_service_error(422, ServiceError("Bad input", {"line": 3}))
        assert error.status_code == 422
        assert error.detail["message"] == "Bad input"
        assert error.detail["details"] == {"line": 3}


class TestHealth:
    """Test health helpers."""

    def test_uptime(self):
        """Test uptime counts from the start time."""
        assert get_uptime(None) == 0.0
        assert get_uptime(datetime.now() - timedelta(seconds=5)) >= 5.0

    def test_overall_status(self):
        """Test any failing component fails the service."""
        ok = ComponentHealth(status="ok")
        failed = ComponentHealth(status="error", error="down")
        assert overall_status(True, {"a": ok}) == "ok"
        assert overall_status(True, {"a": ok, "b": failed}) == "error"
        assert overall_status(False, {"a": ok}) == "error"
