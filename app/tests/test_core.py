"""
Core Tests

Error payloads, trace id propagation into log records, and settings.

Run: pytest app/tests/test_core.py -v
"""

import contextvars
import logging

import pytest

from app.core.config import get_settings, is_development, is_production
from app.core.errors import (
    AppError,
    InternalError,
    NotFoundError,
    ValidationError,
    error_payload,
    to_http_exception,
)
from app.core.logging import TraceIdFilter, get_trace_id, set_trace_id


# ==================== Errors ====================

def test_error_codes_and_status():
    assert NotFoundError().status_code == 404
    assert NotFoundError().code == "not_found"
    assert ValidationError().status_code == 400
    assert InternalError().code == "internal_error"


def test_default_code_from_class_name():
    class LoadBoardTimeoutError(AppError):
        pass

    assert LoadBoardTimeoutError("slow").code == "load_board_timeout"


def test_error_payload_omits_empty_fields():
    assert error_payload("not_found", "Truck not found") == {"code": "not_found", "message": "Truck not found"}

    payload = error_payload("not_found", "Truck not found", {"truck_id": "t1"}, trace_id="abc")
    assert payload["details"] == {"truck_id": "t1"}
    assert payload["trace_id"] == "abc"


def test_to_http_exception_outside_request():
    exc = to_http_exception(NotFoundError("Completed load not found", details={"load_id": "L1"}))

    assert exc.status_code == 404
    assert exc.detail == {
        "code": "not_found",
        "message": "Completed load not found",
        "details": {"load_id": "L1"},
    }


def test_to_http_exception_carries_trace_id():
    def convert():
        set_trace_id("trace-123")
        return to_http_exception(ValidationError("No trucks found for market analysis"))

    exc = contextvars.copy_context().run(convert)

    assert exc.status_code == 400
    assert exc.detail["trace_id"] == "trace-123"


# ==================== Logging ====================

def test_trace_id_filter_stamps_records():
    record = logging.LogRecord("app.test", logging.INFO, __file__, 1, "scoring", None, None)

    def stamp():
        set_trace_id("req-42")
        TraceIdFilter().filter(record)

    contextvars.copy_context().run(stamp)

    assert record.trace_id == "req-42"


def test_trace_id_default_outside_request():
    assert contextvars.Context().run(get_trace_id) == "-"


# ==================== Config ====================

def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("FLEET_SERVICE_URL", "http://fleet.internal:8080")
    monkeypatch.setenv("WEEKLY_STANDARD_MILES", "2500")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")

    settings = get_settings()

    assert settings.FLEET_SERVICE_URL == "http://fleet.internal:8080"
    assert settings.WEEKLY_STANDARD_MILES == 2500.0
    assert settings.CORS_ORIGINS == ["http://a.test", "http://b.test"]


@pytest.mark.parametrize("env, production, development", [
    ("production", True, False),
    ("prod", True, False),
    ("dev", False, True),
    ("staging", False, False),
])
def test_environment_helpers(monkeypatch, env, production, development):
    monkeypatch.setenv("APP_ENV", env)

    assert is_production() is production
    assert is_development() is development


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
