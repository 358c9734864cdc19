"""
tests.api.test_error_envelope

Purpose:
    API regression tests for the error envelope contract.

Covers:
    - Generic runtime errors (500, ERROR)
    - Opaque failures (500, UNKNOWN_ERROR, localized message)
    - Structured HTTP errors (status + payload passthrough)
    - Validation failures (422, HTTP_EXCEPTION)
    - Envelope shape: exactly five fields, ISO-8601 timestamp
"""

from __future__ import annotations

from datetime import datetime

ENVELOPE_KEYS = {"code", "message", "correlationId", "timestamp", "path"}


def test_generic_error_on_api_path(client) -> None:
    r = client.get("/api/boom")
    assert r.status_code == 500, r.text

    data = r.json()
    assert set(data) == ENVELOPE_KEYS
    assert data["code"] == "ERROR"
    assert data["message"] == "database unreachable"
    assert data["correlationId"]
    assert data["correlationId"] != "unknown"
    assert data["path"] == "/api/boom"


def test_timestamp_is_iso8601_utc(client) -> None:
    data = client.get("/api/boom").json()
    assert data["timestamp"].endswith("Z")
    parsed = datetime.fromisoformat(data["timestamp"].replace("Z", "+00:00"))
    assert parsed.utcoffset().total_seconds() == 0


def test_opaque_failure_is_unknown_error(client) -> None:
    r = client.get("/api/opaque")
    assert r.status_code == 500

    data = r.json()
    assert data["code"] == "UNKNOWN_ERROR"
    assert data["message"] == "Internal server error"


def test_opaque_failure_message_follows_accept_language(client) -> None:
    r = client.get("/api/opaque", headers={"Accept-Language": "fr-FR,fr;q=0.9,en;q=0.5"})
    assert r.status_code == 500
    assert r.json()["message"] == "Erreur interne du serveur"


def test_opaque_failure_message_follows_lang_query(client) -> None:
    r = client.get("/api/opaque", params={"lang": "es"})
    assert r.json()["message"] == "Error interno del servidor"


def test_unsupported_locale_falls_back_to_default(client) -> None:
    r = client.get("/api/opaque", headers={"Accept-Language": "de-DE"})
    assert r.json()["message"] == "Internal server error"


def test_structured_http_error_payload_passthrough(client) -> None:
    r = client.get("/api/teapot")
    assert r.status_code == 418

    data = r.json()
    assert set(data) == ENVELOPE_KEYS
    assert data["code"] == "TEAPOT"
    assert data["message"] == "short and stout"


def test_structured_http_error_defaults_code(client) -> None:
    r = client.get("/api/forbidden")
    assert r.status_code == 403

    data = r.json()
    assert data["code"] == "HTTP_EXCEPTION"
    assert data["message"] == "Forbidden"


def test_api_not_found_keeps_custom_code(deployed_frontend, client) -> None:
    r = client.get("/api/orders/7")
    assert r.status_code == 404

    data = r.json()
    assert data["code"] == "ORDER_NOT_FOUND"
    assert data["message"] == "Order 7 not found"
    assert "app shell" not in r.text


def test_validation_error_envelope(client) -> None:
    r = client.get("/api/items", params={"limit": "lots"})
    assert r.status_code == 422, r.text

    data = r.json()
    assert set(data) == ENVELOPE_KEYS
    assert data["code"] == "HTTP_EXCEPTION"
    assert data["message"].startswith("limit:")


def test_validation_missing_field_message(client) -> None:
    r = client.get("/api/items")
    assert r.status_code == 422
    assert r.json()["message"] == "Missing required field: limit."


def test_wrong_method_on_api_route_is_api_404(client) -> None:
    r = client.post("/api/health")
    assert r.status_code == 404

    data = r.json()
    assert set(data) == ENVELOPE_KEYS
    assert data["code"] == "HTTP_EXCEPTION"
    assert data["message"] == "Cannot POST /api/health"
