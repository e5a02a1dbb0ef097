"""
Unit tests for NotaireClient using httpx.MockTransport.
"""

import json

import httpx
import pytest

from notaire.client import ApiError, NotaireClient, TransportError


def _client(handler, **kwargs) -> NotaireClient:
    return NotaireClient(
        "http://notaire.test/", transport=httpx.MockTransport(handler), **kwargs
    )


def test_verify_signature_posts_body():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(
            200,
            json={
                "isValid": True,
                "signer": "0xA",
                "originalMessage": "hi",
                "timestamp": "2024-01-01T00:00:00.000Z",
            },
        )

    with _client(handler) as client:
        result = client.verify_signature("hi", "0x01")

    assert seen["url"] == "http://notaire.test/api/verify-signature"
    assert seen["body"] == {"message": "hi", "signature": "0x01"}
    assert result["isValid"] is True


def test_failed_verification_is_a_normal_result():
    def handler(request):
        return httpx.Response(
            200,
            json={
                "isValid": False,
                "signer": None,
                "originalMessage": "hi",
                "error": "Invalid signature or message",
            },
        )

    with _client(handler) as client:
        result = client.verify_signature("hi", "0xinvalidsignature")

    assert result["isValid"] is False
    assert result["error"] == "Invalid signature or message"


def test_error_envelope_raises_api_error():
    def handler(request):
        return httpx.Response(
            400, json={"error": "VALIDATION_ERROR", "message": "Signature is required"}
        )

    with _client(handler) as client:
        with pytest.raises(ApiError) as exc_info:
            client.verify_signature("test", "")

    assert exc_info.value.status == 400
    assert exc_info.value.code == "VALIDATION_ERROR"
    assert exc_info.value.message == "Signature is required"


def test_non_json_error_body():
    def handler(request):
        return httpx.Response(502, text="Bad Gateway")

    with _client(handler) as client:
        with pytest.raises(ApiError) as exc_info:
            client.health()

    assert exc_info.value.status == 502
    assert exc_info.value.code == "HTTP_ERROR"


def test_connection_failure_raises_transport_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with _client(handler) as client:
        with pytest.raises(TransportError):
            client.verify_signature("hi", "0x01")


def test_timeout_raises_transport_error():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with _client(handler) as client:
        with pytest.raises(TransportError, match="timed out"):
            client.health()


def test_token_sent_as_bearer_header():
    seen = {}

    def handler(request):
        seen["auth"] = request.headers.get("Authorization")
        return httpx.Response(200, json={"items": [], "count": 0})

    with _client(handler, token="abc") as client:
        assert client.get_history(limit=5) == []

    assert seen["auth"] == "Bearer abc"


def test_clear_history_returns_removed_count():
    def handler(request):
        assert request.method == "DELETE"
        return httpx.Response(200, json={"removed": 3})

    with _client(handler) as client:
        assert client.clear_history() == 3
