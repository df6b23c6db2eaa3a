"""
Scope Sentry API tests. Exercise POST /api/analyze end to end against a
stubbed provider.
"""

import json

import openai
import httpx
import pytest

import config
from conftest import SAMPLE_SOW, WELL_FORMED_RESULT

PARSE_ERROR = {"error": "Failed to parse analysis results."}
RATE_LIMIT_ERROR = {"error": "Rate limit exceeded. Please try again later or check your API quota."}
PROVIDER_ERROR = {"error": "Failed to analyze contract. Please try again."}


# ==================== HEALTH ====================

def test_health_check(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "online"


# ==================== SUCCESS ====================

def test_analyze_round_trip(client, provider):
    resp = client.post("/api/analyze", json={"text": SAMPLE_SOW})
    assert resp.status_code == 200
    assert resp.json() == WELL_FORMED_RESULT
    assert len(provider.calls) == 1
    assert SAMPLE_SOW in provider.calls[0]["messages"][-1]["content"]


def test_analyze_no_flags(client, provider):
    provider.content = json.dumps({"score": 0, "label": "Low Risk", "flags": []})
    resp = client.post("/api/analyze", json={"text": "hello there"})
    assert resp.status_code == 200
    assert resp.json() == {"score": 0, "label": "Low Risk", "flags": []}


def test_analyze_mock_mode(client, provider, monkeypatch):
    monkeypatch.setattr(config, "MOCK_MODE", True)
    monkeypatch.delenv("OPENAI_API_KEY")
    resp = client.post("/api/analyze", json={"text": SAMPLE_SOW})
    assert resp.status_code == 200
    data = resp.json()
    assert data["flags"]
    assert provider.calls == []


# ==================== INVALID INPUT ====================

@pytest.mark.parametrize("body", [{"text": ""}, {"text": "   \n  "}, {}, {"contract_text": "SOW"}])
def test_missing_or_empty_text(client, provider, body):
    resp = client.post("/api/analyze", json=body)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Contract text is required."}
    assert provider.calls == []


def test_wrong_type_text(client, provider):
    resp = client.post("/api/analyze", json={"text": 42})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Contract text must be a string."}
    assert provider.calls == []


def test_non_object_body(client, provider):
    resp = client.post("/api/analyze", json=["text"])
    assert resp.status_code == 400
    assert resp.json() == {"error": "Request body must be a JSON object."}


def test_invalid_json_payload(client, provider):
    resp = client.post(
        "/api/analyze",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"error": "Request body must be valid JSON."}
    assert provider.calls == []


# ==================== PROVIDER FAILURES ====================

def test_missing_credential(client, provider, monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY")
    resp = client.post("/api/analyze", json={"text": SAMPLE_SOW})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Provider credential is not configured."}
    assert provider.clients == []
    assert provider.calls == []


def test_resource_exhausted(client, provider):
    provider.error = ValueError("400 RESOURCE_EXHAUSTED: out of tokens")
    resp = client.post("/api/analyze", json={"text": SAMPLE_SOW})
    assert resp.status_code == 429
    assert resp.json() == RATE_LIMIT_ERROR


def test_openai_rate_limit(client, provider):
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    response = httpx.Response(429, request=request)
    provider.error = openai.RateLimitError("Slow down", response=response, body=None)
    resp = client.post("/api/analyze", json={"text": SAMPLE_SOW})
    assert resp.status_code == 429
    assert resp.json() == RATE_LIMIT_ERROR


def test_provider_failure_hides_detail(client, provider):
    provider.error = ConnectionError("dial tcp 10.0.0.7:443: connection refused")
    resp = client.post("/api/analyze", json={"text": SAMPLE_SOW})
    assert resp.status_code == 500
    assert resp.json() == PROVIDER_ERROR
    assert "10.0.0.7" not in resp.text


# ==================== MALFORMED OUTPUT ====================

def test_non_json_output(client, provider):
    provider.content = "Here are the risks I found: unlimited revisions."
    resp = client.post("/api/analyze", json={"text": SAMPLE_SOW})
    assert resp.status_code == 500
    assert resp.json() == PARSE_ERROR


@pytest.mark.parametrize("content", [
    '{"score": ' + "9" * 5000 + ', "label": "Critical Risk", "flags": []}',
    "[" * 100000 + "]" * 100000,
])
def test_undecodable_output(client, provider, content):
    provider.content = content
    resp = client.post("/api/analyze", json={"text": SAMPLE_SOW})
    assert resp.status_code == 500
    assert resp.json() == PARSE_ERROR


@pytest.mark.parametrize("overrides", [
    {"score": 101},
    {"label": "Extreme Risk"},
    {"flags": [WELL_FORMED_RESULT["flags"][0]] * 9},
])
def test_schema_violations(client, provider, overrides):
    provider.content = json.dumps({**WELL_FORMED_RESULT, **overrides})
    resp = client.post("/api/analyze", json={"text": SAMPLE_SOW})
    assert resp.status_code == 500
    assert resp.json() == PARSE_ERROR


def test_label_drift_rejected(client, provider):
    provider.content = json.dumps({**WELL_FORMED_RESULT, "label": "Critical Risk"})
    resp = client.post("/api/analyze", json={"text": SAMPLE_SOW})
    assert resp.status_code == 500
    assert resp.json() == PARSE_ERROR


# ==================== UNEXPECTED FAILURES ====================

def test_unhandled_error_returns_generic_500(provider, monkeypatch):
    from fastapi.testclient import TestClient

    from main import app

    def explode(payload):
        raise RuntimeError("internal state dump: sk-secret")

    monkeypatch.setattr("routers.analyzers.analyze_contract", explode)
    client = TestClient(app, raise_server_exceptions=False)

    resp = client.post("/api/analyze", json={"text": SAMPLE_SOW})
    assert resp.status_code == 500
    assert resp.json() == PROVIDER_ERROR
    assert "sk-secret" not in resp.text


# ==================== OPENAPI ====================

def test_openapi_documents_request_body(client):
    operation = client.get("/openapi.json").json()["paths"]["/api/analyze"]["post"]
    body = operation["requestBody"]
    assert body["required"] is True
    schema = body["content"]["application/json"]["schema"]
    assert schema["properties"]["text"]["type"] == "string"
    assert schema["required"] == ["text"]
    assert {"200", "400", "429", "500"} <= set(operation["responses"])
