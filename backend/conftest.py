"""
Pytest fixtures for Scope Sentry. The OpenAI client is replaced with a stub
that records every call, so no test ever reaches the network.
"""

import json
from types import SimpleNamespace

import pytest

import config
from services import llm


WELL_FORMED_RESULT = {
    "score": 45,
    "label": "Moderate Risk",
    "flags": [
        {
            "title": "Vague Revision Count",
            "description": 'The contract allows a "reasonable number of revisions" without defining a limit.',
            "severity": "high",
            "fix": 'Replace with: "The project includes up to 3 rounds of revisions."',
        }
    ],
}

SAMPLE_SOW = """STATEMENT OF WORK

Client: Acme Corp
Contractor: Jane Doe Design

Deliverables: website redesign and all necessary assets and related materials.
Revisions: Contractor will provide a reasonable number of revisions.
Payment: $5,000 upon completion.
"""


class StubProvider:
    """Stands in for openai.OpenAI; every instance shares this recorder."""

    def __init__(self):
        self.calls = []
        self.clients = []
        self.content = json.dumps(WELL_FORMED_RESULT)
        self.error = None

    def factory(self, **kwargs):
        self.clients.append(kwargs)
        completions = SimpleNamespace(create=self._create)
        return SimpleNamespace(api_key=kwargs.get("api_key"), chat=SimpleNamespace(completions=completions))

    def _create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def provider(monkeypatch):
    """Configured credential, real-provider mode, stubbed OpenAI client."""
    stub = StubProvider()
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setattr(config, "MOCK_MODE", False)
    monkeypatch.setattr(config, "STRICT_LABEL_BANDING", True)
    monkeypatch.setattr(llm, "_client", None)
    monkeypatch.setattr(llm, "_client_key", None)
    monkeypatch.setattr(llm, "OpenAI", stub.factory)
    return stub


@pytest.fixture
def client(provider):
    """FastAPI TestClient. Depends on provider so the stub is in place before requests run."""
    from fastapi.testclient import TestClient

    from main import app

    return TestClient(app)
