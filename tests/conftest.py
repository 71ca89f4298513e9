from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from config.settings import Settings
from gateway.gateway import AdviceGateway
from gateway.provider import ConversationProvider


ANALYSIS = {
    "score": 8,
    "strengths": ["Resilience", "Resourcefulness", "Networking"],
    "areasForDevelopment": ["Bookkeeping", "Delegation", "Long-term planning"],
    "advice": "Keep separate accounts for the shop and the household.",
    "resources": ["Udyam registration", "Local SHG meetings"],
}


class StubHandle:
    def __init__(self, number: int) -> None:
        self.number = number
        self.turns = 0


class StubProvider(ConversationProvider):
    name = "stub"

    def __init__(self, reply: str = "Stub advice", generated: str = json.dumps(ANALYSIS), fail: bool = False):
        self.reply = reply
        self.generated = generated
        self.fail = fail
        self.started = []
        self.sent = []
        self.prompts = []

    def start(self):
        handle = StubHandle(len(self.started) + 1)
        self.started.append(handle)
        return handle

    def send(self, handle, text):
        if self.fail:
            raise RuntimeError("quota exceeded")
        handle.turns += 1
        self.sent.append((handle, text))
        return self.reply, handle

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self.fail:
            raise RuntimeError("network unreachable")
        return self.generated


@pytest.fixture
def settings(monkeypatch):
    for name in ("GEMINI_API_KEY", "CORS_ORIGIN", "APP_ENV", "NODE_ENV"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("GEMINI_PROBE_ON_STARTUP", "false")
    return Settings()


@pytest.fixture
def provider():
    return StubProvider()


@pytest.fixture
def gateway(provider):
    return AdviceGateway(provider=provider)


@pytest.fixture
def offline_gateway():
    return AdviceGateway()


@pytest.fixture
def client(settings, gateway):
    return TestClient(create_app(settings, gateway))


@pytest.fixture
def offline_client(settings, offline_gateway):
    return TestClient(create_app(settings, offline_gateway))
