"""Shared test fixtures."""

import time

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from hookgate.config import Settings
from hookgate.services.forwarder import Forwarder
from hookgate.services.signature import sign

SECRET = "shh"
GAS_URL = "https://script.example.test/macros/s/abc/exec"


class Downstream:
    """Records forwarded requests and answers with a fixed status."""

    def __init__(self, status_code: int = 200):
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text="downstream body")

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


def make_settings(**overrides) -> Settings:
    values = {"webhook_secret": SECRET, "gas_url": GAS_URL}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def signed_headers(body: bytes, secret: str = SECRET, timestamp: str | None = None) -> dict[str, str]:
    timestamp = timestamp or str(int(time.time()))
    return {
        "content-type": "application/json",
        "x-zm-request-timestamp": timestamp,
        "x-zm-signature": sign(secret, timestamp, body),
    }


@pytest.fixture
def downstream():
    return Downstream()


@pytest.fixture
def config() -> Settings:
    return make_settings()


@pytest.fixture
def app(config, downstream):
    """Create a test application bound to the fake downstream."""
    from hookgate.main import create_app

    forwarder = Forwarder(config.gas_url, transport=downstream.transport)
    return create_app(config, forwarder=forwarder)


@pytest.fixture
async def client(app):
    """Async HTTP test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
