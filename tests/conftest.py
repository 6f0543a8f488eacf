"""Shared fixtures: settings, a fake Insight API and an HTTP test client."""

import httpx
import pytest
from fastapi.testclient import TestClient

from config import NADS_CONTRACT_ADDRESS, Settings
from main import create_app

TEST_API_KEY = "test-protection-key"
TEST_CLIENT_ID = "test-client-id"
INSIGHT_BASE_URL = "https://insight.test/v1"


class FakeInsight:
    """Serves scripted pages per token kind.

    ``pages[kind]`` is a list indexed by page number; an int entry is
    returned as that HTTP status, a list as ``{"data": [...]}``. Pages past
    the end of the script are empty.
    """

    def __init__(self):
        self.pages: dict[str, list] = {}
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        kind = request.url.path.split("/")[3]
        page = int(request.url.params["page"])
        script = self.pages.get(kind, [])
        entry = script[page] if page < len(script) else []
        if isinstance(entry, int):
            return httpx.Response(entry, text="upstream failure")
        return httpx.Response(200, json={"data": entry})


def nad_record(address: str = NADS_CONTRACT_ADDRESS) -> dict:
    return {"contract": {"address": address}, "token_id": "7", "name": "Nad #7"}


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        environment="test",
        protection_api_key=TEST_API_KEY,
        thirdweb_client_id=TEST_CLIENT_ID,
        insight_base_url=INSIGHT_BASE_URL,
    )


@pytest.fixture
def upstream() -> FakeInsight:
    return FakeInsight()


@pytest.fixture
def make_client(upstream):
    """Build a TestClient for the given settings, backed by the fake upstream."""
    clients = []

    def _make(settings: Settings) -> TestClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(upstream.handler))
        test_client = TestClient(create_app(settings, http_client=http_client))
        test_client.__enter__()
        clients.append(test_client)
        return test_client

    yield _make
    for test_client in clients:
        test_client.__exit__(None, None, None)


@pytest.fixture
def client(make_client, settings) -> TestClient:
    return make_client(settings)


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"X-API-Key": TEST_API_KEY}
