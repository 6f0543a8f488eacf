"""Single Insight requests and URL building."""

import httpx
import pytest

from app.core.errors import ConfigurationError, UpstreamAPIError
from app.models.tokens import TokenKind
from app.services.insight_client import InsightClient

URL = "https://insight.test/v1/tokens/erc20/0xabc?chain=10143&metadata=true&limit=100&page=0"


def make_client(settings, handler) -> tuple[InsightClient, list[httpx.Request]]:
    seen: list[httpx.Request] = []

    def record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(record))
    return InsightClient(settings, http_client), seen


@pytest.mark.asyncio
async def test_appends_client_id_and_accept_header(settings):
    client, seen = make_client(settings, lambda r: httpx.Response(200, json={"data": [1]}))

    body = await client.fetch_single_request(URL)

    assert body == {"data": [1]}
    assert str(seen[0].url) == f"{URL}&clientId=test-client-id"
    assert seen[0].headers["Accept"] == "application/json"


@pytest.mark.asyncio
async def test_existing_client_id_is_not_duplicated(settings):
    client, seen = make_client(settings, lambda r: httpx.Response(200, json={"data": []}))

    await client.fetch_single_request(f"{URL}&clientId=other")

    assert str(seen[0].url).count("clientId=") == 1
    assert seen[0].url.params["clientId"] == "other"


@pytest.mark.asyncio
async def test_non_2xx_raises_with_status_and_body(settings):
    client, _ = make_client(settings, lambda r: httpx.Response(429, text="slow down"))

    with pytest.raises(UpstreamAPIError) as excinfo:
        await client.fetch_single_request(URL)

    assert excinfo.value.status_code == 429
    assert excinfo.value.body == "slow down"
    assert excinfo.value.message == "Thirdweb API error: 429 - slow down"


@pytest.mark.asyncio
async def test_missing_client_id_fails_before_any_request(settings):
    settings = settings.model_copy(update={"thirdweb_client_id": ""})
    client, seen = make_client(settings, lambda r: httpx.Response(200, json={}))

    with pytest.raises(ConfigurationError):
        await client.fetch_single_request(URL)

    assert seen == []


def test_erc20_url_includes_spam(settings):
    client = InsightClient(settings, httpx.AsyncClient())

    assert client.build_tokens_url(TokenKind.ERC20, "0xabc") == (
        "https://insight.test/v1/tokens/erc20/0xabc"
        "?chain=10143&metadata=true&include_spam=true&limit=100"
    )


@pytest.mark.parametrize("kind", [TokenKind.ERC721, TokenKind.ERC1155])
def test_nft_urls_exclude_spam(settings, kind):
    client = InsightClient(settings, httpx.AsyncClient())

    assert client.build_tokens_url(kind, "0xabc") == (
        f"https://insight.test/v1/tokens/{kind.value}/0xabc?chain=10143&metadata=true&limit=100"
    )


def test_address_is_escaped_in_path(settings):
    client = InsightClient(settings, httpx.AsyncClient())

    url = client.build_tokens_url(TokenKind.ERC20, "0xabc/../admin?x=1")

    assert "/tokens/erc20/0xabc%2F..%2Fadmin%3Fx%3D1?chain=" in url
