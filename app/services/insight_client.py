"""thirdweb Insight API client.

One ``InsightClient`` wraps the application's shared ``httpx.AsyncClient``
and issues single GET requests against the Insight token endpoints.
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from app.core.errors import ConfigurationError, UpstreamAPIError
from app.models.tokens import TokenKind
from config import Settings

logger = logging.getLogger(__name__)


class InsightClient:
    """Thin async wrapper around the Insight REST API."""

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient):
        self.settings = settings
        self.http_client = http_client

    @property
    def client_id(self) -> str:
        return self.settings.thirdweb_client_id

    def build_tokens_url(self, kind: TokenKind, address: str) -> str:
        """Build the page-less query URL for one owner address.

        The page number and client id are appended later, per request.
        """
        url = (
            f"{self.settings.insight_base_url}/tokens/{kind.value}/{quote(address, safe='')}"
            f"?chain={self.settings.chain_id}&metadata=true"
        )
        if kind.includes_spam:
            url += "&include_spam=true"
        return f"{url}&limit={self.settings.page_limit}"

    async def fetch_single_request(self, url: str) -> Any:
        """GET ``url`` and return the decoded JSON body.

        Raises:
            ConfigurationError: no client id is configured.
            UpstreamAPIError: Insight answered with a non-2xx status.
        """
        if not self.client_id:
            raise ConfigurationError("THIRDWEB_CLIENT_ID is not configured")

        final_url = url if "clientId=" in url else f"{url}&clientId={self.client_id}"
        logger.debug(f"Making request to: {final_url}")

        response = await self.http_client.get(
            final_url, headers={"Accept": "application/json"}
        )

        if not response.is_success:
            error_text = response.text
            logger.error(
                "Thirdweb API Error",
                extra={
                    "status_code": response.status_code,
                    "reason": response.reason_phrase,
                    "body": error_text,
                    "url": final_url,
                },
            )
            raise UpstreamAPIError(response.status_code, error_text)

        return response.json()
