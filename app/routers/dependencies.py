"""Request-scoped dependencies resolved from ``app.state``."""

import secrets

from fastapi import Depends, Request
from fastapi.security.api_key import APIKeyHeader

from app.core.errors import UnauthorizedError
from app.services.insight_client import InsightClient
from config import Settings

API_KEY_HEADER = APIKeyHeader(name="X-API-Key", auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_insight_client(request: Request) -> InsightClient:
    return request.app.state.insight_client


async def require_api_key(
    api_key: str | None = Depends(API_KEY_HEADER),
    settings: Settings = Depends(get_settings),
) -> None:
    """Reject the request unless X-API-Key matches the protection key.

    An unset protection key rejects every request.
    """
    expected = settings.protection_api_key
    if not api_key or not expected or not secrets.compare_digest(
        api_key.encode(), expected.encode()
    ):
        raise UnauthorizedError()
