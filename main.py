"""Nad Balance Service - FastAPI Application Entry Point

An edge proxy in front of the thirdweb Insight API: returns ERC20, ERC721
and ERC1155 holdings for an address on Monad testnet and flags holders of
the 1 Million Nads collection.
"""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from app import __version__
from app.middleware import register_cors
from app.routers import tokens
from app.routers.error_handlers import register_error_handlers
from app.services.insight_client import InsightClient
from app.utils.observability import setup_logging
from config import Settings, settings

logger = logging.getLogger("nad_balance")


def create_app(
    settings: Settings, http_client: httpx.AsyncClient | None = None,
) -> FastAPI:
    """Build the application around an explicit settings object.

    Args:
        settings: Configuration for this instance.
        http_client: Client for Insight requests. When omitted, one is
            created on startup and closed on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager for startup and shutdown events."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info(f"Environment: {settings.environment}")
        logger.info(f"Log Level: {settings.log_level}")
        if not settings.protection_api_key:
            logger.warning("PROTECTION_API_KEY is not set; every request will be rejected.")
        if not settings.thirdweb_client_id:
            logger.warning("THIRDWEB_CLIENT_ID is not set; token endpoints will fail.")

        owned_client = http_client is None
        client = http_client or httpx.AsyncClient(timeout=settings.upstream_timeout_seconds)
        app.state.insight_client = InsightClient(settings, client)
        logger.info("Starting Nad Balance Service", extra={"port": settings.port})

        yield

        logger.info("Shutting down Nad Balance Service")
        if owned_client:
            await client.aclose()

    app = FastAPI(
        title="Nad Balance Service",
        description="Token balance proxy for the thirdweb Insight API",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings

    register_cors(app)
    register_error_handlers(app)
    app.include_router(tokens.router)
    return app


app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=settings.port)
