"""Global error handlers: every failure becomes a JSON error envelope."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.errors import TokenProxyError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register the global error handlers on the FastAPI app."""

    @app.exception_handler(TokenProxyError)
    async def token_proxy_error_handler(request: Request, exc: TokenProxyError):
        log = logger.warning if exc.http_status == 401 else logger.error
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "path": request.url.path,
                "method": request.method,
                "status_code": exc.http_status,
            },
        )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())
