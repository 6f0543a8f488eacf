"""CORS handling.

Preflight requests are answered here without authentication; every other
response gets the same permissive CORS headers attached.

Starlette's CORSMiddleware is not used: it only short-circuits OPTIONS that
carry Origin and Access-Control-Request-Method, and answers with a body.
"""

from fastapi import FastAPI, Request, Response, status

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, X-API-Key",
    "Access-Control-Max-Age": "86400",
}


def register_cors(app: FastAPI) -> None:
    """Install the CORS middleware on ``app``."""

    @app.middleware("http")
    async def apply_cors_headers(request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=status.HTTP_204_NO_CONTENT, headers=CORS_HEADERS)
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response
