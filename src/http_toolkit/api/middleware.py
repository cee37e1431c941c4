from __future__ import annotations

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from http_toolkit.api.errors import server_error

access_logger = logging.getLogger("http_toolkit.access")


def get_client_ip(request: Request) -> str:
    """
    First address of X-Forwarded-For when a proxy set it, otherwise the
    address of the immediate peer (which may itself be a proxy).
    """
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    if request.client is None:
        return ""
    return request.client.host


class LogRequestMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        access_logger.info(
            "%s - HTTP/%s %s %s",
            get_client_ip(request),
            request.scope.get("http_version", "1.1"),
            request.method,
            target,
        )
        return await call_next(request)


class RecoverPanicMiddleware(BaseHTTPMiddleware):
    """Turns an exception escaping the app into a 500 and closes the connection."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            response = server_error(exc)
            response.headers["Connection"] = "close"
            return response
