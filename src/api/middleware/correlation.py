"""Middleware ASGI que abre o escopo de correlation_id por request.

Lê `X-Correlation-ID` (ou gera UUID4), publica no ContextVar durante a
request e devolve o mesmo valor no header da resposta.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.datastructures import Headers, MutableHeaders

from app.observability import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Message, Receive, Scope, Send

# Limite para não propagar headers arbitrariamente grandes aos logs
MAX_CORRELATION_ID_LENGTH = 128


class CorrelationIdMiddleware:
    """Injeta correlation_id em requests HTTP."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        incoming = Headers(scope=scope).get(CORRELATION_ID_HEADER, "").strip()
        token = set_correlation_id(incoming[:MAX_CORRELATION_ID_LENGTH] or None)
        correlation_id = get_correlation_id()

        async def send_with_header(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                headers[CORRELATION_ID_HEADER] = correlation_id
            await send(message)

        try:
            await self.app(scope, receive, send_with_header)
        finally:
            reset_correlation_id(token)
