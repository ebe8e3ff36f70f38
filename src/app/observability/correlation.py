"""Correlation id de cada chamada a /api/decide.

O CorrelationIdMiddleware lê X-Correlation-ID (ou gera um UUID4), guarda
no ContextVar durante o request e devolve o mesmo valor no header da
resposta. Requests concorrentes não enxergam o valor um do outro.

Uso (o middleware já faz isso):
    token = set_correlation_id(headers.get("x-correlation-id"))
    try:
        ...
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

CORRELATION_ID_HEADER = "X-Correlation-ID"

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual ("" se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id; gera UUID4 quando ausente ou vazio."""
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o valor anterior ao set_correlation_id()."""
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    return str(uuid.uuid4())
