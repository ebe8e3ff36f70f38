"""Cliente HTTP do contrato POST /api/decide.

Qualquer falha (transporte, status não-2xx, body sem `answer` válido)
vira `None`: para quem chama, "sem resposta disponível". Sem retries.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from app.domain.decision import Verdict

logger = logging.getLogger(__name__)

DECIDE_PATH = "/api/decide"


@dataclass(frozen=True)
class DecisionClientConfig:
    """Configuração do cliente."""

    base_url: str = "http://localhost:8080"
    timeout_seconds: float = 10.0


class DecisionClient:
    """Pergunta ao serviço e devolve o veredito (ou None)."""

    def __init__(
        self,
        config: DecisionClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or DecisionClientConfig()
        self._transport = transport

    async def ask(self, question: str) -> Verdict | None:
        """Envia a pergunta. Perguntas em branco não geram request."""
        if not question.strip():
            return None

        try:
            async with httpx.AsyncClient(
                base_url=self._config.base_url,
                transport=self._transport,
                timeout=self._config.timeout_seconds,
            ) as client:
                response = await client.post(DECIDE_PATH, json={"question": question})
        except httpx.HTTPError as exc:
            logger.warning(
                "decision_client_failed",
                extra={"reason": "transport_error", "error_type": type(exc).__name__},
            )
            return None

        if not response.is_success:
            logger.warning(
                "decision_client_failed",
                extra={"reason": "http_status", "status_code": response.status_code},
            )
            return None

        return _parse_answer(response)


def _parse_answer(response: httpx.Response) -> Verdict | None:
    try:
        payload = response.json()
    except ValueError:
        logger.warning("decision_client_failed", extra={"reason": "malformed_body"})
        return None

    answer = payload.get("answer") if isinstance(payload, dict) else None
    try:
        return Verdict(answer)
    except ValueError:
        logger.warning("decision_client_failed", extra={"reason": "invalid_answer"})
        return None
